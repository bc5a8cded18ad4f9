"""Single-source shortest paths over an adjacency matrix (Dijkstra)."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence


def _check_square(graph: Sequence[Sequence[int]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> list[float]:
    """Distances from ``source``; a zero entry means no edge, ``math.inf`` means unreachable."""
    size = _check_square(graph)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is out of range")
    distances: list[float] = [math.inf] * size
    distances[source] = 0
    done = [False] * size

    for _ in range(size):
        pending = [v for v in range(size) if not done[v]]
        u = min(pending, key=distances.__getitem__)
        if distances[u] == math.inf:
            break
        done[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not done[v] and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
    return distances


def format_distances(distances: Sequence[float]) -> str:
    """A table of vertex and distance, unreachable vertices shown as INF."""
    lines = ["Vertex\tDistance from Source"]
    for vertex, distance in enumerate(distances):
        shown = "INF" if distance == math.inf else str(distance)
        lines.append(f"{vertex}\t{shown}")
    return "\n".join(lines)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read a matrix and a source from standard input and print the distances."""
    parser = argparse.ArgumentParser(description="Dijkstra shortest paths.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of vertices: ", end="", flush=True)
        size = _next_int(tokens)
        if size < 0:
            raise ValueError("vertex count must not be negative")
        print("Enter the adjacency matrix:", flush=True)
        graph = [[_next_int(tokens) for _ in range(size)] for _ in range(size)]
        print("Enter source vertex: ", end="", flush=True)
        source = _next_int(tokens)
        distances = dijkstra(graph, source)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_distances(distances))
    return 0