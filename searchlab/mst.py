"""Minimum spanning trees over an adjacency matrix (Prim)."""

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


def prim_mst(graph: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Tree edges as (parent, vertex) for vertices 1..n-1, grown from vertex 0.

    A zero entry means no edge. Raises ValueError if the graph is not connected.
    """
    size = _check_square(graph)
    if size == 0:
        return []
    key: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size):
        pending = [v for v in range(size) if not in_tree[v]]
        u = min(pending, key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
    return [(parent[v], v) for v in range(1, size)]


def format_edges(graph: Sequence[Sequence[int]], edges: Sequence[tuple[int, int]]) -> str:
    """A table of tree edges with their weights."""
    lines = ["Edge \tWeight"]
    lines.extend(f"{parent} - {vertex}\t{graph[vertex][parent]}" for parent, vertex in edges)
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
    """Read an adjacency matrix from standard input and print its spanning tree."""
    parser = argparse.ArgumentParser(description="Prim minimum spanning tree.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of vertices: ", end="", flush=True)
        size = _next_int(tokens)
        if size < 0:
            raise ValueError("vertex count must not be negative")
        print("Enter the adjacency matrix (0 if no edge):", flush=True)
        graph = [[_next_int(tokens) for _ in range(size)] for _ in range(size)]
        edges = prim_mst(graph)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_edges(graph, edges))
    return 0