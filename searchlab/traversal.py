"""Breadth-first and depth-first traversal of undirected graphs from vertex 0."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence


def build_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Adjacency lists of an undirected graph, neighbours in edge order."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def bfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Vertices reachable from 0 in breadth-first order."""
    if not adjacency:
        return []
    order = []
    visited = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Vertices reachable from 0 in depth-first order, using an explicit stack."""
    if not adjacency:
        return []
    order = []
    visited: set[int] = set()
    stack = [0]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        stack.extend(n for n in reversed(adjacency[node]) if n not in visited)
    return order


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _run(
    argv: Sequence[str] | None,
    traverse: Callable[[Sequence[Sequence[int]]], list[int]],
    description: str,
    label: str,
) -> int:
    parser = argparse.ArgumentParser(description=description)
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of vertices: ", end="", flush=True)
        vertex_count = _next_int(tokens)
        print("Enter number of edges: ", end="", flush=True)
        edge_count = _next_int(tokens)
        print("Enter edges (start_vertex end_vertex):", flush=True)
        edges = [(_next_int(tokens), _next_int(tokens)) for _ in range(edge_count)]
        adjacency = build_adjacency(vertex_count, edges)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"{label}: " + " ".join(map(str, traverse(adjacency))))
    return 0


def main_bfs(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its breadth-first order."""
    return _run(
        argv, bfs, "Breadth-first traversal from vertex 0.",
        "BFS Traversal starting from node 0",
    )


def main_dfs(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its depth-first order."""
    return _run(
        argv, dfs, "Depth-first traversal from vertex 0.",
        "DFS Traversal using Stack starting from node 0",
    )