"""A* search for the 8-puzzle using the Manhattan distance heuristic."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from collections.abc import Iterator, Sequence

BLANK = -1
SIDE = 3
CELLS = SIDE * SIDE

State = tuple[int, ...]


def _positions(goal: Sequence[int]) -> dict[int, tuple[int, int]]:
    positions: dict[int, tuple[int, int]] = {}
    for index, tile in enumerate(goal):
        positions.setdefault(tile, divmod(index, SIDE))
    return positions


def _distance(state: Sequence[int], positions: dict[int, tuple[int, int]]) -> int:
    total = 0
    for index, tile in enumerate(state):
        if tile == BLANK or tile not in positions:
            continue
        row, col = divmod(index, SIDE)
        goal_row, goal_col = positions[tile]
        total += abs(row - goal_row) + abs(col - goal_col)
    return total


def manhattan_distance(current: Sequence[int], goal: Sequence[int]) -> int:
    """Sum of the grid distances of every tile from its place in ``goal``."""
    return _distance(current, _positions(goal))


def neighbors(state: Sequence[int]) -> list[State]:
    """States reachable by moving the blank up, down, left or right, in that order."""
    state = tuple(state)
    try:
        empty = state.index(BLANK)
    except ValueError:
        raise ValueError("state has no blank tile") from None
    row, col = divmod(empty, SIDE)
    targets = []
    if row > 0:
        targets.append(empty - SIDE)
    if row < SIDE - 1:
        targets.append(empty + SIDE)
    if col > 0:
        targets.append(empty - 1)
    if col < SIDE - 1:
        targets.append(empty + 1)

    result = []
    for target in targets:
        tiles = list(state)
        tiles[empty], tiles[target] = tiles[target], tiles[empty]
        result.append(tuple(tiles))
    return result


def _validate(start: State, goal: State) -> None:
    for name, state in (("start", start), ("goal", goal)):
        if len(state) != CELLS:
            raise ValueError(f"{name} state must have {CELLS} tiles, got {len(state)}")
        if state.count(BLANK) != 1:
            raise ValueError(f"{name} state must contain exactly one blank tile")
    if sorted(start) != sorted(goal):
        raise ValueError("start and goal states must hold the same tiles")


def solve(start: Sequence[int], goal: Sequence[int]) -> list[State] | None:
    """Return the states from ``start`` to ``goal`` on a shortest path, or None."""
    start, goal = tuple(start), tuple(goal)
    _validate(start, goal)
    positions = _positions(goal)

    order = itertools.count()
    frontier = [(_distance(start, positions), 0, next(order), start)]
    parents: dict[State, State | None] = {start: None}
    best_cost = {start: 0}
    closed: set[State] = set()

    while frontier:
        _, cost, _, state = heapq.heappop(frontier)
        if state in closed:
            continue
        if state == goal:
            path = []
            step: State | None = state
            while step is not None:
                path.append(step)
                step = parents[step]
            path.reverse()
            return path
        closed.add(state)
        for following in neighbors(state):
            new_cost = cost + 1
            if following in closed or new_cost >= best_cost.get(following, new_cost + 1):
                continue
            best_cost[following] = new_cost
            parents[following] = state
            priority = new_cost + _distance(following, positions)
            heapq.heappush(frontier, (priority, new_cost, next(order), following))
    return None


def format_state(state: Sequence[int]) -> str:
    """Render a state as three rows, with ``_`` for the blank."""
    cells = ["_" if tile == BLANK else str(tile) for tile in state]
    return "\n".join(" ".join(cells[row:row + SIDE]) for row in range(0, len(cells), SIDE))


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_state(tokens: Iterator[str]) -> list[int]:
    values = list(itertools.islice(tokens, CELLS))
    if len(values) < CELLS:
        raise ValueError("unexpected end of input")
    return [int(value) for value in values]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a start and a goal state from standard input and print the solution."""
    parser = argparse.ArgumentParser(description="Solve an 8-puzzle with A* search.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter Start State (Use -1 for empty tile):", flush=True)
        start = _read_state(tokens)
        print("Enter Goal State (Use -1 for empty tile):", flush=True)
        goal = _read_state(tokens)
        path = solve(start, goal)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if path is None:
        print("No solution found.")
        return 0
    print("\nSolved!\nPath to goal:")
    for state in path:
        print(format_state(state))
        print()
    print(f"Total Moves: {len(path) - 1}")
    return 0