"""Enumerate N-queens placements by backtracking."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator, Sequence


class NQueens:
    """Backtracking solver for an N x N board.

    A solution is a tuple holding, for each row, the column of its queen.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("board size must not be negative")
        self.size = size
        self._queens: list[int] = []

    def is_safe(self, row: int, col: int) -> bool:
        """Whether a queen at (row, col) is unattacked by the queens placed so far."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"square ({row}, {col}) is off the board")
        for placed_row, placed_col in enumerate(self._queens):
            if placed_col == col:
                return False
            if placed_row <= row and placed_row - placed_col == row - col:
                return False
            if placed_row <= row and placed_row + placed_col == row + col:
                return False
        return True

    def solutions(self) -> Iterator[tuple[int, ...]]:
        """Yield every placement, in row-major search order."""
        self._queens = []
        yield from self._place(0)

    def _place(self, row: int) -> Iterator[tuple[int, ...]]:
        if row == self.size:
            yield tuple(self._queens)
            return
        for col in range(self.size):
            if self.is_safe(row, col):
                self._queens.append(col)
                yield from self._place(row + 1)
                self._queens.pop()

    def count(self) -> int:
        """Number of distinct placements."""
        return sum(1 for _ in self.solutions())


def format_board(board: Sequence[int]) -> str:
    """Render a placement with ``Q`` for queens and ``X`` for empty squares."""
    size = len(board)
    return "\n".join(
        " ".join("Q" if col == queen else "X" for col in range(size)) for queen in board
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a board size from standard input and print every solution."""
    parser = argparse.ArgumentParser(description="Print every N-queens solution.")
    parser.parse_args(argv)
    print("Enter size of chessboard: ", end="", flush=True)
    line = sys.stdin.readline()
    try:
        solver = NQueens(int(line.strip()))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    started = time.perf_counter()
    total = 0
    for board in solver.solutions():
        total += 1
        if board:
            print(format_board(board))
        print()
    elapsed = time.perf_counter() - started
    print(f"Total solutions: {total}")
    print(f"Time taken: {elapsed:.6f} seconds.")
    return 0