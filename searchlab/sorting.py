"""Selection sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return a new list of ``items`` in ascending order, sorted by selection."""
    result = list(items)
    for position in range(len(result) - 1):
        smallest = min(range(position, len(result)), key=result.__getitem__)
        result[position], result[smallest] = result[smallest], result[position]
    return result


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print them sorted."""
    parser = argparse.ArgumentParser(description="Sort integers by selection sort.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of elements: ", end="", flush=True)
        count = _next_int(tokens)
        if count < 0:
            raise ValueError("element count must not be negative")
        print("Enter elements:", flush=True)
        values = [_next_int(tokens) for _ in range(count)]
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print("Sorted array: " + " ".join(map(str, selection_sort(values))))
    return 0