"""Range queries over data that does not change: sparse tables and 2-D prefix sums."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Precomputed power-of-two blocks for fast folds over half-open ranges."""

    def __init__(self, values: Iterable[T], operation: Callable[[T, T], T]) -> None:
        self._operation = operation
        base = list(values)
        self._levels: list[list[T]] = [base]
        width = 1
        while 2 * width <= len(base):
            previous = self._levels[-1]
            self._levels.append(
                [operation(a, b) for a, b in zip(previous, previous[width:])]
            )
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def _check(self, left: int, right: int) -> None:
        if not (0 <= left <= right <= len(self)):
            raise IndexError(f"range [{left}, {right}) outside 0..{len(self)}")
        if left == right:
            raise ValueError("empty range has no value")

    def fold(self, left: int, right: int) -> T:
        """Combine values[left:right] using disjoint blocks (any associative operation)."""
        self._check(left, right)
        position = left
        result: T | None = None
        for level in reversed(range(len(self._levels))):
            width = 1 << level
            if width <= right - position:
                block = self._levels[level][position]
                result = block if result is None else self._operation(result, block)
                position += width
        return result  # type: ignore[return-value]

    def overlap(self, left: int, right: int) -> T:
        """Combine values[left:right] with two overlapping blocks (idempotent operations)."""
        self._check(left, right)
        level = (right - left).bit_length() - 1
        row = self._levels[level]
        return self._operation(row[left], row[right - (1 << level)])


def _answer(table: SparseTable, queries: Iterable[tuple[int, int]], overlap: bool) -> list:
    query = table.overlap if overlap else table.fold
    return [query(a - 1, b) for a, b in queries]


def static_range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Sum of each 1-based inclusive range (a, b)."""
    return _answer(SparseTable(values, operator.add), queries, overlap=False)


def static_range_minimums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Minimum of each 1-based inclusive range (a, b)."""
    return _answer(SparseTable(values, min), queries, overlap=True)


def range_xors(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Bitwise xor of each 1-based inclusive range (a, b)."""
    return _answer(SparseTable(values, operator.xor), queries, overlap=False)


class PrefixGrid:
    """Counts trees ('*') in rectangles of a fixed grid."""

    def __init__(self, rows: Iterable[str]) -> None:
        grid = list(rows)
        width = len(grid[0]) if grid else 0
        if any(len(row) != width for row in grid):
            raise ValueError("all rows must have the same length")
        self.height = len(grid)
        self.width = width
        prefix = [[0] * (width + 1)]
        for row in grid:
            above = prefix[-1]
            running = 0
            line = [0]
            for cell, upper in zip(row, above[1:]):
                running += cell == "*"
                line.append(upper + running)
            prefix.append(line)
        self._prefix = prefix

    def count(self, y1: int, x1: int, y2: int, x2: int) -> int:
        """Trees in the 1-based inclusive rectangle between the two corners."""
        if y1 > y2:
            y1, y2 = y2, y1
        if x1 > x2:
            x1, x2 = x2, x1
        if y1 < 1 or x1 < 1 or y2 > self.height or x2 > self.width:
            raise IndexError("rectangle outside the grid")
        p = self._prefix
        return p[y2][x2] + p[y1 - 1][x1 - 1] - p[y1 - 1][x2] - p[y2][x1 - 1]


def forest_queries(rows: Iterable[str], queries: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Answer each (y1, x1, y2, x2) rectangle query on the grid."""
    grid = PrefixGrid(rows)
    return [grid.count(*query) for query in queries]