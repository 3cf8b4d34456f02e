"""Segment trees with point updates and range queries, or range updates and point queries."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Sequence


class _PointTree:
    """Bottom-up segment tree over a commutative, associative operation."""

    def __init__(self, values: Iterable[int], combine: Callable, identity) -> None:
        items = list(values)
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._combine = combine
        self._identity = identity
        tree = [identity] * (2 * size)
        tree[size : size + self._n] = items
        for node in range(size - 1, 0, -1):
            tree[node] = combine(tree[2 * node], tree[2 * node + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._n

    def _assign(self, index: int, value: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        tree = self._tree
        node = index + self._size
        tree[node] = value
        node //= 2
        while node:
            tree[node] = self._combine(tree[2 * node], tree[2 * node + 1])
            node //= 2

    def _fold(self, left: int, right: int):
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) outside 0..{self._n}")
        tree = self._tree
        result = self._identity
        lo, hi = left + self._size, right + self._size
        while lo < hi:
            if lo & 1:
                result = self._combine(result, tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = self._combine(result, tree[hi])
            lo //= 2
            hi //= 2
        return result


class SumTree(_PointTree):
    """Point assignment and half-open range sums."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, operator.add, 0)

    def set(self, index: int, value: int) -> None:
        """Replace the value at a 0-based index."""
        self._assign(index, value)

    def sum(self, left: int, right: int) -> int:
        """Sum of values[left:right]; an empty range sums to 0."""
        return self._fold(left, right)


class MinTree(_PointTree):
    """Point assignment and half-open range minimums."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, min, math.inf)

    def set(self, index: int, value: int) -> None:
        """Replace the value at a 0-based index."""
        self._assign(index, value)

    def min(self, left: int, right: int) -> int:
        """Minimum of values[left:right]."""
        if left == right:
            raise ValueError("empty range has no minimum")
        return self._fold(left, right)


class RangeAddTree:
    """Adds a value to every element of a range; reads single elements."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._tree = [0] * (2 * size)
        self._tree[size : size + self._n] = items

    def __len__(self) -> int:
        return self._n

    def add(self, left: int, right: int, value: int) -> None:
        """Add value to every element of values[left:right]."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) outside 0..{self._n}")
        tree = self._tree
        lo, hi = left + self._size, right + self._size
        while lo < hi:
            if lo & 1:
                tree[lo] += value
                lo += 1
            if hi & 1:
                hi -= 1
                tree[hi] += value
            lo //= 2
            hi //= 2

    def get(self, index: int) -> int:
        """Current value at a 0-based index."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        node = index + self._size
        total = 0
        while node:
            total += self._tree[node]
            node //= 2
        return total


def dynamic_range_sums(values: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, k, u) assignments and (2, a, b) sum queries, all 1-based."""
    tree = SumTree(values)
    answers = []
    for kind, first, second in operations:
        if kind == 1:
            tree.set(first - 1, second)
        else:
            answers.append(tree.sum(first - 1, second))
    return answers


def dynamic_range_minimums(values: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, k, u) assignments and (2, a, b) minimum queries, all 1-based."""
    tree = MinTree(values)
    answers = []
    for kind, first, second in operations:
        if kind == 1:
            tree.set(first - 1, second)
        else:
            answers.append(tree.min(first - 1, second))
    return answers


def range_update_queries(values: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, a, b, u) range additions and (2, k) value queries, all 1-based."""
    tree = RangeAddTree(values)
    answers = []
    for operation in operations:
        if operation[0] == 1:
            _, a, b, value = operation
            tree.add(a - 1, b, value)
        else:
            answers.append(tree.get(operation[1] - 1))
    return answers