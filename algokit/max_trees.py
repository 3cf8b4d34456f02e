"""Segment trees with richer nodes: nearest cheap pizzeria, best prefix and best subarray sums."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Generic, NamedTuple, TypeVar

from algokit.point_trees import MinTree

N = TypeVar("N")


class _OrderedTree(Generic[N]):
    """Bottom-up segment tree for an associative, possibly non-commutative combine."""

    def __init__(self, leaves: Iterable[N], combine: Callable[[N, N], N], identity: N) -> None:
        items = list(leaves)
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

    @property
    def root(self) -> N:
        return self._tree[1]

    def set(self, index: int, leaf: N) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        tree = self._tree
        node = index + self._size
        tree[node] = leaf
        node //= 2
        while node:
            tree[node] = self._combine(tree[2 * node], tree[2 * node + 1])
            node //= 2

    def fold(self, left: int, right: int) -> N:
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) outside 0..{self._n}")
        tree, combine = self._tree, self._combine
        front = back = self._identity
        lo, hi = left + self._size, right + self._size
        while lo < hi:
            if lo & 1:
                front = combine(front, tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                back = combine(tree[hi], back)
            lo //= 2
            hi //= 2
        return combine(front, back)


class PizzeriaTree:
    """Cheapest total cost p[i] + |i - k| of ordering from any building to building k."""

    def __init__(self, prices: Iterable[int]) -> None:
        items = list(prices)
        self._n = len(items)
        self._upward = MinTree(p + i for i, p in enumerate(items))
        self._downward = MinTree(p - i for i, p in enumerate(items))

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, price: int) -> None:
        """Change the price at a 0-based building."""
        self._upward.set(index, price + index)
        self._downward.set(index, price - index)

    def cheapest(self, k: int) -> int:
        """Lowest cost of getting a pizza to the 0-based building k."""
        if not 0 <= k < self._n:
            raise IndexError(f"index {k} outside 0..{self._n - 1}")
        from_left = self._downward.min(0, k + 1) + k
        from_right = self._upward.min(k, self._n) - k
        return min(from_left, from_right)


def pizzeria_queries(prices: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, k, x) price changes and (2, k) cost queries, 1-based."""
    tree = PizzeriaTree(prices)
    answers = []
    for operation in operations:
        if operation[0] == 1:
            _, k, price = operation
            tree.update(k - 1, price)
        else:
            answers.append(tree.cheapest(operation[1] - 1))
    return answers


class _Prefix(NamedTuple):
    best: int
    total: int


def _prefix_leaf(value: int) -> _Prefix:
    return _Prefix(max(value, 0), value)


def _prefix_combine(a: _Prefix, b: _Prefix) -> _Prefix:
    return _Prefix(max(a.best, a.total + b.best), a.total + b.total)


class PrefixSumTree:
    """Maximum prefix sum of a range, counting the empty prefix as 0."""

    def __init__(self, values: Iterable[int]) -> None:
        self._tree = _OrderedTree(map(_prefix_leaf, values), _prefix_combine, _Prefix(0, 0))

    def __len__(self) -> int:
        return len(self._tree)

    def update(self, index: int, value: int) -> None:
        """Replace the value at a 0-based index."""
        self._tree.set(index, _prefix_leaf(value))

    def max_prefix(self, left: int, right: int) -> int:
        """Largest sum of values[left:j] over left <= j <= right."""
        return self._tree.fold(left, right).best


def prefix_sum_queries(values: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, k, u) assignments and (2, a, b) maximum prefix queries, 1-based inclusive."""
    tree = PrefixSumTree(values)
    answers = []
    for kind, first, second in operations:
        if kind == 1:
            tree.update(first - 1, second)
        else:
            answers.append(tree.max_prefix(first - 1, second))
    return answers


class _Segment(NamedTuple):
    best: int
    prefix: int
    suffix: int
    total: int


def _segment_leaf(value: int) -> _Segment:
    clipped = max(value, 0)
    return _Segment(clipped, clipped, clipped, value)


def _segment_combine(a: _Segment, b: _Segment) -> _Segment:
    return _Segment(
        max(a.best, b.best, a.suffix + b.prefix),
        max(a.prefix, a.total + b.prefix),
        max(b.suffix, b.total + a.suffix),
        a.total + b.total,
    )


class SubarraySumTree:
    """Maximum subarray sum of the whole array under point updates (empty subarray is 0)."""

    def __init__(self, values: Iterable[int]) -> None:
        self._tree = _OrderedTree(
            map(_segment_leaf, values), _segment_combine, _Segment(0, 0, 0, 0)
        )

    def __len__(self) -> int:
        return len(self._tree)

    def update(self, index: int, value: int) -> None:
        """Replace the value at a 0-based index."""
        self._tree.set(index, _segment_leaf(value))

    def best(self) -> int:
        """Largest sum of any contiguous subarray, at least 0."""
        return self._tree.root.best


def subarray_sum_queries(values: Sequence[int], updates: Iterable[tuple[int, int]]) -> list[int]:
    """Apply each 1-based (k, x) assignment and report the best subarray sum after it."""
    tree = SubarraySumTree(values)
    answers = []
    for k, value in updates:
        tree.update(k - 1, value)
        answers.append(tree.best())
    return answers