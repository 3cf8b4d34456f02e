"""A persistent array with range sums: every change yields a new version, old ones stay valid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class _Node:
    total: int
    left: _Node | None = None
    right: _Node | None = None


def _build(items: Sequence[int], lo: int, hi: int) -> _Node:
    if hi - lo == 1:
        return _Node(items[lo])
    mid = (lo + hi) // 2
    left = _build(items, lo, mid)
    right = _build(items, mid, hi)
    return _Node(left.total + right.total, left, right)


def _replace(node: _Node, index: int, value: int, lo: int, hi: int) -> _Node:
    if hi - lo == 1:
        return _Node(value)
    mid = (lo + hi) // 2
    if index < mid:
        left = _replace(node.left, index, value, lo, mid)
        right = node.right
    else:
        left = node.left
        right = _replace(node.right, index, value, mid, hi)
    return _Node(left.total + right.total, left, right)


def _sum(node: _Node, left: int, right: int, lo: int, hi: int) -> int:
    if hi <= left or lo >= right:
        return 0
    if left <= lo and hi <= right:
        return node.total
    mid = (lo + hi) // 2
    return _sum(node.left, left, right, lo, mid) + _sum(node.right, left, right, mid, hi)


class PersistentSumArray:
    """Immutable integer array; with_value returns a new version sharing structure."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._root = _build(items, 0, self._n) if items else None

    @classmethod
    def _from_root(cls, root: _Node | None, n: int) -> PersistentSumArray:
        array = cls.__new__(cls)
        array._root = root
        array._n = n
        return array

    def __len__(self) -> int:
        return self._n

    def with_value(self, index: int, value: int) -> PersistentSumArray:
        """A new version with values[index] replaced; this one is unchanged."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        return self._from_root(_replace(self._root, index, value, 0, self._n), self._n)

    def sum(self, left: int, right: int) -> int:
        """Sum of values[left:right]."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) outside 0..{self._n}")
        if left == right:
            return 0
        return _sum(self._root, left, right, 0, self._n)


def range_queries_and_copies(
    values: Sequence[int], operations: Iterable[Sequence[int]]
) -> list[int]:
    """Run (1, k, a, x) sets, (2, k, a, b) sums and (3, k) copies on 1-based array versions."""
    arrays = [PersistentSumArray(values)]
    answers = []
    for operation in operations:
        kind, k = operation[0], operation[1]
        if kind == 1:
            _, _, a, x = operation
            arrays[k - 1] = arrays[k - 1].with_value(a - 1, x)
        elif kind == 2:
            _, _, a, b = operation
            answers.append(arrays[k - 1].sum(a - 1, b))
        else:
            arrays.append(arrays[k - 1])
    return answers