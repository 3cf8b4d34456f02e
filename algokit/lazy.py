"""Segment trees with lazy range updates: arithmetic progressions, assignments and additions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _capacity(n: int) -> int:
    size = 1
    while size < n:
        size *= 2
    return size


def _check_range(left: int, right: int, n: int) -> None:
    if not 0 <= left <= right <= n:
        raise IndexError(f"range [{left}, {right}) outside 0..{n}")


class PolynomialTree:
    """Adds 1, 2, 3, ... across a range and answers range sums."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        size = _capacity(self._n)
        self._size = size
        sums = [0] * (2 * size)
        sums[size : size + self._n] = items
        for node in range(size - 1, 0, -1):
            sums[node] = sums[2 * node] + sums[2 * node + 1]
        self._sums = sums
        self._first = [0] * (2 * size)
        self._step = [0] * (2 * size)

    def __len__(self) -> int:
        return self._n

    def _apply(self, node: int, length: int, first: int, step: int) -> None:
        # Element at offset i inside the node gains first + step * (i + 1).
        self._first[node] += first
        self._step[node] += step
        self._sums[node] += first * length + step * length * (length + 1) // 2

    def _push(self, node: int, lo: int, hi: int) -> None:
        first, step = self._first[node], self._step[node]
        if (first == 0 and step == 0) or hi - lo == 1:
            return
        mid = (lo + hi) // 2
        left_length = mid - lo
        self._apply(2 * node, left_length, first, step)
        self._apply(2 * node + 1, hi - mid, first + step * left_length, step)
        self._first[node] = 0
        self._step[node] = 0

    def add_progression(self, left: int, right: int) -> None:
        """Add 1 to values[left], 2 to values[left + 1], ... up to values[right - 1]."""
        _check_range(left, right, self._n)
        self._update(1, 0, self._size, left, right)

    def _update(self, node: int, lo: int, hi: int, left: int, right: int) -> None:
        if hi <= left or lo >= right:
            return
        if left <= lo and hi <= right:
            self._apply(node, hi - lo, lo - left, 1)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right)
        self._update(2 * node + 1, mid, hi, left, right)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def sum(self, left: int, right: int) -> int:
        """Sum of values[left:right]."""
        _check_range(left, right, self._n)
        return self._sum(1, 0, self._size, left, right)

    def _sum(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if hi <= left or lo >= right:
            return 0
        if left <= lo and hi <= right:
            return self._sums[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._sum(2 * node, lo, mid, left, right) + self._sum(
            2 * node + 1, mid, hi, left, right
        )


def polynomial_queries(values: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, a, b) progression additions and (2, a, b) sum queries, all 1-based inclusive."""
    tree = PolynomialTree(values)
    answers = []
    for kind, a, b in operations:
        if kind == 1:
            tree.add_progression(a - 1, b)
        else:
            answers.append(tree.sum(a - 1, b))
    return answers


class AssignAddTree:
    """Range additions, range assignments and range sums."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        size = _capacity(self._n)
        self._size = size
        sums = [0] * (2 * size)
        sums[size : size + self._n] = items
        for node in range(size - 1, 0, -1):
            sums[node] = sums[2 * node] + sums[2 * node + 1]
        self._sums = sums
        self._assigned: list[int | None] = [None] * (2 * size)
        self._added = [0] * (2 * size)

    def __len__(self) -> int:
        return self._n

    def _apply_assign(self, node: int, length: int, value: int) -> None:
        self._assigned[node] = value
        self._added[node] = 0
        self._sums[node] = value * length

    def _apply_add(self, node: int, length: int, value: int) -> None:
        self._added[node] += value
        self._sums[node] += value * length

    def _push(self, node: int, lo: int, hi: int) -> None:
        if hi - lo == 1:
            return
        assigned, added = self._assigned[node], self._added[node]
        if assigned is None and added == 0:
            return
        mid = (lo + hi) // 2
        if assigned is not None:
            self._apply_assign(2 * node, mid - lo, assigned)
            self._apply_assign(2 * node + 1, hi - mid, assigned)
        if added:
            self._apply_add(2 * node, mid - lo, added)
            self._apply_add(2 * node + 1, hi - mid, added)
        self._assigned[node] = None
        self._added[node] = 0

    def _update(self, node, lo, hi, left, right, apply, value) -> None:
        if hi <= left or lo >= right:
            return
        if left <= lo and hi <= right:
            apply(node, hi - lo, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, apply, value)
        self._update(2 * node + 1, mid, hi, left, right, apply, value)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def add(self, left: int, right: int, value: int) -> None:
        """Add value to every element of values[left:right]."""
        _check_range(left, right, self._n)
        self._update(1, 0, self._size, left, right, self._apply_add, value)

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every element of values[left:right] to value."""
        _check_range(left, right, self._n)
        self._update(1, 0, self._size, left, right, self._apply_assign, value)

    def sum(self, left: int, right: int) -> int:
        """Sum of values[left:right]."""
        _check_range(left, right, self._n)
        return self._sum(1, 0, self._size, left, right)

    def _sum(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if hi <= left or lo >= right:
            return 0
        if left <= lo and hi <= right:
            return self._sums[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._sum(2 * node, lo, mid, left, right) + self._sum(
            2 * node + 1, mid, hi, left, right
        )


def range_updates_and_sums(values: Sequence[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, a, b, x) additions, (2, a, b, x) assignments and (3, a, b) sums, 1-based inclusive."""
    tree = AssignAddTree(values)
    answers = []
    for operation in operations:
        kind, a, b = operation[0], operation[1], operation[2]
        if kind == 1:
            tree.add(a - 1, b, operation[3])
        elif kind == 2:
            tree.assign(a - 1, b, operation[3])
        else:
            answers.append(tree.sum(a - 1, b))
    return answers