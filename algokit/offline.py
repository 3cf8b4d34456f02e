"""Range questions answered offline: distinct values, raise-to-sorted costs, salary counts."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate


class _Fenwick:
    """Binary indexed tree of integer counts over 0-based positions."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        i = index + 1
        while i < len(self._tree):
            self._tree[i] += delta
            i += i & -i

    def prefix(self, count: int) -> int:
        total = 0
        while count > 0:
            total += self._tree[count]
            count -= count & -count
        return total

    def range_sum(self, left: int, right: int) -> int:
        if left >= right:
            return 0
        return self.prefix(right) - self.prefix(left)


def _check_range(a: int, b: int, n: int) -> None:
    if not 1 <= a <= b <= n:
        raise IndexError(f"range ({a}, {b}) outside 1..{n}")


def distinct_values_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Number of distinct values in each 1-based inclusive range (a, b)."""
    items = list(values)
    pending = list(queries)
    by_right: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for position, (a, b) in enumerate(pending):
        _check_range(a, b, len(items))
        by_right[b - 1].append((a - 1, position))

    counts = _Fenwick(len(items))
    last_seen: dict[int, int] = {}
    answers = [0] * len(pending)
    for i, value in enumerate(items):
        previous = last_seen.get(value)
        if previous is not None:
            counts.add(previous, -1)
        last_seen[value] = i
        counts.add(i, 1)
        for left, position in by_right.get(i, ()):
            answers[position] = counts.range_sum(left, i + 1)
    return answers


def increasing_array_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Fewest unit increments making each 1-based inclusive range non-decreasing."""
    items = list(values)
    n = len(items)
    pending = list(queries)
    by_start: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for position, (a, b) in enumerate(pending):
        _check_range(a, b, n)
        by_start[a - 1].append((b - 1, position))

    prefix = [0, *accumulate(items)]
    # Blocks of equal running maximum starting at i; the top of the stack is the leftmost.
    block_values: list[int] = []
    negated_starts: list[int] = []
    covered = [0]
    answers = [0] * len(pending)
    for i in reversed(range(n)):
        value = items[i]
        while block_values and block_values[-1] <= value:
            block_values.pop()
            negated_starts.pop()
            covered.pop()
        end = -negated_starts[-1] if negated_starts else n
        block_values.append(value)
        negated_starts.append(-i)
        covered.append(covered[-1] + value * (end - i))

        for last, position in by_start.get(i, ()):
            block = bisect_left(negated_starts, -last)
            start = -negated_starts[block]
            raised = covered[-1] - covered[block + 1] + block_values[block] * (last - start + 1)
            answers[position] = raised - (prefix[last + 1] - prefix[i])
    return answers


def salary_queries(
    salaries: Sequence[int], queries: Iterable[tuple[str, int, int]]
) -> list[int]:
    """Run ('!', k, x) salary changes and ('?', a, b) counts of salaries in [a, b]."""
    current = list(salaries)
    pending = list(queries)
    for kind, _, _ in pending:
        if kind not in ("!", "?"):
            raise ValueError(f"unknown query kind {kind!r}")

    coordinates = sorted(set(current) | {x for kind, _, x in pending if kind == "!"})
    rank = {value: i for i, value in enumerate(coordinates)}
    counts = _Fenwick(len(coordinates))
    for salary in current:
        counts.add(rank[salary], 1)

    answers = []
    for kind, first, second in pending:
        if kind == "!":
            if not 1 <= first <= len(current):
                raise IndexError(f"employee {first} outside 1..{len(current)}")
            counts.add(rank[current[first - 1]], -1)
            current[first - 1] = second
            counts.add(rank[second], 1)
        else:
            low = bisect_left(coordinates, first)
            high = bisect_right(coordinates, second)
            answers.append(counts.range_sum(low, high))
    return answers