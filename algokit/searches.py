"""Segment trees that descend to find a position: first fit and k-th remaining."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class MaxTree:
    """Maximum tree that finds the first position holding at least a given value."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        tree = [0] * (2 * size)
        tree[size : size + self._n] = items
        for node in range(size - 1, 0, -1):
            tree[node] = max(tree[2 * node], tree[2 * node + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._n

    def first_at_least(self, value: int) -> int | None:
        """Smallest 0-based index whose value is >= value, or None."""
        tree = self._tree
        if self._n == 0 or tree[1] < value:
            return None
        node = 1
        while node < self._size:
            node *= 2
            if tree[node] < value:
                node += 1
        return node - self._size

    def add(self, index: int, delta: int) -> None:
        """Add delta to the value at a 0-based index."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        tree = self._tree
        node = index + self._size
        tree[node] += delta
        node //= 2
        while node:
            tree[node] = max(tree[2 * node], tree[2 * node + 1])
            node //= 2


def hotel_queries(hotels: Sequence[int], groups: Iterable[int]) -> list[int]:
    """Assign each group to the first hotel with enough rooms; 1-based, 0 if none."""
    tree = MaxTree(hotels)
    answers = []
    for rooms in groups:
        index = tree.first_at_least(rooms)
        if index is None:
            answers.append(0)
        else:
            tree.add(index, -rooms)
            answers.append(index + 1)
    return answers


class CountTree:
    """Tracks which of n positions remain and finds the k-th remaining one."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._n = size
        capacity = 1
        while capacity < size:
            capacity *= 2
        self._capacity = capacity
        tree = [0] * (2 * capacity)
        tree[capacity : capacity + size] = [1] * size
        for node in range(capacity - 1, 0, -1):
            tree[node] = tree[2 * node] + tree[2 * node + 1]
        self._tree = tree

    def __len__(self) -> int:
        """Number of positions still present."""
        return self._tree[1] if self._n else 0

    def find_kth(self, k: int) -> int:
        """0-based position of the k-th (1-based) remaining element."""
        if not 1 <= k <= len(self):
            raise IndexError(f"only {len(self)} positions remain, asked for {k}")
        tree = self._tree
        node = 1
        while node < self._capacity:
            node *= 2
            if tree[node] < k:
                k -= tree[node]
                node += 1
        return node - self._capacity

    def remove(self, index: int) -> None:
        """Mark a 0-based position as removed."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        tree = self._tree
        node = index + self._capacity
        tree[node] = 0
        node //= 2
        while node:
            tree[node] = tree[2 * node] + tree[2 * node + 1]
            node //= 2


def list_removals(values: Sequence[int], positions: Iterable[int]) -> list[int]:
    """Remove the element at each 1-based position in turn and report it."""
    tree = CountTree(len(values))
    removed = []
    for position in positions:
        index = tree.find_kth(position)
        tree.remove(index)
        removed.append(values[index])
    return removed