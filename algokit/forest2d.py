"""A forest grid whose cells can be toggled, with rectangle tree counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class ForestTree:
    """Two-dimensional binary indexed tree over a grid of '.' and '*' cells."""

    def __init__(self, rows: Iterable[str]) -> None:
        grid = list(rows)
        width = len(grid[0]) if grid else 0
        if any(len(row) != width for row in grid):
            raise ValueError("all rows must have the same length")
        self.height = len(grid)
        self.width = width
        self._cells = [[cell == "*" for cell in row] for row in grid]
        self._tree = [[0] * (width + 1) for _ in range(self.height + 1)]
        for y, row in enumerate(self._cells):
            for x, has_tree in enumerate(row):
                if has_tree:
                    self._add(y, x, 1)

    def _add(self, y: int, x: int, delta: int) -> None:
        i = y + 1
        while i <= self.height:
            line = self._tree[i]
            j = x + 1
            while j <= self.width:
                line[j] += delta
                j += j & -j
            i += i & -i

    def _prefix(self, y: int, x: int) -> int:
        """Trees in rows [0, y) and columns [0, x)."""
        total = 0
        i = y
        while i > 0:
            line = self._tree[i]
            j = x
            while j > 0:
                total += line[j]
                j -= j & -j
            i -= i & -i
        return total

    def flip(self, y: int, x: int) -> None:
        """Toggle the 0-based cell (y, x) between empty and tree."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"cell ({y}, {x}) outside the grid")
        row = self._cells[y]
        row[x] = not row[x]
        self._add(y, x, 1 if row[x] else -1)

    def count(self, y1: int, x1: int, y2: int, x2: int) -> int:
        """Trees in rows [y1, y2) and columns [x1, x2), 0-based."""
        if not (0 <= y1 and 0 <= x1 and y2 <= self.height and x2 <= self.width):
            raise IndexError("rectangle outside the grid")
        if y1 > y2 or x1 > x2:
            raise ValueError("rectangle corners are reversed")
        return (
            self._prefix(y2, x2)
            - self._prefix(y1, x2)
            - self._prefix(y2, x1)
            + self._prefix(y1, x1)
        )


def forest_queries_ii(rows: Iterable[str], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, y, x) flips and (2, y1, x1, y2, x2) counts, all 1-based inclusive."""
    forest = ForestTree(rows)
    answers = []
    for operation in operations:
        if operation[0] == 1:
            _, y, x = operation
            forest.flip(y - 1, x - 1)
        else:
            _, y1, x1, y2, x2 = operation
            answers.append(forest.count(y1 - 1, x1 - 1, y2, x2))
    return answers