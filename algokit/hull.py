"""Convex hull of a point set and the closest pair of points."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from algokit.geometry import Point


def convex_hull(points: Iterable[Sequence[int]]) -> list[Point]:
    """Hull vertices in clockwise order, keeping points that lie on hull edges."""
    ordered = sorted(Point(*p) for p in points)
    if len(ordered) <= 1:
        return ordered
    hull: list[Point] = []
    for sweep in (ordered, ordered[::-1]):
        start = len(hull)
        for point in sweep:
            while len(hull) - start > 1 and hull[-2].triangle(hull[-1], point) > 0:
                hull.pop()
            hull.append(point)
        hull.pop()
    return hull


def _squared(a: tuple[int, int], b: tuple[int, int]) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _closest(by_x: list[tuple[int, int]], by_y: list[tuple[int, int]]) -> float:
    n = len(by_x)
    if n <= 1:
        return math.inf
    half = n // 2
    pivot = by_x[half - 1]
    left_y = [p for p in by_y if p <= pivot]
    right_y = [p for p in by_y if p > pivot]
    best = min(_closest(by_x[:half], left_y), _closest(by_x[half:], right_y))

    stripe = [p for p in by_y if (p[0] - pivot[0]) ** 2 < best]
    for i, p in enumerate(stripe):
        for q in stripe[i + 1 :]:
            if (q[1] - p[1]) ** 2 >= best:
                break
            best = min(best, _squared(p, q))
    return best


def minimum_distance(points: Iterable[Sequence[int]]) -> int:
    """Smallest squared Euclidean distance between two of the points."""
    by_x = sorted((p[0], p[1]) for p in points)
    if len(by_x) < 2:
        raise ValueError("need at least two points")
    if any(a == b for a, b in zip(by_x, by_x[1:])):
        return 0
    by_y = sorted(by_x, key=lambda p: (p[1], p[0]))
    return int(_closest(by_x, by_y))