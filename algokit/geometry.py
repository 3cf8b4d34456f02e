"""Integer plane geometry: orientation, segment intersection, polygons and lattice points."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    """A point or vector with integer coordinates."""

    x: int
    y: int

    def __sub__(self, other: Sequence[int]) -> Point:  # type: ignore[override]
        ox, oy = other
        return Point(self.x - ox, self.y - oy)

    def cross(self, other: Sequence[int]) -> int:
        """Cross product of two vectors."""
        ox, oy = other
        return self.x * oy - self.y * ox

    def triangle(self, a: Sequence[int], b: Sequence[int]) -> int:
        """Cross product of (a - self) and (b - self): twice the signed triangle area."""
        return (Point(*a) - self).cross(Point(*b) - self)


def _point(value: Sequence[int]) -> Point:
    return Point(*value)


class Location(Enum):
    """Side of a directed line on which a point lies."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TOUCH = "TOUCH"


def point_location(p1: Sequence[int], p2: Sequence[int], p3: Sequence[int]) -> Location:
    """Where p3 lies relative to the line directed from p1 to p2."""
    cross = _point(p1).triangle(p3, p2)
    if cross == 0:
        return Location.TOUCH
    return Location.LEFT if cross < 0 else Location.RIGHT


def segments_intersect(
    p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], p4: Sequence[int]
) -> bool:
    """Whether segment p1-p2 and segment p3-p4 share at least one point."""
    p1, p2, p3, p4 = map(_point, (p1, p2, p3, p4))
    if (p2 - p1).cross(p4 - p3) == 0:
        if p1.triangle(p2, p3) != 0:
            return False
        if max(p1.x, p2.x) < min(p3.x, p4.x) or max(p1.y, p2.y) < min(p3.y, p4.y):
            return False
        if min(p1.x, p2.x) > max(p3.x, p4.x) or min(p1.y, p2.y) > max(p3.y, p4.y):
            return False
        return True
    a = p1.triangle(p3, p2)
    b = p1.triangle(p4, p2)
    if (a < 0 and b < 0) or (a > 0 and b > 0):
        return False
    c = p3.triangle(p1, p4)
    d = p3.triangle(p2, p4)
    if (c < 0 and d < 0) or (c > 0 and d > 0):
        return False
    return True


class Placement(Enum):
    """Position of a point relative to a polygon."""

    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"
    BOUNDARY = "BOUNDARY"


def segment_contains(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> bool:
    """Whether point c lies on the segment a-b."""
    a, b, c = map(_point, (a, b, c))
    if a.triangle(b, c) != 0:
        return False
    return min(a.x, b.x) <= c.x <= max(a.x, b.x) and min(a.y, b.y) <= c.y <= max(a.y, b.y)


def _edges(vertices: list[Point]) -> Iterable[tuple[Point, Point]]:
    return zip(vertices, vertices[1:] + vertices[:1])


def point_in_polygon(polygon: Iterable[Sequence[int]], point: Sequence[int]) -> Placement:
    """Whether point is inside, outside or on the boundary of the polygon."""
    vertices = [_point(v) for v in polygon]
    if not vertices:
        raise ValueError("polygon has no vertices")
    target = _point(point)
    crossings = 0
    for a, b in _edges(vertices):
        if segment_contains(a, b, target):
            return Placement.BOUNDARY
        if min(a.x, b.x) <= target.x < max(a.x, b.x):
            low, high = (a, b) if a.x < b.x else (b, a)
            if low.triangle(target, high) > 0:
                crossings += 1
    return Placement.INSIDE if crossings % 2 else Placement.OUTSIDE


def polygon_area(polygon: Iterable[Sequence[int]]) -> int:
    """Twice the area of a simple polygon (always an integer for lattice vertices)."""
    vertices = [_point(v) for v in polygon]
    return abs(sum(a.cross(b) for a, b in _edges(vertices)))


def polygon_lattice_points(polygon: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Numbers of lattice points strictly inside and on the boundary of the polygon."""
    vertices = [_point(v) for v in polygon]
    doubled_area = 0
    boundary = 0
    for a, b in _edges(vertices):
        doubled_area += a.cross(b)
        step = a - b
        boundary += math.gcd(abs(step.x), abs(step.y))
    interior = (abs(doubled_area) - boundary + 2) // 2
    return interior, boundary