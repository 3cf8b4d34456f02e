import pytest

from algokit.geometry import (
    Location,
    Placement,
    Point,
    point_in_polygon,
    point_location,
    polygon_area,
    polygon_lattice_points,
    segment_contains,
    segments_intersect,
)

SAMPLE_POLYGON = [(1, 1), (4, 2), (3, 5), (1, 4)]


def test_point_subtraction():
    assert Point(3, 4) - Point(1, 1) == Point(2, 3)


@pytest.mark.parametrize("a, b", [((2, 3), (5, -1)), ((0, 7), (4, 4)), ((-3, 2), (6, 1))])
def test_cross_is_antisymmetric(a, b):
    pa, pb = Point(*a), Point(*b)
    assert pa.cross(pb) == -pb.cross(pa)
    assert pa.cross(pa) == 0


def test_triangle_symmetries():
    a, b, c = Point(1, 2), Point(5, 3), Point(2, 7)
    assert a.triangle(b, c) == -a.triangle(c, b)
    assert a.triangle(b, c) == b.triangle(c, a)


@pytest.mark.parametrize(
    "p3, expected",
    [((2, 3), Location.LEFT), ((4, 1), Location.RIGHT), ((3, 2), Location.TOUCH)],
)
def test_point_location_example(p3, expected):
    assert point_location((1, 1), (5, 3), p3) is expected


@pytest.mark.parametrize("p3", [(2, 3), (4, 1), (3, 2), (-7, 9)])
def test_point_location_flips_with_direction(p3):
    forward = point_location((1, 1), (5, 3), p3)
    backward = point_location((5, 3), (1, 1), p3)
    mirror = {Location.LEFT: Location.RIGHT, Location.RIGHT: Location.LEFT}
    assert backward is mirror.get(forward, forward)


INTERSECTION_CASES = [
    ((1, 1), (5, 3), (1, 2), (4, 3), False),
    ((1, 1), (5, 3), (1, 1), (4, 3), True),
    ((1, 1), (5, 3), (2, 3), (4, 1), True),
    ((1, 1), (5, 3), (2, 4), (4, 1), True),
    ((1, 1), (5, 3), (3, 2), (7, 4), True),
]


@pytest.mark.parametrize("p1, p2, p3, p4, expected", INTERSECTION_CASES)
def test_segments_intersect_example(p1, p2, p3, p4, expected):
    assert segments_intersect(p1, p2, p3, p4) is expected


@pytest.mark.parametrize("p1, p2, p3, p4, expected", INTERSECTION_CASES)
def test_segments_intersect_is_symmetric(p1, p2, p3, p4, expected):
    assert segments_intersect(p3, p4, p1, p2) is expected
    assert segments_intersect(p2, p1, p4, p3) is expected


def test_collinear_disjoint_segments():
    assert segments_intersect((0, 0), (1, 0), (2, 0), (3, 0)) is False


def test_collinear_overlapping_segments():
    assert segments_intersect((0, 0), (2, 0), (1, 0), (3, 0)) is True


def test_parallel_segments_do_not_meet():
    assert segments_intersect((0, 0), (2, 2), (0, 1), (2, 3)) is False


def test_segment_contains():
    assert segment_contains((0, 0), (4, 2), (2, 1)) is True
    assert segment_contains((0, 0), (4, 2), (6, 3)) is False
    assert segment_contains((0, 0), (4, 2), (2, 2)) is False


@pytest.mark.parametrize(
    "point, expected",
    [((2, 3), Placement.INSIDE), ((3, 1), Placement.OUTSIDE), ((1, 3), Placement.BOUNDARY)],
)
def test_point_in_polygon_example(point, expected):
    assert point_in_polygon(SAMPLE_POLYGON, point) is expected
    assert point_in_polygon(list(reversed(SAMPLE_POLYGON)), point) is expected


def test_vertices_are_on_boundary():
    for vertex in SAMPLE_POLYGON:
        assert point_in_polygon(SAMPLE_POLYGON, vertex) is Placement.BOUNDARY


def test_point_in_polygon_rejects_empty_polygon():
    with pytest.raises(ValueError):
        point_in_polygon([], (0, 0))


def test_polygon_area_example():
    assert polygon_area(SAMPLE_POLYGON) == 16


@pytest.mark.parametrize("width, height", [(1, 1), (3, 5), (7, 2)])
def test_polygon_area_of_rectangle(width, height):
    rectangle = [(0, 0), (width, 0), (width, height), (0, height)]
    assert polygon_area(rectangle) == 2 * width * height
    assert polygon_area(list(reversed(rectangle))) == 2 * width * height


def test_polygon_area_is_translation_invariant():
    moved = [(x + 10, y - 4) for x, y in SAMPLE_POLYGON]
    assert polygon_area(moved) == polygon_area(SAMPLE_POLYGON)


def test_polygon_lattice_points_example():
    assert polygon_lattice_points([(1, 1), (5, 3), (3, 5), (1, 4)]) == (6, 8)


@pytest.mark.parametrize("width, height", [(1, 1), (3, 5), (7, 2)])
def test_polygon_lattice_points_of_rectangle(width, height):
    rectangle = [(0, 0), (width, 0), (width, height), (0, height)]
    assert polygon_lattice_points(rectangle) == ((width - 1) * (height - 1), 2 * (width + height))