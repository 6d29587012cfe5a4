import math

import pytest

from aprilkit.lines import Line, LineSegment


def test_from_points_gives_unit_direction():
    line = Line.from_points((1, 2), (4, 6))
    assert math.hypot(*line.u) == pytest.approx(1.0)
    assert line.p == (1.0, 2.0)


def test_from_points_rejects_coincident_points():
    with pytest.raises(ValueError):
        Line.from_points((1, 1), (1, 1))


def test_coordinate_of_second_point_is_length():
    p0, p1 = (1, 2), (4, 6)
    line = Line.from_points(p0, p1)
    assert line.coordinate(p1) == pytest.approx(math.dist(p0, p1))
    assert line.coordinate(p0) == pytest.approx(0.0)


def test_intersect_lies_on_both_lines():
    a = Line.from_points((0, 0), (2, 1))
    b = Line.from_points((3, -1), (1, 4))
    hit = a.intersect(b)
    assert hit is not None
    for line in (a, b):
        nearest = (
            line.p[0] + line.coordinate(hit) * line.u[0],
            line.p[1] + line.coordinate(hit) * line.u[1],
        )
        assert nearest == pytest.approx(hit)


def test_intersect_axes_at_origin():
    a = Line.from_points((-3, 0), (5, 0))
    b = Line.from_points((0, -2), (0, 7))
    assert a.intersect(b) == pytest.approx((0.0, 0.0))


def test_parallel_lines_do_not_intersect():
    a = Line.from_points((0, 0), (1, 1))
    b = Line.from_points((0, 1), (2, 3))
    assert a.intersect(b) is None


def test_segment_closest_point_clamps_to_endpoints():
    seg = LineSegment.from_points((0, 0), (4, 0))
    assert seg.closest_point((-3, 2)) == pytest.approx((0.0, 0.0))
    assert seg.closest_point((9, -1)) == pytest.approx((4.0, 0.0))
    assert seg.closest_point((2, 5)) == pytest.approx((2.0, 0.0))


def test_segment_closest_point_reversed_direction():
    seg = LineSegment.from_points((4, 0), (0, 0))
    assert seg.closest_point((-3, 2)) == pytest.approx((0.0, 0.0))
    assert seg.p0 == (4.0, 0.0)


def test_crossing_segments_intersect():
    a = LineSegment.from_points((0, 0), (4, 4))
    b = LineSegment.from_points((0, 4), (4, 0))
    assert a.intersect_segment(b) == pytest.approx((2.0, 2.0))


def test_segments_whose_lines_cross_outside_do_not_intersect():
    a = LineSegment.from_points((0, 0), (1, 1))
    b = LineSegment.from_points((0, 4), (4, 0))
    assert a.intersect_segment(b) is None
    assert b.intersect_segment(a) is None


def test_segment_intersect_line():
    seg = LineSegment.from_points((1, -1), (1, 3))
    horizontal = Line.from_points((0, 2), (1, 2))
    assert seg.intersect_line(horizontal) == pytest.approx((1.0, 2.0))
    far = Line.from_points((0, 10), (1, 10))
    assert seg.intersect_line(far) is None


def test_segment_parallel_to_line_has_no_intersection():
    seg = LineSegment.from_points((0, 0), (3, 0))
    line = Line.from_points((0, 1), (1, 1))
    assert seg.intersect_line(line) is None