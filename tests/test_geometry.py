import math

import pytest

from penplot.geometry import (
    Rect,
    Vec2,
    bezier_point,
    check_in_polygon,
    segment_intersection,
)


def test_distance_of_right_triangle():
    assert Vec2(0, 0).distance(Vec2(3, 4)) == pytest.approx(5.0)


def test_distance_is_symmetric():
    a, b = Vec2(1.5, -2.0), Vec2(-7.0, 3.25)
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_squared_distance_matches_distance():
    a, b = Vec2(2, 9), Vec2(-4, 1)
    assert a.squared_distance(b) == pytest.approx(a.distance(b) ** 2)


def test_length_is_distance_from_origin():
    p = Vec2(-6, 8)
    assert p.length() == pytest.approx(p.distance(Vec2()))


def test_lerp_endpoints():
    a, b = Vec2(1, 2), Vec2(10, -4)
    assert a.lerp(b, 0) == a
    assert a.lerp(b, 1) == b


def test_lerp_midpoint_is_equidistant():
    a, b = Vec2(1, 2), Vec2(10, -4)
    mid = a.lerp(b, 0.5)
    assert mid.distance(a) == pytest.approx(mid.distance(b))


def test_vector_operators_round_trip():
    a, b = Vec2(3, 7), Vec2(-2, 5)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert -(-a) == a
    assert tuple(a) == (3, 7)


def test_rect_inside_includes_edges():
    rect = Rect(0, 0, 10, 20)
    for corner in rect.corners():
        assert rect.inside(corner)
    assert not rect.inside(Vec2(11, 5))
    assert not rect.inside(Vec2(5, -1))


def test_rect_corners_order():
    w, h = 4, 9
    assert Rect(0, 0, w, h).corners() == [Vec2(0, 0), Vec2(w, 0), Vec2(w, h), Vec2(0, h)]


def test_rect_from_points_normalises():
    rect = Rect.from_points(Vec2(10, 10), Vec2(0, 0))
    assert rect == Rect(0, 0, 10, 10)
    assert rect.inside(Vec2(5, 5))


def test_segment_intersection_crossing_diagonals():
    p = segment_intersection(Vec2(0, 0), Vec2(10, 10), Vec2(0, 10), Vec2(10, 0))
    assert p is not None
    assert p.x == pytest.approx(5)
    assert p.y == pytest.approx(5)


def test_segment_intersection_symmetric():
    args = (Vec2(-3, 1), Vec2(8, 4), Vec2(2, -5), Vec2(1, 9))
    p = segment_intersection(*args)
    q = segment_intersection(args[2], args[3], args[0], args[1])
    assert p is not None and q is not None
    assert p.x == pytest.approx(q.x)
    assert p.y == pytest.approx(q.y)


def test_segment_intersection_parallel_and_apart():
    assert segment_intersection(Vec2(0, 0), Vec2(10, 0), Vec2(0, 1), Vec2(10, 1)) is None
    assert segment_intersection(Vec2(0, 0), Vec2(1, 1), Vec2(5, 0), Vec2(6, -3)) is None


def test_bezier_endpoints():
    p1, c1, c2, p2 = Vec2(0, 0), Vec2(1, 5), Vec2(4, 5), Vec2(6, 0)
    assert bezier_point(p1, c1, c2, p2, 0) == p1
    assert bezier_point(p1, c1, c2, p2, 1) == p2


def test_bezier_on_collinear_points_stays_on_line():
    pts = (Vec2(0, 0), Vec2(2, 0), Vec2(7, 0), Vec2(9, 0))
    for i in range(11):
        assert bezier_point(*pts, i / 10).y == 0


def test_check_in_polygon():
    square = Rect(0, 0, 10, 10).corners()
    assert check_in_polygon(square, Vec2(5, 5))
    assert not check_in_polygon(square, Vec2(15, 5))
    assert not check_in_polygon(square, Vec2(5, -math.pi))
    assert not check_in_polygon([], Vec2(0, 0))