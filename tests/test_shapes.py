import math

import pytest

from penplot.geometry import Rect, Vec2
from penplot.shapes import (
    get_arc_pnts,
    get_bezier_pnts,
    get_circle_pnts,
    get_oval_pnts,
    get_rounded_pnts,
    perspective_warp,
    pnts_to_lines,
    resample_lines,
)


def test_circle_points_lie_on_circle():
    center = Vec2(50, 60)
    pnts = get_circle_pnts(center, 20, 70)
    assert len(pnts) == 70
    for p in pnts:
        assert p.distance(center) == pytest.approx(20)


def test_circle_first_point_follows_offset():
    center = Vec2(10, 10)
    pnts = get_circle_pnts(center, 5, 8, math.pi / 2)
    assert pnts[0].x == pytest.approx(10)
    assert pnts[0].y == pytest.approx(15)


def test_oval_extents():
    pnts = get_oval_pnts(Vec2(0, 0), 30, 10, 4)
    assert pnts[0].x == pytest.approx(30)
    assert pnts[1].y == pytest.approx(10)
    assert max(abs(p.y) for p in pnts) == pytest.approx(10)


def test_rounded_rect_corner_points_on_arc():
    pnts = get_rounded_pnts(0, 0, 100, 50, 10, 4)
    corner_center = Vec2(90, 10)
    for p in pnts[2:5]:
        assert p.distance(corner_center) == pytest.approx(10)


def test_arc_includes_both_ends():
    center = Vec2(0, 0)
    pnts = get_arc_pnts(center, 10, 5, 0, math.pi)
    assert len(pnts) == 5
    assert pnts[0].x == pytest.approx(10)
    assert pnts[-1].x == pytest.approx(-10)
    assert pnts[-1].y == pytest.approx(0, abs=1e-9)


def test_arc_single_step_is_error():
    with pytest.raises(ValueError):
        get_arc_pnts(Vec2(0, 0), 10, 1, 0, 1)


def test_arc_height_scale():
    pnts = get_arc_pnts(Vec2(0, 0), 10, 3, 0, math.pi / 2, 0.5)
    assert pnts[-1].y == pytest.approx(5)


def test_resample_straight_line_even_spacing():
    pnts = resample_lines([Vec2(0, 0), Vec2(100, 0)], 10, False)
    assert pnts[0] == Vec2(0, 0)
    assert 10 <= len(pnts) <= 11
    for p in pnts:
        assert p.y == pytest.approx(0)
    for p, q in zip(pnts, pnts[1:]):
        assert p.distance(q) == pytest.approx(10, abs=1.01)


def test_resample_empty_is_error():
    with pytest.raises(ValueError):
        resample_lines([], 5, True)


def test_pnts_to_lines_open_and_closed():
    pts = [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1)]
    open_lines = pnts_to_lines(pts, False)
    closed_lines = pnts_to_lines(pts, True)
    assert len(open_lines) == 2
    assert len(closed_lines) == 3
    assert closed_lines[-1].a == pts[-1]
    assert closed_lines[-1].b == pts[0]
    for line, nxt in zip(open_lines, open_lines[1:]):
        assert line.b == nxt.a


def test_pnts_to_lines_empty_is_error():
    with pytest.raises(ValueError):
        pnts_to_lines([], True)


def test_bezier_endpoints_and_count():
    p1, c1, c2, p2 = Vec2(0, 0), Vec2(10, 30), Vec2(40, 30), Vec2(50, 0)
    pnts = get_bezier_pnts(p1, c1, c2, p2, 20)
    assert len(pnts) == 21
    assert pnts[0].x == pytest.approx(0) and pnts[0].y == pytest.approx(0)
    assert pnts[-1].x == pytest.approx(50) and pnts[-1].y == pytest.approx(0)


def test_perspective_warp_corners_map_to_quad():
    src = Rect(0, 0, 100, 100)
    quad = [Vec2(10, 10), Vec2(90, 20), Vec2(80, 95), Vec2(5, 85)]
    sources = [Vec2(0, 0), Vec2(100, 0), Vec2(100, 100), Vec2(0, 100)]
    for s, q in zip(sources, quad):
        w = perspective_warp(s, src, quad)
        assert w.x == pytest.approx(q.x)
        assert w.y == pytest.approx(q.y)


def test_perspective_warp_identity_quad():
    src = Rect(0, 0, 100, 50)
    quad = src.corners()
    w = perspective_warp(Vec2(30, 20), src, quad)
    assert w.x == pytest.approx(30)
    assert w.y == pytest.approx(20)


def test_perspective_warp_needs_four_corners():
    with pytest.raises(ValueError):
        perspective_warp(Vec2(0, 0), Rect(0, 0, 1, 1), [Vec2(0, 0)])