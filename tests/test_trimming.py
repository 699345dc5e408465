import pytest

from penplot.geometry import Rect, Vec2
from penplot.gline import GLine
from penplot.trimming import (
    as_polygon,
    trim_intersecting_lines,
    trim_lines_inside,
    trim_lines_outside,
)

BOX = Rect(5, 0, 10, 10)


def _rounded(line):
    return (
        round(line.a.x, 6),
        round(line.a.y, 6),
        round(line.b.x, 6),
        round(line.b.y, 6),
    )


def test_as_polygon_from_rect_and_list():
    assert as_polygon(BOX) == BOX.corners()
    pts = (Vec2(0, 0), Vec2(1, 0), Vec2(0, 1))
    assert as_polygon(pts) == list(pts)


def test_trim_inside_splits_line_in_two():
    line = GLine.from_coords(0, 5, 20, 5)
    result = trim_lines_inside([line], BOX)
    assert len(result) == 2
    assert {_rounded(l) for l in result} == {(15, 5, 20, 5), (0, 5, 5, 5)}


def test_trim_inside_does_not_change_input():
    line = GLine.from_coords(0, 5, 20, 5)
    trim_lines_inside([line], BOX)
    assert line == GLine.from_coords(0, 5, 20, 5)


def test_trim_outside_keeps_middle():
    line = GLine.from_coords(0, 5, 20, 5)
    result = trim_lines_outside([line], BOX)
    assert [_rounded(l) for l in result] == [(5, 5, 15, 5)]


def test_trim_inside_removes_enclosed_line():
    line = GLine.from_coords(7, 5, 12, 5)
    assert trim_lines_inside([line], BOX) == []


def test_trim_outside_removes_line_outside():
    line = GLine.from_coords(20, 20, 30, 20)
    assert trim_lines_outside([line], BOX) == []


def test_trim_with_polygon_list_matches_rect():
    line = GLine.from_coords(0, 5, 20, 5)
    by_rect = trim_lines_outside([line], BOX)
    by_list = trim_lines_outside([line], BOX.corners())
    assert [_rounded(l) for l in by_rect] == [_rounded(l) for l in by_list]


def test_locked_lines_are_kept_whole():
    line = GLine.from_coords(7, 5, 12, 5)
    line.is_locked = True
    result = trim_lines_inside([line], BOX)
    assert len(result) == 1
    assert _rounded(result[0]) == (7, 5, 12, 5)


def test_trim_intersecting_lines():
    crossing = GLine.from_coords(0, 0, 10, 10)
    apart = GLine.from_coords(20, 20, 30, 20)
    wall = GLine.from_coords(0, 10, 10, 0)
    result = trim_intersecting_lines([crossing, apart], [wall])
    assert result == [apart]


def test_trim_intersecting_lines_without_static_keeps_all():
    lines = [GLine.from_coords(0, 0, 1, 1), GLine.from_coords(2, 2, 3, 3)]
    assert trim_intersecting_lines(lines, []) == lines


def test_trim_result_lengths_sum():
    line = GLine.from_coords(0, 5, 20, 5)
    inside = trim_lines_inside([line], BOX)
    outside = trim_lines_outside([line], BOX)
    total = sum(l.length() for l in inside) + sum(l.length() for l in outside)
    assert total == pytest.approx(line.length())