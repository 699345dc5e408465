"""Point generators for common shapes and helpers for point lists."""

from __future__ import annotations

import math
from typing import Sequence

from penplot.geometry import Rect, Vec2, bezier_point
from penplot.gline import GLine


def _map_range(value: float, in_max: float, out_min: float, out_max: float) -> float:
    return out_min + (out_max - out_min) * (value / in_max)


def get_rounded_pnts(
    x: float,
    y: float,
    w: float,
    h: float,
    corner_size: float,
    corner_resolution: int = 10,
) -> list[Vec2]:
    """Outline of a rectangle with rounded corners.

    The points are not evenly spaced: each corner gets
    corner_resolution - 1 points between the straight edges.
    """
    half_pi = math.pi / 2
    corners = [
        # (edge start point, arc center, start angle, end angle)
        (Vec2(x + w - corner_size, y), Vec2(x + w - corner_size, y + corner_size),
         -half_pi, 0.0),
        (Vec2(x + w, y + h - corner_size),
         Vec2(x + w - corner_size, y + h - corner_size), 0.0, half_pi),
        (Vec2(x + corner_size, y + h), Vec2(x + corner_size, y + h - corner_size),
         half_pi, math.pi),
        (Vec2(x, y + corner_size), Vec2(x + corner_size, y + corner_size),
         math.pi, 3 * math.pi / 2),
    ]

    pnts = [Vec2(x + corner_size, y)]
    for edge_end, center, start, end in corners:
        pnts.append(edge_end)
        for i in range(1, corner_resolution):
            angle = _map_range(i, corner_resolution, start, end)
            pnts.append(
                Vec2(
                    center.x + math.cos(angle) * corner_size,
                    center.y + math.sin(angle) * corner_size,
                )
            )
    return pnts


def get_oval_pnts(
    center: Vec2,
    width: float,
    height: float,
    steps: int,
    angle_offset: float = 0.0,
) -> list[Vec2]:
    """Points on an ellipse with radii width and height."""
    angle_step = math.tau / steps if steps else 0.0
    return [
        Vec2(
            center.x + math.cos(angle_offset + angle_step * i) * width,
            center.y + math.sin(angle_offset + angle_step * i) * height,
        )
        for i in range(steps)
    ]


def get_circle_pnts(
    center: Vec2, size: float, steps: int, angle_offset: float = 0.0
) -> list[Vec2]:
    """Points on a circle of radius size; steps is the resolution."""
    return get_oval_pnts(center, size, size, steps, angle_offset)


def get_arc_pnts(
    center: Vec2,
    size: float,
    steps: int,
    start_angle: float,
    end_angle: float,
    height_scale: float = 1.0,
) -> list[Vec2]:
    """Points along an arc, both end angles included."""
    if steps < 1:
        return []
    if steps == 1:
        raise ValueError("an arc needs at least two steps")
    pnts = []
    for i in range(steps):
        prc = i / (steps - 1)
        angle = (1.0 - prc) * start_angle + prc * end_angle
        pnts.append(
            Vec2(
                center.x + math.cos(angle) * size,
                center.y + math.sin(angle) * size * height_scale,
            )
        )
    return pnts


def resample_lines(
    src_pnts: Sequence[Vec2],
    sample_dist: float,
    close_shape: bool,
    steps_per_point: int = 100,
) -> list[Vec2]:
    """Resample a polyline into points roughly sample_dist apart.

    The result follows the same shape; the conversion is lossy.
    """
    if not src_pnts:
        raise ValueError("cannot resample an empty point list")
    count = len(src_pnts)
    end_index = count if close_shape else count - 1

    new_pnts = [src_pnts[0]]
    cur_dist = 0.0
    prev_pos = src_pnts[0]
    for i in range(end_index):
        a = src_pnts[i]
        b = src_pnts[(i + 1) % count]
        for k in range(steps_per_point + 1):
            pnt = a.lerp(b, k / steps_per_point)
            cur_dist += prev_pos.distance(pnt)
            if cur_dist >= sample_dist:
                new_pnts.append(pnt)
                cur_dist -= sample_dist
            prev_pos = pnt
    return new_pnts


def pnts_to_lines(pnts: Sequence[Vec2], close: bool) -> list[GLine]:
    """Lines joining consecutive points, plus last-to-first when close."""
    if not pnts:
        raise ValueError("cannot make lines from an empty point list")
    lines = [GLine(p, q) for p, q in zip(pnts, pnts[1:])]
    if close:
        lines.append(GLine(pnts[-1], pnts[0]))
    return lines


def get_bezier_pnts(
    p1: Vec2, c1: Vec2, c2: Vec2, p2: Vec2, steps: int
) -> list[Vec2]:
    """steps + 1 points along a cubic Bezier curve, both ends included."""
    return [bezier_point(p1, c1, c2, p2, i / steps) for i in range(steps + 1)]


def perspective_warp(
    orig_pnt: Vec2,
    src_bounds: Rect,
    new_bounds: Sequence[Vec2],
    x_curve: float = 1.0,
    y_curve: float = 1.0,
) -> Vec2:
    """Map a point from src_bounds into the quad new_bounds.

    new_bounds holds the corners top left, top right, bottom right,
    bottom left. x_curve and y_curve bend the mapping exponentially.
    """
    if len(new_bounds) != 4:
        raise ValueError("new_bounds must hold exactly four corners")
    top_left, top_right, bottom_right, bottom_left = new_bounds

    x_prc = (orig_pnt.x - src_bounds.x) / src_bounds.width
    y_prc = (orig_pnt.y - src_bounds.y) / src_bounds.height
    x_prc = math.pow(x_prc, x_curve)
    y_prc = math.pow(y_prc, y_curve)

    top_pnt = top_left.lerp(top_right, x_prc)
    bot_pnt = bottom_left.lerp(bottom_right, x_prc)
    return top_pnt.lerp(bot_pnt, y_prc)