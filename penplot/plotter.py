"""A plotter drawing: a collection of lines that becomes one G-code file."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Sequence, Union

from penplot.clipping import Clipping
from penplot.geometry import Rect, Vec2
from penplot.gline import GLine
from penplot.line_group import LineGroup
from penplot.shapes import get_bezier_pnts, get_rounded_pnts
from penplot.transform import Transform
from penplot.trimming import trim_lines_inside, trim_lines_outside

Bounds = Union[Rect, Sequence[Vec2]]

_FAR_A = 9999999.0
_FAR_B = 99999999.0


def _fmt(value: float) -> str:
    return f"{value:g}"


class GCode:
    """One pass of a pen plotter, built from lines in pixel units.

    Lines are placed through the current transform and clipped to the
    canvas. pixels_per_inch converts pixels to inches on the page.
    """

    def __init__(
        self, width: float, height: float, pixels_per_inch: float = 100.0
    ) -> None:
        self.pixels_per_inch = pixels_per_inch
        self.circle_resolution = 50
        self.pen_down_value = 60
        self.shape_pnts: list[Vec2] = []
        self.lines: list[GLine] = []
        self.transform = Transform()
        self.clip = Clipping()
        self.set_size(width, height)

    # --- setup

    def set_size(self, w: float, h: float) -> None:
        """Change the canvas size; this also clears the drawing."""
        self.clip = Clipping.from_corners(Vec2(0, 0), Vec2(w, h))
        self.clear()

    def clear(self) -> None:
        """Remove every line from the drawing."""
        self.lines.clear()

    # --- transforms

    def matrix(self):
        """Push the transform; use as a context manager that pops on exit."""
        return self.transform.push()

    def model_point(self, x: float | Vec2, y: float | None = None) -> Vec2:
        """Where a point lands on the canvas under the current transform."""
        point = x if isinstance(x, Vec2) else Vec2(x, y if y is not None else 0.0)
        if self.transform.is_identity():
            return point
        return self.transform.apply(point)

    def convert_pnts_to_model_point(self, src_pnts: Iterable[Vec2]) -> list[Vec2]:
        return [self.model_point(p) for p in src_pnts]

    def convert_lines_to_model_point(self, src_lines: Iterable[GLine]) -> list[GLine]:
        """Transformed copies of the lines; flags are not carried over."""
        return [GLine(self.model_point(l.a), self.model_point(l.b)) for l in src_lines]

    # --- shapes

    def rect(
        self,
        x: float | Rect,
        y: float | None = None,
        w: float | None = None,
        h: float | None = None,
    ) -> None:
        """Draw a rectangle, given as a Rect or as x, y, w, h."""
        if isinstance(x, Rect):
            x, y, w, h = x.x, x.y, x.width, x.height
        self.line(x, y, x + w, y)
        self.line(x + w, y, x + w, y + h)
        self.line(x + w, y + h, x, y + h)
        self.line(x, y + h, x, y)

    def rounded_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        corner_size: float,
        corner_resolution: int = 10,
    ) -> None:
        self.polygon(get_rounded_pnts(x, y, w, h, corner_size, corner_resolution))

    def circle(self, x: float, y: float, size: float) -> None:
        """Draw a circle of radius size using circle_resolution points."""
        angle_step = math.tau / self.circle_resolution
        self.begin_shape()
        for i in range(self.circle_resolution):
            angle = angle_step * i
            self.vertex(x + math.sin(angle) * size, y + math.cos(angle) * size)
        self.end_shape(True)

    def begin_shape(self) -> None:
        self.shape_pnts.clear()

    def vertex(self, x: float | Vec2, y: float | None = None) -> None:
        self.shape_pnts.append(x if isinstance(x, Vec2) else Vec2(x, y))

    def end_shape(self, close: bool) -> None:
        """Draw lines through the collected vertices."""
        pnts = self.shape_pnts
        if len(pnts) < 2:
            return
        for p, q in zip(pnts, pnts[1:]):
            self.line(p.x, p.y, q.x, q.y)
        if close:
            self.line(pnts[-1].x, pnts[-1].y, pnts[0].x, pnts[0].y)

    def polygon(self, pnts: Iterable[Vec2], close_shape: bool = True) -> None:
        self.begin_shape()
        for p in pnts:
            self.vertex(p)
        self.end_shape(close_shape)

    # --- lines

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Add a line, transformed and clipped; invisible lines are dropped."""
        clipped = self.clip.clip(self.model_point(x1, y1), self.model_point(x2, y2))
        if clipped is None:
            return
        self.lines.append(GLine(*clipped))

    def add_line(self, line: GLine) -> None:
        """Add a line at the position of line; its flags are not copied."""
        if line.skip_me:
            return
        self.line(line.a.x, line.a.y, line.b.x, line.b.y)

    def add_lines(self, new_lines: Iterable[GLine]) -> None:
        for line in new_lines:
            self.add_line(line)

    def thick_line(self, a: Vec2, b: Vec2, spacing: float, layers: int) -> None:
        """Draw layers parallel copies of a-b, spacing apart and centred."""
        tan_angle = math.atan2(a.y - b.y, a.x - b.x) + math.pi / 2
        dist_offset = spacing * (layers - 1) * 0.5
        for t in range(layers):
            dist = t * spacing - dist_offset
            shift = Vec2(math.cos(tan_angle) * dist, math.sin(tan_angle) * dist)
            self.line(*(a + shift), *(b + shift))

    def bezier(self, p1: Vec2, c1: Vec2, c2: Vec2, p2: Vec2, steps: int = 50) -> None:
        self.polygon(get_bezier_pnts(p1, c1, c2, p2, steps), close_shape=False)

    def dot(self, x: float, y: float) -> None:
        """Add a zero-length line."""
        self.line(x, y, x, y)

    # --- optimising

    def sort(self) -> None:
        """Reorder and flip lines to cut down travel with the pen up.

        Locked lines at the front stay there in their order.
        """
        remaining = list(self.lines)
        if not remaining:
            return

        leading_locked: list[GLine] = []
        while remaining and remaining[0].is_locked:
            leading_locked.append(remaining.pop(0))

        groups: list[LineGroup] = []
        cur = LineGroup()
        while remaining:
            if not cur.lines:
                cur.add_to_front(remaining.pop(0))
            added_any = False
            for i in reversed(range(len(remaining))):
                line = remaining[i]
                if line.a == cur.end_pos:
                    cur.add_to_back(line)
                    del remaining[i]
                    added_any = True
                elif line.b == cur.start_pos:
                    cur.add_to_front(line)
                    del remaining[i]
                    added_any = True
            if not added_any:
                groups.append(cur)
                cur = LineGroup()
        if cur.lines:
            groups.append(cur)

        ordered = leading_locked
        cur_pnt = Vec2()
        while groups:
            close_id = 0
            close_dist_sq = _FAR_A
            need_to_flip = False
            for i, group in enumerate(groups):
                dist_sq_a = group.start_pos.squared_distance(cur_pnt)
                dist_sq_b = _FAR_B
                if not group.do_not_reverse:
                    dist_sq_b = group.end_pos.squared_distance(cur_pnt)
                if dist_sq_b < close_dist_sq:
                    close_dist_sq = dist_sq_b
                    need_to_flip = True
                    close_id = i
                if dist_sq_a < close_dist_sq:
                    close_dist_sq = dist_sq_a
                    need_to_flip = False
                    close_id = i

            group = groups.pop(close_id)
            if need_to_flip:
                for line in reversed(group.lines):
                    line.swap()
                    ordered.append(line)
                cur_pnt = group.start_pos
            else:
                ordered.extend(group.lines)
                cur_pnt = group.end_pos

        self.lines = ordered

    def lock_lines(self) -> None:
        """Protect every current line from trimming and moving."""
        for line in self.lines:
            line.is_locked = True

    def unlock_lines(self) -> None:
        for line in self.lines:
            line.is_locked = False

    def measure_transit_distance(self) -> float:
        """Total pen-down length of the drawing."""
        return sum(line.length() for line in self.lines)

    # --- trimming

    def trim_inside(self, bounds: Bounds) -> None:
        """Remove every part of the drawing inside bounds."""
        self.lines = trim_lines_inside(self.lines, bounds)

    def trim_outside(self, bounds: Bounds) -> None:
        """Remove every part of the drawing outside bounds."""
        self.lines = trim_lines_outside(self.lines, bounds)

    def demo_trim(
        self, x1: float, y1: float, x2: float, y2: float, do_translate: bool = True
    ) -> None:
        """Keep only the box x1, y1 to x2, y2, optionally moved to the origin."""
        self.trim_outside(Rect(x1, y1, x2 - x1, y2 - y1))
        if do_translate:
            self.translate(-x1, -y1)

    # --- other tools

    def set_outwards_only_bounds(self, safe_area: Rect) -> None:
        """Make lines reaching outside safe_area draw from the inside out."""
        center = Vec2(
            safe_area.x + safe_area.width / 2, safe_area.y + safe_area.height / 2
        )
        i = 0
        while i < len(self.lines):
            line = self.lines[i]
            if line.is_locked:
                i += 1
                continue
            a_inside = safe_area.inside(line.a)
            b_inside = safe_area.inside(line.b)
            if a_inside and b_inside:
                line.do_not_reverse = False
            elif a_inside:
                line.do_not_reverse = True
            elif b_inside:
                line.swap()
                line.do_not_reverse = True
            else:
                mid = line.a * 0.5 + line.b * 0.5
                if safe_area.inside(mid):
                    self.lines.append(GLine(mid, line.b))
                    line.b = mid
                    continue  # look at the shortened line again
                if center.squared_distance(line.a) > center.squared_distance(line.b):
                    line.swap()
                line.do_not_reverse = True
            i += 1

    def translate(self, x: float, y: float) -> None:
        """Move every unlocked line by x, y."""
        shift = Vec2(x, y)
        for line in self.lines:
            if not line.is_locked:
                line.a += shift
                line.b += shift

    def rotate_ccw(self) -> None:
        """Turn the drawing a quarter counter-clockwise; width and height swap."""
        orig_w = self.clip.max.x
        orig_h = self.clip.max.y
        for line in self.lines:
            line.a = Vec2(line.a.y, orig_w - line.a.x)
            line.b = Vec2(line.b.y, orig_w - line.b.x)
        self.clip = Clipping.from_corners(Vec2(0, 0), Vec2(orig_h, orig_w))

    # --- output

    def gcode_commands(self) -> list[str]:
        """The drawing as G-code commands, in inches."""
        inches_per_pixel = 1.0 / self.pixels_per_inch
        commands = ["M3 S0", "G0 X0 Y0"]
        last_pos = Vec2(0, 0)
        for line in self.lines:
            pos_a = line.a * inches_per_pixel
            pos_b = line.b * inches_per_pixel
            if pos_a != last_pos:
                commands.append("M3 S0")
                commands.append(f"G0 X{_fmt(pos_a.x)} Y{_fmt(pos_a.y)}")
                commands.append(f"M3 S{self.pen_down_value}")
            commands.append(f"G1 X{_fmt(pos_b.x)} Y{_fmt(pos_b.y)}")
            last_pos = pos_b
        commands.append("M3 S0")
        commands.append("G0 X0 Y0")
        return commands

    def save(self, path: str | Path) -> int:
        """Write the G-code to path; returns the number of commands."""
        commands = self.gcode_commands()
        Path(path).write_text("".join(f"{c}\n" for c in commands))
        return len(commands)