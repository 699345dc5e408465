"""A line between two 2D points, with helpers for cutting and trimming."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

from penplot.geometry import Rect, Vec2, check_in_polygon, segment_intersection

_PULL_PRC = 0.0001

Polygon = Union[Rect, Sequence[Vec2]]


def rect_polygon(rect: Rect) -> list[Vec2]:
    """The corners of a rectangle as a closed polygon."""
    return rect.corners()


def check_point_on_line(t: Vec2, p1: Vec2, p2: Vec2) -> bool:
    """True if point t lies on the segment p1-p2."""
    ab = math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)
    ap = math.sqrt((t.x - p1.x) ** 2 + (t.y - p1.y) ** 2)
    pb = math.sqrt((p2.x - t.x) ** 2 + (p2.y - t.y) ** 2)
    return ab == ap + pb


def _as_points(polygon: Polygon) -> list[Vec2]:
    if isinstance(polygon, Rect):
        return rect_polygon(polygon)
    return list(polygon)


@dataclass
class GLine:
    """A line from a to b with flags used when plotting.

    skip_me marks a line that should not be drawn, do_not_reverse keeps
    the sorter from flipping it, and is_locked protects it from trimming
    and moving.
    """

    a: Vec2 = field(default_factory=Vec2)
    b: Vec2 = field(default_factory=Vec2)
    skip_me: bool = False
    do_not_reverse: bool = False
    is_locked: bool = False

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> GLine:
        """Build a line from four coordinates."""
        return cls(Vec2(x1, y1), Vec2(x2, y2))

    # --- utilities

    def offset(self, offset: Vec2) -> GLine:
        """A new line moved by offset; flags are not copied."""
        return GLine(self.a + offset, self.b + offset)

    def segments(self, num_segments: int) -> list[GLine]:
        """Split the line into evenly spaced pieces."""
        pieces = []
        prev = self.a
        for i in range(1, num_segments + 1):
            pos = self.a.lerp(self.b, i / num_segments)
            pieces.append(GLine(prev, pos))
            prev = pos
        return pieces

    def length(self) -> float:
        return self.a.distance(self.b)

    def point(self, index: int) -> Vec2:
        """Point a for index 0, point b for anything else."""
        return self.a if index == 0 else self.b

    def bounds(self, padding: float) -> list[Vec2]:
        """Four corners of a box around the line, padding away from it."""
        angle = math.atan2(self.b.y - self.a.y, self.b.x - self.a.x)
        tan_angle = angle + math.pi / 2
        along = Vec2(math.cos(angle) * padding, math.sin(angle) * padding)
        across = Vec2(math.cos(tan_angle) * padding, math.sin(tan_angle) * padding)
        push_a = self.a - along
        push_b = self.b + along
        return [push_a + across, push_a - across, push_b - across, push_b + across]

    # --- intersection

    def intersection(self, other: GLine) -> Vec2 | None:
        """The point where this line crosses other, or None."""
        return segment_intersection(self.a, self.b, other.a, other.b)

    def intersects(self, other: GLine) -> bool:
        return self.intersection(other) is not None

    # --- clipping

    def clip_to(self, other: GLine | tuple[Vec2, Vec2]) -> bool:
        """Move b to where this line meets other; True if they meet."""
        if not isinstance(other, GLine):
            other = GLine(*other)
        hit = self.intersection(other)
        if hit is None:
            return False
        self.b = hit
        return True

    def swap(self) -> None:
        """Exchange a and b."""
        self.a, self.b = self.b, self.a

    # --- trimming

    def trim_inside(self, polygon: Polygon) -> list[GLine]:
        """Remove the parts of the line inside polygon.

        The line itself keeps the first remaining piece (or gets skip_me
        set); any further pieces are returned as new lines.
        """
        return self._trim(_as_points(polygon), trim_inside=True)

    def trim_outside(self, polygon: Polygon) -> list[GLine]:
        """Remove the parts of the line outside polygon.

        The line itself keeps the first remaining piece (or gets skip_me
        set); any further pieces are returned as new lines.
        """
        return self._trim(_as_points(polygon), trim_inside=False)

    def _trim(self, pnts: list[Vec2], trim_inside: bool) -> list[GLine]:
        if self.is_locked or not pnts:
            return []

        edges = [(p, pnts[(i + 1) % len(pnts)]) for i, p in enumerate(pnts)]

        # endpoints lying exactly on an edge are nudged toward each other
        for p1, p2 in edges:
            a_on = check_point_on_line(self.a, p1, p2)
            b_on = check_point_on_line(self.b, p1, p2)
            if a_on and b_on:
                self.skip_me = True
                return []
            if a_on:
                self.a = self.a.lerp(self.b, _PULL_PRC)
            if b_on:
                self.b = self.b.lerp(self.a, _PULL_PRC)

        a_in = check_in_polygon(pnts, self.a)
        b_in = check_in_polygon(pnts, self.b)

        cuts: list[Vec2] = []
        if a_in != trim_inside:
            cuts.append(self.a)

        crossings = [
            hit
            for p1, p2 in edges
            if (hit := segment_intersection(self.a, self.b, p1, p2)) is not None
        ]
        cuts.extend(sorted(crossings, key=self.a.squared_distance))

        if b_in != trim_inside:
            cuts.append(self.b)

        if len(cuts) % 2 == 1 or len(cuts) <= 1:
            self.skip_me = True
            return []

        self.a, self.b = cuts[0], cuts[1]
        return [GLine(cuts[i], cuts[i + 1]) for i in range(2, len(cuts), 2)]