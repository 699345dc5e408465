"""Cohen-Sutherland clipping of segments to a rectangular region."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from penplot.geometry import Vec2


class Outcode(IntFlag):
    """Region code of a point relative to the clipping rectangle."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def intercept(y: float, x0: float, y0: float, x1: float, y1: float) -> float:
    """The x at which the line through (x0, y0) and (x1, y1) reaches y."""
    return x0 + (x1 - x0) * (y - y0) / (y1 - y0)


@dataclass
class Clipping:
    """A rectangular clipping region between min and max."""

    min: Vec2 = field(default_factory=Vec2)
    max: Vec2 = field(default_factory=Vec2)

    @classmethod
    def from_corners(cls, p0: Vec2, p1: Vec2) -> Clipping:
        """Build the region spanned by two opposite corners."""
        return cls(
            Vec2(min(p0.x, p1.x), min(p0.y, p1.y)),
            Vec2(max(p0.x, p1.x), max(p0.y, p1.y)),
        )

    def compute_code(self, p: Vec2) -> Outcode:
        """The outcode of a point."""
        code = Outcode.INSIDE
        if p.x < self.min.x:
            code |= Outcode.LEFT
        if p.x > self.max.x:
            code |= Outcode.RIGHT
        if p.y < self.min.y:
            code |= Outcode.BOTTOM
        if p.y > self.max.y:
            code |= Outcode.TOP
        return code

    def clip(self, p0: Vec2, p1: Vec2) -> tuple[Vec2, Vec2] | None:
        """Clip the segment p0-p1 to the region.

        Returns the clipped endpoints, or None if no part is visible.
        """
        code0 = self.compute_code(p0)
        code1 = self.compute_code(p1)
        while True:
            if not (code0 | code1):
                return p0, p1
            if code0 & code1:
                return None

            code = code0 or code1
            if code & Outcode.TOP:
                y = self.max.y
                x = intercept(y, p0.x, p0.y, p1.x, p1.y)
            elif code & Outcode.BOTTOM:
                y = self.min.y
                x = intercept(y, p0.x, p0.y, p1.x, p1.y)
            elif code & Outcode.RIGHT:
                x = self.max.x
                y = intercept(x, p0.y, p0.x, p1.y, p1.x)
            else:
                x = self.min.x
                y = intercept(x, p0.y, p0.x, p1.y, p1.x)

            if code0:
                p0 = Vec2(x, y)
                code0 = self.compute_code(p0)
            else:
                p1 = Vec2(x, y)
                code1 = self.compute_code(p1)

    def check_point(self, pnt: Vec2) -> bool:
        """True if the point lies inside the region."""
        return self.compute_code(pnt) == Outcode.INSIDE