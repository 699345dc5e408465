"""Basic 2D geometry: points, rectangles, intersections and polygon tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def squared_distance(self, other: Vec2) -> float:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def length(self) -> float:
        """Length of the vector from the origin."""
        return math.hypot(self.x, self.y)

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation: t=0 gives self, t=1 gives other."""
        return Vec2(
            (1.0 - t) * self.x + t * other.x,
            (1.0 - t) * self.y + t * other.y,
        )


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, p0: Vec2, p1: Vec2) -> Rect:
        """Build the rectangle spanned by two opposite corners."""
        left, right = sorted((p0.x, p1.x))
        top, bottom = sorted((p0.y, p1.y))
        return cls(left, top, right - left, bottom - top)

    def inside(self, point: Vec2) -> bool:
        """True if the point lies within the rectangle, edges included."""
        min_x, max_x = sorted((self.x, self.x + self.width))
        min_y, max_y = sorted((self.y, self.y + self.height))
        return min_x <= point.x <= max_x and min_y <= point.y <= max_y

    def corners(self) -> list[Vec2]:
        """The four corners, starting at the origin and going round."""
        return [
            Vec2(self.x, self.y),
            Vec2(self.x + self.width, self.y),
            Vec2(self.x + self.width, self.y + self.height),
            Vec2(self.x, self.y + self.height),
        ]


def segment_intersection(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> Vec2 | None:
    """Return the point where segments a1-a2 and b1-b2 cross, or None."""
    diff_a = a2 - a1
    diff_b = b2 - b1
    compare_a = diff_a.x * a1.y - diff_a.y * a1.x
    compare_b = diff_b.x * b1.y - diff_b.y * b1.x

    def side(diff: Vec2, p: Vec2, compare: float) -> bool:
        return (diff.x * p.y - diff.y * p.x) < compare

    b_straddles_a = side(diff_a, b1, compare_a) != side(diff_a, b2, compare_a)
    a_straddles_b = side(diff_b, a1, compare_b) != side(diff_b, a2, compare_b)
    if not (b_straddles_a and a_straddles_b):
        return None

    det = diff_a.x * diff_b.y - diff_a.y * diff_b.x
    if det == 0:
        return None
    inv = 1.0 / det
    return Vec2(
        -(diff_a.x * compare_b - compare_a * diff_b.x) * inv,
        -(diff_a.y * compare_b - compare_a * diff_b.y) * inv,
    )


def bezier_point(p1: Vec2, c1: Vec2, c2: Vec2, p2: Vec2, t: float) -> Vec2:
    """Point at parameter t on the cubic Bezier curve p1, c1, c2, p2."""
    u = 1.0 - t
    w0 = u * u * u
    w1 = 3.0 * u * u * t
    w2 = 3.0 * u * t * t
    w3 = t * t * t
    return Vec2(
        w0 * p1.x + w1 * c1.x + w2 * c2.x + w3 * p2.x,
        w0 * p1.y + w1 * c1.y + w2 * c2.y + w3 * p2.y,
    )


def check_in_polygon(polygon: Sequence[Vec2], point: Vec2) -> bool:
    """Even-odd test: True if the point lies inside the polygon."""
    if not polygon:
        return False
    inside = False
    x, y = point.x, point.y
    previous = polygon[-1]
    for current in polygon:
        crosses = (current.y <= y < previous.y) or (previous.y <= y < current.y)
        if crosses:
            edge_x = (previous.x - current.x) * (y - current.y) / (
                previous.y - current.y
            ) + current.x
            if x < edge_x:
                inside = not inside
        previous = current
    return inside