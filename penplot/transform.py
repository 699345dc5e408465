"""A stack of 2D affine transforms used to place drawn points."""

from __future__ import annotations

import math
from types import TracebackType

from penplot.geometry import Vec2

_IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class _Scope:
    """Context returned by Transform.push; pops the stack on exit."""

    def __init__(self, transform: Transform) -> None:
        self._transform = transform

    def __enter__(self) -> Transform:
        return self._transform

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._transform.pop()


class Transform:
    """Current model matrix with push/pop, as used by 2D sketching APIs.

    The matrix (a, b, c, d, e, f) maps (x, y) to
    (a*x + c*y + e, b*x + d*y + f). Each operation applies to points
    before the operations already in place.
    """

    def __init__(self) -> None:
        self.matrix: tuple[float, float, float, float, float, float] = _IDENTITY
        self._stack: list[tuple[float, float, float, float, float, float]] = []

    def translate(self, x: float, y: float) -> Transform:
        a, b, c, d, e, f = self.matrix
        self.matrix = (a, b, c, d, a * x + c * y + e, b * x + d * y + f)
        return self

    def rotate(self, angle: float) -> Transform:
        """Rotate by angle radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        a, b, c, d, e, f = self.matrix
        self.matrix = (
            a * cos + c * sin,
            b * cos + d * sin,
            -a * sin + c * cos,
            -b * sin + d * cos,
            e,
            f,
        )
        return self

    def scale(self, sx: float, sy: float | None = None) -> Transform:
        """Scale by sx and sy; sy defaults to sx."""
        if sy is None:
            sy = sx
        a, b, c, d, e, f = self.matrix
        self.matrix = (a * sx, b * sx, c * sy, d * sy, e, f)
        return self

    def apply(self, point: Vec2) -> Vec2:
        """Map a point through the current matrix."""
        a, b, c, d, e, f = self.matrix
        return Vec2(a * point.x + c * point.y + e, b * point.x + d * point.y + f)

    def is_identity(self) -> bool:
        return self.matrix == _IDENTITY

    def push(self) -> _Scope:
        """Save the current matrix; usable as a context manager that pops."""
        self._stack.append(self.matrix)
        return _Scope(self)

    def pop(self) -> None:
        """Restore the most recently pushed matrix."""
        if not self._stack:
            raise IndexError("pop from an empty transform stack")
        self.matrix = self._stack.pop()