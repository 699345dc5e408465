"""Masking sets of lines against polygons and other lines."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence, Union

from penplot.geometry import Rect, Vec2
from penplot.gline import GLine

Bounds = Union[Rect, Sequence[Vec2]]


def as_polygon(bounds: Bounds) -> list[Vec2]:
    """The bounds as a list of polygon corners."""
    if isinstance(bounds, Rect):
        return bounds.corners()
    return list(bounds)


def _trim(lines: Iterable[GLine], bounds: Bounds, inside: bool) -> list[GLine]:
    polygon = as_polygon(bounds)
    output: list[GLine] = []
    for original in lines:
        line = dataclasses.replace(original)
        extras = line.trim_inside(polygon) if inside else line.trim_outside(polygon)
        output.extend(extras)
        if not line.skip_me:
            output.append(line)
    return output


def trim_lines_inside(lines: Iterable[GLine], bounds: Bounds) -> list[GLine]:
    """New lines with every part inside bounds removed.

    The given lines are not changed.
    """
    return _trim(lines, bounds, inside=True)


def trim_lines_outside(lines: Iterable[GLine], bounds: Bounds) -> list[GLine]:
    """New lines with every part outside bounds removed.

    The given lines are not changed.
    """
    return _trim(lines, bounds, inside=False)


def trim_intersecting_lines(
    lines_to_trim: Iterable[GLine], static_lines: Sequence[GLine]
) -> list[GLine]:
    """The lines of lines_to_trim that cross none of static_lines."""
    return [
        line
        for line in lines_to_trim
        if not any(line.intersects(other) for other in static_lines)
    ]