"""Runs of connected lines gathered while sorting a drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from penplot.geometry import Vec2


class _LineLike(Protocol):
    a: Vec2
    b: Vec2
    do_not_reverse: bool


@dataclass
class LineGroup:
    """A continuous chain of lines with its start and end positions."""

    start_pos: Vec2 = field(default_factory=Vec2)
    end_pos: Vec2 = field(default_factory=Vec2)
    lines: list[Any] = field(default_factory=list)
    do_not_reverse: bool = False

    def clear(self) -> None:
        self.lines.clear()
        self.do_not_reverse = False

    def add_to_front(self, line: _LineLike) -> None:
        """Prepend a line whose end joins the chain's start."""
        self.lines.insert(0, line)
        self.start_pos = line.a
        if len(self.lines) == 1:
            self.end_pos = line.b
        if line.do_not_reverse:
            self.do_not_reverse = True

    def add_to_back(self, line: _LineLike) -> None:
        """Append a line whose start joins the chain's end."""
        self.lines.append(line)
        self.end_pos = line.b
        if len(self.lines) == 1:
            self.start_pos = line.a
        if line.do_not_reverse:
            self.do_not_reverse = True