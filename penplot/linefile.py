"""A simple comma-separated text format for moving lines between projects.

Lines are stored one per row as ``ax,ay,bx,by``. Outline files hold one
``x,y`` point per row, with a row starting with ``#`` beginning a new
shape. This is not G-code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from penplot.geometry import Vec2
from penplot.gline import GLine


def _to_float(word: str) -> float:
    try:
        return float(word)
    except ValueError:
        return 0.0


def _rows(file_path: str | Path) -> list[list[str]]:
    text = Path(file_path).read_text()
    return [row.split(",") for row in text.splitlines()]


def _fmt(value: float) -> str:
    return f"{value:g}"


def load_outlines(file_path: str | Path) -> list[list[Vec2]]:
    """Read point outlines; shapes with fewer than two points are dropped.

    Raises FileNotFoundError if the file does not exist.
    """
    outlines: list[list[Vec2]] = []
    current: list[Vec2] = []
    for words in _rows(file_path):
        if not words:
            continue
        if words[0] == "#":
            if len(current) > 1:
                outlines.append(current)
                current = []
        elif len(words) == 2:
            current.append(Vec2(_to_float(words[0]), _to_float(words[1])))
    if len(current) > 1:
        outlines.append(current)
    return outlines


def load_lines(file_path: str | Path) -> list[GLine]:
    """Read lines stored as ``ax,ay,bx,by``; other rows are ignored.

    Raises FileNotFoundError if the file does not exist.
    """
    return [
        GLine.from_coords(*(_to_float(w) for w in words))
        for words in _rows(file_path)
        if len(words) == 4
    ]


def save_lines(lines: Iterable[GLine], file_path: str | Path) -> None:
    """Write lines as ``ax,ay,bx,by`` rows."""
    rows = (
        f"{_fmt(l.a.x)},{_fmt(l.a.y)},{_fmt(l.b.x)},{_fmt(l.b.y)}\n" for l in lines
    )
    Path(file_path).write_text("".join(rows))