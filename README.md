# penplot

A small toolkit for making drawings for pen plotters. You add lines and
shapes to a drawing, trim them against rectangles or polygons, let the
drawing reorder its lines to cut down on pen-up travel, and save the result
as G-code.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A first drawing

```python
from penplot.plotter import GCode

drawing = GCode(500, 500)      # canvas size; 100 pixels per inch by default

drawing.circle(250, 250, 100)
drawing.rect(20, 20, 100, 150)
for i in range(10):
    drawing.line(250, 100 + i * 20, 450, 100 + i * 20)

drawing.begin_shape()
drawing.vertex(50, 300)
drawing.vertex(130, 350)
drawing.vertex(50, 400)
drawing.end_shape(True)

drawing.sort()                 # reorder lines to reduce pen-up travel
drawing.save("my_first_drawing.nc")
```

Parts of lines that fall outside the canvas are clipped away; lines that
lie wholly outside are dropped. `set_size(w, h)` changes the canvas and
clears the drawing. `save` returns the number of commands written, and
`gcode_commands()` returns the G-code as a list of strings if you want it
without writing a file. Coordinates are written in inches
(`pixels_per_inch` converts), the pen is raised with `M3 S0` and lowered
with `M3 S<pen_down_value>` (60 by default).

Other drawing calls: `rounded_rect`, `polygon`, `bezier`, `thick_line`
(several parallel copies of a line), `dot`, `add_line` and `add_lines`
(which take `GLine` objects).

## Transformations

Every drawing has a 2D transform (`drawing.transform`), like the push/pop
matrix of creative-coding tools. Points passed to the drawing calls go
through it before they are stored. `drawing.matrix()` pushes the current
transform and, used as a context manager, pops it again on exit.

```python
with drawing.matrix():
    drawing.transform.translate(300, 300).rotate(0.3).scale(2)
    drawing.rect(-50, -50, 100, 100)
```

`model_point(x, y)` tells you where a point would land on the canvas.

## Trimming

Lines can be trimmed inside or outside a `Rect` or a polygon (a list of
`Vec2` points). The drawing methods `trim_inside` and `trim_outside` change
the lines already in the drawing; the functions in `penplot.trimming` take
a list of lines and return a new one, leaving the originals alone.

```python
from penplot.geometry import Vec2
from penplot.gline import GLine
from penplot.shapes import get_circle_pnts
from penplot.trimming import trim_lines_outside

circle = get_circle_pnts(Vec2(150, 150), 100, 70)
drawing.polygon(circle)

stripes = [GLine.from_coords(x, 0, x, 500) for x in range(0, 500, 18)]
drawing.add_lines(trim_lines_outside(stripes, circle))
```

`trim_intersecting_lines` drops every line that crosses any of a set of
fixed lines. `demo_trim(x1, y1, x2, y2)` keeps only a box of the drawing
and moves it to the origin.

## Plotting towards the edge

`set_outwards_only_bounds(safe_area)` turns lines that reach outside a
`Rect` so they are drawn from the inside outwards, and marks them
`do_not_reverse` so that `sort()` will not flip them. That keeps the pen
from catching the edge of the paper.

`lock_lines()` protects the lines already in the drawing from trimming and
moving, and locked lines at the front keep their place when sorting;
`unlock_lines()` releases them. `translate(x, y)` moves unlocked lines,
`rotate_ccw()` turns the whole drawing a quarter turn, and
`measure_transit_distance()` sums the pen-down length.

## Shape helpers

`penplot.shapes` returns point lists without drawing anything:
`get_circle_pnts`, `get_oval_pnts`, `get_arc_pnts`, `get_rounded_pnts`,
`get_bezier_pnts`, `resample_lines` (even spacing along a polyline),
`pnts_to_lines`, and `perspective_warp` of a point into a quadrilateral.

`penplot.geometry` holds `Vec2`, `Rect`, `segment_intersection`,
`bezier_point` and `check_in_polygon`; `penplot.clipping` holds the
rectangular `Clipping` region used by the canvas.

## Line files

`penplot.linefile` reads and writes a plain comma-separated format for
moving sets of segments between projects: `save_lines(lines, path)`,
`load_lines(path)`, and `load_outlines(path)` for `#`-separated point
lists. This is not G-code; use `GCode.save` for the plotter.

## What it does not do

There is no on-screen preview: drawings exist only as lines in memory and
as the G-code you save. Text is not drawn either. The modules
`penplot.glyphs_symbols` and `penplot.glyphs_letters` hold the stroke data
of a single-stroke simplex font as plain tables (advance width and
vertices per character code), but nothing in the package turns a string
into lines.