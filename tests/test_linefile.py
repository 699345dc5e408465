import pytest

from penplot.geometry import Vec2
from penplot.gline import GLine
from penplot.linefile import load_lines, load_outlines, save_lines


def test_save_then_load_lines_round_trip(tmp_path):
    path = tmp_path / "lines.txt"
    lines = [GLine.from_coords(1, 2, 3, 4), GLine.from_coords(-5.5, 0, 10, 20.25)]
    save_lines(lines, path)
    loaded = load_lines(path)
    assert [(l.a, l.b) for l in loaded] == [(l.a, l.b) for l in lines]


def test_save_lines_format(tmp_path):
    path = tmp_path / "lines.txt"
    save_lines([GLine.from_coords(1, 2, 3, 4)], path)
    assert path.read_text() == "1,2,3,4\n"


def test_load_lines_skips_rows_without_four_values(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("1,2,3,4\n5,6\n\n7,8,9,10,11\n12,13,14,15\n")
    loaded = load_lines(path)
    assert [(l.a, l.b) for l in loaded] == [
        (Vec2(1, 2), Vec2(3, 4)),
        (Vec2(12, 13), Vec2(14, 15)),
    ]


def test_loaded_lines_have_default_flags(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("0,0,1,1\n")
    (line,) = load_lines(path)
    assert (line.skip_me, line.do_not_reverse, line.is_locked) == (False, False, False)


def test_load_outlines_splits_on_hash(tmp_path):
    path = tmp_path / "outlines.txt"
    path.write_text("0,0\n1,0\n1,1\n#\n5,5\n6,6\n")
    assert load_outlines(path) == [
        [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1)],
        [Vec2(5, 5), Vec2(6, 6)],
    ]


def test_load_outlines_single_point_carries_over(tmp_path):
    path = tmp_path / "outlines.txt"
    path.write_text("1,2\n#\n3,4\n")
    assert load_outlines(path) == [[Vec2(1, 2), Vec2(3, 4)]]


def test_load_outlines_drops_trailing_single_point(tmp_path):
    path = tmp_path / "outlines.txt"
    path.write_text("0,0\n1,1\n#\n9,9\n")
    assert load_outlines(path) == [[Vec2(0, 0), Vec2(1, 1)]]


def test_load_outlines_ignores_other_rows(tmp_path):
    path = tmp_path / "outlines.txt"
    path.write_text("0,0\n1,2,3\nhello\n2,2\n")
    assert load_outlines(path) == [[Vec2(0, 0), Vec2(2, 2)]]


def test_missing_files_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lines(tmp_path / "nope.txt")
    with pytest.raises(FileNotFoundError):
        load_outlines(tmp_path / "nope.txt")


def test_save_empty_lines_gives_empty_load(tmp_path):
    path = tmp_path / "empty.txt"
    save_lines([], path)
    assert load_lines(path) == []