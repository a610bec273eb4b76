import math

import pytest

from textart.canvas import MAX_COLS, MAX_ROWS, Canvas
from textart.drawing import (
    DrawPoint,
    Point,
    degree_to_radian,
    draw_box,
    draw_char,
    draw_line,
    draw_line_fill_row,
    draw_nested_boxes,
    draw_tree,
    fill,
    find_end_point,
)


def _cells(canvas, ch):
    return {
        (r, c)
        for r, line in enumerate(canvas.lines())
        for c, value in enumerate(line)
        if value == ch
    }


def test_from_draw_rounds_halves_away_from_zero():
    assert Point.from_draw(DrawPoint(2.5, -2.5)) == Point(3, -3)
    assert Point.from_draw(DrawPoint(1.4, 1.6)) == Point(1, 2)


def test_degree_to_radian():
    assert degree_to_radian(180) == pytest.approx(math.pi, rel=1e-9)
    assert degree_to_radian(0) == 0


@pytest.mark.parametrize(
    "angle, d_row, d_col",
    [(0, 0, 6), (90, 6, 0), (180, 0, -6), (270, -6, 0)],
)
def test_find_end_point_directions(angle, d_row, d_col):
    end = find_end_point(DrawPoint(10, 20), 6, angle)
    assert end.row == pytest.approx(10 + d_row, abs=1e-6)
    assert end.col == pytest.approx(20 + d_col, abs=1e-6)


def test_draw_char_in_bounds_reports():
    canvas = Canvas()
    calls = []
    draw_char(canvas, Point(4, 9), "@", lambda p, ch: calls.append((p, ch)))
    assert canvas[4, 9] == "@"
    assert calls == [(Point(4, 9), "@")]


def test_draw_char_rounds_draw_point():
    canvas = Canvas()
    draw_char(canvas, DrawPoint(4.6, 8.5), "@")
    assert canvas[5, 9] == "@"


@pytest.mark.parametrize("point", [Point(-1, 0), Point(0, -1), Point(MAX_ROWS, 0), Point(0, MAX_COLS)])
def test_draw_char_out_of_bounds_ignored(point):
    canvas = Canvas()
    calls = []
    draw_char(canvas, point, "@", lambda p, ch: calls.append(p))
    assert canvas == Canvas()
    assert calls == []


@pytest.mark.parametrize("start, end", [(3, 8), (8, 3)])
def test_draw_line_fill_row_both_directions(start, end):
    canvas = Canvas()
    draw_line_fill_row(canvas, 12, start, end, "|")
    assert _cells(canvas, "|") == {(r, 12) for r in range(3, 9)}


def test_draw_line_vertical():
    canvas = Canvas()
    draw_line(canvas, Point(2, 5), Point(8, 5))
    assert _cells(canvas, "|") == {(r, 5) for r in range(2, 9)}


def test_draw_line_horizontal_skips_first_column():
    canvas = Canvas()
    draw_line(canvas, Point(5, 10), Point(5, 20))
    assert _cells(canvas, "-") == {(5, c) for c in range(11, 21)}
    assert canvas[5, 10] == " "


def test_draw_line_horizontal_reverse_direction():
    canvas = Canvas()
    draw_line(canvas, Point(5, 20), Point(5, 10))
    assert _cells(canvas, "-") == {(5, c) for c in range(10, 20)}


@pytest.mark.parametrize(
    "start, end, ch",
    [
        (Point(0, 0), Point(10, 30), "`"),
        (Point(10, 0), Point(0, 30), "'"),
        (Point(0, 0), Point(20, 2), "|"),
    ],
)
def test_draw_line_character_by_slope(start, end, ch):
    canvas = Canvas()
    draw_line(canvas, start, end)
    drawn = {value for line in canvas.lines() for value in line} - {" "}
    assert drawn == {ch}
    assert Point.from_draw(end) in {Point(r, c) for r, c in _cells(canvas, ch)}


def test_draw_box_corners_symmetric():
    canvas = Canvas()
    center = Point(11, 40)
    draw_box(canvas, center, 6)
    corners = _cells(canvas, "+")
    assert len(corners) == 4
    rows = sorted({r for r, _ in corners})
    cols = sorted({c for _, c in corners})
    assert rows[0] + rows[1] == 2 * center.row
    assert cols[0] + cols[1] == 2 * center.col
    assert rows[1] - rows[0] == 6
    assert canvas[rows[0], center.col] == "-"
    assert canvas[center.row, cols[0]] == "|"


def test_draw_box_reports_every_stored_char():
    canvas = Canvas()
    seen = Canvas()
    draw_box(canvas, Point(11, 40), 4, lambda p, ch: seen.__setitem__((p.row, p.col), ch))
    assert seen == canvas


def test_nested_boxes_draws_each_size():
    canvas = Canvas()
    draw_nested_boxes(canvas, Point(11, 40), 6)
    corners = _cells(canvas, "+")
    assert len(corners) == 12
    expected = Canvas()
    for height in (6, 4, 2):
        draw_box(expected, Point(11, 40), height)
    assert canvas == expected


def test_nested_boxes_too_small_draws_nothing():
    canvas = Canvas()
    draw_nested_boxes(canvas, Point(11, 40), 1)
    assert canvas == Canvas()


def test_tree_trunk_from_bottom_center():
    canvas = Canvas()
    draw_tree(canvas, DrawPoint(MAX_ROWS - 1, MAX_COLS // 2), 10, 270, 45)
    assert canvas[MAX_ROWS - 1, MAX_COLS // 2] == "|"
    drawn = {value for line in canvas.lines() for value in line}
    assert drawn <= {" ", "|", "-", "`", "'"}


@pytest.mark.parametrize(
    "start, height",
    [(DrawPoint(10, 40), 2), (DrawPoint(MAX_ROWS, 40), 10), (DrawPoint(10, -1), 10)],
)
def test_tree_base_cases_draw_nothing(start, height):
    canvas = Canvas()
    draw_tree(canvas, start, height, 270, 30)
    assert canvas == Canvas()


def test_fill_blank_canvas():
    canvas = Canvas()
    calls = []
    fill(canvas, 0, 0, " ", "#", lambda p, ch: calls.append(p))
    assert canvas.lines() == ["#" * MAX_COLS] * MAX_ROWS
    assert len(calls) == MAX_ROWS * MAX_COLS
    assert calls[0] == Point(0, 0)


def test_fill_stays_inside_box():
    canvas = Canvas()
    draw_box(canvas, Point(11, 40), 8)
    fill(canvas, 11, 40, " ", "o")
    assert canvas[11, 40] == "o"
    assert canvas[0, 0] == " "
    assert canvas[MAX_ROWS - 1, MAX_COLS - 1] == " "
    assert _cells(canvas, "+") and len(_cells(canvas, "+")) == 4


def test_fill_same_character_is_noop():
    canvas = Canvas()
    calls = []
    fill(canvas, 3, 3, " ", " ", lambda p, ch: calls.append(p))
    assert canvas == Canvas()
    assert calls == []


def test_fill_mismatched_start_does_nothing():
    canvas = Canvas()
    fill(canvas, 3, 3, "x", "y")
    assert canvas == Canvas()