"""Drawing primitives: lines, boxes, trees and flood fill on a canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

from textart.canvas import MAX_COLS, MAX_ROWS, Canvas


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class DrawPoint:
    """A point with fractional coordinates, used for drawing calculations."""

    row: float = 0.0
    col: float = 0.0


@dataclass(frozen=True)
class Point:
    """A row/column position on the canvas or screen."""

    row: int = 0
    col: int = 0

    @classmethod
    def from_draw(cls, point: Union[DrawPoint, Point]) -> Point:
        """Round a drawing point to the nearest cell."""
        return cls(_round_half_away(point.row), _round_half_away(point.col))


AnyPoint = Union[Point, DrawPoint]
DrawCallback = Optional[Callable[[Point, str], None]]


def degree_to_radian(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * 0.017453292519


def find_end_point(start: AnyPoint, length: float, angle: float) -> DrawPoint:
    """Return the end of a line from start; angle 0 is east, 90 south, 180 west, 270 north."""
    radians = degree_to_radian(angle)
    return DrawPoint(
        row=start.row + length * math.sin(radians),
        col=start.col + length * math.cos(radians),
    )


def draw_char(canvas: Canvas, point: AnyPoint, ch: str, on_draw: DrawCallback = None) -> None:
    """Store ch at point if it lies on the canvas, then report it to on_draw."""
    cell = point if isinstance(point, Point) else Point.from_draw(point)
    if 0 <= cell.row < MAX_ROWS and 0 <= cell.col < MAX_COLS:
        canvas[cell.row, cell.col] = ch
        if on_draw is not None:
            on_draw(cell, ch)


def draw_line_fill_row(
    canvas: Canvas,
    col: int,
    start_row: int,
    end_row: int,
    ch: str,
    on_draw: DrawCallback = None,
) -> None:
    """Draw ch down one column from start_row to end_row inclusive."""
    step = 1 if start_row <= end_row else -1
    for row in range(start_row, end_row + step, step):
        draw_char(canvas, Point(row, col), ch, on_draw)


def _slope_char(slope: float) -> str:
    if slope > 1.8:
        return "|"
    if slope > 0.08:
        return "`"
    if slope > -0.08:
        return "-"
    if slope > -1.8:
        return "'"
    return "|"


def draw_line(canvas: Canvas, start: AnyPoint, end: AnyPoint, on_draw: DrawCallback = None) -> None:
    """Draw a line between two points, choosing a character by its slope."""
    scr_start = Point.from_draw(start)
    scr_end = Point.from_draw(end)

    if scr_start.col == scr_end.col:
        draw_line_fill_row(canvas, scr_start.col, scr_start.row, scr_end.row, "|", on_draw)
        return

    slope = (start.row - end.row) / (start.col - end.col)
    ch = _slope_char(slope)
    step = 1 if scr_start.col <= scr_end.col else -1
    row = -1
    for col in range(scr_start.col, scr_end.col + step, step):
        prev_row = row
        row = _round_half_away(slope * (col - start.col) + start.row)
        if prev_row > -1:
            draw_line_fill_row(canvas, col, prev_row, row, ch, on_draw)


def draw_box(canvas: Canvas, center: AnyPoint, height: int, on_draw: DrawCallback = None) -> None:
    """Draw a box around center; its width follows the canvas proportions."""
    size_half = int(height / 2)
    ratio = _round_half_away(MAX_COLS / MAX_ROWS * size_half)
    corners = [
        DrawPoint(center.row - size_half, center.col - ratio),
        DrawPoint(center.row - size_half, center.col + ratio),
        DrawPoint(center.row + size_half, center.col + ratio),
        DrawPoint(center.row + size_half, center.col - ratio),
    ]
    for first, second in zip(corners, corners[1:] + corners[:1]):
        draw_line(canvas, first, second, on_draw)
    for corner in corners:
        draw_char(canvas, corner, "+", on_draw)


def draw_nested_boxes(
    canvas: Canvas, center: AnyPoint, height: int, on_draw: DrawCallback = None
) -> None:
    """Draw boxes around center, from height down by two while at least two."""
    while height >= 2:
        draw_box(canvas, center, height, on_draw)
        height -= 2


def draw_tree(
    canvas: Canvas,
    start: AnyPoint,
    height: int,
    start_angle: int,
    branch_angle: int,
    on_draw: DrawCallback = None,
) -> None:
    """Draw a fractal tree whose trunk grows from start in direction start_angle."""
    if (
        start.row >= MAX_ROWS
        or start.col >= MAX_COLS
        or start.row < 0
        or start.col < 0
        or height < 3
    ):
        return
    trunk = find_end_point(start, int(height / 3), start_angle)
    draw_line(canvas, start, trunk, on_draw)
    draw_tree(canvas, trunk, height - 2, start_angle + branch_angle, branch_angle, on_draw)
    draw_tree(canvas, trunk, height - 2, start_angle - branch_angle, branch_angle, on_draw)


def fill(
    canvas: Canvas,
    row: int,
    col: int,
    old_ch: str,
    new_ch: str,
    on_draw: DrawCallback = None,
) -> None:
    """Replace the region of old_ch connected to (row, col) with new_ch."""
    if old_ch == new_ch:
        return
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < MAX_ROWS and 0 <= c < MAX_COLS) or canvas[r, c] != old_ch:
            continue
        draw_char(canvas, Point(r, c), new_ch, on_draw)
        # Pushed in reverse so cells are visited down, up, left, right.
        pending.extend([(r, c + 1), (r, c - 1), (r - 1, c), (r + 1, c)])