"""A fixed-size character canvas for text art."""

from __future__ import annotations

from os import PathLike
from typing import Union

MAX_ROWS = 22
MAX_COLS = 80
BLANK = " "
ENCODING = "latin-1"

PathType = Union[str, "PathLike[str]"]


class Canvas:
    """A grid of MAX_ROWS by MAX_COLS characters, blank when created."""

    def __init__(self) -> None:
        self._grid: list[list[str]] = [[BLANK] * MAX_COLS for _ in range(MAX_ROWS)]

    @staticmethod
    def _check_key(key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not (0 <= row < MAX_ROWS and 0 <= col < MAX_COLS):
            raise IndexError(f"position ({row}, {col}) is outside the canvas")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> str:
        row, col = self._check_key(key)
        return self._grid[row][col]

    def __setitem__(self, key: tuple[int, int], value: str) -> None:
        row, col = self._check_key(key)
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("a canvas cell holds exactly one character")
        self._grid[row][col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        filled = sum(ch != BLANK for row in self._grid for ch in row)
        return f"<Canvas {MAX_ROWS}x{MAX_COLS}, {filled} non-blank cells>"

    def copy(self) -> Canvas:
        """Return an independent copy of this canvas."""
        duplicate = Canvas()
        duplicate._grid = [list(row) for row in self._grid]
        return duplicate

    def clear(self) -> None:
        """Set every cell to a space."""
        for row in self._grid:
            row[:] = [BLANK] * MAX_COLS

    def replace(self, old: str, new: str) -> None:
        """Replace every occurrence of character old with new."""
        for row in self._grid:
            row[:] = [new if ch == old else ch for ch in row]

    def shift(self, rows: int, cols: int) -> None:
        """Move the contents down by rows and right by cols; what leaves the edges is lost."""
        shifted = [[BLANK] * MAX_COLS for _ in range(MAX_ROWS)]
        for r, line in enumerate(self._grid):
            new_r = r + rows
            if not 0 <= new_r < MAX_ROWS:
                continue
            for c, ch in enumerate(line):
                new_c = c + cols
                if 0 <= new_c < MAX_COLS:
                    shifted[new_r][new_c] = ch
        self._grid = shifted

    def lines(self) -> list[str]:
        """Return the rows of the canvas as strings."""
        return ["".join(row) for row in self._grid]

    def render(self) -> str:
        """Return the canvas with a border on its right and bottom edges."""
        body = "".join(f"{line}|\n" for line in self.lines())
        return body + "-" * MAX_COLS + "\n"

    @classmethod
    def load(cls, path: PathType) -> Canvas:
        """Read a canvas from a text file; long lines and extra rows are cut off.

        Raises OSError if the file cannot be opened.
        """
        with open(path, encoding=ENCODING) as handle:
            text = handle.read()
        canvas = cls()
        for r, line in enumerate(text.split("\n")[:MAX_ROWS]):
            for c, ch in enumerate(line[:MAX_COLS]):
                canvas._grid[r][c] = ch
        return canvas

    def save(self, path: PathType) -> None:
        """Write the canvas to a text file, one line per row.

        Raises OSError if the file cannot be written.
        """
        with open(path, "w", encoding=ENCODING) as handle:
            for line in self.lines():
                handle.write(line + "\n")