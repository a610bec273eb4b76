"""Undo/redo history for a canvas, and animation clips stored as numbered files."""

from __future__ import annotations

import itertools
import os
from typing import Iterable, Optional

from textart.canvas import Canvas, PathType


class HistoryError(Exception):
    """Raised when there is no state to undo or redo."""


class History:
    """The current canvas together with its undo and redo states."""

    def __init__(self, canvas: Optional[Canvas] = None) -> None:
        self.current: Canvas = canvas if canvas is not None else Canvas()
        self._undo: list[Canvas] = []
        self._redo: list[Canvas] = []

    def __repr__(self) -> str:
        return f"<History undo={self.undo_count} redo={self.redo_count}>"

    @property
    def undo_count(self) -> int:
        """Number of states that can be undone."""
        return len(self._undo)

    @property
    def redo_count(self) -> int:
        """Number of states that can be redone."""
        return len(self._redo)

    def checkpoint(self) -> None:
        """Save a copy of the current canvas as an undo state and drop all redo states."""
        self._undo.append(self.current.copy())
        self._redo.clear()

    def undo(self) -> Canvas:
        """Make the latest undo state current; the replaced canvas becomes a redo state."""
        if not self._undo:
            raise HistoryError("nothing to undo")
        self._redo.append(self.current)
        self.current = self._undo.pop()
        return self.current

    def redo(self) -> Canvas:
        """Make the latest redo state current; the replaced canvas becomes an undo state."""
        if not self._redo:
            raise HistoryError("nothing to redo")
        self._undo.append(self.current)
        self.current = self._redo.pop()
        return self.current


def clip_path(base: PathType, number: int) -> str:
    """Return the file name of clip number `number` (counted from 1) of an animation."""
    return f"{os.fspath(base)}-{number}.txt"


def load_clips(base: PathType) -> list[Canvas]:
    """Load the clips base-1.txt, base-2.txt, ... until one is missing, in playing order.

    Raises OSError if the first clip cannot be read.
    """
    clips: list[Canvas] = []
    for number in itertools.count(1):
        try:
            clips.append(Canvas.load(clip_path(base, number)))
        except OSError:
            if number == 1:
                raise
            break
    return clips


def save_clips(clips: Iterable[Canvas], base: PathType) -> None:
    """Write each clip to base-1.txt, base-2.txt, ... in playing order.

    Raises OSError as soon as one clip cannot be written.
    """
    for number, clip in enumerate(clips, 1):
        clip.save(clip_path(base, number))