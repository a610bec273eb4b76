"""The interactive text art editor: menus, editing, drawing tools and animation."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Callable, Optional, Sequence

from textart.canvas import MAX_COLS, MAX_ROWS, Canvas
from textart.drawing import (
    DrawPoint,
    Point,
    draw_box,
    draw_line,
    draw_nested_boxes,
    draw_tree,
    fill,
)
from textart.history import History, HistoryError, load_clips, save_clips
from textart.terminal import Key, KeyPress, Terminal

MENU_LINE = 23
CLEAR_WIDTH = 90
TRUNK_ANGLE = 270
FIRST_PRINTABLE = 32
LAST_PRINTABLE = 127
CLEAR_SCREEN = "\x1b[2J"

MAIN_MENU = "<E>dit / <M>ove / <R>eplace / <D>raw / <C>lear / <L>oad / <S>ave / <Q>uit: "
DRAW_MENU = "<F>ill / <L>ine / <B>ox / <N>ested Boxes / <T>ree / <M>ain Menu : "
KIND_PROMPT = "<C>anvas or <A>nimation ? "
NAME_PROMPT = "Enter the filename (don't enter 'txt): "
CENTER_PROMPT = "Type any letter to choose box center, or <C> for screen center / <ESC> to cancel\n"

_ARROW_STEPS = {
    Key.LEFT: (0, -1),
    Key.UP: (-1, 0),
    Key.RIGHT: (0, 1),
    Key.DOWN: (1, 0),
}


def status_line(animate: bool, undo_count: int, redo_count: int, clip_count: int) -> str:
    """Return the status line shown above each menu."""
    flag = "Y" if animate else "N"
    if redo_count > 0 and clip_count >= 2:
        return (
            f"<A>nimate: {flag} / <U>ndo: {undo_count} / Red<O>: {redo_count}"
            f" / Cl<I>p: {clip_count} / <P>lay"
        )
    if clip_count >= 2:
        return f"<A>nimate: {flag} / <U>ndo: {undo_count} / Cl<I>p: {clip_count} / <P>lay"
    if redo_count > 0:
        return (
            f"<A>nimate: {flag} / <U>ndo: {undo_count} / Red<O>: {redo_count}"
            f" / Cl<I>p: {clip_count}"
        )
    return f"<A>nimate: {flag} / <U>ndo:{undo_count:2d} / Cl<I>p:{clip_count:2d}"


def _move_cursor(row: int, col: int, key: Key) -> tuple[int, int]:
    d_row, d_col = _ARROW_STEPS.get(key, (0, 0))
    return (
        min(max(row + d_row, 0), MAX_ROWS - 1),
        min(max(col + d_col, 0), MAX_COLS - 1),
    )


def _is_printable(key: KeyPress) -> bool:
    return isinstance(key, str) and FIRST_PRINTABLE <= ord(key) <= LAST_PRINTABLE


class App:
    """The editor session: the canvas history, the animation clips and the menus."""

    draw_delay = 0.05
    frame_delay = 0.1

    def __init__(self, terminal: Terminal, saved_dir: str = "SavedFiles") -> None:
        self.terminal = terminal
        self.saved_dir = saved_dir
        self.history = History(Canvas())
        self.clips: list[Canvas] = []
        self.animate = False

    @property
    def canvas(self) -> Canvas:
        """The canvas being edited."""
        return self.history.current

    def run(self) -> None:
        """Run the main menu until the user quits or input ends."""
        actions: dict[str, Callable[[], None]] = {
            **self._shared_actions(),
            "E": self._edit,
            "M": self._move,
            "R": self._replace,
            "D": self.draw_menu,
            "C": self._clear,
            "L": self._load,
            "S": self._save,
        }
        self.terminal.write(CLEAR_SCREEN)
        try:
            while True:
                choice = self._menu_choice(MAIN_MENU)
                if choice == "Q":
                    return
                action = actions.get(choice)
                if action is not None:
                    action()
        except EOFError:
            return

    def draw_menu(self) -> None:
        """Run the drawing tools menu until the user returns to the main menu."""
        actions: dict[str, Callable[[], None]] = {
            **self._shared_actions(),
            "F": self._fill,
            "L": self._line,
            "B": lambda: self._box(nested=False),
            "N": lambda: self._box(nested=True),
            "T": self._tree,
        }
        while True:
            choice = self._menu_choice(DRAW_MENU)
            if choice == "M":
                return
            action = actions.get(choice)
            if action is not None:
                action()

    def edit_canvas(self) -> None:
        """Move the cursor with the arrow keys and type characters until Escape."""
        self.terminal.write("Press <ESC> to stop editing ")
        row = col = 0
        self.terminal.goto(row, col)
        while True:
            key = self.terminal.read_key()
            if key is Key.ESCAPE:
                return
            if isinstance(key, Key):
                row, col = _move_cursor(row, col, key)
            elif _is_printable(key):
                self.canvas[row, col] = key
                self.terminal.write(key)
            self.terminal.goto(row, col)

    def get_point(self) -> tuple[KeyPress, Optional[Point]]:
        """Let the user pick a cell with the arrow keys and a printable character.

        Returns the character typed and the chosen point, or Key.ESCAPE and None.
        """
        row = col = 0
        self.terminal.goto(row, col)
        while True:
            key = self.terminal.read_key()
            if key is Key.ESCAPE:
                return key, None
            if isinstance(key, Key):
                row, col = _move_cursor(row, col, key)
            elif _is_printable(key):
                self.terminal.write(key)
                return key, Point(row, col)
            self.terminal.goto(row, col)

    def play(self) -> None:
        """Show the clips in order, over and over, until Escape; needs at least two clips."""
        if len(self.clips) < 2:
            return
        while not self.terminal.escape_held():
            for number, clip in enumerate(self.clips, 1):
                self.terminal.display(clip)
                self.terminal.write(f"Hold <ESC> to stop       Clip: {number:2d}     ")
                time.sleep(self.frame_delay)

    def _shared_actions(self) -> dict[str, Callable[[], None]]:
        return {
            "A": self._toggle_animate,
            "U": self._undo,
            "O": self._redo,
            "I": self._add_clip,
            "P": self.play,
        }

    def _menu_choice(self, menu: str) -> str:
        self.terminal.display(self.canvas)
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        self.terminal.write(
            status_line(
                self.animate,
                self.history.undo_count,
                self.history.redo_count,
                len(self.clips),
            )
            + "\n"
        )
        answer = self.terminal.prompt(menu)
        self.terminal.clear_line(MENU_LINE + 1, CLEAR_WIDTH)
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        return answer.strip()[:1].upper()

    def _ask_int(self, text: str) -> Optional[int]:
        try:
            return int(self.terminal.prompt(text).strip())
        except ValueError:
            return None

    def _pause(self) -> None:
        self.terminal.write("Press any key to continue . . . ")
        self.terminal.read_key()

    def _on_draw(self) -> Optional[Callable[[Point, str], None]]:
        return self._show_cell if self.animate else None

    def _show_cell(self, point: Point, ch: str) -> None:
        self.terminal.goto(point.row, point.col)
        self.terminal.write(ch)
        time.sleep(self.draw_delay)

    def _toggle_animate(self) -> None:
        self.animate = not self.animate

    def _undo(self) -> None:
        try:
            self.history.undo()
        except HistoryError:
            pass

    def _redo(self) -> None:
        try:
            self.history.redo()
        except HistoryError:
            pass

    def _add_clip(self) -> None:
        self.clips.append(self.canvas.copy())

    def _edit(self) -> None:
        self.history.checkpoint()
        self.edit_canvas()

    def _move(self) -> None:
        cols = self._ask_int("Enter column units to move: ")
        if cols is None:
            return
        rows = self._ask_int("Enter row units to move: ")
        if rows is None:
            return
        self.history.checkpoint()
        self.canvas.shift(rows, cols)

    def _replace(self) -> None:
        old = self.terminal.prompt("Enter character to replace: ")[:1]
        new = self.terminal.prompt("Enter character to replace with: ")[:1]
        if not old or not new:
            return
        self.history.checkpoint()
        self.canvas.replace(old, new)

    def _clear(self) -> None:
        self.history.checkpoint()
        self.canvas.clear()

    def _ask_file(self) -> tuple[str, str]:
        kind = self.terminal.prompt(KIND_PROMPT).strip()[:1].upper()
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        name = self.terminal.prompt(NAME_PROMPT)
        self.terminal.clear_line(MENU_LINE + 1, CLEAR_WIDTH)
        return kind, os.path.join(self.saved_dir, name)

    def _load(self) -> None:
        kind, base = self._ask_file()
        if kind == "C":
            self.history.checkpoint()
            try:
                self.history.current = Canvas.load(base + ".txt")
            except OSError:
                return
        elif kind == "A":
            self.clips = []
            try:
                self.clips = load_clips(base)
            except OSError:
                self.terminal.write("ERROR: File cannot be read.\n")
                self._pause()
                return
            self.terminal.write("Clips loaded!\n")
            self._pause()
            self.terminal.clear_line(MENU_LINE + 2, CLEAR_WIDTH)

    def _save(self) -> None:
        kind, base = self._ask_file()
        if kind == "C":
            try:
                self.canvas.save(base + ".txt")
            except OSError:
                return
            self.terminal.write("Canvas saved!\n")
        elif kind == "A":
            try:
                save_clips(self.clips, base)
            except OSError:
                return
            if not self.clips:
                return
            self.terminal.write("Clips saved!\n")
        else:
            return
        self._pause()
        self.terminal.clear_line(MENU_LINE + 2, CLEAR_WIDTH)

    def _pick_point(self, default: Point) -> Optional[Point]:
        key, point = self.get_point()
        if point is None:
            return None
        if isinstance(key, str) and key.upper() == "C":
            return default
        return point

    def _fill(self) -> None:
        self.terminal.write("Enter character to fill with from current location / <ESC> to cancel ")
        key, point = self.get_point()
        if point is None or not isinstance(key, str):
            return
        self.history.checkpoint()
        canvas = self.canvas
        fill(canvas, point.row, point.col, canvas[point.row, point.col], key, self._on_draw())

    def _line(self) -> None:
        self.terminal.write("Type any letter to choose start point / <ESC> to cancel\n")
        _, start = self.get_point()
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        self.terminal.write("Type any letter to choose end point / <ESC> to cancel\n")
        _, end = self.get_point()
        if start is None or end is None:
            return
        self.history.checkpoint()
        draw_line(self.canvas, start, end, self._on_draw())

    def _box(self, nested: bool) -> None:
        text = "Enter size of largest box: " if nested else "Enter size: "
        height = self._ask_int(text)
        if height is None:
            return
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        self.terminal.write(CENTER_PROMPT)
        center = self._pick_point(Point(MAX_ROWS // 2, MAX_COLS // 2))
        if center is None:
            return
        self.history.checkpoint()
        draw = draw_nested_boxes if nested else draw_box
        draw(self.canvas, center, height, self._on_draw())

    def _tree(self) -> None:
        height = self._ask_int("Enter approximate tree height: ")
        if height is None:
            return
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        branch_angle = self._ask_int("Enter branch angle: ")
        if branch_angle is None:
            return
        self.terminal.clear_line(MENU_LINE, CLEAR_WIDTH)
        self.terminal.write(
            "Type any letter to choose start point, or <C> for bottom center / <ESC> to cancel\n"
        )
        start = self._pick_point(Point(MAX_ROWS - 1, MAX_COLS // 2))
        if start is None:
            return
        self.history.checkpoint()
        draw_tree(
            self.canvas,
            DrawPoint(start.row, start.col),
            height,
            TRUNK_ANGLE,
            branch_angle,
            self._on_draw(),
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the editor on the console."""
    parser = argparse.ArgumentParser(prog="textart", description="Edit and animate text art.")
    parser.add_argument(
        "--saved-dir",
        default="SavedFiles",
        help="directory that holds saved canvases and clips (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    App(Terminal(sys.stdout, None), args.saved_dir).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())