"""Console input and output: cursor movement, canvas display and key reading."""

from __future__ import annotations

import contextlib
import enum
import os
import sys
from typing import Iterable, Iterator, Optional, TextIO, Union

from textart.canvas import Canvas

if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty


class Key(enum.Enum):
    """Special keys that the editor reacts to."""

    ESCAPE = "escape"
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


KeyPress = Union[Key, str]

_WINDOWS_ARROWS = {"K": Key.LEFT, "H": Key.UP, "M": Key.RIGHT, "P": Key.DOWN}
_ANSI_ARROWS = {"D": Key.LEFT, "A": Key.UP, "C": Key.RIGHT, "B": Key.DOWN}
_ESC = "\x1b"
_SEQUENCE_WAIT = 0.05


if sys.platform != "win32":

    @contextlib.contextmanager
    def _cbreak(fd: int) -> Iterator[None]:
        saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def _ready(fd: int, timeout: float) -> bool:
        readable, _, _ = select.select([fd], [], [], timeout)
        return bool(readable)

    def _read_char(fd: int) -> str:
        data = os.read(fd, 1)
        if not data:
            raise EOFError("end of input")
        return data.decode("latin-1")


class Terminal:
    """A text console; keys come from a script when one is given, else from the keyboard."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        keys: Optional[Iterable[KeyPress]] = None,
    ) -> None:
        self.stream: TextIO = stream if stream is not None else sys.stdout
        self._script: Optional[Iterator[KeyPress]] = iter(keys) if keys is not None else None

    def write(self, text: str) -> None:
        """Write text at the cursor."""
        self.stream.write(text)
        self.stream.flush()

    def goto(self, row: int, col: int) -> None:
        """Move the cursor to a zero-based row and column."""
        self.write(f"\x1b[{row + 1};{col + 1}H")

    def clear_line(self, line: int, width: int) -> None:
        """Blank `width` characters of a screen line and leave the cursor at its start."""
        self.goto(line, 0)
        self.write(" " * width)
        self.goto(line, 0)

    def display(self, canvas: Canvas) -> None:
        """Draw the canvas with its border from the top-left corner of the screen."""
        self.goto(0, 0)
        self.write(canvas.render())

    def _next_scripted(self) -> KeyPress:
        assert self._script is not None
        try:
            return next(self._script)
        except StopIteration:
            raise EOFError("no more input") from None

    def read_key(self) -> KeyPress:
        """Wait for a key; special keys come back as Key, others as one character."""
        if self._script is not None:
            return self._next_scripted()
        return self._read_console_key()

    def escape_held(self) -> bool:
        """Report whether Escape has been pressed, without waiting.

        A scripted terminal uses up one scripted key per call and reports True
        for Escape or when the script has run out.
        """
        if self._script is not None:
            try:
                return self._next_scripted() is Key.ESCAPE
            except EOFError:
                return True
        return self._console_escape_pending()

    def prompt(self, text: str) -> str:
        """Show text and return the line the user enters, without its line ending."""
        self.write(text)
        if self._script is not None:
            answer = self._next_scripted()
            if not isinstance(answer, str):
                raise TypeError(f"expected a line of text, got {answer!r}")
            return answer
        line = sys.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    if sys.platform == "win32":

        def _read_console_key(self) -> KeyPress:
            while True:
                ch = msvcrt.getwch()
                if ch == _ESC:
                    return Key.ESCAPE
                if ch in ("\x00", "\xe0"):
                    code = msvcrt.getwch()
                    if code in _WINDOWS_ARROWS:
                        return _WINDOWS_ARROWS[code]
                    continue
                return ch

        def _console_escape_pending(self) -> bool:
            while msvcrt.kbhit():
                if msvcrt.getwch() == _ESC:
                    return True
            return False

    else:

        def _read_console_key(self) -> KeyPress:
            fd = sys.stdin.fileno()
            with _cbreak(fd):
                while True:
                    ch = _read_char(fd)
                    if ch != _ESC:
                        return ch
                    if not _ready(fd, _SEQUENCE_WAIT):
                        return Key.ESCAPE
                    lead = _read_char(fd)
                    if lead not in ("[", "O"):
                        return Key.ESCAPE
                    code = _read_char(fd)
                    if code in _ANSI_ARROWS:
                        return _ANSI_ARROWS[code]
                    while _ready(fd, 0):
                        _read_char(fd)

        def _console_escape_pending(self) -> bool:
            fd = sys.stdin.fileno()
            with _cbreak(fd):
                while _ready(fd, 0):
                    if _read_char(fd) == _ESC:
                        return True
            return False