import io

import pytest

from textart.canvas import Canvas
from textart.terminal import Key, Terminal


def _terminal(keys=()):
    stream = io.StringIO()
    return Terminal(stream, keys), stream


def test_write_passes_text_through():
    terminal, stream = _terminal()
    terminal.write("hello")
    terminal.write(" there")
    assert stream.getvalue() == "hello there"


def test_goto_top_left_sequence():
    terminal, stream = _terminal()
    terminal.goto(0, 0)
    assert stream.getvalue() == "\x1b[1;1H"


def test_goto_distinguishes_positions():
    first, first_stream = _terminal()
    second, second_stream = _terminal()
    first.goto(2, 5)
    second.goto(5, 2)
    assert first_stream.getvalue() != second_stream.getvalue()
    assert first_stream.getvalue().startswith("\x1b[")


def test_clear_line_writes_spaces_between_cursor_moves():
    terminal, stream = _terminal()
    reference, ref_stream = _terminal()
    reference.goto(23, 0)
    move = ref_stream.getvalue()
    terminal.clear_line(23, 12)
    assert stream.getvalue() == move + " " * 12 + move


def test_display_writes_rendered_canvas_from_origin():
    canvas = Canvas()
    canvas[4, 7] = "@"
    terminal, stream = _terminal()
    reference, ref_stream = _terminal()
    reference.goto(0, 0)
    terminal.display(canvas)
    assert stream.getvalue() == ref_stream.getvalue() + canvas.render()


def test_read_key_returns_scripted_keys_in_order():
    terminal, _ = _terminal(["a", Key.LEFT, Key.ESCAPE])
    assert [terminal.read_key() for _ in range(3)] == ["a", Key.LEFT, Key.ESCAPE]


def test_read_key_after_script_ends_raises_eof():
    terminal, _ = _terminal(["a"])
    terminal.read_key()
    with pytest.raises(EOFError):
        terminal.read_key()


def test_prompt_shows_text_and_returns_line():
    terminal, stream = _terminal(["my answer"])
    assert terminal.prompt("Question? ") == "my answer"
    assert stream.getvalue() == "Question? "


def test_prompt_after_script_ends_raises_eof():
    terminal, _ = _terminal()
    with pytest.raises(EOFError):
        terminal.prompt("Question? ")


def test_prompt_rejects_special_key():
    terminal, _ = _terminal([Key.UP])
    with pytest.raises(TypeError):
        terminal.prompt("Question? ")


def test_escape_held_reports_escape():
    terminal, _ = _terminal([Key.ESCAPE])
    assert terminal.escape_held() is True


def test_escape_held_false_for_other_key():
    terminal, _ = _terminal(["x", Key.ESCAPE])
    assert terminal.escape_held() is False
    assert terminal.escape_held() is True


def test_escape_held_true_when_script_exhausted():
    terminal, _ = _terminal()
    assert terminal.escape_held() is True