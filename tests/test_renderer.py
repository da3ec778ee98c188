from __future__ import annotations

from typing import List, Optional

from txtedit.buffer import Buffer, Viewport
from txtedit.state import EditorState
from txtedit.view import Renderer, scroll
from txtedit.view.renderer import (
    CLEAR_LINE,
    CURSOR_HOME,
    HIDE_CURSOR,
    RESET_ATTRS,
    REVERSE_VIDEO,
    SHOW_CURSOR,
    cursor_to,
)


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_state(
    *lines: bytes,
    rows: int = 4,
    cols: int = 30,
    filename: Optional[str] = "notes.txt",
    clock: Optional[FakeClock] = None,
) -> EditorState:
    return EditorState(
        buffer=Buffer.from_lines(lines, filename=filename),
        viewport=Viewport(screen_rows=rows, screen_cols=cols),
        clock=clock or FakeClock(),
    )


def text_rows(state: EditorState, frame: bytes) -> List[bytes]:
    body = frame[len(HIDE_CURSOR + CURSOR_HOME) :]
    rows = body.split(b"\r\n")
    return [row.replace(CLEAR_LINE, b"") for row in rows[: state.viewport.screen_rows]]


def test_frame_has_fixed_envelope() -> None:
    state = make_state(b"hello")

    frame = Renderer().build_frame(state)

    assert frame.startswith(HIDE_CURSOR + CURSOR_HOME)
    assert frame.endswith(cursor_to(1, 1) + SHOW_CURSOR)
    assert frame.count(b"\r\n") == state.viewport.screen_rows + 1


def test_rows_past_end_show_tilde() -> None:
    state = make_state(b"one", b"two", rows=4)

    rows = text_rows(state, Renderer().build_frame(state))

    assert rows == [b"one", b"two", b"~", b"~"]


def test_rows_are_clipped_to_horizontal_window() -> None:
    state = make_state(b"0123456789abcdef", cols=5)
    state.viewport.col_offset = 4

    rows = text_rows(state, Renderer().build_frame(state))

    assert rows[0] == b"45678"


def test_rows_show_tab_expanded_render() -> None:
    state = make_state(b"a\tb")

    rows = text_rows(state, Renderer().build_frame(state))

    assert rows[0] == b"a" + b" " * 7 + b"b"


def test_empty_document_shows_centered_welcome() -> None:
    state = make_state(rows=6, cols=40, filename=None)
    welcome = f"txtedit editor -- version {state.config.version}".encode()

    rows = text_rows(state, Renderer().build_frame(state))

    padding = (40 - len(welcome)) // 2
    assert rows[2] == b"~" + b" " * (padding - 1) + welcome
    assert all(row == b"~" for index, row in enumerate(rows) if index != 2)


def test_welcome_is_truncated_on_narrow_screens() -> None:
    state = make_state(rows=3, cols=10, filename=None)

    rows = text_rows(state, Renderer().build_frame(state))

    assert rows[1] == b"txtedit ed"


def test_welcome_hidden_once_document_has_lines() -> None:
    state = make_state(b"", rows=6, cols=40)

    frame = Renderer().build_frame(state)

    assert b"version" not in frame


def test_status_bar_layout() -> None:
    state = make_state(b"one", b"two", cols=30)

    frame = Renderer().build_frame(state)

    expected = REVERSE_VIDEO + b"notes.txt - 2 lines" + b" " * 8 + b"1/2" + RESET_ATTRS
    assert expected + b"\r\n" in frame


def test_status_bar_flags_modifications_and_unnamed_buffers() -> None:
    state = make_state(b"x", filename=None, cols=60)
    state.buffer.insert_char(ord("y"))

    frame = Renderer().build_frame(state)

    assert REVERSE_VIDEO + b"[No Name] - 1 lines (modified)" in frame


def test_status_bar_shows_path_truncated_to_twenty_chars() -> None:
    state = make_state(b"x", filename="/home/user/" + "n" * 30, cols=60)

    frame = Renderer().build_frame(state)

    assert REVERSE_VIDEO + b"/home/user/" + b"n" * 9 + b" - 1 lines" in frame


def test_message_bar_shows_only_fresh_messages() -> None:
    clock = FakeClock(0.0)
    state = make_state(b"x", clock=clock)
    state.set_status("hello there")
    renderer = Renderer()

    clock.now = 4.9
    assert b"hello there" in renderer.build_frame(state)

    clock.now = 5.0
    assert b"hello there" not in renderer.build_frame(state)


def test_cursor_position_is_relative_to_viewport() -> None:
    state = make_state(*(b"\tline" for _ in range(10)), rows=3, cols=30)
    state.cursor.cy = 6
    state.cursor.cx = 2
    scroll(state.buffer, state.viewport)

    frame = Renderer().build_frame(state)

    assert state.viewport.row_offset == 4
    assert frame.endswith(cursor_to(3, 10) + SHOW_CURSOR)


def test_build_frame_does_not_mutate_state() -> None:
    state = make_state(b"abc", b"def")
    before = (state.cursor.cy, state.cursor.cx, state.viewport.row_offset, state.document.dirty)

    Renderer().build_frame(state)

    after = (state.cursor.cy, state.cursor.cx, state.viewport.row_offset, state.document.dirty)
    assert before == after
