from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import List, Optional

import pytest

from txtedit.adapters.terminal import EditorController
from txtedit.adapters.terminal import app
from txtedit.adapters.terminal.app import HELP_MESSAGE, create_default_manager
from txtedit.adapters.terminal.io import TerminalError
from txtedit.buffer import Buffer, Viewport
from txtedit.state import EditorState
from txtedit.view.renderer import CLEAR_SCREEN, CURSOR_HOME, HIDE_CURSOR


class ScriptedTerminal:
    """In-memory terminal replaying queued input and capturing every write."""

    def __init__(self, data: bytes = b"", *, size: tuple[int, int] = (12, 40)) -> None:
        self._pending = deque(data)
        self._idle_reads = 0
        self.size = size
        self.writes: List[bytes] = []
        self.raw = False
        self.left_raw = 0

    def read_byte(self, timeout: float) -> Optional[int]:
        del timeout
        if self._pending:
            self._idle_reads = 0
            return self._pending.popleft()
        self._idle_reads += 1
        if self._idle_reads > 10:
            raise AssertionError("input script exhausted before the editor quit")
        return None

    def write_bytes(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    def query_window_size(self) -> tuple[int, int]:
        return self.size

    def enter_raw_mode(self) -> None:
        self.raw = True

    def leave_raw_mode(self) -> None:
        self.raw = False
        self.left_raw += 1


def make_controller(
    terminal: ScriptedTerminal, *lines: bytes, filename: Optional[str] = None
) -> EditorController:
    state = EditorState(
        buffer=Buffer.from_lines(lines, filename=filename),
        viewport=Viewport.for_window(*terminal.size),
        clock=lambda: 0.0,
    )
    return EditorController(create_default_manager(state), terminal)


def test_refresh_writes_one_frame() -> None:
    terminal = ScriptedTerminal()
    controller = make_controller(terminal, b"hello")

    frame = controller.refresh_screen()

    assert terminal.writes == [frame]
    assert frame.startswith(HIDE_CURSOR)


def test_run_edits_saves_and_quits(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    terminal = ScriptedTerminal(b"hi\x1b[D!\x13\x11")
    controller = make_controller(terminal, filename=str(path))

    assert controller.run() == 0

    assert path.read_bytes() == b"h!i\n"
    assert terminal.writes[-1] == CLEAR_SCREEN + CURSOR_HOME
    assert len(terminal.writes) == 7


def test_run_needs_repeated_quit_when_dirty() -> None:
    terminal = ScriptedTerminal(b"x\x11\x11\x11", size=(12, 100))
    controller = make_controller(terminal)

    assert controller.run() == 0
    assert controller.state.document.dirty > 0
    assert b"1 more time" in terminal.writes[-2]


def test_process_keypress_returns_mode_result() -> None:
    terminal = ScriptedTerminal(b"\x1b[B")
    controller = make_controller(terminal, b"a", b"b")

    result = controller.process_keypress()

    assert result.status == "move"
    assert controller.state.cursor.cy == 1


def test_open_editor_loads_file_and_shows_help(tmp_path: Path) -> None:
    path = tmp_path / "in.txt"
    path.write_bytes(b"one\ntwo\n")
    terminal = ScriptedTerminal(size=(24, 80))

    controller = app.open_editor(terminal, str(path))

    state = controller.state
    assert state.document.snapshot() == (b"one", b"two")
    assert state.document.filename == str(path)
    assert (state.viewport.screen_rows, state.viewport.screen_cols) == (22, 80)
    assert state.status.text == HELP_MESSAGE


def test_parse_args_accepts_optional_filename() -> None:
    assert app._parse_args([]).filename is None
    assert app._parse_args(["notes.txt"]).filename == "notes.txt"


def test_main_runs_until_quit(monkeypatch: pytest.MonkeyPatch) -> None:
    terminal = ScriptedTerminal(b"\x11")
    monkeypatch.setattr(app, "Terminal", lambda: terminal)
    monkeypatch.setattr(app.signal, "signal", lambda *args: None)

    assert app.main([]) == 0
    assert terminal.left_raw >= 1
    assert not terminal.raw


def test_main_reports_missing_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    terminal = ScriptedTerminal()
    monkeypatch.setattr(app, "Terminal", lambda: terminal)
    monkeypatch.setattr(app.signal, "signal", lambda *args: None)

    code = app.main([str(tmp_path / "missing.txt")])

    assert code == 1
    assert not terminal.raw
    assert capsys.readouterr().err.startswith("txtedit: ")


def test_main_reports_terminal_setup_failure(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    class BrokenTerminal(ScriptedTerminal):
        def enter_raw_mode(self) -> None:
            raise TerminalError("tcgetattr: not a tty")

    monkeypatch.setattr(app, "Terminal", lambda: BrokenTerminal())
    monkeypatch.setattr(app.signal, "signal", lambda *args: None)

    assert app.main([]) == 1
    assert "not a tty" in capsys.readouterr().err
