"""Executable entry point hosting the editor in a raw-mode terminal."""

from __future__ import annotations

import argparse
import signal
import sys
from contextlib import suppress
from typing import Optional, Sequence

from txtedit.adapters.storage import load_lines
from txtedit.buffer import Buffer, Viewport
from txtedit.config import DEFAULT_CONFIG, EditorConfig
from txtedit.modes import ModeBus, ModeContext, NormalMode, PromptMode
from txtedit.modes.mode_manager import ModeManager
from txtedit.runtime import telemetry
from txtedit.state import EditorState
from txtedit.view.renderer import CLEAR_SCREEN, CURSOR_HOME

from .controller import EditorController
from .io import Terminal, TerminalError

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


def create_default_manager(state: EditorState) -> ModeManager:
    """Build a ModeManager with both modes and the default keymaps."""

    manager = ModeManager(ModeContext(state=state, bus=ModeBus()))
    manager.register_mode(NormalMode)
    manager.register_mode(PromptMode)
    return manager


def open_editor(
    terminal: Terminal,
    filename: Optional[str],
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> EditorController:
    rows, cols = terminal.query_window_size()
    buffer = Buffer()
    if filename:
        buffer = Buffer.from_lines(load_lines(filename), filename=filename)
    state = EditorState(
        buffer=buffer,
        viewport=Viewport.for_window(rows, cols),
        config=config,
    )
    state.set_status(HELP_MESSAGE)
    return EditorController(create_default_manager(state), terminal)


def _terminate(signum, frame) -> None:
    del frame
    raise SystemExit(128 + signum)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="txtedit", description="Edit a text file in the terminal."
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=None,
        help="File to open; omit to start with an empty, unnamed document",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    terminal = Terminal()
    for signum in (signal.SIGTERM, signal.SIGHUP):
        signal.signal(signum, _terminate)

    try:
        terminal.enter_raw_mode()
        controller = open_editor(terminal, args.filename)
        return controller.run()
    except (TerminalError, OSError) as exc:
        telemetry.record_event(
            "editor.fatal", level="error", data={"reason": str(exc)}
        )
        terminal.leave_raw_mode()
        with suppress(TerminalError):
            terminal.write_bytes(CLEAR_SCREEN + CURSOR_HOME)
        print(f"txtedit: {exc}", file=sys.stderr)
        return 1
    finally:
        terminal.leave_raw_mode()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
