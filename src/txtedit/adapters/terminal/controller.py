"""Interaction loop wiring the decoder, mode manager and renderer to a terminal."""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from txtedit.keys import KeyDecoder
from txtedit.modes import ModeResult
from txtedit.modes.mode_manager import ModeManager
from txtedit.runtime import telemetry
from txtedit.view import Renderer, scroll
from txtedit.view.renderer import CLEAR_SCREEN, CURSOR_HOME

QUIT_STATUS = "quit"


class TerminalIO(Protocol):
    """The slice of :class:`~txtedit.adapters.terminal.io.Terminal` the loop needs."""

    def read_byte(self, timeout: float) -> Optional[int]:
        ...

    def write_bytes(self, data: bytes) -> None:
        ...


class EditorController:
    """Renders a frame, blocks for one key, dispatches it; repeat until quit."""

    def __init__(
        self,
        manager: ModeManager,
        terminal: TerminalIO,
        *,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.manager = manager
        self.terminal = terminal
        self.renderer = renderer or Renderer()
        state = manager.context.state
        self.decoder = KeyDecoder(
            terminal.read_byte, poll_interval=state.config.poll_interval
        )
        self._subscribe_events()

    @property
    def state(self):
        return self.manager.context.state

    def refresh_screen(self) -> bytes:
        scroll(self.state.buffer, self.state.viewport)
        frame = self.renderer.build_frame(self.state)
        self.terminal.write_bytes(frame)
        return frame

    def process_keypress(self) -> ModeResult:
        key = self.decoder.read_key()
        result = self.manager.handle_key(key)
        self._log_state("key", key=key.token, status=result.status)
        return result

    def run(self) -> int:
        while True:
            self.refresh_screen()
            result = self.process_keypress()
            if result.status == QUIT_STATUS:
                self.clear_screen()
                return 0

    def clear_screen(self) -> None:
        self.terminal.write_bytes(CLEAR_SCREEN + CURSOR_HOME)

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "file.save",
            "file.save_error",
            "search.match",
            "prompt.start",
            "prompt.submit",
            "prompt.cancel",
            "editor.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        level = "error" if name.endswith("_error") else "info"
        telemetry.record_event(
            name,
            level=level,
            data={"payload": payload},
            logger_name="txtedit.controller",
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        telemetry.record_event(
            prefix, level="debug", data=snapshot, logger_name="txtedit.controller"
        )

    def _state_metadata(self) -> Dict[str, object]:
        state = self.state
        active_mode = self.manager.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "cursor": (state.cursor.cy, state.cursor.cx),
            "offsets": (state.viewport.row_offset, state.viewport.col_offset),
            "dirty": state.document.dirty,
            "quit_times": state.quit_times,
        }


__all__ = ["EditorController", "TerminalIO", "QUIT_STATUS"]
