"""Normal editing: bound keys run actions, everything else is typed."""

from __future__ import annotations

from txtedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import require_keymap_resolver

QUIT_ACTION_ID = "file.quit"


class NormalMode(Mode):
    """Dispatches keys through the resolver and tracks quit confirmation.

    Consecutive presses of the quit binding count down
    ``EditorState.quit_times``; any other key restores the full count.
    """

    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("txtedit.modes.normal")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, key.token)

        if result.status == "match" and result.match:
            outcome = self._execute_match(result.match)
            is_quit = result.match.action.id == QUIT_ACTION_ID
        else:
            outcome = self._insert(key)
            is_quit = False

        if not is_quit:
            self.context.state.reset_quit_times()
        return outcome

    def _insert(self, key: KeyInput) -> ModeResult:
        if key.code is None:
            return ModeResult(consumed=False, status="noop", message=key.key)
        self.context.state.buffer.insert_char(key.code)
        return ModeResult(consumed=True, status="insert")

    def _execute_match(self, match) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["NormalMode", "QUIT_ACTION_ID"]
