"""Modal single-line prompt shared by save-as and incremental search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from txtedit.keys import events as keys
from txtedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult

PromptCallback = Callable[[bytes, KeyInput], None]
SubmitHandler = Callable[[ModeContext, bytes], Optional[ModeResult]]
CancelHandler = Callable[[ModeContext], Optional[ModeResult]]

ERASE_TOKENS = frozenset({keys.BACKSPACE, keys.DELETE, "ctrl+h"})


@dataclass(slots=True)
class PromptRequest:
    """What to ask and what to do with the answer.

    ``template`` holds one ``{}`` placeholder for the typed text. The
    optional ``callback`` sees the input and the key after every keypress,
    including the final Enter or Escape.
    """

    template: str
    on_submit: SubmitHandler
    on_cancel: Optional[CancelHandler] = None
    callback: Optional[PromptCallback] = None
    return_to: str = "normal"


def request_prompt(context: ModeContext, request: PromptRequest) -> ModeResult:
    context.extras["prompt_request"] = request
    return ModeResult(consumed=True, switch_to=PromptMode.name, status="prompt")


class PromptMode(Mode):
    name = "prompt"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("txtedit.modes.prompt")
        self._request: Optional[PromptRequest] = None
        self._typed = bytearray()

    @property
    def text(self) -> bytes:
        return bytes(self._typed)

    def on_enter(self, previous: Optional[str]) -> None:
        request = self.context.extras.pop("prompt_request", None)
        if not isinstance(request, PromptRequest):
            raise RuntimeError("PromptMode entered without a PromptRequest")
        self._request = request
        if previous:
            request.return_to = previous
        self._typed.clear()
        self.context.bus.emit("prompt.start", request.template)
        self._show()

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._request = None
        self._typed.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        request = self._request
        if request is None:
            return ModeResult(consumed=False, switch_to="normal", status="prompt_idle")

        if key.token in ERASE_TOKENS:
            if self._typed:
                self._typed.pop()
        elif key.key == keys.ESC:
            self.context.state.set_status("")
            self._notify(request, key)
            self.context.bus.emit("prompt.cancel", self.text)
            return self._finish(request, request.on_cancel, status="prompt_cancel")
        elif key.key == keys.ENTER:
            if self._typed:
                self.context.state.set_status("")
                self._notify(request, key)
                self.context.bus.emit("prompt.submit", self.text)
                typed = self.text
                return self._finish(
                    request,
                    lambda context: request.on_submit(context, typed),
                    status="prompt_submit",
                )
        elif key.is_printable:
            self._typed.append(key.code)

        self._notify(request, key)
        self._show()
        return ModeResult(consumed=True, status="prompt_edit")

    def _notify(self, request: PromptRequest, key: KeyInput) -> None:
        if request.callback is not None:
            request.callback(self.text, key)

    def _show(self) -> None:
        if self._request is None:
            return
        typed = self.text.decode("ascii", errors="replace")
        self.context.state.set_status(self._request.template.format(typed))

    def _finish(
        self,
        request: PromptRequest,
        handler: Optional[CancelHandler],
        *,
        status: str,
    ) -> ModeResult:
        outcome = handler(self.context) if handler is not None else None
        if isinstance(outcome, ModeResult):
            if outcome.switch_to is None:
                outcome.switch_to = request.return_to
            return outcome
        return ModeResult(consumed=True, switch_to=request.return_to, status=status)


__all__ = [
    "PromptMode",
    "PromptRequest",
    "PromptCallback",
    "request_prompt",
]
