"""Save, save-as and quit verbs."""

from __future__ import annotations

from txtedit.adapters.storage import save_document
from txtedit.modes.base_mode import ModeContext, ModeResult
from txtedit.modes.prompt_mode import PromptRequest, request_prompt
from txtedit.runtime import telemetry

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def save(context: ModeContext, match) -> ModeResult:
    del match
    document = context.state.document
    if document.filename is None:
        return request_prompt(
            context,
            PromptRequest(
                template=SAVE_AS_PROMPT,
                on_submit=_save_as,
                on_cancel=_save_aborted,
            ),
        )
    return write_document(context)


def write_document(context: ModeContext) -> ModeResult:
    state = context.state
    document = state.document
    result = save_document(document.filename, document.serialize())
    if result.ok:
        document.mark_clean()
        state.set_status(f"{result.written} bytes written to disk")
        context.bus.emit("file.save", {"path": document.filename, "bytes": result.written})
        return ModeResult(consumed=True, status="saved")
    state.set_status(f"Can't save! I/O error: {result.error}")
    context.bus.emit("file.save_error", {"path": document.filename, "error": result.error})
    return ModeResult(consumed=True, status="save_failed", message=result.error)


def _save_as(context: ModeContext, typed: bytes) -> ModeResult:
    context.state.document.filename = typed.decode("ascii")
    return write_document(context)


def _save_aborted(context: ModeContext) -> ModeResult:
    context.state.set_status("Save aborted")
    return ModeResult(consumed=True, status="save_aborted")


def quit_editor(context: ModeContext, match) -> ModeResult:
    """Quit, unless unsaved changes still need more confirming presses."""

    del match
    state = context.state
    if state.document.dirty:
        state.quit_times -= 1
        if state.quit_times > 0:
            times = "time" if state.quit_times == 1 else "times"
            state.set_status(
                "WARNING!!! File has unsaved changes. "
                f"Press Ctrl-Q {state.quit_times} more {times} to quit."
            )
            return ModeResult(consumed=True, status="quit_pending")
    telemetry.record_event("editor.quit", data={"dirty": state.document.dirty})
    context.bus.emit("editor.quit", None)
    return ModeResult(consumed=True, status="quit")


__all__ = ["save", "write_document", "quit_editor", "SAVE_AS_PROMPT"]
