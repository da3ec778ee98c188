"""Editing and movement verbs bound in normal mode."""

from __future__ import annotations

from txtedit.keys import events as keys
from txtedit.modes.base_mode import ModeContext, ModeResult
from txtedit.view import viewport


def insert_newline(context: ModeContext, match) -> ModeResult:
    del match
    context.state.buffer.insert_newline()
    return ModeResult(consumed=True, status="newline")


def delete_backward(context: ModeContext, match) -> ModeResult:
    del match
    context.state.buffer.delete_char()
    return ModeResult(consumed=True, status="delete")


def delete_forward(context: ModeContext, match) -> ModeResult:
    """Forward delete is a right step followed by a backward delete."""

    del match
    state = context.state
    viewport.step(state.buffer, keys.ARROW_RIGHT)
    state.buffer.delete_char()
    return ModeResult(consumed=True, status="delete")


def move_cursor(context: ModeContext, match) -> ModeResult:
    state = context.state
    viewport.move_cursor(state.buffer, state.viewport, match.binding.key)
    return ModeResult(consumed=True, status="move")


def noop_action(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "insert_newline",
    "delete_backward",
    "delete_forward",
    "move_cursor",
    "noop_action",
]
