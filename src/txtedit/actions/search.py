"""Incremental search driven by the prompt's per-key callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from txtedit.keys import KeyInput
from txtedit.keys import events as keys
from txtedit.modes.base_mode import ModeContext, ModeResult
from txtedit.modes.prompt_mode import PromptRequest, request_prompt
from txtedit.state import EditorState

SEARCH_PROMPT = "Search: {} (Use ESC/Arrows/Enter)"

FORWARD = 1
BACKWARD = -1


@dataclass(frozen=True, slots=True)
class SearchSnapshot:
    """Cursor and viewport offsets captured before the prompt opens."""

    cx: int
    cy: int
    row_offset: int
    col_offset: int

    @classmethod
    def capture(cls, state: EditorState) -> "SearchSnapshot":
        return cls(
            cx=state.cursor.cx,
            cy=state.cursor.cy,
            row_offset=state.viewport.row_offset,
            col_offset=state.viewport.col_offset,
        )

    def restore(self, state: EditorState) -> None:
        state.cursor.cx = self.cx
        state.cursor.cy = self.cy
        state.viewport.row_offset = self.row_offset
        state.viewport.col_offset = self.col_offset


class SearchEngine:
    """Prompt callback remembering the last matching line and the direction.

    Enter and Escape forget the match. Right/Down continue forward and
    Left/Up backward from the last match; any other key starts over from
    the top in the forward direction.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self.last_match = -1
        self.direction = FORWARD

    def reset(self) -> None:
        self.last_match = -1
        self.direction = FORWARD

    def __call__(self, query: bytes, key: KeyInput) -> None:
        if key.key in (keys.ENTER, keys.ESC):
            self.reset()
            return
        if key.key in (keys.ARROW_RIGHT, keys.ARROW_DOWN):
            self.direction = FORWARD
        elif key.key in (keys.ARROW_LEFT, keys.ARROW_UP):
            self.direction = BACKWARD
        else:
            self.reset()

        if self.last_match == -1:
            self.direction = FORWARD
        self.search(query)

    def search(self, query: bytes) -> Optional[int]:
        """Scan each line at most once, wrapping around the document.

        An empty query matches column 0 of the first line scanned.
        """

        state = self.context.state
        document = state.document
        count = document.line_count
        current = self.last_match
        for _ in range(count):
            current += self.direction
            if current == -1:
                current = count - 1
            elif current == count:
                current = 0
            line = document.lines[current]
            position = line.render.find(query)
            if position == -1:
                continue
            self.last_match = current
            state.cursor.cy = current
            state.cursor.cx = line.rx_to_cx(position)
            # Past the end, so the next scroll puts the match on the top row.
            state.viewport.row_offset = count
            self.context.bus.emit("search.match", {"row": current, "col": state.cursor.cx})
            return current
        return None


def find(context: ModeContext, match) -> ModeResult:
    del match
    snapshot = SearchSnapshot.capture(context.state)

    def cancel(ctx: ModeContext) -> None:
        snapshot.restore(ctx.state)

    return request_prompt(
        context,
        PromptRequest(
            template=SEARCH_PROMPT,
            on_submit=lambda ctx, query: None,
            on_cancel=cancel,
            callback=SearchEngine(context),
        ),
    )


__all__ = ["SearchEngine", "SearchSnapshot", "find", "SEARCH_PROMPT"]
