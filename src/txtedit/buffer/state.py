"""Cursor and viewport records mutated by the interaction loop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Logical cursor position plus the rendered column derived each frame."""

    cx: int = 0
    cy: int = 0
    rx: int = 0

    def set(self, cy: int, cx: int) -> None:
        self.cy = cy
        self.cx = cx


@dataclass(slots=True)
class Viewport:
    """Visible window over the document.

    ``screen_rows`` excludes the two rows reserved for the status and
    message bars.
    """

    row_offset: int = 0
    col_offset: int = 0
    screen_rows: int = 0
    screen_cols: int = 0

    @classmethod
    def for_window(cls, rows: int, cols: int) -> "Viewport":
        return cls(screen_rows=max(1, rows - 2), screen_cols=max(1, cols))
