"""Cursor movement policy and scroll adjustment.

Movement works on logical coordinates; :func:`scroll` derives the rendered
column and drags the viewport so the cursor is on screen before every
frame.
"""

from __future__ import annotations

from txtedit.buffer import Buffer, Viewport, line_length
from txtedit.keys import events as keys


def scroll(buffer: Buffer, viewport: Viewport) -> None:
    cursor = buffer.cursor
    line = buffer.current_line()
    cursor.rx = line.cx_to_rx(cursor.cx) if line is not None else 0

    if cursor.cy < viewport.row_offset:
        viewport.row_offset = cursor.cy
    if cursor.cy >= viewport.row_offset + viewport.screen_rows:
        viewport.row_offset = cursor.cy - viewport.screen_rows + 1
    if cursor.rx < viewport.col_offset:
        viewport.col_offset = cursor.rx
    if cursor.rx >= viewport.col_offset + viewport.screen_cols:
        viewport.col_offset = cursor.rx - viewport.screen_cols + 1


def step(buffer: Buffer, direction: str) -> None:
    """Move one position; Left/Right wrap across line boundaries."""

    document, cursor = buffer.document, buffer.cursor
    line = buffer.current_line()

    if direction == keys.ARROW_LEFT:
        if cursor.cx > 0:
            cursor.cx -= 1
        elif cursor.cy > 0:
            cursor.cy -= 1
            cursor.cx = line_length(document, cursor.cy)
    elif direction == keys.ARROW_RIGHT:
        if line is not None and cursor.cx < len(line):
            cursor.cx += 1
        elif line is not None and cursor.cx == len(line):
            cursor.cy += 1
            cursor.cx = 0
    elif direction == keys.ARROW_UP:
        if cursor.cy > 0:
            cursor.cy -= 1
    elif direction == keys.ARROW_DOWN:
        if cursor.cy < document.line_count:
            cursor.cy += 1
    else:
        raise ValueError(f"Not a single-step direction: {direction!r}")

    cursor.cx = min(cursor.cx, line_length(document, cursor.cy))


def move_cursor(buffer: Buffer, viewport: Viewport, key: str) -> None:
    cursor = buffer.cursor
    if key == keys.HOME:
        cursor.cx = 0
    elif key == keys.END:
        if cursor.cy < buffer.document.line_count:
            cursor.cx = line_length(buffer.document, cursor.cy)
    elif key in (keys.PAGE_UP, keys.PAGE_DOWN):
        page(buffer, viewport, key)
    else:
        step(buffer, key)


def page(buffer: Buffer, viewport: Viewport, key: str) -> None:
    """Jump to the top or bottom screen row, then scroll a full screen."""

    cursor = buffer.cursor
    if key == keys.PAGE_UP:
        cursor.cy = viewport.row_offset
        direction = keys.ARROW_UP
    else:
        cursor.cy = viewport.row_offset + viewport.screen_rows - 1
        cursor.cy = min(cursor.cy, buffer.document.line_count)
        direction = keys.ARROW_DOWN
    cursor.cx = min(cursor.cx, line_length(buffer.document, cursor.cy))
    for _ in range(viewport.screen_rows):
        step(buffer, direction)


__all__ = ["scroll", "step", "move_cursor", "page"]
