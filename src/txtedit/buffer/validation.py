"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import Document
from .state import Cursor


def line_length(document: Document, row: int) -> int:
    line = document.get_line(row)
    return len(line) if line is not None else 0


def clamp_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside the document.

    ``cy`` may equal ``line_count`` (the virtual line after the last one),
    where the only legal column is zero.
    """

    cursor.cy = max(0, min(cursor.cy, document.line_count))
    cursor.cx = max(0, min(cursor.cx, line_length(document, cursor.cy)))
    return cursor
