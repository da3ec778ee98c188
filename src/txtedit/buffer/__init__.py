"""Line storage, cursor state, and the editing facade."""

from .buffer import Buffer, Transaction
from .document import Document
from .line import TAB, Line, expand_tabs
from .state import Cursor, Viewport
from .validation import clamp_cursor, line_length

__all__ = [
    "Buffer",
    "Transaction",
    "Document",
    "Line",
    "expand_tabs",
    "TAB",
    "Cursor",
    "Viewport",
    "clamp_cursor",
    "line_length",
]
