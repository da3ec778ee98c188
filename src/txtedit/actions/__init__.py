"""High-level editing verbs bound to keys."""

from .core import (
    delete_backward,
    delete_forward,
    insert_newline,
    move_cursor,
    noop_action,
)
from .file import quit_editor, save, write_document
from .search import SearchEngine, SearchSnapshot, find

__all__ = [
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "move_cursor",
    "noop_action",
    "quit_editor",
    "save",
    "write_document",
    "SearchEngine",
    "SearchSnapshot",
    "find",
]
