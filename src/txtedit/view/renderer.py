"""Frame builder: one escape-annotated byte string per refresh.

Order within a frame is fixed: hide cursor, home, text rows, status bar,
message bar, cursor position, show cursor. The caller writes the result
in a single call.
"""

from __future__ import annotations

from txtedit.state import EditorState

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_LINE = b"\x1b[K"
CLEAR_SCREEN = b"\x1b[2J"
REVERSE_VIDEO = b"\x1b[7m"
RESET_ATTRS = b"\x1b[m"
NEWLINE = b"\r\n"

NO_NAME = "[No Name]"


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def cursor_to(row: int, col: int) -> bytes:
    """1-based absolute cursor positioning sequence."""

    return b"\x1b[%d;%dH" % (row, col)


class Renderer:
    """Stateless apart from its welcome banner; reads everything from state."""

    def __init__(self, *, app_name: str = "txtedit editor") -> None:
        self.app_name = app_name

    def build_frame(self, state: EditorState) -> bytes:
        out = bytearray()
        out += HIDE_CURSOR
        out += CURSOR_HOME
        self.draw_rows(state, out)
        self.draw_status_bar(state, out)
        self.draw_message_bar(state, out)
        cursor, viewport = state.cursor, state.viewport
        out += cursor_to(
            cursor.cy - viewport.row_offset + 1,
            cursor.rx - viewport.col_offset + 1,
        )
        out += SHOW_CURSOR
        return bytes(out)

    def draw_rows(self, state: EditorState, out: bytearray) -> None:
        document, viewport = state.document, state.viewport
        for y in range(viewport.screen_rows):
            filerow = y + viewport.row_offset
            line = document.get_line(filerow)
            if line is None:
                if document.line_count == 0 and y == viewport.screen_rows // 3:
                    self._draw_welcome(state, out)
                else:
                    out += b"~"
            else:
                start = viewport.col_offset
                out += line.render[start : start + viewport.screen_cols]
            out += CLEAR_LINE
            out += NEWLINE

    def _draw_welcome(self, state: EditorState, out: bytearray) -> None:
        cols = state.viewport.screen_cols
        welcome = _encode(f"{self.app_name} -- version {state.config.version}")
        welcome = welcome[:cols]
        padding = (cols - len(welcome)) // 2
        if padding:
            out += b"~"
            padding -= 1
        out += b" " * padding
        out += welcome

    def draw_status_bar(self, state: EditorState, out: bytearray) -> None:
        document, cols = state.document, state.viewport.screen_cols
        name = document.filename or NO_NAME
        modified = " (modified)" if document.dirty else ""
        left = _encode(f"{name[:20]} - {document.line_count} lines{modified}")[:cols]
        right = _encode(f"{state.cursor.cy + 1}/{document.line_count}")

        out += REVERSE_VIDEO
        out += left
        length = len(left)
        while length < cols:
            if cols - length == len(right):
                out += right
                break
            out += b" "
            length += 1
        out += RESET_ATTRS
        out += NEWLINE

    def draw_message_bar(self, state: EditorState, out: bytearray) -> None:
        out += CLEAR_LINE
        status = state.status
        if status.is_fresh(state.clock(), state.config.message_timeout):
            out += _encode(status.text)[: state.viewport.screen_cols]


__all__ = [
    "Renderer",
    "cursor_to",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "CURSOR_HOME",
    "CLEAR_LINE",
    "CLEAR_SCREEN",
    "REVERSE_VIDEO",
    "RESET_ATTRS",
]
