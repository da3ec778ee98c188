"""High-level buffer facade combining the document and the cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Iterable, Optional

from txtedit.runtime import telemetry

from .document import Document
from .line import Line
from .state import Cursor


class Buffer:
    """Cursor-relative editing operations over a :class:`Document`."""

    def __init__(
        self,
        *,
        document: Optional[Document] = None,
        cursor: Optional[Cursor] = None,
    ) -> None:
        self.document = document if document is not None else Document()
        self.cursor = cursor or Cursor()

    @classmethod
    def from_lines(
        cls, lines: Iterable[bytes], *, filename: Optional[str] = None
    ) -> "Buffer":
        return cls(document=Document.from_lines(lines, filename=filename))

    @property
    def name(self) -> str:
        return self.document.filename or "[No Name]"

    def current_line(self) -> Optional[Line]:
        return self.document.get_line(self.cursor.cy)

    def insert_char(self, byte: int) -> None:
        with Transaction(self, "insert_char"):
            doc, cur = self.document, self.cursor
            if cur.cy == doc.line_count:
                doc.insert_line(doc.line_count)
            doc.insert_char(cur.cy, cur.cx, byte)
            cur.cx += 1

    def insert_newline(self) -> None:
        with Transaction(self, "insert_newline"):
            doc, cur = self.document, self.cursor
            line = doc.get_line(cur.cy)
            if cur.cx == 0 or line is None:
                doc.insert_line(cur.cy)
            else:
                doc.insert_line(cur.cy + 1, line.chars[cur.cx :])
                doc.truncate_line(cur.cy, cur.cx)
            cur.cy += 1
            cur.cx = 0

    def delete_char(self) -> None:
        """Delete left of the cursor, joining with the previous line at column 0."""

        with Transaction(self, "delete_char") as tx:
            doc, cur = self.document, self.cursor
            if cur.cy == doc.line_count or (cur.cx == 0 and cur.cy == 0):
                tx.skip()
                return
            if cur.cx > 0:
                doc.delete_char(cur.cy, cur.cx - 1)
                cur.cx -= 1
                return
            previous = doc.lines[cur.cy - 1]
            join_at = len(previous)
            doc.append_bytes(cur.cy - 1, doc.lines[cur.cy].chars)
            doc.delete_line(cur.cy)
            cur.cy -= 1
            cur.cx = join_at


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span around one buffer mutation.

    On a clean exit a ``buffer.<label>`` event summarizes the edit: the
    resulting cursor, how many mutations it made and whether it was skipped.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.skipped = False
        self._span_cm = None
        self._dirty_before = 0

    def __enter__(self) -> "Transaction":
        self._dirty_before = self.buffer.document.dirty
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def skip(self) -> None:
        self.skipped = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        if exc_type is None:
            cursor = self.buffer.cursor
            telemetry.record_event(
                f"buffer.{self.label}",
                level="debug",
                data={
                    "buffer": self.buffer.name,
                    "cursor": (cursor.cy, cursor.cx),
                    "changes": self.buffer.document.dirty - self._dirty_before,
                    "skipped": self.skipped,
                },
            )
        return False


__all__ = ["Buffer", "Transaction"]
