"""Ordered line storage with a modification counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from txtedit.config import TAB_STOP

from .line import Line


@dataclass(slots=True)
class Document:
    """List-of-lines model backing the editor.

    ``dirty`` counts mutations since the last load or save; zero means the
    content matches what is on disk. Index arguments outside the valid range
    turn every mutator into a no-op that returns ``False``.
    """

    lines: List[Line] = field(default_factory=list)
    filename: Optional[str] = None
    dirty: int = 0
    tab_stop: int = TAB_STOP

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[bytes],
        *,
        filename: Optional[str] = None,
        tab_stop: int = TAB_STOP,
    ) -> "Document":
        rows = [Line(chars, tab_stop=tab_stop) for chars in lines]
        return cls(lines=rows, filename=filename, dirty=0, tab_stop=tab_stop)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def snapshot(self) -> Sequence[bytes]:
        """Return the logical content of every line, in order."""

        return tuple(line.chars for line in self.lines)

    def insert_line(self, at: int, chars: bytes = b"") -> bool:
        if at < 0 or at > len(self.lines):
            return False
        self.lines.insert(at, Line(chars, tab_stop=self.tab_stop))
        self.dirty += 1
        return True

    def delete_line(self, at: int) -> bool:
        if at < 0 or at >= len(self.lines):
            return False
        del self.lines[at]
        self.dirty += 1
        return True

    def insert_char(self, row: int, at: int, byte: int) -> bool:
        line = self.get_line(row)
        if line is None:
            return False
        line.insert(at, byte)
        self.dirty += 1
        return True

    def delete_char(self, row: int, at: int) -> bool:
        line = self.get_line(row)
        if line is None or not line.delete(at):
            return False
        self.dirty += 1
        return True

    def append_bytes(self, row: int, data: bytes) -> bool:
        line = self.get_line(row)
        if line is None:
            return False
        line.append(data)
        self.dirty += 1
        return True

    def truncate_line(self, row: int, at: int) -> bool:
        line = self.get_line(row)
        if line is None or not line.truncate(at):
            return False
        self.dirty += 1
        return True

    def serialize(self) -> bytes:
        return b"".join(line.chars + b"\n" for line in self.lines)

    def mark_clean(self) -> None:
        self.dirty = 0


__all__ = ["Document"]
