"""File load/save collaborators used at startup and by the save action."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from txtedit.runtime import telemetry

FILE_MODE = 0o644


@dataclass(frozen=True, slots=True)
class SaveResult:
    ok: bool
    written: int = 0
    error: Optional[str] = None


def load_lines(path: str) -> List[bytes]:
    """Read ``path`` as bytes, one entry per line, terminators stripped.

    Any ``OSError`` propagates; the editor cannot start without its input.
    """

    with open(path, "rb") as handle:
        lines = [raw.rstrip(b"\r\n") for raw in handle]
    telemetry.record_event("file.load", data={"path": path, "lines": len(lines)})
    return lines


def save_document(path: str, data: bytes) -> SaveResult:
    """Create or truncate ``path`` and write ``data`` in full.

    Errors are reported in the result rather than raised.
    """

    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
        try:
            os.ftruncate(fd, len(data))
            view = memoryview(data)
            written = 0
            while written < len(data):
                written += os.write(fd, view[written:])
        finally:
            os.close(fd)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        telemetry.record_event(
            "file.save_error", level="error", data={"path": path, "reason": reason}
        )
        return SaveResult(ok=False, error=reason)

    telemetry.record_event("file.save", data={"path": path, "bytes": written})
    return SaveResult(ok=True, written=written)


__all__ = ["SaveResult", "load_lines", "save_document"]
