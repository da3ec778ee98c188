"""Raw-mode terminal device access.

Everything that talks to the tty lives here: termios mode switching,
polled single-byte reads, full writes, and window size discovery.
"""

from __future__ import annotations

import atexit
import errno
import fcntl
import os
import re
import select
import struct
import sys
import termios
from typing import List, Optional, Tuple

from txtedit.runtime import telemetry

CURSOR_REPORT = re.compile(rb"\x1b\[(\d+);(\d+)R")
FAR_CORNER = b"\x1b[999C\x1b[999B"
QUERY_CURSOR = b"\x1b[6n"


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be configured, queried or written."""


def parse_cursor_report(reply: bytes) -> Tuple[int, int]:
    match = CURSOR_REPORT.search(reply)
    if match is None:
        raise TerminalError(f"Unexpected cursor position report {reply!r}")
    return int(match.group(1)), int(match.group(2))


class Terminal:
    """Exclusive owner of the controlling terminal for the process lifetime."""

    def __init__(self, stdin_fd: int | None = None, stdout_fd: int | None = None) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._original: Optional[List] = None
        self._atexit_registered = False

    @property
    def raw(self) -> bool:
        return self._original is not None

    def enter_raw_mode(self) -> None:
        try:
            original = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"tcgetattr: {exc}") from exc

        raw = termios.tcgetattr(self.stdin_fd)
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1

        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc

        self._original = original
        if not self._atexit_registered:
            atexit.register(self.leave_raw_mode)
            self._atexit_registered = True
        telemetry.record_event("terminal.raw_mode", data={"fd": self.stdin_fd})

    def leave_raw_mode(self) -> None:
        """Restore the saved settings; safe to call any number of times."""

        original, self._original = self._original, None
        if original is None:
            return
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, original)
        except termios.error as exc:
            telemetry.record_event(
                "terminal.restore_failed", level="error", data={"reason": str(exc)}
            )

    def read_byte(self, timeout: float) -> Optional[int]:
        try:
            ready, _, _ = select.select([self.stdin_fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(self.stdin_fd, 1)
        except InterruptedError:
            return None
        except OSError as exc:
            if exc.errno == errno.EAGAIN:
                return None
            raise TerminalError(f"read: {exc}") from exc
        return data[0] if data else None

    def write_bytes(self, data: bytes) -> None:
        """Write ``data`` completely, retrying short writes."""

        view = memoryview(data)
        while view:
            try:
                written = os.write(self.stdout_fd, view)
            except InterruptedError:
                continue
            except OSError as exc:
                raise TerminalError(f"write: {exc}") from exc
            if written <= 0:
                raise TerminalError("write: terminal accepted no bytes")
            view = view[written:]

    def query_window_size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)``, via ioctl or by probing the far corner."""

        try:
            packed = fcntl.ioctl(
                self.stdout_fd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0)
            )
            rows, cols, _, _ = struct.unpack("HHHH", packed)
        except OSError:
            rows = cols = 0
        if cols:
            return rows, cols

        self.write_bytes(FAR_CORNER)
        return self.cursor_position()

    def cursor_position(self) -> Tuple[int, int]:
        self.write_bytes(QUERY_CURSOR)
        reply = bytearray()
        while len(reply) < 32:
            byte = self.read_byte(1.0)
            if byte is None:
                break
            reply.append(byte)
            if byte == ord("R"):
                break
        return parse_cursor_report(bytes(reply))


__all__ = ["Terminal", "TerminalError", "parse_cursor_report"]
