"""A single text line: logical bytes plus the tab-expanded render."""

from __future__ import annotations

from txtedit.config import TAB_STOP

TAB = 0x09


def expand_tabs(chars: bytes, tab_stop: int = TAB_STOP) -> bytes:
    """Return ``chars`` with every tab padded out to the next tab stop."""

    if TAB not in chars:
        return bytes(chars)
    out = bytearray()
    for byte in chars:
        if byte == TAB:
            out.append(0x20)
            while len(out) % tab_stop:
                out.append(0x20)
        else:
            out.append(byte)
    return bytes(out)


class Line:
    """Logical content of one row and its derived render.

    ``render`` is rebuilt every time ``chars`` is assigned, so it can never
    go stale. Mutators return ``False`` instead of raising when handed an
    out-of-range column.
    """

    __slots__ = ("_chars", "_render", "tab_stop")

    def __init__(self, chars: bytes = b"", *, tab_stop: int = TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self._chars = b""
        self._render = b""
        self.chars = chars

    @property
    def chars(self) -> bytes:
        return self._chars

    @chars.setter
    def chars(self, value: bytes) -> None:
        self._chars = bytes(value)
        self._render = expand_tabs(self._chars, self.tab_stop)

    @property
    def render(self) -> bytes:
        return self._render

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"Line({self._chars!r})"

    def insert(self, at: int, byte: int) -> None:
        if at < 0 or at > len(self._chars):
            at = len(self._chars)
        self.chars = self._chars[:at] + bytes((byte,)) + self._chars[at:]

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self._chars):
            return False
        self.chars = self._chars[:at] + self._chars[at + 1 :]
        return True

    def append(self, data: bytes) -> None:
        self.chars = self._chars + data

    def truncate(self, at: int) -> bool:
        if at < 0 or at > len(self._chars):
            return False
        self.chars = self._chars[:at]
        return True

    def cx_to_rx(self, cx: int) -> int:
        rx = 0
        for byte in self._chars[:cx]:
            if byte == TAB:
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int) -> int:
        """Map a rendered column back to the logical column that covers it."""

        cur_rx = 0
        for cx, byte in enumerate(self._chars):
            if byte == TAB:
                cur_rx += (self.tab_stop - 1) - (cur_rx % self.tab_stop)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return len(self._chars)


__all__ = ["Line", "expand_tabs", "TAB"]
