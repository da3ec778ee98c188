"""Byte-stream to key-event decoding, including VT escape sequences."""

from __future__ import annotations

from typing import Callable, Optional

from . import events as keys
from .events import KeyInput

ReadByte = Callable[[float], Optional[int]]

CSI_LETTERS = {
    ord("A"): keys.ARROW_UP,
    ord("B"): keys.ARROW_DOWN,
    ord("C"): keys.ARROW_RIGHT,
    ord("D"): keys.ARROW_LEFT,
    ord("H"): keys.HOME,
    ord("F"): keys.END,
}
CSI_TILDE_DIGITS = {
    ord("1"): keys.HOME,
    ord("3"): keys.DELETE,
    ord("4"): keys.END,
    ord("5"): keys.PAGE_UP,
    ord("6"): keys.PAGE_DOWN,
    ord("7"): keys.HOME,
    ord("8"): keys.END,
}
SS3_LETTERS = {
    ord("H"): keys.HOME,
    ord("F"): keys.END,
}


class KeyDecoder:
    """Pulls bytes from ``read_byte`` and returns exactly one key per call.

    ``read_byte(timeout)`` returns ``None`` when nothing arrived within
    ``timeout`` seconds. The first byte is awaited indefinitely, one poll
    interval at a time; bytes following an escape get a single interval
    each, and a miss turns the whole sequence into a bare ``ESC``.
    """

    def __init__(self, read_byte: ReadByte, *, poll_interval: float = 0.1) -> None:
        self._read_byte = read_byte
        self._poll_interval = poll_interval

    def read_key(self) -> KeyInput:
        byte = None
        while byte is None:
            byte = self._read_byte(self._poll_interval)
        if byte != keys.ESC_BYTE:
            return KeyInput.from_byte(byte)
        return self._decode_escape()

    def _next(self) -> Optional[int]:
        return self._read_byte(self._poll_interval)

    def _decode_escape(self) -> KeyInput:
        escape = KeyInput.from_byte(keys.ESC_BYTE)
        first = self._next()
        if first is None:
            return escape
        second = self._next()
        if second is None:
            return escape

        if first == ord("["):
            if ord("0") <= second <= ord("9"):
                third = self._next()
                if third != ord("~"):
                    return escape
                name = CSI_TILDE_DIGITS.get(second)
            else:
                name = CSI_LETTERS.get(second)
        elif first == ord("O"):
            name = SS3_LETTERS.get(second)
        else:
            name = None

        return KeyInput.named(name) if name else escape


__all__ = ["KeyDecoder", "ReadByte"]
