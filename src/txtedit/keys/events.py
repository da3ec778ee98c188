"""Normalized key events and the named tokens bindings refer to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

ESC = "ESC"
ENTER = "ENTER"
TAB = "TAB"
BACKSPACE = "BACKSPACE"
DELETE = "DELETE"
ARROW_UP = "ARROW_UP"
ARROW_DOWN = "ARROW_DOWN"
ARROW_LEFT = "ARROW_LEFT"
ARROW_RIGHT = "ARROW_RIGHT"
HOME = "HOME"
END = "END"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"

ESC_BYTE = 0x1B
ENTER_BYTE = 0x0D
TAB_BYTE = 0x09
BACKSPACE_BYTE = 0x7F


def ctrl_code(letter: str) -> int:
    return ord(letter.lower()) & 0x1F


@dataclass(frozen=True, slots=True)
class KeyInput:
    """One decoded keypress.

    ``code`` carries the raw byte for single-byte keys and is ``None`` for
    named keys decoded from escape sequences.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    code: Optional[int] = None

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def is_printable(self) -> bool:
        return self.code is not None and 0x20 <= self.code < 0x7F

    @classmethod
    def named(cls, key: str) -> "KeyInput":
        return cls(key=key)

    @classmethod
    def ctrl(cls, letter: str) -> "KeyInput":
        return cls(key=letter.lower(), modifiers=("ctrl",), code=ctrl_code(letter))

    @classmethod
    def from_byte(cls, byte: int) -> "KeyInput":
        if byte == ENTER_BYTE:
            return cls(key=ENTER, code=byte)
        if byte == TAB_BYTE:
            return cls(key=TAB, code=byte)
        if byte == BACKSPACE_BYTE:
            return cls(key=BACKSPACE, code=byte)
        if byte == ESC_BYTE:
            return cls(key=ESC, code=byte)
        if 1 <= byte <= 26:
            return cls(key=chr(byte + 0x60), modifiers=("ctrl",), code=byte)
        if byte < 0x20:
            return cls(key=f"<0x{byte:02x}>", code=byte)
        return cls(key=chr(byte), code=byte)


__all__ = [
    "KeyInput",
    "ctrl_code",
    "ESC",
    "ENTER",
    "TAB",
    "BACKSPACE",
    "DELETE",
    "ARROW_UP",
    "ARROW_DOWN",
    "ARROW_LEFT",
    "ARROW_RIGHT",
    "HOME",
    "END",
    "PAGE_UP",
    "PAGE_DOWN",
]
