"""The single owned aggregate every dispatcher and renderer call receives."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from txtedit.buffer import Buffer, Viewport
from txtedit.config import DEFAULT_CONFIG, EditorConfig

Clock = Callable[[], float]


@dataclass(slots=True)
class StatusMessage:
    """Message bar text; it stops being drawn once it is older than the timeout."""

    text: str = ""
    timestamp: float = 0.0

    def is_fresh(self, now: float, timeout: float) -> bool:
        return bool(self.text) and (now - self.timestamp) < timeout


@dataclass(slots=True)
class EditorState:
    buffer: Buffer = field(default_factory=Buffer)
    viewport: Viewport = field(default_factory=Viewport)
    status: StatusMessage = field(default_factory=StatusMessage)
    config: EditorConfig = DEFAULT_CONFIG
    clock: Clock = time.monotonic
    quit_times: int = field(init=False)

    def __post_init__(self) -> None:
        self.quit_times = self.config.quit_times

    @property
    def document(self):
        return self.buffer.document

    @property
    def cursor(self):
        return self.buffer.cursor

    def set_status(self, text: str) -> None:
        self.status = StatusMessage(text=text, timestamp=self.clock())

    def reset_quit_times(self) -> None:
        self.quit_times = self.config.quit_times


__all__ = ["EditorState", "StatusMessage", "Clock"]
