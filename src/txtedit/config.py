"""Editor constants grouped into a single immutable configuration."""

from __future__ import annotations

from dataclasses import dataclass

from txtedit import __version__

TAB_STOP = 8
QUIT_TIMES = 3
MESSAGE_TIMEOUT = 5.0
POLL_INTERVAL = 0.1


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables shared by the buffer, renderer and dispatcher."""

    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    message_timeout: float = MESSAGE_TIMEOUT
    poll_interval: float = POLL_INTERVAL
    version: str = __version__

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError("tab_stop must be positive")
        if self.quit_times < 1:
            raise ValueError("quit_times must be at least 1")


DEFAULT_CONFIG = EditorConfig()

__all__ = ["EditorConfig", "DEFAULT_CONFIG", "TAB_STOP", "QUIT_TIMES"]
