"""Logging for the editor, built on telelog.

Other modules only need four names:

``configure(preset)`` -- rebuild the logging config
``get_logger(name)`` -- a cached, configured logger
``record_event(name, ...)`` -- one structured ``event::<name>`` line
``span(name, ...)`` -- profile a block and optionally track it as a component

The editor draws on the terminal, so console output stays off unless
``TXTEDIT_LOG_CONSOLE`` is set. ``TXTEDIT_LOG_FILE`` sends logs to a file and
``TXTEDIT_LOG_PRESET`` picks one of :data:`PRESETS` at import time.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import telelog  # type: ignore[import]

ENV_PREFIX = "TXTEDIT_"
ROOT_LOGGER = "txtedit"

PRESETS: Dict[str, Tuple[str, bool, str]] = {
    # name: (min level, json lines, default log file)
    "development": ("DEBUG", False, "txtedit-debug.log"),
    "production": ("INFO", False, "txtedit.log"),
    "performance": ("DEBUG", True, "txtedit-performance.log"),
}

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}") or None


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _preset_config(preset: str) -> Any:
    try:
        level, json_lines, default_path = PRESETS[preset.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown preset '{preset}'.") from exc

    config = telelog.Config()
    config.with_min_level(level)
    config.with_console_output(False)
    config.with_json_format(json_lines)
    config.with_buffering(level != "DEBUG")
    config.with_file_output(_env("LOG_FILE") or default_path)
    return config


def _env_config() -> Any:
    config = telelog.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    # Log lines written to the tty would tear through the rendered frame.
    config.with_console_output(_env_flag("LOG_CONSOLE"))
    if _env_flag("LOG_CONSOLE"):
        config.with_colored_output(not _env_flag("NO_COLOR"))
    config.with_json_format(_env_flag("LOG_JSON"))
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    return config


def configure(preset: Optional[str] = None) -> None:
    """Rebuild the active config from ``preset``, or from the environment."""

    global _config
    config = _preset_config(preset) if preset else _env_config()
    config.with_profiling(True)
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` called ``name``."""

    name = name or ROOT_LOGGER
    logger = _loggers.get(name)
    if logger is None:
        if _config is None:
            configure()
        logger = _loggers[name] = telelog.Logger.with_config(name, _config)
    return logger


def _log(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` line on the chosen logger."""

    payload = {"event": name, **(data or {})}
    _log(get_logger(logger_name), level.lower(), f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Handle yielded by :func:`span`; its metadata is reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _log(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and, when ``component`` is given, track it as a component.

    ``component=True`` reuses ``name`` as the component id. ``metadata`` is
    attached as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context:
                log.remove_context(key)


configure(_env("LOG_PRESET"))

__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
