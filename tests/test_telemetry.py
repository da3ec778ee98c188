from __future__ import annotations

from contextlib import nullcontext
from typing import Dict, List, Tuple

import pytest

from txtedit.buffer import Buffer
from txtedit.runtime import telemetry


class RecordingLogger:
    """Stands in for a telelog logger and keeps every structured line."""

    def __init__(self) -> None:
        self.lines: List[Tuple[str, str, Dict[str, str]]] = []
        self.context: Dict[str, str] = {}

    def _record(self, level: str, message: str, pairs) -> None:
        self.lines.append((level, message, dict(pairs)))

    def debug_with(self, message: str, pairs) -> None:
        self._record("debug", message, pairs)

    def info_with(self, message: str, pairs) -> None:
        self._record("info", message, pairs)

    def error_with(self, message: str, pairs) -> None:
        self._record("error", message, pairs)

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    def track_component(self, name: str):
        return nullcontext()

    def profile(self, name: str):
        return nullcontext()

    def events(self, message: str) -> List[Dict[str, str]]:
        return [data for _, line, data in self.lines if line == message]


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("txtedit.test") is telemetry.get_logger("txtedit.test")


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure("verbose")


def test_record_event_sends_structured_pairs(recorder: RecordingLogger) -> None:
    telemetry.record_event("test.event", level="DEBUG", data={"cursor": (1, 2)})

    assert recorder.lines == [
        ("debug", "event::test.event", {"event": "test.event", "cursor": "(1, 2)"})
    ]


def test_span_reports_metadata_on_failure(recorder: RecordingLogger) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::failing", metadata={"case": "boom"}) as handle:
            handle.add_metadata("step", 1)
            raise RuntimeError("boom")

    (failure,) = recorder.events("span::fail")
    assert failure == {"span": "test::failing", "case": "boom", "step": "1", "reason": "boom"}
    assert recorder.context == {}


def test_buffer_edits_log_a_summary(recorder: RecordingLogger) -> None:
    buffer = Buffer()

    buffer.insert_char(ord("a"))
    buffer.cursor.set(0, 0)
    buffer.delete_char()

    (insert,) = recorder.events("event::buffer.insert_char")
    assert insert["cursor"] == "(0, 1)"
    assert insert["changes"] == "2"
    assert insert["skipped"] == "False"

    (delete,) = recorder.events("event::buffer.delete_char")
    assert delete["changes"] == "0"
    assert delete["skipped"] == "True"
