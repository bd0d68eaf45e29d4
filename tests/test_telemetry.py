from contextlib import contextmanager
from typing import Any, Iterator, List, Tuple

import pytest

from line_editor.runtime import telemetry


class RecordingLogger:
    def __init__(self, *, fail_profile: bool = False) -> None:
        self.fail_profile = fail_profile
        self.context: dict[str, str] = {}
        self.errors: List[Tuple[str, list[tuple[str, str]]]] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        del self.context[key]

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        if self.fail_profile:
            raise RuntimeError("profiler unavailable")
        yield

    def error_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.errors.append((message, pairs))


def use_logger(monkeypatch: pytest.MonkeyPatch, logger: RecordingLogger) -> None:
    def fake_get_logger(name: Any = None) -> RecordingLogger:
        return logger

    monkeypatch.setattr(telemetry, "get_logger", fake_get_logger)


def test_span_pushes_and_clears_context(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = RecordingLogger()
    use_logger(monkeypatch, logger)

    with telemetry.span("work", component=True, metadata={"line": 3}) as handle:
        assert logger.context == {"line": "3"}
        handle.add_metadata("delta", -2)

    assert logger.context == {}
    assert handle.metadata == {"line": "3", "delta": "-2"}


def test_span_clears_context_when_profile_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = RecordingLogger(fail_profile=True)
    use_logger(monkeypatch, logger)

    with pytest.raises(RuntimeError, match="profiler unavailable"):
        with telemetry.span("work", metadata={"buffer": "notes"}):
            pass

    assert logger.context == {}


def test_span_reports_failure_and_reraises(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = RecordingLogger()
    use_logger(monkeypatch, logger)

    with pytest.raises(ValueError):
        with telemetry.span("work", component="buffer", metadata={"line": 1}):
            raise ValueError("boom")

    message, pairs = logger.errors[-1]
    assert message == "span::fail"
    assert ("reason", "boom") in pairs
    assert ("component", "buffer") in pairs
    assert logger.context == {}


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")
