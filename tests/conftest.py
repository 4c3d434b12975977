"""Shared test fixtures for sinkline."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import timedelta
from typing import Any

import pytest

from sinkline.core.dispatcher import Dispatcher
from sinkline.models.events import LogEvent
from sinkline.models.levels import RenderFlags, Severity
from sinkline.sinks import Sink, buffer_sink


class FakeClock:
    """Controllable monotonic clock.

    Each call returns ``now`` and then advances it by ``step`` seconds.
    """

    def __init__(self, start: float = 0.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


@pytest.fixture
def clock() -> FakeClock:
    """A clock frozen at 0 seconds."""
    return FakeClock()


@pytest.fixture
def dispatcher(clock: FakeClock) -> Iterator[Dispatcher]:
    """A dispatcher driven by the fake clock, closed after the test."""
    d = Dispatcher(clock=clock)
    yield d
    d.close_all()


@pytest.fixture
def make_buffer_sink() -> Callable[..., Sink]:
    """Factory fixture: build a buffer-backed sink with sensible defaults."""

    def _factory(
        name: str = "memory",
        level: Severity = Severity.TRACE,
        **flags: bool,
    ) -> Sink:
        return buffer_sink(name, level, flags=RenderFlags(**flags))

    return _factory


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    """Factory fixture: build a LogEvent as the creator thread would."""

    def _factory(
        message: str = "Test",
        severity: Severity = Severity.INFO,
        elapsed: timedelta = timedelta(0),
        **overrides: Any,
    ) -> LogEvent:
        defaults: dict[str, Any] = {
            "message": message,
            "severity": severity,
            "elapsed": elapsed,
            "thread_label": "MainThread",
            "is_creator_thread": True,
        }
        defaults.update(overrides)
        return LogEvent(**defaults)

    return _factory


@pytest.fixture
def make_clock() -> Callable[..., FakeClock]:
    """Factory fixture: build an independent FakeClock."""
    return FakeClock
