"""The transient record handed to every sink for one dispatch."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from sinkline.models.levels import Severity


class LogEvent(BaseModel):
    """One logical log event.

    Built once by the dispatcher and passed unchanged to every sink, so
    all sinks observe the same elapsed time and thread attribution.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    severity: Severity
    elapsed: timedelta  # since dispatcher creation
    thread_label: str
    is_creator_thread: bool = True
