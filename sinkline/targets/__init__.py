"""Backing targets a sink writes rendered lines into.

A target owns one writable resource.  The sink bound to it is the only
caller of ``write``/``flush``/``close``; the dispatcher lock guarantees
those calls never overlap.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sinkline.models.levels import Severity
from sinkline.targets.buffer import BufferTarget
from sinkline.targets.console import ConsoleTarget
from sinkline.targets.file import FileTarget


@runtime_checkable
class SinkTarget(Protocol):
    """Anything that can take rendered text, flush it, and be released."""

    def write(self, text: str, severity: Severity) -> None:
        """Write one fully rendered line.

        *severity* lets a target route lines (the console target sends
        errors to stderr); most targets ignore it.
        """
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["SinkTarget", "BufferTarget", "ConsoleTarget", "FileTarget"]
