"""Sink protocol and ready-made sink configurations.

Every sink implements the ``BaseSink`` protocol: a ``sink_name``
property plus ``render``/``flush``/``close`` and ``is_ready``.  The
dispatcher calls ``render`` on every registered sink for every accepted
event.

The built-in variants are not subclasses.  ``buffer_sink``,
``file_sink`` and ``console_sink`` each build the one concrete ``Sink``
class bound to a different target.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Protocol, runtime_checkable

from sinkline.models.colors import DEFAULT_COLORS, ColorMapping
from sinkline.models.events import LogEvent
from sinkline.models.levels import RenderFlags, Severity
from sinkline.models.options import SinkOptions
from sinkline.sinks.sink import Sink
from sinkline.targets import BufferTarget, ConsoleTarget, FileTarget

_FILE_FLAG = RenderFlags(backed_by_file=True)


@runtime_checkable
class BaseSink(Protocol):
    """Protocol every sink registered with a ``Dispatcher`` must satisfy.

    Attributes
    ----------
    sink_name : str
        Non-blank identifier, unique within one dispatcher.
    is_ready : bool
        ``True`` while a backing target is bound.
    """

    @property
    def sink_name(self) -> str:
        ...

    @property
    def is_ready(self) -> bool:
        ...

    def render(self, event: LogEvent) -> None:
        """Filter, format and write one event.

        Must raise rather than write when not ready.
        """
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        """Release the target.  Must be safe to call more than once."""
        ...


def buffer_sink(
    name: str,
    level: Severity | int | str,
    flags: RenderFlags | None = None,
    buffer: io.StringIO | None = None,
    colors: ColorMapping | None = None,
    options: SinkOptions | None = None,
) -> Sink:
    """Sink writing into memory; read it back via ``sink.target``."""
    return Sink(
        name,
        level,
        (flags or RenderFlags.none()) | _FILE_FLAG,
        target=BufferTarget(buffer),
        colors=colors,
        options=options,
    )


def file_sink(
    name: str,
    path: Path | str,
    level: Severity | int | str,
    replace: bool = False,
    flags: RenderFlags | None = None,
    buffer_size: int = 4096,
    colors: ColorMapping | None = None,
    options: SinkOptions | None = None,
) -> Sink:
    """Sink appending to (or, with *replace*, truncating) a file."""
    return Sink(
        name,
        level,
        (flags or RenderFlags.none()) | _FILE_FLAG,
        target=FileTarget(path, replace=replace, buffer_size=buffer_size),
        colors=colors,
        options=options,
    )


def console_sink(
    name: str,
    level: Severity | int | str,
    flags: RenderFlags | None = None,
    styled: bool = False,
    colors: ColorMapping | None = None,
    options: SinkOptions | None = None,
) -> Sink:
    """Sink writing errors to stderr and everything else to stdout."""
    return Sink(
        name,
        level,
        (flags or RenderFlags.none()) | _FILE_FLAG,
        target=ConsoleTarget(styled=styled, colors=colors or DEFAULT_COLORS),
        colors=colors,
        options=options,
    )


__all__ = ["BaseSink", "Sink", "buffer_sink", "file_sink", "console_sink"]
