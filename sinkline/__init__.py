"""sinkline: synchronous, thread-safe log dispatch to formatted sinks.

A ``Dispatcher`` forwards each leveled message to every registered
``Sink``.  Sinks filter by severity, render a fixed-layout header
(rich-text tag, elapsed-time stamp, thread tag, caller info, severity
prefix) around the message, and write it to a buffer, a file, or the
console.
"""

__version__ = "0.1.0"

from sinkline.core.dispatcher import Dispatcher
from sinkline.errors import (
    InvalidSinkConfigError,
    SeverityOutOfRangeError,
    SinklineError,
    SinkNotFoundError,
    SinkNotReadyError,
)
from sinkline.models import (
    DEFAULT_COLORS,
    ColorMapping,
    LogEvent,
    RenderFlags,
    Severity,
    SinkOptions,
)
from sinkline.sinks import BaseSink, Sink, buffer_sink, console_sink, file_sink

__all__ = [
    "Dispatcher",
    "Sink",
    "BaseSink",
    "buffer_sink",
    "file_sink",
    "console_sink",
    "Severity",
    "RenderFlags",
    "LogEvent",
    "ColorMapping",
    "DEFAULT_COLORS",
    "SinkOptions",
    "SinklineError",
    "InvalidSinkConfigError",
    "SinkNotFoundError",
    "SinkNotReadyError",
    "SeverityOutOfRangeError",
    "__version__",
]
