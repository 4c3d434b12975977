"""Exception taxonomy for sinkline.

Configuration and readiness problems surface synchronously to the caller
that introduced them.  Blank messages and missing exceptions are not
errors and never reach this module.
"""

from __future__ import annotations


class SinklineError(Exception):
    """Base class for every error raised by sinkline."""


class InvalidSinkConfigError(SinklineError, ValueError):
    """Raised for blank or duplicate sink names, out-of-range widths, and
    non-positive buffer sizes.  The registry or sink is left unchanged."""


class SinkNotFoundError(SinklineError, KeyError):
    """Raised when removing or looking up a sink that is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class SinkNotReadyError(SinklineError, RuntimeError):
    """Raised when rendering to or flushing a sink whose target is gone."""


class SeverityOutOfRangeError(SinklineError, ValueError):
    """Raised when a value outside the Severity enumeration is used."""
