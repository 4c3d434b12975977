"""sinkline data models — Pydantic v2, all frozen (immutable)."""

from sinkline.models.colors import DEFAULT_COLORS, ColorMapping
from sinkline.models.events import LogEvent
from sinkline.models.levels import RenderFlags, Severity
from sinkline.models.options import SinkOptions

__all__ = [
    # levels
    "Severity",
    "RenderFlags",
    # events
    "LogEvent",
    # colors
    "ColorMapping",
    "DEFAULT_COLORS",
    # options
    "SinkOptions",
]
