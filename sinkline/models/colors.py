"""Severity to color mapping used by rich-text and styled console output.

Color values are validated with ``rich.color`` so anything Rich can parse
(``#E60000``, ``white``, ``rgb(0,153,230)``) is accepted.  The literal
``transparent`` is also allowed for backgrounds.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from rich.color import Color, ColorParseError

from sinkline.models.levels import Severity

FALLBACK_FOREGROUND = "#000000"
FALLBACK_BACKGROUND = "transparent"
TRANSPARENT = "transparent"


def _check_color(value: str) -> str:
    value = value.strip()
    if value.lower() == TRANSPARENT:
        return TRANSPARENT
    try:
        Color.parse(value)
    except ColorParseError as exc:
        raise ValueError(f"Invalid color {value!r}: {exc}") from exc
    return value


class ColorMapping(BaseModel):
    """Foreground/background colors per severity.

    Lookups are total over ``Severity``: a level missing from either
    table falls back to black text on a transparent background.
    """

    model_config = ConfigDict(frozen=True)

    foreground: dict[Severity, str] = {}
    background: dict[Severity, str] = {}

    @field_validator("foreground", "background")
    @classmethod
    def _validate_colors(cls, value: dict[Severity, str]) -> dict[Severity, str]:
        return {level: _check_color(color) for level, color in value.items()}

    def foreground_for(self, severity: Severity) -> str:
        return self.foreground.get(severity, FALLBACK_FOREGROUND)

    def background_for(self, severity: Severity) -> str:
        return self.background.get(severity, FALLBACK_BACKGROUND)


DEFAULT_COLORS = ColorMapping(
    foreground={
        Severity.ERROR: "#FFFFFF",
        Severity.WARNING: "#000000",
        Severity.INFO: "#000000",
        Severity.DEBUG: "#FFFFFF",
        Severity.TRACE: "#FFFFFF",
    },
    background={
        Severity.ERROR: "#E60000",
        Severity.WARNING: "#FFBB33",
        Severity.INFO: "#FFFFFF",
        Severity.DEBUG: "#0099E6",
        Severity.TRACE: "#283C88",
    },
)
