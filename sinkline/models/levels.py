"""Severity levels and per-sink render flags."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from sinkline.errors import SeverityOutOfRangeError


class Severity(IntEnum):
    """Ordered message severity.

    A lower value is more important.  A sink configured at some threshold
    accepts every message whose severity is ``<=`` that threshold.
    """

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4

    @property
    def prefix(self) -> str:
        """One-letter tag rendered as ``[E]``, ``[W]``, ... in each line."""
        return _PREFIXES[self]

    @classmethod
    def coerce(cls, value: Any) -> Severity:
        """Convert *value* (member, int, digit string, or case-insensitive name).

        Raises
        ------
        SeverityOutOfRangeError
            If *value* does not name a defined level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                value = int(text)
            else:
                try:
                    return cls[text.upper()]
                except KeyError:
                    raise SeverityOutOfRangeError(f"Unknown severity: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise SeverityOutOfRangeError(f"Unknown severity: {value!r}") from None
        raise SeverityOutOfRangeError(f"Unknown severity: {value!r}")


_PREFIXES: dict[Severity, str] = {
    Severity.ERROR: "E",
    Severity.WARNING: "W",
    Severity.INFO: "I",
    Severity.DEBUG: "D",
    Severity.TRACE: "T",
}


class RenderFlags(BaseModel):
    """Named capabilities controlling which optional header fields a sink emits.

    Flags are fixed when a sink is built.  Combine them with ``|``::

        RenderFlags(timestamp=True) | RenderFlags(caller_info=True)
    """

    model_config = ConfigDict(frozen=True)

    rich_text: bool = False
    backed_by_file: bool = False
    timestamp: bool = False
    caller_info: bool = False
    thread_info: bool = False

    @classmethod
    def none(cls) -> RenderFlags:
        return cls()

    def __or__(self, other: RenderFlags) -> RenderFlags:
        if not isinstance(other, RenderFlags):
            return NotImplemented
        return RenderFlags(
            **{
                name: getattr(self, name) or getattr(other, name)
                for name in RenderFlags.model_fields
            }
        )

    def enabled(self) -> list[str]:
        """Names of the flags that are switched on, in declaration order."""
        return [name for name in RenderFlags.model_fields if getattr(self, name)]
