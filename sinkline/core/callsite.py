"""Best-effort call-site resolution for the caller-info field.

The resolver walks the live Python stack outward from the logging call
and returns the first frame that does not belong to the dispatcher or
sink implementation.  Frame introspection depends on the interpreter
(``sys._getframe`` may be unavailable on some runtimes), so every failure
degrades to "unknown caller" instead of raising.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from types import FrameType

from sinkline.errors import InvalidSinkConfigError
from sinkline.models.options import MAX_CALLER_WIDTH, MIN_CALLER_WIDTH

logger = logging.getLogger(__name__)

# Modules whose frames are never reported as the caller.
INTERNAL_MODULES: frozenset[str] = frozenset(
    {
        "sinkline.core.callsite",
        "sinkline.core.dispatcher",
        "sinkline.sinks.sink",
    }
)

UNKNOWN_CALLER = "?.?:?"
ELLIPSIS = "..."


@dataclass(frozen=True)
class CallerFrame:
    """The external frame a log call originated from."""

    declaring_type: str
    member_name: str
    line: int = 0
    filename: str = ""

    def describe(self) -> str:
        """``Type.member():line`` as rendered in the caller-info field."""
        return f"{self.declaring_type}.{self.member_name}():{self.line}"


def _declaring_type(frame: FrameType) -> str:
    code = frame.f_code
    qualname = getattr(code, "co_qualname", None)
    if qualname:
        parts = [p for p in qualname.split(".") if p != "<locals>"]
        if len(parts) > 1:
            return parts[-2]
    else:
        # Interpreters without co_qualname: look at the bound receiver.
        receiver = frame.f_locals.get("self")
        if receiver is not None:
            return type(receiver).__name__
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return owner.__name__
    module = frame.f_globals.get("__name__") or "?"
    return module.rsplit(".", 1)[-1]


def resolve_caller_frame(
    include_line: bool,
    skip_modules: frozenset[str] = INTERNAL_MODULES,
) -> CallerFrame | None:
    """Return the first stack frame outside *skip_modules*, or ``None``.

    Parameters
    ----------
    include_line:
        When ``False`` the line is reported as ``0`` and the file name is
        left empty.  Sinks only ask for it at DEBUG or TRACE thresholds.
    skip_modules:
        Module names treated as part of the logging machinery.
    """
    try:
        frame: FrameType | None = sys._getframe(1)
    except (AttributeError, ValueError):
        logger.debug("Stack introspection unavailable; caller unresolved")
        return None

    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if module not in skip_modules:
            code = frame.f_code
            return CallerFrame(
                declaring_type=_declaring_type(frame),
                member_name=code.co_name,
                line=frame.f_lineno if include_line else 0,
                filename=code.co_filename if include_line else "",
            )
        frame = frame.f_back
    return None


def _fit(text: str, room: int) -> str:
    if len(text) <= room:
        return text
    if room > len(ELLIPSIS):
        return ELLIPSIS + text[len(text) - (room - len(ELLIPSIS)):]
    return text[len(text) - room:]


def caller_info_field(frame: CallerFrame | None, width: int = 60) -> str:
    """Render ``[ {pad}{Type.member():line} ]`` exactly *width* characters wide.

    Text that does not fit is cut from the left and prefixed with ``...``.
    An unresolved frame renders as ``?.?:?``.
    """
    if not MIN_CALLER_WIDTH <= width <= MAX_CALLER_WIDTH:
        raise InvalidSinkConfigError(
            f"Caller width must be in [{MIN_CALLER_WIDTH}, {MAX_CALLER_WIDTH}], got {width}"
        )
    room = width - 4  # "[ " and " ]"
    text = frame.describe() if frame is not None else UNKNOWN_CALLER
    text = _fit(text, room)
    return "[ " + " " * (room - len(text)) + text + " ]"
