"""Sink — severity filter plus formatting pipeline bound to one target.

Rendered line layout (optional parts depend on the sink's flags)::

    <p style="..."> [ timestamp ] [@thread] [ caller ] [I] message </p>\\n

Lifecycle: a sink is *ready* while a target is bound.  ``close()``
releases the target for good; any later ``render``/``flush`` raises
``SinkNotReadyError`` instead of silently reopening anything.
"""

from __future__ import annotations

import logging

from sinkline.core.callsite import caller_info_field, resolve_caller_frame
from sinkline.core.timestamp import encode_elapsed
from sinkline.errors import InvalidSinkConfigError, SinkNotReadyError
from sinkline.models.colors import DEFAULT_COLORS, ColorMapping
from sinkline.models.events import LogEvent
from sinkline.models.levels import RenderFlags, Severity
from sinkline.models.options import SinkOptions
from sinkline.targets import SinkTarget

logger = logging.getLogger(__name__)

RICH_TEXT_OPEN = (
    '<p style="background-color:{background}; color:{foreground}; '
    'width:100%; margin:0, padding:5">'
)
RICH_TEXT_CLOSE = "</p>"


class Sink:
    """A named, severity-filtered renderer writing into one target.

    Parameters
    ----------
    name:
        Identifier, unique within the dispatcher the sink is added to.
    level:
        Least important severity the sink still accepts.
    flags:
        Optional header fields to render.
    target:
        Backing target.  A sink built without one is not ready.
    colors:
        Color mapping for rich-text output.
    options:
        Padding widths for the timestamp and caller-info fields.
    """

    def __init__(
        self,
        name: str,
        level: Severity | int | str,
        flags: RenderFlags | None = None,
        target: SinkTarget | None = None,
        colors: ColorMapping | None = None,
        options: SinkOptions | None = None,
    ) -> None:
        if not isinstance(name, str):
            raise InvalidSinkConfigError(f"Sink name must be a string, got {name!r}")
        self._name = name
        self._level = Severity.coerce(level)
        self._flags = flags or RenderFlags.none()
        self._target = target
        self._colors = colors or DEFAULT_COLORS
        self._options = options or SinkOptions()

    def __repr__(self) -> str:
        state = "ready" if self.is_ready else "closed"
        return f"Sink(name={self._name!r}, level={self._level.name}, {state})"

    def __enter__(self) -> Sink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def sink_name(self) -> str:
        return self._name

    @property
    def level(self) -> Severity:
        return self._level

    @property
    def flags(self) -> RenderFlags:
        return self._flags

    @property
    def colors(self) -> ColorMapping:
        return self._colors

    @property
    def options(self) -> SinkOptions:
        return self._options

    @property
    def target(self) -> SinkTarget | None:
        return self._target

    @property
    def is_ready(self) -> bool:
        return self._target is not None

    def accepts(self, severity: Severity) -> bool:
        """Whether a message at *severity* passes this sink's threshold."""
        return severity <= self._level

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, event: LogEvent) -> None:
        """Filter, format, and write *event*.

        Raises
        ------
        SinkNotReadyError
            If the sink has no target (never bound, or closed).
        SeverityOutOfRangeError
            If the event carries a severity outside the enumeration.
        """
        target = self._require_target()
        severity = Severity.coerce(event.severity)
        if not self.accepts(severity):
            return

        line = self._header(event, severity) + event.message + self._trailer()
        target.write(line, severity)

    def format_line(self, event: LogEvent) -> str:
        """Return the text ``render`` would write, ignoring the threshold."""
        severity = Severity.coerce(event.severity)
        return self._header(event, severity) + event.message + self._trailer()

    def _header(self, event: LogEvent, severity: Severity) -> str:
        parts: list[str] = []
        flags = self._flags

        if flags.rich_text:
            parts.append(
                RICH_TEXT_OPEN.format(
                    background=self._colors.background_for(severity),
                    foreground=self._colors.foreground_for(severity),
                )
            )

        if flags.timestamp:
            stamp = encode_elapsed(
                event.elapsed,
                days_width=self._options.days_width,
                secs_width=self._options.secs_width,
                ms_width=self._options.ms_width,
            )
            if stamp is not None:
                parts.append(stamp)

        if not event.is_creator_thread:
            parts.append(f"[@{event.thread_label}]")

        if flags.caller_info:
            frame = resolve_caller_frame(include_line=self._level >= Severity.DEBUG)
            parts.append(caller_info_field(frame, width=self._options.caller_width))

        parts.append(f"[{severity.prefix}] ")
        return "".join(parts)

    def _trailer(self) -> str:
        return (RICH_TEXT_CLOSE if self._flags.rich_text else "") + "\n"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _require_target(self) -> SinkTarget:
        if self._target is None:
            raise SinkNotReadyError(f"Sink {self._name!r} is not ready")
        return self._target

    def flush(self) -> None:
        self._require_target().flush()

    def close(self) -> None:
        """Flush and release the target.  Closing twice is a no-op.

        The target is closed and unbound even if the flush raises; the
        flush error still propagates.
        """
        target = self._target
        if target is None:
            return
        try:
            target.flush()
        finally:
            try:
                target.close()
            finally:
                self._target = None
        logger.debug("Sink %s closed", self._name)
