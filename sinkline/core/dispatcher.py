"""Dispatcher — fans every accepted log message out to ALL registered sinks.

One coarse lock per dispatcher serializes registry changes, dispatch,
flush and close.  Inside one dispatch the elapsed time and the calling
thread's label are fixed before the first sink renders, so every sink
writes identical context for that event.  Sink I/O happens synchronously
inside the lock.
"""

from __future__ import annotations

import logging
import threading
import time
import traceback
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from sinkline.core.callsite import CallerFrame, resolve_caller_frame
from sinkline.errors import InvalidSinkConfigError, SinkNotFoundError
from sinkline.models.events import LogEvent
from sinkline.models.levels import Severity

if TYPE_CHECKING:
    from sinkline.sinks import BaseSink

logger = logging.getLogger(__name__)

NO_EXCEPTION_MESSAGE = "No exception message provided."


def current_thread_label() -> str:
    """Name of the calling thread, or its ident as 8 hex digits if unnamed."""
    name = threading.current_thread().name
    if name:
        return name
    return format(threading.get_ident() & 0xFFFFFFFF, "08x")


class Dispatcher:
    """Registry of sinks and the single entry point for log calls.

    Sinks render in registration order.  Use the dispatcher as a context
    manager (or call ``close_all``) so every sink's target is released::

        with Dispatcher() as log:
            log.add_sink(buffer_sink("memory", Severity.INFO))
            log.info("hello")

    Parameters
    ----------
    clock:
        Monotonic time source in seconds.  Elapsed time is measured
        against its value at construction.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._lock = threading.RLock()
        self._sinks: dict[str, BaseSink] = {}
        self._clock = clock
        self._started = clock()
        self._created_at = datetime.now(timezone.utc)
        self._creator_thread_id = threading.get_ident()

    def __enter__(self) -> Dispatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close_all()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sinks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._sinks

    @property
    def created_at(self) -> datetime:
        """Wall-clock instant the dispatcher was built (UTC)."""
        return self._created_at

    @property
    def creator_thread_id(self) -> int:
        return self._creator_thread_id

    def elapsed(self) -> timedelta:
        return timedelta(seconds=self._clock() - self._started)

    # ------------------------------------------------------------------
    # Sink management
    # ------------------------------------------------------------------

    def add_sink(self, sink: BaseSink) -> None:
        """Register *sink* at the end of the dispatch order.

        Raises
        ------
        InvalidSinkConfigError
            If *sink* is ``None``, its name is blank, or a sink with the
            same name is already registered.
        """
        if sink is None:
            raise InvalidSinkConfigError("Cannot register a null sink")

        with self._lock:
            name = sink.sink_name
            if not isinstance(name, str) or not name.strip():
                raise InvalidSinkConfigError(
                    "A non-blank sink name is required"
                )
            if name in self._sinks:
                raise InvalidSinkConfigError(
                    f"A sink named {name!r} is already registered"
                )
            self._sinks[name] = sink
        logger.debug("Registered sink: %s", name)

    def remove_sink(self, sink: BaseSink | str) -> None:
        """Close and unregister a sink, given its name or the instance itself.

        Raises
        ------
        SinkNotFoundError
            If no such sink is registered.
        """
        if sink is None:
            raise InvalidSinkConfigError("Cannot remove a null sink")

        with self._lock:
            if isinstance(sink, str):
                name = sink
                registered = self._sinks.get(name)
            else:
                name = sink.sink_name
                registered = self._sinks.get(name)
                if registered is not sink:
                    registered = None
            if registered is None:
                raise SinkNotFoundError(f"No sink named {name!r} is registered")

            try:
                registered.close()
            finally:
                del self._sinks[name]
        logger.debug("Unregistered sink: %s", name)

    def get_sink(self, name: str) -> BaseSink:
        with self._lock:
            try:
                return self._sinks[name]
            except KeyError:
                raise SinkNotFoundError(f"No sink named {name!r} is registered") from None

    def list_sink_names(self) -> list[str]:
        """Return a copy of the registered names, in dispatch order."""
        with self._lock:
            return list(self._sinks)

    @property
    def sink_names(self) -> list[str]:
        return self.list_sink_names()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def log(self, message: str | None, severity: Severity | int | str) -> None:
        """Render *message* on every registered sink.

        Blank or ``None`` messages are dropped.  Errors raised by a sink
        propagate to the caller; sinks after it do not run.
        """
        if message is None or not str(message).strip():
            return
        self._dispatch(str(message), Severity.coerce(severity))

    def _dispatch(
        self, message: str, severity: Severity, brief_message: str | None = None
    ) -> None:
        # Sinks below DEBUG get brief_message instead, when one is given.
        is_creator = threading.get_ident() == self._creator_thread_id
        thread_label = current_thread_label()

        with self._lock:
            # Taken inside the lock so the value matches dispatch order.
            event = LogEvent(
                message=message,
                severity=severity,
                elapsed=self.elapsed(),
                thread_label=thread_label,
                is_creator_thread=is_creator,
            )
            brief = event
            if brief_message is not None:
                brief = event.model_copy(update={"message": brief_message})
            for sink in self._sinks.values():
                verbose = getattr(sink, "level", Severity.ERROR) >= Severity.DEBUG
                sink.render(event if verbose else brief)

    def error(self, message: str | None) -> None:
        self.log(message, Severity.ERROR)

    def warning(self, message: str | None) -> None:
        self.log(message, Severity.WARNING)

    def info(self, message: str | None) -> None:
        self.log(message, Severity.INFO)

    def debug(self, message: str | None) -> None:
        self.log(message, Severity.DEBUG)

    def trace(self, message: str | None) -> None:
        self.log(message, Severity.TRACE)

    def log_exception(self, error: BaseException | None = None) -> None:
        """Log *error* at ERROR with its call site and stack.

        ``None`` is replaced by a placeholder exception.  Each sink gets
        the caller's line number only if its own threshold is DEBUG or
        more verbose; other sinks see line ``0``.
        """
        if error is None:
            error = Exception(NO_EXCEPTION_MESSAGE)

        frame = resolve_caller_frame(include_line=True)
        brief_frame = None if frame is None else replace(frame, line=0, filename="")
        stack = self._call_stack(error)
        self._dispatch(
            self._exception_message(error, frame, stack),
            Severity.ERROR,
            brief_message=self._exception_message(error, brief_frame, stack),
        )

    exception = log_exception

    @classmethod
    def describe_exception(cls, error: BaseException, include_line: bool) -> str:
        """Build the message ``log_exception`` dispatches for *error*."""
        frame = resolve_caller_frame(include_line=include_line)
        return cls._exception_message(error, frame, cls._call_stack(error))

    @staticmethod
    def _call_stack(error: BaseException) -> str:
        if error.__traceback__ is not None:
            return "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        return "".join(traceback.format_stack()[:-1])

    @staticmethod
    def _exception_message(
        error: BaseException, frame: CallerFrame | None, stack: str
    ) -> str:
        if frame is None:
            location = "in an unknown file, unknown line"
        else:
            location = f"at {frame.declaring_type}.{frame.member_name}:{frame.line}"
        description = str(error) or type(error).__name__
        return (
            f"An error has been raised {location}: {description}\n"
            f"Call stack:\n{stack.rstrip()}"
        )

    # ------------------------------------------------------------------
    # Flush / close
    # ------------------------------------------------------------------

    def flush_all(self) -> None:
        with self._lock:
            for sink in self._sinks.values():
                sink.flush()

    flush = flush_all

    def close_all(self) -> None:
        """Close every registered sink once and empty the registry.

        Every sink is closed even if an earlier one fails; the first
        failure is re-raised afterwards.
        """
        with self._lock:
            sinks = list(self._sinks.values())
            self._sinks.clear()
            failures: list[BaseException] = []
            for sink in sinks:
                try:
                    sink.close()
                except Exception as exc:  # noqa: BLE001
                    logger.error("Sink %s failed to close: %s", sink.sink_name, exc)
                    failures.append(exc)
        logger.debug("Dispatcher closed %d sink(s)", len(sinks))
        if failures:
            raise failures[0]

    close = close_all
