"""In-memory target backed by ``io.StringIO``."""

from __future__ import annotations

import io
import threading

from sinkline.models.levels import Severity

NEWLINE = "\n"


class BufferTarget:
    """Keeps every rendered line in memory.

    Besides the target interface it offers read-back helpers
    (``get_lines``, ``keep_last``, ``clear``).  Those may be called from
    any thread, so they share a lock with ``write``.

    Parameters
    ----------
    buffer:
        An existing ``StringIO`` to append to.  A new one is created if
        not provided.
    """

    def __init__(self, buffer: io.StringIO | None = None) -> None:
        self._buffer = buffer if buffer is not None else io.StringIO()
        self._lock = threading.RLock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, text: str, severity: Severity) -> None:
        with self._lock:
            if self._closed:
                # Same error a closed file handle raises.
                raise ValueError("I/O operation on closed buffer target")
            self._buffer.write(text)

    def flush(self) -> None:
        with self._lock:
            self._buffer.flush()

    def close(self) -> None:
        # The text stays readable after close; only writes stop.
        self._closed = True

    # ------------------------------------------------------------------
    # Read-back helpers
    # ------------------------------------------------------------------

    def getvalue(self) -> str:
        with self._lock:
            return self._buffer.getvalue()

    def get_lines(self) -> list[str]:
        """Return the lines logged so far, oldest first."""
        with self._lock:
            text = self._buffer.getvalue()
        if not text:
            return []
        return text.rstrip(NEWLINE).split(NEWLINE)

    def keep_last(self, n: int = 50) -> None:
        """Discard everything but the *n* most recent lines.  ``0`` clears."""
        if n < 0:
            raise ValueError(f"Line count must be non-negative, got {n}")
        with self._lock:
            text = self._buffer.getvalue()
            self._reset()
            if n == 0 or not text:
                return
            lines = text.splitlines(keepends=True)
            self._buffer.write("".join(lines[-n:]))

    def clear(self) -> None:
        with self._lock:
            self._reset()

    def _reset(self) -> None:
        self._buffer.seek(0)
        self._buffer.truncate(0)
