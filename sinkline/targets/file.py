"""File target — appends (or replaces) a text log file on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from sinkline.errors import InvalidSinkConfigError
from sinkline.models.levels import Severity

logger = logging.getLogger(__name__)


class FileTarget:
    """Writes rendered lines into a text file.

    Parameters
    ----------
    path:
        Output file.  Parent directories are created if missing.
    replace:
        Truncate an existing file instead of appending to it.
    buffer_size:
        I/O buffer size in bytes.  Must be strictly positive.
    encoding:
        Text encoding of the file.
    """

    def __init__(
        self,
        path: Path | str,
        replace: bool = False,
        buffer_size: int = 4096,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size <= 0:
            raise InvalidSinkConfigError(f"Invalid buffer size: {buffer_size}")

        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(
            self._path,
            "w" if replace else "a",
            buffering=buffer_size,
            encoding=encoding,
        )
        logger.debug(
            "FileTarget: opened %s (%s, buffer=%d)",
            self._path,
            "replace" if replace else "append",
            buffer_size,
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str, severity: Severity) -> None:
        self._file.write(text)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            # close() flushes, and still closes the handle if that flush fails.
            self._file.close()
            logger.debug("FileTarget: closed %s", self._path)
