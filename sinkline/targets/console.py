"""Console target — errors to stderr, everything else to stdout.

Output goes through Rich consoles so that, when ``styled`` is enabled,
each line is colored with the sink's color mapping on terminals that
support it.  Lines are written with ``Console.out``: no markup parsing,
no highlighting, no wrapping.
"""

from __future__ import annotations

from rich.console import Console
from rich.style import Style

from sinkline.models.colors import DEFAULT_COLORS, TRANSPARENT, ColorMapping
from sinkline.models.levels import Severity


class ConsoleTarget:
    """Routes rendered lines to the process's standard streams.

    Parameters
    ----------
    styled:
        Color each line using *colors*.
    colors:
        Severity to color mapping used when *styled* is set.
    stdout, stderr:
        Rich Console instances.  New ones bound to ``sys.stdout`` /
        ``sys.stderr`` are created if not provided.
    """

    def __init__(
        self,
        styled: bool = False,
        colors: ColorMapping = DEFAULT_COLORS,
        stdout: Console | None = None,
        stderr: Console | None = None,
    ) -> None:
        self._styled = styled
        self._colors = colors
        self._stdout = stdout or Console(highlight=False, markup=False, emoji=False)
        self._stderr = stderr or Console(
            stderr=True, highlight=False, markup=False, emoji=False
        )

    def _console_for(self, severity: Severity) -> Console:
        return self._stderr if severity == Severity.ERROR else self._stdout

    def _style_for(self, severity: Severity) -> Style | None:
        if not self._styled:
            return None
        background = self._colors.background_for(severity)
        return Style(
            color=self._colors.foreground_for(severity),
            bgcolor=None if background == TRANSPARENT else background,
        )

    def write(self, text: str, severity: Severity) -> None:
        self._console_for(severity).out(
            text, end="", style=self._style_for(severity), highlight=False
        )

    def flush(self) -> None:
        for console in (self._stdout, self._stderr):
            console.file.flush()

    def close(self) -> None:
        # The process streams outlive the sink; never close them.
        self.flush()
