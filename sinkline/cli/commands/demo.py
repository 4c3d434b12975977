"""``sinkline demo`` — log a short session to the console and a file.

Registers a console sink and a file sink with different thresholds and
flags, logs at every level from the main thread and a worker thread,
logs a caught exception, then closes everything.
"""

from __future__ import annotations

import threading
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from sinkline.core.dispatcher import Dispatcher
from sinkline.models.levels import RenderFlags, Severity
from sinkline.sinks import console_sink, file_sink

console = Console()


def demo_cmd(
    log_file: Path = typer.Option(
        Path("sinkline-demo.log"),
        "--log-file",
        "-f",
        help="File the demo's file sink writes to (replaced on each run).",
    ),
    level: str = typer.Option(
        "info",
        "--level",
        "-l",
        help="Console sink threshold: error, warning, info, debug or trace.",
    ),
    styled: bool = typer.Option(
        False, "--styled", help="Color console lines by severity."
    ),
) -> None:
    """Run a short logging session against two sinks."""
    threshold = Severity.coerce(level)

    console.print(
        Panel(
            "[bold]sinkline demo[/bold]\n\n"
            f"Console sink at [cyan]{threshold.name}[/cyan] with timestamps.\n"
            f"File sink at [cyan]TRACE[/cyan] with caller info -> {log_file}",
            border_style="cyan",
            padding=(1, 2),
        )
    )

    with Dispatcher() as log:
        log.add_sink(
            console_sink(
                "console",
                threshold,
                flags=RenderFlags(timestamp=True),
                styled=styled,
            )
        )
        log.add_sink(
            file_sink(
                "file",
                log_file,
                Severity.TRACE,
                replace=True,
                flags=RenderFlags(timestamp=True, caller_info=True, thread_info=True),
            )
        )

        log.info("An informational message")
        log.debug("A debug message")
        log.trace("A trace message")
        log.warning("A warning message")

        worker = threading.Thread(
            target=lambda: log.info("Hello from a worker thread"),
            name="demo-worker",
        )
        worker.start()
        worker.join()

        try:
            {}["missing"]
        except KeyError as exc:
            log.log_exception(exc)

    console.print(f"[bold green]Done.[/bold green] File log written to {log_file}")
