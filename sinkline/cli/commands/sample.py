"""``sinkline sample`` — render a single line for inspection.

Useful to see exactly what a sink with a given set of flags writes,
e.g. how the timestamp field lines up for a particular elapsed time.
"""

from __future__ import annotations

import threading
from datetime import timedelta

import typer

from sinkline.errors import SinklineError
from sinkline.models.events import LogEvent
from sinkline.models.levels import RenderFlags, Severity
from sinkline.models.options import SinkOptions
from sinkline.sinks import buffer_sink


def sample_cmd(
    message: str = typer.Argument(..., help="Message text to render."),
    level: str = typer.Option("info", "--level", "-l", help="Message severity."),
    elapsed_ms: int = typer.Option(
        0, "--elapsed-ms", "-e", help="Elapsed time to stamp, in milliseconds."
    ),
    timestamp: bool = typer.Option(False, "--timestamp", "-t", help="Render the timestamp field."),
    caller: bool = typer.Option(False, "--caller", "-c", help="Render the caller-info field."),
    rich_text: bool = typer.Option(False, "--rich-text", "-r", help="Wrap the line in a styled <p> tag."),
    thread: str = typer.Option(
        "", "--thread", help="Render as if logged from a non-creator thread with this name."
    ),
    caller_width: int = typer.Option(60, "--caller-width", help="Caller-info field width (5-70)."),
) -> None:
    """Print one rendered log line to stdout."""
    try:
        severity = Severity.coerce(level)
        sink = buffer_sink(
            "sample",
            Severity.TRACE,
            flags=RenderFlags(timestamp=timestamp, caller_info=caller, rich_text=rich_text),
            options=SinkOptions(caller_width=caller_width),
        )
    except SinklineError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    event = LogEvent(
        message=message,
        severity=severity,
        elapsed=timedelta(milliseconds=elapsed_ms),
        thread_label=thread or threading.current_thread().name,
        is_creator_thread=not thread,
    )
    with sink:
        sink.render(event)
        typer.echo(sink.target.getvalue(), nl=False)
