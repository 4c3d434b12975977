"""``sinkline config`` — show the effective settings."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from sinkline.config import SinklineSettings
from sinkline.models.levels import Severity

console = Console()


def config_cmd() -> None:
    """Print every setting with its current value.

    Values come from ``SINKLINE_*`` environment variables, a ``.env``
    file, or the built-in defaults, in that order.
    """
    current = SinklineSettings()

    table = Table(title="sinkline settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Env var", style="dim")
    table.add_column("Value", style="green")

    for name in SinklineSettings.model_fields:
        value = getattr(current, name)
        shown = value.name if isinstance(value, Severity) else value
        table.add_row(name, f"SINKLINE_{name.upper()}", str(shown))

    console.print(table)
