"""Main Typer application — registers all CLI commands.

Entry point: ``sinkline`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from sinkline.cli.commands.config_cmd import config_cmd
from sinkline.cli.commands.demo import demo_cmd
from sinkline.cli.commands.sample import sample_cmd

app = typer.Typer(
    name="sinkline",
    help="sinkline: synchronous log dispatch to formatted sinks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="demo", help="Log a short session to the console and a file.")(demo_cmd)
app.command(name="config", help="Show effective SINKLINE_* settings.")(config_cmd)
app.command(name="sample", help="Render one log line with the given flags.")(sample_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
