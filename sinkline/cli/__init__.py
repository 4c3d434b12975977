"""sinkline CLI — Typer-based command-line interface.

Provides the ``sinkline`` command and its ``demo``, ``config`` and
``sample`` subcommands.

All decorative output uses Rich; rendered log lines are written raw.
"""
