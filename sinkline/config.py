"""Runtime configuration — env-driven via pydantic-settings.

Reads ``SINKLINE_*`` environment variables and an optional ``.env`` file.

Examples
--------
Override via environment::

    export SINKLINE_DEFAULT_LEVEL=DEBUG
    export SINKLINE_TIMESTAMP=true
    export SINKLINE_LOG_FILE=/var/log/app/session.log
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sinkline.models.levels import RenderFlags, Severity
from sinkline.models.options import SinkOptions


class SinklineSettings(BaseSettings):
    """Defaults used when sinks are built from configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SINKLINE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_level: Severity = Severity.INFO

    # Render flags
    timestamp: bool = True
    caller_info: bool = False
    thread_info: bool = False
    rich_text: bool = False
    styled_console: bool = False

    # Field widths
    days_width: int = 5
    secs_width: int = 5
    ms_width: int = 3
    caller_width: int = 60

    # File sink
    log_file: Path | None = None
    replace_log_file: bool = False
    file_buffer_size: int = 4096

    @field_validator("default_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> Severity:
        return Severity.coerce(value)

    def render_flags(self) -> RenderFlags:
        return RenderFlags(
            timestamp=self.timestamp,
            caller_info=self.caller_info,
            thread_info=self.thread_info,
            rich_text=self.rich_text,
        )

    def sink_options(self) -> SinkOptions:
        """Validated widths; raises ``InvalidSinkConfigError`` if out of range."""
        return SinkOptions(
            days_width=self.days_width,
            secs_width=self.secs_width,
            ms_width=self.ms_width,
            caller_width=self.caller_width,
        )


# Module-level singleton; import as `from sinkline.config import settings`
settings = SinklineSettings()
