"""Construction-time formatting options for a sink."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sinkline.errors import InvalidSinkConfigError

MIN_FIELD_WIDTH = 1
MAX_FIELD_WIDTH = 16
MIN_CALLER_WIDTH = 5
MAX_CALLER_WIDTH = 70


class SinkOptions(BaseModel):
    """Padding widths for the timestamp and caller-info fields.

    Out-of-range values raise ``InvalidSinkConfigError`` at construction.
    """

    model_config = ConfigDict(frozen=True)

    days_width: int = Field(5, ge=MIN_FIELD_WIDTH, le=MAX_FIELD_WIDTH)
    secs_width: int = Field(5, ge=MIN_FIELD_WIDTH, le=MAX_FIELD_WIDTH)
    ms_width: int = Field(3, ge=MIN_FIELD_WIDTH, le=MAX_FIELD_WIDTH)
    caller_width: int = Field(60, ge=MIN_CALLER_WIDTH, le=MAX_CALLER_WIDTH)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise InvalidSinkConfigError(f"Invalid sink options: {problems}") from exc
