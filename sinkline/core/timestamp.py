"""Fixed-width elapsed-time field.

Layout::

    [ {pad}{D}d {pad}{S}s.{M} ]     at least one day elapsed
    [ {blank}   {pad}{S}s.{M} ]     under one day

``D`` is whole days, ``S`` seconds into the day (0-86399) and ``M``
milliseconds (0-999).  With the default widths (5/5/3) every value up to
9999 days lines up in the same columns.
"""

from __future__ import annotations

from datetime import timedelta

MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND

MAX_DAYS = 10_000
# Last value that still renders; anything at or past MAX_DAYS is dropped.
MAX_ELAPSED = timedelta(days=MAX_DAYS) - timedelta(milliseconds=1)


def decompose(elapsed: timedelta) -> tuple[int, int, int]:
    """Split *elapsed* into ``(days, seconds_of_day, milliseconds)``."""
    total_ms = elapsed // timedelta(milliseconds=1)
    days, rest = divmod(total_ms, MS_PER_DAY)
    seconds, millis = divmod(rest, MS_PER_SECOND)
    return days, seconds, millis


def encode_elapsed(
    elapsed: timedelta,
    days_width: int = 5,
    secs_width: int = 5,
    ms_width: int = 3,
) -> str | None:
    """Render *elapsed* as a timestamp field.

    Returns ``None`` when *elapsed* is negative or at least ``MAX_DAYS``
    days; the caller omits the field rather than writing a garbled one.
    Sub-millisecond remainders are truncated, so anything below the
    ceiling renders at most as ``MAX_ELAPSED``.
    """
    if elapsed < timedelta(0) or elapsed >= timedelta(days=MAX_DAYS):
        return None

    days, seconds, millis = decompose(elapsed)

    if days > 0:
        day_text = f"{days}d"
        day_pad = max(days_width - 1 - len(str(days)), 0)
    else:
        day_text = ""
        day_pad = days_width

    secs_text = str(seconds)
    secs_pad = max(secs_width - len(secs_text), 0)

    ms_text = str(millis)
    ms_pad = max(ms_width - len(ms_text), 0)

    return (
        "[ "
        + " " * day_pad
        + day_text
        + " "
        + " " * secs_pad
        + secs_text
        + "s."
        + "0" * ms_pad
        + ms_text
        + " ]"
    )
