"""
UTC timestamp acquisition.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
UNKNOWN_TIME = "UNKNOWN TIME"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_iso8601(clock: Clock = utc_now) -> str | None:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``.

    Returns None when the clock cannot be read or the value cannot be
    rendered; callers substitute ``UNKNOWN TIME``.
    """
    try:
        moment = clock()
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        rendered = moment.astimezone(timezone.utc).strftime(ISO8601_FORMAT)
    except (OSError, OverflowError, ValueError, AttributeError):
        return None
    # strftime pads years below 1000 inconsistently across platforms
    if len(rendered) != 20:
        return None
    return rendered
