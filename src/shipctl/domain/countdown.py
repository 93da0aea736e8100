"""Countdown breakdown of the time left before a cutoff."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


@dataclass(frozen=True)
class Countdown:
    """Whole days, hours, minutes and seconds remaining."""

    days: int
    hours: int
    minutes: int
    seconds: int
    total_seconds: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def elapsed_between(start: datetime, end: datetime) -> timedelta:
    """Real elapsed time from *start* to *end*.

    Aware values are compared in UTC; same-zone subtraction would ignore
    a DST shift between the two instants.
    """
    if start.tzinfo is not None and end.tzinfo is not None:
        return end.astimezone(UTC) - start.astimezone(UTC)
    return end - start


def time_until(now: datetime, deadline: datetime) -> Countdown:
    """Break ``deadline - now`` into countdown fields, clamped at zero."""
    total = max(0, math.floor(elapsed_between(now, deadline).total_seconds()))
    days, rest = divmod(total, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return Countdown(
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        total_seconds=total,
    )
