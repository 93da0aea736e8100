"""Cutoff resolution — the next instant an order can still ship same-day.

The cutoff is a fixed wall-clock time (noon by default) on the next
business day. Reaching the cutoff time exactly counts as having missed it.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from shipctl.domain.calendar import HolidaySet, is_business_day, max_skip_days

NOON = time(12, 0)

_ONE_DAY = timedelta(days=1)


def next_business_day(day: date, holidays: HolidaySet) -> date:
    """Return *day* itself if it is a business day, else the next one.

    Raises:
        RuntimeError: if the scan exceeds :func:`max_skip_days`, which a
            finite holiday set cannot cause.
    """
    cursor = day
    for _ in range(max_skip_days(holidays) + 1):
        if is_business_day(cursor, holidays):
            return cursor
        cursor += _ONE_DAY
    msg = f"No business day within {max_skip_days(holidays)} days of {day.isoformat()}"
    raise RuntimeError(msg)


def next_cutoff(
    now: datetime,
    holidays: HolidaySet,
    *,
    cutoff_time: time = NOON,
) -> datetime:
    """Resolve the next shipping cutoff at or after *now*.

    *now* must already be expressed in the reference timezone; the result
    carries the same ``tzinfo``.
    """
    candidate = now.date()
    if now.time() >= cutoff_time:
        candidate += _ONE_DAY
    candidate = next_business_day(candidate, holidays)
    return datetime.combine(candidate, cutoff_time, tzinfo=now.tzinfo)
