"""Display formatting for dates, cutoff times, and countdown segments.

Formats are fixed en-US ("Monday, December 1st", "12:00pm") and do not
depend on the process locale.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from shipctl.domain.countdown import Countdown

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal_suffix(n: int) -> str:
    """Append an English ordinal suffix.

    Examples:
        >>> ordinal_suffix(1), ordinal_suffix(12), ordinal_suffix(22), ordinal_suffix(113)
        ('1st', '12th', '22nd', '113th')
    """
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    return f"{n}{_SUFFIXES.get(n % 10, 'th')}"


def to_date(value: date | str) -> date:
    """Accept a date, datetime, or ISO string and return the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if "T" in value:
        return datetime.fromisoformat(value).date()
    return date.fromisoformat(value)


def format_display_date(value: date | str) -> str:
    """Format as "Weekday, Month Ordinal-day", e.g. ``Monday, December 1st``."""
    day = to_date(value)
    weekday = WEEKDAY_NAMES[day.weekday()]
    month = MONTH_NAMES[day.month - 1]
    return f"{weekday}, {month} {ordinal_suffix(day.day)}"


def format_cutoff_time(value: time | str) -> str:
    """12-hour clock without a space before the meridiem, e.g. ``12:00pm``."""
    t = time.fromisoformat(value) if isinstance(value, str) else value
    hour = t.hour % 12 or 12
    meridiem = "am" if t.hour < 12 else "pm"
    return f"{hour}:{t.minute:02d}{meridiem}"


def countdown_segments(countdown: Countdown | Mapping[str, Any]) -> list[tuple[int, str]]:
    """Visible ``(value, label)`` pairs for a countdown display.

    Days appear only when at least one remains; hours when non-zero or
    days remain; minutes always; seconds only inside the final day.
    Labels are singular for a value of exactly 1.
    """
    if isinstance(countdown, Countdown):
        fields: Mapping[str, Any] = countdown.to_dict()
    else:
        fields = countdown
    days = int(fields.get("days", 0))
    hours = int(fields.get("hours", 0))
    minutes = int(fields.get("minutes", 0))
    seconds = int(fields.get("seconds", 0))

    shown: list[tuple[int, str]] = []
    if days >= 1:
        shown.append((days, "Days"))
    if hours >= 1 or days > 0:
        shown.append((hours, "Hours"))
    shown.append((minutes, "Minutes"))
    if days == 0:
        shown.append((seconds, "Seconds"))

    return [(value, label[:-1] if value == 1 else label) for value, label in shown]
