"""Calendar predicates — weekend and shipping-holiday classification.

Pure functions over calendar dates. A ``datetime`` is accepted anywhere a
``date`` is, and only its wall-clock date is consulted: callers hand in
values already expressed in the reference timezone.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, datetime

SATURDAY = 5


def as_date(day: date) -> date:
    """Strip the time-of-day from *day* (``datetime`` is a ``date`` subclass)."""
    if isinstance(day, datetime):
        return day.date()
    return day


class HolidaySet:
    """Immutable set of shipping holidays.

    Packages make no transit progress on these dates. Iteration yields the
    dates in ascending order; duplicates collapse.
    """

    __slots__ = ("_dates", "_ordered")

    def __init__(self, dates: Iterable[date] = ()) -> None:
        self._dates = frozenset(as_date(d) for d in dates)
        self._ordered = tuple(sorted(self._dates))

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return as_date(day) in self._dates

    def __iter__(self) -> Iterator[date]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidaySet):
            return NotImplemented
        return self._dates == other._dates

    def __hash__(self) -> int:
        return hash(self._dates)

    def __repr__(self) -> str:
        return f"HolidaySet({[d.isoformat() for d in self._ordered]!r})"

    def on_or_after(self, day: date) -> list[date]:
        """Holidays falling on or after *day*, ascending."""
        start = as_date(day)
        return [d for d in self._ordered if d >= start]


def is_weekend(day: date) -> bool:
    """True for Saturday and Sunday."""
    return as_date(day).weekday() >= SATURDAY


def is_shipping_holiday(day: date, holidays: HolidaySet | Iterable[date]) -> bool:
    """True when *day* falls on one of *holidays* (time-of-day ignored)."""
    if isinstance(holidays, HolidaySet):
        return day in holidays
    target = as_date(day)
    return any(as_date(h) == target for h in holidays)


def is_business_day(day: date, holidays: HolidaySet | Iterable[date]) -> bool:
    """A business day is neither a weekend day nor a shipping holiday."""
    return not is_weekend(day) and not is_shipping_holiday(day, holidays)


def max_skip_days(holidays: HolidaySet) -> int:
    """Upper bound on consecutive non-business days for *holidays*.

    Only weekday holidays lengthen a run past a weekend. A run holding
    ``k`` of them spans at most ``k // 5 + 2`` weekends: one before the
    first holiday, one after each full week of holidays and one trailing.
    """
    count = len(holidays)
    return count + 2 * (count // 5 + 2)
