"""Speed recommendation — the inverse of delivery projection.

Given a date the customer needs the order by, count the business days
available after the next cutoff and pick the slowest (cheapest) speed
whose transit time still fits. When every speed fits, the slowest one is
still the answer; ``all_options_succeed`` lets the caller say so.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from shipctl.domain.calendar import HolidaySet, as_date, is_business_day
from shipctl.domain.cutoff import NOON, next_cutoff
from shipctl.domain.types import RecommendationOutcome, ShippingSpeedOption


@dataclass(frozen=True)
class Recommendation:
    """Outcome of :func:`recommend_speed`.

    Attributes:
        outcome: Which result variant applies.
        cutoff: The next shipping cutoff the count starts from.
        target: Target delivery instant (cutoff time on the target date).
        business_days_needed: Business days between cutoff and target.
        option: The chosen speed; only set for ``MATCHED``.
        all_options_succeed: Every configured speed would arrive in time.
    """

    outcome: RecommendationOutcome
    cutoff: datetime
    target: datetime
    business_days_needed: int = 0
    option: ShippingSpeedOption | None = None
    all_options_succeed: bool = False


def count_business_days(start: date, end: date, holidays: HolidaySet) -> int:
    """Count business days in the half-open range ``(start, end]``."""
    cursor = as_date(start)
    stop = as_date(end)
    count = 0
    while cursor < stop:
        cursor += timedelta(days=1)
        if is_business_day(cursor, holidays):
            count += 1
    return count


def select_option(
    options: Sequence[ShippingSpeedOption],
    business_days_needed: int,
) -> ShippingSpeedOption | None:
    """Slowest option whose transit fits in *business_days_needed*.

    Ties keep the first option in configured order.
    """
    best: ShippingSpeedOption | None = None
    for option in options:
        if option.business_days > business_days_needed:
            continue
        if best is None or option.business_days > best.business_days:
            best = option
    return best


def recommend_speed(
    now: datetime,
    target: date,
    options: Sequence[ShippingSpeedOption],
    holidays: HolidaySet,
    *,
    cutoff_time: time = NOON,
) -> Recommendation:
    """Recommend a shipping speed that delivers on or before *target*."""
    cutoff = next_cutoff(now, holidays, cutoff_time=cutoff_time)
    target_at = datetime.combine(as_date(target), cutoff_time, tzinfo=cutoff.tzinfo)

    if target_at <= cutoff:
        return Recommendation(RecommendationOutcome.INVALID_TARGET, cutoff, target_at)

    needed = count_business_days(cutoff, target_at, holidays)
    if needed < 1:
        return Recommendation(
            RecommendationOutcome.INVALID_TARGET,
            cutoff,
            target_at,
            business_days_needed=needed,
        )

    option = select_option(options, needed)
    if option is None:
        return Recommendation(
            RecommendationOutcome.ALL_OPTIONS_INSUFFICIENT,
            cutoff,
            target_at,
            business_days_needed=needed,
        )

    slowest = max(o.business_days for o in options)
    return Recommendation(
        RecommendationOutcome.MATCHED,
        cutoff,
        target_at,
        business_days_needed=needed,
        option=option,
        all_options_succeed=needed >= slowest,
    )
