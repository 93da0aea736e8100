"""Delivery date projection from a cutoff instant.

Packages never deliver on the day they ship, so the cursor advances
before each check. Weekends and holidays are stepped over without
consuming transit days; touching a holiday marks the whole projection.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from shipctl.domain.calendar import HolidaySet, as_date, is_shipping_holiday, is_weekend
from shipctl.domain.types import ShippingSpeedOption


@dataclass(frozen=True)
class DeliveryProjection:
    """Guaranteed delivery date and whether a holiday was stepped over."""

    delivery_date: date
    contains_holiday: bool = False


def project_delivery(
    base: date,
    business_days: int,
    holidays: HolidaySet,
) -> DeliveryProjection:
    """Advance *business_days* business days past *base*'s calendar date.

    Non-positive day counts return *base*'s date unchanged.
    """
    cursor = as_date(base)
    contains_holiday = False
    remaining = business_days

    while remaining > 0:
        cursor += timedelta(days=1)
        holiday = is_shipping_holiday(cursor, holidays)
        if holiday:
            contains_holiday = True
        if not holiday and not is_weekend(cursor):
            remaining -= 1

    return DeliveryProjection(delivery_date=cursor, contains_holiday=contains_holiday)


def project_all(
    base: date,
    options: Iterable[ShippingSpeedOption],
    holidays: HolidaySet,
) -> list[tuple[ShippingSpeedOption, DeliveryProjection]]:
    """Project every speed option from the same *base*, preserving order."""
    return [
        (option, project_delivery(base, option.business_days, holidays)) for option in options
    ]
