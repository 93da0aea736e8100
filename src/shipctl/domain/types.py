"""Shipping speed options and recommendation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ShippingSpeedOption:
    """A named service level and the business days it needs in transit."""

    label: str
    business_days: int


class RecommendationOutcome(StrEnum):
    """Result variants of a speed recommendation."""

    INVALID_TARGET = "invalid_target"
    MATCHED = "matched"
    ALL_OPTIONS_INSUFFICIENT = "all_options_insufficient"


# Fastest first.
DEFAULT_SPEED_OPTIONS: tuple[ShippingSpeedOption, ...] = (
    ShippingSpeedOption("Overnight (1 Business Day)", 1),
    ShippingSpeedOption("2 Business Days", 2),
    ShippingSpeedOption("3-4 Business Days", 4),
    ShippingSpeedOption("5-7 Business Days", 7),
    ShippingSpeedOption("8-10 Business Days", 10),
)
