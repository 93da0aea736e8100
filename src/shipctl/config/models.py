"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shipctl.toml only contains
overrides. A storefront typically sets just ``[shipping] holidays``.
"""

from __future__ import annotations

from datetime import date, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from shipctl.domain.calendar import HolidaySet
from shipctl.domain.types import DEFAULT_SPEED_OPTIONS, ShippingSpeedOption

# --- shipctl.toml sections ---


class SpeedOptionConfig(BaseModel):
    """One ``[[shipping.speeds]]`` entry."""

    model_config = {"frozen": True}

    label: str
    business_days: int = Field(gt=0)

    def to_option(self) -> ShippingSpeedOption:
        return ShippingSpeedOption(label=self.label, business_days=self.business_days)


def _default_speeds() -> list[SpeedOptionConfig]:
    return [
        SpeedOptionConfig(label=o.label, business_days=o.business_days)
        for o in DEFAULT_SPEED_OPTIONS
    ]


def _default_holidays() -> list[date]:
    return [date(2026, 11, 26), date(2026, 12, 25), date(2027, 1, 1)]


class ShippingConfig(BaseModel):
    """[shipping] section."""

    model_config = {"frozen": True}

    timezone: str = "America/New_York"
    cutoff_time: time = time(12, 0)
    holidays: list[date] = Field(default_factory=_default_holidays)
    speeds: list[SpeedOptionConfig] = Field(default_factory=_default_speeds)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone: {value!r}"
            raise ValueError(msg) from exc
        return value

    @field_validator("cutoff_time")
    @classmethod
    def _naive_cutoff(cls, value: time) -> time:
        # The cutoff is a wall-clock time in ``timezone``.
        return value.replace(tzinfo=None)

    def holiday_set(self) -> HolidaySet:
        return HolidaySet(self.holidays)

    def speed_options(self) -> tuple[ShippingSpeedOption, ...]:
        """Configured speeds, fastest first (configured order is kept)."""
        return tuple(s.to_option() for s in self.speeds)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    timezone_label: str = "E.S.T."
    holiday_note: str = "*A shipping holiday has been accounted for in this timeline"
    slowest_first: bool = True
