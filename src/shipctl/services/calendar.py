"""CalendarService — inspect the configured business-day calendar."""

from __future__ import annotations

from datetime import date

from shipctl.domain.calendar import is_business_day, is_shipping_holiday, is_weekend
from shipctl.domain.cutoff import next_business_day
from shipctl.services.base import BaseService
from shipctl.services.result import ServiceResult
from shipctl.services.telemetry import traced


class CalendarService(BaseService):
    """Answers "does this date ship?" and lists holidays."""

    @traced
    def check_date(self, day: date) -> ServiceResult:
        weekend = is_weekend(day)
        holiday = is_shipping_holiday(day, self._holidays)
        return ServiceResult(
            ok=True,
            op="check_date",
            data={
                "date": day.isoformat(),
                "is_weekend": weekend,
                "is_holiday": holiday,
                "is_business_day": is_business_day(day, self._holidays),
                "next_business_day": next_business_day(day, self._holidays).isoformat(),
            },
        )

    @traced
    def list_holidays(self, *, upcoming: bool = False) -> ServiceResult:
        """List configured shipping holidays.

        Args:
            upcoming: Only holidays on or after today in the reference zone.
        """
        if upcoming:
            holidays = self._holidays.on_or_after(self._clock.today())
        else:
            holidays = list(self._holidays)

        items = [
            {
                "date": d.isoformat(),
                "is_weekend": is_weekend(d),
            }
            for d in holidays
        ]
        warnings: list[str] = []
        if any(i["is_weekend"] for i in items):
            warnings.append("Some holidays fall on a weekend and have no effect")

        return ServiceResult(
            ok=True,
            op="list_holidays",
            data={"count": len(items), "items": items},
            warnings=warnings,
        )
