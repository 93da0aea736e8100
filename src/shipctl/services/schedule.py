"""ScheduleService — next cutoff, countdown, and delivery-date table.

Drives the storefront banner ("Orders placed before 12:00pm on ...
will arrive on or before ...") from the current reference-zone time.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from shipctl.domain.countdown import time_until
from shipctl.domain.cutoff import next_cutoff
from shipctl.domain.delivery import project_all, project_delivery
from shipctl.services.base import BaseService
from shipctl.services.result import ServiceResult
from shipctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ScheduleService(BaseService):
    """Computes cutoffs and forward delivery projections."""

    def _next_cutoff(self, now: datetime) -> datetime:
        cutoff = next_cutoff(now, self._holidays, cutoff_time=self._cutoff_time)
        skipped = (cutoff.date() - now.date()).days
        if skipped > 1:
            logger.debug("Cutoff deferred %d days to %s", skipped, cutoff.date().isoformat())
        return cutoff

    # ------------------------------------------------------------------
    # cutoff
    # ------------------------------------------------------------------

    @traced
    def cutoff(self) -> ServiceResult:
        """Resolve the next shipping cutoff and the time left to reach it."""
        now = self._clock.now()
        cutoff = self._next_cutoff(now)
        countdown = time_until(now, cutoff)

        return ServiceResult(
            ok=True,
            op="cutoff",
            data={
                "now": now.isoformat(),
                "cutoff": cutoff.isoformat(),
                "cutoff_date": cutoff.date().isoformat(),
                "cutoff_time": self._cutoff_time.isoformat(timespec="minutes"),
                "timezone": self._clock.timezone,
                "countdown": countdown.to_dict(),
            },
        )

    # ------------------------------------------------------------------
    # delivery_dates: one row per configured speed
    # ------------------------------------------------------------------

    @traced
    def delivery_dates(self) -> ServiceResult:
        """Project every configured shipping speed from the next cutoff."""
        now = self._clock.now()
        cutoff = self._next_cutoff(now)

        with trace_span("project_all") as span:
            rows = project_all(cutoff, self._options, self._holidays)
            if span:
                span.annotate("options", len(rows))

        items: list[dict[str, Any]] = [
            {
                "label": option.label,
                "business_days": option.business_days,
                "delivery_date": projection.delivery_date.isoformat(),
                "contains_holiday": projection.contains_holiday,
            }
            for option, projection in rows
        ]

        warnings: list[str] = []
        if not items:
            warnings.append("No shipping speeds configured")

        return ServiceResult(
            ok=True,
            op="delivery_dates",
            data={
                "cutoff": cutoff.isoformat(),
                "cutoff_date": cutoff.date().isoformat(),
                "cutoff_time": self._cutoff_time.isoformat(timespec="minutes"),
                "count": len(items),
                "items": items,
                "contains_holiday": any(i["contains_holiday"] for i in items),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # project: a single business-day count
    # ------------------------------------------------------------------

    @traced
    def project(self, business_days: int, *, base: datetime | None = None) -> ServiceResult:
        """Project *business_days* from *base* (default: the next cutoff).

        Args:
            business_days: Required transit days.  Zero or negative leaves
                the base date unchanged.
            base: Starting instant; naive values are read in the reference
                timezone.
        """
        if base is None:
            start = self._next_cutoff(self._clock.now())
        else:
            start = self._clock.localize(base)

        projection = project_delivery(start, business_days, self._holidays)

        warnings: list[str] = []
        if business_days <= 0:
            warnings.append(
                f"business_days={business_days} is not positive; base date returned unchanged"
            )

        return ServiceResult(
            ok=True,
            op="project",
            data={
                "base": start.isoformat(),
                "business_days": business_days,
                "delivery_date": projection.delivery_date.isoformat(),
                "contains_holiday": projection.contains_holiday,
            },
            warnings=warnings,
        )
