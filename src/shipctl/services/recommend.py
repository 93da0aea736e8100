"""RecommendService — slowest shipping speed that still meets a date.

``invalid_target`` becomes a failed result (the customer picked a date
that cannot be served).  ``all_options_insufficient`` is a successful
lookup with no option and a warning.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from shipctl.domain.recommend import Recommendation, recommend_speed
from shipctl.domain.types import RecommendationOutcome
from shipctl.services.base import BaseService
from shipctl.services.result import ServiceResult
from shipctl.services.telemetry import current_span, traced

logger = logging.getLogger(__name__)


def _recommendation_data(rec: Recommendation) -> dict[str, Any]:
    option = None
    if rec.option is not None:
        option = {"label": rec.option.label, "business_days": rec.option.business_days}
    return {
        "outcome": str(rec.outcome),
        "cutoff": rec.cutoff.isoformat(),
        "cutoff_date": rec.cutoff.date().isoformat(),
        "target_date": rec.target.date().isoformat(),
        "business_days_needed": rec.business_days_needed,
        "option": option,
        "all_options_succeed": rec.all_options_succeed,
    }


class RecommendService(BaseService):
    """Inverse lookup from a target delivery date to a shipping speed."""

    @traced
    def recommend(self, target: date) -> ServiceResult:
        """Recommend a speed that delivers on or before *target*."""
        rec = recommend_speed(
            self._clock.now(),
            target,
            self._options,
            self._holidays,
            cutoff_time=self._cutoff_time,
        )
        data = _recommendation_data(rec)

        span = current_span()
        if span:
            span.annotate("outcome", data["outcome"])
            span.annotate("business_days_needed", rec.business_days_needed)

        if rec.outcome is RecommendationOutcome.INVALID_TARGET:
            logger.debug("Target %s not after cutoff %s", data["target_date"], data["cutoff"])
            return ServiceResult.failure(
                "recommend",
                "INVALID_TARGET",
                f"Delivery date {data['target_date']} must be after the next "
                f"shipping cutoff on {data['cutoff_date']}",
                detail=data,
            )

        warnings: list[str] = []
        if rec.outcome is RecommendationOutcome.ALL_OPTIONS_INSUFFICIENT:
            warnings.append(
                f"No shipping speed can deliver by {data['target_date']} "
                f"({rec.business_days_needed} business days available)"
            )

        return ServiceResult(ok=True, op="recommend", data=data, warnings=warnings)
