"""Reference-timezone clock — the engine's only source of "now".

Every instant the domain sees is produced here, already expressed in the
storefront's reference timezone (e.g. America/New_York).  A clock can be
pinned to a fixed instant so countdowns and cutoffs can be exercised at
any time of day.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)


class ReferenceClock:
    """Produces aware datetimes in a single named timezone.

    Args:
        timezone: IANA zone name.
        fixed_now: Pinned current time.  Naive values are read as wall-clock
            time in *timezone*; aware values are converted into it.
    """

    def __init__(self, timezone: str, fixed_now: datetime | None = None) -> None:
        self._zone = ZoneInfo(timezone)
        self._fixed_now = self.localize(fixed_now) if fixed_now is not None else None

    @property
    def timezone(self) -> str:
        return self._zone.key

    @property
    def pinned(self) -> bool:
        return self._fixed_now is not None

    def now(self) -> datetime:
        """Current instant in the reference timezone."""
        if self._fixed_now is not None:
            return self._fixed_now
        return datetime.now(self._zone)

    def today(self) -> date:
        return self.now().date()

    def localize(self, value: datetime) -> datetime:
        """Express *value* in the reference timezone."""
        if value.tzinfo is None:
            return value.replace(tzinfo=self._zone)
        return value.astimezone(self._zone)

    def advance(self, seconds: float) -> None:
        """Move a pinned clock forward (used by the watch loop's tick)."""
        if self._fixed_now is None:
            return
        self._fixed_now = self.localize(
            self._fixed_now.astimezone(UTC) + timedelta(seconds=seconds)
        )
        logger.debug("Pinned clock advanced to %s", self._fixed_now.isoformat())
