"""BaseService — abstract foundation for all shipctl services.

Every service receives the frozen settings and a :class:`ReferenceClock`
at construction time.  The holiday set and speed table are built once
per service from ``settings.shipping`` and reused across calls.
"""

from __future__ import annotations

from datetime import time
from typing import TYPE_CHECKING

from shipctl.domain.calendar import HolidaySet
from shipctl.domain.types import ShippingSpeedOption

if TYPE_CHECKING:
    from shipctl.config.settings import ShipSettings
    from shipctl.infrastructure.clock import ReferenceClock


class BaseService:
    """Abstract base for all service-layer classes.

    Subclasses implement operations on top of the pure domain functions,
    wrapping their outputs in :class:`ServiceResult`.

    Usage::

        class ScheduleService(BaseService):
            @traced
            def cutoff(self) -> ServiceResult:
                cutoff = next_cutoff(self._clock.now(), self._holidays, ...)
                ...
    """

    def __init__(self, settings: ShipSettings, clock: ReferenceClock) -> None:
        self._settings = settings
        self._clock = clock
        self._holidays: HolidaySet = settings.shipping.holiday_set()
        self._options: tuple[ShippingSpeedOption, ...] = settings.shipping.speed_options()

    @property
    def _cutoff_time(self) -> time:
        return self._settings.shipping.cutoff_time
