"""Shared pytest fixtures and test helpers for shipctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from datetime import date, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from shipctl.config.models import ShippingConfig
from shipctl.config.settings import ShipSettings
from shipctl.domain.calendar import HolidaySet
from shipctl.infrastructure.clock import ReferenceClock

# Thanksgiving 2023, Christmas 2023, New Year 2024.
HOLIDAYS_2023 = [date(2023, 11, 23), date(2023, 12, 25), date(2024, 1, 1)]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def holidays() -> HolidaySet:
    """The 2023 holiday season used throughout the scheduling tests."""
    return HolidaySet(HOLIDAYS_2023)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` invocations switch timing on for the shared context; undo it."""
    yield
    import structlog

    from shipctl.services.telemetry import _active, set_telemetry

    set_telemetry(False)
    _active.set(None)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no shipctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.delenv("SHIPCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def season_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A shipctl.toml carrying the 2023 holidays, in the working directory."""
    monkeypatch.delenv("SHIPCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "shipctl.toml"
    holidays = ", ".join(d.isoformat() for d in HOLIDAYS_2023)
    config.write_text(f"[shipping]\nholidays = [{holidays}]\n", encoding="utf-8")
    return config


def make_settings(now: datetime | None = None, **shipping: object) -> ShipSettings:
    """Settings on the 2023 holidays, pinned to *now*, without TOML discovery."""
    shipping.setdefault("holidays", HOLIDAYS_2023)
    return ShipSettings(
        now=now,
        shipping=ShippingConfig.model_validate(shipping),
    )


@pytest.fixture
def settings_at() -> Callable[..., tuple[ShipSettings, ReferenceClock]]:
    """Factory: ``settings_at(now, **shipping) -> (settings, clock)``."""

    def _build(now: datetime, **shipping: object) -> tuple[ShipSettings, ReferenceClock]:
        settings = make_settings(now, **shipping)
        clock = ReferenceClock(settings.shipping.timezone, fixed_now=settings.now)
        return settings, clock

    return _build


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Put the root and ``shipctl`` loggers back after configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    ship = logging.getLogger("shipctl")
    ship_level = ship.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    ship.setLevel(ship_level)
