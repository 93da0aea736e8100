"""Command group: inspect the shipping calendar."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipGroup

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext

_CALENDAR_EXAMPLES = """\
  shipctl calendar check 2023-11-23
  shipctl calendar holidays
  shipctl calendar holidays --upcoming"""


@click.group(cls=ShipGroup, examples=_CALENDAR_EXAMPLES)
@click.pass_obj
def calendar(app: AppContext) -> None:
    """Inspect business days and shipping holidays."""


@calendar.command(
    examples="""\
  shipctl calendar check 2023-11-23
  shipctl --json calendar check 2023-11-25"""
)
@click.argument("day", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_obj
def check(app: AppContext, day: datetime) -> None:
    """Check whether DAY (YYYY-MM-DD) is a business day."""
    from shipctl.services.calendar import CalendarService

    app.emit(CalendarService(app.settings, app.clock).check_date(day.date()))


@calendar.command(
    examples="""\
  shipctl calendar holidays
  shipctl -q calendar holidays --upcoming"""
)
@click.option("--upcoming", is_flag=True, help="Only holidays from today on.")
@click.pass_obj
def holidays(app: AppContext, upcoming: bool) -> None:
    """List configured shipping holidays."""
    from shipctl.services.calendar import CalendarService

    app.emit(CalendarService(app.settings, app.clock).list_holidays(upcoming=upcoming))
