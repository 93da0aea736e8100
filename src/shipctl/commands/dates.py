"""Command: guaranteed delivery date for every shipping speed."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext


@click.command(
    cls=ShipCommand,
    examples="""\
  shipctl dates
  shipctl --now 2023-11-20T10:00 dates
  shipctl -v dates
  shipctl --json dates""",
)
@click.pass_obj
def dates(app: AppContext) -> None:
    """List delivery dates for each shipping speed from the next cutoff."""
    from shipctl.services.schedule import ScheduleService

    app.emit(ScheduleService(app.settings, app.clock).delivery_dates())
