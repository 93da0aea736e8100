"""Command: project a delivery date for a business-day count."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext

DATETIME_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
]


@click.command(
    cls=ShipCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  shipctl project 3
  shipctl project 5 --base 2023-12-22T12:00
  shipctl project -1
  shipctl --json project 10""",
)
@click.argument("business_days", type=int)
@click.option(
    "--base",
    type=click.DateTime(formats=DATETIME_FORMATS),
    default=None,
    help="Start instant (reference timezone). Defaults to the next cutoff.",
)
@click.pass_obj
def project(app: AppContext, business_days: int, base: datetime | None) -> None:
    """Project the delivery date BUSINESS_DAYS business days out.

    Zero or a negative count (`shipctl project -1`) returns the base date
    with a warning.
    """
    from shipctl.services.schedule import ScheduleService

    app.emit(ScheduleService(app.settings, app.clock).project(business_days, base=base))
