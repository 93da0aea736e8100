"""Command: recommend the slowest shipping speed that meets a date."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext


@click.command(
    cls=ShipCommand,
    examples="""\
  shipctl recommend 2023-11-16
  shipctl --now 2023-11-13T10:00 recommend 2023-11-17
  shipctl --json recommend 2024-01-31""",
)
@click.argument("target_date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_obj
def recommend(app: AppContext, target_date: datetime) -> None:
    """Recommend a shipping speed that delivers by TARGET_DATE (YYYY-MM-DD)."""
    from shipctl.services.recommend import RecommendService

    app.emit(RecommendService(app.settings, app.clock).recommend(target_date.date()))
