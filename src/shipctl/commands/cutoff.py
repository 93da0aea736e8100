"""Command: next shipping cutoff with a countdown, optionally live."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext
    from shipctl.services.schedule import ScheduleService


@click.command(
    cls=ShipCommand,
    examples="""\
  shipctl cutoff
  shipctl --now 2023-11-20T11:59:40 cutoff
  shipctl cutoff --watch
  shipctl --now 2023-11-20T11:59:55 cutoff --watch --ticks 10
  shipctl --json cutoff""",
)
@click.option("--watch", is_flag=True, help="Redraw the countdown until interrupted.")
@click.option(
    "--ticks",
    type=click.IntRange(min=1),
    default=None,
    help="Stop --watch after this many refreshes.",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0),
    default=1.0,
    show_default=True,
    help="Seconds between --watch refreshes.",
)
@click.pass_obj
def cutoff(app: AppContext, watch: bool, ticks: int | None, interval: float) -> None:
    """Show the next shipping cutoff and the time left to order."""
    from shipctl.services.schedule import ScheduleService

    svc = ScheduleService(app.settings, app.clock)
    if not watch:
        app.emit(svc.cutoff())
        return

    try:
        if app.settings.json_output or app.settings.quiet:
            _watch_plain(app, svc, ticks=ticks, interval=interval)
        else:
            _watch_live(app, svc, ticks=ticks, interval=interval)
    except KeyboardInterrupt:
        pass


def _tick(app: AppContext, interval: float) -> None:
    time.sleep(interval)
    if app.clock.pinned:
        # A pinned clock does not move on its own.
        app.clock.advance(interval)


def _watch_plain(
    app: AppContext,
    svc: ScheduleService,
    *,
    ticks: int | None,
    interval: float,
) -> None:
    count = 0
    while ticks is None or count < ticks:
        if count:
            _tick(app, interval)
        app.emit(svc.cutoff())
        count += 1


def _watch_live(
    app: AppContext,
    svc: ScheduleService,
    *,
    ticks: int | None,
    interval: float,
) -> None:
    from rich.console import Console
    from rich.live import Live

    from shipctl.output.console import SHIP_THEME
    from shipctl.output.renderers import render_countdown_panel

    display = app.settings.display
    console = Console(theme=SHIP_THEME, highlight=False)

    # The cutoff is re-resolved every tick, so an expired countdown rolls
    # over to the next business day on its own.
    with Live(
        render_countdown_panel(svc.cutoff(), display=display),
        console=console,
        auto_refresh=False,
    ) as live:
        count = 1
        while ticks is None or count < ticks:
            _tick(app, interval)
            live.update(render_countdown_panel(svc.cutoff(), display=display), refresh=True)
            count += 1
