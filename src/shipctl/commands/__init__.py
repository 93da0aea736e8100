"""Subcommand modules for shipctl.

Provides register_commands() which uses deferred imports to keep
``shipctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from shipctl.commands.calendar import calendar

    cli.add_command(calendar)

    # --- Standalone commands ---
    from shipctl.commands.cutoff import cutoff
    from shipctl.commands.dates import dates
    from shipctl.commands.project import project
    from shipctl.commands.recommend import recommend

    cli.add_command(cutoff)
    cli.add_command(dates)
    cli.add_command(project)
    cli.add_command(recommend)
