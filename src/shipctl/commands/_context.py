"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the reference clock and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shipctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shipctl.config.settings import ShipSettings
    from shipctl.infrastructure.clock import ReferenceClock
    from shipctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The clock is created
    lazily so ``--help`` and ``--version`` never touch timezone data.
    """

    def __init__(self, settings: ShipSettings) -> None:
        self.settings = settings
        self._clock: ReferenceClock | None = None

        from shipctl.config.logging import bind_run_context, configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_run_context(
            timezone=settings.shipping.timezone,
            pinned=settings.now is not None,
        )

        if settings.verbose:
            from shipctl.services.telemetry import set_telemetry

            set_telemetry(True)

    @property
    def clock(self) -> ReferenceClock:
        """Reference-timezone clock, pinned when ``--now`` was given."""
        if self._clock is None:
            from shipctl.infrastructure.clock import ReferenceClock

            self._clock = ReferenceClock(
                self.settings.shipping.timezone,
                fixed_now=self.settings.now,
            )
        return self._clock

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            display=self.settings.display,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
