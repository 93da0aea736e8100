"""Click command classes that carry canned example invocations.

``--help`` stays short; ``shipctl <command> --examples`` prints the
examples attached with ``@cli.command(examples=...)`` and exits.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples.strip("\n"))
    ctx.exit(0)


class _ExamplesMixin:
    """Accepts ``examples=`` and exposes it through an eager flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show example invocations and exit.",
                )
            )


class ShipCommand(_ExamplesMixin, click.Command):
    pass


class ShipGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`ShipCommand`."""

    command_class = ShipCommand
