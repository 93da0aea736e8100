"""Parametrized --help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from shipctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["cutoff", "dates", "project", "recommend", "calendar", "--now"]),
    (["cutoff", "--help"], ["--watch", "--ticks", "--interval"]),
    (["dates", "--help"], ["delivery dates"]),
    (["project", "--help"], ["BUSINESS_DAYS", "--base"]),
    (["recommend", "--help"], ["TARGET_DATE"]),
    (["calendar", "--help"], ["check", "holidays"]),
    (["calendar", "check", "--help"], ["DAY"]),
    (["calendar", "holidays", "--help"], ["--upcoming"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["cutoff", "--examples"], ["shipctl cutoff --watch"]),
    (["dates", "--examples"], ["shipctl dates"]),
    (["project", "--examples"], ["--base"]),
    (["recommend", "--examples"], ["shipctl recommend"]),
    (["calendar", "--examples"], ["shipctl calendar check"]),
    (["calendar", "check", "--examples"], ["calendar check"]),
    (["calendar", "holidays", "--examples"], ["--upcoming"]),
]


def _cmd_id(args_keywords: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = args_keywords
    return "_".join(a for a in args if not a.startswith("--")) or "root"


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_cmd_id(item) for item in HELP_COMMANDS],
)
def test_command_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_cmd_id(item) for item in EXAMPLES_COMMANDS],
)
def test_command_examples(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output
