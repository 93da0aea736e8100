"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shipctl.config.models import DisplayConfig
from shipctl.output.console import create_console, get_output
from shipctl.output.dates import (
    countdown_segments,
    format_cutoff_time,
    format_display_date,
)

if TYPE_CHECKING:
    from rich.console import Console

    from shipctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    display: DisplayConfig | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    display = display or DisplayConfig()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, display=display)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "cutoff":
        return str(d.get("cutoff", ""))
    if result.op == "delivery_dates":
        return "\n".join(f"{i['business_days']}\t{i['delivery_date']}" for i in d.get("items", []))
    if result.op == "project":
        return str(d.get("delivery_date", ""))
    if result.op == "recommend":
        option = d.get("option")
        return option["label"] if option else "none"
    if result.op == "check_date":
        return "business" if d.get("is_business_day") else "closed"
    if result.op == "list_holidays":
        return "\n".join(str(i["date"]) for i in d.get("items", []))

    return f"OK: {result.op}"


def render_countdown_panel(result: ServiceResult, *, display: DisplayConfig | None = None) -> Panel:
    """Live-view panel for ``cutoff --watch``."""
    display = display or DisplayConfig()
    d = result.data
    segments = countdown_segments(d.get("countdown", {}))

    table = Table.grid(padding=(0, 3))
    for _ in segments:
        table.add_column(justify="center")
    table.add_row(*[Text(str(value), style="ship.count") for value, _ in segments])
    table.add_row(*[Text(label.upper(), style="ship.key") for _, label in segments])

    banner = _banner_text(d, display)
    body = Table.grid()
    body.add_row(banner)
    body.add_row(Text(""))
    body.add_row(Text("Order within:", style="bold"))
    body.add_row(table)
    return Panel(body, title="Shipping cutoff", border_style="ship.cutoff", expand=False)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ship.ok")
    op = Text(f"  {result.op}", style="ship.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ship.key")
    if key.endswith("date"):
        v = Text(str(value), style="ship.date")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    notes = span_data.get("notes") or {}
    if notes:
        extras = ", ".join(f"{key}={value}" for key, value in notes.items())
        line += f"  ({extras})"

    console.print(line)

    for stage in span_data.get("stages", []):
        _render_telemetry_tree(console, stage, indent=indent + 4)


def _banner_text(d: dict[str, Any], display: DisplayConfig) -> Text:
    """The "Orders placed before 12:00pm E.S.T. on <date> ..." banner line."""
    text = Text("Orders placed before ")
    cutoff_time = d.get("cutoff_time")
    if cutoff_time:
        text.append(f"{format_cutoff_time(cutoff_time)} {display.timezone_label}", style="bold")
    text.append(" on ")
    text.append(format_display_date(d["cutoff_date"]), style="ship.cutoff")
    text.append(" with offered shipping speeds will arrive on or before listed delivery dates.")
    return text


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ship.error")
    op = Text(f"  {result.op}", style="ship.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Schedule renderers ────────────────────────────────────────────────


def _render_cutoff(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    """Render the cutoff banner and countdown."""
    d = result.data
    console.print(_banner_text(d, display))
    segments = countdown_segments(d.get("countdown", {}))
    parts = "  ".join(f"[ship.count]{value}[/ship.count] {label}" for value, label in segments)
    console.print(f"\nOrder within: {parts}")
    if verbose:
        console.print()
        _field(console, "now", d.get("now"))
        _field(console, "cutoff", d.get("cutoff"))
        _field(console, "timezone", d.get("timezone"))
        _render_meta(console, result)


def _render_delivery_dates(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    """Render the delivery-date table, holiday rows marked with ``*``."""
    d = result.data
    items = list(d.get("items", []))
    if display.slowest_first:
        items.reverse()

    console.print(_banner_text(d, display))
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Shipping Speed", style="ship.speed")
    table.add_column("Guaranteed Delivery On or Before", style="ship.date")
    if verbose:
        table.add_column("Business Days", justify="right")
        table.add_column("Date", style="dim")

    for item in items:
        when = format_display_date(item["delivery_date"])
        if item.get("contains_holiday"):
            when += "*"
        row = [str(item["label"]), when]
        if verbose:
            row += [str(item["business_days"]), str(item["delivery_date"])]
        table.add_row(*row)

    console.print(table)
    if d.get("contains_holiday"):
        console.print(f"\n[ship.note]{display.holiday_note}[/ship.note]")
    if verbose:
        _render_meta(console, result)


def _render_project(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "base", d.get("base"))
    _field(console, "business_days", d.get("business_days"))
    when = format_display_date(d["delivery_date"])
    if d.get("contains_holiday"):
        when += "*"
    _field(console, "delivery_date", when)
    if d.get("contains_holiday"):
        console.print(f"\n[ship.note]{display.holiday_note}[/ship.note]")
    if verbose:
        _render_meta(console, result)


# ── Recommendation renderer ───────────────────────────────────────────


def _render_recommend(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    d = result.data
    target = format_display_date(d["target_date"])
    option = d.get("option")

    if option is None:
        console.print(
            f"[ship.warning]No shipping speed[/ship.warning] can deliver by "
            f"[ship.date]{target}[/ship.date]."
        )
    else:
        console.print(
            f"Recommended: [ship.speed]{option['label']}[/ship.speed]"
            f" — arrives on or before [ship.date]{target}[/ship.date]"
        )
        if d.get("all_options_succeed"):
            console.print(
                "[ship.note]Every shipping speed arrives in time; the slowest is shown.[/ship.note]"
            )

    _field(console, "cutoff", format_display_date(d["cutoff_date"]))
    _field(console, "business_days_needed", d.get("business_days_needed"))
    if verbose:
        _render_meta(console, result)


# ── Calendar renderers ────────────────────────────────────────────────


def _render_check_date(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    d = result.data
    when = format_display_date(d["date"])
    if d.get("is_business_day"):
        console.print(f"[ship.date]{when}[/ship.date] is a [ship.ok]business day[/ship.ok]")
    else:
        reasons = []
        if d.get("is_weekend"):
            reasons.append("weekend")
        if d.get("is_holiday"):
            reasons.append("shipping holiday")
        console.print(
            f"[ship.date]{when}[/ship.date] is [ship.holiday]{' and '.join(reasons)}[/ship.holiday]"
        )
        _field(console, "next_business_day", format_display_date(d["next_business_day"]))
    if verbose:
        _render_meta(console, result)


def _render_holidays(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", style="ship.date", no_wrap=True)
    table.add_column("Holiday")
    for item in items:
        label = format_display_date(item["date"])
        if item.get("is_weekend"):
            label += " (weekend)"
        table.add_row(str(item["date"]), label)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} holidays")
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    display: DisplayConfig,
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Schedule
    "cutoff": _render_cutoff,
    "delivery_dates": _render_delivery_dates,
    "project": _render_project,
    # Recommendation
    "recommend": _render_recommend,
    # Calendar
    "check_date": _render_check_date,
    "list_holidays": _render_holidays,
}
