"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from typing import Any

from rich.panel import Panel

from shipctl.config.models import DisplayConfig
from shipctl.output.console import create_console, get_output
from shipctl.output.renderers import render_countdown_panel, render_quiet, render_result
from shipctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────

COUNTDOWN = {"days": 0, "hours": 2, "minutes": 0, "seconds": 0, "total_seconds": 7200}

ITEMS = [
    ("Overnight (1 Business Day)", 1, "2023-11-21", False),
    ("2 Business Days", 2, "2023-11-22", False),
    ("3-4 Business Days", 4, "2023-11-27", True),
    ("5-7 Business Days", 7, "2023-11-30", True),
    ("8-10 Business Days", 10, "2023-12-05", True),
]


def _ok(op: str, **data: Any) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _cutoff() -> ServiceResult:
    return _ok(
        "cutoff",
        now="2023-11-20T10:00:00-05:00",
        cutoff="2023-11-20T12:00:00-05:00",
        cutoff_date="2023-11-20",
        cutoff_time="12:00",
        timezone="America/New_York",
        countdown=COUNTDOWN,
    )


def _delivery_dates() -> ServiceResult:
    return _ok(
        "delivery_dates",
        cutoff="2023-11-20T12:00:00-05:00",
        cutoff_date="2023-11-20",
        cutoff_time="12:00",
        count=len(ITEMS),
        items=[
            {"label": label, "business_days": n, "delivery_date": d, "contains_holiday": h}
            for label, n, d, h in ITEMS
        ],
        contains_holiday=True,
    )


def _recommend(option: dict[str, Any] | None, *, all_succeed: bool = False) -> ServiceResult:
    return _ok(
        "recommend",
        outcome="matched" if option else "all_options_insufficient",
        cutoff="2023-11-13T12:00:00-05:00",
        cutoff_date="2023-11-13",
        target_date="2023-11-16",
        business_days_needed=3,
        option=option,
        all_options_succeed=all_succeed,
    )


def _line_index(output: str, needle: str) -> int:
    return next(i for i, line in enumerate(output.splitlines()) if needle in line)


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("recommend", "INVALID_TARGET", "Pick a later date"))
        assert "ERROR" in output
        assert "recommend" in output
        assert "Pick a later date" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("recommend", "INVALID_TARGET", "Bad", target_date="2023-11-13")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "target_date: 2023-11-13" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


# ── Schedule renderers ────────────────────────────────────────────────


class TestCutoffRenderer:
    def test_banner_and_countdown(self) -> None:
        output = render_result(_cutoff())
        assert "Orders placed before 12:00pm E.S.T." in output
        assert "Monday, November 20th" in output
        assert "Order within: 2 Hours  0 Minutes  0 Seconds" in output
        assert "America/New_York" not in output

    def test_verbose_fields(self) -> None:
        output = render_result(_cutoff(), verbose=True)
        assert "timezone: America/New_York" in output

    def test_display_label(self) -> None:
        output = render_result(_cutoff(), display=DisplayConfig(timezone_label="ET"))
        assert "12:00pm ET" in output


class TestDeliveryDatesRenderer:
    def test_table_slowest_first(self) -> None:
        output = render_result(_delivery_dates())
        assert "Shipping Speed" in output
        assert "Guaranteed Delivery On or Before" in output
        assert "Tuesday, December 5th*" in output
        assert "Tuesday, November 21st" in output
        assert "Tuesday, November 21st*" not in output
        assert _line_index(output, "8-10 Business Days") < _line_index(output, "Overnight")
        assert "*A shipping holiday has been accounted for" in output

    def test_fastest_first(self) -> None:
        output = render_result(_delivery_dates(), display=DisplayConfig(slowest_first=False))
        assert _line_index(output, "Overnight") < _line_index(output, "8-10 Business Days")

    def test_no_holiday_note_without_holiday(self) -> None:
        result = _ok(
            "delivery_dates",
            cutoff_date="2023-12-04",
            cutoff_time="12:00",
            items=[
                {
                    "label": "Overnight (1 Business Day)",
                    "business_days": 1,
                    "delivery_date": "2023-12-05",
                    "contains_holiday": False,
                }
            ],
            contains_holiday=False,
        )
        assert "shipping holiday" not in render_result(result)

    def test_verbose_adds_columns(self) -> None:
        output = render_result(_delivery_dates(), verbose=True)
        assert "Business Days" in output
        assert "2023-12-05" in output


class TestProjectRenderer:
    def test_fields(self) -> None:
        result = _ok(
            "project",
            base="2023-11-20T12:00:00-05:00",
            business_days=3,
            delivery_date="2023-11-24",
            contains_holiday=True,
        )
        output = render_result(result)
        assert "OK" in output
        assert "business_days: 3" in output
        assert "delivery_date: Friday, November 24th*" in output


# ── Recommendation renderer ───────────────────────────────────────────


class TestRecommendRenderer:
    def test_matched(self) -> None:
        output = render_result(_recommend({"label": "2 Business Days", "business_days": 2}))
        assert "Recommended: 2 Business Days" in output
        assert "Thursday, November 16th" in output
        assert "business_days_needed: 3" in output
        assert "Every shipping speed" not in output

    def test_all_options_succeed_note(self) -> None:
        option = {"label": "8-10 Business Days", "business_days": 10}
        output = render_result(_recommend(option, all_succeed=True))
        assert "Every shipping speed arrives in time" in output

    def test_no_option(self) -> None:
        output = render_result(_recommend(None))
        assert "No shipping speed can deliver by Thursday, November 16th" in output


# ── Calendar renderers ────────────────────────────────────────────────


class TestCalendarRenderers:
    def test_business_day(self) -> None:
        result = _ok(
            "check_date",
            date="2023-11-22",
            is_weekend=False,
            is_holiday=False,
            is_business_day=True,
            next_business_day="2023-11-22",
        )
        assert "Wednesday, November 22nd is a business day" in render_result(result)

    def test_holiday(self) -> None:
        result = _ok(
            "check_date",
            date="2023-11-23",
            is_weekend=False,
            is_holiday=True,
            is_business_day=False,
            next_business_day="2023-11-24",
        )
        output = render_result(result)
        assert "Thursday, November 23rd is shipping holiday" in output
        assert "next_business_day: Friday, November 24th" in output

    def test_holidays_table(self) -> None:
        result = _ok(
            "list_holidays",
            count=2,
            items=[
                {"date": "2023-11-23", "is_weekend": False},
                {"date": "2023-11-25", "is_weekend": True},
            ],
        )
        output = render_result(result)
        assert "2023-11-23" in output
        assert "Saturday, November 25th (weekend)" in output
        assert "2 holidays" in output

    def test_holidays_verbose_timing(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_holidays",
            data={"count": 1, "items": [{"date": "2023-12-25", "is_weekend": False}]},
            meta={"telemetry": {"name": "CalendarService.list_holidays", "ms": 0.2}},
        )
        assert "CalendarService.list_holidays" in render_result(result, verbose=True)
        assert "CalendarService.list_holidays" not in render_result(result)


# ── Generic fallback and verbose meta ─────────────────────────────────


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("mystery", answer=42, nested={"a": 1}))
        assert "OK" in output
        assert "answer: 42" in output
        assert '{"a":1}' in output

    def test_verbose_telemetry_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="mystery",
            meta={
                "telemetry": {
                    "name": "ScheduleService.delivery_dates",
                    "ms": 1.5,
                    "stages": [
                        {"name": "project_all", "ms": 0.4, "notes": {"options": 5}}
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "ScheduleService.delivery_dates" in output
        assert "project_all  (options=5)" in output


# ── Quiet and live panel ──────────────────────────────────────────────


class TestRenderQuiet:
    def test_cutoff(self) -> None:
        assert render_quiet(_cutoff()) == "2023-11-20T12:00:00-05:00"

    def test_delivery_dates(self) -> None:
        lines = render_quiet(_delivery_dates()).splitlines()
        assert lines[0] == "1\t2023-11-21"
        assert lines[-1] == "10\t2023-12-05"

    def test_recommend(self) -> None:
        assert render_quiet(_recommend({"label": "2 Business Days", "business_days": 2})) == (
            "2 Business Days"
        )
        assert render_quiet(_recommend(None)) == "none"

    def test_check_date(self) -> None:
        assert render_quiet(_ok("check_date", is_business_day=False)) == "closed"

    def test_error(self) -> None:
        assert render_quiet(_err("recommend", "INVALID_TARGET", "nope")) == (
            "ERROR: recommend — nope"
        )

    def test_unknown(self) -> None:
        assert render_quiet(_ok("mystery")) == "OK: mystery"


class TestCountdownPanel:
    def test_panel_renders(self) -> None:
        panel = render_countdown_panel(_cutoff())
        assert isinstance(panel, Panel)
        console = create_console(no_color=True)
        console.print(panel)
        output = get_output(console)
        assert "Shipping cutoff" in output
        assert "Order within:" in output
        assert "HOURS" in output
        assert "SECONDS" in output
