"""End-to-end lookup against an in-memory spreadsheet."""

import random
from datetime import date

import pytest
from structlog.testing import capture_logs

from conftest import month_grid, row_of
from src.suites.errors import RowNotFoundError, SheetNotFoundError
from src.suites.models import SuiteStatus
from src.suites.service import fallback_suites, get_suites_for_date
from src.suites.sheets.snapshot import InMemorySource


def test_report_for_booked_day(source):
    report = get_suites_for_date(source, date(2026, 10, 19), rng=random.Random(1))

    assert report.sheet_name == "OKTOBER 26"
    assert report.target_row == row_of(19)
    assert report.target_date == date(2026, 10, 19)
    assert len(report.suites) == 9
    assert report.suites[0].status is SuiteStatus.OCCUPIED
    assert 20 <= report.suites[0].progress < 100


def test_placeholder_disabled_reports_unknown_progress(source):
    report = get_suites_for_date(source, date(2026, 10, 19), placeholder=False)
    assert report.suites[0].progress is None
    assert report.suites[2].progress == 0


def test_missing_tab_names_month_and_year(source):
    with pytest.raises(SheetNotFoundError) as ctx:
        get_suites_for_date(source, date(2026, 11, 3))

    assert ctx.value.sheet_name == "NOVEMBER 26"
    message = str(ctx.value)
    assert "NOVEMBER 26" in message
    assert "november 2026" in message


def test_does_not_fall_back_to_other_tabs():
    source = InMemorySource({"OKTOBER 25": month_grid(2025, 10, 31)})
    with pytest.raises(SheetNotFoundError):
        get_suites_for_date(source, date(2026, 10, 19))


def test_tab_without_the_date_raises_row_not_found():
    # Tab named for October but filled with September serials
    source = InMemorySource({"OKTOBER 26": month_grid(2026, 9, 30)})
    with pytest.raises(RowNotFoundError) as ctx:
        get_suites_for_date(source, date(2026, 10, 19))
    assert len(ctx.value.trace) == 30


def test_fallback_suites():
    suites = fallback_suites()
    assert [s.name for s in suites] == [
        "EM1", "EM2", "EM3", "EM4", "EM5", "EM6", "VM1", "VM2", "SCHIJF",
    ]
    assert suites[0].editor == "Isis"
    assert suites[0].project == "S & F"
    assert suites[0].progress == 50
    assert suites[1].editor == "RAID"
    assert suites[1].progress == 65
    assert all(s.status is SuiteStatus.FREE and s.progress == 0 for s in suites[2:])


def test_lookup_logs_one_summary_event(source):
    with capture_logs() as logs:
        get_suites_for_date(source, date(2026, 10, 19), rng=random.Random(1))

    events = [entry["event"] for entry in logs]
    assert events.count("suites_extracted") == 1
    assert events.count("row_suites_read") == 1
    summary = next(entry for entry in logs if entry["event"] == "suites_extracted")
    assert summary["sheet"] == "OKTOBER 26"
    assert summary["occupied"] == 3
