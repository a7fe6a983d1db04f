"""Date-to-row resolution against the date column."""

from datetime import date

import pytest

from conftest import blank_grid, month_grid, row_of
from src.suites.errors import RowNotFoundError
from src.suites.sheets.layout import DATE_COLUMN, FIRST_DATE_ROW, LAST_DATE_ROW, excel_serial
from src.suites.sheets.resolver import resolve_row
from src.suites.sheets.snapshot import SheetSnapshot


def test_resolves_exact_row(october_sheet):
    assert resolve_row(october_sheet, date(2026, 10, 19)) == row_of(19)


def test_different_days_resolve_to_different_rows(october_sheet):
    first = resolve_row(october_sheet, date(2026, 10, 1))
    last = resolve_row(october_sheet, date(2026, 10, 31))
    assert first == FIRST_DATE_ROW
    assert last == row_of(31)
    assert first != last


def test_first_match_wins():
    grid = blank_grid()
    serial = excel_serial(date(2026, 10, 19))
    grid[9][DATE_COLUMN] = serial
    grid[19][DATE_COLUMN] = serial
    assert resolve_row(SheetSnapshot("OKTOBER 26", grid), date(2026, 10, 19)) == 10


@pytest.mark.parametrize("value", ["46314", 46314.0, " 46314 ", "46314.0"])
def test_serial_cell_formats(value):
    grid = blank_grid()
    grid[FIRST_DATE_ROW + 2][DATE_COLUMN] = value
    sheet = SheetSnapshot("OKTOBER 26", grid)
    assert resolve_row(sheet, date(2026, 10, 19)) == FIRST_DATE_ROW + 3


def test_day_of_month_numbers_do_not_match():
    grid = blank_grid()
    for day in range(1, 32):
        grid[FIRST_DATE_ROW + day - 2][DATE_COLUMN] = day
    with pytest.raises(RowNotFoundError):
        resolve_row(SheetSnapshot("OKTOBER 26", grid), date(2026, 10, 19))


def test_rows_outside_range_are_ignored():
    grid = blank_grid(rows=60)
    serial = excel_serial(date(2026, 10, 19))
    grid[FIRST_DATE_ROW - 2][DATE_COLUMN] = serial  # row 5
    grid[LAST_DATE_ROW][DATE_COLUMN] = serial  # row 51
    with pytest.raises(RowNotFoundError):
        resolve_row(SheetSnapshot("OKTOBER 26", grid), date(2026, 10, 19))


def test_last_row_in_range_is_scanned():
    grid = blank_grid()
    grid[LAST_DATE_ROW - 1][DATE_COLUMN] = excel_serial(date(2026, 10, 19))
    assert resolve_row(SheetSnapshot("OKTOBER 26", grid), date(2026, 10, 19)) == LAST_DATE_ROW


def test_no_match_carries_trace():
    grid = month_grid(2026, 9, 3)
    grid[FIRST_DATE_ROW + 4][DATE_COLUMN] = "Totaal"
    sheet = SheetSnapshot("OKTOBER 26", grid)

    with pytest.raises(RowNotFoundError) as ctx:
        resolve_row(sheet, date(2026, 10, 19))

    err = ctx.value
    assert err.serial == excel_serial(date(2026, 10, 19))
    assert err.trace == [
        (6, excel_serial(date(2026, 9, 1))),
        (7, excel_serial(date(2026, 9, 2))),
        (8, excel_serial(date(2026, 9, 3))),
        (11, "Totaal"),
    ]
    assert "2026-10-19" in str(err)
    assert "Row 11: 'Totaal'" in str(err)


def test_short_sheet_does_not_fail_on_missing_rows():
    sheet = SheetSnapshot("OKTOBER 26", [[""] * 12 for _ in range(3)])
    with pytest.raises(RowNotFoundError) as ctx:
        resolve_row(sheet, date(2026, 10, 19))
    assert ctx.value.trace == []


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_cells_are_traced_and_skipped(value):
    grid = blank_grid()
    grid[FIRST_DATE_ROW - 1][DATE_COLUMN] = value
    grid[FIRST_DATE_ROW][DATE_COLUMN] = excel_serial(date(2026, 10, 19))
    assert resolve_row(SheetSnapshot("OKTOBER 26", grid), date(2026, 10, 19)) == FIRST_DATE_ROW + 1


def test_non_finite_cell_appears_in_trace():
    grid = blank_grid()
    grid[FIRST_DATE_ROW - 1][DATE_COLUMN] = float("inf")
    with pytest.raises(RowNotFoundError) as ctx:
        resolve_row(SheetSnapshot("OKTOBER 26", grid), date(2026, 10, 19))
    assert ctx.value.trace == [(FIRST_DATE_ROW, float("inf"))]
