"""Shared fixtures: an in-memory planning tab laid out like the real sheet."""

from datetime import date

import pytest

from src.suites.sheets.layout import DATE_COLUMN, FIRST_DATE_ROW, column_to_index, excel_serial
from src.suites.sheets.snapshot import InMemorySource, SheetSnapshot

GRID_ROWS = 50
GRID_COLS = column_to_index("AO") + 1


def blank_grid(rows: int = GRID_ROWS, cols: int = GRID_COLS) -> list[list]:
    return [["" for _ in range(cols)] for _ in range(rows)]


def put(grid: list[list], row: int, column: str, value) -> None:
    """Write `value` at 1-based `row` and column label `column`."""
    grid[row - 1][column_to_index(column)] = value


def month_grid(year: int, month: int, days: int) -> list[list]:
    """Grid with one serial per day of the month, starting at the first date row."""
    grid = blank_grid()
    for day in range(1, days + 1):
        grid[FIRST_DATE_ROW + day - 2][DATE_COLUMN] = excel_serial(date(year, month, day))
    return grid


def row_of(day: int) -> int:
    return FIRST_DATE_ROW + day - 1


@pytest.fixture
def october_grid() -> list[list]:
    """OKTOBER 26 with a few booked suites on 2026-10-19."""
    grid = month_grid(2026, 10, 31)
    row = row_of(19)
    put(grid, row, "N", "S & F")
    put(grid, row, "O", "Isis - Pilot")
    put(grid, row, "R", "  RAID  ")
    put(grid, row, "AN", "Archief")
    put(grid, row, "AO", "Jane - Something - EM")
    return grid


@pytest.fixture
def october_sheet(october_grid) -> SheetSnapshot:
    return SheetSnapshot("OKTOBER 26", october_grid)


@pytest.fixture
def source(october_grid) -> InMemorySource:
    return InMemorySource({"OKTOBER 26": october_grid})
