"""Date-to-row resolution for the monthly planning tabs.

The date column (L) holds one spreadsheet serial number per planned day.
resolve_row() compares those serials against the serial of the target date;
the day-of-month numbers sometimes typed into older tabs are not matched.
"""

from datetime import date
from typing import Any

from src.suites.errors import RowNotFoundError
from src.suites.logging import get_logger
from src.suites.sheets.layout import (
    DATE_COLUMN,
    FIRST_DATE_ROW,
    LAST_DATE_ROW,
    excel_serial,
)
from src.suites.sheets.snapshot import SheetSnapshot

log = get_logger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_serial(value: Any) -> int | None:
    """Coerce a date cell to an integer serial (45658, 45658.0, "45658")."""
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return int(value)
        return int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


def resolve_row(sheet: SheetSnapshot, target_date: date) -> int:
    """Find the 1-based row of `target_date` in the date column.

    Scans rows FIRST_DATE_ROW..LAST_DATE_ROW and stops at the first cell whose
    serial equals the target serial.

    Raises:
        RowNotFoundError: If no row matches; carries every (row, raw value)
            pair that was scanned.
    """
    serial = excel_serial(target_date)
    trace: list[tuple[int, Any]] = []

    for row in range(FIRST_DATE_ROW, LAST_DATE_ROW + 1):
        value = sheet.cell(row, DATE_COLUMN)
        if _is_blank(value):
            continue
        trace.append((row, value))
        if _as_serial(value) == serial:
            log.debug(
                "row_resolved",
                sheet=sheet.title,
                date=target_date.isoformat(),
                serial=serial,
                row=row,
            )
            return row

    log.warning(
        "row_not_found",
        sheet=sheet.title,
        date=target_date.isoformat(),
        serial=serial,
        scanned=len(trace),
    )
    raise RowNotFoundError(target_date, serial, trace)
