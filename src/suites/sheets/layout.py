"""Fixed layout of the monthly planning tabs.

Each month lives in its own tab named "{MONTH} {YY}" in Dutch, e.g.
"OKTOBER 26". Column L holds one spreadsheet serial date per day in rows
6-50; every suite occupies a (title, editor) column pair on that row.
"""

from datetime import date

from src.suites.models import SuiteSlot

DUTCH_MONTHS: tuple[str, ...] = (
    "JANUARI",
    "FEBRUARI",
    "MAART",
    "APRIL",
    "MEI",
    "JUNI",
    "JULI",
    "AUGUSTUS",
    "SEPTEMBER",
    "OKTOBER",
    "NOVEMBER",
    "DECEMBER",
)

# Date column (L) and the 1-based row range scanned for the target date
DATE_COLUMN = 11
FIRST_DATE_ROW = 6
LAST_DATE_ROW = 50

# Serial 1 is 1900-01-01; the +2 absorbs the fake 1900-02-29 and the 1-based count
SERIAL_EPOCH = date(1900, 1, 1)
SERIAL_OFFSET = 2

SUITE_SLOTS: tuple[SuiteSlot, ...] = (
    SuiteSlot(name="EM1", title_col="N", editor_col="O"),
    SuiteSlot(name="EM2", title_col="Q", editor_col="R"),
    SuiteSlot(name="EM3", title_col="T", editor_col="U"),
    SuiteSlot(name="EM4", title_col="W", editor_col="X"),
    SuiteSlot(name="EM5", title_col="Z", editor_col="AA"),
    SuiteSlot(name="EM6", title_col="AC", editor_col="AD"),
    SuiteSlot(name="VM1", title_col="AH", editor_col="AI"),
    SuiteSlot(name="VM2", title_col="AK", editor_col="AL"),
    SuiteSlot(name="SCHIJF", title_col="AN", editor_col="AO"),
)


def sheet_name_for_date(target_date: date) -> str:
    """Return the tab name holding `target_date`, e.g. "OKTOBER 26"."""
    month = DUTCH_MONTHS[target_date.month - 1]
    return f"{month} {target_date.year % 100:02d}"


def excel_serial(target_date: date) -> int:
    """Spreadsheet serial number of `target_date` (2025-01-01 -> 45658)."""
    return (target_date - SERIAL_EPOCH).days + SERIAL_OFFSET


def column_to_index(label: str) -> int:
    """Convert a column label to a zero-based index ("A" -> 0, "AA" -> 26).

    Labels are bijective base-26 numerals: A=1 .. Z=26, there is no zero digit.

    Raises:
        ValueError: If the label is empty or contains non A-Z characters.
    """
    letters = label.strip().upper()
    if not letters or not all("A" <= ch <= "Z" for ch in letters):
        raise ValueError(f"Invalid column label {label!r}")

    result = 0
    for ch in letters:
        result = result * 26 + (ord(ch) - ord("A") + 1)
    return result - 1
