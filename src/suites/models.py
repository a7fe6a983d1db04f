"""Pydantic models for suite occupancy data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel


class SuiteStatus(str, Enum):
    """Occupancy of a suite on the target date.

    Values are the Dutch labels the front end renders and compares against.
    """

    OCCUPIED = "Bezet"
    FREE = "Vrij"


class SuiteSlot(BaseModel):
    """A schedulable edit bay and the columns holding its title and editor."""

    name: str  # "EM1", "VM2", "SCHIJF"
    title_col: str  # Column letter of the project title, e.g. "N"
    editor_col: str  # Column letter of the editor name, e.g. "O"


class Suite(BaseModel):
    """One suite's occupancy for the target date, as served to the front end."""

    name: str
    editor: str = ""  # Cleaned of " - Pilot" / " - EM" role suffixes
    project: str = ""  # Trimmed title cell
    progress: int | None = 0  # Placeholder 20-99 when occupied, None if unknown
    status: SuiteStatus = SuiteStatus.FREE


class SuitesReport(BaseModel):
    """Resolved tab/row and the extracted suites for one date."""

    target_date: date
    sheet_name: str  # "OKTOBER 26"
    target_row: int  # 1-based spreadsheet row
    suites: list[Suite]
