"""Edit suite occupancy service for the monthly planning spreadsheet.

Resolves a calendar date to its row in the month's tab and reads the
(title, editor) cells of every edit suite on that row.
"""

from src.suites.models import Suite, SuitesReport, SuiteStatus
from src.suites.service import fallback_suites, get_suites_for_date
from src.suites.sheets.layout import SUITE_SLOTS

__all__ = [
    "Suite",
    "SuitesReport",
    "SuiteStatus",
    "SUITE_SLOTS",
    "fallback_suites",
    "get_suites_for_date",
]
