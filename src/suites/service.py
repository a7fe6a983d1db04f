"""Suite occupancy lookup for a single date.

Ties the pieces together: tab name -> tab snapshot -> date row -> suites.
Every call re-reads the tab; there is no state shared between calls.
"""

import random
from datetime import date

from src.suites.errors import SheetNotFoundError
from src.suites.logging import get_logger
from src.suites.models import Suite, SuiteStatus, SuitesReport
from src.suites.sheets.extractor import (
    extract_suites,
    placeholder_progress,
    unknown_progress,
)
from src.suites.sheets.layout import SUITE_SLOTS, sheet_name_for_date
from src.suites.sheets.resolver import resolve_row
from src.suites.sheets.snapshot import SpreadsheetSource

log = get_logger(__name__)

# Shown by the front end whenever the live lookup fails
_FALLBACK_OCCUPIED: dict[str, tuple[str, str, int]] = {
    "EM1": ("Isis", "S & F", 50),
    "EM2": ("RAID", "Yolanthe", 65),
}


def fallback_suites() -> list[Suite]:
    """Static placeholder schedule, one entry per suite slot."""
    suites: list[Suite] = []
    for slot in SUITE_SLOTS:
        if slot.name in _FALLBACK_OCCUPIED:
            editor, project, progress = _FALLBACK_OCCUPIED[slot.name]
            suites.append(
                Suite(
                    name=slot.name,
                    editor=editor,
                    project=project,
                    progress=progress,
                    status=SuiteStatus.OCCUPIED,
                )
            )
        else:
            suites.append(Suite(name=slot.name))
    return suites


def get_suites_for_date(
    source: SpreadsheetSource,
    target_date: date,
    *,
    placeholder: bool = True,
    rng: random.Random | None = None,
) -> SuitesReport:
    """Look up every suite's occupancy on `target_date`.

    Args:
        source: Where the monthly tabs come from.
        target_date: Day to look up.
        placeholder: Fill occupied suites' progress with a random 20-99
            value; when False their progress is None.
        rng: Random generator for placeholder progress (tests seed it).

    Raises:
        SheetNotFoundError: If the month's tab does not exist.
        RowNotFoundError: If the tab has no row for the date.
    """
    sheet_name = sheet_name_for_date(target_date)
    sheet = source.get_tab(sheet_name)
    if sheet is None:
        log.warning(
            "sheet_not_found", sheet=sheet_name, date=target_date.isoformat()
        )
        raise SheetNotFoundError(sheet_name, target_date)

    row = resolve_row(sheet, target_date)
    progress = placeholder_progress(rng) if placeholder else unknown_progress
    suites = extract_suites(sheet, row, progress=progress)

    log.info(
        "suites_extracted",
        sheet=sheet_name,
        date=target_date.isoformat(),
        row=row,
        occupied=sum(1 for s in suites if s.status is SuiteStatus.OCCUPIED),
    )
    return SuitesReport(
        target_date=target_date,
        sheet_name=sheet_name,
        target_row=row,
        suites=suites,
    )
