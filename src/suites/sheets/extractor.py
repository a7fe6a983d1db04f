"""Suite extraction from a resolved planning row.

Each suite owns a (title, editor) column pair. A suite is occupied when
either cell holds text. Editors are often typed with a role suffix
("Jane - Pilot", "Jane - EM") that is stripped before display.
"""

import random
from typing import Any, Callable

from src.suites.errors import CellReadError
from src.suites.logging import get_logger
from src.suites.models import Suite, SuiteSlot, SuiteStatus
from src.suites.sheets.layout import SUITE_SLOTS, column_to_index
from src.suites.sheets.snapshot import SheetSnapshot

log = get_logger(__name__)

ROLE_SUFFIXES = (" - Pilot", " - EM")
SEPARATOR = " - "

# Placeholder progress for occupied suites, in [PROGRESS_MIN, PROGRESS_MAX)
PROGRESS_MIN = 20
PROGRESS_MAX = 100

ProgressSource = Callable[[], int | None]


def clean_editor(editor: str) -> str:
    """Strip a trailing role annotation ("Jane - Pilot" -> "Jane")."""
    editor = editor.strip()
    if any(suffix in editor for suffix in ROLE_SUFFIXES):
        return editor.split(SEPARATOR, 1)[0].strip()
    return editor


def derive_status(title: str, editor: str) -> SuiteStatus:
    if title.strip() or editor.strip():
        return SuiteStatus.OCCUPIED
    return SuiteStatus.FREE


def placeholder_progress(rng: random.Random | None = None) -> ProgressSource:
    """Progress source yielding a random integer in [20, 100)."""
    rng = rng or random.Random()
    return lambda: rng.randrange(PROGRESS_MIN, PROGRESS_MAX)


def unknown_progress() -> int | None:
    return None


def _cell_text(sheet: SheetSnapshot, row: int, col: int) -> str:
    value: Any = sheet.cell(row, col)
    # Unchecked boxes and zero count as empty
    if not value:
        return ""
    try:
        return str(value).strip()
    except Exception as e:
        raise CellReadError(f"Unreadable cell at row {row}, column {col}") from e


def _read_text(sheet: SheetSnapshot, row: int, col: int, suite: str) -> str:
    try:
        return _cell_text(sheet, row, col)
    except CellReadError as e:
        log.debug("cell_read_failed", sheet=sheet.title, suite=suite, error=str(e))
        return ""


def extract_suite(
    sheet: SheetSnapshot, row: int, slot: SuiteSlot, progress: ProgressSource
) -> Suite:
    title = _read_text(sheet, row, column_to_index(slot.title_col), slot.name)
    editor = _read_text(sheet, row, column_to_index(slot.editor_col), slot.name)

    status = derive_status(title, editor)
    return Suite(
        name=slot.name,
        editor=clean_editor(editor),
        project=title,
        progress=progress() if status is SuiteStatus.OCCUPIED else 0,
        status=status,
    )


def extract_suites(
    sheet: SheetSnapshot,
    row: int,
    progress: ProgressSource | None = None,
    slots: tuple[SuiteSlot, ...] = SUITE_SLOTS,
) -> list[Suite]:
    """Read every suite on `row`, in the fixed slot order.

    Args:
        sheet: Snapshot of the month's tab.
        row: 1-based row returned by resolve_row().
        progress: Called once per occupied suite; defaults to the random
            placeholder source.
        slots: Suite column layout.

    Returns:
        One Suite per slot. Empty or missing cells count as empty text.
    """
    progress = progress or placeholder_progress()
    suites = [extract_suite(sheet, row, slot, progress) for slot in slots]

    log.debug(
        "row_suites_read",
        sheet=sheet.title,
        row=row,
        occupied=sum(1 for s in suites if s.status is SuiteStatus.OCCUPIED),
    )
    return suites
