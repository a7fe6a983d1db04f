"""Read-only snapshots of spreadsheet tabs.

A SheetSnapshot is a plain grid of cell values. The resolver and the
extractor only ever see snapshots, so they run the same against the live
Google source and against the in-memory source used by tests and demos.
"""

from typing import Any, Protocol, Sequence

from src.suites.logging import get_logger

log = get_logger(__name__)


class SheetSnapshot:
    """Cell values of one tab, fetched once per request.

    Rows are addressed 1-based (as shown in the spreadsheet UI), columns
    0-based (as returned by column_to_index).
    """

    def __init__(self, title: str, values: Sequence[Sequence[Any]]) -> None:
        self.title = title
        self.values = values

    def cell(self, row: int, col: int) -> Any:
        """Return the raw value at (row, col), or None outside the grid."""
        if row < 1 or col < 0 or row > len(self.values):
            return None
        cells = self.values[row - 1]
        if col >= len(cells):
            return None
        return cells[col]

    def __repr__(self) -> str:
        return f"SheetSnapshot(title={self.title!r}, rows={len(self.values)})"


class SpreadsheetSource(Protocol):
    """Anything that can hand out a tab snapshot by title."""

    def get_tab(self, title: str) -> SheetSnapshot | None:
        """Return the tab snapshot, or None if no tab has that title."""
        ...


class InMemorySource:
    """Spreadsheet source backed by a dict of tab title -> rows."""

    def __init__(self, tabs: dict[str, Sequence[Sequence[Any]]] | None = None) -> None:
        self.tabs: dict[str, Sequence[Sequence[Any]]] = dict(tabs or {})

    def get_tab(self, title: str) -> SheetSnapshot | None:
        values = self.tabs.get(title)
        if values is None:
            log.debug("tab_missing", title=title, available=sorted(self.tabs))
            return None
        return SheetSnapshot(title, values)
