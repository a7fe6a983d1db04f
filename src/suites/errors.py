"""Error hierarchy for suite schedule lookups.

Transient failures (should retry) are separated from permanent failures
(should not retry) so tenacity decorators can classify them automatically.

Example usage with tenacity:
    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(2))
    def get_tab(self, title: str) -> SheetSnapshot:
        ...
"""

from datetime import date
from typing import Any

from src.suites.sheets.layout import DUTCH_MONTHS


class SuitesError(Exception):
    """Base exception for all suite schedule errors."""

    pass


class TransientError(SuitesError):
    """Temporary failure that may succeed on retry.

    Examples: network timeouts, 503 from the Sheets API.
    """

    pass


class RateLimitError(TransientError):
    """Sheets API quota exceeded (HTTP 429).

    Inherits from TransientError so tenacity will retry it.
    """

    pass


class PermanentError(SuitesError):
    """Failure that won't succeed on retry."""

    pass


class AuthenticationError(PermanentError):
    """Service account rejected by Google (HTTP 401/403)."""

    pass


class ConfigurationError(PermanentError):
    """Required spreadsheet settings are missing or unusable."""

    pass


class SheetNotFoundError(PermanentError):
    """The monthly tab for the requested date does not exist yet."""

    def __init__(self, sheet_name: str, target_date: date) -> None:
        self.sheet_name = sheet_name
        self.target_date = target_date
        month = DUTCH_MONTHS[target_date.month - 1].lower()
        super().__init__(
            f"Sheet {sheet_name} not found. "
            f"Planning voor {month} {target_date.year} nog niet beschikbaar."
        )


class RowNotFoundError(PermanentError):
    """No row in the date column matches the requested date.

    Carries every scanned (row, raw value) pair so a misconfigured tab can be
    diagnosed from the error message alone.
    """

    def __init__(
        self, target_date: date, serial: int, trace: list[tuple[int, Any]]
    ) -> None:
        self.target_date = target_date
        self.serial = serial
        self.trace = trace
        scanned = " | ".join(f"Row {row}: {value!r}" for row, value in trace)
        super().__init__(
            f"No row found for {target_date.isoformat()} (serial {serial}). "
            f"Scanned: {scanned or 'no values'}"
        )


class CellReadError(SuitesError):
    """A single cell could not be read.

    Never reaches callers of the extractor: the cell is treated as empty.
    """

    pass
