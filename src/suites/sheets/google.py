"""Google Sheets access for the monthly planning tabs.

GoogleSheetsSource authenticates with an injected SheetsCredentials object,
opens the spreadsheet read-only and returns whole-tab snapshots. Values are
read unformatted so the date column arrives as serial numbers rather than
locale-formatted date strings.
"""

import gspread
import requests
from google.auth.exceptions import GoogleAuthError, TransportError as AuthTransportError
from google.oauth2.service_account import Credentials
from gspread.utils import ValueRenderOption
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from src.suites.config import SheetsCredentials
from src.suites.errors import (
    AuthenticationError,
    PermanentError,
    RateLimitError,
    TransientError,
)
from src.suites.logging import get_logger
from src.suites.sheets.snapshot import SheetSnapshot

log = get_logger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_client(credentials: SheetsCredentials) -> gspread.Client:
    """Authorize a gspread client from service-account credentials."""
    info = {
        "type": "service_account",
        "client_email": credentials.client_email,
        "private_key": credentials.private_key_pem,
        "token_uri": TOKEN_URI,
    }
    try:
        creds = Credentials.from_service_account_info(info, scopes=SCOPES)
    except (ValueError, GoogleAuthError) as e:
        raise AuthenticationError(f"Invalid service account credentials: {e}") from e
    return gspread.authorize(creds)


def classify_api_error(error: gspread.exceptions.APIError) -> Exception:
    """Map a Sheets API error onto the retry hierarchy."""
    status = error.response.status_code
    if status == 429:
        return RateLimitError(f"Sheets API rate limit exceeded: {error}")
    if status in (401, 403):
        return AuthenticationError(f"Sheets API refused access ({status}): {error}")
    if status >= 500:
        return TransientError(f"Sheets API unavailable ({status}): {error}")
    return PermanentError(f"Sheets API error ({status}): {error}")


class GoogleSheetsSource:
    """Spreadsheet source reading tabs through the Google Sheets API.

    Each get_tab() call performs one fresh read; nothing is cached between
    requests.
    """

    def __init__(
        self,
        credentials: SheetsCredentials,
        *,
        attempts: int = 2,
        wait_seconds: float = 2.0,
        client: gspread.Client | None = None,
    ) -> None:
        """Initialize GoogleSheetsSource.

        Args:
            credentials: Spreadsheet id and service-account identity.
            attempts: Tries per read when the API fails transiently.
            wait_seconds: Fixed wait between tries.
            client: Pre-built gspread client (tests inject a fake here).
        """
        self.spreadsheet_id = credentials.spreadsheet_id
        self.attempts = attempts
        self.wait_seconds = wait_seconds
        self.client = client if client is not None else build_client(credentials)

    def get_tab(self, title: str) -> SheetSnapshot | None:
        """Fetch all values of the tab named `title`.

        Returns:
            The tab snapshot, or None if the spreadsheet has no such tab.

        Raises:
            TransientError: If the API kept failing after all attempts.
            AuthenticationError: If the service account has no access.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_fixed(self.wait_seconds),
            retry=retry_if_exception_type(TransientError),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                return self._read_tab(title)
        return None

    def _read_tab(self, title: str) -> SheetSnapshot | None:
        try:
            spreadsheet = self.client.open_by_key(self.spreadsheet_id)
            worksheet = spreadsheet.worksheet(title)
            values = worksheet.get_all_values(
                value_render_option=ValueRenderOption.unformatted
            )
        except gspread.exceptions.WorksheetNotFound:
            log.info("tab_missing", title=title)
            return None
        except gspread.exceptions.SpreadsheetNotFound as e:
            raise PermanentError(
                f"Spreadsheet {self.spreadsheet_id} not found or not shared"
            ) from e
        except gspread.exceptions.APIError as e:
            error = classify_api_error(e)
            log.warning(
                "sheets_api_error",
                title=title,
                status=e.response.status_code,
                type=type(error).__name__,
            )
            raise error from e
        except AuthTransportError as e:
            log.warning("sheets_token_refresh_failed", title=title, error=str(e))
            raise TransientError(f"Network error refreshing access token: {e}") from e
        except GoogleAuthError as e:
            log.error("sheets_auth_error", error=str(e))
            raise AuthenticationError(f"Service account authentication failed: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("sheets_network_error", title=title, error=str(e))
            raise TransientError(f"Network error reading tab {title}: {e}") from e

        log.debug("tab_fetched", title=title, rows=len(values))
        return SheetSnapshot(title, values)
