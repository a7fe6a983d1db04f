"""FastAPI application serving the daily suite schedule.

GET /api/suites?date=YYYY-MM-DD returns the occupancy of every suite for the
date (default: today). Any failure answers with success=false, the error
message and a static fallback schedule so the front end keeps rendering.
"""

from datetime import date, datetime, timezone
from typing import Callable

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.suites.config import SuitesConfig, get_config
from src.suites.errors import SuitesError
from src.suites.logging import get_logger
from src.suites.service import fallback_suites, get_suites_for_date
from src.suites.sheets.google import GoogleSheetsSource
from src.suites.sheets.snapshot import SpreadsheetSource

log = get_logger(__name__)

SourceFactory = Callable[[], SpreadsheetSource]


def google_source_factory(config: SuitesConfig) -> SourceFactory:
    """Build a fresh GoogleSheetsSource per request from `config`."""

    def factory() -> SpreadsheetSource:
        return GoogleSheetsSource(
            config.credentials(),
            attempts=config.fetch_attempts,
            wait_seconds=config.fetch_wait_seconds,
        )

    return factory


def parse_target_date(raw: str | None) -> date:
    """Parse the `date` query parameter; None or blank means today.

    Accepts plain ISO dates and full ISO timestamps (the date part is used).

    Raises:
        ValueError: If the value is not an ISO date.
    """
    if raw is None or not raw.strip():
        return date.today()
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Invalid date {raw!r}, expected YYYY-MM-DD") from None


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def failure_payload(message: str) -> dict:
    return {
        "success": False,
        "error": message,
        "fallback": True,
        "suites": [s.model_dump(mode="json") for s in fallback_suites()],
    }


def create_app(
    source_factory: SourceFactory | None = None,
    config: SuitesConfig | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        source_factory: Returns the spreadsheet source for one request.
            Defaults to a Google Sheets source built from `config`.
        config: Service configuration; defaults to the environment singleton.
    """
    config = config or get_config()
    source_factory = source_factory or google_source_factory(config)

    app = FastAPI(
        title="Edit Suites",
        description="Daily edit suite occupancy from the planning spreadsheet",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/api/suites")
    def get_suites(date: str | None = None):
        with structlog.contextvars.bound_contextvars(requested_date=date):
            return _suites_response(date)

    def _suites_response(date: str | None):
        try:
            target_date = parse_target_date(date)
            report = get_suites_for_date(
                source_factory(),
                target_date,
                placeholder=config.placeholder_progress,
            )
        except (SuitesError, ValueError) as e:
            log.warning("suites_request_failed", error=str(e), type=type(e).__name__)
            return JSONResponse(status_code=500, content=failure_payload(str(e)))
        except Exception as e:
            log.exception("suites_request_error", type=type(e).__name__)
            return JSONResponse(status_code=500, content=failure_payload(str(e)))

        return {
            "success": True,
            "type": "single",
            "targetDate": report.target_date.isoformat(),
            "sheetName": report.sheet_name,
            "targetRow": report.target_row,
            "suites": [s.model_dump(mode="json") for s in report.suites],
            "lastUpdate": _now_iso(),
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
