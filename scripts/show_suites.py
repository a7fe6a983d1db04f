"""Print the edit suite schedule for a date as JSON or a table.

Standalone CLI script reading the planning spreadsheet with the service
account configured in .env (GOOGLE_SHEET_ID, GOOGLE_CLIENT_EMAIL,
GOOGLE_PRIVATE_KEY).

Run with: python scripts/show_suites.py
Date:     python scripts/show_suites.py --date 2026-10-19
Table:    python scripts/show_suites.py --table

Exit codes:
  0 = success (JSON or table on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.suites.api import parse_target_date  # noqa: E402
from src.suites.config import get_config  # noqa: E402
from src.suites.logging import setup_logging  # noqa: E402
from src.suites.models import Suite  # noqa: E402
from src.suites.service import get_suites_for_date  # noqa: E402
from src.suites.sheets.google import GoogleSheetsSource  # noqa: E402


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show edit suite occupancy for a date.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Date in YYYY-MM-DD format (default: today).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table instead of JSON.",
    )
    return parser.parse_args(argv)


def format_table(suites: list[Suite]) -> str:
    """Format suites as a human-readable table.

    Columns: Suite | Status | Editor | Project | Progress
    """
    headers = ["Suite", "Status", "Editor", "Project", "Progress"]
    rows = [
        [
            s.name,
            s.status.value,
            s.editor or "-",
            s.project or "-",
            "?" if s.progress is None else f"{s.progress}%",
        ]
        for s in suites
    ]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)
    row_lines = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)) for row in rows
    ]
    return "\n".join([header_line, separator, *row_lines])


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    target_date = parse_target_date(args.date)
    _log(f"show_suites: looking up {target_date.isoformat()}")

    source = GoogleSheetsSource(
        config.credentials(),
        attempts=config.fetch_attempts,
        wait_seconds=config.fetch_wait_seconds,
    )
    report = get_suites_for_date(
        source, target_date, placeholder=config.placeholder_progress
    )
    _log(f"  {report.sheet_name}, row {report.target_row}")

    if args.table:
        print(format_table(report.suites))
    else:
        print(json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
