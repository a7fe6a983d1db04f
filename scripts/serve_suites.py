#!/usr/bin/env python3
"""Run the suite schedule API with uvicorn.

Run with: python scripts/serve_suites.py
Custom:   python scripts/serve_suites.py --host 0.0.0.0 --port 8080
"""

import argparse
import os
import sys

import uvicorn
from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.suites.api import create_app  # noqa: E402
from src.suites.config import get_config  # noqa: E402
from src.suites.logging import setup_logging  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the suite schedule API.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser.add_argument("--port", type=int, default=8000, help="Bind port.")
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)
    uvicorn.run(create_app(config=config), host=args.host, port=args.port, workers=1)
