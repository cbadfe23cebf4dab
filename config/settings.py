"""
Central configuration for output paths and safety limits.

This module defines:
- Repository-relative output directory used by the workbook writer and UI.
- Sheet limits to prevent memory issues with oversized uploads.
- Import defaults (header scan depth, line-item batch size, currency).

Values are constants; a `.env` file (via python-dotenv) or the process
environment may override them at import time.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")


PROJECT_ROOT = Path(__file__).resolve().parents[1]

OUTPUT_ROOT = Path(os.getenv("LOT_INTAKE_OUTPUT_DIR", str(PROJECT_ROOT / "lot_outputs")))

MAX_FILE_SIZE_MB = 50

MAX_SHEET_ROWS = _env_int("LOT_INTAKE_MAX_SHEET_ROWS", 10_000)
MAX_SHEET_COLS = _env_int("LOT_INTAKE_MAX_SHEET_COLS", 100)
EXTREME_COLS_LIMIT = 500

HEADER_SCAN_ROWS = _env_int("LOT_INTAKE_HEADER_SCAN_ROWS", 50)
LINE_ITEM_BATCH_SIZE = _env_int("LOT_INTAKE_BATCH_SIZE", 500)

DEFAULT_CURRENCY = os.getenv("LOT_INTAKE_CURRENCY", "USD")
DEFAULT_LOT_TITLE = "New lot"
FALLBACK_MANUFACTURER = "Other"
COMBINED_MANUFACTURER = "All"

LOG_LEVEL = os.getenv("LOT_INTAKE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler for script/UI entry points."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
