"""
EXCEL READER
------------
Decodes an Excel worksheet into a raw grid with NO interpretation.
Returns rows of scalar cells: numbers stay numbers, blanks are None.
Header detection and column mapping happen downstream.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, List

from openpyxl import load_workbook

from config import EXTREME_COLS_LIMIT, MAX_FILE_SIZE_MB, MAX_SHEET_ROWS
from domain.canonical import Cell

logger = logging.getLogger(__name__)


def _to_cell(value: Any) -> Cell:
    """Reduce an openpyxl value to str / int / float / None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def read_grid(xlsx_path: Path, sheet_name: str | None = None) -> List[List[Cell]]:
    """
    Read an Excel sheet into a list of rows padded to the sheet width.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        List of rows, each a list of cells (empty for a blank sheet)

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a valid Excel file or is too large
    """
    xlsx_path = Path(xlsx_path).expanduser().resolve()

    if not xlsx_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xlsx_path}")

    size_mb = xlsx_path.stat().st_size / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        raise ValueError(f"Excel file is {size_mb:.1f} MB, limit is {MAX_FILE_SIZE_MB} MB")

    try:
        wb = load_workbook(xlsx_path, data_only=True, read_only=True)
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}")

    try:
        if sheet_name:
            if sheet_name not in wb.sheetnames:
                raise ValueError(f"Sheet not found: {sheet_name}")
            ws = wb[sheet_name]
        elif wb.worksheets:
            ws = wb.worksheets[0]
        else:
            raise ValueError("No sheets found in workbook")

        grid: List[List[Cell]] = []
        for values in ws.iter_rows(values_only=True):
            if len(grid) >= MAX_SHEET_ROWS:
                raise ValueError(
                    f"Sheet has more than {MAX_SHEET_ROWS:,} rows. Split the file and upload the parts."
                )
            if len(values) > EXTREME_COLS_LIMIT:
                raise ValueError(f"Sheet has more than {EXTREME_COLS_LIMIT} columns")
            grid.append([_to_cell(v) for v in values])
    finally:
        wb.close()

    # read-only worksheets report trailing blank cells inconsistently
    while grid and all(c is None for c in grid[-1]):
        grid.pop()
    if not grid:
        logger.warning("Sheet in %s has no values", xlsx_path.name)
        return grid

    width = max(len(r) for r in grid)
    for r in grid:
        r.extend([None] * (width - len(r)))

    logger.info("Decoded %s: %d rows x %d columns", xlsx_path.name, len(grid), width)
    return grid
