"""
Glue between Streamlit uploads and the import pipeline.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from domain.canonical import Cell, LineRecord
from input_readers import read_grid

logger = logging.getLogger(__name__)

PREVIEW_COLUMNS = ["Model", "Description", "Qty", "Asking Price", "Cost", "CPU", "Memory", "GPU", "Manufacturer"]


def decode_uploaded_file(uploaded_file: Any) -> Tuple[bool, Optional[List[List[Cell]]], Optional[str]]:
    """
    Save an uploaded .xlsx to a temp file and decode its first sheet.

    Returns:
        Tuple of (success, grid, error message)
    """
    name = (getattr(uploaded_file, "name", "") or "").lower()
    if not name.endswith(".xlsx"):
        return False, None, "Please upload an .xlsx file"

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / Path(name).name
        path.write_bytes(uploaded_file.getbuffer())
        try:
            grid = read_grid(path)
        except (FileNotFoundError, ValueError) as e:
            logger.warning("Cannot decode %s: %s", name, e)
            return False, None, str(e)
    return True, grid, None


def grid_preview(grid: Sequence[Sequence[Cell]], max_rows: int = 15) -> pd.DataFrame:
    """Raw first rows, numbered like the sheet (1-based)."""
    df = pd.DataFrame([list(r) for r in grid[:max_rows]])
    df.index = range(1, len(df) + 1)
    return df


def records_to_dataframe(records: Sequence[LineRecord]) -> pd.DataFrame:
    rows = [
        [
            r.get("model"),
            r.get("description"),
            r.get("quantity"),
            r.get("asking_price"),
            r.get("cost"),
            r.get("cpu"),
            r.get("memory_part_numbers"),
            r.get("gpu"),
            r.get("manufacturer"),
        ]
        for r in records
    ]
    df = pd.DataFrame(rows, columns=PREVIEW_COLUMNS)
    for c in ("Asking Price", "Cost"):
        df[c] = pd.to_numeric([float(v) if v is not None else None for v in df[c]], errors="coerce")
    return df
