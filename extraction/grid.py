"""Structural checks and positional access for decoded grids."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from config import EXTREME_COLS_LIMIT, MAX_SHEET_COLS, MAX_SHEET_ROWS
from domain.canonical import Cell, Grid, Row
from domain.errors import InvalidGridError

MAX_GRID_CELLS = MAX_SHEET_ROWS * MAX_SHEET_COLS


def _is_row(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def validate_grid(grid: Any) -> Grid:
    """Return the grid unchanged, or raise InvalidGridError if it is not rows of cells or is too large."""
    if not _is_row(grid):
        raise InvalidGridError(f"Grid must be a sequence of rows, got {type(grid).__name__}")

    for i, row in enumerate(grid):
        if row is not None and not _is_row(row):
            raise InvalidGridError(f"Row {i} is not a sequence of cells ({type(row).__name__})")

    if len(grid) > MAX_SHEET_ROWS:
        raise InvalidGridError(f"Grid has {len(grid):,} rows, limit is {MAX_SHEET_ROWS:,}")

    width = grid_width(grid)
    if width > EXTREME_COLS_LIMIT:
        raise InvalidGridError(f"Grid has {width} columns, limit is {EXTREME_COLS_LIMIT}")
    if len(grid) * width > MAX_GRID_CELLS:
        raise InvalidGridError(
            f"Grid has {len(grid) * width:,} cells, limit is {MAX_GRID_CELLS:,}"
        )
    return grid


def grid_width(grid: Grid) -> int:
    """Widest row length; at least 1 for a non-empty grid, 0 for an empty one."""
    if not grid:
        return 0
    return max(max((len(r) for r in grid if r is not None), default=0), 1)


def cell_at(row: Row | None, index: int) -> Cell:
    """Cell at a column index; short rows are padded with absent cells."""
    if row is None or index < 0 or index >= len(row):
        return None
    return row[index]
