"""
Header row detection.

Header rows are dominated by short text labels, data rows carry more numbers.
Decorative rows above the real header (logos, titles, a lone date) are skipped
because they rarely hold two or more text cells.
"""

from __future__ import annotations

from config import HEADER_SCAN_ROWS
from domain.canonical import Grid
from fields.normalization import is_empty_cell, is_number_cell, row_has_any_value


def _looks_like_header(row) -> bool:
    cells = [c for c in row if not is_empty_cell(c)]
    str_count = sum(1 for c in cells if isinstance(c, str) and len(c.strip()) >= 2)
    num_count = sum(1 for c in cells if is_number_cell(c))
    return str_count >= 2 and str_count >= num_count


def locate_header(grid: Grid, scan_rows: int = HEADER_SCAN_ROWS) -> int:
    """
    Pick the row index most likely to hold column headers. Never raises.

    Falls back to the first row with any value, then to 0.
    """
    for i, row in enumerate(grid[:scan_rows]):
        if not row or not row_has_any_value(row):
            continue
        if _looks_like_header(row):
            return i

    for i, row in enumerate(grid):
        if row and row_has_any_value(row):
            return i
    return 0
