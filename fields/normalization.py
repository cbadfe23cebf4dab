"""
Cell-level normalization helpers.

Spreadsheet cells arrive as str / int / float / None. These helpers decide what
counts as blank, render cells as text the way a seller sees them ("2", not
"2.0"), build comparison keys for free-text labels, and coerce numeric-like
values without ever raising.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

import pandas as pd

_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w]+", re.ASCII)


def is_empty_cell(value: Any) -> bool:
    """True for None, NaN and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    return str(value).strip() == ""


def row_has_any_value(row) -> bool:
    return any(not is_empty_cell(c) for c in row)


def is_number_cell(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return not pd.isna(value)
    return isinstance(value, int)


def cell_text(value: Any) -> str:
    """Trimmed display text of a cell; integral floats lose their ".0"."""
    if is_empty_cell(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def norm_key(value: Any) -> str:
    """
    Comparison key for column labels and keywords.

    Example:
        norm_key(" Unit Price ($) ") -> "unit_price_"
    """
    s = str(value if value is not None else "").strip().lower()
    s = _WHITESPACE_RE.sub("_", s)
    return _NON_WORD_RE.sub("", s)


def to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a numeric-like cell to Decimal (thousands separators removed). None if not possible."""
    if is_empty_cell(value) or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        number = Decimal(repr(value))
    else:
        s = str(value).strip().replace(",", "")
        try:
            number = Decimal(s)
        except InvalidOperation:
            return None

    if not number.is_finite():
        return None
    return number


def to_quantity(value: Any) -> Optional[int]:
    """Round a numeric-like cell half-up to an int. None if not numeric."""
    number = to_decimal(value)
    if number is None:
        return None
    try:
        return int(number.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # beyond the context precision, not a usable count
        return None
