"""
Heuristic column mapping.

Sellers name columns freely ("Part #", "Qty Avail", "Unit Price (USD)"). Each
canonical field has a short synonym list; labels and synonyms are compared by
normalized key, exact matches first, then containment in either direction.

Results are only guesses: the operator can replace any mapping entry or edit
the extra column set before rows are normalized.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from domain.canonical import ExtraColumnSet, FieldMapping, Grid
from fields.normalization import cell_text, norm_key

from .grid import cell_at, grid_width

FIELD_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "model": ("model", "product", "item", "sku", "part", "part_number", "pn"),
    "description": ("description", "desc", "details", "item_description", "name"),
    "quantity": ("qty", "quantity", "units", "unit_qty"),
    "asking_price": ("asking_price", "ask", "price", "unit_price", "unitprice"),
    "cost": ("cost", "unit_cost", "cost_price", "purchase_price"),
    "manufacturer": ("oem", "manufacturer", "vendor", "brand", "make"),
}

# Component/identity columns worth keeping as line detail for buyers.
EXTRA_COLUMN_KEYWORDS: Tuple[str, ...] = (
    "serial",
    "service_tag",
    "servicetag",
    "tag",
    "asset_tag",
    "cpu",
    "cpu_part",
    "cpu_partnumber",
    "processor",
    "cpu_count",
    "cores",
    "ram",
    "dimm",
    "dimm_part",
    "dimm_partnumber",
    "dimm_count",
    "memory",
    "ssd",
    "hdd",
    "nvme",
    "storage",
    "raid",
    "nic",
    "network",
    "hba",
    "fc",
    "psu",
    "power",
    "chassis",
    "generation",
)

# Identity columns are always kept, even when the two-way match above misses them.
IDENTITY_FRAGMENTS: Tuple[str, ...] = ("serial", "service", "tag")


def column_labels(grid: Grid, header_row: int) -> List[str]:
    """Labels for every column position; blank header cells become "Column N"."""
    if not grid:
        return []
    header_row = min(max(header_row, 0), len(grid) - 1)
    header = grid[header_row]

    labels: List[str] = []
    for i in range(grid_width(grid)):
        text = cell_text(cell_at(header, i))
        labels.append(text or f"Column {i + 1}")
    return labels


def _keys_overlap(key: str, candidate: str) -> bool:
    return candidate in key or key in candidate


def best_match(labels: Sequence[str], synonyms: Sequence[str]) -> Optional[int]:
    """Index of the best label for a synonym list, or None."""
    keys = [norm_key(label) for label in labels]
    candidates = [c for c in (norm_key(s) for s in synonyms) if c]

    for i, key in enumerate(keys):
        if key and key in candidates:
            return i

    for i, key in enumerate(keys):
        if not key:
            continue
        if any(_keys_overlap(key, cand) for cand in candidates):
            return i
    return None


def guess_mapping(labels: Sequence[str]) -> FieldMapping:
    return FieldMapping(**{name: best_match(labels, syn) for name, syn in FIELD_SYNONYMS.items()})


def guess_extra_columns(labels: Sequence[str]) -> ExtraColumnSet:
    keywords = [norm_key(k) for k in EXTRA_COLUMN_KEYWORDS]
    found = set()
    for i, label in enumerate(labels):
        key = norm_key(label)
        if not key:
            continue
        if any(_keys_overlap(key, kw) for kw in keywords):
            found.add(i)
        elif any(frag in key for frag in IDENTITY_FRAGMENTS):
            found.add(i)
    return frozenset(found)


def map_columns(grid: Grid, header_row: int) -> Tuple[FieldMapping, ExtraColumnSet]:
    """Guess the field mapping and the extra column set from the header row."""
    labels = column_labels(grid, header_row)
    return guess_mapping(labels), guess_extra_columns(labels)
