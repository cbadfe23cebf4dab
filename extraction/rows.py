"""
Row normalization and component extraction.

Turns each data row below the header into a LineRecord:
- model / description from the mapped columns (first non-empty cell when both are blank)
- quantity rounded to an int, default 1; rows with quantity <= 0 are dropped
- prices coerced to Decimal, None when not numeric
- extra columns appended to the description as "Label: value" lines and kept in specs
- cpu / memory / gpu / drives picked from extra columns by label keyword
- manufacturer from the mapped manufacturer cell (carried forward over blanks)
  or from OEM classification
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from domain.canonical import Cell, ExtraColumnSet, FieldMapping, Grid, LineRecord, Row
from fields.normalization import cell_text, norm_key, row_has_any_value, to_decimal, to_quantity

from .columns import column_labels
from .grid import cell_at
from .oem import resolve_manufacturer

CPU_KEYWORDS = ("cpu", "processor")
GPU_KEYWORDS = ("gpu",)
MEMORY_KEYWORDS = ("memory", "dimm", "ram")
DRIVE_KEYWORDS = ("drive", "ssd", "hdd", "nvme", "disk", "storage")


def _mapped_cell(row: Row, index: Optional[int]) -> Cell:
    return cell_at(row, index) if index is not None else None


def _first_with(keywords: Sequence[str], extras: Dict[str, str]) -> Optional[str]:
    for label, value in extras.items():
        key = norm_key(label)
        if value and any(kw in key for kw in keywords):
            return value
    return None


def extract_components(extras: Dict[str, str]) -> Tuple[Dict[str, Optional[str]], Dict[str, str]]:
    """
    Pick component fields out of extra-column values (first matching label wins).

    Returns:
        Tuple of (component fields, specs bag with raw values and optional "drives")
    """
    specs: Dict[str, str] = {label: value for label, value in extras.items() if value}
    components = {
        "cpu": _first_with(CPU_KEYWORDS, extras),
        "memory_part_numbers": _first_with(MEMORY_KEYWORDS, extras),
        "gpu": _first_with(GPU_KEYWORDS, extras),
    }
    drives = _first_with(DRIVE_KEYWORDS, extras)
    if drives:
        specs["drives"] = drives
    return components, specs


def carry_forward(values: Iterable[str]) -> Iterator[str]:
    """Replace blank values with the last non-blank one (merged-cell exports)."""
    last_seen = ""
    for value in values:
        if value:
            last_seen = value
        yield last_seen


def _data_rows(grid: Grid, header_row: int) -> List[Row]:
    return [r for r in grid[header_row + 1:] if r and row_has_any_value(r)]


def _build_record(
    row: Row,
    labels: Sequence[str],
    mapping: FieldMapping,
    extra_columns: Sequence[int],
    manufacturer_cell: str,
) -> Optional[LineRecord]:
    quantity = to_quantity(_mapped_cell(row, mapping.quantity))
    if quantity is None:
        quantity = 1
    if quantity <= 0:
        return None

    model = cell_text(_mapped_cell(row, mapping.model))
    desc = cell_text(_mapped_cell(row, mapping.description))
    if not model and not desc:
        # rows identifiable only by some other cell are kept, not dropped
        first = next((t for t in (cell_text(c) for c in row) if t), "")
        model = desc = first

    extras: Dict[str, str] = {}
    detail_lines: List[str] = []
    for i in extra_columns:
        value = cell_text(cell_at(row, i))
        if not value:
            continue
        detail_lines.append(f"{labels[i]}: {value}")
        extras[labels[i]] = value

    description = "\n".join([t for t in [desc or model] if t] + detail_lines).strip()

    components, specs = extract_components(extras)
    record: LineRecord = {
        "model": model or None,
        "description": description or None,
        "quantity": quantity,
        "asking_price": to_decimal(_mapped_cell(row, mapping.asking_price)),
        "cost": to_decimal(_mapped_cell(row, mapping.cost)),
        "cpu": components["cpu"],
        "memory_part_numbers": components["memory_part_numbers"],
        "gpu": components["gpu"],
        "specs": specs,
        "manufacturer": "",
    }
    manufacturer = resolve_manufacturer(record, manufacturer_cell)
    record["manufacturer"] = manufacturer
    record["specs"]["oem_guess"] = manufacturer
    return record


def normalize_rows(
    grid: Grid,
    header_row: int,
    mapping: FieldMapping,
    extra_columns: ExtraColumnSet,
) -> List[LineRecord]:
    """Normalize every data row below the header row, preserving row order."""
    if not grid:
        return []

    labels = column_labels(grid, header_row)
    extras_in_order = sorted(i for i in extra_columns if 0 <= i < len(labels))
    rows = _data_rows(grid, header_row)

    if mapping.manufacturer is not None:
        manufacturer_cells = carry_forward(cell_text(cell_at(r, mapping.manufacturer)) for r in rows)
    else:
        manufacturer_cells = ("" for _ in rows)

    records: List[LineRecord] = []
    for row, manufacturer_cell in zip(rows, manufacturer_cells):
        record = _build_record(row, labels, mapping, extras_in_order, manufacturer_cell)
        if record is not None:
            records.append(record)
    return records


def manual_record(
    model: Optional[str] = None,
    description: Optional[str] = None,
    quantity: Cell = None,
    asking_price: Cell = None,
    cost: Cell = None,
) -> Optional[LineRecord]:
    """
    Build a record for a line typed in by the operator.

    Same coercion as sheet rows. Returns None when neither model nor
    description is given, or the quantity is zero or negative.
    """
    model = (model or "").strip()
    desc = (description or "").strip()
    if not model and not desc:
        return None

    qty = to_quantity(quantity)
    if qty is None:
        qty = 1
    if qty <= 0:
        return None

    record: LineRecord = {
        "model": model or None,
        "description": desc or model or None,
        "quantity": qty,
        "asking_price": to_decimal(asking_price),
        "cost": to_decimal(cost),
        "cpu": None,
        "memory_part_numbers": None,
        "gpu": None,
        "specs": {},
        "manufacturer": "",
    }
    manufacturer = resolve_manufacturer(record)
    record["manufacturer"] = manufacturer
    record["specs"]["oem_guess"] = manufacturer
    return record
