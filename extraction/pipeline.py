"""
Spreadsheet-to-lots pipeline.

Runs every stage in order on one in-memory grid:

    grid -> header row -> column mapping -> normalized records
         -> manufacturer groups -> lot proposals

Operator choices travel in an immutable ImportOverrides value. Changing an
earlier choice (header row, mapping) simply means running the pipeline again
with new overrides; nothing is cached between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from config import COMBINED_MANUFACTURER
from domain.canonical import ExtraColumnSet, FieldMapping, Grid, LineRecord, LotGroup, LotProposal
from grouping.partition import SplitMode, apply_group_choices, partition, plan_lots, resolve_split_mode
from input_readers import read_grid

from .columns import column_labels, map_columns
from .grid import validate_grid
from .header import locate_header
from .rows import normalize_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportOverrides:
    """Operator choices; None / empty means "use the guess"."""

    header_row: Optional[int] = None
    field_overrides: Mapping[str, Optional[int]] = field(default_factory=dict)
    extra_columns: Optional[FrozenSet[int]] = None
    split_mode: SplitMode = SplitMode.AUTO
    base_title: Optional[str] = None
    approvals: Mapping[str, bool] = field(default_factory=dict)
    # keyed by manufacturer label; the combined lot uses its own label ("All" or the single manufacturer)
    buyer_invites: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    # operator-entered lines, placed before the sheet rows
    manual_records: Tuple[LineRecord, ...] = ()


@dataclass
class ImportResult:
    header_row: int
    labels: List[str]
    mapping: FieldMapping
    extra_columns: ExtraColumnSet
    records: List[LineRecord]
    groups: List[LotGroup]
    split_mode: SplitMode
    proposals: List[LotProposal]

    @property
    def is_empty(self) -> bool:
        return not self.records

    def summary(self) -> Dict[str, int]:
        return {g.manufacturer: len(g.records) for g in self.groups}


def _header_row(grid: Grid, requested: Optional[int]) -> int:
    if requested is None:
        return locate_header(grid)
    if not grid:
        return 0
    return min(max(requested, 0), len(grid) - 1)


def run_import(grid: Grid, overrides: Optional[ImportOverrides] = None) -> ImportResult:
    """Run header detection, mapping, normalization, classification and grouping."""
    overrides = overrides or ImportOverrides()
    validate_grid(grid)

    header_row = _header_row(grid, overrides.header_row)
    labels = column_labels(grid, header_row)

    guessed_mapping, guessed_extras = map_columns(grid, header_row)
    mapping = guessed_mapping.replace(**dict(overrides.field_overrides))
    extra_columns = overrides.extra_columns if overrides.extra_columns is not None else guessed_extras

    records = list(overrides.manual_records) + normalize_rows(grid, header_row, mapping, extra_columns)
    if not records:
        logger.warning("No importable rows below header row %d", header_row)

    groups = apply_group_choices(partition(records), overrides.approvals, overrides.buyer_invites)
    split_mode = resolve_split_mode(overrides.split_mode, groups)

    combined_label = groups[0].manufacturer if len(groups) == 1 else None
    combined_buyers = overrides.buyer_invites.get(combined_label or COMBINED_MANUFACTURER)
    proposals = plan_lots(records, groups, overrides.split_mode, overrides.base_title, combined_buyers)

    logger.info(
        "Header row %d, %d records, %d manufacturer group(s), %s mode, %d lot(s) proposed",
        header_row,
        len(records),
        len(groups),
        split_mode.value,
        len(proposals),
    )
    return ImportResult(
        header_row=header_row,
        labels=labels,
        mapping=mapping,
        extra_columns=frozenset(extra_columns),
        records=records,
        groups=groups,
        split_mode=split_mode,
        proposals=proposals,
    )


def import_workbook(
    xlsx_path: Path,
    overrides: Optional[ImportOverrides] = None,
    sheet_name: str | None = None,
) -> ImportResult:
    """Decode an Excel file and run the import pipeline on its grid."""
    grid = read_grid(xlsx_path, sheet_name=sheet_name)
    return run_import(grid, overrides)
