"""
Canonical shapes shared across the lot intake pipeline.

LineRecord is the normalized, layout-agnostic line item produced from one
spreadsheet data row. Every stage after column mapping (classification,
grouping, writing) works on LineRecord values only, never on raw rows.

FieldMapping and the extra column set identify columns by POSITION, because
sellers routinely repeat a visible label ("Part #" twice, "Column 3", ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, TypedDict, Union

Cell = Union[str, int, float, None]
Row = Sequence[Cell]
Grid = Sequence[Row]

ExtraColumnSet = FrozenSet[int]

MAPPED_FIELDS = ("model", "description", "quantity", "asking_price", "cost", "manufacturer")


class LineRecord(TypedDict):
    model: Optional[str]
    description: Optional[str]
    quantity: int

    asking_price: Optional[Decimal]
    cost: Optional[Decimal]

    cpu: Optional[str]
    memory_part_numbers: Optional[str]
    gpu: Optional[str]

    # raw extra-column values by label, plus "drives" and "oem_guess"
    specs: Dict[str, Any]

    manufacturer: str


@dataclass(frozen=True)
class FieldMapping:
    """Column index per canonical field; None means the field is unmapped."""

    model: Optional[int] = None
    description: Optional[int] = None
    quantity: Optional[int] = None
    asking_price: Optional[int] = None
    cost: Optional[int] = None
    manufacturer: Optional[int] = None

    def replace(self, **changes: Optional[int]) -> "FieldMapping":
        unknown = set(changes) - set(MAPPED_FIELDS)
        if unknown:
            raise ValueError(f"Unknown mapping field(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Optional[int]]:
        return {name: getattr(self, name) for name in MAPPED_FIELDS}


@dataclass
class LotGroup:
    """Records sharing one manufacturer label, proposed as one lot."""

    manufacturer: str
    records: List[LineRecord] = field(default_factory=list)
    approved: bool = True
    buyer_ids: FrozenSet[str] = frozenset()

    def title(self, base_title: str | None = None) -> str:
        base = (base_title or "").strip()
        if base:
            return f"{base} - {self.manufacturer}"
        return f"{self.manufacturer} lot"


@dataclass(frozen=True)
class LotProposal:
    """What the lot materializer receives for one approved group."""

    title: str
    manufacturer: str
    records: Sequence[LineRecord]
    buyer_ids: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class MaterializationResult:
    title: str
    manufacturer: str
    lot_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
