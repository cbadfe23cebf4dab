"""
Workbook lot writer.

A lot materializer that writes each approved lot proposal to its own .xlsx
file: a "Lot" summary sheet and an "Items" sheet with one row per line item,
appended batch by batch in original row order.
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font

from config import DEFAULT_CURRENCY, LINE_ITEM_BATCH_SIZE, OUTPUT_ROOT
from domain.canonical import LineRecord, LotProposal
from domain.errors import MaterializationError
from grouping.materialize import batched

logger = logging.getLogger(__name__)

ITEM_HEADERS = [
    "Model",
    "Description",
    "Qty",
    "Asking Price",
    "Cost",
    "CPU",
    "Memory Part Numbers",
    "GPU",
    "Drives",
    "Manufacturer",
    "Specs",
]

STATUS_DRAFT = "draft"
STATUS_OPEN = "open"

_SLUG_RE = re.compile(r"[^A-Za-z0-9]+")


def _slug(title: str) -> str:
    return _SLUG_RE.sub("_", title).strip("_")[:60] or "lot"


def _specs_json(specs: Dict[str, Any]) -> Optional[str]:
    if not specs:
        return None
    return json.dumps(specs, ensure_ascii=False, default=str)


def item_row(record: LineRecord) -> List[Any]:
    specs = record.get("specs") or {}
    return [
        record.get("model"),
        record.get("description"),
        record.get("quantity") or 1,
        record.get("asking_price"),
        record.get("cost"),
        record.get("cpu"),
        record.get("memory_part_numbers"),
        record.get("gpu"),
        specs.get("drives"),
        record.get("manufacturer"),
        _specs_json(specs),
    ]


class XlsxLotMaterializer:
    """Writes one workbook per lot under `output_dir` and returns the lot id."""

    def __init__(
        self,
        output_dir: Path = OUTPUT_ROOT,
        currency: str = DEFAULT_CURRENCY,
        cost_amount: Optional[Decimal] = None,
        batch_size: int = LINE_ITEM_BATCH_SIZE,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.currency = (currency or "").strip() or DEFAULT_CURRENCY
        self.cost_amount = cost_amount
        self.batch_size = batch_size
        self.paths: Dict[str, Path] = {}

    def create_lot(self, proposal: LotProposal) -> str:
        lot_id = uuid.uuid4().hex[:12]
        path = self.output_dir / f"{_slug(proposal.title)}_{lot_id}.xlsx"

        wb = Workbook()
        summary = wb.active
        summary.title = "Lot"
        self._write_summary(summary, lot_id, proposal)

        items = wb.create_sheet("Items")
        items.append(ITEM_HEADERS)
        for cell in items[1]:
            cell.font = Font(bold=True)
        written = 0
        for chunk in batched(list(proposal.records), self.batch_size):
            self._append_items(items, chunk)
            written += len(chunk)
            logger.debug("Lot %s: %d/%d line items written", lot_id, written, len(proposal.records))

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            wb.save(path)
        except OSError as e:
            raise MaterializationError(f"Cannot write lot workbook {path}: {e}") from e

        self.paths[lot_id] = path
        logger.info("Wrote %s", path)
        return lot_id

    def _append_items(self, ws, records) -> None:
        rows = [item_row(r) for r in records]
        for row in rows:
            ws.append(row)

    def _write_summary(self, ws, lot_id: str, proposal: LotProposal) -> None:
        buyers = sorted(proposal.buyer_ids)
        rows = [
            ("Lot ID", lot_id),
            ("Title", proposal.title),
            ("Manufacturer", proposal.manufacturer),
            ("Status", STATUS_OPEN if buyers else STATUS_DRAFT),
            ("Currency", self.currency),
            ("Cost Amount", self.cost_amount),
            ("Invited Buyers", ", ".join(buyers) or None),
            ("Lines", len(proposal.records)),
            ("Units", sum(r.get("quantity") or 1 for r in proposal.records)),
        ]
        for label, value in rows:
            ws.append([label, value])
            ws.cell(row=ws.max_row, column=1).font = Font(bold=True)
