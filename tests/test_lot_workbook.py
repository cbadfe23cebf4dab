import json
import logging
from decimal import Decimal

import pytest
from openpyxl import load_workbook

from domain.canonical import LotProposal
from domain.errors import MaterializationError
from grouping import materialize_lots
from writers import XlsxLotMaterializer, item_row


@pytest.fixture
def proposal(make_record):
    records = [
        make_record("Dell", "R740", quantity=3, asking_price=Decimal("1250.50"), specs={"oem_guess": "Dell", "drives": "2x 1TB"}),
        make_record("Dell", "R640"),
        make_record("Dell", "R440", quantity=2),
    ]
    return LotProposal(title="Q3 Servers - Dell", manufacturer="Dell", records=records, buyer_ids=frozenset({"b2", "b1"}))


def _sheet_dict(ws):
    return {label: value for label, value in ws.iter_rows(values_only=True)}


def test_writes_lot_and_items(tmp_path, proposal):
    sink = XlsxLotMaterializer(output_dir=tmp_path, currency="EUR", cost_amount=Decimal("5000"))
    lot_id = sink.create_lot(proposal)

    path = sink.paths[lot_id]
    assert path.exists()
    assert path.name.startswith("Q3_Servers_Dell_")

    wb = load_workbook(path)
    lot = _sheet_dict(wb["Lot"])
    assert lot["Lot ID"] == lot_id
    assert lot["Title"] == "Q3 Servers - Dell"
    assert lot["Status"] == "open"
    assert lot["Currency"] == "EUR"
    assert lot["Cost Amount"] == 5000
    assert lot["Invited Buyers"] == "b1, b2"
    assert lot["Lines"] == 3
    assert lot["Units"] == 6

    items = list(wb["Items"].iter_rows(values_only=True))
    assert items[0][0] == "Model"
    assert [row[0] for row in items[1:]] == ["R740", "R640", "R440"]
    assert items[1][2] == 3
    assert items[1][3] == pytest.approx(1250.5)
    assert items[1][8] == "2x 1TB"
    assert json.loads(items[1][10])["drives"] == "2x 1TB"


def test_small_batches_keep_row_order(tmp_path, proposal, caplog):
    caplog.set_level(logging.DEBUG, logger="writers.lot_workbook")
    sink = XlsxLotMaterializer(output_dir=tmp_path, batch_size=2)
    lot_id = sink.create_lot(proposal)

    progress = [r.getMessage() for r in caplog.records if "line items written" in r.getMessage()]
    assert [m.split(": ")[1] for m in progress] == ["2/3 line items written", "3/3 line items written"]
    items = list(load_workbook(sink.paths[lot_id])["Items"].iter_rows(values_only=True))
    assert [row[0] for row in items[1:]] == ["R740", "R640", "R440"]


def test_draft_without_buyers(tmp_path, make_record):
    sink = XlsxLotMaterializer(output_dir=tmp_path)
    lot_id = sink.create_lot(LotProposal(title="New lot", manufacturer="All", records=[make_record("Other", "Box")]))
    lot = _sheet_dict(load_workbook(sink.paths[lot_id])["Lot"])
    assert lot["Status"] == "draft"
    assert lot["Invited Buyers"] is None
    assert lot["Currency"] == "USD"


def test_item_row_defaults(make_record):
    row = item_row(make_record("HPE", "DL380", quantity=None, specs={}))
    assert row[2] == 1
    assert row[8] is None
    assert row[10] is None


def test_unwritable_output_dir(tmp_path, proposal):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    sink = XlsxLotMaterializer(output_dir=blocker / "lots")

    with pytest.raises(MaterializationError):
        sink.create_lot(proposal)

    results = materialize_lots([proposal], sink)
    assert not results[0].ok
    assert "Cannot write lot workbook" in results[0].error
