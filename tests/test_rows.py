from decimal import Decimal

from domain.canonical import FieldMapping
from extraction.rows import carry_forward, extract_components, manual_record, normalize_rows


def test_simple_sheet(sku_grid):
    mapping = FieldMapping(model=0, description=1, quantity=2)
    records = normalize_rows(sku_grid, 0, mapping, frozenset())

    assert [r["model"] for r in records] == ["X1", "X2"]
    assert [r["quantity"] for r in records] == [2, 1]
    assert [r["manufacturer"] for r in records] == ["Dell", "HPE"]
    assert records[0]["description"] == "Dell PowerEdge R740"
    assert records[0]["asking_price"] is None
    assert records[0]["specs"] == {"oem_guess": "Dell"}


def test_quantity_rules():
    grid = [
        ["Model", "Qty"],
        ["A", 0],
        ["B", -1],
        ["C", "abc"],
        ["D", 2.5],
        ["E", "1,200"],
        ["F", 1e28],
        ["G", "1e30"],
    ]
    records = normalize_rows(grid, 0, FieldMapping(model=0, quantity=1), frozenset())
    assert [(r["model"], r["quantity"]) for r in records] == [
        ("C", 1),
        ("D", 3),
        ("E", 1200),
        ("F", 1),
        ("G", 1),
    ]


def test_unmapped_quantity_defaults_to_one():
    grid = [["Model", "Qty"], ["A", 5], ["B", 0]]
    records = normalize_rows(grid, 0, FieldMapping(model=0), frozenset())
    assert [r["quantity"] for r in records] == [1, 1]


def test_blank_rows_are_skipped_and_order_kept():
    grid = [
        ["Model", "Qty"],
        ["A", 1],
        [None, None],
        ["", "  "],
        [],
        ["B", 1],
    ]
    records = normalize_rows(grid, 0, FieldMapping(model=0, quantity=1), frozenset())
    assert [r["model"] for r in records] == ["A", "B"]


def test_prices():
    grid = [["Model", "Ask", "Cost"], ["A", "1,250.00", "call"], ["B", 99, None]]
    mapping = FieldMapping(model=0, asking_price=1, cost=2)
    a, b = normalize_rows(grid, 0, mapping, frozenset())
    assert a["asking_price"] == Decimal("1250.00")
    assert a["cost"] is None
    assert b["asking_price"] == Decimal(99)


def test_extra_columns_append_detail_in_column_order():
    grid = [
        ["Model", "Desc", "Qty", "Serial", "CPU", "Drives"],
        ["R740", "Dell server", 1, None, "Xeon Gold 6130", "2x 1TB"],
        ["R640", "Dell server", 1, "SN1", "Xeon Silver", None],
    ]
    mapping = FieldMapping(model=0, description=1, quantity=2)
    first, second = normalize_rows(grid, 0, mapping, frozenset({5, 3, 4}))

    assert first["description"] == "Dell server\nCPU: Xeon Gold 6130\nDrives: 2x 1TB"
    assert first["cpu"] == "Xeon Gold 6130"
    assert first["specs"]["drives"] == "2x 1TB"
    assert first["specs"]["CPU"] == "Xeon Gold 6130"
    assert "Serial" not in first["specs"]

    assert second["description"] == "Dell server\nSerial: SN1\nCPU: Xeon Silver"
    assert "drives" not in second["specs"]


def test_manufacturer_carry_forward():
    grid = [
        ["Manufacturer", "Model", "Qty"],
        ["Dell", "modelA", 1],
        [None, "modelB", 1],
        ["Cisco", "C1", 1],
        ["", "C2", 1],
    ]
    mapping = FieldMapping(manufacturer=0, model=1, quantity=2)
    records = normalize_rows(grid, 0, mapping, frozenset())
    assert [r["manufacturer"] for r in records] == ["Dell", "Dell", "Cisco", "Cisco"]
    assert records[1]["specs"]["oem_guess"] == "Dell"


def test_first_non_empty_cell_fallback():
    grid = [["Model", "Qty", "Notes"], [None, None, "Cisco Catalyst 2960"]]
    records = normalize_rows(grid, 0, FieldMapping(model=0, quantity=1), frozenset())
    assert records[0]["model"] == "Cisco Catalyst 2960"
    assert records[0]["description"] == "Cisco Catalyst 2960"
    assert records[0]["manufacturer"] == "Cisco"


def test_normalize_is_repeatable(sku_grid):
    mapping = FieldMapping(model=0, description=1, quantity=2)
    assert normalize_rows(sku_grid, 0, mapping, frozenset()) == normalize_rows(sku_grid, 0, mapping, frozenset())


def test_extract_components_first_match_wins():
    components, specs = extract_components(
        {
            "CPU Model": "Xeon Gold",
            "Processor": "Xeon Silver",
            "DIMM PN": "M393A4K40",
            "GPU": "A100",
            "SSD": "960GB",
            "NVMe": "3.84TB",
        }
    )
    assert components == {"cpu": "Xeon Gold", "memory_part_numbers": "M393A4K40", "gpu": "A100"}
    assert specs["drives"] == "960GB"
    assert specs["Processor"] == "Xeon Silver"


def test_carry_forward():
    assert list(carry_forward(["a", "", "", "b", ""])) == ["a", "a", "a", "b", "b"]
    assert list(carry_forward(["", "x"])) == ["", "x"]


def test_manual_record():
    record = manual_record(" ProLiant DL380 ", "", "2", "1,499.99", None)
    assert record["model"] == "ProLiant DL380"
    assert record["description"] == "ProLiant DL380"
    assert record["quantity"] == 2
    assert record["asking_price"] == Decimal("1499.99")
    assert record["cost"] is None
    assert record["manufacturer"] == "HPE"
    assert record["specs"] == {"oem_guess": "HPE"}

    assert manual_record("Mystery box")["quantity"] == 1
    assert manual_record("", "  ") is None
    assert manual_record("R740", quantity="0") is None
