import pytest

from domain.canonical import FieldMapping
from domain.errors import InvalidGridError
from extraction import ImportOverrides, manual_record, run_import
from grouping import SplitMode


def test_sku_sheet_end_to_end(sku_grid):
    result = run_import(sku_grid)

    assert result.header_row == 0
    assert result.labels == ["SKU", "Desc", "Qty"]
    assert result.mapping == FieldMapping(model=0, description=1, quantity=2)
    assert [r["quantity"] for r in result.records] == [2, 1]
    assert result.summary() == {"Dell": 1, "HPE": 1}
    assert result.split_mode is SplitMode.SPLIT
    assert [p.title for p in result.proposals] == ["Dell lot", "HPE lot"]


def test_keep_override(sku_grid):
    result = run_import(sku_grid, ImportOverrides(split_mode=SplitMode.KEEP, buyer_invites={"All": {"b9"}}))
    assert len(result.proposals) == 1
    assert result.proposals[0].title == "New lot"
    assert result.proposals[0].manufacturer == "All"
    assert result.proposals[0].buyer_ids == frozenset({"b9"})
    assert [r["model"] for r in result.proposals[0].records] == ["X1", "X2"]


def test_field_override_unmaps_quantity(sku_grid):
    result = run_import(sku_grid, ImportOverrides(field_overrides={"quantity": None}))
    assert result.mapping.quantity is None
    assert [r["quantity"] for r in result.records] == [1, 1]


def test_unknown_field_override_is_rejected(sku_grid):
    with pytest.raises(ValueError):
        run_import(sku_grid, ImportOverrides(field_overrides={"colour": 1}))


def test_header_override_is_clamped(sku_grid):
    result = run_import(sku_grid, ImportOverrides(header_row=99))
    assert result.header_row == 2
    assert result.is_empty
    assert result.proposals == []

    assert run_import(sku_grid, ImportOverrides(header_row=-3)).header_row == 0


def test_header_only_sheet_is_empty_not_an_error():
    result = run_import([["SKU", "Desc"]])
    assert result.is_empty
    assert result.groups == []
    assert result.proposals == []


def test_empty_grid():
    result = run_import([])
    assert result.header_row == 0
    assert result.is_empty


@pytest.mark.parametrize("grid", ["abc", [1, 2], None, [["a"], "bc"]])
def test_malformed_grid(grid):
    with pytest.raises(InvalidGridError):
        run_import(grid)


def test_oversized_grid():
    with pytest.raises(InvalidGridError):
        run_import([["x"]] * 10_001)


def test_approvals_and_buyers_by_group(sku_grid):
    overrides = ImportOverrides(
        approvals={"HPE": False},
        buyer_invites={"Dell": frozenset({"b1", "b2"})},
        base_title="Q3 Servers",
    )
    result = run_import(sku_grid, overrides)
    assert [p.title for p in result.proposals] == ["Q3 Servers - Dell"]
    assert result.proposals[0].buyer_ids == frozenset({"b1", "b2"})


def test_title_row_above_header():
    grid = [
        ["Inventory export", None, None],
        [None, None, None],
        ["Manufacturer", "Model", "Quantity"],
        ["Cisco Systems", "C9300-48P", 4],
        [None, "C9200-24T", 2],
        ["HP", "DL360 Gen10", 1],
    ]
    result = run_import(grid)
    assert result.header_row == 2
    assert [r["manufacturer"] for r in result.records] == ["Cisco", "Cisco", "HPE"]
    assert result.summary() == {"Cisco": 2, "HPE": 1}


def test_unapproved_only_manufacturer():
    grid = [["Model", "Qty"], ["PowerEdge R740", 1], ["PowerEdge R640", 2]]
    result = run_import(grid, ImportOverrides(approvals={"Dell": False}))
    assert result.summary() == {"Dell": 2}
    assert result.proposals == []


def test_manual_lines_come_first(sku_grid):
    extra = manual_record("Nexus 9300", quantity=4)
    result = run_import(sku_grid, ImportOverrides(manual_records=(extra,)))
    assert [r["model"] for r in result.records] == ["Nexus 9300", "X1", "X2"]
    assert result.summary() == {"Cisco": 1, "Dell": 1, "HPE": 1}


def test_manual_lines_without_a_sheet():
    result = run_import([], ImportOverrides(manual_records=(manual_record("PowerEdge R740"),)))
    assert not result.is_empty
    assert [(p.title, p.manufacturer) for p in result.proposals] == [("New lot", "Dell")]
