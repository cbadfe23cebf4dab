from extraction.header import locate_header


def test_first_row_header(sku_grid):
    assert locate_header(sku_grid) == 0


def test_skips_title_and_blank_rows():
    grid = [
        ["ACME Corp inventory", None, None],
        [None, None, None],
        ["SKU", "Desc", "Qty"],
        ["X1", "Widget", 2],
    ]
    assert locate_header(grid) == 2


def test_numeric_heavy_rows_are_not_headers():
    grid = [
        ["Totals", "All", 10, 20, 30],
        ["Model", "Qty", None, None, None],
    ]
    assert locate_header(grid) == 1


def test_single_character_labels_do_not_count():
    grid = [["a", "b"], ["Model", "Qty"]]
    assert locate_header(grid) == 1


def test_falls_back_to_first_row_with_values():
    grid = [[None, None], [1, 2], [3, 4]]
    assert locate_header(grid) == 1


def test_only_first_fifty_rows_are_scanned():
    grid = [[1, 2]] * 60 + [["Model", "Qty"]]
    assert locate_header(grid) == 0


def test_empty_and_blank_grids_default_to_zero():
    assert locate_header([]) == 0
    assert locate_header([[None], [""], []]) == 0
