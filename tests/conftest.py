from __future__ import annotations

import pytest

SKU_GRID = [
    ["SKU", "Desc", "Qty"],
    ["X1", "Dell PowerEdge R740", 2],
    ["X2", "HPE DL380", None],
]


def _record(manufacturer: str = "Other", model: str | None = None, **overrides):
    record = {
        "model": model,
        "description": model,
        "quantity": 1,
        "asking_price": None,
        "cost": None,
        "cpu": None,
        "memory_part_numbers": None,
        "gpu": None,
        "specs": {"oem_guess": manufacturer},
        "manufacturer": manufacturer,
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def sku_grid():
    return [list(r) for r in SKU_GRID]
