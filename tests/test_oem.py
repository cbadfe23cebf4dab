import pytest

from extraction.oem import classify, detect_oem, manufacturer_from_cell, resolve_manufacturer
from extraction.oem_vocabulary import OEM_LOOKUP, normalize_oem_value


def test_vocabulary_is_keyed_by_normalized_name():
    assert OEM_LOOKUP["dell"] == "Dell"
    assert OEM_LOOKUP["hpe"] == "HPE"
    assert OEM_LOOKUP["netapp"] == "NetApp"
    assert OEM_LOOKUP[normalize_oem_value("Western Digital")] == "Western Digital"
    assert len(OEM_LOOKUP) > 400


@pytest.mark.parametrize(
    "model, description, expected",
    [
        ("X1", "Dell PowerEdge R740", "Dell"),
        ("X2", "HPE DL380", "HPE"),
        ("PowerEdge R640", None, "Dell"),
        ("ProLiant DL360 Gen10", None, "HPE"),
        ("Nexus 9300", None, "Cisco"),
        ("Western Digital", None, "Western Digital"),
        ("Mystery box", None, "Other"),
    ],
)
def test_classify(make_record, model, description, expected):
    record = make_record(model=model, description=description)
    assert classify(record) == expected


def test_first_token_wins():
    assert detect_oem(["Cisco switch rails for Dell racks"]) == "Cisco"


def test_extra_values_are_searched(make_record):
    record = make_record(model="Mystery box", specs={"Vendor notes": "Juniper spares", "oem_guess": "Other"})
    assert classify(record) == "Juniper"


def test_derived_spec_keys_are_ignored(make_record):
    record = make_record(model="Mystery box", specs={"oem_guess": "Cisco", "drives": "Dell 1TB"})
    assert classify(record) == "Other"


def test_classification_is_pure(make_record):
    record = make_record(model="ProLiant DL360")
    assert classify(record) == classify(record) == "HPE"


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("cisco systems inc", "Cisco"),
        ("Net App", "NetApp"),
        ("EMC", "Dell"),
        ("hp", "HPE"),
        ("Hewlett Packard Enterprise", "HPE"),
        ("HUAWEI TECH CO", "HUAWEI TECH CO"),
        ("  Lenovo ", "Lenovo"),
        ("   ", ""),
        (None, ""),
    ],
)
def test_manufacturer_from_cell(cell, expected):
    assert manufacturer_from_cell(cell) == expected


def test_explicit_cell_beats_classification(make_record):
    record = make_record(model="PowerEdge R640")
    assert resolve_manufacturer(record, "Supermicro") == "Supermicro"
    assert resolve_manufacturer(record, "") == "Dell"
