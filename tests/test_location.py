"""Tests for explorer.services.location."""

from explorer.services.location import LocationState, location_addr_1st, location_addrs


def test_from_query_splits_commas() -> None:
    loc: LocationState = LocationState.from_query(["0xa1,0xb1", "0xc1"])
    assert loc.addresses == ("0xa1", "0xb1", "0xc1")


def test_addrs_drop_blanks_and_duplicates() -> None:
    loc: LocationState = LocationState((" 0xa1", "", "0xb1", "0xa1", "  "))
    assert location_addrs(loc) == ["0xa1", "0xb1"]


def test_first_address() -> None:
    assert location_addr_1st(LocationState(("0xb1", "0xa1"))) == "0xb1"
    assert location_addr_1st(LocationState()) is None
