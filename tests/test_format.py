"""Tests for explorer.services.format."""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from explorer.services.format import (
    address_abbr,
    format_amount,
    format_datetime,
    format_rate,
    transfer,
)


class TestFormatAmount:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("1.500000000"), "1.5 SEM"),
            (Decimal("1234567.000000001"), "1,234,567.000000001 SEM"),
            (Decimal("100"), "100 SEM"),
            (Decimal("0E-9"), "0 SEM"),
            (Decimal("-2.5"), "-2.5 SEM"),
        ],
    )
    def test_formats(self, value: Decimal, expected: str) -> None:
        assert format_amount(value) == expected

    def test_custom_and_empty_symbol(self) -> None:
        assert format_amount(Decimal("6.25"), "nSEM") == "6.25 nSEM"
        assert format_amount(Decimal("6.25"), "") == "6.25"


class TestAddresses:
    def test_abbreviates_long_address(self) -> None:
        addr: str = "0x" + "1234567890abcdef" * 2 + "99998888"
        assert address_abbr(addr) == "0x123456...8888"

    def test_adds_prefix(self) -> None:
        assert address_abbr("abcd") == "0xabcd"

    def test_empty(self) -> None:
        assert address_abbr("") == ""

    def test_transfer(self) -> None:
        assert transfer("0xa1", "0xb1") == "0xa1 -> 0xb1"


def test_format_datetime_in_utc() -> None:
    local: datetime = datetime(2026, 1, 15, 2, 30, tzinfo=timezone(timedelta(hours=2)))
    assert format_datetime(local) == "2026-01-15 00:30:00 UTC"
    assert format_datetime(datetime(2026, 1, 15, tzinfo=UTC)) == "2026-01-15 00:00:00 UTC"


def test_format_rate() -> None:
    assert format_rate(75.0) == "75.00%"
    assert format_rate(100 / 3) == "33.33%"
