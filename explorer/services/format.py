"""Display formatting for amounts, addresses and times."""

from datetime import UTC, datetime
from decimal import Decimal

DEFAULT_SYMBOL: str = "SEM"


def format_amount(value: Decimal, symbol: str = DEFAULT_SYMBOL) -> str:
    """``Decimal("1234.500000000")`` -> ``"1,234.5 SEM"``."""
    normalized: Decimal = value.normalize() if value else Decimal(0)
    text: str = f"{normalized:,f}"
    return f"{text} {symbol}" if symbol else text


def address_abbr(address: str) -> str:
    """Shorten a hex address for display: ``0x1f2e3d...9a8b``."""
    if not address:
        return ""
    prefixed: str = address if address.startswith("0x") else f"0x{address}"
    if len(prefixed) <= 14:
        return prefixed
    return f"{prefixed[:8]}...{prefixed[-4:]}"


def transfer(from_address: str, to_address: str) -> str:
    return f"{address_abbr(from_address)} -> {address_abbr(to_address)}"


def format_datetime(value: datetime) -> str:
    return value.astimezone(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_rate(rate: float) -> str:
    return f"{rate:.2f}%"
