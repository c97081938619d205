"""Shared utilities for the service layer."""

import re
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from explorer.services.errors import DecodeError

# Wire amounts are integers in nano units (1 SEM = 10**9 nanoSEM).
NANO_EXPONENT: int = 9
ZERO: Decimal = Decimal(0)
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=UTC)

_INTEGER_RE: re.Pattern[str] = re.compile(r"-?\d+")
_COUNT_RE: re.Pattern[str] = re.compile(r"\d+")


def _integer_text(field: str, raw: object) -> str:
    if isinstance(raw, bool):
        raise DecodeError(field, raw, "expected integer string, got")
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, str) and _INTEGER_RE.fullmatch(raw):
        return raw
    raise DecodeError(field, raw, "expected integer string, got")


def parse_int(field: str, raw: object) -> int:
    """Strict base-10 integer parse; ``"12abc"`` and ``""`` are rejected."""
    return int(_integer_text(field, raw))


def scale_down(field: str, raw: object) -> Decimal:
    """Nano-unit wire integer -> fixed-point amount, exactly (no float)."""
    # Built from the exponent form so no context rounding applies.
    return Decimal(f"{_integer_text(field, raw)}E-{NANO_EXPONENT}")


def parse_count(field: str, raw: object) -> int:
    """Like ``parse_int`` but for counters, which are never negative."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        if raw < 0:
            raise DecodeError(field, raw, "expected non-negative integer, got")
        return raw
    if isinstance(raw, str) and not _COUNT_RE.fullmatch(raw):
        raise DecodeError(field, raw, "expected non-negative integer, got")
    return parse_int(field, raw)


def from_millis(field: str, raw: object) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=parse_int(field, raw))
    except (OverflowError, ValueError) as e:
        raise DecodeError(field, raw, "timestamp out of range") from e
