"""Addresses of interest, as carried by the current location."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LocationState:
    addresses: tuple[str, ...] = ()

    @classmethod
    def from_query(cls, values: Iterable[str]) -> "LocationState":
        """Accept repeated ``address`` params as well as comma-separated ones."""
        parts: list[str] = [p for v in values for p in v.split(",")]
        return cls(addresses=tuple(parts))


def location_addrs(location: LocationState) -> list[str]:
    """Non-blank addresses in first-seen order, without duplicates."""
    seen: dict[str, None] = {}
    for raw in location.addresses:
        address: str = raw.strip()
        if address:
            seen.setdefault(address, None)
    return list(seen)


def location_addr_1st(location: LocationState) -> str | None:
    addrs: list[str] = location_addrs(location)
    return addrs[0] if addrs else None
