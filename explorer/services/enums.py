"""Enumeration types for the explorer."""

from enum import Enum


class TransactionKind(str, Enum):
    """Transaction variant as shown in the UI. Closed set with a fallback."""

    VOTE = "vote"
    UNVOTE = "unvote"
    TRANSFER = "transfer"
    UNKNOWN = "unknown"

    @classmethod
    def from_wire(cls, raw: object) -> "TransactionKind":
        """Map the node's tag (``"TRANSFER"``, ``"COINBASE"``, ...) onto the set."""
        if not isinstance(raw, str):
            return cls.UNKNOWN
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class TransferDirection(str, Enum):
    """Icon key for a transaction row."""

    VOTE = "vote"
    UNVOTE = "unvote"
    CYCLE = "cycle"
    OUTBOUND = "outbound"
    INBOUND = "inbound"
    UNKNOWN = "unknown"
