"""Shared exception hierarchy for explorer services."""


class ExplorerError(Exception):
    """Base exception for explorer errors."""


# ── Node ──────────────────────────────────────────────────────────────────────


class NodeClientError(ExplorerError):
    """Base exception for node client errors."""


class TransportError(NodeClientError):
    """Network, HTTP status or deserialization failure talking to the node."""


class NodeRejectedError(NodeClientError):
    """The node answered with ``success: false``."""


# ── Decoding ──────────────────────────────────────────────────────────────────


class DecodeError(ExplorerError):
    """A wire record has a missing or malformed field."""

    def __init__(self, field: str, raw: object, reason: str = "malformed value") -> None:
        self.field: str = field
        self.raw: object = raw
        super().__init__(f"{field}: {reason} {raw!r}")
