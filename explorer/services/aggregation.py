"""Balance totals and per-row display classification for the home view."""

from collections.abc import Iterable
from decimal import Decimal

from explorer.services._helpers import ZERO
from explorer.services.enums import TransactionKind, TransferDirection
from explorer.services.home import HomeState
from explorer.services.schemas import Account, Transaction


def sum_available(accounts: Iterable[Account]) -> Decimal:
    return sum((a.available for a in accounts), ZERO)


def sum_locked(accounts: Iterable[Account]) -> Decimal:
    return sum((a.locked for a in accounts), ZERO)


def sum_total(accounts: Iterable[Account]) -> Decimal:
    return sum((a.available + a.locked for a in accounts), ZERO)


Classification = tuple[str, TransferDirection]

UNKNOWN: Classification = ("", TransferDirection.UNKNOWN)


def classify_transaction(state: HomeState, tx: Transaction) -> Classification:
    """Sign and icon for one row of the transactions panel.

    Transfers are judged only against the other rows currently on screen:
    a sender that recurs there reads as "ours" (outbound), a recipient that
    recurs reads as inbound, both as a cycle. This is a heuristic over the
    visible window; it knows nothing about the rest of the ledger.
    """
    match tx.kind:
        case TransactionKind.VOTE:
            return ("", TransferDirection.VOTE)
        case TransactionKind.UNVOTE:
            return ("", TransferDirection.UNVOTE)
        case TransactionKind.TRANSFER:
            others: list[Transaction] = [t for t in state.transactions if t.hash != tx.hash]
            ours_from: bool = any(t.from_address == tx.from_address for t in others)
            ours_to: bool = any(t.to_address == tx.to_address for t in others)
            if ours_from and ours_to:
                return ("", TransferDirection.CYCLE)
            if ours_from:
                return ("-", TransferDirection.OUTBOUND)
            if ours_to:
                return ("+", TransferDirection.INBOUND)
            return UNKNOWN
        case TransactionKind.UNKNOWN:
            return UNKNOWN
