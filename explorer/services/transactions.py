"""Transaction decoding and the merged recent-transactions feed."""

from collections.abc import Iterable

from explorer.services._helpers import from_millis, parse_count, scale_down
from explorer.services.decoding import decode_list, parse_remote
from explorer.services.enums import TransactionKind
from explorer.services.result import Result
from explorer.services.schemas import AccountAndTxs, Transaction, TransactionRemote

MAX_TXS_SIZE: int = 5


def decode_transaction(raw: object) -> Transaction:
    r: TransactionRemote = parse_remote(TransactionRemote, raw)
    return Transaction(
        hash=r.hash,
        kind=TransactionKind.from_wire(r.type),
        from_address=r.from_address,
        to_address=r.to_address,
        value=scale_down("value", r.value),
        fee=scale_down("fee", r.fee),
        timestamp=from_millis("timestamp", r.timestamp),
        block_number=(
            parse_count("blockNumber", r.block_number) if r.block_number is not None else None
        ),
    )


def decode_transactions(remote: Result[object]) -> Result[list[Transaction]]:
    return decode_list(remote, decode_transaction)


def merge_transactions(
    pairs: Iterable[AccountAndTxs], limit: int = MAX_TXS_SIZE
) -> list[Transaction]:
    """Merge per-account feeds into one: unique by hash, newest first, capped.

    When two entries share a hash the one seen last wins. Order of the input
    does not matter beyond that because the result is fully re-sorted.
    """
    by_hash: dict[str, Transaction] = {}
    for _account, txs in pairs:
        for tx in txs:
            by_hash[tx.hash] = tx
    merged: list[Transaction] = sorted(
        by_hash.values(), key=lambda tx: tx.timestamp, reverse=True
    )
    return merged[:limit]
