"""Account lookups and the per-address account + transactions fan-out."""

import asyncio
from collections.abc import Sequence

import structlog

from explorer.services._helpers import parse_count, scale_down
from explorer.services.decoding import decode_one, parse_remote
from explorer.services.node_client import API_PREFIX, NodeExec
from explorer.services.result import Err, Ok, Result
from explorer.services.schemas import Account, AccountAndTxs, AccountRemote, Transaction
from explorer.services.transactions import MAX_TXS_SIZE, decode_transactions

logger = structlog.get_logger(__name__)


def decode_account(raw: object) -> Account:
    r: AccountRemote = parse_remote(AccountRemote, raw)
    return Account(
        address=r.address,
        available=scale_down("available", r.available),
        locked=scale_down("locked", r.locked),
        nonce=parse_count("nonce", r.nonce),
        transaction_count=parse_count("transactionCount", r.transaction_count),
    )


async def fetch_account(client: NodeExec, address: str) -> Result[Account]:
    path: str = f"{API_PREFIX}/account?address={address}"
    return decode_one(await client.exec("GET", path), decode_account)


def page_window(transaction_count: int, page: int, size: int) -> tuple[int, int]:
    """Index window ``[start, end)`` of page ``page`` counting back from the newest."""
    end: int = max(0, transaction_count - page * size)
    start: int = max(0, end - size)
    return start, end


async def fetch_last_txs(
    client: NodeExec, account: Account, page: int = 0, size: int = MAX_TXS_SIZE
) -> Result[list[Transaction]]:
    """Fetch one page of the account's transactions, newest first."""
    start, end = page_window(account.transaction_count, page, size)
    if start == end:
        return Ok([])
    path: str = (
        f"{API_PREFIX}/account/transactions?address={account.address}&from={start}&to={end}"
    )
    # The node returns them oldest first.
    return decode_transactions(await client.exec("GET", path)).map(
        lambda txs: list(reversed(txs))
    )


async def fetch_account_and_txs(client: NodeExec, address: str) -> Result[AccountAndTxs]:
    """Fetch the account, then its last page of transactions."""
    account_r: Result[Account] = await fetch_account(client, address)
    match account_r:
        case Err():
            return account_r
        case Ok(account):
            txs_r: Result[list[Transaction]] = await fetch_last_txs(client, account)
            return txs_r.map(lambda txs: (account, txs))


async def fetch_accounts_and_txs(
    client: NodeExec, addresses: Sequence[str]
) -> Result[list[AccountAndTxs]]:
    """Run one fetch per address concurrently; any failure fails the batch."""
    results: list[Result[AccountAndTxs]] = await asyncio.gather(
        *(fetch_account_and_txs(client, address) for address in addresses)
    )
    failed: list[tuple[str, Err]] = [
        (address, r) for address, r in zip(addresses, results) if isinstance(r, Err)
    ]
    if failed:
        for address, err in failed:
            logger.warning("account_fetch_failed", address=address, error=err.message)
        return failed[0][1]
    return Ok([r.value for r in results if isinstance(r, Ok)])
