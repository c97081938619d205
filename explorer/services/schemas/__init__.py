"""Shared dataclasses and wire models for explorer services."""

from explorer.services.schemas.domain import (
    Account,
    AccountAndTxs,
    AccountVote,
    Block,
    DelegateRecord,
    Transaction,
)
from explorer.services.schemas.remote import (
    AccountRemote,
    AccountVoteRemote,
    BlockRemote,
    DelegateRemote,
    TransactionRemote,
)

__all__ = [
    # Domain records
    "Account",
    "AccountAndTxs",
    "AccountVote",
    "Block",
    "DelegateRecord",
    "Transaction",
    # Wire records
    "AccountRemote",
    "AccountVoteRemote",
    "BlockRemote",
    "DelegateRemote",
    "TransactionRemote",
]
