"""Typed domain records produced by the decoders."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from explorer.services.enums import TransactionKind


@dataclass(frozen=True, slots=True)
class DelegateRecord:
    address: str
    name: str
    votes: Decimal
    blocks_forged: int
    turns_hit: int
    turns_missed: int
    rate: float
    validator: bool
    registered_at: int | None = None


@dataclass(frozen=True, slots=True)
class AccountVote:
    delegate: str
    votes: Decimal


@dataclass(frozen=True, slots=True)
class Account:
    address: str
    available: Decimal
    locked: Decimal
    nonce: int = 0
    transaction_count: int = 0

    @property
    def total(self) -> Decimal:
        return self.available + self.locked


@dataclass(frozen=True, slots=True)
class Transaction:
    hash: str
    kind: TransactionKind
    from_address: str
    to_address: str
    value: Decimal
    timestamp: datetime
    fee: Decimal = Decimal(0)
    block_number: int | None = None


@dataclass(frozen=True, slots=True)
class Block:
    number: int
    hash: str
    timestamp: datetime
    coinbase: str = ""


# An account paired with its most recent transactions.
AccountAndTxs = tuple[Account, list[Transaction]]
