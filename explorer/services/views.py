"""Render snapshots into display trees for the API and the terminal UI."""

from collections.abc import Iterable

from explorer.services._types import (
    DelegateRowDict,
    HomeViewDict,
    OverviewDict,
    TransactionRowDict,
    VoteRowDict,
)
from explorer.services.aggregation import (
    classify_transaction,
    sum_available,
    sum_locked,
    sum_total,
)
from explorer.services.format import (
    DEFAULT_SYMBOL,
    address_abbr,
    format_amount,
    format_datetime,
    format_rate,
    transfer,
)
from explorer.services.home import HomeState
from explorer.services.location import LocationState, location_addr_1st
from explorer.services.schemas import AccountVote, DelegateRecord, Transaction

ICON_DIR: str = "resources"


def _overview(state: HomeState, location: LocationState, symbol: str) -> OverviewDict:
    block = state.block
    return OverviewDict(
        block_number=f"{block.number:,}" if block else "",
        block_time=format_datetime(block.timestamp) if block else "",
        coinbase=address_abbr(location_addr_1st(location) or ""),
        available=format_amount(sum_available(state.accounts), symbol),
        locked=format_amount(sum_locked(state.accounts), symbol),
        total_balance=format_amount(sum_total(state.accounts), symbol),
    )


def _transaction_row(state: HomeState, tx: Transaction, symbol: str) -> TransactionRowDict:
    sign, icon = classify_transaction(state, tx)
    return TransactionRowDict(
        hash=tx.hash,
        icon=f"{ICON_DIR}/{icon.value}.png",
        time=format_datetime(tx.timestamp),
        transfer=transfer(tx.from_address, tx.to_address),
        amount=f"{sign}{format_amount(tx.value, symbol)}",
    )


def render_home(
    state: HomeState, location: LocationState, symbol: str = DEFAULT_SYMBOL
) -> HomeViewDict:
    return HomeViewDict(
        error_message=state.error_message or None,
        overview=_overview(state, location, symbol),
        transactions=[_transaction_row(state, tx, symbol) for tx in state.transactions],
    )


def render_delegates(
    delegates: Iterable[DelegateRecord], symbol: str = DEFAULT_SYMBOL
) -> list[DelegateRowDict]:
    return [
        DelegateRowDict(
            address=d.address,
            name=d.name,
            votes=format_amount(d.votes, symbol),
            blocks_forged=d.blocks_forged,
            turns_hit=d.turns_hit,
            turns_missed=d.turns_missed,
            rate=format_rate(d.rate),
            validator=d.validator,
        )
        for d in delegates
    ]


def render_votes(votes: Iterable[AccountVote], symbol: str = DEFAULT_SYMBOL) -> list[VoteRowDict]:
    return [VoteRowDict(delegate=v.delegate, votes=format_amount(v.votes, symbol)) for v in votes]
