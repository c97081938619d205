"""Typed dicts for rendered views.

Keeps route-facing and CLI-facing renderers explicit about their shape
instead of returning bare dicts.
"""

import sys

if sys.version_info >= (3, 12):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict

# -- Home ------------------------------------------------------------------


class OverviewDict(TypedDict):
    block_number: str
    block_time: str
    coinbase: str
    available: str
    locked: str
    total_balance: str


class TransactionRowDict(TypedDict):
    hash: str
    icon: str
    time: str
    transfer: str
    amount: str


class HomeViewDict(TypedDict):
    error_message: str | None
    overview: OverviewDict
    transactions: list[TransactionRowDict]


# -- Delegates -------------------------------------------------------------


class DelegateRowDict(TypedDict):
    address: str
    name: str
    votes: str
    blocks_forged: int
    turns_hit: int
    turns_missed: int
    rate: str
    validator: bool


class VoteRowDict(TypedDict):
    delegate: str
    votes: str


# -- Health ----------------------------------------------------------------


class NodeInfoDict(TypedDict, total=False):
    api_url: str
    reachable: bool
    latest_block: int
    error: str
