"""Delegate and vote decoders."""

from explorer.services._helpers import parse_count, scale_down
from explorer.services.decoding import decode_list, parse_remote
from explorer.services.node_client import API_PREFIX, NodeExec
from explorer.services.result import Result
from explorer.services.schemas import (
    AccountVote,
    AccountVoteRemote,
    DelegateRecord,
    DelegateRemote,
)


def delegate_rate(turns_hit: int, turns_missed: int) -> float:
    """Share of scheduled turns the delegate produced, in percent (unrounded)."""
    total: int = turns_hit + turns_missed
    return 0.0 if total == 0 else turns_hit * 100 / total


def decode_delegate(raw: object) -> DelegateRecord:
    r: DelegateRemote = parse_remote(DelegateRemote, raw)
    turns_hit: int = parse_count("turnsHit", r.turns_hit)
    turns_missed: int = parse_count("turnsMissed", r.turns_missed)
    return DelegateRecord(
        address=r.address,
        name=r.name,
        votes=scale_down("votes", r.votes),
        blocks_forged=parse_count("blocksForged", r.blocks_forged),
        turns_hit=turns_hit,
        turns_missed=turns_missed,
        rate=delegate_rate(turns_hit, turns_missed),
        validator=r.validator,
        registered_at=(
            parse_count("registeredAt", r.registered_at) if r.registered_at is not None else None
        ),
    )


def decode_delegates(remote: Result[object]) -> Result[list[DelegateRecord]]:
    return decode_list(remote, decode_delegate)


def decode_vote(raw: object) -> AccountVote:
    r: AccountVoteRemote = parse_remote(AccountVoteRemote, raw)
    return AccountVote(delegate=r.delegate.address, votes=scale_down("votes", r.votes))


def decode_votes(remote: Result[object]) -> Result[list[AccountVote]]:
    return decode_list(remote, decode_vote)


async def fetch_delegates(client: NodeExec) -> Result[list[DelegateRecord]]:
    return decode_delegates(await client.exec("GET", f"{API_PREFIX}/delegates"))


async def fetch_votes(client: NodeExec, address: str) -> Result[list[AccountVote]]:
    path: str = f"{API_PREFIX}/account/votes?address={address}"
    return decode_votes(await client.exec("GET", path))
