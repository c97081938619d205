"""Delegate and vote schemas."""

from app.schemas.common import CamelModel


class DelegateResponse(CamelModel):
    address: str
    name: str
    votes: str
    blocks_forged: int
    turns_hit: int
    turns_missed: int
    rate: str
    validator: bool


class VoteResponse(CamelModel):
    delegate: str
    votes: str
