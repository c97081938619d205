"""Wire records as the node returns them.

Numbers stay strings here; conversion to domain values happens in the
decoders so every field gets the same strict parsing.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RemoteModel(BaseModel):
    """Base for node payloads: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class DelegateRemote(RemoteModel):
    address: str
    name: str
    registered_at: str | int | None = None
    votes: str | int
    blocks_forged: str | int
    turns_hit: str | int
    turns_missed: str | int
    validator: bool = False


class DelegateRef(RemoteModel):
    address: str


class AccountVoteRemote(RemoteModel):
    delegate: DelegateRef
    votes: str | int


class AccountRemote(RemoteModel):
    address: str
    available: str | int
    locked: str | int
    nonce: str | int = "0"
    transaction_count: str | int = "0"


class TransactionRemote(RemoteModel):
    hash: str
    type: str = ""
    # "from" is a keyword, so the alias is spelled out.
    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    value: str | int
    fee: str | int = "0"
    timestamp: str | int
    block_number: str | int | None = None


class BlockRemote(RemoteModel):
    number: str | int
    hash: str
    timestamp: str | int
    coinbase: str = ""
