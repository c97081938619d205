"""Home view schemas."""

from app.schemas.common import CamelModel


class OverviewResponse(CamelModel):
    block_number: str
    block_time: str
    coinbase: str
    available: str
    locked: str
    total_balance: str


class TransactionRowResponse(CamelModel):
    hash: str
    icon: str
    time: str
    transfer: str
    amount: str


class HomeViewResponse(CamelModel):
    error_message: str | None
    overview: OverviewResponse
    transactions: list[TransactionRowResponse]
