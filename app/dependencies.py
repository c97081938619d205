"""FastAPI dependencies: node client and settings."""

from collections.abc import AsyncIterator

from config import Settings, get_settings
from explorer.services.node_client import NodeClient, NodeExec


async def get_node_client() -> AsyncIterator[NodeExec]:
    """One node client per request, closed when the response is done."""
    async with NodeClient() as client:
        yield client


def get_currency_symbol() -> str:
    settings: Settings = get_settings()
    return settings.currency_symbol
