"""Health endpoints."""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_node_client
from app.schemas.common import NodeHealthResponse
from config import get_settings
from explorer.services._types import NodeInfoDict
from explorer.services.blocks import fetch_latest_block
from explorer.services.node_client import NodeExec
from explorer.services.result import Err, Ok

logger: logging.Logger = logging.getLogger(__name__)

router: APIRouter = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


async def get_node_info(client: NodeExec) -> NodeInfoDict:
    """Probe the node with a latest-block call. Never raises."""
    api_url: str = get_settings().node.api_url
    match await fetch_latest_block(client):
        case Ok(block):
            return NodeInfoDict(api_url=api_url, reachable=True, latest_block=block.number)
        case Err(message):
            logger.warning("Node health check failed: %s", message)
            return NodeInfoDict(api_url=api_url, reachable=False, error=message)


@router.get("/health/node", response_model=NodeHealthResponse)
async def health_node(client: NodeExec = Depends(get_node_client)) -> NodeInfoDict:
    return await get_node_info(client)
