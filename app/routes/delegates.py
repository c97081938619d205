"""Delegate and vote endpoints: thin routes, logic in services."""

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_currency_symbol, get_node_client
from app.schemas.delegates import DelegateResponse, VoteResponse
from explorer.services._types import DelegateRowDict, VoteRowDict
from explorer.services.delegates import fetch_delegates, fetch_votes
from explorer.services.node_client import NodeExec
from explorer.services.result import Err, Ok
from explorer.services.views import render_delegates, render_votes

router: APIRouter = APIRouter(prefix="/api", tags=["delegates"])


@router.get("/delegates", response_model=list[DelegateResponse])
async def list_delegates(
    client: NodeExec = Depends(get_node_client),
    symbol: str = Depends(get_currency_symbol),
) -> list[DelegateRowDict]:
    match await fetch_delegates(client):
        case Ok(delegates):
            return render_delegates(delegates, symbol)
        case Err(message):
            raise HTTPException(status_code=502, detail=message)


@router.get("/account/votes", response_model=list[VoteResponse])
async def list_votes(
    address: str = Query(..., min_length=1),
    client: NodeExec = Depends(get_node_client),
    symbol: str = Depends(get_currency_symbol),
) -> list[VoteRowDict]:
    match await fetch_votes(client, address):
        case Ok(votes):
            return render_votes(votes, symbol)
        case Err(message):
            raise HTTPException(status_code=502, detail=message)
