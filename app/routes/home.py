"""Home endpoint: runs one fetch cycle and returns the rendered view."""

import asyncio

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_currency_symbol, get_node_client
from app.schemas.home import HomeViewResponse
from explorer.services._types import HomeViewDict
from explorer.services.home import HomeController, HomeStore
from explorer.services.location import LocationState
from explorer.services.node_client import NodeExec
from explorer.services.views import render_home

router: APIRouter = APIRouter(prefix="/api", tags=["home"])


@router.get("/home", response_model=HomeViewResponse)
async def home(
    address: list[str] = Query(default=[]),
    client: NodeExec = Depends(get_node_client),
    symbol: str = Depends(get_currency_symbol),
) -> HomeViewDict:
    location: LocationState = LocationState.from_query(address)
    store: HomeStore = HomeStore()
    await asyncio.gather(*HomeController(store, client).fetch(location))
    return render_home(store.state, location, symbol)
