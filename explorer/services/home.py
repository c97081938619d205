"""Home view state: immutable snapshots, pure reducers, and the fetch cycle.

Each reducer takes the previous ``HomeState`` plus a payload and returns a
new snapshot. ``HomeStore`` holds the current one and swaps it on dispatch.
``HomeController.fetch`` starts the two independent fetch flows (latest
block, accounts fan-out) and returns at once; each flow dispatches its own
response or error when it lands.

There is no cancellation. A flow started by an earlier ``fetch`` that lands
after a later one still overwrites the snapshot.
"""

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

import structlog

from explorer.services.accounts import fetch_accounts_and_txs
from explorer.services.blocks import fetch_latest_block
from explorer.services.location import LocationState, location_addrs
from explorer.services.node_client import NodeExec
from explorer.services.result import Err, Ok
from explorer.services.schemas import Account, AccountAndTxs, Block, Transaction
from explorer.services.transactions import merge_transactions

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HomeState:
    error_message: str = ""
    block: Block | None = None
    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()


INITIAL_HOME_STATE: HomeState = HomeState()


# ------------------------------------------------------------------
# Reducers
# ------------------------------------------------------------------


def fetch_started(state: HomeState) -> HomeState:
    return replace(state, error_message="")


def fetch_block_response(state: HomeState, block: Block) -> HomeState:
    return replace(state, block=block)


def fetch_accounts_response(state: HomeState, pairs: Sequence[AccountAndTxs]) -> HomeState:
    return replace(
        state,
        accounts=tuple(account for account, _txs in pairs),
        transactions=tuple(merge_transactions(pairs)),
    )


def fetch_error(state: HomeState, error: Err | Exception) -> HomeState:
    """Show the error; whatever was loaded before stays on screen."""
    message: str = error.message if isinstance(error, Err) else str(error)
    return replace(state, error_message=message)


# ------------------------------------------------------------------
# Store
# ------------------------------------------------------------------


Listener = Callable[[HomeState], None]


class HomeStore:
    """Holds the current snapshot; never mutates one in place."""

    def __init__(self, initial: HomeState = INITIAL_HOME_STATE) -> None:
        self._state: HomeState = initial
        self._listeners: list[Listener] = []

    @property
    def state(self) -> HomeState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(
        self,
        reducer: Callable[..., HomeState],
        *payload: object,
    ) -> HomeState:
        self._state = reducer(self._state, *payload)
        logger.debug("home_state_updated", reducer=reducer.__name__)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state


# ------------------------------------------------------------------
# Fetch cycle
# ------------------------------------------------------------------


class HomeController:
    """Drives the home fetch cycle against a node."""

    def __init__(self, store: HomeStore, client: NodeExec) -> None:
        self.store: HomeStore = store
        self.client: NodeExec = client

    def fetch(self, location: LocationState) -> list[asyncio.Task[None]]:
        """Clear the error, start both flows, return without waiting.

        Must be called from a running event loop. The returned tasks may be
        awaited by callers that need the settled state.
        """
        self.store.dispatch(fetch_started)
        addresses: list[str] = location_addrs(location)
        logger.info("home_fetch_started", addresses=len(addresses))
        return [
            asyncio.create_task(self._load_block()),
            asyncio.create_task(self._load_accounts(addresses)),
        ]

    async def _load_block(self) -> None:
        try:
            match await fetch_latest_block(self.client):
                case Ok(block):
                    self.store.dispatch(fetch_block_response, block)
                case Err() as err:
                    self.store.dispatch(fetch_error, err)
        except Exception as e:
            logger.exception("home_block_flow_failed")
            self.store.dispatch(fetch_error, e)

    async def _load_accounts(self, addresses: list[str]) -> None:
        try:
            match await fetch_accounts_and_txs(self.client, addresses):
                case Ok(pairs):
                    self.store.dispatch(fetch_accounts_response, pairs)
                case Err() as err:
                    self.store.dispatch(fetch_error, err)
        except Exception as e:
            logger.exception("home_accounts_flow_failed")
            self.store.dispatch(fetch_error, e)
