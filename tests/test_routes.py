"""Tests for all API routes via FastAPI TestClient."""

from collections.abc import AsyncIterator, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.dependencies import get_node_client
from app.routes import delegates, health, home
from explorer.services.node_client import NodeExec
from explorer.services.result import Err
from node_fakes import (
    DELEGATES_PATH,
    LATEST_BLOCK_PATH,
    FakeNode,
    account_path,
    block_wire,
    delegate_wire,
    home_node,
    tx_wire,
    votes_path,
)


def _create_test_app() -> FastAPI:
    """Minimal app without lifespan."""
    test_app: FastAPI = FastAPI()
    test_app.include_router(health.router)
    test_app.include_router(home.router)
    test_app.include_router(delegates.router)
    return test_app


_test_app: FastAPI = _create_test_app()


@pytest.fixture()
def node() -> FakeNode:
    return home_node(
        {
            "0xa1": [tx_wire("0xh1", 1, "0xa1", "0xb1"), tx_wire("0xh2", 2, "0xa1", "0xc1")],
        }
    )


@pytest.fixture()
def client(node: FakeNode) -> Generator[TestClient, None, None]:
    """TestClient with the node dependency overridden to use the fake node."""

    async def _override_node() -> AsyncIterator[NodeExec]:
        yield node

    _test_app.dependency_overrides[get_node_client] = _override_node
    with TestClient(_test_app, raise_server_exceptions=True) as c:
        yield c
    _test_app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_node_reachable(self, client: TestClient) -> None:
        resp = client.get("/health/node")
        assert resp.status_code == 200
        data: dict[str, object] = resp.json()
        assert data["reachable"] is True
        assert data["latestBlock"] == 123456
        assert data["apiUrl"] == "http://node.test"

    def test_node_unreachable(self, client: TestClient, node: FakeNode) -> None:
        node.responses[LATEST_BLOCK_PATH] = Err("Request to node failed: connection refused")
        data: dict[str, object] = client.get("/health/node").json()
        assert data["reachable"] is False
        assert "connection refused" in str(data["error"])


class TestHome:
    def test_home_view(self, client: TestClient) -> None:
        resp = client.get("/api/home", params={"address": "0xa1"})
        assert resp.status_code == 200
        data: dict[str, object] = resp.json()
        assert data["errorMessage"] is None
        overview = data["overview"]
        assert overview["blockNumber"] == "123,456"
        assert overview["available"] == "2.5 SEM"
        assert overview["locked"] == "1 SEM"
        assert overview["totalBalance"] == "3.5 SEM"
        assert overview["coinbase"] == "0xa1"
        assert [t["hash"] for t in data["transactions"]] == ["0xh2", "0xh1"]
        assert data["transactions"][0]["icon"] == "resources/outbound.png"

    def test_no_addresses(self, client: TestClient) -> None:
        data: dict[str, object] = client.get("/api/home").json()
        assert data["transactions"] == []
        assert data["overview"]["totalBalance"] == "0 SEM"
        assert data["overview"]["blockNumber"] == "123,456"

    def test_error_banner(self, client: TestClient, node: FakeNode) -> None:
        node.responses[account_path("0xa1")] = Err("Invalid account address")
        resp = client.get("/api/home", params={"address": "0xa1"})
        assert resp.status_code == 200
        data: dict[str, object] = resp.json()
        assert data["errorMessage"] == "Invalid account address"
        assert data["overview"]["blockNumber"] == "123,456"

    def test_out_of_range_block_time_shows_banner(
        self, client: TestClient, node: FakeNode
    ) -> None:
        node.responses[LATEST_BLOCK_PATH] = {**block_wire(), "timestamp": "9" * 25}
        resp = client.get("/api/home", params={"address": "0xa1"})
        assert resp.status_code == 200
        data: dict[str, object] = resp.json()
        assert "timestamp" in str(data["errorMessage"])
        assert data["overview"]["blockNumber"] == ""
        assert data["overview"]["available"] == "2.5 SEM"


class TestDelegates:
    def test_list_delegates(self, client: TestClient, node: FakeNode) -> None:
        node.responses[DELEGATES_PATH] = [delegate_wire(), delegate_wire(address="0xd2")]
        resp = client.get("/api/delegates")
        assert resp.status_code == 200
        data: list[dict[str, object]] = resp.json()
        assert len(data) == 2
        assert data[0]["votes"] == "1.5 SEM"
        assert data[0]["rate"] == "75.00%"
        assert data[0]["blocksForged"] == 42

    def test_node_error_is_502(self, client: TestClient, node: FakeNode) -> None:
        node.responses[DELEGATES_PATH] = Err("Node unavailable")
        resp = client.get("/api/delegates")
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Node unavailable"

    def test_malformed_delegate_is_502(self, client: TestClient, node: FakeNode) -> None:
        node.responses[DELEGATES_PATH] = [delegate_wire(turnsHit="many")]
        resp = client.get("/api/delegates")
        assert resp.status_code == 502
        assert "turnsHit" in resp.json()["detail"]

    def test_votes(self, client: TestClient, node: FakeNode) -> None:
        node.responses[votes_path("0xa1")] = [
            {"delegate": {"address": "0xd1"}, "votes": "2000000000"}
        ]
        resp = client.get("/api/account/votes", params={"address": "0xa1"})
        assert resp.status_code == 200
        assert resp.json() == [{"delegate": "0xd1", "votes": "2 SEM"}]

    def test_votes_requires_address(self, client: TestClient) -> None:
        assert client.get("/api/account/votes").status_code == 422
