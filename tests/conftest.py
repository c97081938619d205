"""Shared fixtures: settings isolation and a fake node."""

from collections.abc import Generator

import pytest

from config import get_settings
from node_fakes import FakeNode


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Pin node settings so a developer's .env cannot leak into tests."""
    monkeypatch.setenv("NODE_API_URL", "http://node.test")
    monkeypatch.delenv("NODE_API_USER", raising=False)
    monkeypatch.delenv("NODE_API_PASSWORD", raising=False)
    monkeypatch.setenv("EXPLORER_CURRENCY_SYMBOL", "SEM")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def fake_node() -> FakeNode:
    return FakeNode()
