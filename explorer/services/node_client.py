"""Node REST client.

``NodeClient.exec`` is the only network primitive in the project: every
fetch goes through it and every failure comes back as an ``Err`` carrying
the message the user will see.
"""

from typing import Protocol

import httpx
import structlog

from config import get_settings
from explorer.services.errors import NodeRejectedError, TransportError
from explorer.services.result import Err, Ok, Result

logger = structlog.get_logger(__name__)

API_PREFIX: str = "/v2.0.0"


class NodeExec(Protocol):
    """Anything that can perform a node call. ``NodeClient`` and test fakes."""

    async def exec(self, method: str, path: str) -> Result[object]: ...


class NodeClient:
    """Async client for the node's JSON REST API."""

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        auth: tuple[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.api_url: str = (api_url or settings.node.api_url).rstrip("/")
        self.timeout: float = timeout or settings.node.timeout
        self.auth: tuple[str, str] | None = auth or settings.node.auth
        self._client: httpx.AsyncClient = httpx.AsyncClient(
            base_url=self.api_url,
            timeout=httpx.Timeout(self.timeout),
            auth=self.auth,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "NodeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def exec(self, method: str, path: str) -> Result[object]:
        """Perform one call and unwrap the ``{success, message, result}`` envelope."""
        try:
            return Ok(await self._request(method, path))
        except (TransportError, NodeRejectedError) as e:
            logger.warning("node_request_failed", method=method, path=path, error=str(e))
            return Err(str(e))

    async def _request(self, method: str, path: str) -> object:
        try:
            response: httpx.Response = await self._client.request(method, path)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.api_url}{path} failed: {e}") from e

        try:
            payload: object = response.json()
        except ValueError as e:
            if response.is_error:
                raise TransportError(
                    f"Node returned HTTP {response.status_code} for {path}"
                ) from e
            raise TransportError(f"Invalid JSON from node for {path}") from e

        if isinstance(payload, dict) and "success" in payload:
            if not payload.get("success"):
                message: object = payload.get("message")
                raise NodeRejectedError(
                    str(message) if message else f"Node rejected request {path}"
                )
            return payload.get("result")

        if response.is_error:
            raise TransportError(f"Node returned HTTP {response.status_code} for {path}")
        return payload
