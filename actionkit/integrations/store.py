"""Client side of the integration instance store"""

from __future__ import annotations

from typing import Any, Protocol

import httpx
from loguru import logger

from actionkit.integrations.schemas import IntegrationInstance


class IntegrationInstanceStore(Protocol):
    async def list_instances(self) -> list[IntegrationInstance]: ...

    async def create_instance(self, type: str, config: dict[str, Any]) -> str: ...


class HttpIntegrationStore(IntegrationInstanceStore):
    """Talks to the hosting app's ``/api/integrations`` endpoints"""

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        if self._client is not None:
            response = await self._client.request(method, url, timeout=self.timeout, **kwargs)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response

    async def list_instances(self) -> list[IntegrationInstance]:
        response = await self._request("GET", "/api/integrations")
        data = response.json()
        items = data.get("integrations", []) if isinstance(data, dict) else data
        return [IntegrationInstance(**item) for item in items]

    async def create_instance(self, type: str, config: dict[str, Any]) -> str:
        logger.info(f"Creating {type} integration")
        response = await self._request(
            "POST",
            "/api/integrations",
            json={"type": type, "config": config},
        )
        return str(response.json()["id"])
