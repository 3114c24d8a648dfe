"""
HTTP client for the Dream Vacation API
"""
from typing import Any, Dict, List, Optional
import logging

import httpx

logger = logging.getLogger(__name__)

DESTINATIONS_PATH = "/api/destinations"


class DestinationsClient:
    """
    Thin async wrapper over the destinations endpoints.

    Non-2xx responses raise httpx.HTTPStatusError; connection problems raise
    the matching httpx.TransportError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "DestinationsClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def info(self) -> Dict[str, Any]:
        response = await self._client.get("/")
        response.raise_for_status()
        return response.json()

    async def list_destinations(self) -> List[Dict[str, Any]]:
        response = await self._client.get(DESTINATIONS_PATH)
        response.raise_for_status()
        return response.json()

    async def create_destination(self, country: str, vacation_type: Optional[str] = None) -> Dict[str, Any]:
        response = await self._client.post(
            DESTINATIONS_PATH,
            json={"country": country, "vacationType": vacation_type},
        )
        response.raise_for_status()
        created = response.json()
        logger.debug(f"Created destination {created.get('id')}")
        return created

    async def delete_destination(self, destination_id: int) -> None:
        response = await self._client.delete(f"{DESTINATIONS_PATH}/{destination_id}")
        response.raise_for_status()
