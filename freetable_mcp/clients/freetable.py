"""FreeTable REST API client for restaurant listing and bookings."""

import logging
from typing import Any

import httpx

from freetable_mcp.clients.errors import classify_response
from freetable_mcp.config import DEFAULT_API_BASE

logger = logging.getLogger(__name__)

JSONValue = Any
"""Arbitrary decoded JSON; the backend's response shapes are passed through."""


class FreeTableClient:
    """Async client for the FreeTable booking API.

    Every method opens a short-lived ``httpx.AsyncClient``, so instances hold
    no connection state and can be shared between concurrent tool calls.

    Args:
        base_url: Backend base URL without a trailing slash.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(
        self, method: str, path: str, json: dict | None = None
    ) -> JSONValue:
        """Send one request and return the decoded JSON body.

        Raises:
            BackendHTTPError: On non-2xx response.
            httpx.HTTPError: On transport failure.
            ValueError: If a 2xx body is not valid JSON.
        """
        logger.debug("FreeTable %s %s", method, path)
        async with self._client() as client:
            response = await client.request(method, path, json=json)
            classify_response(response)
        return response.json()

    async def list_restaurants(self) -> JSONValue:
        """Fetch all restaurants.

        Returns:
            The backend's restaurant listing, unmodified.
        """
        return await self._request("GET", "/api/restaurants")

    async def create_booking(self, payload: dict) -> JSONValue:
        """Create a booking from a full payload of camelCase fields."""
        return await self._request("POST", "/api/bookings", json=payload)

    async def get_booking(self, booking_id: int | float) -> JSONValue:
        return await self._request("GET", f"/api/bookings/{booking_id}")

    async def update_booking(self, booking_id: int | float, patch: dict) -> JSONValue:
        """Send a sparse patch for an existing booking.

        Only the keys present in *patch* are sent; the backend keeps every
        other field as it was.
        """
        return await self._request("PUT", f"/api/bookings/{booking_id}", json=patch)
