"""
Base API Client - Common async HTTP GET + JSON pattern for provider clients.

Provides a reusable base class with:
- httpx.AsyncClient management (timeout, headers, connection pool)
- Strict JSON GET for search calls (raises TransportError / ParseError)
- Lenient JSON GET for per-record calls (returns None on any fault)
- Consistent error handling and logging

No retries are attempted: a failed search call degrades that provider to
zero results for the current attempt, and the user re-triggers a search.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from typing_extensions import Self

from feeling_art.shared.exceptions import ParseError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "feeling-art-mcp/0.1"


class BaseAPIClient:
    """
    Base class for art-collection API clients.

    Subclasses set ``_service_name`` and implement ``search()``.

    Example:
        class MyClient(BaseAPIClient):
            _service_name = "MyMuseum"

            async def search(self, query: str, limit: int) -> list[ArtworkItem]:
                data = await self._get_json("https://api.example.com/search", params={"q": query})
                ...
    """

    _service_name: str = "API"

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        max_connections: int = 100,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            timeout: Request timeout in seconds
            headers: Default headers for all requests
            max_connections: Size of the connection pool
            client: Pre-built httpx client (tests, shared pools)
        """
        self._timeout = timeout
        self._headers = headers
        self._max_connections = max_connections
        self._client = client or self._build_client()

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            headers={
                "User-Agent": DEFAULT_USER_AGENT,
                "Accept": "application/json",
                **(self._headers or {}),
            },
            limits=httpx.Limits(
                max_connections=self._max_connections,
                max_keepalive_connections=min(20, self._max_connections),
                keepalive_expiry=30.0,
            ),
            follow_redirects=True,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """The HTTP client, recreated if a previous owner closed it."""
        if self._client.is_closed:
            logger.debug(f"{self._service_name}: HTTP client was closed, creating a new one")
            self._client = self._build_client()
        return self._client

    @property
    def name(self) -> str:
        return self._service_name

    async def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        """
        GET *url* and parse the JSON body.

        Raises:
            TransportError: Network failure or non-success status
            ParseError: Body is not valid JSON
        """
        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"{self._service_name} request failed: {e}")
            raise TransportError(f"Request failed: {e}", provider=self._service_name, url=url) from e

        if not response.is_success:
            logger.warning(f"{self._service_name} HTTP error {response.status_code}: {response.reason_phrase}")
            raise TransportError(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                provider=self._service_name,
                status_code=response.status_code,
                url=url,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"{self._service_name} returned invalid JSON: {e}")
            raise ParseError(str(e), provider=self._service_name, url=url) from e

    async def _get_json_or_none(self, url: str, params: dict[str, str] | None = None) -> Any | None:
        """Lenient variant of :meth:`_get_json` for per-record fetches."""
        try:
            return await self._get_json(url, params=params)
        except (TransportError, ParseError) as e:
            logger.debug(f"{self._service_name}: skipping {url}: {e}")
            return None

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
