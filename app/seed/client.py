"""
HTTP client for the remote seed dataset.
"""

import logging
from typing import Any, List, Optional

import httpx

from ..errors import ServiceError

logger = logging.getLogger(__name__)


class FetchError(ServiceError):
    """The seed source was unreachable or answered with an error."""
    pass


class SeedClient:
    """
    Async HTTP client for the product transaction dataset.
    
    A single GET per call. Failures are reported, never retried.
    """

    DEFAULT_TIMEOUT = 30.0  # seconds

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize seed client.
        
        Args:
            url: Location of the JSON array to seed from
            timeout: Total request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=10.0),
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch(self) -> List[Any]:
        """
        Download the dataset.
        
        Returns:
            The decoded JSON array, untouched
            
        Raises:
            FetchError: On network failure, non-2xx status, or a body that
                is not a JSON array
        """
        client = await self._get_client()

        try:
            response = await client.get(self.url)
        except httpx.RequestError as e:
            raise FetchError(f"Request to {self.url} failed: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"Failed to fetch seed data: {response.status_code} "
                f"{response.reason_phrase}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Seed data is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise FetchError(
                f"Seed data must be a JSON array, got {type(data).__name__}"
            )

        logger.debug(f"Fetched {len(data)} items from {self.url}")
        return data

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
