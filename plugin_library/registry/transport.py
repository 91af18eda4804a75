"""HTTP transport for registry requests."""

import logging

import httpx

from ..errors import TransportError

logger = logging.getLogger(__name__)


class HttpTransport:
    """Transport backed by an ``httpx.AsyncClient``.

    Non-2xx responses, timeouts, connection errors and malformed URIs raise
    TransportError.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds
            client: Optional preconfigured client (owned by the caller)
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def get(self, uri: str) -> str:
        logger.debug(f"GET {uri}")
        try:
            response = await self._client.get(uri)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(uri, str(e) or type(e).__name__) from e
        return response.text

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
