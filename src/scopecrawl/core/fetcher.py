"""HTTP fetcher implementation using httpx."""

import asyncio

import httpx

from ..config import settings
from ..errors import FetchError
from .protocols import Response


class HttpFetcher:
    """Async HTTP fetcher using httpx with connection reuse.

    The status code is not inspected: any response that arrives is handed
    back, only transport-level failures raise FetchError.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = settings.user_agent,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls) -> "HttpFetcher":
        """Build a fetcher from the global settings."""
        return cls(
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with double-checked locking."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        limits=self.limits,
                        headers={"User-Agent": self.user_agent},
                        follow_redirects=True,
                    )
        return self._client

    async def fetch(self, url: str) -> Response:
        """Fetch a URL and return the response."""
        client = await self._get_client()
        try:
            resp = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, e) from e
        return Response(
            url=str(resp.url),
            status=resp.status_code,
            content=resp.content,
        )

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
