"""Async HTTP client for fetching pages."""

from collections.abc import Mapping

import httpx
from loguru import logger

from domain.exceptions import FetchError

DEFAULT_TIMEOUT = 5.0


class AsyncHTTPClient:
    """Thin wrapper over httpx.AsyncClient returning page text."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client.

        Args:
            timeout: Timeout of a single request in seconds
            transport: Optional custom transport (used by tests)
        """
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def get_text(
        self, url: str, params: Mapping[str, str] | None = None
    ) -> tuple[str, str]:
        """
        GET a page.

        Returns:
            Page text and the final URL, query included

        Raises:
            FetchError: On non-2xx status, timeout or network failure
        """
        logger.debug(f"GET {url} params={dict(params) if params else {}}")
        try:
            response = await self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise FetchError(url, f"timed out after {self.timeout:.1f}s") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        final_url = str(response.url)
        if not response.is_success:
            raise FetchError(final_url, f"status code {response.status_code}")
        return response.text, final_url

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
