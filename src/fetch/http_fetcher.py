# src/fetch/http_fetcher.py — v1
"""Blocking HTTP fetcher for CDN assets and remote archives."""

from __future__ import annotations

import logging

import httpx

from basset.core.errors import FetchError

logger = logging.getLogger(__name__)


class HttpFetcher:
    """GET a URL and return its body; any transport error or non-2xx raises FetchError."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "basset",
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: Per-request timeout in seconds.
            user_agent: User-Agent header sent with every request.
            client: Preconfigured client (tests pass one built on
                httpx.MockTransport). Owned by the caller when given.
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        )

    def get(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        return response.content

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
