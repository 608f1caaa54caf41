"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ..core.exceptions import APIError, DecodeError, TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper with basic auth and API error decoding."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        auth: tuple[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.auth = aiohttp.BasicAuth(*auth) if auth else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(auth=self.auth, timeout=self.timeout)
        return self._session

    def resolve(self, url: str) -> str:
        """Join relative URLs with base_url; absolute URLs are left alone."""
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning decoded JSON."""
        url = self.resolve(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                # Only 200 is a successful read
                return await self._decode(response, url, ok=response.status == 200)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("http_get_failed", extra={"url": url, "error": str(e)})
            raise TransportError(f"GET {url} failed: {e}", url=url) from e

    async def post(
        self,
        url: str,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Form-encoded POST request returning decoded JSON."""
        url = self.resolve(url)
        try:
            async with self.session.post(url, data=data, headers=headers) as response:
                # Any 2xx is a successful write
                return await self._decode(response, url, ok=200 <= response.status < 300)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("http_post_failed", extra={"url": url, "error": str(e)})
            raise TransportError(f"POST {url} failed: {e}", url=url) from e

    async def _decode(self, response: aiohttp.ClientResponse, url: str, *, ok: bool) -> Any:
        body = await response.read()
        if not ok:
            try:
                payload = json.loads(body.decode("utf-8")) if body else None
            except ValueError:
                payload = None
            raise APIError.from_payload(payload, status_code=response.status)
        # UnicodeDecodeError is a ValueError
        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as e:
            raise DecodeError(f"Invalid JSON from {url}: {e}", url=url) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
