"""HTTP client helper.

The gateway presents a self-signed certificate on loopback and ties the
brokerage session to a cookie, so the aiohttp session is built with
certificate verification off and an unsafe cookie jar (cookies from IP
hosts such as 127.0.0.1 are kept).
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp
from yarl import URL

from ...config import DEFAULT_TIMEOUT, USER_AGENT
from ...core.exceptions import AuthenticationError, DecodingError, RequestError

logger = logging.getLogger(__name__)

_NO_CONTENT = 204


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | URL | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = URL(str(base_url)) if base_url is not None else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {"User-Agent": USER_AGENT}
        self._session: aiohttp.ClientSession | None = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self.headers,
                connector=aiohttp.TCPConnector(ssl=False),
                cookie_jar=aiohttp.CookieJar(unsafe=True),
            )
            self._owns_session = True
        return self._session

    def resolve(self, url: str) -> URL:
        """Join a relative path onto ``base_url``; absolute URLs pass through."""
        target = URL(url)
        if self.base_url is None or target.is_absolute():
            return target
        return self.base_url.join(target)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Returns:
            Decoded JSON, or ``None`` when the gateway answers 204 No Content

        Raises:
            RequestError: Transport failure or non-success HTTP status
            AuthenticationError: HTTP 401
            DecodingError: Success status with an empty, non-UTF-8, non-JSON
                or JSON ``null`` body
        """
        target = self.resolve(url)
        logger.debug("Gateway request", extra={"method": method, "url": str(target)})
        try:
            async with self.session.request(
                method, target, params=params, json=json_body, headers=headers
            ) as response:
                status = response.status
                logger.debug(
                    "Gateway response",
                    extra={"method": method, "url": str(target), "status": status},
                )
                if status == _NO_CONTENT:
                    return None
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning(
                "Gateway unreachable", extra={"method": method, "url": str(target)}
            )
            raise RequestError(
                f"{method} {target} failed: {exc!r}", url=str(target)
            ) from exc

        if status >= 400:
            raise _status_error(method, target, status, raw.decode("utf-8", errors="replace"))
        return _decode_json(raw, target)

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        return await self.request("POST", url, json_body=json, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed and self._owns_session:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _status_error(method: str, url: URL, status: int, body: str) -> RequestError:
    logger.warning(
        "Gateway rejected request",
        extra={"method": method, "url": str(url), "status": status},
    )
    message = f"{method} {url} returned HTTP {status}"
    if status == 401:
        return AuthenticationError(message, body=body, url=str(url))
    return RequestError(message, status_code=status, body=body, url=str(url))


def _decode_json(raw: bytes, url: URL) -> Any:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Gateway sent non-UTF-8 body", extra={"url": str(url)})
        raise DecodingError(f"Response from {url} is not valid UTF-8", body=raw) from exc
    if not text.strip():
        raise DecodingError(f"Empty response body from {url}", body=text)
    try:
        payload = json.loads(text)
    except ValueError as exc:
        logger.warning("Gateway sent non-JSON body", extra={"url": str(url)})
        raise DecodingError(f"Response from {url} is not valid JSON", body=text) from exc
    # Only a 204 stands for "no payload"
    if payload is None:
        raise DecodingError(f"Response from {url} is JSON null", body=text)
    return payload
