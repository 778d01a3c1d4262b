"""REST transport: path-oriented facade over HTTPClient."""

from __future__ import annotations

from typing import Any

import aiohttp
from yarl import URL

from ...config import DEFAULT_TIMEOUT
from .http_client import HTTPClient


class RESTTransport:
    """Issues requests relative to the gateway API root."""

    def __init__(
        self,
        base_url: str | URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, session=session)

    @property
    def base_url(self) -> URL | None:
        return self._http.base_url

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json_body, headers=headers)

    async def close(self) -> None:
        await self._http.close()
