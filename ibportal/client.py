"""Gateway session client.

This client holds the gateway address and the shared transport, and
implements ``SessionAPI`` by running the registered session endpoints.

Architecture:
    Each call looks up its endpoint spec and adapter in the registry, then
    RestRunner executes the request over the shared RESTTransport. The
    transport owns the aiohttp session and its cookie jar; that cookie is
    how the gateway recognises the session between calls.

Design Decisions:
    - No retries, caching or reordering: every outcome is relayed as-is
    - Lazy session: constructing a client performs no network I/O
    - One client per process: concurrent callers on one event loop may
      share it (e.g. a keepalive loop next to application calls)
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_HOST,
    DEFAULT_TIMEOUT,
    build_base_url,
    normalize_base_url,
)
from .endpoints import get_endpoint_adapter, get_endpoint_spec
from .models import (
    AuthStatus,
    HmdsInitResponse,
    InitSessionResponse,
    LogoutResponse,
    SsoValidateResponse,
    TickleResponse,
)
from .runtime.rest import RestRunner, RESTTransport

logger = logging.getLogger(__name__)


class GatewayClient:
    """Connection context for the gateway session API.

    Example:
        >>> async with GatewayClient() as client:  # doctest: +SKIP
        ...     status = await client.auth_status()
        ...     if not status.authenticated:
        ...         await client.init_session(compete=True)
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Gateway API root; defaults to ``https://localhost:5000/v1/api/``
            timeout: Total per-request timeout in seconds
            session: Optional caller-owned aiohttp session; it is not closed
                by this client and must carry its own TLS/cookie settings

        Raises:
            ConfigurationError: If ``base_url`` is not an absolute http(s) URL
        """
        self.base_url = normalize_base_url(DEFAULT_BASE_URL if base_url is None else base_url)
        self._transport = RESTTransport(base_url=self.base_url, timeout=timeout, session=session)
        self._runner = RestRunner(self._transport)

    @classmethod
    def from_port(
        cls, port: int, *, host: str = DEFAULT_HOST, timeout: float = DEFAULT_TIMEOUT
    ) -> GatewayClient:
        """Build a client for a gateway listening on a local port."""
        return cls(build_base_url(port, host=host), timeout=timeout)

    async def fetch(self, endpoint_id: str, params: dict[str, Any] | None = None) -> Any:
        """Run a registered gateway endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "tickle", "auth_status")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter, ``None`` on 204

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        logger.debug("Running endpoint", extra={"endpoint": endpoint_id})
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=dict(params or {}))

    async def auth_status(self) -> AuthStatus | None:
        return await self.fetch("auth_status")

    async def init_session(self, compete: bool) -> InitSessionResponse | None:
        return await self.fetch("init_session", {"compete": compete})

    async def init_hmds(self) -> HmdsInitResponse | None:
        return await self.fetch("init_hmds")

    async def validate_sso(self) -> SsoValidateResponse | None:
        return await self.fetch("validate_sso")

    async def tickle(self) -> TickleResponse | None:
        return await self.fetch("tickle")

    async def logout(self) -> LogoutResponse | None:
        return await self.fetch("logout")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> GatewayClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
