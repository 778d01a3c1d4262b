"""Session capability protocol.

Architecture:
    ``SessionAPI`` names the six session-control calls the gateway exposes.
    ``GatewayClient`` implements it once; application code (keepalive loops,
    login orchestration) should depend on the protocol so a test double can
    stand in for the real client.

Design Decisions:
    - Protocol over inheritance: doubles need no base class
    - No state machine: the gateway is the authority on session state, so
      every call is relayed as-is regardless of earlier calls
    - ``None`` results: the gateway may answer 204 No Content, which is a
      success without payload

See Also:
    - GatewayClient: Concrete implementation over aiohttp
    - ibportal.endpoints: Endpoint specs and adapters behind each call
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import (
        AuthStatus,
        HmdsInitResponse,
        InitSessionResponse,
        LogoutResponse,
        SsoValidateResponse,
        TickleResponse,
    )


class SessionAPI(Protocol):
    """Protocol for the gateway session lifecycle calls."""

    async def auth_status(self) -> AuthStatus | None:
        """Report the current authentication state.

        Safe before any session exists; ``authenticated=False`` is a normal
        answer, not an error.
        """
        ...

    async def init_session(self, compete: bool) -> InitSessionResponse | None:
        """Start or claim the brokerage session.

        Args:
            compete: Whether to take the session over from another holder

        Raises:
            RequestError: Gateway unreachable or call rejected
            DecodingError: Response shape not recognised
        """
        ...

    async def init_hmds(self) -> HmdsInitResponse | None:
        """Enable the historical market data subsystem.

        Failure here leaves the main session untouched.
        """
        ...

    async def validate_sso(self) -> SsoValidateResponse | None:
        """Validate the single sign-on ticket."""
        ...

    async def tickle(self) -> TickleResponse | None:
        """Keep the session alive and report remaining SSO validity."""
        ...

    async def logout(self) -> LogoutResponse | None:
        """End the session. Further calls need a new ``init_session``."""
        ...
