"""Gateway REST endpoint registry.

This module discovers and exports all endpoint specifications and adapters
from the modular endpoint structure.
"""

from __future__ import annotations

from ibportal.runtime.rest import ResponseAdapter, RestEndpointSpec

from .session.auth_status import SPEC as AuthStatusSpec  # noqa: N811
from .session.auth_status import Adapter as AuthStatusAdapter
from .session.hmds_init import SPEC as HmdsInitSpec  # noqa: N811
from .session.hmds_init import Adapter as HmdsInitAdapter
from .session.init_session import SPEC as InitSessionSpec  # noqa: N811
from .session.init_session import Adapter as InitSessionAdapter
from .session.logout import SPEC as LogoutSpec  # noqa: N811
from .session.logout import Adapter as LogoutAdapter
from .session.sso_validate import SPEC as SsoValidateSpec  # noqa: N811
from .session.sso_validate import Adapter as SsoValidateAdapter
from .session.tickle import SPEC as TickleSpec  # noqa: N811
from .session.tickle import Adapter as TickleAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "auth_status": (AuthStatusSpec, AuthStatusAdapter),
    "init_session": (InitSessionSpec, InitSessionAdapter),
    "init_hmds": (HmdsInitSpec, HmdsInitAdapter),
    "validate_sso": (SsoValidateSpec, SsoValidateAdapter),
    "tickle": (TickleSpec, TickleAdapter),
    "logout": (LogoutSpec, LogoutAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "tickle", "auth_status")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "tickle", "auth_status")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """Return all registered endpoint IDs."""
    return list(_ENDPOINT_REGISTRY)
