"""Data models for gateway session calls.

Architecture:
    This module exports the Pydantic v2 models for every session endpoint.
    All models are immutable (frozen=True); each instance is built from a
    single HTTP response and never updated afterwards.

Design Decisions:
    - Wire names via aliases: the gateway mixes camelCase, UPPER_SNAKE_CASE
      and a bare "MAC" key; attributes are always snake_case
    - populate_by_name: models can be built from attribute names in tests
      and application code
    - Unknown fields ignored: newer gateways add keys freely
    - Strict types: a wrongly typed value (e.g. "yes" for a flag) is a
      protocol mismatch, not something to coerce

Model Categories:
    - Auth: AuthStatus, ServerInfo, InitSessionRequest, InitSessionResponse
    - Subsystems: HmdsInitResponse
    - SSO: SsoValidateResponse, Features
    - Keepalive: TickleResponse, HmdsInfo, IServerInfo
    - Teardown: LogoutResponse
"""

from .auth_status import AuthStatus, InitSessionRequest, InitSessionResponse, ServerInfo
from .hmds import HmdsInitResponse
from .logout import LogoutResponse
from .sso import Features, SsoValidateResponse
from .tickle import HmdsInfo, IServerInfo, TickleResponse

__all__ = [
    "AuthStatus",
    "ServerInfo",
    "InitSessionRequest",
    "InitSessionResponse",
    "HmdsInitResponse",
    "LogoutResponse",
    "Features",
    "SsoValidateResponse",
    "HmdsInfo",
    "IServerInfo",
    "TickleResponse",
]
