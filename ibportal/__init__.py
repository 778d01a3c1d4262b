"""ibportal - typed async client for the local brokerage gateway session API."""

from .client import GatewayClient
from .config import DEFAULT_BASE_URL
from .core import (
    AuthenticationError,
    ConfigurationError,
    DecodingError,
    GatewayError,
    LoginType,
    RequestError,
    SessionAPI,
)
from .models import (
    AuthStatus,
    Features,
    HmdsInfo,
    HmdsInitResponse,
    InitSessionRequest,
    InitSessionResponse,
    IServerInfo,
    LogoutResponse,
    ServerInfo,
    SsoValidateResponse,
    TickleResponse,
)

__version__ = "0.1.0"

__all__ = [
    "GatewayClient",
    "SessionAPI",
    "DEFAULT_BASE_URL",
    # Exceptions
    "GatewayError",
    "ConfigurationError",
    "RequestError",
    "AuthenticationError",
    "DecodingError",
    # Models
    "AuthStatus",
    "ServerInfo",
    "InitSessionRequest",
    "InitSessionResponse",
    "HmdsInitResponse",
    "SsoValidateResponse",
    "Features",
    "TickleResponse",
    "HmdsInfo",
    "IServerInfo",
    "LogoutResponse",
    "LoginType",
]
