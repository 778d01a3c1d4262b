"""Core components."""

from .enums import LoginType
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodingError,
    GatewayError,
    RequestError,
)
from .session import SessionAPI

__all__ = [
    "LoginType",
    "GatewayError",
    "ConfigurationError",
    "RequestError",
    "AuthenticationError",
    "DecodingError",
    "SessionAPI",
]
