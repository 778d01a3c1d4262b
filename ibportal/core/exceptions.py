"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(GatewayError):
    """Gateway address or port cannot be used to build a client."""

    pass


class RequestError(GatewayError):
    """Request never completed or the gateway rejected it.

    A transport failure (connection refused, TLS handshake, timeout) has no
    ``status_code``; a rejection carries the HTTP status and the raw body text.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url

    @property
    def is_transport_error(self) -> bool:
        """True when the gateway could not be reached at all."""
        return self.status_code is None


class AuthenticationError(RequestError):
    """Gateway answered 401: the brokerage session is not authenticated."""

    def __init__(self, message: str, body: str | None = None, url: str | None = None) -> None:
        super().__init__(message, status_code=401, body=body, url=url)


class DecodingError(GatewayError):
    """Response body does not match the expected shape.

    Usually means the gateway speaks a different API version than this client.
    """

    def __init__(
        self,
        message: str,
        body: Any = None,
        model: str | None = None,
    ) -> None:
        super().__init__(message)
        self.body = body
        self.model = model
