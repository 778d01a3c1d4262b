"""Gateway connection constants.

This module centralizes the default address, API prefix and client identity
used by the transport so the client itself can stay small and focused.
"""

from __future__ import annotations

import ipaddress
import re

from yarl import URL

from ibportal.core import ConfigurationError

# The gateway listens on loopback with a self-signed certificate.
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5000
API_PREFIX = "/v1/api/"
DEFAULT_BASE_URL = f"https://{DEFAULT_HOST}:{DEFAULT_PORT}{API_PREFIX}"

USER_AGENT = "ibportal/0.1.0"

# Seconds, whole request including body read
DEFAULT_TIMEOUT = 30.0

# Remaining SSO validity (ms) below which a tickle counts as near expiry
SSO_EXPIRY_WARNING_MS = 300_000

_ALLOWED_SCHEMES = ("http", "https")

# RFC 1123 host name: dot-separated labels of letters, digits and inner hyphens
_HOSTNAME_RE = re.compile(
    r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*\.?$"
)


def normalize_base_url(base_url: str) -> URL:
    """Validate a gateway base address and make it joinable.

    Args:
        base_url: Absolute http(s) URL of the gateway API root

    Returns:
        Parsed URL whose path ends with ``/``

    Raises:
        ConfigurationError: If the address is not an absolute http(s) URL with a
            valid host name or IP literal, or carries a query or fragment

    Examples:
        >>> str(normalize_base_url("https://localhost:5000/v1/api"))
        'https://localhost:5000/v1/api/'
    """
    if not isinstance(base_url, str):
        raise ConfigurationError(
            f"Gateway base URL must be a string, got {type(base_url).__name__}"
        )
    try:
        url = URL(base_url)
        # Port is parsed lazily by yarl
        url.port  # noqa: B018
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid gateway base URL: {base_url!r}") from exc

    if not url.is_absolute() or url.scheme not in _ALLOWED_SCHEMES or not url.host:
        raise ConfigurationError(f"Invalid gateway base URL: {base_url!r}")
    if not _is_valid_host(url.raw_host or ""):
        raise ConfigurationError(f"Invalid gateway host in base URL: {base_url!r}")
    if url.query_string or url.fragment:
        raise ConfigurationError(
            f"Gateway base URL must not carry a query or fragment: {base_url!r}"
        )

    if not url.path.endswith("/"):
        url = url.with_path(url.path + "/")
    return url


def build_base_url(port: int, host: str = DEFAULT_HOST) -> str:
    """Build the gateway API root for a local port.

    Examples:
        >>> build_base_url(5001)
        'https://localhost:5001/v1/api/'
    """
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise ConfigurationError(f"Invalid gateway port: {port!r}")
    return f"https://{host}:{port}{API_PREFIX}"


def _is_valid_host(host: str) -> bool:
    """Host name or IP literal (yarl strips the brackets around IPv6)."""
    if ":" in host:
        try:
            ipaddress.IPv6Address(host.split("%", 1)[0])
        except ValueError:
            return False
        return True
    return _HOSTNAME_RE.match(host) is not None
