"""Authentication status endpoint definition and adapter.

Safe to call before any session exists.
"""

from __future__ import annotations

from typing import Any

from ibportal.models import AuthStatus
from ibportal.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "iserver/auth/status"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {}


SPEC = RestEndpointSpec(
    id="auth_status",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ModelAdapter):
    """Adapter for parsing the status response into AuthStatus."""

    model = AuthStatus
