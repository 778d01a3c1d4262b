"""Logout endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ibportal.models import LogoutResponse
from ibportal.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "logout"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {}


SPEC = RestEndpointSpec(
    id="logout",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ModelAdapter):
    """Adapter for parsing the logout result into LogoutResponse."""

    model = LogoutResponse
