"""Historical market data (HMDS) initialization endpoint.

HMDS has its own lifecycle: a failure here does not invalidate the main
brokerage session.
"""

from __future__ import annotations

from typing import Any

from ibportal.models import HmdsInitResponse
from ibportal.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "hmds/auth/init"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {}


SPEC = RestEndpointSpec(
    id="init_hmds",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ModelAdapter):
    """Adapter for parsing the HMDS init response into HmdsInitResponse."""

    model = HmdsInitResponse
