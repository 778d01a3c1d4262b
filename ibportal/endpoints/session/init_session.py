"""Brokerage session initialization endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ibportal.models import InitSessionRequest, InitSessionResponse
from ibportal.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "iserver/auth/ssodh/init"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the init body.

    Args:
        params: Request parameters; ``compete`` decides whether this client
            takes the session over from another holder

    Returns:
        ``{"publish": True, "compete": <bool>}``, ``publish`` is fixed

    """
    return InitSessionRequest(compete=bool(params["compete"])).to_wire()


SPEC = RestEndpointSpec(
    id="init_session",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ModelAdapter):
    """Adapter for parsing the init response into InitSessionResponse."""

    model = InitSessionResponse
