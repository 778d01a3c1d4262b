"""Keepalive (tickle) endpoint definition and adapter.

Callable repeatedly; each call is independent of the previous one.
"""

from __future__ import annotations

from typing import Any

from ibportal.models import TickleResponse
from ibportal.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "tickle"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {}


SPEC = RestEndpointSpec(
    id="tickle",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ModelAdapter):
    """Adapter for parsing the keepalive acknowledgement."""

    model = TickleResponse
