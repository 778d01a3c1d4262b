"""SSO validation endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ibportal.models import SsoValidateResponse
from ibportal.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "sso/validate"


# GET without a body
SPEC = RestEndpointSpec(
    id="validate_sso",
    method="GET",
    build_path=build_path,
)


class Adapter(ModelAdapter):
    """Adapter for parsing the UPPER_SNAKE_CASE SSO payload."""

    model = SsoValidateResponse
