"""Unit tests for session models.

Tests cover wire-name mapping, required fields and immutability.
"""

import pytest
from pydantic import ValidationError

from ibportal.core import LoginType
from ibportal.models import (
    AuthStatus,
    HmdsInitResponse,
    InitSessionRequest,
    InitSessionResponse,
    LogoutResponse,
    SsoValidateResponse,
    TickleResponse,
)


class TestAuthStatus:
    """Tests for AuthStatus."""

    def test_unauthenticated_status(self):
        """Fresh gateway: not authenticated, no server info."""
        status = AuthStatus.model_validate(
            {
                "authenticated": False,
                "connected": False,
                "competing": False,
                "message": "",
                "MAC": "00:11:22:33:44:55",
            }
        )
        assert status.authenticated is False
        assert status.mac == "00:11:22:33:44:55"
        assert status.server_info is None
        assert status.fail is None

    def test_server_info_mapped(self, auth_status_payload):
        status = AuthStatus.model_validate(auth_status_payload)
        assert status.server_info is not None
        assert status.server_info.server_name == "JifN19053"
        assert status.server_info.server_version == "Build 10.25.0p"
        assert status.hardware_info == "f4d1a2b3|98:F2:B3:23:BF:A0"

    def test_missing_mac_rejected(self, auth_status_payload):
        del auth_status_payload["MAC"]
        with pytest.raises(ValidationError):
            AuthStatus.model_validate(auth_status_payload)

    @pytest.mark.parametrize(
        "field,value", [("authenticated", "yes"), ("connected", 1), ("MAC", None)]
    )
    def test_wrong_wire_type_rejected(self, auth_status_payload, field, value):
        """Values of the wrong JSON type are not coerced."""
        auth_status_payload[field] = value
        with pytest.raises(ValidationError):
            AuthStatus.model_validate(auth_status_payload)

    def test_tickle_expiry_must_be_integer(self, tickle_payload):
        tickle_payload["ssoExpires"] = "460311"
        with pytest.raises(ValidationError):
            TickleResponse.model_validate(tickle_payload)

    def test_frozen(self, auth_status_payload):
        status = AuthStatus.model_validate(auth_status_payload)
        with pytest.raises(ValidationError):
            status.authenticated = False

    def test_unknown_fields_ignored(self, auth_status_payload):
        auth_status_payload["newGatewayField"] = 1
        status = AuthStatus.model_validate(auth_status_payload)
        assert not hasattr(status, "newGatewayField")


class TestInitSession:
    """Tests for InitSessionRequest and InitSessionResponse."""

    def test_publish_always_true(self):
        request = InitSessionRequest(compete=True)
        assert request.to_wire() == {"publish": True, "compete": True}

    def test_publish_not_caller_controllable(self):
        """A caller-supplied publish flag is ignored."""
        request = InitSessionRequest(publish=False, compete=False)
        assert request.publish is True
        assert request.to_wire() == {"publish": True, "compete": False}

    def test_model_dump_includes_publish(self):
        assert InitSessionRequest(compete=True).model_dump() == {"compete": True, "publish": True}

    def test_response_is_auth_status_subset(self, auth_status_payload):
        """Init response decodes from an AuthStatus-shaped body."""
        response = InitSessionResponse.model_validate(auth_status_payload)
        assert response.authenticated is True
        assert response.server_info is not None
        assert not hasattr(response, "fail")


class TestTickleResponse:
    """Tests for TickleResponse."""

    def test_wire_names(self, tickle_payload):
        tickle = TickleResponse.model_validate(tickle_payload)
        assert tickle.session == "bb665d0f55b6289d70bc3c6bd4a1c2f7"
        assert tickle.sso_expires == 460311
        assert tickle.collision is False
        assert tickle.user_id == 123456789
        assert tickle.hmds is not None and tickle.hmds.error == "no bridge"
        assert tickle.authenticated is True

    def test_optional_sections_absent(self, tickle_payload):
        del tickle_payload["hmds"]
        del tickle_payload["iserver"]
        tickle = TickleResponse.model_validate(tickle_payload)
        assert tickle.hmds is None
        assert tickle.iserver is None
        assert tickle.authenticated is None

    def test_is_expiring(self, tickle_payload):
        tickle_payload["ssoExpires"] = 120_000
        tickle = TickleResponse.model_validate(tickle_payload)
        assert tickle.is_expiring()
        assert not tickle.is_expiring(threshold_ms=60_000)

    def test_missing_session_rejected(self, tickle_payload):
        del tickle_payload["session"]
        with pytest.raises(ValidationError):
            TickleResponse.model_validate(tickle_payload)


class TestSsoValidateResponse:
    """Tests for the UPPER_SNAKE_CASE SSO payload."""

    def test_wire_names(self, sso_payload):
        sso = SsoValidateResponse.model_validate(sso_payload)
        assert sso.user_id == 123456789
        assert sso.user_name == "user1234"
        assert sso.result is True
        assert sso.auth_time == 1702580846836
        assert sso.last_accessed == 1702581069652
        assert sso.is_master is False
        assert sso.region == "NJ"

    def test_features(self, sso_payload):
        sso = SsoValidateResponse.model_validate(sso_payload)
        assert sso.features is not None
        assert sso.features.option_chains is True
        assert sso.features.new_mf is True
        assert sso.features.env == "PROD"

    def test_login_kind(self, sso_payload):
        sso = SsoValidateResponse.model_validate(sso_payload)
        assert sso.login_kind is LoginType.PAPER
        assert sso.is_paper

    def test_live_login(self, sso_payload):
        sso_payload["LOGIN_TYPE"] = 1
        sso = SsoValidateResponse.model_validate(sso_payload)
        assert sso.login_kind is LoginType.LIVE
        assert not sso.is_paper

    def test_invalid_ticket_is_regular_value(self, sso_payload):
        """result=False decodes normally."""
        sso_payload["RESULT"] = False
        assert SsoValidateResponse.model_validate(sso_payload).result is False

    def test_optional_fields(self, sso_payload):
        for key in ("FEATURES", "REGION", "PAPER_USER_NAME", "QUALIFIED_FOR_MOBILE_AUTH"):
            del sso_payload[key]
        sso = SsoValidateResponse.model_validate(sso_payload)
        assert sso.features is None
        assert sso.region is None

    def test_camel_case_keys_rejected(self, sso_payload):
        """Only UPPER_SNAKE_CASE keys satisfy required fields."""
        sso_payload["userId"] = sso_payload.pop("USER_ID")
        with pytest.raises(ValidationError):
            SsoValidateResponse.model_validate(sso_payload)


def test_hmds_and_logout():
    assert HmdsInitResponse.model_validate({"authenticated": True}).authenticated is True
    assert LogoutResponse.model_validate({"status": True}).status is True
    with pytest.raises(ValidationError):
        LogoutResponse.model_validate({})
