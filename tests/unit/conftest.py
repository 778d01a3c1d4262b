"""Shared fixtures for unit tests.

The aiohttp session is replaced by a MagicMock whose ``request()`` returns
async-context-manager responses, so no test opens a socket.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


def _make_response(
    status: int = 200, payload: Any = None, text: str | bytes | None = None
) -> MagicMock:
    """Build a mock aiohttp response usable with ``async with``.

    ``text`` may be raw bytes to simulate bodies that are not valid UTF-8.
    """
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    raw = text if isinstance(text, bytes) else text.encode("utf-8")
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=raw)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


@pytest.fixture
def mock_session():
    """Open mock aiohttp session with no responses queued."""
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.request = MagicMock()
    return session


@pytest.fixture
def auth_status_payload() -> dict[str, Any]:
    return {
        "authenticated": True,
        "competing": False,
        "connected": True,
        "message": "",
        "MAC": "98:F2:B3:23:BF:A0",
        "serverInfo": {"serverName": "JifN19053", "serverVersion": "Build 10.25.0p"},
        "hardwareInfo": "f4d1a2b3|98:F2:B3:23:BF:A0",
        "fail": "",
    }


@pytest.fixture
def tickle_payload(auth_status_payload) -> dict[str, Any]:
    return {
        "session": "bb665d0f55b6289d70bc3c6bd4a1c2f7",
        "ssoExpires": 460311,
        "collission": False,
        "userId": 123456789,
        "hmds": {"error": "no bridge"},
        "iserver": {"authStatus": auth_status_payload},
    }


@pytest.fixture
def sso_payload() -> dict[str, Any]:
    return {
        "USER_ID": 123456789,
        "USER_NAME": "user1234",
        "RESULT": True,
        "AUTH_TIME": 1702580846836,
        "SF_ENABLED": False,
        "IS_FREE_TRIAL": False,
        "CREDENTIAL": "user1234",
        "IP": "12.345.678.901",
        "EXPIRES": 415890,
        "QUALIFIED_FOR_MOBILE_AUTH": None,
        "LANDING_APP": "UNIVERSAL",
        "IS_MASTER": False,
        "LAST_ACCESSED": 1702581069652,
        "LOGIN_TYPE": 2,
        "PAPER_USER_NAME": "user1234",
        "FEATURES": {
            "env": "PROD",
            "wlms": True,
            "realtime": True,
            "bond": True,
            "optionChains": True,
            "calendar": True,
            "newMf": True,
        },
        "REGION": "NJ",
    }


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses."""
    return _make_response
