"""Integration tests against a locally running, logged-in gateway."""

import os

import pytest

from ibportal import AuthStatus, GatewayClient, TickleResponse

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_IBPORTAL_GATEWAY_TESTS") != "1",
    reason="Requires a running gateway. Set RUN_IBPORTAL_GATEWAY_TESTS=1 to run",
)


@pytest.mark.asyncio
async def test_status_and_tickle(gateway_url):
    async with GatewayClient(gateway_url) as client:
        status = await client.auth_status()
        assert isinstance(status, AuthStatus)

        tickle = await client.tickle()
        assert isinstance(tickle, TickleResponse)
        assert tickle.sso_expires >= 0
