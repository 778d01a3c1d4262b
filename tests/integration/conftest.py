"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_IBPORTAL_GATEWAY_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_IBPORTAL_GATEWAY_TESTS") != "1",
    reason="Requires a running gateway. Set RUN_IBPORTAL_GATEWAY_TESTS=1 to run",
)


@pytest.fixture
def gateway_url() -> str:
    return os.environ.get("IBPORTAL_GATEWAY_URL", "https://localhost:5000/v1/api/")
