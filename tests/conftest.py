"""
Pytest configuration and shared fixtures for the restfacade test suite.
"""

from typing import List, Tuple

import pytest

from restfacade import Request


# ============================================================================
# Function-level fixtures
# ============================================================================

@pytest.fixture
def host_headers() -> List[Tuple[str, str]]:
    """Provide the transport headers every sample request carries."""
    return [("Host", "testing-host")]


@pytest.fixture
def get_request(host_headers: List[Tuple[str, str]]) -> Request:
    """Provide a GET request with a three-parameter query string."""
    return Request("GET", "/foo?param1=bar&param2=blah&yada", host_headers)


@pytest.fixture
def openid_form() -> List[Tuple[str, str]]:
    """Provide form fields whose values need heavy percent-encoding."""
    return [
        (
            "openid.return_to",
            "http://login.example.com/google-service/google/sso/callback/google.JSON"
            "?successUrl=http%3A%2F%2Fdashboard.example.com%2Ftransfer.html"
            "&failureUrl=http%3A%2F%2Flogin.example.com&domain=GOOGLE_NON_MARKET_PLACE_DOMAIN",
        ),
        (
            "openid.identity",
            "https://www.google.com/accounts/o8/id?id=AItOawkHDpeMEfe_xM14z_ge7UATYOSg_QlPeDg",
        ),
        (
            "openid.claimed_id",
            "https://www.google.com/accounts/o8/id?id=AItOawkHDpeMEfe_xM14z_ge7UATYOSg_QlPeDg",
        ),
    ]


# ============================================================================
# Hooks
# ============================================================================

def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test names."""
    for item in items:
        item.add_marker(pytest.mark.unit)
        if "error" in item.name or "invalid" in item.name or "missing" in item.name:
            item.add_marker(pytest.mark.error_handling)
