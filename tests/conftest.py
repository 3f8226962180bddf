"""
Shared test configuration and fixtures.
"""

from unittest.mock import AsyncMock

import httpx
import pytest


@pytest.fixture
def mock_client():
    """httpx.AsyncClient stand-in; set ``get.return_value`` or ``get.side_effect``."""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def make_response():
    """Build real httpx responses so raise_for_status() and json() behave as in production."""
    def _make(status_code: int = 200, json=None, text: str | None = None,
              url: str = "https://upstream.test/resource") -> httpx.Response:
        request = httpx.Request("GET", url)
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, text=text or "", request=request)
    return _make
