"""Shared fixtures: an app client and a patched upstream transport."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from astrolink.main import app


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_response():
    """Build a real ``httpx.Response`` bound to a GET request."""

    def _make(
        status_code: int = 200,
        *,
        json: Any = None,
        text: str | None = None,
        url: str = "https://api.nasa.gov/test",
    ) -> httpx.Response:
        request = httpx.Request("GET", url)
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        return httpx.Response(status_code, json=json, request=request)

    return _make


@pytest.fixture
def upstream():
    """Patch ``httpx.AsyncClient`` and hand back the mock client.

    Tests set ``upstream.get.side_effect`` to the responses (or exceptions)
    each successive GET should produce.
    """
    with patch("astrolink.services.upstream.httpx.AsyncClient") as MockClient:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock()
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        MockClient.return_value = mock_client
        yield mock_client


@pytest.fixture
def unreachable():
    """Every upstream GET fails with a connection error."""
    return httpx.ConnectError("connection refused")
