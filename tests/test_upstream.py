"""Tests for astrolink/services/upstream.py: fetch helpers and error mapping."""

from __future__ import annotations

import httpx
import pytest

from astrolink.constants import DEFAULT_TIMEOUT
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamHTTPError,
    UpstreamTransportError,
    fetch_json,
    fetch_text,
)


class TestRequestSpec:
    def test_defaults(self):
        spec = RequestSpec(url="https://api.nasa.gov/planetary/apod")
        assert spec.params == {}
        assert spec.headers == {}
        assert spec.timeout == DEFAULT_TIMEOUT

    def test_host(self):
        spec = RequestSpec(url="https://ssd-api.jpl.nasa.gov/sbdb.api")
        assert spec.host == "ssd-api.jpl.nasa.gov"


class TestFetchJson:
    @pytest.mark.asyncio
    async def test_returns_decoded_body(self, upstream, make_response):
        upstream.get.side_effect = [make_response(json={"title": "M33"})]
        spec = RequestSpec(url="https://api.nasa.gov/x", params={"api_key": "k"})

        result = await fetch_json(spec)

        assert result == {"title": "M33"}
        upstream.get.assert_awaited_once_with(
            "https://api.nasa.gov/x", params={"api_key": "k"}
        )

    @pytest.mark.asyncio
    async def test_http_status_maps_to_http_error(self, upstream, make_response):
        upstream.get.side_effect = [
            make_response(403, json={"error": {"code": "API_KEY_INVALID"}})
        ]

        with pytest.raises(UpstreamHTTPError) as excinfo:
            await fetch_json(RequestSpec(url="https://api.nasa.gov/x"))

        assert excinfo.value.status_code == 403
        assert excinfo.value.details == {"error": {"code": "API_KEY_INVALID"}}

    @pytest.mark.asyncio
    async def test_empty_error_body_falls_back_to_message(
        self, upstream, make_response
    ):
        upstream.get.side_effect = [make_response(502, text="")]

        with pytest.raises(UpstreamHTTPError) as excinfo:
            await fetch_json(RequestSpec(url="https://api.nasa.gov/x"))

        assert excinfo.value.details == "Upstream returned HTTP 502"

    @pytest.mark.asyncio
    async def test_timeout_maps_to_transport_error(self, upstream):
        upstream.get.side_effect = httpx.ReadTimeout("read timed out")

        with pytest.raises(UpstreamTransportError) as excinfo:
            await fetch_json(RequestSpec(url="https://api.nasa.gov/x", timeout=10.0))

        assert excinfo.value.message == "timeout of 10000ms exceeded"

    @pytest.mark.asyncio
    async def test_connect_error_maps_to_transport_error(self, upstream, unreachable):
        upstream.get.side_effect = unreachable

        with pytest.raises(UpstreamTransportError) as excinfo:
            await fetch_json(RequestSpec(url="https://api.nasa.gov/x"))

        assert "connection refused" in excinfo.value.message

    @pytest.mark.asyncio
    async def test_invalid_json_is_transport_error(self, upstream, make_response):
        upstream.get.side_effect = [make_response(text="<html>oops</html>")]

        with pytest.raises(UpstreamTransportError):
            await fetch_json(RequestSpec(url="https://api.nasa.gov/x"))


class TestFetchText:
    @pytest.mark.asyncio
    async def test_returns_raw_text(self, upstream, make_response):
        upstream.get.side_effect = [make_response(text="<Capabilities/>")]

        result = await fetch_text(RequestSpec(url="https://gibs.earthdata.nasa.gov/"))

        assert result == "<Capabilities/>"


class TestUpstreamAdapter:
    def test_default_recover_hides_details(self):
        class Plain(UpstreamAdapter):
            failure_message = "Failed to fetch things"

        outcome = Plain().recover(None, UpstreamTransportError("u", "boom"))

        assert outcome.status_code == 500
        assert outcome.body == {"error": "Failed to fetch things"}

    def test_recover_with_details(self):
        class Detailed(UpstreamAdapter):
            failure_message = "Failed to fetch things"
            include_details = True

        outcome = Detailed().recover(None, UpstreamTransportError("u", "boom"))

        assert outcome.body == {"error": "Failed to fetch things", "details": "boom"}

    @pytest.mark.asyncio
    async def test_fetch_is_abstract(self):
        with pytest.raises(NotImplementedError):
            await UpstreamAdapter().fetch(None)
