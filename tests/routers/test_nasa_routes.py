"""Tests for the /api proxy routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from astrolink.routers.nasa import OUTCOME_HEADER
from astrolink.utils.dates import utc_today


class TestSuccessfulResolution:
    def test_apod_passthrough(self, client: TestClient, upstream, make_response):
        upstream.get.side_effect = [make_response(json={"title": "Horsehead"})]

        response = client.get("/api/apod", params={"date": "2024-02-02"})

        assert response.status_code == 200
        assert response.json() == {"title": "Horsehead"}
        assert response.headers[OUTCOME_HEADER] == "success"

    def test_gibs_served_as_xml(self, client: TestClient, upstream, make_response):
        upstream.get.side_effect = [make_response(text="<Capabilities/>")]

        response = client.get("/api/gibs")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert response.text == "<Capabilities/>"

    def test_mars_substitution_is_signalled(
        self, client: TestClient, upstream, make_response
    ):
        upstream.get.side_effect = [
            make_response(json={"photos": []}),
            make_response(json={"photos": [{"id": 3}]}),
        ]

        response = client.get(
            "/api/mars-photos", params={"rover": "curiosity", "sol": "999999"}
        )

        assert response.status_code == 200
        assert response.json() == {"photos": [{"id": 3}]}
        assert response.headers[OUTCOME_HEADER] == "secondary_success"
        assert upstream.get.await_args_list[1].kwargs["params"]["sol"] == "2000"


class TestUnreachableUpstream:
    def test_apod_sample(self, client: TestClient, upstream, unreachable):
        upstream.get.side_effect = unreachable

        response = client.get("/api/apod")

        assert response.status_code == 200
        body = response.json()
        assert body["media_type"] == "image"
        assert body["date"] == utc_today()
        assert body["title"].startswith("Sample:")
        assert response.headers[OUTCOME_HEADER] == "fallback"

    @pytest.mark.parametrize(
        "path",
        ["/api/neo", "/api/eonet", "/api/techport", "/api/exoplanets", "/api/ads"],
    )
    def test_fallback_kinds(self, client: TestClient, upstream, unreachable, path):
        upstream.get.side_effect = unreachable

        response = client.get(path)

        assert response.status_code == 200
        assert "error" not in response.json()

    @pytest.mark.parametrize(
        "path",
        [
            "/api/mars-photos",
            "/api/donki",
            "/api/donki/notifications",
            "/api/epic",
            "/api/images",
            "/api/power",
            "/api/gibs",
            "/api/sbdb",
            "/api/osdr",
            "/api/earthdata",
        ],
    )
    def test_error_kinds(self, client: TestClient, upstream, unreachable, path):
        upstream.get.side_effect = unreachable

        response = client.get(path)

        assert response.status_code == 500
        assert isinstance(response.json()["error"], str)
        assert response.headers[OUTCOME_HEADER] == "error"


class TestValidation:
    def test_bad_integer_param(self, client: TestClient):
        response = client.get("/api/exoplanets", params={"limit": "many"})
        assert response.status_code == 422

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/not-a-kind")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
