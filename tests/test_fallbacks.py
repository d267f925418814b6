"""Tests for the static fallback payloads."""

from __future__ import annotations

from astrolink.services.fallbacks import (
    ads_demo,
    apod_fallback,
    eonet_fallback,
    exoplanet_fallback,
    neo_fallback,
    techport_fallback,
)
from astrolink.utils.dates import utc_today


class TestApodFallback:
    def test_shape(self):
        body = apod_fallback()
        assert body["media_type"] == "image"
        assert body["date"] == utc_today()
        assert body["title"].startswith("Sample:")
        assert {"url", "hdurl", "explanation", "service_version"} <= body.keys()


class TestNeoFallback:
    def test_keyed_under_start_date(self):
        body = neo_fallback("2024-03-01")
        assert list(body["near_earth_objects"]) == ["2024-03-01"]
        neo = body["near_earth_objects"]["2024-03-01"][0]
        assert neo["close_approach_data"][0]["close_approach_date"] == "2024-03-01"
        assert body["element_count"] == 1
        assert body["links"] == {"self": "mock-data"}

    def test_calls_do_not_share_state(self):
        first = neo_fallback("2024-03-01")
        first["near_earth_objects"]["2024-03-01"][0]["name"] = "mutated"
        second = neo_fallback("2024-03-01")
        assert second["near_earth_objects"]["2024-03-01"][0]["name"] == "(2020 SO)"


class TestEonetFallback:
    def test_events_carry_current_timestamp(self):
        body = eonet_fallback()
        assert len(body["events"]) == 2
        for event in body["events"]:
            assert event["geometry"][0]["date"].endswith("Z")
            assert event["geometry"][0]["date"].startswith(utc_today())


class TestTechportFallback:
    def test_count(self):
        assert len(techport_fallback()["projects"]) == 2
        assert len(techport_fallback(count=1)["projects"]) == 1


class TestExoplanetFallback:
    def test_records(self):
        planets = exoplanet_fallback()
        assert len(planets) == 3
        assert all("pl_name" in planet for planet in planets)


class TestAdsDemo:
    def test_echoes_query(self):
        body = ads_demo("dark matter")
        assert body["query"] == "dark matter"
        assert body["message"] == "ADS API requires separate authentication"
        assert body["mockResults"]
