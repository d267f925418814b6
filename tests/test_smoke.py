from __future__ import annotations

from astrolink.config import settings
from astrolink.constants import DataKind


def test_health_check(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["version"] == "1.0.0"


def test_readiness_lists_every_kind(client):
    response = client.get("/readyz")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ready"
    assert payload["data_kinds"] == sorted(kind.value for kind in DataKind)
    assert payload["demo_key"] is (settings.nasa_api_key == "DEMO_KEY")


def test_metrics_open_without_password(client, monkeypatch):
    monkeypatch.setattr(settings, "metrics_password", None)
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "astrolink_request_total" in response.text


def test_metrics_require_credentials(client, monkeypatch):
    monkeypatch.setattr(settings, "metrics_password", "s3cret")

    assert client.get("/metrics").status_code == 401
    assert client.get("/metrics", auth=("prometheus", "wrong")).status_code == 401
    assert client.get("/metrics", auth=("prometheus", "s3cret")).status_code == 200


def test_unauthorized_uses_error_envelope(client, monkeypatch):
    monkeypatch.setattr(settings, "metrics_password", "s3cret")
    response = client.get("/metrics")
    assert response.json() == {"error": "Not authenticated"}
    assert response.headers["WWW-Authenticate"] == "Basic"
