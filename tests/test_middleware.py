"""Tests for astrolink/middleware/security.py: ApiSecurityHeadersMiddleware."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.responses import HTMLResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from astrolink.middleware.security import ApiSecurityHeadersMiddleware


def _app(**middleware_kwargs) -> Starlette:
    def data(request):
        return PlainTextResponse("ok")

    def docs(request):
        return HTMLResponse("<html></html>")

    app = Starlette(routes=[Route("/", data), Route("/docs", docs)])
    app.add_middleware(ApiSecurityHeadersMiddleware, **middleware_kwargs)
    return app


class TestSecurityMiddleware:
    """Verify security headers are set on proxy responses."""

    def test_csp_locked_down(self, client):
        resp = client.get("/healthz")
        csp = resp.headers.get("Content-Security-Policy", "")
        assert "default-src 'none'" in csp
        assert "frame-ancestors 'none'" in csp

    def test_xframe_options_deny(self, client):
        resp = client.get("/healthz")
        assert resp.headers.get("X-Frame-Options") == "DENY"

    def test_content_type_nosniff(self, client):
        resp = client.get("/healthz")
        assert resp.headers.get("X-Content-Type-Options") == "nosniff"

    def test_referrer_policy(self, client):
        resp = client.get("/healthz")
        assert resp.headers.get("Referrer-Policy") == "no-referrer"

    def test_dashboard_may_read_data(self, client):
        resp = client.get("/healthz")
        assert resp.headers.get("Cross-Origin-Resource-Policy") == "cross-origin"

    def test_request_id_echoed(self, client):
        resp = client.get("/healthz")
        assert resp.headers.get("X-Request-ID")


class TestSecurityMiddlewareOptions:
    def test_html_pages_skip_csp(self):
        resp = TestClient(_app()).get("/docs")
        assert "Content-Security-Policy" not in resp.headers
        assert resp.headers.get("X-Frame-Options") == "DENY"

    def test_hsts_when_enabled(self):
        resp = TestClient(_app(enable_hsts_on_http=True)).get("/")
        assert resp.headers["Strict-Transport-Security"].startswith("max-age=")

    def test_hsts_on_skip_host(self):
        app = _app(skip_hsts_hosts={"testserver"}, enable_hsts_on_http=True)
        resp = TestClient(app).get("/")
        assert "Strict-Transport-Security" not in resp.headers

    def test_hsts_behind_tls_proxy(self):
        resp = TestClient(_app()).get("/", headers={"X-Forwarded-Proto": "https"})
        assert "Strict-Transport-Security" in resp.headers

    def test_no_hsts_on_plain_http(self):
        resp = TestClient(_app()).get("/")
        assert "Strict-Transport-Security" not in resp.headers

    def test_custom_csp(self):
        resp = TestClient(_app(csp_directives=["default-src 'self'"])).get("/")
        assert resp.headers["Content-Security-Policy"] == "default-src 'self'"
