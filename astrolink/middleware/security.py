from __future__ import annotations

from collections.abc import Callable
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# JSON and XML only; nothing served here should ever execute or be framed.
API_CSP_DIRECTIVES = [
    "default-src 'none'",
    "frame-ancestors 'none'",
    "base-uri 'none'",
]


def _is_secure_request(request: Request) -> bool:
    # Honor reverse proxy headers if present
    xf_proto = request.headers.get("x-forwarded-proto")
    if xf_proto:
        return "https" in xf_proto
    return request.url.scheme == "https"


class ApiSecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Sets response hardening headers for a data-only API.
    - HTTPS-aware HSTS
    - Locked-down CSP (no scripts, no framing)
    - Cross-origin resource policy that still lets the dashboard read data
    """

    def __init__(
        self,
        app,
        *,
        csp_directives: Iterable[str] | None = None,
        hsts: str = "max-age=63072000; includeSubDomains",
        referrer_policy: str = "no-referrer",
        resource_policy: str = "cross-origin",
        enable_hsts_on_http: bool = False,
        skip_hsts_hosts: set[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.csp_value = "; ".join(csp_directives or API_CSP_DIRECTIVES)
        self.hsts = hsts
        self.referrer_policy = referrer_policy
        self.resource_policy = resource_policy
        self.enable_hsts_on_http = enable_hsts_on_http
        self.skip_hsts_hosts = skip_hsts_hosts or {"localhost", "127.0.0.1"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        # Interactive docs pages (dev only) need their own scripts
        if "text/html" not in response.headers.get("content-type", ""):
            response.headers.setdefault("Content-Security-Policy", self.csp_value)

        # HSTS: only on HTTPS and non-dev hosts unless explicitly enabled
        if _is_secure_request(request) or self.enable_hsts_on_http:
            if request.url.hostname not in self.skip_hsts_hosts:
                response.headers.setdefault("Strict-Transport-Security", self.hsts)

        response.headers.setdefault("Referrer-Policy", self.referrer_policy)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Cross-Origin-Resource-Policy", self.resource_policy
        )
        return response
