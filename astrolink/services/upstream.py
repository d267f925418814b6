"""Upstream HTTP access shared by every data kind adapter."""

from __future__ import annotations

import logging
import time
from typing import Any, ClassVar
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, Field

from astrolink.config import settings
from astrolink.constants import DEFAULT_TIMEOUT, DataKind
from astrolink.observability.metrics import UPSTREAM_LATENCY
from astrolink.schemas.resolution import ResolutionOutcome

logger = logging.getLogger(__name__)


class RequestSpec(BaseModel):
    """A single upstream GET, built fresh for each call."""

    url: str
    params: dict[str, Any] = Field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def host(self) -> str:
        return urlsplit(self.url).hostname or "unknown"


# ==========================================
# Error taxonomy
# ==========================================


class UpstreamError(Exception):
    """Base class for every failure talking to an upstream provider."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.message = message

    @property
    def details(self) -> Any:
        return self.message


class UpstreamTransportError(UpstreamError):
    """Timeout, DNS failure, refused connection or an undecodable body."""


class UpstreamHTTPError(UpstreamError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int, body: Any = None) -> None:
        super().__init__(url, f"Upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body

    @property
    def details(self) -> Any:
        return self.body if self.body not in (None, "") else self.message


class UpstreamEmptyResult(UpstreamError):
    """Structurally valid response with an empty result list."""


# ==========================================
# Fetch helpers
# ==========================================


def _decode_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def _send(spec: RequestSpec) -> httpx.Response:
    # Query parameters carry the API key, so only the bare URL is logged
    logger.info("Fetching upstream %s", spec.url)
    start = time.perf_counter()
    try:
        async with httpx.AsyncClient(
            timeout=spec.timeout, headers=spec.headers or None
        ) as client:
            resp = await client.get(spec.url, params=spec.params or None)
            resp.raise_for_status()
            return resp
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        logger.warning("HTTP %s from upstream %s", status_code, spec.url)
        raise UpstreamHTTPError(
            spec.url, status_code, _decode_error_body(exc.response)
        ) from exc
    except httpx.TimeoutException as exc:
        logger.warning("Timeout after %ss contacting %s", spec.timeout, spec.url)
        raise UpstreamTransportError(
            spec.url, f"timeout of {int(spec.timeout * 1000)}ms exceeded"
        ) from exc
    except httpx.HTTPError as exc:
        logger.warning("Connection failed for upstream %s (%s)", spec.url, exc)
        raise UpstreamTransportError(
            spec.url, str(exc) or exc.__class__.__name__
        ) from exc
    finally:
        UPSTREAM_LATENCY.labels(spec.host).observe(time.perf_counter() - start)


async def fetch_json(spec: RequestSpec) -> Any:
    """GET ``spec`` and return the decoded JSON body."""
    resp = await _send(spec)
    try:
        return resp.json()
    except ValueError as exc:
        raise UpstreamTransportError(
            spec.url, "Upstream returned a body that is not valid JSON"
        ) from exc


async def fetch_text(spec: RequestSpec) -> str:
    """GET ``spec`` and return the raw body text."""
    resp = await _send(spec)
    return resp.text


# ==========================================
# Adapter base
# ==========================================


class UpstreamAdapter:
    """One data kind: how to fetch it and what to answer when that fails.

    Subclasses implement ``fetch``, raising ``UpstreamError`` on failure.
    The default ``recover`` answers with a generic 500 error envelope;
    kinds with a fallback payload override it.
    """

    kind: ClassVar[DataKind]
    failure_message: ClassVar[str] = "Failed to fetch upstream data"
    include_details: ClassVar[bool] = False

    @property
    def _api_key(self) -> str:
        return settings.nasa_api_key

    async def fetch(self, query: Any) -> ResolutionOutcome:
        raise NotImplementedError

    def recover(self, query: Any, exc: UpstreamError) -> ResolutionOutcome:
        details = exc.details if self.include_details else None
        return ResolutionOutcome.error(self.failure_message, details)
