"""
FastAPI Application - NASA Open Data Proxy
"""

from __future__ import annotations

import logging
import secrets
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from starlette.exceptions import HTTPException as StarletteHTTPException

from astrolink.config import settings
from astrolink.middleware.security import ApiSecurityHeadersMiddleware
from astrolink.observability import (
    MetricsMiddleware,
    configure_logging,
    metrics_response,
)
from astrolink.observability.tracing import configure_tracing
from astrolink.routers.nasa import router as nasa_router
from astrolink.services.resolver import ADAPTERS

logger = logging.getLogger(__name__)


# ==========================================
# Application Lifespan
# ==========================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "NASA data proxy starting",
        extra={
            "api_key": settings.masked_api_key,
            "data_kinds": len(ADAPTERS),
            "environment": settings.environment,
        },
    )
    if settings.nasa_api_key == "DEMO_KEY":
        logger.warning("NASA_API_KEY not set; using the shared DEMO_KEY quota")
    yield
    logger.info("NASA data proxy shutting down")


# ==========================================
# Environment
# ==========================================
configure_logging(settings.log_level.upper())
IS_PROD = settings.is_production


# ==========================================
# Exception handlers (define BEFORE registration)
# ==========================================
async def http_exception_handler(request: Request, exc: HTTPException):
    """Render HTTP errors with the same envelope the proxy uses."""
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        {"error": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# ==========================================
# FastAPI Application
# ==========================================
app = FastAPI(
    title="AstroLink NASA Data Proxy",
    description="Aggregating proxy for NASA open-data APIs",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None if IS_PROD else "/docs",
    redoc_url=None if IS_PROD else "/redoc",
    openapi_url=None if IS_PROD else "/openapi.json",
)
# Order: compression → metrics → security → correlation id
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(MetricsMiddleware)
app.add_middleware(ApiSecurityHeadersMiddleware)
app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)
# CORS: strict allowlist
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["Accept", "Content-Type"],
        expose_headers=["X-Request-ID", "X-Resolution-Outcome"],
    )
# Optional tracing
if settings.enable_tracing and settings.otlp_endpoint:
    configure_tracing(
        app, "astrolink-proxy", settings.otlp_endpoint, settings.otlp_headers
    )


# ==========================================
# Health & readiness (minimal in prod)
# ==========================================
@app.get("/healthz", tags=["system"], summary="Health check", response_model=dict)
async def health_check() -> dict:
    if IS_PROD:
        return {"status": "healthy"}
    return {"status": "healthy", "version": app.version}


@app.get("/readyz", tags=["system"], summary="Readiness check", response_model=dict)
async def readiness_check() -> dict:
    if not ADAPTERS:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No data kinds registered",
        )
    if IS_PROD:
        return {"status": "ready"}
    return {
        "status": "ready",
        "data_kinds": sorted(kind.value for kind in ADAPTERS),
        "demo_key": settings.nasa_api_key == "DEMO_KEY",
    }


# ==========================================
# Metrics (Protected with HTTP Basic Auth)
# ==========================================
security = HTTPBasic(auto_error=False)


def verify_metrics_auth(
    credentials: HTTPBasicCredentials | None = Depends(security),
) -> str:
    """Verify HTTP Basic Auth credentials for metrics endpoint."""
    if not settings.metrics_password:
        # No password configured: metrics are open
        return credentials.username if credentials else "anonymous"

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )
    correct_username = secrets.compare_digest(
        credentials.username, settings.metrics_username
    )
    correct_password = secrets.compare_digest(
        credentials.password, settings.metrics_password
    )

    if not (correct_username and correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


@app.get("/metrics", include_in_schema=False)
def metrics(_: str = Depends(verify_metrics_auth)):
    """
    Prometheus metrics endpoint.

    Set METRICS_PASSWORD (and optionally METRICS_USERNAME) to require auth.
    """
    return metrics_response()


# ==========================================
# Routers
# ==========================================
app.include_router(nasa_router)
