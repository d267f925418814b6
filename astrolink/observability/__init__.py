"""Logging, metrics and tracing wiring for the proxy."""

from __future__ import annotations

from astrolink.observability.logging import configure_logging
from astrolink.observability.metrics import (
    MetricsMiddleware,
    metrics_response,
    record_resolution,
)

__all__ = [
    "MetricsMiddleware",
    "configure_logging",
    "metrics_response",
    "record_resolution",
]
