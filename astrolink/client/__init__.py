"""Async client for the NASA data proxy."""

from __future__ import annotations

from astrolink.client.chain import FallbackChain, FetchStrategy
from astrolink.client.facade import AstroLinkClient, AstroLinkError
from astrolink.client.notifier import FailureNotifier, FailureRecord
from astrolink.client.policy import QueryCache, RetryPolicy

__all__ = [
    "AstroLinkClient",
    "AstroLinkError",
    "FailureNotifier",
    "FailureRecord",
    "FallbackChain",
    "FetchStrategy",
    "QueryCache",
    "RetryPolicy",
]
