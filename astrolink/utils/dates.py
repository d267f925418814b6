"""UTC calendar helpers shared by the proxy and its fallback payloads."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta


def utc_today() -> str:
    """Current UTC calendar day as ``YYYY-MM-DD``."""
    return datetime.now(UTC).strftime("%Y-%m-%d")


def utc_days_ago(days: int) -> str:
    return (datetime.now(UTC) - timedelta(days=days)).strftime("%Y-%m-%d")


def utc_timestamp() -> str:
    """Millisecond ISO-8601 timestamp with a ``Z`` suffix."""
    stamp = datetime.now(UTC).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")
