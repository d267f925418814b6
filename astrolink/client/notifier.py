"""In-process failure notifications for client consumers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FailureRecord:
    """What a UI needs to tell the user a request ultimately failed."""

    message: str
    url: str | None = None
    status: int | None = None

    @classmethod
    def from_exception(cls, exc: httpx.HTTPError) -> FailureRecord:
        try:
            url = str(exc.request.url)
        except RuntimeError:  # request not attached
            url = None
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            return cls(f"Request failed with status {status}", url, status)
        return cls(str(exc) or "Request failed", url, None)


Subscriber = Callable[[FailureRecord], None]


class FailureNotifier:
    """Publish/subscribe channel for terminal request failures.

    Publishing never blocks on, retries, or fails because of a
    subscriber; a subscriber that raises is logged and skipped.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, record: FailureRecord) -> None:
        for callback in list(self._subscribers):
            try:
                callback(record)
            except Exception:
                logger.exception("Failure subscriber %r raised", callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
