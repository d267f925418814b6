"""Retry and staleness policy applied around every client query."""

from __future__ import annotations

import asyncio
import copy
import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

MISS = object()


class RetryPolicy:
    """Fixed retry count with capped exponential backoff."""

    def __init__(
        self,
        retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        retry_on: tuple[type[BaseException], ...] = (Exception,),
    ) -> None:
        self.retries = retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.retry_on = retry_on

    def delay_for(self, attempt: int) -> float:
        return min(self.base_delay * 2**attempt, self.max_delay)

    async def run(self, operation: Callable[[], Awaitable[T]]) -> T:
        attempt = 0
        while True:
            try:
                return await operation()
            except self.retry_on:
                if attempt >= self.retries:
                    raise
                delay = self.delay_for(attempt)
                logger.info("Retrying in %.1fs (attempt %d)", delay, attempt + 1)
                await asyncio.sleep(delay)
                attempt += 1


class QueryCache:
    """Results stay fresh for ``stale_time`` and are evicted after ``cache_time``.

    Values are copied in and out, so callers never share a cached object.
    """

    def __init__(
        self,
        stale_time: float = 5 * 60,
        cache_time: float = 10 * 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stale_time = stale_time
        self.cache_time = cache_time
        self._clock = clock
        self._entries: dict[Hashable, tuple[Any, float]] = {}

    def get(self, key: Hashable) -> Any:
        """Return the fresh value for ``key`` or ``MISS``."""
        self.prune()
        entry = self._entries.get(key)
        if entry is None:
            return MISS
        value, stored_at = entry
        if self._clock() - stored_at >= self.stale_time:
            return MISS
        return copy.deepcopy(value)

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = (copy.deepcopy(value), self._clock())

    def prune(self) -> None:
        now = self._clock()
        expired = [
            key
            for key, (_, stored_at) in self._entries.items()
            if now - stored_at >= self.cache_time
        ]
        for key in expired:
            del self._entries[key]

    def invalidate(self, key: Hashable | None = None) -> None:
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
