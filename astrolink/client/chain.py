"""Ordered fallback strategies: try each tier until one answers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchStrategy:
    name: str
    call: Callable[[], Awaitable[Any]]


class FallbackChain:
    """Run strategies in order, advancing only on network-level failure.

    An HTTP status error from a tier is an answer, not an outage, and
    ends the chain immediately.
    """

    def __init__(
        self,
        strategies: Sequence[FetchStrategy],
        advance_on: tuple[type[BaseException], ...] = (httpx.TransportError,),
    ) -> None:
        if not strategies:
            raise ValueError("FallbackChain needs at least one strategy")
        self.strategies = list(strategies)
        self.advance_on = advance_on

    async def run(self) -> Any:
        last_error: BaseException | None = None
        for strategy in self.strategies:
            try:
                return await strategy.call()
            except self.advance_on as exc:
                logger.warning("%s tier unreachable: %s", strategy.name, exc)
                last_error = exc
        raise last_error
