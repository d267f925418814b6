"""NASA NeoWs near-Earth object feed."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from astrolink.constants import NEO_FEED_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.fallbacks import neo_fallback
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamError,
    fetch_json,
)
from astrolink.utils.dates import utc_today

logger = logging.getLogger(__name__)


class NeoQuery(BaseModel):
    start_date: str | None = None
    end_date: str | None = None

    def resolved_window(self) -> tuple[str, str]:
        """Missing bounds default to the current UTC day."""
        today = utc_today()
        return self.start_date or today, self.end_date or today


class NeoService(UpstreamAdapter):
    kind = DataKind.NEO

    def build_request(self, query: NeoQuery) -> RequestSpec:
        start_date, end_date = query.resolved_window()
        return RequestSpec(
            url=NEO_FEED_URL,
            params={
                "start_date": start_date,
                "end_date": end_date,
                "api_key": self._api_key,
            },
        )

    async def fetch(self, query: NeoQuery) -> ResolutionOutcome:
        return ResolutionOutcome.success(await fetch_json(self.build_request(query)))

    def recover(self, query: NeoQuery, exc: UpstreamError) -> ResolutionOutcome:
        start_date, _ = query.resolved_window()
        logger.warning("NEO feed unavailable, serving sample object for %s", start_date)
        return ResolutionOutcome.fallback(neo_fallback(start_date))


neo_service = NeoService()
