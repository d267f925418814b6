"""NASA Astronomy Picture of the Day."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from astrolink.constants import APOD_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.fallbacks import apod_fallback
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamError,
    fetch_json,
)

logger = logging.getLogger(__name__)


class ApodQuery(BaseModel):
    date: str | None = None  # YYYY-MM-DD, omitted for today


class ApodService(UpstreamAdapter):
    """Fetch the picture of the day, serving a sample image when NASA is down."""

    kind = DataKind.APOD

    def build_request(self, query: ApodQuery) -> RequestSpec:
        params = {"api_key": self._api_key}
        if query.date:
            params["date"] = query.date
        return RequestSpec(url=APOD_URL, params=params)

    async def fetch(self, query: ApodQuery) -> ResolutionOutcome:
        return ResolutionOutcome.success(await fetch_json(self.build_request(query)))

    def recover(self, query: ApodQuery, exc: UpstreamError) -> ResolutionOutcome:
        logger.warning("APOD unavailable, serving sample image")
        return ResolutionOutcome.fallback(apod_fallback())


apod_service = ApodService()
