"""NASA EONET natural event tracker."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from astrolink.config import settings
from astrolink.constants import (
    EONET_DEFAULT_LIMIT,
    EONET_DEFAULT_STATUS,
    EONET_EVENTS_URL,
    DataKind,
)
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.fallbacks import eonet_fallback
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamError,
    fetch_json,
)

logger = logging.getLogger(__name__)


class EonetQuery(BaseModel):
    category: str | None = None
    status: str = EONET_DEFAULT_STATUS
    limit: int = EONET_DEFAULT_LIMIT


class EonetService(UpstreamAdapter):
    kind = DataKind.EONET

    def build_request(self, query: EonetQuery) -> RequestSpec:
        params: dict[str, str | int] = {"status": query.status, "limit": query.limit}
        if query.category:
            params["category"] = query.category
        return RequestSpec(
            url=EONET_EVENTS_URL,
            params=params,
            headers={"User-Agent": settings.user_agent},
        )

    async def fetch(self, query: EonetQuery) -> ResolutionOutcome:
        return ResolutionOutcome.success(await fetch_json(self.build_request(query)))

    def recover(self, query: EonetQuery, exc: UpstreamError) -> ResolutionOutcome:
        logger.warning("EONET unavailable, serving sample events")
        return ResolutionOutcome.fallback(eonet_fallback())


eonet_service = EonetService()
