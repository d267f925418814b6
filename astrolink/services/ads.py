"""Astrophysics Data System literature search (demo only).

ADS requires a personal bearer token that this service does not hold, so
the kind is permanently degraded: every request is answered with an
annotated demo payload and no upstream call is made.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from astrolink.constants import ADS_DEFAULT_QUERY, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.fallbacks import ads_demo
from astrolink.services.upstream import UpstreamAdapter, UpstreamError

logger = logging.getLogger(__name__)


class AdsQuery(BaseModel):
    q: str = ADS_DEFAULT_QUERY
    rows: int = 10


class AdsService(UpstreamAdapter):
    kind = DataKind.ADS

    async def fetch(self, query: AdsQuery) -> ResolutionOutcome:
        logger.debug("Serving ADS demo payload for %r", query.q)
        return ResolutionOutcome.fallback(ads_demo(query.q))

    def recover(self, query: AdsQuery, exc: UpstreamError) -> ResolutionOutcome:
        return ResolutionOutcome.fallback(ads_demo(query.q))


ads_service = AdsService()
