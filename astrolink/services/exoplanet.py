"""NASA Exoplanet Archive TAP service."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from astrolink.constants import (
    EXOPLANET_COLUMNS,
    EXOPLANET_DEFAULT_LIMIT,
    EXOPLANET_TAP_URL,
    EXOPLANET_TIMEOUT,
    DataKind,
)
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.fallbacks import exoplanet_fallback
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamError,
    fetch_json,
)

logger = logging.getLogger(__name__)


class ExoplanetQuery(BaseModel):
    limit: int = EXOPLANET_DEFAULT_LIMIT


def build_adql(limit: int) -> str:
    """Planetary-systems rows that have a name, period and radius."""
    return (
        f"select top {limit} {EXOPLANET_COLUMNS} from ps "
        "where pl_name is not null and pl_orbper is not null "
        "and pl_rade is not null"
    )


class ExoplanetService(UpstreamAdapter):
    kind = DataKind.EXOPLANETS

    async def fetch(self, query: ExoplanetQuery) -> ResolutionOutcome:
        spec = RequestSpec(
            url=EXOPLANET_TAP_URL,
            params={"query": build_adql(query.limit), "format": "json"},
            timeout=EXOPLANET_TIMEOUT,
        )
        return ResolutionOutcome.success(await fetch_json(spec))

    def recover(self, query: ExoplanetQuery, exc: UpstreamError) -> ResolutionOutcome:
        logger.warning("Exoplanet Archive unavailable, serving sample planets")
        return ResolutionOutcome.fallback(exoplanet_fallback())


exoplanet_service = ExoplanetService()
