"""NASA CMR Earthdata collection search."""

from __future__ import annotations

from pydantic import BaseModel

from astrolink.constants import (
    EARTHDATA_COLLECTIONS_URL,
    EARTHDATA_DEFAULT_KEYWORD,
    DataKind,
)
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json


class EarthdataQuery(BaseModel):
    keyword: str = EARTHDATA_DEFAULT_KEYWORD
    page_size: int = 10


class EarthdataService(UpstreamAdapter):
    kind = DataKind.EARTHDATA
    failure_message = "Failed to fetch Earthdata collections"

    async def fetch(self, query: EarthdataQuery) -> ResolutionOutcome:
        spec = RequestSpec(
            url=EARTHDATA_COLLECTIONS_URL,
            params={"keyword": query.keyword, "page_size": query.page_size},
        )
        return ResolutionOutcome.success(await fetch_json(spec))


earthdata_service = EarthdataService()
