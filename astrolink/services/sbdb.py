"""JPL Small-Body Database lookup."""

from __future__ import annotations

from pydantic import BaseModel

from astrolink.constants import SBDB_DEFAULT_SSTR, SBDB_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json


class SbdbQuery(BaseModel):
    sstr: str = SBDB_DEFAULT_SSTR


class SmallBodyService(UpstreamAdapter):
    kind = DataKind.SBDB
    failure_message = "Failed to fetch Small Body Database data"

    async def fetch(self, query: SbdbQuery) -> ResolutionOutcome:
        spec = RequestSpec(url=SBDB_URL, params={"sstr": query.sstr})
        return ResolutionOutcome.success(await fetch_json(spec))


small_body_service = SmallBodyService()
