"""NASA Open Science Data Repository study files."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel

from astrolink.constants import OSDR_DEFAULT_STUDY, OSDR_FILES_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json


class OsdrQuery(BaseModel):
    studyId: str = OSDR_DEFAULT_STUDY
    page: int = 1
    size: int = 10


class OsdrService(UpstreamAdapter):
    kind = DataKind.OSDR
    failure_message = "Failed to fetch OSDR data"

    async def fetch(self, query: OsdrQuery) -> ResolutionOutcome:
        spec = RequestSpec(
            url=OSDR_FILES_URL.format(study_id=quote(query.studyId, safe="")),
            params={"page": query.page, "size": query.size, "all_files": "true"},
        )
        return ResolutionOutcome.success(await fetch_json(spec))


osdr_service = OsdrService()
