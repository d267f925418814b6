"""NASA Image and Video Library search."""

from __future__ import annotations

from pydantic import BaseModel

from astrolink.constants import IMAGES_SEARCH_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json


class ImageSearchQuery(BaseModel):
    q: str = "earth"
    media_type: str = "image"


class ImageLibraryService(UpstreamAdapter):
    kind = DataKind.IMAGES
    failure_message = "Failed to fetch NASA images"

    async def fetch(self, query: ImageSearchQuery) -> ResolutionOutcome:
        spec = RequestSpec(
            url=IMAGES_SEARCH_URL,
            params={"q": query.q, "media_type": query.media_type},
        )
        return ResolutionOutcome.success(await fetch_json(spec))


image_library_service = ImageLibraryService()
