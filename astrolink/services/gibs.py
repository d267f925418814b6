"""NASA GIBS WMTS capabilities document (XML passthrough)."""

from __future__ import annotations

from astrolink.constants import GIBS_WMTS_URL, DataKind
from astrolink.schemas.resolution import XML_MEDIA_TYPE, ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_text


class GibsService(UpstreamAdapter):
    kind = DataKind.GIBS
    failure_message = "Failed to fetch GIBS capabilities"

    async def fetch(self, query: None = None) -> ResolutionOutcome:
        spec = RequestSpec(
            url=GIBS_WMTS_URL,
            params={"SERVICE": "WMTS", "REQUEST": "GetCapabilities"},
        )
        xml = await fetch_text(spec)
        return ResolutionOutcome.success(xml, media_type=XML_MEDIA_TYPE)


gibs_service = GibsService()
