"""NASA Mars Rover Photos."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from astrolink.constants import (
    DEFAULT_ROVER,
    DEFAULT_SOL,
    MARS_PHOTOS_TIMEOUT,
    MARS_PHOTOS_URL,
    PERSEVERANCE_FALLBACK_SOL,
    ROVER_FALLBACK_SOL,
    DataKind,
)
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamEmptyResult,
    fetch_json,
)

logger = logging.getLogger(__name__)


class MarsPhotosQuery(BaseModel):
    rover: str = DEFAULT_ROVER
    sol: str = DEFAULT_SOL
    camera: str | None = None


def fallback_sol(rover: str) -> str:
    """Sol known to have imagery for ``rover``."""
    if rover.lower() == "perseverance":
        return PERSEVERANCE_FALLBACK_SOL
    return ROVER_FALLBACK_SOL


class MarsRoverService(UpstreamAdapter):
    """Fetch rover photos for a sol.

    An empty photo list for the requested sol triggers exactly one more
    query against a sol known to have imagery. That second answer is
    returned as-is, even if it is empty too.
    """

    kind = DataKind.MARS_PHOTOS
    failure_message = "Failed to fetch Mars photos"
    include_details = True

    def build_request(
        self, rover: str, sol: str, camera: str | None = None
    ) -> RequestSpec:
        params = {"sol": sol, "api_key": self._api_key}
        if camera:
            params["camera"] = camera
        return RequestSpec(
            url=MARS_PHOTOS_URL.format(rover=quote(rover, safe="")),
            params=params,
            timeout=MARS_PHOTOS_TIMEOUT,
        )

    @staticmethod
    def _ensure_photos(url: str, data: Any) -> None:
        photos = data.get("photos") if isinstance(data, dict) else None
        if isinstance(photos, list) and not photos:
            raise UpstreamEmptyResult(url, "No photos for the requested sol")

    async def fetch(self, query: MarsPhotosQuery) -> ResolutionOutcome:
        camera = query.camera.strip() if query.camera else None
        spec = self.build_request(query.rover, query.sol, camera)
        data = await fetch_json(spec)
        try:
            self._ensure_photos(spec.url, data)
        except UpstreamEmptyResult:
            sol = fallback_sol(query.rover)
            logger.info(
                "No %s photos on sol %s, retrying with sol %s",
                query.rover,
                query.sol,
                sol,
            )
            # The camera filter is dropped for the substitute sol
            retry = await fetch_json(self.build_request(query.rover, sol))
            return ResolutionOutcome.secondary(retry)
        return ResolutionOutcome.success(data)


mars_rover_service = MarsRoverService()
