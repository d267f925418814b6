"""NASA POWER daily climate and solar energy data for a point."""

from __future__ import annotations

from pydantic import BaseModel

from astrolink.constants import (
    POWER_COMMUNITY,
    POWER_DAILY_POINT_URL,
    POWER_DEFAULT_END,
    POWER_DEFAULT_LATITUDE,
    POWER_DEFAULT_LONGITUDE,
    POWER_DEFAULT_PARAMETERS,
    POWER_DEFAULT_START,
    DataKind,
)
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json


class PowerQuery(BaseModel):
    latitude: str = POWER_DEFAULT_LATITUDE
    longitude: str = POWER_DEFAULT_LONGITUDE
    start: str = POWER_DEFAULT_START  # YYYYMMDD
    end: str = POWER_DEFAULT_END
    parameters: str = POWER_DEFAULT_PARAMETERS


class PowerService(UpstreamAdapter):
    kind = DataKind.POWER
    failure_message = "Failed to fetch POWER data"

    def build_request(self, query: PowerQuery) -> RequestSpec:
        return RequestSpec(
            url=POWER_DAILY_POINT_URL,
            params={
                "parameters": query.parameters,
                "community": POWER_COMMUNITY,
                "longitude": query.longitude,
                "latitude": query.latitude,
                "start": query.start,
                "end": query.end,
                "format": "JSON",
            },
        )

    async def fetch(self, query: PowerQuery) -> ResolutionOutcome:
        return ResolutionOutcome.success(await fetch_json(self.build_request(query)))


power_service = PowerService()
