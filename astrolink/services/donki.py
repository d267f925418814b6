"""NASA DONKI space weather: solar flares, CMEs and notifications."""

from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel

from astrolink.constants import DONKI_URL, DONKI_WINDOW_DAYS, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json
from astrolink.utils.dates import utc_days_ago, utc_today

logger = logging.getLogger(__name__)


class DonkiQuery(BaseModel):
    type: str = "all"  # flr, cme or all; anything else means all


class SpaceWeatherService(UpstreamAdapter):
    """Fetch the last week of solar flares and/or coronal mass ejections."""

    kind = DataKind.DONKI
    failure_message = "Failed to fetch space weather data"

    def build_request(self, endpoint: str) -> RequestSpec:
        return RequestSpec(
            url=f"{DONKI_URL}/{endpoint}",
            params={
                "startDate": utc_days_ago(DONKI_WINDOW_DAYS),
                "endDate": utc_today(),
                "api_key": self._api_key,
            },
        )

    async def fetch(self, query: DonkiQuery) -> ResolutionOutcome:
        event_type = query.type.lower()
        if event_type in ("flr", "cme"):
            data = await fetch_json(self.build_request(event_type.upper()))
            return ResolutionOutcome.success(data)

        # Both calls must succeed; a single failure fails the merged response
        flares, cmes = await asyncio.gather(
            fetch_json(self.build_request("FLR")),
            fetch_json(self.build_request("CME")),
        )
        return ResolutionOutcome.success({"solarFlares": flares, "cmes": cmes})


class DonkiNotificationsService(UpstreamAdapter):
    kind = DataKind.DONKI_NOTIFICATIONS
    failure_message = "Failed to fetch DONKI notifications"

    async def fetch(self, query: None = None) -> ResolutionOutcome:
        spec = RequestSpec(
            url=f"{DONKI_URL}/notifications", params={"api_key": self._api_key}
        )
        return ResolutionOutcome.success(await fetch_json(spec))


space_weather_service = SpaceWeatherService()
donki_notifications_service = DonkiNotificationsService()
