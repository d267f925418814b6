"""NASA EPIC full-disc Earth imagery."""

from __future__ import annotations

import logging
from urllib.parse import quote

from pydantic import BaseModel

from astrolink.constants import EPIC_DATES_TIMEOUT, EPIC_NATURAL_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.upstream import RequestSpec, UpstreamAdapter, fetch_json

logger = logging.getLogger(__name__)


class EpicQuery(BaseModel):
    date: str | None = None


class EpicService(UpstreamAdapter):
    """Fetch natural-colour EPIC images for a day.

    Without a date the list of available days is fetched first and the
    most recent (last) entry is used. An empty list falls through to the
    undated endpoint, which serves the latest images.
    """

    kind = DataKind.EPIC
    failure_message = "Failed to fetch EPIC data"
    include_details = True

    async def latest_date(self) -> str | None:
        dates = await fetch_json(
            RequestSpec(
                url=f"{EPIC_NATURAL_URL}/available",
                params={"api_key": self._api_key},
                timeout=EPIC_DATES_TIMEOUT,
            )
        )
        if not isinstance(dates, list) or not dates:
            return None
        last = dates[-1]
        if isinstance(last, dict):
            return last.get("date")
        return str(last)

    def build_request(self, date: str | None) -> RequestSpec:
        url = EPIC_NATURAL_URL
        if date:
            url = f"{EPIC_NATURAL_URL}/date/{quote(date, safe='')}"
        return RequestSpec(url=url, params={"api_key": self._api_key})

    async def fetch(self, query: EpicQuery) -> ResolutionOutcome:
        date = query.date or await self.latest_date()
        if not query.date:
            logger.info("Resolved latest EPIC date: %s", date or "none available")
        return ResolutionOutcome.success(await fetch_json(self.build_request(date)))


epic_service = EpicService()
