"""Async client for the proxy with a direct-to-NASA fallback tier.

Every method first asks the proxy. If the proxy cannot be reached at all,
the same data is requested straight from the upstream provider with the
public demo key, in the same shape the proxy would have returned. Results
are cached for a few minutes and failed lookups are retried with backoff.
Once the retries are spent, a ``FailureRecord`` is published to the notifier.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable
from typing import Any
from urllib.parse import quote

import httpx

from astrolink.client.chain import FallbackChain, FetchStrategy
from astrolink.client.notifier import FailureNotifier, FailureRecord
from astrolink.client.policy import MISS, QueryCache, RetryPolicy
from astrolink.config import settings
from astrolink.constants import (
    APOD_URL,
    DONKI_URL,
    DONKI_WINDOW_DAYS,
    EARTHDATA_COLLECTIONS_URL,
    EONET_EVENTS_URL,
    EPIC_NATURAL_URL,
    EXOPLANET_TAP_URL,
    GIBS_WMTS_URL,
    IMAGES_SEARCH_URL,
    MARS_PHOTOS_URL,
    NEO_FEED_URL,
    POWER_COMMUNITY,
    POWER_DAILY_POINT_URL,
    POWER_DEFAULT_END,
    POWER_DEFAULT_LATITUDE,
    POWER_DEFAULT_LONGITUDE,
    POWER_DEFAULT_PARAMETERS,
    POWER_DEFAULT_START,
    SBDB_URL,
    TECHPORT_PROJECTS_URL,
)
from astrolink.services.exoplanet import build_adql
from astrolink.utils.dates import utc_days_ago, utc_today

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_TIMEOUT = 30.0


class AstroLinkError(Exception):
    """Raised when the proxy and the direct tier both failed."""

    def __init__(self, record: FailureRecord) -> None:
        super().__init__(record.message)
        self.record = record


def _clean(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


class AstroLinkClient:
    """One coroutine per NASA data kind."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        api_key: str | None = None,
        timeout: float = DEFAULT_CLIENT_TIMEOUT,
        notifier: FailureNotifier | None = None,
        cache: QueryCache | None = None,
        retry: RetryPolicy | None = None,
    ) -> None:
        self.base_url = (base_url or f"{settings.base_url}/api").rstrip("/")
        self.api_key = api_key or settings.demo_api_key
        self.timeout = timeout
        self.notifier = notifier or FailureNotifier()
        self.cache = cache or QueryCache()
        self.retry = retry or RetryPolicy(retry_on=(AstroLinkError,))

    # ── transport ────────────────────────────────────────────────

    async def _get(
        self, url: str, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=_clean(params))
            resp.raise_for_status()
            return resp

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        resp = await self._get(url, params)
        try:
            return resp.json()
        except ValueError as exc:
            raise httpx.DecodingError(
                f"Response from {url} is not valid JSON", request=resp.request
            ) from exc

    async def _get_text(self, url: str, params: dict[str, Any] | None = None) -> str:
        resp = await self._get(url, params)
        return resp.text

    def _proxy(self, path: str, params: dict[str, Any] | None = None) -> FetchStrategy:
        return FetchStrategy(
            "proxy", lambda: self._get_json(f"{self.base_url}{path}", params)
        )

    def _direct(self, url: str, params: dict[str, Any] | None = None) -> FetchStrategy:
        return FetchStrategy("direct", lambda: self._get_json(url, params))

    # ── query pipeline ───────────────────────────────────────────

    async def _run_chain(self, strategies: list[FetchStrategy]) -> Any:
        try:
            return await FallbackChain(strategies).run()
        except httpx.HTTPError as exc:
            raise AstroLinkError(FailureRecord.from_exception(exc)) from exc

    async def _query(self, key: Hashable, strategies: list[FetchStrategy]) -> Any:
        cached = self.cache.get(key)
        if cached is not MISS:
            return cached
        try:
            result = await self.retry.run(lambda: self._run_chain(strategies))
        except AstroLinkError as exc:
            logger.warning("Query %r failed: %s", key, exc.record.message)
            self.notifier.publish(exc.record)
            raise
        self.cache.set(key, result)
        return result

    # ── data kinds ───────────────────────────────────────────────

    async def get_apod(self, date: str | None = None) -> dict:
        return await self._query(
            ("apod", date),
            [
                self._proxy("/apod", {"date": date}),
                self._direct(APOD_URL, {"api_key": self.api_key, "date": date}),
            ],
        )

    async def get_mars_photos(
        self, rover: str = "curiosity", sol: str = "1000", camera: str | None = None
    ) -> dict:
        return await self._query(
            ("mars-photos", rover, sol, camera),
            [
                self._proxy(
                    "/mars-photos", {"rover": rover, "sol": sol, "camera": camera}
                ),
                self._direct(
                    MARS_PHOTOS_URL.format(rover=quote(rover, safe="")),
                    {"api_key": self.api_key, "sol": sol, "camera": camera or None},
                ),
            ],
        )

    async def get_neo(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> dict:
        params = {"start_date": start_date, "end_date": end_date}
        return await self._query(
            ("neo", start_date, end_date),
            [
                self._proxy("/neo", params),
                self._direct(NEO_FEED_URL, {**params, "api_key": self.api_key}),
            ],
        )

    async def _direct_space_weather(self, event_type: str) -> dict:
        params = {
            "startDate": utc_days_ago(DONKI_WINDOW_DAYS),
            "endDate": utc_today(),
            "api_key": self.api_key,
        }
        if event_type == "flr":
            flares = await self._get_json(f"{DONKI_URL}/FLR", params)
            return {"solarFlares": flares or [], "cmes": []}
        if event_type == "cme":
            cmes = await self._get_json(f"{DONKI_URL}/CME", params)
            return {"solarFlares": [], "cmes": cmes or []}
        flares, cmes = await asyncio.gather(
            self._get_json(f"{DONKI_URL}/FLR", params),
            self._get_json(f"{DONKI_URL}/CME", params),
        )
        return {"solarFlares": flares or [], "cmes": cmes or []}

    async def get_space_weather(self, event_type: str = "all") -> Any:
        event_type = event_type.lower()
        return await self._query(
            ("donki", event_type),
            [
                self._proxy("/donki", {"type": event_type}),
                FetchStrategy(
                    "direct", lambda: self._direct_space_weather(event_type)
                ),
            ],
        )

    async def get_donki_notifications(self) -> list:
        return await self._query(
            ("donki-notifications",), [self._proxy("/donki/notifications")]
        )

    async def get_earth_images(self, date: str | None = None) -> list:
        url = f"{EPIC_NATURAL_URL}/date/{date}" if date else EPIC_NATURAL_URL
        return await self._query(
            ("epic", date),
            [
                self._proxy("/epic", {"date": date}),
                self._direct(url, {"api_key": self.api_key}),
            ],
        )

    async def get_natural_events(
        self, category: str | None = None, status: str = "open", limit: int = 20
    ) -> dict:
        params = {"category": category, "status": status, "limit": limit}
        return await self._query(
            ("eonet", category, status, limit),
            [self._proxy("/eonet", params), self._direct(EONET_EVENTS_URL, params)],
        )

    async def search_images(self, q: str = "earth", media_type: str = "image") -> dict:
        params = {"q": q, "media_type": media_type}
        return await self._query(
            ("images", q, media_type),
            [self._proxy("/images", params), self._direct(IMAGES_SEARCH_URL, params)],
        )

    async def get_power_data(
        self,
        latitude: str = POWER_DEFAULT_LATITUDE,
        longitude: str = POWER_DEFAULT_LONGITUDE,
        start: str = POWER_DEFAULT_START,
        end: str = POWER_DEFAULT_END,
        parameters: str = POWER_DEFAULT_PARAMETERS,
    ) -> dict:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "start": start,
            "end": end,
            "parameters": parameters,
        }
        return await self._query(
            ("power", latitude, longitude, start, end, parameters),
            [
                self._proxy("/power", params),
                self._direct(
                    POWER_DAILY_POINT_URL,
                    {**params, "community": POWER_COMMUNITY, "format": "JSON"},
                ),
            ],
        )

    async def _no_projects(self) -> dict:
        return {"projects": []}

    async def get_techport_projects(self, project_id: str | None = None) -> dict:
        if project_id:
            direct = self._direct(
                f"{TECHPORT_PROJECTS_URL}/{quote(project_id, safe='')}",
                {"api_key": self.api_key},
            )
        else:
            direct = FetchStrategy("empty", self._no_projects)
        return await self._query(
            ("techport", project_id),
            [self._proxy("/techport", {"projectId": project_id}), direct],
        )

    async def get_gibs_capabilities(self) -> str:
        params = {"SERVICE": "WMTS", "REQUEST": "GetCapabilities"}
        return await self._query(
            ("gibs",),
            [
                FetchStrategy("proxy", lambda: self._get_text(f"{self.base_url}/gibs")),
                FetchStrategy("direct", lambda: self._get_text(GIBS_WMTS_URL, params)),
            ],
        )

    async def get_small_body_data(self, sstr: str = "433") -> dict:
        return await self._query(
            ("sbdb", sstr),
            [
                self._proxy("/sbdb", {"sstr": sstr}),
                self._direct(SBDB_URL, {"sstr": sstr}),
            ],
        )

    async def get_osdr_data(
        self, study_id: str = "OSD-379", page: int = 1, size: int = 10
    ) -> Any:
        return await self._query(
            ("osdr", study_id, page, size),
            [self._proxy("/osdr", {"studyId": study_id, "page": page, "size": size})],
        )

    async def get_earthdata_collections(
        self, keyword: str = "MODIS", page_size: int = 10
    ) -> dict:
        params = {"keyword": keyword, "page_size": page_size}
        return await self._query(
            ("earthdata", keyword, page_size),
            [
                self._proxy("/earthdata", params),
                self._direct(EARTHDATA_COLLECTIONS_URL, params),
            ],
        )

    async def get_ads_data(self, q: str = "black hole", rows: int = 10) -> dict:
        return await self._query(
            ("ads", q, rows), [self._proxy("/ads", {"q": q, "rows": rows})]
        )

    async def get_exoplanets(self, limit: int = 100) -> list:
        return await self._query(
            ("exoplanets", limit),
            [
                self._proxy("/exoplanets", {"limit": limit}),
                self._direct(
                    EXOPLANET_TAP_URL, {"query": build_adql(limit), "format": "json"}
                ),
            ],
        )
