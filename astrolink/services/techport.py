"""NASA TechPort technology project portfolio."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from astrolink.constants import TECHPORT_PROJECTS_URL, DataKind
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.fallbacks import techport_fallback
from astrolink.services.upstream import (
    RequestSpec,
    UpstreamAdapter,
    UpstreamError,
    fetch_json,
)

logger = logging.getLogger(__name__)


class TechportQuery(BaseModel):
    projectId: str | None = None


def _has_projects(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    return data.get("projects") is not None or data.get("project") is not None


class TechportService(UpstreamAdapter):
    """List projects, or fetch one when ``projectId`` is given.

    TechPort regularly answers with bodies that carry neither a project
    list nor a single project; those are replaced by a sample project so
    the dashboard always has something to render.
    """

    kind = DataKind.TECHPORT

    def build_request(self, query: TechportQuery) -> RequestSpec:
        url = TECHPORT_PROJECTS_URL
        if query.projectId:
            url = f"{TECHPORT_PROJECTS_URL}/{quote(query.projectId, safe='')}"
        return RequestSpec(url=url, params={"api_key": self._api_key})

    async def fetch(self, query: TechportQuery) -> ResolutionOutcome:
        data = await fetch_json(self.build_request(query))
        if _has_projects(data):
            return ResolutionOutcome.success(data)
        logger.info("TechPort returned no project data, serving sample project")
        return ResolutionOutcome.fallback(techport_fallback(count=1))

    def recover(self, query: TechportQuery, exc: UpstreamError) -> ResolutionOutcome:
        logger.warning("TechPort unavailable, serving sample projects")
        return ResolutionOutcome.fallback(techport_fallback(count=2))


techport_service = TechportService()
