"""Dispatch from a data kind to its adapter and failure policy."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from astrolink.constants import DataKind
from astrolink.observability.metrics import record_resolution
from astrolink.schemas.resolution import ResolutionOutcome
from astrolink.services.ads import ads_service
from astrolink.services.apod import apod_service
from astrolink.services.donki import donki_notifications_service, space_weather_service
from astrolink.services.earthdata import earthdata_service
from astrolink.services.eonet import eonet_service
from astrolink.services.epic import epic_service
from astrolink.services.exoplanet import exoplanet_service
from astrolink.services.gibs import gibs_service
from astrolink.services.image_library import image_library_service
from astrolink.services.mars_rover import mars_rover_service
from astrolink.services.neo import neo_service
from astrolink.services.osdr import osdr_service
from astrolink.services.power import power_service
from astrolink.services.sbdb import small_body_service
from astrolink.services.techport import techport_service
from astrolink.services.upstream import (
    UpstreamAdapter,
    UpstreamError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

ADAPTERS: dict[DataKind, UpstreamAdapter] = {
    adapter.kind: adapter
    for adapter in (
        apod_service,
        mars_rover_service,
        neo_service,
        space_weather_service,
        donki_notifications_service,
        epic_service,
        eonet_service,
        image_library_service,
        power_service,
        techport_service,
        gibs_service,
        small_body_service,
        osdr_service,
        earthdata_service,
        ads_service,
        exoplanet_service,
    )
}


class Resolver:
    """Turn one inbound request into exactly one ``ResolutionOutcome``.

    Upstream failures never escape: they are handed to the adapter's
    ``recover`` policy, which answers with a fallback payload or a
    generic error envelope.
    """

    def __init__(self, adapters: Mapping[DataKind, UpstreamAdapter] | None = None):
        self._adapters = dict(ADAPTERS if adapters is None else adapters)

    def adapter_for(self, kind: DataKind) -> UpstreamAdapter:
        return self._adapters[kind]

    async def resolve(self, kind: DataKind, query: Any = None) -> ResolutionOutcome:
        adapter = self.adapter_for(kind)
        try:
            outcome = await adapter.fetch(query)
        except UpstreamError as exc:
            logger.warning("%s resolution failed: %s", kind.value, exc.message)
            outcome = adapter.recover(query, exc)
        except Exception as exc:
            logger.exception("Unexpected error resolving %s", kind.value)
            outcome = adapter.recover(
                query,
                UpstreamTransportError("", str(exc) or exc.__class__.__name__),
            )

        record_resolution(kind.value, outcome.kind.value)
        return outcome


resolver = Resolver()
