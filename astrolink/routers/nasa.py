"""Proxy routes for NASA open-data APIs under ``/api``."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from astrolink.constants import DataKind
from astrolink.schemas.resolution import JSON_MEDIA_TYPE, ResolutionOutcome
from astrolink.services.ads import AdsQuery
from astrolink.services.apod import ApodQuery
from astrolink.services.donki import DonkiQuery
from astrolink.services.earthdata import EarthdataQuery
from astrolink.services.eonet import EonetQuery
from astrolink.services.epic import EpicQuery
from astrolink.services.exoplanet import ExoplanetQuery
from astrolink.services.image_library import ImageSearchQuery
from astrolink.services.mars_rover import MarsPhotosQuery
from astrolink.services.neo import NeoQuery
from astrolink.services.osdr import OsdrQuery
from astrolink.services.power import PowerQuery
from astrolink.services.resolver import resolver
from astrolink.services.sbdb import SbdbQuery
from astrolink.services.techport import TechportQuery

OUTCOME_HEADER = "X-Resolution-Outcome"

router = APIRouter(prefix="/api", tags=["nasa"])


def render_outcome(outcome: ResolutionOutcome) -> Response:
    """Serialize an outcome, tagging how it was produced."""
    headers = {OUTCOME_HEADER: outcome.kind.value}
    if outcome.media_type == JSON_MEDIA_TYPE:
        return JSONResponse(
            outcome.body, status_code=outcome.status_code, headers=headers
        )
    return Response(
        content=outcome.body,
        status_code=outcome.status_code,
        media_type=outcome.media_type,
        headers=headers,
    )


@router.get("/apod", summary="Astronomy Picture of the Day")
async def get_apod(query: ApodQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.APOD, query))


@router.get("/mars-photos", summary="Mars rover photos for a sol")
async def get_mars_photos(query: MarsPhotosQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.MARS_PHOTOS, query))


@router.get("/neo", summary="Near-Earth object feed")
async def get_neo(query: NeoQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.NEO, query))


@router.get("/donki", summary="Solar flares and CMEs from the last week")
async def get_donki(query: DonkiQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.DONKI, query))


@router.get("/donki/notifications", summary="DONKI space weather notifications")
async def get_donki_notifications() -> Response:
    return render_outcome(await resolver.resolve(DataKind.DONKI_NOTIFICATIONS))


@router.get("/epic", summary="EPIC Earth images")
async def get_epic(query: EpicQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.EPIC, query))


@router.get("/eonet", summary="EONET natural events")
async def get_eonet(query: EonetQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.EONET, query))


@router.get("/images", summary="NASA Image Library search")
async def get_images(query: ImageSearchQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.IMAGES, query))


@router.get("/power", summary="POWER climate and solar data")
async def get_power(query: PowerQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.POWER, query))


@router.get("/techport", summary="TechPort technology projects")
async def get_techport(query: TechportQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.TECHPORT, query))


@router.get("/gibs", summary="GIBS WMTS capabilities (XML)")
async def get_gibs() -> Response:
    return render_outcome(await resolver.resolve(DataKind.GIBS))


@router.get("/sbdb", summary="JPL Small-Body Database lookup")
async def get_sbdb(query: SbdbQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.SBDB, query))


@router.get("/osdr", summary="Open Science Data Repository study files")
async def get_osdr(query: OsdrQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.OSDR, query))


@router.get("/earthdata", summary="Earthdata collection search")
async def get_earthdata(query: EarthdataQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.EARTHDATA, query))


@router.get("/ads", summary="Astrophysics Data System search (demo)")
async def get_ads(query: AdsQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.ADS, query))


@router.get("/exoplanets", summary="Exoplanet Archive planetary systems")
async def get_exoplanets(query: ExoplanetQuery = Depends()) -> Response:
    return render_outcome(await resolver.resolve(DataKind.EXOPLANETS, query))
