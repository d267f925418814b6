"""Upstream provider registry for the NASA data proxy."""

from __future__ import annotations

from enum import Enum


class DataKind(str, Enum):
    """Categories of NASA data served under ``/api``."""

    APOD = "apod"
    MARS_PHOTOS = "mars-photos"
    NEO = "neo"
    DONKI = "donki"
    DONKI_NOTIFICATIONS = "donki-notifications"
    EPIC = "epic"
    EONET = "eonet"
    IMAGES = "images"
    POWER = "power"
    TECHPORT = "techport"
    GIBS = "gibs"
    SBDB = "sbdb"
    OSDR = "osdr"
    EARTHDATA = "earthdata"
    ADS = "ads"
    EXOPLANETS = "exoplanets"


# ==========================================
# Upstream Base URLs
# ==========================================

NASA_BASE_URL = "https://api.nasa.gov"

APOD_URL = f"{NASA_BASE_URL}/planetary/apod"
MARS_PHOTOS_URL = f"{NASA_BASE_URL}/mars-photos/api/v1/rovers/{{rover}}/photos"
NEO_FEED_URL = f"{NASA_BASE_URL}/neo/rest/v1/feed"
DONKI_URL = f"{NASA_BASE_URL}/DONKI"
EPIC_NATURAL_URL = f"{NASA_BASE_URL}/EPIC/api/natural"
TECHPORT_PROJECTS_URL = f"{NASA_BASE_URL}/techport/api/projects"

EONET_EVENTS_URL = "https://eonet.gsfc.nasa.gov/api/v3/events"
IMAGES_SEARCH_URL = "https://images-api.nasa.gov/search"
POWER_DAILY_POINT_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"
GIBS_WMTS_URL = "https://gibs.earthdata.nasa.gov/wmts/epsg4326/best/wmts.cgi"
SBDB_URL = "https://ssd-api.jpl.nasa.gov/sbdb.api"
OSDR_FILES_URL = "https://osdr.nasa.gov/osdr/data/osd/files/{study_id}"
EARTHDATA_COLLECTIONS_URL = "https://cmr.earthdata.nasa.gov/search/collections.json"
EXOPLANET_TAP_URL = "https://exoplanetarchive.ipac.caltech.edu/TAP/sync"


# ==========================================
# Per-call Timeouts (seconds)
# ==========================================

DEFAULT_TIMEOUT = 15.0
MARS_PHOTOS_TIMEOUT = 10.0
EPIC_DATES_TIMEOUT = 10.0
EXOPLANET_TIMEOUT = 20.0


# ==========================================
# Query Defaults
# ==========================================

DEFAULT_ROVER = "curiosity"
DEFAULT_SOL = "1000"
# Sol retried when the requested sol has no photos
PERSEVERANCE_FALLBACK_SOL = "100"
ROVER_FALLBACK_SOL = "2000"

DONKI_WINDOW_DAYS = 7

EONET_DEFAULT_STATUS = "open"
EONET_DEFAULT_LIMIT = 20

POWER_DEFAULT_LATITUDE = "33.69"
POWER_DEFAULT_LONGITUDE = "73.05"
POWER_DEFAULT_START = "20240101"
POWER_DEFAULT_END = "20240110"
POWER_DEFAULT_PARAMETERS = "T2M,ALLSKY_SFC_SW_DWN"
POWER_COMMUNITY = "RE"

SBDB_DEFAULT_SSTR = "433"  # 433 Eros

OSDR_DEFAULT_STUDY = "OSD-379"

EARTHDATA_DEFAULT_KEYWORD = "MODIS"

ADS_DEFAULT_QUERY = "black hole"

EXOPLANET_DEFAULT_LIMIT = 100
EXOPLANET_COLUMNS = "pl_name,hostname,pl_orbper,pl_rade,disc_year,discoverymethod"
