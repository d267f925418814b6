"""Static fallback payloads served when an upstream provider is unavailable.

Every template mirrors the top-level shape of a successful response from
the same provider, so consumers never have to special-case substituted
data. Only the current date (or the resolved request date for NEO) is
filled in at call time.
"""

from __future__ import annotations

import copy
from typing import Any

from astrolink.utils.dates import utc_timestamp, utc_today

APOD_SAMPLE: dict[str, Any] = {
    "explanation": (
        "This is a sample astronomy picture. The actual NASA APOD service may "
        "be temporarily unavailable. This demonstrates the application's "
        "fallback mechanism to ensure users always have content to explore."
    ),
    "hdurl": "https://apod.nasa.gov/apod/image/2310/M33_HubbleSubaru_3000.jpg",
    "media_type": "image",
    "service_version": "v1",
    "title": "Sample: The Triangulum Galaxy",
    "url": "https://apod.nasa.gov/apod/image/2310/M33_HubbleSubaru_960.jpg",
}

NEO_SAMPLE_OBJECT: dict[str, Any] = {
    "id": "54016849",
    "name": "(2020 SO)",
    "absolute_magnitude_h": 28.1,
    "estimated_diameter": {
        "kilometers": {
            "estimated_diameter_min": 0.004,
            "estimated_diameter_max": 0.009,
        },
        "meters": {"estimated_diameter_min": 4.2, "estimated_diameter_max": 9.4},
    },
    "is_potentially_hazardous_asteroid": False,
}

EONET_SAMPLE_EVENTS: list[dict[str, Any]] = [
    {
        "id": "EONET_6195",
        "title": "Wildfire - California, United States",
        "description": "Sample wildfire event for demonstration",
        "categories": [{"id": "wildfires", "title": "Wildfires"}],
        "sources": [{"id": "InciWeb", "url": "https://inciweb.nwcg.gov/"}],
        "geometry": [
            {
                "magnitudeValue": None,
                "magnitudeUnit": None,
                "type": "Point",
                "coordinates": [-120.5, 37.5],
            }
        ],
    },
    {
        "id": "EONET_6196",
        "title": "Volcano - Mount Etna, Italy",
        "description": "Sample volcanic activity",
        "categories": [{"id": "volcanoes", "title": "Volcanoes"}],
        "sources": [{"id": "SIVolcano", "url": "https://volcano.si.edu/"}],
        "geometry": [
            {
                "magnitudeValue": 3.2,
                "magnitudeUnit": "VEI",
                "type": "Point",
                "coordinates": [14.999, 37.748],
            }
        ],
    },
]

TECHPORT_SAMPLE_PROJECTS: list[dict[str, Any]] = [
    {
        "projectId": 17792,
        "title": "Advanced Propulsion Systems",
        "description": (
            "Development of next-generation propulsion technologies for deep "
            "space missions."
        ),
        "status": "Active",
        "startDate": "2023-01-01",
        "benefits": (
            "Enables faster and more efficient space travel for future missions "
            "to Mars and beyond."
        ),
    },
    {
        "projectId": 17793,
        "title": "Mars Sample Return Mission",
        "description": "Technology development for returning samples from Mars to Earth.",
        "status": "Active",
        "startDate": "2022-06-01",
        "benefits": (
            "Will provide unprecedented scientific insights into Mars geology "
            "and potential for past life."
        ),
    },
]

EXOPLANET_SAMPLES: list[dict[str, Any]] = [
    {
        "pl_name": "Kepler-452 b",
        "hostname": "Kepler-452",
        "pl_orbper": 384.843,
        "pl_rade": 1.63,
        "disc_year": 2015,
        "discoverymethod": "Transit",
    },
    {
        "pl_name": "TRAPPIST-1 e",
        "hostname": "TRAPPIST-1",
        "pl_orbper": 6.099615,
        "pl_rade": 0.92,
        "disc_year": 2016,
        "discoverymethod": "Transit",
    },
    {
        "pl_name": "Proxima Centauri b",
        "hostname": "Proxima Centauri",
        "pl_orbper": 11.186,
        "pl_rade": 1.17,
        "disc_year": 2016,
        "discoverymethod": "Radial Velocity",
    },
]

ADS_SAMPLE_RESULTS: list[dict[str, Any]] = [
    {
        "title": "Black Hole Physics and Astrophysics",
        "author": "NASA Astrophysics Division",
        "year": "2024",
        "abstract": "Comprehensive study of black hole phenomena...",
    }
]


def apod_fallback() -> dict[str, Any]:
    return {"date": utc_today(), **copy.deepcopy(APOD_SAMPLE)}


def neo_fallback(start_date: str) -> dict[str, Any]:
    """One synthetic near-Earth object keyed under ``start_date``."""
    neo = copy.deepcopy(NEO_SAMPLE_OBJECT)
    neo["close_approach_data"] = [
        {
            "close_approach_date": start_date,
            "relative_velocity": {"kilometers_per_hour": "27000"},
            "miss_distance": {"kilometers": "450000"},
        }
    ]
    return {
        "links": {"self": "mock-data"},
        "element_count": 1,
        "near_earth_objects": {start_date: [neo]},
    }


def eonet_fallback() -> dict[str, Any]:
    now = utc_timestamp()
    events = copy.deepcopy(EONET_SAMPLE_EVENTS)
    for event in events:
        for point in event["geometry"]:
            point["date"] = now
    return {
        "title": "EONET Events",
        "description": "Natural events from EONET",
        "events": events,
    }


def techport_fallback(count: int = 2) -> dict[str, Any]:
    return {"projects": copy.deepcopy(TECHPORT_SAMPLE_PROJECTS[:count])}


def exoplanet_fallback() -> list[dict[str, Any]]:
    return copy.deepcopy(EXOPLANET_SAMPLES)


def ads_demo(query: str) -> dict[str, Any]:
    return {
        "message": "ADS API requires separate authentication",
        "query": query,
        "mockResults": copy.deepcopy(ADS_SAMPLE_RESULTS),
    }
