"""Daylight Planner - sunrise, sunset, twilight and golden hour for any place.

Architecture::

    datasources/     External APIs (Nominatim geocoding, sunrise-sunset.org)
    store.py         Record store: one row per (location, date), never expires
    orchestrator.py  Cache-aware batch fetching of a date range
    facade.py        Place name + date range -> FetchResult (the only entry point)
    formatting.py    Stored row -> wire record, golden hour derivation
    validation.py    Transport-boundary checks and the response envelope
    flows/           Prefect orchestration (warm the cache for many places)
    services/        Shared utilities (HTTP session factory)

Data flow: geocoding -> store (cache) -> missing days from sunrise-sunset.org
-> store -> formatted, date-ordered day list.
"""

__version__ = "0.1.0"

from daylight_planner.config import Settings
from daylight_planner.facade import SolarDataService, build_service
from daylight_planner.schemas import DataSource, FetchResult, SolarDay

__all__ = [
    "DataSource",
    "FetchResult",
    "Settings",
    "SolarDataService",
    "SolarDay",
    "__version__",
    "build_service",
]
