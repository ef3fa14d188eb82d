"""
Single entry point: place name + date range -> solar data.

The transport layer validates parameters (see ``validation.py``) and then
calls :meth:`SolarDataService.get_solar_data`. The service geocodes the place,
hands the canonical location to the orchestrator and returns its result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from daylight_planner.datasources.geocoding import NominatimGeocoder
from daylight_planner.datasources.sunrise_sunset import SunriseSunsetClient
from daylight_planner.errors import AggregateFetchError, LocationResolutionError
from daylight_planner.orchestrator import BatchFetchOrchestrator, OrchestratorConfig
from daylight_planner.schemas import FetchResult
from daylight_planner.services.http import HttpConfig
from daylight_planner.store import RecordStore

if TYPE_CHECKING:
    from datetime import date
    from threading import Event

    from daylight_planner.config import Settings
    from daylight_planner.datasources.geocoding import GeocodeResult

logger = logging.getLogger(__name__)

LOCATION_ERROR_PREFIX = "Location error: "


class Geocoder(Protocol):
    def resolve(self, name: str) -> GeocodeResult: ...


class SolarDataService:
    """Wires geocoding, the record store and the batch orchestrator together."""

    def __init__(self, geocoder: Geocoder, orchestrator: BatchFetchOrchestrator) -> None:
        self.geocoder = geocoder
        self.orchestrator = orchestrator

    def get_solar_data(
        self,
        location: str,
        start: date,
        end: date,
        cancel: Event | None = None,
    ) -> FetchResult:
        """
        Solar data for every day of ``[start, end]`` at ``location``.

        Dates are not validated here; callers must apply
        ``validation.validate_request`` first.

        Returns:
            FetchResult with either the full ordered day list or an error.
            Location errors are prefixed with ``"Location error: "``.

        Raises:
            FetchCancelled: ``cancel`` was set while days were being fetched.
        """
        try:
            place = self.geocoder.resolve(location)
        except LocationResolutionError as exc:
            logger.warning("Could not resolve %r: %s", location, exc)
            return FetchResult.fail(f"{LOCATION_ERROR_PREFIX}{exc}")

        try:
            return self.orchestrator.fetch_range(
                place.location_key,
                place.latitude,
                place.longitude,
                start,
                end,
                cancel=cancel,
            )
        except AggregateFetchError as exc:
            return FetchResult.fail(str(exc))


def build_service(settings: Settings, store: RecordStore | None = None) -> SolarDataService:
    """Build a :class:`SolarDataService` backed by the real upstream APIs."""
    store = store or RecordStore.from_url(settings.database_url)
    geocoder = NominatimGeocoder(
        HttpConfig(
            base_url=settings.geocoding_api_base_url,
            timeout=settings.geocoding_timeout,
            user_agent=settings.user_agent,
        )
    )
    provider = SunriseSunsetClient(
        HttpConfig(
            base_url=settings.sunrise_api_base_url,
            timeout=settings.sunrise_api_timeout,
            user_agent=settings.user_agent,
        )
    )
    config = OrchestratorConfig(
        batch_size=settings.batch_size,
        request_delay=settings.request_delay,
        batch_delay=settings.batch_delay,
    )
    return SolarDataService(geocoder, BatchFetchOrchestrator(store, provider, config))
