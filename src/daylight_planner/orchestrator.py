"""
Cache-aware batch fetching of a date range.

Given a location and an inclusive date range, the orchestrator:

1. Serves the whole range from the store when every day is already cached.
2. Otherwise walks the range in date order, taking cached days from the store
   and collecting the rest as *missing*.
3. Fetches missing days from the provider in batches, one request at a time,
   pausing between requests and between batches.
4. Stores every day that was fetched successfully.
5. Returns all days in ascending date order, or raises one
   :class:`AggregateFetchError` listing every day that failed.

Failure reporting is all-or-nothing for the request even though the days
that did succeed stay in the store, so the next request only retries the
failed ones.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING, Protocol, TypeVar

from daylight_planner.errors import AggregateFetchError, DuplicateKeyError, FetchCancelled
from daylight_planner.formatting import format_record, format_records
from daylight_planner.schemas import DataSource, FetchResult, SolarDay
from daylight_planner.store import build_record

if TYPE_CHECKING:
    from threading import Event

    from daylight_planner.datasources.sunrise_sunset.models import ProviderResult
    from daylight_planner.errors import UpstreamDayError
    from daylight_planner.store import RecordStore, SolarRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BATCH_SIZE = 10
DEFAULT_REQUEST_DELAY = 0.05  # seconds between day requests
DEFAULT_BATCH_DELAY = 0.2  # seconds between batches

CACHE_MESSAGE = "Data retrieved from cache"
API_MESSAGE = "Data fetched from external API"


class DayProvider(Protocol):
    """Anything that can fetch one day of solar data."""

    def fetch_day(
        self, latitude: float, longitude: float, day: date, place: str | None = None
    ) -> ProviderResult: ...


@dataclass(frozen=True)
class OrchestratorConfig:
    """Batching and pacing parameters."""

    batch_size: int = DEFAULT_BATCH_SIZE
    request_delay: float = DEFAULT_REQUEST_DELAY
    batch_delay: float = DEFAULT_BATCH_DELAY

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")
        if self.request_delay < 0 or self.batch_delay < 0:
            raise ValueError("Delays must be non-negative")


class Pacer:
    """Blocking waits that keep us under the provider's rate limit."""

    def __init__(
        self,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        batch_delay: float = DEFAULT_BATCH_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.request_delay = request_delay
        self.batch_delay = batch_delay
        self._sleep = sleep

    @classmethod
    def from_config(
        cls, config: OrchestratorConfig, sleep: Callable[[float], None] = time.sleep
    ) -> Pacer:
        return cls(config.request_delay, config.batch_delay, sleep=sleep)

    def between_requests(self) -> None:
        if self.request_delay > 0:
            self._sleep(self.request_delay)

    def between_batches(self) -> None:
        if self.batch_delay > 0:
            self._sleep(self.batch_delay)


def date_range(start: date, end: date) -> Iterator[date]:
    """Every date from ``start`` to ``end`` inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Split ``items`` into consecutive slices of at most ``size``."""
    for i in range(0, len(items), size):
        yield items[i : i + size]


class BatchFetchOrchestrator:
    """Fills a date range from the store, fetching only the missing days."""

    def __init__(
        self,
        store: RecordStore,
        provider: DayProvider,
        config: OrchestratorConfig | None = None,
        pacer: Pacer | None = None,
    ) -> None:
        self.store = store
        self.provider = provider
        self.config = config or OrchestratorConfig()
        self.pacer = pacer or Pacer.from_config(self.config)

    def fetch_range(
        self,
        location_key: str,
        latitude: float,
        longitude: float,
        start: date,
        end: date,
        cancel: Event | None = None,
    ) -> FetchResult:
        """
        Return every day in ``[start, end]`` for ``location_key``.

        Args:
            location_key: Canonical location name (cache partition key).
            latitude: Decimal degrees.
            longitude: Decimal degrees.
            start: First date (inclusive); the caller guarantees ``start <= end``.
            end: Last date (inclusive).
            cancel: Optional event; once set, no further provider calls are made.

        Returns:
            Successful FetchResult tagged ``cache`` when no request was needed,
            ``api`` otherwise.

        Raises:
            AggregateFetchError: One or more days could not be fetched.
            FetchCancelled: ``cancel`` was set before the range completed.
        """
        if self.store.is_range_complete(location_key, start, end):
            logger.info("Cache hit for %s %s..%s", location_key, start, end)
            records = self.store.load_range(location_key, start, end)
            return FetchResult.ok(format_records(records), DataSource.CACHE, CACHE_MESSAGE)

        days: list[SolarDay] = []
        missing: list[date] = []
        for day in date_range(start, end):
            existing = (
                self.store.find_for_date(location_key, day)
                if self.store.exists_for_date(location_key, day)
                else None
            )
            if existing is not None:
                days.append(format_record(existing))
            else:
                missing.append(day)

        logger.info(
            "%s %s..%s: %d cached, %d to fetch",
            location_key,
            start,
            end,
            len(days),
            len(missing),
        )

        errors: list[UpstreamDayError] = []
        for batch_number, batch in enumerate(chunked(missing, self.config.batch_size)):
            if batch_number > 0:
                self.pacer.between_batches()
            logger.debug("Fetching batch %d (%d days)", batch_number + 1, len(batch))
            for i, day in enumerate(batch):
                if i > 0:
                    self.pacer.between_requests()
                if cancel is not None and cancel.is_set():
                    raise FetchCancelled(f"Cancelled before fetching {day.isoformat()}")

                result = self.provider.fetch_day(latitude, longitude, day, place=location_key)
                if not result.ok:
                    error = result.to_error()
                    logger.warning("Fetch failed: %s", error)
                    errors.append(error)
                    continue

                record = self._store_result(location_key, latitude, longitude, result)
                days.append(format_record(record))

        if errors:
            raise AggregateFetchError(errors)

        days.sort(key=lambda d: d.date)
        return FetchResult.ok(days, DataSource.API, API_MESSAGE)

    def _store_result(
        self,
        location_key: str,
        latitude: float,
        longitude: float,
        result: ProviderResult,
    ) -> SolarRecord:
        """Persist a fetched day; a concurrent insert of the same day wins."""
        record = build_record(location_key, latitude, longitude, result.day, result.results)
        try:
            return self.store.insert(record)
        except DuplicateKeyError:
            logger.info("%s %s was stored concurrently, using stored row", location_key, result.day)
            existing = self.store.find_for_date(location_key, result.day)
            if existing is None:
                raise
            return existing
