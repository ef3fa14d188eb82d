"""Shared fixtures: in-memory record store, fake provider and geocoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from daylight_planner.datasources.geocoding import GeocodeResult
from daylight_planner.datasources.sunrise_sunset import ProviderOutcome, ProviderResult
from daylight_planner.errors import LocationResolutionError
from daylight_planner.store import RecordStore, build_record

BERLIN = GeocodeResult(
    latitude=52.517037,
    longitude=13.38886,
    display_name="Berlin, Germany",
    original_query="berlin",
)


def make_results(day: date) -> dict[str, Any]:
    """A ``results`` object as returned with ``formatted=0``."""

    def at(hour: int, minute: int, second: int = 0) -> str:
        return datetime(day.year, day.month, day.day, hour, minute, second).isoformat() + "+00:00"

    return {
        "sunrise": at(7, 17, 19),
        "sunset": at(15, 2, 41),
        "solar_noon": at(11, 10, 0),
        "day_length": 27562,
        "civil_twilight_begin": at(6, 37, 52),
        "civil_twilight_end": at(15, 42, 8),
        "nautical_twilight_begin": at(5, 54, 6),
        "nautical_twilight_end": at(16, 25, 54),
        "astronomical_twilight_begin": at(5, 13, 32),
        "astronomical_twilight_end": at(17, 6, 28),
    }


def make_payload(day: date) -> dict[str, Any]:
    return {"status": "OK", "results": make_results(day), "tzid": "UTC"}


def days_between(start: date, end: date) -> list[date]:
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


@dataclass
class FakeProvider:
    """Records every ``fetch_day`` call; fails the dates listed in ``failures``."""

    failures: dict[date, ProviderOutcome] = field(default_factory=dict)
    calls: list[date] = field(default_factory=list)
    events: list[str] | None = None

    def fetch_day(
        self, latitude: float, longitude: float, day: date, place: str | None = None
    ) -> ProviderResult:
        self.calls.append(day)
        if self.events is not None:
            self.events.append("call")
        if day in self.failures:
            return ProviderResult(
                day=day, outcome=self.failures[day], message=f"Invalid date: {day.isoformat()}"
            )
        return ProviderResult(day=day, outcome=ProviderOutcome.OK, payload=make_payload(day))


@dataclass
class FakeGeocoder:
    """Resolves every name to ``result``, or raises for names in ``unknown``."""

    result: GeocodeResult = BERLIN
    unknown: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    def resolve(self, name: str) -> GeocodeResult:
        self.calls.append(name)
        if not name.strip():
            raise LocationResolutionError("Location name cannot be empty")
        if name in self.unknown:
            raise LocationResolutionError(f"Location '{name}' not found.")
        return self.result


@pytest.fixture
def store() -> RecordStore:
    """Empty in-memory record store with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    s = RecordStore(engine)
    s.create_schema()
    return s


@pytest.fixture
def seed(store: RecordStore):
    """Insert a Berlin record for each given date."""

    def _seed(*days: date) -> None:
        for day in days:
            store.insert(
                build_record(
                    BERLIN.display_name, BERLIN.latitude, BERLIN.longitude, day, make_results(day)
                )
            )

    return _seed
