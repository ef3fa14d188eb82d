"""
Wire models for daylight planner.

Pydantic models for the per-day records and the aggregate response returned to
callers. Stored rows (``store.SolarRecord``) are converted to these by
``formatting.format_record``; nothing here touches the database or network.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Per-day record
# =============================================================================


class Coordinates(BaseModel):
    """Geographic point in decimal degrees."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Twilight(BaseModel):
    """Twilight band boundaries, each ``HH:MM:SS UTC`` or None."""

    civil_begin: str | None = None
    civil_end: str | None = None
    nautical_begin: str | None = None
    nautical_end: str | None = None
    astronomical_begin: str | None = None
    astronomical_end: str | None = None


class GoldenHourWindow(BaseModel):
    """One golden hour window with ISO-8601 UTC bounds."""

    start: str
    end: str
    description: str


class GoldenHour(BaseModel):
    """Morning and evening golden hour, derived from sunrise and sunset."""

    morning_golden_hour: GoldenHourWindow
    evening_golden_hour: GoldenHourWindow


class SolarDay(BaseModel):
    """One formatted day of solar data, as sent to callers."""

    date: str = Field(..., description="YYYY-MM-DD")
    location: str
    coordinates: Coordinates
    sunrise: str | None = None
    sunset: str | None = None
    solar_noon: str | None = None
    day_length: str | None = Field(default=None, description="HH:MM:SS")
    twilight: Twilight = Field(default_factory=Twilight)
    golden_hour: GoldenHour | None = None


# =============================================================================
# Results
# =============================================================================


class DataSource(StrEnum):
    """Where a successful result came from."""

    CACHE = "cache"
    API = "api"


class FetchResult(BaseModel):
    """Outcome of one location/date-range request.

    On success ``data`` holds every requested day in ascending date order.
    On failure ``data`` is empty and ``error`` summarizes what went wrong.
    """

    success: bool
    message: str = ""
    source: DataSource | None = None
    data: list[SolarDay] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def ok(cls, data: list[SolarDay], source: DataSource, message: str) -> FetchResult:
        return cls(success=True, data=data, source=source, message=message)

    @classmethod
    def fail(cls, error: str) -> FetchResult:
        return cls(success=False, error=error)


class DateRange(BaseModel):
    """Inclusive date range, as YYYY-MM-DD strings."""

    start: str
    end: str


class SolarDataResponse(BaseModel):
    """Aggregate response envelope for a successful request."""

    location: str
    requested_date_range: DateRange
    data_source: DataSource
    message: str
    data: list[SolarDay] = Field(default_factory=list)
    total_days: int = 0

    def to_wire(self) -> dict[str, Any]:
        """Plain JSON-compatible dict."""
        return self.model_dump(mode="json")
