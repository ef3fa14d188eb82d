"""Exception hierarchy.

Per-day upstream failures are collected as values while a range is being
fetched; only the final summary is raised, as :class:`AggregateFetchError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


class DaylightError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(DaylightError):
    """Request parameters rejected at the transport boundary."""


class LocationResolutionError(DaylightError):
    """A place name could not be geocoded."""


class UpstreamDayError(DaylightError):
    """One date could not be fetched from the sunrise provider."""

    def __init__(self, day: date, outcome: str, message: str) -> None:
        self.day = day
        self.outcome = outcome
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.day.isoformat()}: {self.message}"


class AggregateFetchError(DaylightError):
    """Every per-day failure of one request, joined into a single error."""

    def __init__(self, errors: list[UpstreamDayError]) -> None:
        self.errors = errors
        super().__init__(str(self))

    def __str__(self) -> str:
        return "Failed to fetch some data: " + "; ".join(str(e) for e in self.errors)


class DuplicateKeyError(DaylightError):
    """A record for (location, date) already exists in the store."""

    def __init__(self, location_key: str, day: date) -> None:
        self.location_key = location_key
        self.day = day
        super().__init__(f"{location_key!r} already has sunrise data for {day.isoformat()}")


class FetchCancelled(DaylightError):
    """The caller cancelled a range fetch before it completed."""
