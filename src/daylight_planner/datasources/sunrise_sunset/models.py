"""Provider result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from daylight_planner.errors import UpstreamDayError

if TYPE_CHECKING:
    from datetime import date


class ProviderOutcome(StrEnum):
    """How a single day request ended."""

    OK = "ok"
    INVALID_COORDINATES = "invalid_coordinates"
    INVALID_DATE = "invalid_date"
    UNKNOWN_UPSTREAM_ERROR = "unknown_upstream_error"
    UNRECOGNIZED_STATUS = "unrecognized_status"
    HTTP_ERROR = "http_error"
    NETWORK_FAILURE = "network_failure"
    INTERNAL_FAILURE = "internal_failure"


@dataclass
class ProviderResult:
    """Result of fetching one day from the provider.

    ``payload`` is the full decoded response body and is only set for
    :attr:`ProviderOutcome.OK`.
    """

    day: date
    outcome: ProviderOutcome
    message: str = ""
    payload: dict[str, Any] | None = None
    raw_status: str | None = None
    http_status: int | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.outcome is ProviderOutcome.OK

    @property
    def results(self) -> dict[str, Any]:
        """The ``results`` object of an OK payload (empty otherwise)."""
        if not self.payload:
            return {}
        results: dict[str, Any] = self.payload.get("results") or {}
        return results

    def to_error(self) -> UpstreamDayError:
        """Per-day error for a failed result."""
        return UpstreamDayError(self.day, str(self.outcome), self.message)
