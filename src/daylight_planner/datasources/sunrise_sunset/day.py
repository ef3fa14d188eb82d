"""Single-day solar data from the sunrise-sunset.org API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from daylight_planner.datasources.sunrise_sunset.client import (
    DAY_ENDPOINT,
    STATUS_INVALID_DATE,
    STATUS_INVALID_REQUEST,
    STATUS_OK,
    STATUS_UNKNOWN_ERROR,
    SUNRISE_API,
    TIMEOUT,
)
from daylight_planner.datasources.sunrise_sunset.models import ProviderOutcome, ProviderResult
from daylight_planner.services.http import NO_RETRY, HttpConfig, create_session

if TYPE_CHECKING:
    from datetime import date

logger = logging.getLogger(__name__)


class SunriseSunsetClient:
    """Fetches one day of solar data per call.

    Nothing is retried: every problem (bad status, timeout, broken body) is
    returned as a non-OK :class:`ProviderResult` for that day.
    """

    def __init__(
        self,
        config: HttpConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or HttpConfig(base_url=SUNRISE_API, timeout=TIMEOUT)
        self.session = session or create_session(self.config, retry=NO_RETRY)

    def fetch_day(
        self,
        latitude: float,
        longitude: float,
        day: date,
        place: str | None = None,
    ) -> ProviderResult:
        """
        Fetch sunrise, sunset, solar noon and twilight for one date.

        Args:
            latitude: Decimal degrees.
            longitude: Decimal degrees.
            day: The calendar date to fetch.
            place: Display name used in error messages.

        Returns:
            ProviderResult; ``payload`` holds the decoded body when OK.
        """
        params: dict[str, Any] = {
            "lat": latitude,
            "lng": longitude,
            "date": day.isoformat(),
            "formatted": 0,
        }
        try:
            resp = self.session.get(
                self.config.url(DAY_ENDPOINT), params=params, timeout=self.config.timeout
            )
            if not resp.ok:
                return ProviderResult(
                    day=day,
                    outcome=ProviderOutcome.HTTP_ERROR,
                    message=f"Sunrise API unavailable (HTTP {resp.status_code})",
                    http_status=resp.status_code,
                )
            data: dict[str, Any] = resp.json()
            return self._interpret(day, data, place or f"({latitude}, {longitude})")
        except (requests.Timeout, requests.ConnectionError) as exc:
            logger.warning("Network error fetching %s: %s", day, exc)
            return ProviderResult(
                day=day,
                outcome=ProviderOutcome.NETWORK_FAILURE,
                message=f"Network error while fetching sunrise data: {exc}",
            )
        except Exception as exc:  # noqa: BLE001 - reported as this day's error
            logger.warning("Unexpected error fetching %s", day, exc_info=True)
            return ProviderResult(
                day=day,
                outcome=ProviderOutcome.INTERNAL_FAILURE,
                message=f"Unexpected error: {exc}",
            )

    @staticmethod
    def _interpret(day: date, data: dict[str, Any], place: str) -> ProviderResult:
        """Map the body's ``status`` field to an outcome."""
        status = data.get("status")
        if status == STATUS_OK:
            return ProviderResult(
                day=day, outcome=ProviderOutcome.OK, payload=data, raw_status=status
            )
        if status == STATUS_INVALID_REQUEST:
            outcome = ProviderOutcome.INVALID_COORDINATES
            message = f"Invalid coordinates for {place}"
        elif status == STATUS_INVALID_DATE:
            outcome = ProviderOutcome.INVALID_DATE
            message = f"Invalid date: {day.isoformat()}"
        elif status == STATUS_UNKNOWN_ERROR:
            outcome = ProviderOutcome.UNKNOWN_UPSTREAM_ERROR
            message = "External API error - please try again later"
        else:
            outcome = ProviderOutcome.UNRECOGNIZED_STATUS
            message = f"Unexpected API response status: {status}"
        return ProviderResult(day=day, outcome=outcome, message=message, raw_status=status)
