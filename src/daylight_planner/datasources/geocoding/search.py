"""Free-text place search via Nominatim."""

from __future__ import annotations

import logging
from typing import Any

import requests

from daylight_planner.datasources.geocoding.client import (
    CITY_KEYS,
    NOMINATIM_API,
    SEARCH_ENDPOINT,
    TIMEOUT,
)
from daylight_planner.datasources.geocoding.models import GeocodeResult
from daylight_planner.errors import LocationResolutionError
from daylight_planner.services.http import HttpConfig, create_session

logger = logging.getLogger(__name__)


def format_display_name(result: dict[str, Any], query: str) -> str:
    """
    Build a short canonical name such as ``"Berlin, Germany"``.

    Uses the first of city/town/village/municipality plus the country. Falls
    back to the first segment of Nominatim's ``display_name``, then to the
    title-cased query.
    """
    address: dict[str, Any] = result.get("address") or {}
    parts: list[str] = []

    city = next((address[k] for k in CITY_KEYS if address.get(k)), None)
    if city:
        parts.append(city)
        country = address.get("country")
        if country:
            parts.append(country)

    if parts:
        return ", ".join(parts)

    raw_display = result.get("display_name")
    if raw_display:
        return str(raw_display).split(",")[0].strip()
    return query.title()


class NominatimGeocoder:
    """Resolves a place name to coordinates and a canonical display name."""

    def __init__(
        self,
        config: HttpConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or HttpConfig(base_url=NOMINATIM_API, timeout=TIMEOUT)
        self.session = session or create_session(self.config)

    def resolve(self, name: str) -> GeocodeResult:
        """
        Look up ``name`` and return the best match.

        Raises:
            LocationResolutionError: Empty input, no match, bad coordinates,
                or the geocoding service could not be reached.
        """
        query = (name or "").strip()
        if not query:
            raise LocationResolutionError("Location name cannot be empty")

        params: dict[str, Any] = {
            "q": query,
            "format": "json",
            "limit": 1,
            "addressdetails": 1,
        }
        try:
            resp = self.session.get(
                self.config.url(SEARCH_ENDPOINT), params=params, timeout=self.config.timeout
            )
            if not resp.ok:
                msg = f"Geocoding service unavailable (HTTP {resp.status_code})"
                raise LocationResolutionError(msg)
            results: list[dict[str, Any]] = resp.json()
        except LocationResolutionError:
            raise
        except ValueError as exc:  # includes an undecodable body
            msg = f"Unexpected error during geocoding: {exc}"
            raise LocationResolutionError(msg) from exc
        except requests.RequestException as exc:
            msg = f"Network error while geocoding: {exc}"
            raise LocationResolutionError(msg) from exc

        if not results:
            msg = (
                f"Location '{query}' not found. Please try a more specific name "
                "like 'Lisbon, Portugal' or check spelling."
            )
            raise LocationResolutionError(msg)

        best = results[0]
        try:
            latitude = float(best["lat"])
            longitude = float(best["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            msg = f"Unexpected error during geocoding: {exc}"
            raise LocationResolutionError(msg) from exc

        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            raise LocationResolutionError(f"Invalid coordinates received for '{query}'")

        display_name = format_display_name(best, query)
        logger.debug("Geocoded %r -> %s (%s, %s)", query, display_name, latitude, longitude)
        return GeocodeResult(
            latitude=latitude,
            longitude=longitude,
            display_name=display_name,
            original_query=query,
        )
