"""Geocoding result model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeocodeResult:
    """A place name resolved to coordinates.

    ``display_name`` is canonical and is used verbatim as the cache partition
    key, so two queries that resolve to the same display name share cached days.
    """

    latitude: float
    longitude: float
    display_name: str
    original_query: str

    @property
    def location_key(self) -> str:
        return self.display_name
