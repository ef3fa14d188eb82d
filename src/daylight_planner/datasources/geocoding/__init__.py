"""Nominatim geocoding data source.

Turns a free-text place name into coordinates plus a canonical display name
(the cache partition key).

Public API:
  - search: NominatimGeocoder (resolve), format_display_name
  - models: GeocodeResult
"""

from daylight_planner.datasources.geocoding.client import NOMINATIM_API
from daylight_planner.datasources.geocoding.models import GeocodeResult
from daylight_planner.datasources.geocoding.search import NominatimGeocoder, format_display_name

__all__ = [
    "NOMINATIM_API",
    "GeocodeResult",
    "NominatimGeocoder",
    "format_display_name",
]
