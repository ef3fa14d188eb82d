"""Nominatim (OpenStreetMap) geocoding API constants.

API docs: https://nominatim.org/release-docs/latest/api/Search/
Usage policy: max 1 req/s and an identifying User-Agent.
"""

NOMINATIM_API = "https://nominatim.openstreetmap.org"
SEARCH_ENDPOINT = "/search"
TIMEOUT = 10  # seconds

# Address keys tried in order for the "city" part of a display name
CITY_KEYS = ("city", "town", "village", "municipality")
