"""sunrise-sunset.org data source.

Fetches sunrise, sunset, solar noon, day length and twilight bounds for one
coordinate pair and one date per request.

Public API:
  - day: SunriseSunsetClient (fetch_day)
  - models: ProviderOutcome, ProviderResult
  - client: API URL, timeout, status codes
"""

from daylight_planner.datasources.sunrise_sunset.client import SUNRISE_API, TIMEOUT
from daylight_planner.datasources.sunrise_sunset.day import SunriseSunsetClient
from daylight_planner.datasources.sunrise_sunset.models import ProviderOutcome, ProviderResult

__all__ = [
    "SUNRISE_API",
    "TIMEOUT",
    "ProviderOutcome",
    "ProviderResult",
    "SunriseSunsetClient",
]
