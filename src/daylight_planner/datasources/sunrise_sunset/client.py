"""sunrise-sunset.org API constants.

API docs: https://sunrise-sunset.org/api

One GET per day; the API has no multi-day endpoint and no documented
concurrency allowance, so requests are made one at a time.
"""

SUNRISE_API = "https://api.sunrise-sunset.org"
DAY_ENDPOINT = "/json"
TIMEOUT = 15  # seconds per day request

# Values of the ``status`` field in the response body
STATUS_OK = "OK"
STATUS_INVALID_REQUEST = "INVALID_REQUEST"
STATUS_INVALID_DATE = "INVALID_DATE"
STATUS_UNKNOWN_ERROR = "UNKNOWN_ERROR"
