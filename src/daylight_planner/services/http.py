"""
Shared HTTP session factory.

Every upstream client gets its own ``requests.Session`` built from an explicit
:class:`HttpConfig` (base URL, timeout, user agent), so there is no hidden
module-level client state.

Usage::

    from daylight_planner.services.http import HttpConfig, create_session

    config = HttpConfig(base_url="https://api.example.com", timeout=15)
    session = create_session(config)
    resp = session.get(config.url("/json"), params={...})
"""

from __future__ import annotations

from dataclasses import dataclass

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_USER_AGENT = "daylight-planner/0.1 (https://github.com/daylight-planner/daylight-planner)"
DEFAULT_TIMEOUT = 15  # seconds

#: Retry strategy for lookups that are safe to repeat (geocoding).
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=1,  # 0s, 1s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # status codes are interpreted by the caller
)

#: No automatic retries: a failed request is reported to the caller as-is.
NO_RETRY = Retry(total=0, raise_on_status=False)


@dataclass(frozen=True)
class HttpConfig:
    """Connection settings for one upstream service."""

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def url(self, path: str) -> str:
        """Join ``path`` onto the base URL."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


def create_session(
    config: HttpConfig,
    retry: Retry | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` for one upstream service.

    Args:
        config: Base URL, default timeout and user agent.
        retry: Retry strategy (defaults to ``DEFAULT_RETRY``).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = config.user_agent

    # Inject the configured timeout so callers don't need to pass ``timeout=``.
    # Session.request forwards ``timeout=None`` explicitly, so test for None.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = config.timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
