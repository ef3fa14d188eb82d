"""Conversions between upstream wire values and stored/displayed values.

The sunrise provider (``formatted=0``) reports event times as ISO-8601
timestamps and day length as a number of seconds. We store aware UTC
datetimes and an ``HH:MM:SS`` day length string, and render times as
``HH:MM:SS UTC``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

UTC_TIME_FORMAT = "%H:%M:%S UTC"


def parse_api_time(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Returns None for blank or unparseable input. Naive timestamps are
    assumed to already be in UTC.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return ensure_utc(parsed)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime or convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_day_length(seconds: Any) -> str | None:
    """Format a duration in seconds as ``HH:MM:SS``.

    Hours are not wrapped, so a polar day of 86400 seconds is ``24:00:00``.
    Anything that is not a real number (including booleans) yields None.
    """
    if isinstance(seconds, bool) or not isinstance(seconds, int | float):
        return None
    total = int(seconds)
    if total < 0:
        return None
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_utc_time(value: datetime | None) -> str | None:
    """Render the time of day of ``value`` as ``HH:MM:SS UTC``."""
    if value is None:
        return None
    return ensure_utc(value).strftime(UTC_TIME_FORMAT)


def to_iso_timestamp(value: datetime | None) -> str | None:
    """Render ``value`` as an ISO-8601 UTC timestamp."""
    if value is None:
        return None
    return ensure_utc(value).isoformat()
