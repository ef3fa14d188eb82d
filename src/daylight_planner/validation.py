"""Transport-boundary checks and the response envelope.

The core assumes these checks already hold, so any caller that takes
user input (the CLI, an HTTP handler) must run :func:`validate_request`
before calling ``SolarDataService.get_solar_data``.
"""

from __future__ import annotations

from datetime import date

from daylight_planner.errors import ValidationError
from daylight_planner.schemas import DateRange, FetchResult, SolarDataResponse

MAX_RANGE_DAYS = 365
MAX_YEARS_BACK = 5
MAX_YEARS_AHEAD = 2


def parse_date(value: str | None) -> date | None:
    """Parse ``YYYY-MM-DD``; None for blank or malformed input."""
    if value is None or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def shift_years(day: date, years: int) -> date:
    """Same month/day ``years`` later (Feb 29 falls back to Feb 28)."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)


def validate_request(
    location: str | None,
    start: date | None,
    end: date | None,
    today: date | None = None,
) -> tuple[str, date, date]:
    """
    Check request parameters before they reach the core.

    Args:
        location: Free-text place name.
        start: First requested date.
        end: Last requested date.
        today: Reference date for the past/future limits (defaults to today).

    Returns:
        ``(location, start, end)`` with the location stripped.

    Raises:
        ValidationError: With a message suitable for the end user.
    """
    if location is None or not location.strip():
        raise ValidationError("Location parameter is required")
    if start is None:
        raise ValidationError("Start date parameter is required")
    if end is None:
        raise ValidationError("End date parameter is required")

    if start > end:
        raise ValidationError("Start date must be before or equal to end date")

    range_days = (end - start).days + 1
    if range_days > MAX_RANGE_DAYS:
        msg = f"Date range cannot exceed {MAX_RANGE_DAYS} days (requested: {range_days} days)"
        raise ValidationError(msg)

    today = today or date.today()
    if start < shift_years(today, -MAX_YEARS_BACK):
        raise ValidationError(f"Start date cannot be more than {MAX_YEARS_BACK} years in the past")
    if end > shift_years(today, MAX_YEARS_AHEAD):
        raise ValidationError(
            f"End date cannot be more than {MAX_YEARS_AHEAD} years in the future"
        )

    return location.strip(), start, end


def build_response(
    location: str, start: date, end: date, result: FetchResult
) -> SolarDataResponse:
    """Wrap a successful result in the aggregate response envelope.

    Raises:
        ValueError: If ``result`` is a failure.
    """
    if not result.success or result.source is None:
        raise ValueError(f"Cannot build a response from a failed result: {result.error}")
    return SolarDataResponse(
        location=location,
        requested_date_range=DateRange(start=start.isoformat(), end=end.isoformat()),
        data_source=result.source,
        message=result.message,
        data=result.data,
        total_days=len(result.data),
    )
