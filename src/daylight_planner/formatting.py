"""Stored record -> wire record conversion.

Golden hour is derived here on every read instead of being stored, so the
one-hour rule can change without touching existing rows.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from daylight_planner.schemas import (
    Coordinates,
    GoldenHour,
    GoldenHourWindow,
    SolarDay,
    Twilight,
)
from daylight_planner.timecodec import ensure_utc, format_utc_time, to_iso_timestamp

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from daylight_planner.store import SolarRecord

GOLDEN_HOUR = timedelta(hours=1)
MORNING_DESCRIPTION = "Soft morning light ideal for photography"
EVENING_DESCRIPTION = "Warm evening light ideal for photography"


def golden_hour(sunrise: datetime | None, sunset: datetime | None) -> GoldenHour | None:
    """
    Golden hour windows for a day.

    Morning is ``[sunrise, sunrise + 1h]`` and evening is ``[sunset - 1h, sunset]``.
    Returns None when either event is missing (polar day or night).
    """
    if sunrise is None or sunset is None:
        return None
    sunrise = ensure_utc(sunrise)
    sunset = ensure_utc(sunset)
    return GoldenHour(
        morning_golden_hour=GoldenHourWindow(
            start=to_iso_timestamp(sunrise) or "",
            end=to_iso_timestamp(sunrise + GOLDEN_HOUR) or "",
            description=MORNING_DESCRIPTION,
        ),
        evening_golden_hour=GoldenHourWindow(
            start=to_iso_timestamp(sunset - GOLDEN_HOUR) or "",
            end=to_iso_timestamp(sunset) or "",
            description=EVENING_DESCRIPTION,
        ),
    )


def format_record(record: SolarRecord) -> SolarDay:
    """Convert a stored record into its wire shape."""
    return SolarDay(
        date=record.date.isoformat(),
        location=record.location,
        coordinates=Coordinates(
            latitude=float(record.latitude),
            longitude=float(record.longitude),
        ),
        sunrise=format_utc_time(record.sunrise),
        sunset=format_utc_time(record.sunset),
        solar_noon=format_utc_time(record.solar_noon),
        day_length=record.day_length,
        twilight=Twilight(
            civil_begin=format_utc_time(record.civil_twilight_begin),
            civil_end=format_utc_time(record.civil_twilight_end),
            nautical_begin=format_utc_time(record.nautical_twilight_begin),
            nautical_end=format_utc_time(record.nautical_twilight_end),
            astronomical_begin=format_utc_time(record.astronomical_twilight_begin),
            astronomical_end=format_utc_time(record.astronomical_twilight_end),
        ),
        golden_hour=golden_hour(record.sunrise, record.sunset),
    )


def format_records(records: Iterable[SolarRecord]) -> list[SolarDay]:
    return [format_record(r) for r in records]
