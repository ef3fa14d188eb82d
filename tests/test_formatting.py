"""Tests for record formatting and golden hour derivation."""

from __future__ import annotations

from datetime import UTC, date, datetime

from daylight_planner.formatting import (
    EVENING_DESCRIPTION,
    MORNING_DESCRIPTION,
    format_record,
    format_records,
    golden_hour,
)
from daylight_planner.store import SolarRecord, build_record

from .conftest import BERLIN, make_results


def _record(day: date = date(2024, 1, 1), **overrides: object) -> SolarRecord:
    record = build_record(
        BERLIN.display_name, BERLIN.latitude, BERLIN.longitude, day, make_results(day)
    )
    for name, value in overrides.items():
        setattr(record, name, value)
    return record


class TestGoldenHour:
    """Golden hour is derived from sunrise/sunset."""

    def test_windows(self) -> None:
        sunrise = datetime(2024, 1, 1, 7, 17, 19, tzinfo=UTC)
        sunset = datetime(2024, 1, 1, 15, 2, 41, tzinfo=UTC)
        result = golden_hour(sunrise, sunset)

        assert result is not None
        assert result.morning_golden_hour.start == "2024-01-01T07:17:19+00:00"
        assert result.morning_golden_hour.end == "2024-01-01T08:17:19+00:00"
        assert result.morning_golden_hour.description == MORNING_DESCRIPTION
        assert result.evening_golden_hour.start == "2024-01-01T14:02:41+00:00"
        assert result.evening_golden_hour.end == "2024-01-01T15:02:41+00:00"
        assert result.evening_golden_hour.description == EVENING_DESCRIPTION

    def test_polar_night_has_no_golden_hour(self) -> None:
        assert golden_hour(None, None) is None

    def test_one_event_missing(self) -> None:
        sunrise = datetime(2024, 6, 21, 1, 0, tzinfo=UTC)
        assert golden_hour(sunrise, None) is None
        assert golden_hour(None, sunrise) is None


class TestFormatRecord:
    """Stored record -> wire shape."""

    def test_wire_shape(self) -> None:
        wire = format_record(_record()).model_dump()

        assert wire["date"] == "2024-01-01"
        assert wire["location"] == "Berlin, Germany"
        assert wire["coordinates"] == {"latitude": 52.517037, "longitude": 13.38886}
        assert wire["sunrise"] == "07:17:19 UTC"
        assert wire["sunset"] == "15:02:41 UTC"
        assert wire["solar_noon"] == "11:10:00 UTC"
        assert wire["day_length"] == "07:39:22"
        assert wire["twilight"] == {
            "civil_begin": "06:37:52 UTC",
            "civil_end": "15:42:08 UTC",
            "nautical_begin": "05:54:06 UTC",
            "nautical_end": "16:25:54 UTC",
            "astronomical_begin": "05:13:32 UTC",
            "astronomical_end": "17:06:28 UTC",
        }
        assert set(wire["golden_hour"]) == {"morning_golden_hour", "evening_golden_hour"}

    def test_polar_record_nulls(self) -> None:
        record = _record(
            sunrise=None,
            sunset=None,
            day_length=None,
            civil_twilight_begin=None,
            civil_twilight_end=None,
        )
        day = format_record(record)

        assert day.sunrise is None
        assert day.sunset is None
        assert day.day_length is None
        assert day.golden_hour is None
        assert day.twilight.civil_begin is None
        assert day.twilight.nautical_begin == "05:54:06 UTC"

    def test_naive_stored_times_treated_as_utc(self) -> None:
        record = _record(sunrise=datetime(2024, 1, 1, 7, 17, 19))
        day = format_record(record)
        assert day.sunrise == "07:17:19 UTC"
        assert day.golden_hour is not None
        assert day.golden_hour.morning_golden_hour.start == "2024-01-01T07:17:19+00:00"

    def test_format_records_keeps_order(self) -> None:
        records = [_record(date(2024, 1, 2)), _record(date(2024, 1, 1))]
        assert [d.date for d in format_records(records)] == ["2024-01-02", "2024-01-01"]
