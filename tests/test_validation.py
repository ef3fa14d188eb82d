"""Tests for transport-boundary validation and the response envelope."""

from __future__ import annotations

from datetime import date

import pytest

from daylight_planner.errors import ValidationError
from daylight_planner.schemas import DataSource, FetchResult
from daylight_planner.validation import build_response, parse_date, shift_years, validate_request

TODAY = date(2026, 10, 19)


class TestParseDate:
    def test_valid(self) -> None:
        assert parse_date("2024-01-01") == date(2024, 1, 1)
        assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)

    def test_invalid(self) -> None:
        assert parse_date(None) is None
        assert parse_date("") is None
        assert parse_date("2023-02-29") is None
        assert parse_date("yesterday") is None


class TestShiftYears:
    def test_leap_day_falls_back(self) -> None:
        assert shift_years(date(2024, 2, 29), -5) == date(2019, 2, 28)
        assert shift_years(date(2026, 10, 19), 2) == date(2028, 10, 19)


class TestValidateRequest:
    """The four range checks plus required parameters."""

    def test_valid_request(self) -> None:
        assert validate_request(" Berlin ", date(2026, 1, 1), date(2026, 1, 3), today=TODAY) == (
            "Berlin",
            date(2026, 1, 1),
            date(2026, 1, 3),
        )

    @pytest.mark.parametrize(
        ("location", "start", "end", "message"),
        [
            (None, date(2026, 1, 1), date(2026, 1, 2), "Location parameter is required"),
            ("  ", date(2026, 1, 1), date(2026, 1, 2), "Location parameter is required"),
            ("Berlin", None, date(2026, 1, 2), "Start date parameter is required"),
            ("Berlin", date(2026, 1, 1), None, "End date parameter is required"),
            (
                "Berlin",
                date(2026, 1, 3),
                date(2026, 1, 2),
                "Start date must be before or equal to end date",
            ),
            (
                "Berlin",
                date(2025, 1, 1),
                date(2026, 1, 1),
                "Date range cannot exceed 365 days (requested: 366 days)",
            ),
            (
                "Berlin",
                date(2021, 10, 18),
                date(2021, 10, 20),
                "Start date cannot be more than 5 years in the past",
            ),
            (
                "Berlin",
                date(2028, 10, 1),
                date(2028, 10, 20),
                "End date cannot be more than 2 years in the future",
            ),
        ],
    )
    def test_rejections(
        self, location: str | None, start: date | None, end: date | None, message: str
    ) -> None:
        with pytest.raises(ValidationError) as excinfo:
            validate_request(location, start, end, today=TODAY)
        assert str(excinfo.value) == message

    def test_boundaries_accepted(self) -> None:
        validate_request("Berlin", date(2021, 10, 19), date(2021, 10, 19), today=TODAY)
        validate_request("Berlin", date(2028, 10, 19), date(2028, 10, 19), today=TODAY)
        validate_request("Berlin", date(2026, 1, 1), date(2026, 12, 31), today=TODAY)


class TestBuildResponse:
    def test_envelope(self) -> None:
        result = FetchResult.ok([], DataSource.CACHE, "Data retrieved from cache")
        response = build_response("Berlin", date(2026, 1, 1), date(2026, 1, 3), result)
        wire = response.to_wire()

        assert wire == {
            "location": "Berlin",
            "requested_date_range": {"start": "2026-01-01", "end": "2026-01-03"},
            "data_source": "cache",
            "message": "Data retrieved from cache",
            "data": [],
            "total_days": 0,
        }

    def test_failed_result_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_response("Berlin", date(2026, 1, 1), date(2026, 1, 3), FetchResult.fail("nope"))
