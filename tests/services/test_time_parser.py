"""Tests for reading times from spreadsheet cells."""

from datetime import time, timedelta

import pytest

from swimqualifiers.models import format_seconds
from swimqualifiers.services.time_parser import parse_time_to_seconds


class TestParseTimeToSeconds:
    """Tests for parse_time_to_seconds."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("59.45", 59.45),
            ("1:05.79", 65.79),
            ("12:34.56", 754.56),
            ("1:02:03.5", 3723.5),
            ("25.9", 25.9),
            ("31", 31.0),
            (" 29,87 ", 29.87),
            ("0:45.67", 45.67),
        ],
    )
    def test_strings(self, value, expected):
        assert parse_time_to_seconds(value) == pytest.approx(expected)

    def test_numbers_are_seconds(self):
        assert parse_time_to_seconds(73.37) == 73.37
        assert parse_time_to_seconds(60) == 60.0

    def test_time_cells(self):
        """Time-formatted cells arrive as datetime.time or timedelta."""
        assert parse_time_to_seconds(time(0, 1, 5, 790000)) == pytest.approx(65.79)
        assert parse_time_to_seconds(timedelta(minutes=2, seconds=3.5)) == pytest.approx(123.5)

    @pytest.mark.parametrize("value", [None, "", "   ", "nan", "NT", "DQ", "dnf", "abc", "1:xx", True])
    def test_no_time(self, value):
        assert parse_time_to_seconds(value) is None

    def test_float_nan(self):
        assert parse_time_to_seconds(float("nan")) is None


class TestFormatSeconds:
    """Tests for format_seconds."""

    def test_seconds_only(self):
        assert format_seconds(59.45) == "59.45"

    def test_with_minutes(self):
        assert format_seconds(65.79) == "1:05.79"

    def test_long_event(self):
        assert format_seconds(1000.5) == "16:40.50"

    def test_negative(self):
        assert format_seconds(-5.0) == "-5.00"
        assert format_seconds(-65.79) == "-1:05.79"

    def test_not_finite(self):
        assert format_seconds(float("nan")) == "nan"
        assert format_seconds(float("inf")) == "inf"
