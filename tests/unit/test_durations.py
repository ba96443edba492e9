"""Tests for time-of-day and duration helpers."""

from datetime import datetime

import pytest

from inutile.durations import (
    REFERENCE_DATE,
    date_from_time,
    difference_in_ms,
    duration_to_decimal,
    is_duration,
    is_time,
    ms_to_duration,
)
from inutile.entities import Duration


class TestIsTime:
    def test_valid_boundaries(self):
        assert is_time("00:00") is True
        assert is_time("23:59") is True

    def test_out_of_range(self):
        assert is_time("24:00") is False
        assert is_time("23:60") is False

    def test_malformed(self):
        assert is_time("2359") is False
        assert is_time("ab:cd") is False
        assert is_time("") is False

    def test_extra_tokens_are_ignored(self):
        assert is_time("10:30:45") is True


class TestIsDuration:
    def test_unbounded_hours(self):
        assert is_duration("120:59") is True
        assert is_duration("0:00") is True

    def test_missing_minutes(self):
        assert is_duration("100") is False

    def test_minutes_over_59(self):
        assert is_duration("50:61") is False

    def test_minutes_must_be_two_characters(self):
        assert is_duration("1:5") is False
        assert is_duration("1:050") is False
        assert is_duration("1:05") is True


class TestDurationToDecimal:
    def test_conversion(self):
        assert duration_to_decimal("1:30") == 1.5
        assert duration_to_decimal("2:45") == 2.75
        assert duration_to_decimal("120:00") == 120.0

    def test_invalid_duration_is_none(self):
        assert duration_to_decimal("100") is None
        assert duration_to_decimal("1:75") is None

    def test_hours_without_number_is_none(self):
        assert duration_to_decimal("x:30") is None


class TestDateFromTime:
    def test_time_on_reference_day(self):
        result = date_from_time("08:05")
        assert result == datetime(2000, 1, 1, 8, 5)
        assert result.date() == REFERENCE_DATE

    def test_invalid_time_is_none(self):
        assert date_from_time("24:00") is None
        assert date_from_time("noon") is None


class TestDifferenceInMs:
    def test_forward_difference(self):
        start = datetime(2000, 1, 1, 10, 0)
        end = datetime(2000, 1, 1, 11, 30)
        assert difference_in_ms(start, end) == 5_400_000

    def test_backward_difference_is_negative(self):
        start = datetime(2000, 1, 1, 11, 30)
        end = datetime(2000, 1, 1, 10, 0)
        assert difference_in_ms(start, end) == -5_400_000

    def test_works_with_date_from_time(self):
        assert difference_in_ms(date_from_time("09:00"), date_from_time("09:01")) == 60_000


class TestMsToDuration:
    def test_ninety_seconds(self):
        assert ms_to_duration(90_000) == Duration(
            mask="00:01", hours=0, minutes=1, seconds=30, milliseconds=0
        )

    def test_all_fields(self):
        result = ms_to_duration(3_723_456)
        assert result.hours == 1
        assert result.minutes == 2
        assert result.seconds == 3
        assert result.milliseconds == 4
        assert result.mask == "01:02"

    def test_hours_do_not_wrap(self):
        result = ms_to_duration(100 * 3_600_000)
        assert result.hours == 100
        assert result.mask == "100:00"

    def test_zero(self):
        assert ms_to_duration(0).mask == "00:00"

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            ms_to_duration(-1)
