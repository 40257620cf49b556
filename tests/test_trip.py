"""Tests for core.trip: date parsing and inclusive trip duration."""
from datetime import date, datetime, timedelta, timezone

import pytest

from core.models import TripWindow
from core.trip import parse_trip_date, raw_trip_duration, trip_duration


class TestParseTripDate:
    def test_plain_iso_string(self):
        assert parse_trip_date("2025-07-10") == date(2025, 7, 10)

    def test_date_passes_through(self):
        assert parse_trip_date(date(2025, 7, 10)) == date(2025, 7, 10)

    def test_datetime_is_truncated(self):
        assert parse_trip_date(datetime(2025, 7, 10, 23, 59)) == date(2025, 7, 10)

    def test_offset_west_of_utc_keeps_local_calendar_day(self):
        # Midnight in UTC-8 is 08:00 UTC the same day; late evening in
        # UTC-8 would be the next day in UTC.  Neither shifts the date.
        assert parse_trip_date("2025-07-10T00:00:00-08:00") == date(2025, 7, 10)
        assert parse_trip_date("2025-07-10T23:30:00-08:00") == date(2025, 7, 10)

    def test_aware_datetime_keeps_its_own_date(self):
        value = datetime(2025, 7, 10, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert parse_trip_date(value) == date(2025, 7, 10)

    def test_zulu_suffix(self):
        assert parse_trip_date("2025-07-10T00:00:00Z") == date(2025, 7, 10)

    def test_surrounding_whitespace(self):
        assert parse_trip_date("  2025-07-10 ") == date(2025, 7, 10)

    @pytest.mark.parametrize("bad", ["", "next friday", "2025-13-01"])
    def test_unparseable_string_raises(self, bad):
        with pytest.raises(ValueError):
            parse_trip_date(bad)

    def test_non_date_type_raises(self):
        with pytest.raises(TypeError):
            parse_trip_date(20250710)


class TestTripDuration:
    def test_same_day_is_one_day(self):
        assert trip_duration("2025-07-10", "2025-07-10") == 1

    def test_one_week(self):
        assert trip_duration("2025-07-10", "2025-07-16") == 7

    def test_across_month_and_year_boundary(self):
        assert trip_duration("2025-12-30", "2026-01-02") == 4

    def test_across_dst_change_with_offsets(self):
        # US DST starts 2025-03-09; the offset changes from -08:00 to -07:00.
        assert trip_duration("2025-03-08T00:00:00-08:00", "2025-03-10T00:00:00-07:00") == 3

    def test_reversed_window_is_clamped_to_one(self):
        assert trip_duration("2025-07-16", "2025-07-10") == 1

    def test_raw_duration_is_not_clamped(self):
        assert raw_trip_duration("2025-07-16", "2025-07-10") == -5
        assert raw_trip_duration("2025-07-10", "2025-07-09") == 0

    def test_trip_window_property(self):
        window = TripWindow(date(2025, 7, 10), date(2025, 7, 14))
        assert window.trip_days == 5
