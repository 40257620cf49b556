"""Tests for core.forecast: mock and live providers, padding, dispatch."""
import urllib.error
from datetime import date, timedelta

import pytest

from core.config import Settings
from core.forecast import (
    MOCK_CONDITIONS,
    condition_text,
    format_day_label,
    get_forecast,
    get_forecast_live,
    get_forecast_mock,
    pad_forecast,
)
from core.models import Destination, ForecastDay, TripWindow
from core.weather import RAIN_MARKER

LISBON = Destination("Lisbon, Portugal", latitude=38.72, longitude=-9.14)


def upcoming_window(days: int, offset: int = 1) -> TripWindow:
    start = date.today() + timedelta(days=offset)
    return TripWindow(start, start + timedelta(days=days - 1))


class TestMockProvider:
    def test_one_day_per_trip_day(self):
        window = TripWindow(date(2025, 7, 10), date(2025, 7, 16))
        assert len(get_forecast_mock(window, seed=1)) == 7

    def test_values_stay_in_range(self):
        window = TripWindow(date(2025, 7, 1), date(2025, 7, 30))
        for day in get_forecast_mock(window, seed=7):
            assert 65 <= day.high <= 79
            assert 45 <= day.low <= 59
            assert day.conditions in MOCK_CONDITIONS

    def test_seed_makes_it_reproducible(self):
        window = TripWindow(date(2025, 7, 10), date(2025, 7, 20))
        assert get_forecast_mock(window, seed=42) == get_forecast_mock(window, seed=42)

    def test_labels_follow_the_calendar(self):
        window = TripWindow(date(2025, 7, 10), date(2025, 7, 11))
        labels = [d.label for d in get_forecast_mock(window, seed=0)]
        assert labels == ["Thu, Jul 10", "Fri, Jul 11"]


def test_format_day_label_has_no_zero_padding():
    assert format_day_label(date(2025, 3, 2)) == "Sun, Mar 2"


class TestPadForecast:
    def test_repeats_last_day(self):
        days = [ForecastDay("a", 70, 50, "Sunny"), ForecastDay("b", 60, 40, "Light Rain")]
        padded = pad_forecast(days, 4)
        assert len(padded) == 4
        assert [(d.high, d.conditions) for d in padded[1:]] == [(60, "Light Rain")] * 3

    def test_truncates_long_forecast(self):
        days = [ForecastDay(str(i), 70, 50, "Sunny") for i in range(5)]
        assert len(pad_forecast(days, 2)) == 2

    def test_empty_stays_empty(self):
        assert pad_forecast([], 3) == []

    def test_does_not_mutate_input(self):
        days = [ForecastDay("a", 70, 50, "Sunny")]
        pad_forecast(days, 3)
        assert len(days) == 1


@pytest.mark.parametrize("code", [51, 53, 61, 63, 65, 66, 80, 81, 82, 95])
def test_rainy_wmo_codes_contain_rain_marker(code):
    assert RAIN_MARKER in condition_text(code)


@pytest.mark.parametrize("code", [0, 1, 2, 3, 45, 71, 73])
def test_dry_wmo_codes_have_no_rain_marker(code):
    assert RAIN_MARKER not in condition_text(code)


def test_unknown_wmo_code():
    assert condition_text(None) == "Unknown"
    assert condition_text(1234) == "Unknown"


class TestLiveProvider:
    def test_parses_and_pads(self, fake_urlopen):
        window = upcoming_window(5, offset=0)
        start = window.start_date
        calls = fake_urlopen({
            "daily": {
                "time": [(start + timedelta(days=i)).isoformat() for i in range(3)],
                "temperature_2m_max": [30.0, 20.0, 25.0],
                "temperature_2m_min": [20.0, 10.0, 15.0],
                "weather_code": [0, 61, 3],
            }
        })

        forecast = get_forecast_live(window, LISBON)

        assert len(calls) == 1
        assert "latitude=38.72" in calls[0]
        assert len(forecast) == 5
        assert [d.high for d in forecast[:3]] == [86, 68, 77]
        assert [d.low for d in forecast[:3]] == [68, 50, 59]
        assert [d.conditions for d in forecast] == [
            "Sunny", "Light Rain", "Cloudy", "Cloudy", "Cloudy",
        ]
        assert forecast[0].label == format_day_label(start)

    def test_skips_days_with_missing_temperatures(self, fake_urlopen):
        window = upcoming_window(2, offset=0)
        start = window.start_date
        fake_urlopen({
            "daily": {
                "time": [start.isoformat(), (start + timedelta(days=1)).isoformat()],
                "temperature_2m_max": [None, 20.0],
                "temperature_2m_min": [None, 10.0],
                "weather_code": [0, 3],
            }
        })
        forecast = get_forecast_live(window, LISBON)
        assert [d.high for d in forecast] == [68, 68]

    def test_network_failure_falls_back_to_mock(self, fake_urlopen):
        window = upcoming_window(4)
        fake_urlopen(error=urllib.error.URLError("offline"))
        forecast = get_forecast_live(window, LISBON, fallback_seed=3)
        assert forecast == get_forecast_mock(window, seed=3)

    def test_empty_payload_falls_back_to_mock(self, fake_urlopen):
        window = upcoming_window(2)
        fake_urlopen({"daily": {}})
        assert len(get_forecast_live(window, LISBON)) == 2

    def test_beyond_horizon_never_calls_api(self, fake_urlopen):
        window = upcoming_window(3, offset=40)
        calls = fake_urlopen(error=AssertionError("should not be called"))
        assert len(get_forecast_live(window, LISBON)) == 3
        assert calls == []

    def test_trip_already_started_uses_mock_with_trip_dates(self, fake_urlopen):
        window = upcoming_window(4, offset=-2)
        calls = fake_urlopen(error=AssertionError("should not be called"))
        forecast = get_forecast_live(window, LISBON, fallback_seed=9)
        assert forecast == get_forecast_mock(window, seed=9)
        assert forecast[0].label == format_day_label(window.start_date)
        assert calls == []

    @pytest.mark.parametrize("daily", [
        {"time": ["not-a-date"], "temperature_2m_max": [20.0], "temperature_2m_min": [10.0]},
        {"time": ["2025-07-10"], "temperature_2m_max": ["hot"], "temperature_2m_min": [10.0]},
        {"time": ["2025-07-10"], "temperature_2m_max": [20.0], "temperature_2m_min": [10.0],
         "weather_code": ["x"]},
        ["not", "a", "dict"],
    ])
    def test_malformed_payload_falls_back_to_mock(self, fake_urlopen, daily):
        window = upcoming_window(2, offset=0)
        fake_urlopen({"daily": daily})
        forecast = get_forecast_live(window, LISBON, fallback_seed=4)
        assert forecast == get_forecast_mock(window, seed=4)

    def test_query_starts_on_first_trip_day(self, fake_urlopen):
        window = upcoming_window(3, offset=2)
        calls = fake_urlopen({"daily": {}})
        get_forecast_live(window, LISBON)
        assert f"start_date={window.start_date.isoformat()}" in calls[0]


class TestDispatch:
    def test_mock_by_default(self, fake_urlopen):
        calls = fake_urlopen(error=AssertionError("should not be called"))
        window = upcoming_window(3)
        forecast = get_forecast(window, Settings(forecast_seed=5), LISBON)
        assert forecast == get_forecast_mock(window, seed=5)
        assert calls == []

    def test_live_without_coordinates_uses_mock(self, fake_urlopen):
        calls = fake_urlopen(error=AssertionError("should not be called"))
        settings = Settings(use_live_weather=True)
        forecast = get_forecast(upcoming_window(2), settings, Destination("Somewhere"))
        assert len(forecast) == 2
        assert calls == []

    def test_live_with_coordinates_calls_api(self, fake_urlopen):
        window = upcoming_window(1, offset=0)
        calls = fake_urlopen({
            "daily": {
                "time": [window.start_date.isoformat()],
                "temperature_2m_max": [10.0],
                "temperature_2m_min": [0.0],
                "weather_code": [73],
            }
        })
        forecast = get_forecast(window, Settings(use_live_weather=True), LISBON)
        assert len(calls) == 1
        assert (forecast[0].high, forecast[0].low, forecast[0].conditions) == (50, 32, "Snow")
