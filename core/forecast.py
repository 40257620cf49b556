# =============================================================================
# core/forecast.py  —  Forecast Retrieval (collaborator)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Produces the list[ForecastDay] that core/weather.py analyzes, either
#   from MOCK data or from the LIVE Open-Meteo API.
#
# DATA SOURCE TOGGLE:
#   Settings.use_live_weather (USE_LIVE_WEATHER=true) selects Open-Meteo.
#   The live provider also needs coordinates, which come from destination
#   search (core/destinations.py).  Without them we use the mock.
#
# THE CONTRACT WITH THE ANALYZER:
#   1. One ForecastDay per trip day.  Open-Meteo only looks 16 days ahead,
#      so short forecasts are padded by repeating the last known day
#      (pad_forecast).
#   2. Every rainy condition contains the literal text "Rain".  The WMO
#      table below spells drizzle and showers as rain for that reason.
#   3. Temperatures are Fahrenheit.
# =============================================================================

import json
import logging
import random
import urllib.parse
import urllib.request
from datetime import date, timedelta
from typing import Optional

from core.config import Settings
from core.models import Destination, ForecastDay, TripWindow
from core.trip import parse_trip_date, trip_duration

logger = logging.getLogger(__name__)

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_MAX_DAYS = 16

# Mock generator ranges (Fahrenheit, inclusive)
MOCK_HIGH_RANGE = (65, 79)
MOCK_LOW_RANGE = (45, 59)
MOCK_CONDITIONS = ("Sunny", "Partly Cloudy", "Cloudy", "Light Rain")


# =============================================================================
# WMO Weather Code Mapping
# =============================================================================
_WMO_CODE_TO_CONDITION: dict[int, str] = {
    0: "Sunny",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Cloudy",
    45: "Fog",
    48: "Depositing Rime Fog",
    51: "Light Drizzle Rain",
    53: "Drizzle Rain",
    55: "Dense Drizzle Rain",
    56: "Freezing Drizzle Rain",
    57: "Heavy Freezing Drizzle Rain",
    61: "Light Rain",
    63: "Rain",
    65: "Heavy Rain",
    66: "Freezing Rain",
    67: "Heavy Freezing Rain",
    71: "Light Snow",
    73: "Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Light Rain Showers",
    81: "Rain Showers",
    82: "Violent Rain Showers",
    85: "Light Snow Showers",
    86: "Heavy Snow Showers",
    95: "Thunderstorms with Rain",
    96: "Thunderstorms with Rain and Hail",
    99: "Heavy Thunderstorms with Rain and Hail",
}


def _celsius_to_fahrenheit(celsius: float) -> int:
    """Convert Celsius to Fahrenheit, rounded to nearest integer."""
    return round(celsius * 9 / 5 + 32)


def format_day_label(day: date) -> str:
    """Display label for a forecast day, e.g. "Thu, Jul 10"."""
    return f"{day:%a}, {day:%b} {day.day}"


def pad_forecast(forecast: list[ForecastDay], trip_days: int) -> list[ForecastDay]:
    """Fit a forecast to the trip length.

    Short forecasts repeat their last day; long ones are cut.  An empty
    forecast stays empty (there is nothing to repeat).
    """
    if not forecast:
        return []
    padded = list(forecast[:trip_days])
    last = padded[-1]
    while len(padded) < trip_days:
        padded.append(ForecastDay(last.label, last.high, last.low, last.conditions))
    return padded


# =============================================================================
# PUBLIC API: get_forecast (dispatcher)
# =============================================================================
def get_forecast(
    window: TripWindow,
    settings: Settings,
    destination: Optional[Destination] = None,
) -> list[ForecastDay]:
    """Get one ForecastDay per trip day from the configured provider.

    Args:
        window: The trip dates.
        settings: Runtime settings (live toggle, timeout, mock seed).
        destination: Where the trip goes; live data needs its coordinates.

    Returns:
        A list with exactly window.trip_days entries.
    """
    has_coordinates = (
        destination is not None
        and destination.latitude is not None
        and destination.longitude is not None
    )
    if settings.use_live_weather and has_coordinates:
        return get_forecast_live(
            window,
            destination,
            timeout=settings.http_timeout_seconds,
            fallback_seed=settings.forecast_seed,
        )
    if settings.use_live_weather:
        logger.info("No coordinates for destination; using mock forecast.")
    return get_forecast_mock(window, seed=settings.forecast_seed)


# =============================================================================
# LIVE PROVIDER: Open-Meteo API
# =============================================================================
def get_forecast_live(
    window: TripWindow,
    destination: Destination,
    timeout: float = 10.0,
    fallback_seed: Optional[int] = None,
) -> list[ForecastDay]:
    """Fetch a daily forecast from Open-Meteo (free, no API key).

    The request covers the trip dates that fall inside the 16-day horizon.
    If the trip has already started, starts beyond the horizon, or the
    call or its payload is unusable, we fall back to the mock provider so
    the pipeline always gets a forecast.
    """
    start = parse_trip_date(window.start_date)
    days = trip_duration(window.start_date, window.end_date)

    today = date.today()
    horizon_end = today + timedelta(days=OPEN_METEO_MAX_DAYS - 1)
    if start < today:
        # Past days have no forecast; labels must line up with trip dates.
        logger.info("Trip starts before today; using mock forecast.")
        return get_forecast_mock(window, seed=fallback_seed)
    if start > horizon_end:
        logger.info("Trip starts beyond the %d-day forecast horizon; using mock forecast.",
                    OPEN_METEO_MAX_DAYS)
        return get_forecast_mock(window, seed=fallback_seed)

    query_end = min(start + timedelta(days=days - 1), horizon_end)

    params = urllib.parse.urlencode({
        "latitude": destination.latitude,
        "longitude": destination.longitude,
        "daily": "temperature_2m_max,temperature_2m_min,weather_code",
        "start_date": start.isoformat(),
        "end_date": query_end.isoformat(),
        "timezone": "auto",
    })
    url = f"{OPEN_METEO_URL}?{params}"

    try:
        req = urllib.request.Request(url, headers={"Accept": "application/json"})
        with urllib.request.urlopen(req, timeout=timeout) as response:
            data = json.loads(response.read().decode())
        forecast = _parse_daily(data)
    except (OSError, ValueError) as e:
        logger.warning("Open-Meteo API call failed: %s. Falling back to mock data.", e)
        return get_forecast_mock(window, seed=fallback_seed)
    except (TypeError, AttributeError, KeyError) as e:
        logger.warning("Open-Meteo returned a malformed payload: %s. Falling back to mock data.", e)
        return get_forecast_mock(window, seed=fallback_seed)

    if not forecast:
        logger.warning("Open-Meteo returned no usable days. Falling back to mock data.")
        return get_forecast_mock(window, seed=fallback_seed)

    return pad_forecast(forecast, days)


def _parse_daily(data: dict) -> list[ForecastDay]:
    """Turn Open-Meteo's column-wise "daily" block into ForecastDays.

    Days missing a high or low are skipped.  Raises TypeError, ValueError
    or AttributeError when the payload has the wrong shape.
    """
    daily = data.get("daily", {})
    dates = daily.get("time", [])
    temp_maxs = daily.get("temperature_2m_max", [])
    temp_mins = daily.get("temperature_2m_min", [])
    weather_codes = daily.get("weather_code", [])

    forecast = []
    for i, day_str in enumerate(dates):
        high = temp_maxs[i] if i < len(temp_maxs) else None
        low = temp_mins[i] if i < len(temp_mins) else None
        if high is None or low is None:
            continue
        code = weather_codes[i] if i < len(weather_codes) else None
        forecast.append(ForecastDay(
            label=format_day_label(date.fromisoformat(day_str)),
            high=_celsius_to_fahrenheit(high),
            low=_celsius_to_fahrenheit(low),
            conditions=condition_text(code),
        ))
    return forecast


def condition_text(wmo_code: Optional[int]) -> str:
    """Human-readable condition for a WMO code ("Unknown" if unmapped)."""
    if wmo_code is None:
        return "Unknown"
    return _WMO_CODE_TO_CONDITION.get(int(wmo_code), "Unknown")


# =============================================================================
# MOCK PROVIDER: random but reproducible
# =============================================================================
def get_forecast_mock(window: TripWindow, seed: Optional[int] = None) -> list[ForecastDay]:
    """Generate a mock forecast, one day per trip day.

    Highs fall in 65–79°F, lows in 45–59°F, and each day is Sunny, Partly
    Cloudy, Cloudy, or Light Rain.  Pass a seed for repeatable output; a
    private Random instance keeps the global generator untouched.
    """
    rng = random.Random(seed)
    start = parse_trip_date(window.start_date)
    days = trip_duration(window.start_date, window.end_date)

    forecast = []
    for i in range(days):
        forecast.append(ForecastDay(
            label=format_day_label(start + timedelta(days=i)),
            high=rng.randint(*MOCK_HIGH_RANGE),
            low=rng.randint(*MOCK_LOW_RANGE),
            conditions=rng.choice(MOCK_CONDITIONS),
        ))
    return forecast
