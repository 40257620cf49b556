# =============================================================================
# core/weather.py  —  Weather Analyzer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reduces a list of ForecastDay records into WeatherSignals: averages,
#   a rain flag, the temperature spread, and four temperature bands.
#
# THE SEPARATION OF "FETCH" AND "ANALYZE":
#   - core/forecast.py fetches (mock or Open-Meteo) and returns ForecastDay
#   - analyze_weather() here only does arithmetic on what it is given
#   The analyzer doesn't know or care where the forecast came from, and the
#   forecast length doesn't have to match the trip length.
# =============================================================================

from core.models import ForecastDay, WeatherSignals


# -----------------------------------------------------------------------------
# Thresholds (Fahrenheit)
# -----------------------------------------------------------------------------
HOT_ABOVE_F = 80           # avg high  >  80        → hot
MILD_MIN_F = 60            # 60 <= avg high <= 80   → mild
MILD_MAX_F = 80
COOL_MIN_F = 40            # 40 <= avg low  <  60   → cool
COOL_BELOW_F = 60
COLD_BELOW_F = 40          # avg low   <  40        → cold
LAYERING_SPREAD_F = 20     # max high - min low > 20 → pack layers

# Case-sensitive: providers must spell rainy conditions with "Rain".
RAIN_MARKER = "Rain"


def analyze_weather(forecast: list[ForecastDay]) -> WeatherSignals:
    """Derive the weather signals for a forecast.

    The four bands are evaluated independently; the rule engine treats each
    one as its own gate.

    Args:
        forecast: One or more ForecastDay records.

    Returns:
        A frozen WeatherSignals instance.

    Raises:
        ValueError: If the forecast is empty (averages are undefined).
    """
    days = list(forecast)
    if not days:
        raise ValueError("Cannot analyze an empty forecast; at least one day is required.")

    n = len(days)
    avg_high = sum(d.high for d in days) / n
    avg_low = sum(d.low for d in days) / n
    has_rain = any(RAIN_MARKER in d.conditions for d in days)
    temp_variation = max(d.high for d in days) - min(d.low for d in days)

    return WeatherSignals(
        avg_high=avg_high,
        avg_low=avg_low,
        has_rain=has_rain,
        temp_variation=temp_variation,
        is_hot=avg_high > HOT_ABOVE_F,
        is_mild=MILD_MIN_F <= avg_high <= MILD_MAX_F,
        is_cool=COOL_MIN_F <= avg_low < COOL_BELOW_F,
        is_cold=avg_low < COLD_BELOW_F,
        needs_layering=temp_variation > LAYERING_SPREAD_F,
    )


def describe_weather(signals: WeatherSignals) -> str:
    """One-sentence summary of the signals, for tool responses."""
    bands = [
        name
        for name, on in (
            ("hot", signals.is_hot),
            ("mild", signals.is_mild),
            ("cool", signals.is_cool),
            ("cold", signals.is_cold),
        )
        if on
    ]
    parts = [
        f"Average high {signals.avg_high:.0f}°F, average low {signals.avg_low:.0f}°F"
        f" ({', '.join(bands) if bands else 'no temperature band'})."
    ]
    if signals.needs_layering:
        parts.append(f"Temperatures swing {signals.temp_variation:.0f}°F, so pack layers.")
    if signals.has_rain:
        parts.append("Rain is expected on at least one day.")
    return " ".join(parts)
