# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the packing advisor)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the packing pipeline:
#
#   TripWindow ──▶ trip_days ─┐
#                             ├──▶ rule engine ──▶ PackingItem* ──▶ merge
#   ForecastDay* ──▶ WeatherSignals ─┘
#
# They carry almost no behavior.  TripWindow.trip_days delegates to
# core/trip.py; PackingItem.key is the deduplication identity.
# =============================================================================

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from core.trip import trip_duration


# -----------------------------------------------------------------------------
# TripWindow — the inclusive start/end date range of the journey
# -----------------------------------------------------------------------------
@dataclass
class TripWindow:
    """The inclusive date range of a trip.

    end_date >= start_date is the caller's responsibility.  A reversed
    window still yields trip_days == 1 (see core/trip.py).
    """

    start_date: date
    end_date: date

    @property
    def trip_days(self) -> int:
        return trip_duration(self.start_date, self.end_date)


# -----------------------------------------------------------------------------
# ForecastDay — one day's weather, as handed over by the forecast provider
# -----------------------------------------------------------------------------
@dataclass
class ForecastDay:
    """Weather data for one trip day."""

    label: str                         # Display date: "Thu, Jul 10"
    high: float                        # Daily high (Fahrenheit)
    low: float                         # Daily low (Fahrenheit)
    conditions: str                    # "Sunny", "Light Rain", ...
    # Any rainy day MUST contain the literal text "Rain"; the analyzer
    # substring-matches on it.


# -----------------------------------------------------------------------------
# WeatherSignals — the derived classification of a forecast
# -----------------------------------------------------------------------------
# Frozen: computed once per forecast, read by every rule, never updated.
# The four temperature bands are independent flags, not an enum, so a trip
# can be "hot by day, cold by night".
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class WeatherSignals:
    """Derived weather signals consumed by the rule engine."""

    avg_high: float
    avg_low: float
    has_rain: bool
    temp_variation: float              # max(high) - min(low)
    is_hot: bool
    is_mild: bool
    is_cool: bool
    is_cold: bool
    needs_layering: bool


# -----------------------------------------------------------------------------
# PackingItem — one line of the packing list
# -----------------------------------------------------------------------------
@dataclass
class PackingItem:
    """A packing list entry.  Identity is (name, category), not name alone."""

    name: str                          # "Hiking Boots"
    category: str                      # "Footwear"
    quantity: int = 1

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.category)


# -----------------------------------------------------------------------------
# PackingRecommendation — the pipeline's output
# -----------------------------------------------------------------------------
@dataclass
class PackingRecommendation:
    """Everything one generation call produces."""

    trip_days: int
    weather: WeatherSignals
    items: list[PackingItem] = field(default_factory=list)
    # Merged list: each (name, category) appears exactly once.

    unmatched_activities: list[str] = field(default_factory=list)
    # Activities that matched no keyword and so had no packing impact.


# -----------------------------------------------------------------------------
# Destination — a geocoding search hit
# -----------------------------------------------------------------------------
@dataclass
class Destination:
    """A place returned by destination search."""

    name: str                          # "Lisbon, Lisbon, Portugal"
    latitude: Optional[float] = None
    longitude: Optional[float] = None
