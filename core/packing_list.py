# =============================================================================
# core/packing_list.py  —  Merge Step & the Packing Pipeline
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. merge_items()        — collapses the rule engine's raw stream so each
#                             (name, category) appears once, keeping the
#                             LARGEST requested quantity ("at least this
#                             many"), never the sum.
#   2. group_by_category()  — read-side view for display.
#   3. build_packing_list() — the whole pipeline in one call:
#
#        trip window ──▶ trip_duration ─┐
#        forecast    ──▶ analyze_weather ┼─▶ generate_items ─▶ merge_items
#        activities  ───────────────────┘
#
# Every call rebuilds the list from scratch.  Nothing is cached and inputs
# are never mutated.
# =============================================================================

from typing import Iterable, Sequence

from core.models import ForecastDay, PackingItem, PackingRecommendation, TripWindow
from core.rules import generate_items, unmatched_activities
from core.trip import trip_duration
from core.weather import analyze_weather


def merge_items(items: Iterable[PackingItem]) -> list[PackingItem]:
    """Deduplicate by identity key, max quantity wins.

    Output keeps first-seen order.  Items with the same name in different
    categories stay separate.  merge_items(merge_items(x)) == merge_items(x).
    """
    merged: dict[tuple[str, str], PackingItem] = {}
    for item in items:
        existing = merged.get(item.key)
        if existing is None:
            # Copy so the caller's items are never touched.
            merged[item.key] = PackingItem(item.name, item.category, item.quantity)
        elif item.quantity > existing.quantity:
            existing.quantity = item.quantity
    return list(merged.values())


def group_by_category(items: Iterable[PackingItem]) -> dict[str, list[PackingItem]]:
    """Group items by category, categories in first-seen order."""
    groups: dict[str, list[PackingItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return groups


def build_packing_list(
    window: TripWindow,
    forecast: Sequence[ForecastDay],
    activities: Sequence[str] = (),
) -> PackingRecommendation:
    """Produce a merged packing list for a trip.

    The forecast does not need exactly one day per trip day; the weather
    analysis averages over whatever it is given.

    Raises:
        ValueError: If the forecast is empty or a date can't be parsed.
    """
    days = trip_duration(window.start_date, window.end_date)
    weather = analyze_weather(forecast)
    raw_items = generate_items(days, weather, activities)

    return PackingRecommendation(
        trip_days=days,
        weather=weather,
        items=merge_items(raw_items),
        unmatched_activities=unmatched_activities(activities),
    )
