# =============================================================================
# core/rules.py  —  Item Rule Engine
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (trip_days, WeatherSignals, activities) into a raw stream of
#   PackingItems.  The stream may repeat an item (Socks from the clothing
#   baseline and Socks from somewhere else), and core/packing_list.py
#   merges those afterwards.
#
# HOW IT IS ORGANIZED:
#   Every rule block is its own pure function with the same signature:
#
#       rule(trip_days, weather, activities) -> list[PackingItem]
#
#   RULES lists them in emission order:
#
#       essentials → clothing baseline → hot → mild → cool/layering → cold
#       → beach → hiking → business → golf → gym → rain → long trip
#
#   The merge is order-independent (max quantity wins), so the order only
#   affects how the raw stream reads when debugging.  Adding a rule means
#   writing one function and appending it to RULES.
#
# QUANTITIES:
#   All divisions round UP (math.ceil).  trip_days is >= 1 (core/trip.py
#   clamps), so every quantity below is >= 1.
# =============================================================================

from math import ceil
from typing import Callable, Sequence

from core.models import PackingItem, WeatherSignals


# -----------------------------------------------------------------------------
# Categories
# -----------------------------------------------------------------------------
DOCUMENTS = "Documents & Money"
ELECTRONICS = "Electronics"
TOILETRIES = "Toiletries"
CLOTHING = "Clothing"
ACCESSORIES = "Accessories"
FOOTWEAR = "Footwear"
SAFETY = "Safety"
BUSINESS_ATTIRE = "Business Attire"
BUSINESS_ITEMS = "Business Items"
ATHLETIC_WEAR = "Athletic Wear"
EQUIPMENT = "Equipment"

# -----------------------------------------------------------------------------
# Activity vocabulary
# -----------------------------------------------------------------------------
# Matching is a case-insensitive substring test, so "hik" catches both
# "Hike" and "Hiking", and "Beach day + swimming" triggers the beach block
# once.  One activity string can still trigger several blocks
# ("golf and gym").
# -----------------------------------------------------------------------------
ACTIVITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "beach": ("beach", "swim"),
    "hiking": ("hik",),
    "business": ("business",),
    "golf": ("golf",),
    "gym": ("gym", "workout"),
}

LONG_TRIP_DAYS = 7          # trips longer than this get laundry supplies
STEAMER_AFTER_DAYS = 3      # business trips longer than this get a steamer
MAX_BUSINESS_DAYS = 5
MAX_SWIMSUITS = 2

Rule = Callable[[int, WeatherSignals, Sequence[str]], list[PackingItem]]


def _item(name: str, category: str, quantity: int = 1) -> PackingItem:
    return PackingItem(name=name, category=category, quantity=quantity)


def matches_activity(activity: str, kind: str) -> bool:
    """True if the activity text contains any keyword of the given kind."""
    text = activity.lower()
    return any(keyword in text for keyword in ACTIVITY_KEYWORDS[kind])


def _has_activity(activities: Sequence[str], kind: str) -> bool:
    return any(matches_activity(a, kind) for a in activities)


def unmatched_activities(activities: Sequence[str]) -> list[str]:
    """Activities that match no keyword at all (they add no items)."""
    return [
        a for a in activities
        if not any(matches_activity(a, kind) for kind in ACTIVITY_KEYWORDS)
    ]


# =============================================================================
# Always-on blocks
# =============================================================================
def essentials_rule(trip_days, weather, activities) -> list[PackingItem]:
    return [
        _item("Passport/ID", DOCUMENTS),
        _item("Phone + Charger", ELECTRONICS),
        _item("Toiletry Basics", TOILETRIES),
    ]


def clothing_baseline_rule(trip_days, weather, activities) -> list[PackingItem]:
    """One pair per day plus a spare."""
    return [
        _item("Underwear", CLOTHING, trip_days + 1),
        _item("Socks", CLOTHING, trip_days + 1),
    ]


# =============================================================================
# Clothing by weather band
# =============================================================================
def hot_weather_rule(trip_days, weather, activities) -> list[PackingItem]:
    if not weather.is_hot:
        return []
    return [
        _item("Breathable T-shirts", CLOTHING, trip_days),
        _item("Lightweight Shorts", CLOTHING, ceil(trip_days / 2)),
        _item("Sun Protection Shirt", CLOTHING),
    ]


def mild_weather_rule(trip_days, weather, activities) -> list[PackingItem]:
    if not weather.is_mild:
        return []
    return [
        _item("Casual Shirts", CLOTHING, ceil(trip_days * 0.7)),
        _item("Light Sweater", CLOTHING),
        _item("Comfortable Pants", CLOTHING, ceil(trip_days / 3)),
    ]


def cool_weather_rule(trip_days, weather, activities) -> list[PackingItem]:
    """Cool evenings or a wide day/night swing.

    A layering trip doubles the long-sleeve count: ceil(days * 2 * 0.5)
    is one per day instead of one every other day.
    """
    if not (weather.is_cool or weather.needs_layering):
        return []
    layer_factor = 2 if weather.needs_layering else 1
    return [
        _item("Long Sleeve Shirts", CLOTHING, ceil(trip_days * layer_factor * 0.5)),
        _item("Light Jacket", CLOTHING),
        _item("Warm Sweater", CLOTHING, ceil(trip_days / 3)),
    ]


def cold_weather_rule(trip_days, weather, activities) -> list[PackingItem]:
    if not weather.is_cold:
        return []
    return [
        _item("Warm Base Layer Set", CLOTHING, 2),
        _item("Winter Coat", CLOTHING),
        _item("Warm Hat", ACCESSORIES),
        _item("Gloves", ACCESSORIES),
        _item("Scarf", ACCESSORIES),
        _item("Thermal Socks", CLOTHING, ceil(trip_days / 2)),
    ]


# =============================================================================
# Per-activity blocks
# =============================================================================
# Each block fires at most once per matching activity string.  Two beach
# activities emit the beach items twice; the merge collapses them.
# =============================================================================
def beach_rule(trip_days, weather, activities) -> list[PackingItem]:
    items = []
    for activity in activities:
        if not matches_activity(activity, "beach"):
            continue
        beach_days = ceil(trip_days / 3)
        items += [
            _item("Swimsuit", CLOTHING, min(MAX_SWIMSUITS, beach_days)),
            _item("Beach Towel", ACCESSORIES),
            _item("Waterproof Phone Case", ACCESSORIES),
            _item("Beach Bag", ACCESSORIES),
        ]
        if weather.is_hot:
            items += [
                _item("Extra Sunscreen", TOILETRIES),
                _item("After-Sun Care", TOILETRIES),
            ]
    return items


def hiking_rule(trip_days, weather, activities) -> list[PackingItem]:
    items = []
    for activity in activities:
        if not matches_activity(activity, "hiking"):
            continue
        hiking_days = ceil(trip_days / 3)
        items += [
            _item("Hiking Boots", FOOTWEAR),
            _item("Hiking Socks", CLOTHING, hiking_days + 1),
            _item("Moisture-Wicking Shirts", CLOTHING, hiking_days),
            _item("Hiking Pants", CLOTHING, ceil(hiking_days / 2)),
            _item("First Aid Kit", SAFETY),
        ]
        if weather.has_rain:
            items += [
                _item("Waterproof Jacket", CLOTHING),
                _item("Quick-Dry Pants", CLOTHING),
            ]
    return items


def business_rule(trip_days, weather, activities) -> list[PackingItem]:
    items = []
    for activity in activities:
        if not matches_activity(activity, "business"):
            continue
        business_days = min(trip_days, MAX_BUSINESS_DAYS)
        items += [
            _item("Business Suits", BUSINESS_ATTIRE, ceil(business_days / 2)),
            _item("Dress Shirts", BUSINESS_ATTIRE, business_days),
            _item("Dress Pants", BUSINESS_ATTIRE, ceil(business_days / 2)),
            _item("Dress Shoes", FOOTWEAR),
            _item("Professional Accessories", BUSINESS_ITEMS),
        ]
        if trip_days > STEAMER_AFTER_DAYS:
            items.append(_item("Portable Steamer", BUSINESS_ITEMS))
    return items


def golf_rule(trip_days, weather, activities) -> list[PackingItem]:
    items = []
    for activity in activities:
        if not matches_activity(activity, "golf"):
            continue
        golf_days = ceil(trip_days / 3)
        items += [
            _item("Golf Polo Shirts", ATHLETIC_WEAR, golf_days),
            _item("Golf Pants/Shorts", ATHLETIC_WEAR, ceil(golf_days / 2)),
            _item("Golf Shoes", FOOTWEAR),
            _item("Golf Glove", EQUIPMENT),
        ]
        if weather.is_hot:
            items += [
                _item("Golf Hat/Visor", ACCESSORIES),
                _item("Golf Towel", EQUIPMENT),
            ]
    return items


def gym_rule(trip_days, weather, activities) -> list[PackingItem]:
    items = []
    for activity in activities:
        if not matches_activity(activity, "gym"):
            continue
        half = ceil(trip_days / 2)
        items += [
            _item("Workout Shirts", ATHLETIC_WEAR, half),
            _item("Workout Shorts/Pants", ATHLETIC_WEAR, half),
            _item("Athletic Socks", ATHLETIC_WEAR, half),
            _item("Athletic Shoes", FOOTWEAR),
            _item("Gym Towel", ATHLETIC_WEAR),
        ]
    return items


# =============================================================================
# Extras
# =============================================================================
def rain_gear_rule(trip_days, weather, activities) -> list[PackingItem]:
    if not weather.has_rain:
        return []
    return [
        _item("Umbrella", ACCESSORIES),
        _item("Rain Jacket", CLOTHING),
    ]


def long_trip_rule(trip_days, weather, activities) -> list[PackingItem]:
    if trip_days <= LONG_TRIP_DAYS:
        return []
    return [
        _item("Laundry Bag", ACCESSORIES),
        _item("Travel Detergent", TOILETRIES),
    ]


RULES: tuple[Rule, ...] = (
    essentials_rule,
    clothing_baseline_rule,
    hot_weather_rule,
    mild_weather_rule,
    cool_weather_rule,
    cold_weather_rule,
    beach_rule,
    hiking_rule,
    business_rule,
    golf_rule,
    gym_rule,
    rain_gear_rule,
    long_trip_rule,
)


def generate_items(
    trip_days: int,
    weather: WeatherSignals,
    activities: Sequence[str] = (),
    rules: Sequence[Rule] = RULES,
) -> list[PackingItem]:
    """Run every rule in order and concatenate what they emit.

    The result is NOT deduplicated; pass it through
    core.packing_list.merge_items().
    """
    activities = list(activities)
    items: list[PackingItem] = []
    for rule in rules:
        items.extend(rule(trip_days, weather, activities))
    return items
