# =============================================================================
# core/trip.py  —  Trip Duration Calculator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a start/end date pair into an inclusive day count.
#
# TIMEZONES:
#   Trip dates are calendar dates.  A value like "2025-07-10T00:00:00-05:00"
#   means July 10th where the traveler is, so we keep the date in its own
#   offset and never convert to UTC first.  Converting would shift
#   midnight-anchored dates west of UTC back a day and break the count.
# =============================================================================

from datetime import date, datetime


def parse_trip_date(value) -> date:
    """Normalize a date-like value to a calendar date.

    Accepts a ``date``, a ``datetime`` (naive or aware), or an ISO 8601
    string with or without time and offset.

    Raises:
        ValueError: If the string cannot be parsed.
        TypeError: If the value is not date-like at all.
    """
    if isinstance(value, datetime):
        # .date() reads the wall-clock date in the value's own offset.
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Empty date string.")
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise ValueError(f"Unrecognized date: {value!r}") from None
    raise TypeError(f"Expected a date or ISO date string, got {type(value).__name__}")


def raw_trip_duration(start, end) -> int:
    """Inclusive day count without clamping (0 or negative when reversed)."""
    return (parse_trip_date(end) - parse_trip_date(start)).days + 1


def trip_duration(start, end) -> int:
    """Inclusive number of trip days, never less than 1.

    >>> trip_duration("2025-07-10", "2025-07-10")
    1
    >>> trip_duration("2025-07-10", "2025-07-16")
    7

    A reversed window (end before start) is clamped to a one-day trip so
    every downstream quantity stays >= 1.
    """
    return max(1, raw_trip_duration(start, end))
