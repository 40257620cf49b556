# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools the packing agent can call.  Each tool is a thin
#   wrapper around core/ functions. It handles input parsing, output
#   formatting, and error reporting.
#
# HOW IT WORKS (the flow):
#   1. The Google ADK agent decides it needs something (e.g., a forecast)
#   2. It calls a tool by name via MCP (e.g., "get_trip_forecast")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/ logic, formats the result, and returns it
#
# TOOLS:
#   search_destinations    → autocomplete a city (Mapbox)
#   get_trip_forecast      → one forecast day per trip day + weather signals
#   generate_packing_list  → the merged packing list, grouped by category
#
#   All tools are read-only and safe to retry.
#
# ERRORS:
#   Bad dates or an unusable forecast come back as {"error": ...} dicts.
#   The agent reads those and asks the user again; nothing is raised
#   across the MCP boundary.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the ADK agent via stdio transport (agent/packing_agent.py)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.config import load_settings
from core.destinations import search_destinations as find_destinations
from core.forecast import get_forecast
from core.models import Destination, TripWindow
from core.packing_list import build_packing_list, group_by_category
from core.trip import parse_trip_date, raw_trip_duration
from core.weather import analyze_weather, describe_weather

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout is the MCP transport.  Anything printed to
# stdout would corrupt the JSON protocol stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("packing.mcp")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Settings & server instance
# =============================================================================
# Environment is read exactly once, here.  core/ receives the Settings
# object explicitly.
load_dotenv()
settings = load_settings()

mcp = FastMCP("packing-advisor")


def _trip_window(start_date: str, end_date: str) -> TripWindow:
    """Parse tool arguments into a TripWindow (raises ValueError)."""
    window = TripWindow(parse_trip_date(start_date), parse_trip_date(end_date))
    if raw_trip_duration(window.start_date, window.end_date) < 1:
        raise ValueError(
            f"End date {window.end_date} is before start date {window.start_date}."
        )
    return window


def _destination(
    name: str,
    latitude: Optional[float],
    longitude: Optional[float],
) -> Optional[Destination]:
    if not name and latitude is None:
        return None
    return Destination(name=name, latitude=latitude, longitude=longitude)


# =============================================================================
# TOOL 1: search_destinations
# =============================================================================
@mcp.tool()
def search_destinations(query: str) -> dict:
    """Autocomplete a travel destination from a partial city name.

    WHEN TO CALL THIS: When the user names where they're going.  Confirm
    the exact place with the user, then keep its latitude/longitude for
    the forecast and packing tools.

    Args:
        query: What the user typed, at least 2 characters (e.g., "Lisb").

    Returns:
        A dict with:
          - query: The query as received
          - suggestions: Up to 10 places, each with name, latitude, longitude
        Or an "error" key if destination search is not configured.
    """
    _log_request("search_destinations", query=query)

    try:
        places = find_destinations(
            query,
            access_token=settings.mapbox_access_token,
            timeout=settings.http_timeout_seconds,
        )
    except ValueError as e:
        _log_status(str(e))
        return _log_response("search_destinations", {
            "error": str(e),
            "hint": "Ask the user to type the destination name exactly.",
        })

    _log_status(f"Found {len(places)} suggestions")
    return _log_response("search_destinations", {
        "query": query,
        "suggestions": [asdict(p) for p in places],
    })


# =============================================================================
# TOOL 2: get_trip_forecast
# =============================================================================
@mcp.tool()
def get_trip_forecast(
    start_date: str,
    end_date: str,
    destination: str = "",
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> dict:
    """Get a day-by-day forecast for the trip, plus derived weather signals.

    WHEN TO CALL THIS: After the destination and dates are settled, to show
    the user what weather to expect.

    Args:
        start_date: First trip day, ISO format (e.g., "2025-07-10").
        end_date: Last trip day, ISO format (inclusive).
        destination: Place name from search_destinations.
        latitude / longitude: Coordinates from search_destinations.

    Returns:
        A dict with:
          - trip_days: Inclusive day count
          - forecast: One entry per day (label, high, low, conditions in °F)
          - weather: avg_high, avg_low, has_rain, temp_variation and the
            hot/mild/cool/cold/needs_layering flags
          - summary: One-sentence weather summary
    """
    _log_request("get_trip_forecast",
                 start_date=start_date, end_date=end_date,
                 destination=destination, latitude=latitude, longitude=longitude)

    try:
        window = _trip_window(start_date, end_date)
        forecast = get_forecast(window, settings, _destination(destination, latitude, longitude))
        signals = analyze_weather(forecast)
    except (TypeError, ValueError) as e:
        _log_status(f"Rejected: {e}")
        return _log_response("get_trip_forecast", {"error": str(e)})

    _log_status(f"Got {len(forecast)} forecast days")
    return _log_response("get_trip_forecast", {
        "trip_days": window.trip_days,
        "forecast": [asdict(day) for day in forecast],
        "weather": asdict(signals),
        "summary": describe_weather(signals),
    })


# =============================================================================
# TOOL 3: generate_packing_list
# =============================================================================
@mcp.tool()
def generate_packing_list(
    start_date: str,
    end_date: str,
    activities: list[str],
    destination: str = "",
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> dict:
    """Generate a deduplicated, quantified packing list for the trip.

    WHEN TO CALL THIS: Once the destination, dates, and planned activities
    are known.  It fetches the forecast itself, so calling
    get_trip_forecast first is optional.

    Recognized activities (case-insensitive, matched anywhere in the text):
    beach/swim, hike/hiking, business, golf, gym/workout.  Anything else is
    reported in unmatched_activities.

    Args:
        start_date: First trip day, ISO format.
        end_date: Last trip day, ISO format (inclusive).
        activities: Free-text activities, e.g. ["Beach day", "Hiking"].
        destination: Place name from search_destinations.
        latitude / longitude: Coordinates from search_destinations.

    Returns:
        A dict with:
          - trip_days: Inclusive day count
          - weather_summary: One-sentence weather summary
          - packing_list: {category: [{name, quantity}, ...]}
          - total_items: Sum of all quantities
          - unmatched_activities: Activities that added nothing
    """
    _log_request("generate_packing_list",
                 start_date=start_date, end_date=end_date, activities=activities,
                 destination=destination, latitude=latitude, longitude=longitude)

    try:
        window = _trip_window(start_date, end_date)
        forecast = get_forecast(window, settings, _destination(destination, latitude, longitude))
        recommendation = build_packing_list(window, forecast, activities or [])
    except (TypeError, ValueError) as e:
        _log_status(f"Rejected: {e}")
        return _log_response("generate_packing_list", {"error": str(e)})

    _log_status(f"{len(recommendation.items)} distinct items for "
                f"{recommendation.trip_days} days")
    if recommendation.unmatched_activities:
        _log_status(f"No packing impact: {recommendation.unmatched_activities}")

    grouped = group_by_category(recommendation.items)
    return _log_response("generate_packing_list", {
        "trip_days": recommendation.trip_days,
        "weather_summary": describe_weather(recommendation.weather),
        "packing_list": {
            category: [{"name": i.name, "quantity": i.quantity} for i in items]
            for category, items in grouped.items()
        },
        "total_items": sum(i.quantity for i in recommendation.items),
        "unmatched_activities": recommendation.unmatched_activities,
    })


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
