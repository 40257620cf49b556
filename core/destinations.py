# =============================================================================
# core/destinations.py  —  Destination Search (collaborator)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Autocompletes a destination against the Mapbox Geocoding API and
#   returns Destination objects with coordinates, which the live forecast
#   provider needs.
#
# FAILURE MODE:
#   Autocomplete is best-effort.  An HTTP error, timeout, or malformed
#   payload is logged and yields an empty suggestion list.  Only a missing
#   access token is raised, because that is a configuration mistake.
# =============================================================================

import json
import logging
import urllib.parse
import urllib.request

from core.models import Destination

logger = logging.getLogger(__name__)

MAPBOX_GEOCODING_URL = "https://api.mapbox.com/geocoding/v5/mapbox.places"
MIN_QUERY_LENGTH = 2


def search_destinations(
    query: str,
    access_token: str,
    limit: int = 10,
    timeout: float = 10.0,
) -> list[Destination]:
    """Search cities matching a partial name.

    Args:
        query: What the user typed so far ("lis").
        access_token: Mapbox access token (from Settings).
        limit: Maximum number of suggestions.
        timeout: HTTP timeout in seconds.

    Returns:
        Matching places, best match first.  Empty for queries shorter than
        two characters or when the API call fails.

    Raises:
        ValueError: If no access token is configured.
    """
    query = query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []
    if not access_token:
        raise ValueError("MAPBOX_ACCESS_TOKEN is not configured.")

    params = urllib.parse.urlencode({
        "access_token": access_token,
        "types": "place",
        "limit": limit,
    })
    url = f"{MAPBOX_GEOCODING_URL}/{urllib.parse.quote(query)}.json?{params}"

    try:
        req = urllib.request.Request(url, headers={"Accept": "application/json"})
        with urllib.request.urlopen(req, timeout=timeout) as response:
            data = json.loads(response.read().decode())
    except (OSError, ValueError) as e:
        logger.error("Mapbox geocoding failed for %r: %s", query, e)
        return []

    features = data.get("features") if isinstance(data, dict) else None
    if not isinstance(features, list):
        return []

    return [
        _to_destination(f)
        for f in features
        if isinstance(f, dict) and f.get("place_name")
    ]


def _to_destination(feature: dict) -> Destination:
    # Mapbox "center" is [longitude, latitude].
    center = feature.get("center") or []
    if len(center) == 2:
        lon, lat = center
    else:
        lon, lat = None, None
    return Destination(name=feature["place_name"], latitude=lat, longitude=lon)
