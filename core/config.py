# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the environment ONCE into a frozen Settings object.  Collaborators
#   (forecast retrieval, destination search) take Settings as an argument;
#   nothing else in core/ touches os.environ.
#
# ENVIRONMENT VARIABLES:
#   USE_LIVE_WEATHER=true       → Open-Meteo forecasts (needs internet)
#   MAPBOX_ACCESS_TOKEN=...     → destination autocomplete
#   PACKING_HTTP_TIMEOUT=10     → seconds, for both HTTP collaborators
#   PACKING_FORECAST_SEED=42    → makes the mock forecast reproducible
#   PACKING_LLM_MODEL=...       → LiteLlm model string for the agent
#
#   Entry points call dotenv's load_dotenv() before load_settings(), so a
#   .env file works too.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LLM_MODEL = "openrouter/openai/gpt-4o"
DEFAULT_HTTP_TIMEOUT = 10.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Configuration handed explicitly to the collaborators."""

    use_live_weather: bool = False
    mapbox_access_token: Optional[str] = None
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    forecast_seed: Optional[int] = None
    llm_model: str = DEFAULT_LLM_MODEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from a mapping (defaults to os.environ).

    Raises:
        ValueError: If a numeric variable is not a number.
    """
    env = os.environ if environ is None else environ

    timeout_raw = env.get("PACKING_HTTP_TIMEOUT", "").strip()
    seed_raw = env.get("PACKING_FORECAST_SEED", "").strip()

    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
        seed = int(seed_raw) if seed_raw else None
    except ValueError as e:
        raise ValueError(f"Invalid numeric setting: {e}") from e

    return Settings(
        use_live_weather=env.get("USE_LIVE_WEATHER", "false").strip().lower() in _TRUTHY,
        mapbox_access_token=env.get("MAPBOX_ACCESS_TOKEN") or None,
        http_timeout_seconds=timeout,
        forecast_seed=seed,
        llm_model=env.get("PACKING_LLM_MODEL") or DEFAULT_LLM_MODEL,
    )
