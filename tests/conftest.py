"""Shared test fixtures for the packing advisor.

Fixtures defined here are available to all tests without an explicit
import.  Keep module-specific helpers in the test module that uses them.
"""
import io
import json

import pytest

from core.models import ForecastDay, WeatherSignals


@pytest.fixture()
def make_signals():
    """Factory for WeatherSignals with every flag off unless overridden."""

    def _make(**overrides) -> WeatherSignals:
        values = dict(
            avg_high=70.0,
            avg_low=55.0,
            has_rain=False,
            temp_variation=15.0,
            is_hot=False,
            is_mild=False,
            is_cool=False,
            is_cold=False,
            needs_layering=False,
        )
        values.update(overrides)
        return WeatherSignals(**values)

    return _make


@pytest.fixture()
def make_forecast():
    """Factory for a forecast: make_forecast((85, 70, "Sunny"), ...)."""

    def _make(*days) -> list[ForecastDay]:
        return [
            ForecastDay(label=f"Day {i + 1}", high=high, low=low, conditions=conditions)
            for i, (high, low, conditions) in enumerate(days)
        ]

    return _make


class FakeHTTPResponse(io.BytesIO):
    """Stands in for the object urllib.request.urlopen returns."""

    def __init__(self, payload):
        super().__init__(json.dumps(payload).encode())


@pytest.fixture()
def fake_urlopen(monkeypatch):
    """Patch urllib.request.urlopen; returns the list of requested URLs.

    Usage: calls = fake_urlopen(payload) or fake_urlopen(error=OSError(...)).
    """

    def _install(payload=None, error=None):
        calls = []

        def _urlopen(request, timeout=None):
            calls.append(request.full_url)
            if error is not None:
                raise error
            return FakeHTTPResponse(payload)

        monkeypatch.setattr("urllib.request.urlopen", _urlopen)
        return calls

    return _install
