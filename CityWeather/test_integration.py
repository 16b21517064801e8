"""Integration tests - can optionally hit the real Open-Meteo API (disabled by default)."""
import asyncio
import os
import pytest
from open_meteo_geocoder import OpenMeteoGeocoder
from open_meteo_provider import OpenMeteoProvider
from widget import WeatherWidget
from storage import KeyValueStorage
from listener import RecordingListener

live = pytest.mark.skipif(
    os.environ.get("CITYWEATHER_LIVE") != "1",
    reason="CITYWEATHER_LIVE not set - skipping integration test"
)


@live
def test_open_meteo_integration():
    """Geocode a city and fetch its current weather from the real API."""
    candidates = OpenMeteoGeocoder().search("Jakarta", 6)
    assert candidates
    assert candidates[0].country == "Indonesia"

    weather = OpenMeteoProvider().get_current(candidates[0].latitude, candidates[0].longitude)
    assert weather.temperature_c is not None


@live
def test_widget_integration():
    """Full search through the widget against the real API."""
    listener = RecordingListener()
    widget = WeatherWidget(OpenMeteoGeocoder(), OpenMeteoProvider(), KeyValueStorage(":memory:"), listener)

    outcome = asyncio.run(widget.search("Jakarta"))

    assert outcome.ok
    assert widget.history.load() == [outcome.location.label]
