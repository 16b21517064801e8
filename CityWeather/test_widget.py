"""Tests for the widget controller."""
import asyncio
import pytest
from unittest.mock import Mock
from widget import WeatherWidget, build_widget
from config import AppConfig
from storage import KeyValueStorage
from listener import RecordingListener
from geolocation import FixedGeolocator, UnavailableGeolocator
from weather_provider import GeocoderBase, WeatherProviderBase
from weather_data import PlaceCandidate, SuggestionResult, WeatherSnapshot

JAKARTA = PlaceCandidate(name="Jakarta", latitude=-6.2, longitude=106.8, country="Indonesia")
JAKARTA_BARAT = PlaceCandidate(name="Jakarta Barat", latitude=-6.16, longitude=106.75, country="Indonesia")
SNAPSHOT = WeatherSnapshot(temperature_c=30.1, wind_speed_kmh=10.4, condition_code=1)


@pytest.fixture
def geocoder():
    mock = Mock(spec=GeocoderBase)
    mock.search.return_value = [JAKARTA, JAKARTA_BARAT]
    mock.reverse.return_value = []
    return mock


@pytest.fixture
def provider():
    mock = Mock(spec=WeatherProviderBase)
    mock.get_current.return_value = SNAPSHOT
    return mock


@pytest.fixture
def storage():
    return KeyValueStorage(":memory:")


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def widget(geocoder, provider, storage, listener):
    return WeatherWidget(geocoder, provider, storage, listener,
                         geolocator=FixedGeolocator(-6.2, 106.8), debounce_seconds=0)


def test_start_publishes_persisted_state(widget, listener, storage):
    widget.history.push("Bandung")
    widget.theme.save("dark")

    assert widget.start() == ["Bandung"]
    assert listener.histories == [["Bandung"]]
    assert listener.themes == ["dark"]


def test_choose_suggestion_searches_by_coordinates(widget, geocoder, provider, listener):
    async def run():
        widget.input_changed("Jak")
        await widget.suggestions.wait_idle()
        return await widget.choose_suggestion(1)

    outcome = asyncio.run(run())

    assert outcome.location.label == "Jakarta Barat, Indonesia"
    provider.get_current.assert_called_once_with(-6.16, 106.75)
    # only the suggestion lookup hit the geocoder
    geocoder.search.assert_called_once_with("Jak", 6)
    assert listener.suggestions[-1].status == SuggestionResult.CLEARED


def test_choose_suggestion_out_of_range(widget):
    async def run():
        widget.input_changed("Jak")
        await widget.suggestions.wait_idle()
        return await widget.choose_suggestion(7)

    assert asyncio.run(run()) is None


def test_submit_takes_first_suggestion(widget, provider):
    async def run():
        widget.input_changed("Jak")
        await widget.suggestions.wait_idle()
        return await widget.submit("Jak")

    outcome = asyncio.run(run())

    assert outcome.location.label == "Jakarta, Indonesia"
    provider.get_current.assert_called_once_with(-6.2, 106.8)


def test_submit_without_suggestions_searches_by_name(widget, geocoder):
    outcome = asyncio.run(widget.submit("Jakarta"))

    assert outcome.ok
    geocoder.search.assert_called_once_with("Jakarta", 1)


def test_choose_history(widget, geocoder):
    asyncio.run(widget.choose_history("Jakarta, Indonesia"))
    geocoder.search.assert_called_once_with("Jakarta, Indonesia", 1)


def test_use_my_location(widget, provider):
    outcome = asyncio.run(widget.use_my_location())
    assert outcome.location.label == "-6.2, 106.8"
    provider.get_current.assert_called_once_with(-6.2, 106.8)


def test_clear_history(widget, listener):
    asyncio.run(widget.search("Jakarta"))
    widget.clear_history()

    assert widget.history.load() == []
    assert listener.histories[-1] == []


def test_toggle_theme(widget, listener):
    assert widget.toggle_theme() == "dark"
    assert widget.toggle_theme() == "light"
    assert listener.themes == ["dark", "light"]


def test_build_widget(tmp_path):
    config = AppConfig(db_path=str(tmp_path / "w.db"), language="id", debounce_ms=100)
    widget = build_widget(config, RecordingListener())

    assert widget.suggestions.geocoder.language == "id"
    assert widget.suggestions.debounce_seconds == 0.1
    assert isinstance(widget.orchestrator.geolocator, UnavailableGeolocator)
