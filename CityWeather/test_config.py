"""Tests for configuration loading."""
import pytest
from unittest.mock import patch
from config import AppConfig, load_config

ENV_VARS = ["GEOCODE_URL", "WEATHER_URL", "WEATHER_LANG", "WEATHER_TIMEOUT", "WEATHER_DB",
            "WEATHER_LAT", "WEATHER_LON", "SUGGEST_DEBOUNCE_MS", "WEATHER_LOG_FILE"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    with patch('config.load_dotenv'):
        yield


def test_defaults():
    config = load_config()
    assert config == AppConfig()
    assert config.geocode_url == "https://geocoding-api.open-meteo.com/v1/search"
    assert config.weather_url == "https://api.open-meteo.com/v1/forecast"
    assert config.debounce_seconds == 0.25
    assert config.lat is None and config.lon is None
    assert config.log_file == "cityweather.log"


def test_overrides(monkeypatch):
    monkeypatch.setenv("WEATHER_LANG", "id")
    monkeypatch.setenv("WEATHER_TIMEOUT", "3")
    monkeypatch.setenv("WEATHER_LAT", "-6.2")
    monkeypatch.setenv("WEATHER_LON", "106.8")
    monkeypatch.setenv("SUGGEST_DEBOUNCE_MS", "400")

    config = load_config()

    assert config.language == "id"
    assert config.timeout == 3
    assert (config.lat, config.lon) == (-6.2, 106.8)
    assert config.debounce_seconds == 0.4


def test_single_coordinate_is_ignored(monkeypatch):
    monkeypatch.setenv("WEATHER_LAT", "-6.2")
    assert load_config().lat is None


def test_invalid_coordinates(monkeypatch):
    monkeypatch.setenv("WEATHER_LAT", "south")
    monkeypatch.setenv("WEATHER_LON", "106.8")
    with pytest.raises(SystemExit):
        load_config()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("WEATHER_TIMEOUT", "soon")
    with pytest.raises(SystemExit):
        load_config()


def test_values_from_dotenv_are_read(monkeypatch):
    def fake_load_dotenv():
        monkeypatch.setenv("WEATHER_LOG_FILE", "from_dotenv.log")
        monkeypatch.setenv("WEATHER_LANG", "id")

    with patch('config.load_dotenv', side_effect=fake_load_dotenv):
        config = load_config()

    assert config.log_file == "from_dotenv.log"
    assert config.language == "id"
