"""Tests for the console front end."""
import asyncio
import io
import pytest
from unittest.mock import AsyncMock, Mock, call, patch
from config import AppConfig
from main import ConsoleListener, handle_command, main, parse_args
from widget import WeatherWidget
from storage import KeyValueStorage
from weather_provider import GeocoderBase, WeatherProviderBase
from weather_data import PlaceCandidate, SearchOutcome, WeatherSnapshot

JAKARTA = PlaceCandidate(name="Jakarta", latitude=-6.2, longitude=106.8, country="Indonesia")


@pytest.fixture
def console():
    geocoder = Mock(spec=GeocoderBase)
    geocoder.search.return_value = [JAKARTA]
    provider = Mock(spec=WeatherProviderBase)
    provider.get_current.return_value = WeatherSnapshot(30.1, 10.4, 1)
    out = io.StringIO()
    listener = ConsoleListener(out)
    widget = WeatherWidget(geocoder, provider, KeyValueStorage(":memory:"), listener, debounce_seconds=0)
    widget.start()
    return widget, listener, out


def run_commands(widget, listener, *lines):
    async def run():
        results = []
        for line in lines:
            results.append(await handle_command(widget, listener, line))
        return results
    return asyncio.run(run())


def test_parse_args():
    args = parse_args(["New", "York", "--verbose"])
    assert args.query == ["New", "York"]
    assert args.verbose is True
    assert args.here is False
    assert args.log_file is None


@pytest.mark.parametrize("argv, expected", [
    (["Jakarta"], "from_dotenv.log"),
    (["Jakarta", "--log-file", "cli.log"], "cli.log"),
])
def test_log_file_comes_from_config_unless_given(argv, expected):
    """WEATHER_LOG_FILE is read with the rest of the .env settings, before logging starts."""
    widget = Mock()
    widget.search = AsyncMock(return_value=SearchOutcome(SearchOutcome.SUCCESS))

    with patch('main.load_config', return_value=AppConfig(log_file="from_dotenv.log")), \
            patch('main.setup_logging') as setup_logging, \
            patch('main.build_widget', return_value=widget):
        assert main(argv) == 0

    setup_logging.assert_called_once_with(expected, False)
    widget.search.assert_awaited_once_with("Jakarta")


def test_search_prints_result(console):
    widget, listener, out = console

    assert run_commands(widget, listener, "Jakarta") == [True]

    text = out.getvalue()
    assert "Jakarta, Indonesia" in text
    assert "30.1°C" in text
    assert listener.history == ["Jakarta, Indonesia"]


def test_suggestions_then_pick(console):
    widget, listener, out = console

    run_commands(widget, listener, "?Jak", "#1")

    text = out.getvalue()
    assert "1. Jakarta, Indonesia" in text
    assert "Wind: 10.4 km/h · Mainly clear" in text


def test_history_and_clear(console):
    widget, listener, out = console

    run_commands(widget, listener, "Jakarta", "!1", "clear", "history")

    assert widget.suggestions.geocoder.search.call_args_list[-1] == call("Jakarta, Indonesia", 1)
    assert out.getvalue().rstrip().endswith("No history yet")


def test_location_unsupported(console):
    widget, listener, out = console

    run_commands(widget, listener, "@")

    assert "Geolocation is not supported." in out.getvalue()


def test_quit(console):
    widget, listener, _ = console
    assert run_commands(widget, listener, "quit") == [False]
