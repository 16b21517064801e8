"""
Weather widget - the user actions of the lookup widget, wired to the core.

Front ends call these methods from their event handlers and draw whatever
the listener receives.
"""
import logging
from typing import List, Optional

from config import AppConfig
from geolocation import GeolocatorBase, build_geolocator
from history_store import HistoryStore, ThemeStore
from listener import SearchListener
from location_resolver import LocationResolver
from open_meteo_geocoder import OpenMeteoGeocoder
from open_meteo_provider import OpenMeteoProvider
from search_orchestrator import SearchOrchestrator
from storage import KeyValueStorage
from suggestion_provider import SuggestionProvider
from weather_data import SearchOutcome, SuggestionResult
from weather_fetcher import WeatherFetcher
from weather_provider import GeocoderBase, WeatherProviderBase


class WeatherWidget:
    def __init__(
        self,
        geocoder: GeocoderBase,
        provider: WeatherProviderBase,
        storage: KeyValueStorage,
        listener: SearchListener,
        geolocator: Optional[GeolocatorBase] = None,
        debounce_seconds: float = 0.25,
    ):
        self.listener = listener
        self.history = HistoryStore(storage)
        self.theme = ThemeStore(storage)
        self.suggestions = SuggestionProvider(geocoder, listener, debounce_seconds=debounce_seconds)
        self.orchestrator = SearchOrchestrator(
            resolver=LocationResolver(geocoder),
            fetcher=WeatherFetcher(provider),
            history=self.history,
            listener=listener,
            geolocator=geolocator,
        )

    def start(self) -> List[str]:
        """Publish the persisted state once, at startup."""
        entries = self.history.load()
        self.listener.on_theme_changed(self.theme.load())
        self.listener.on_history_changed(entries)
        logging.info(f"Widget started with {len(entries)} history entries")
        return entries

    # ── Search box ──────────────────────────────────────────────

    def input_changed(self, text: str) -> None:
        self.suggestions.suggest(text)

    async def submit(self, text: str) -> SearchOutcome:
        """Enter key: take the first visible suggestion, or search the text."""
        latest = self.suggestions.latest
        if latest is not None and latest.status == SuggestionResult.OK and latest.candidates:
            first = latest.candidates[0]
            self.suggestions.clear()
            return await self.orchestrator.search_by_place(first)
        return await self.search(text)

    async def search(self, text: str) -> SearchOutcome:
        """Explicit search action."""
        self.suggestions.clear()
        return await self.orchestrator.search_by_name(text)

    async def choose_suggestion(self, index: int) -> Optional[SearchOutcome]:
        """Pick a candidate from the visible suggestions (0-based)."""
        latest = self.suggestions.latest
        if latest is None or latest.status != SuggestionResult.OK:
            return None
        if not 0 <= index < len(latest.candidates):
            return None
        candidate = latest.candidates[index]
        self.suggestions.clear()
        return await self.orchestrator.search_by_place(candidate)

    # ── Other actions ───────────────────────────────────────────

    async def choose_history(self, label: str) -> SearchOutcome:
        self.suggestions.clear()
        return await self.orchestrator.search_by_history(label)

    async def use_my_location(self) -> SearchOutcome:
        self.suggestions.clear()
        return await self.orchestrator.search_by_device()

    def clear_history(self) -> None:
        self.history.clear()
        self.listener.on_history_changed([])

    def toggle_theme(self) -> str:
        theme = self.theme.toggle()
        self.listener.on_theme_changed(theme)
        return theme


def build_widget(config: AppConfig, listener: SearchListener) -> WeatherWidget:
    geocoder = OpenMeteoGeocoder(
        base_url=config.geocode_url,
        language=config.language,
        timeout=config.timeout,
    )
    provider = OpenMeteoProvider(base_url=config.weather_url, timeout=config.timeout)
    widget = WeatherWidget(
        geocoder=geocoder,
        provider=provider,
        storage=KeyValueStorage(config.db_path),
        listener=listener,
        geolocator=build_geolocator(config.lat, config.lon),
        debounce_seconds=config.debounce_seconds,
    )
    logging.info("Weather widget ready (lang=%s, debounce=%sms)", config.language, config.debounce_ms)
    return widget
