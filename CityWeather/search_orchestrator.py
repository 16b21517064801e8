"""
Search orchestrator - sequences resolve -> fetch -> history -> render.

One search cycle moves through:

    idle -> resolving -> fetching -> (success | failed) -> idle

Searches by chosen suggestion skip ``resolving``. Every search takes a new
sequence number; only the latest search may change the state, touch the
history or reach the listener, so a slow older search finishing late is a
no-op.
"""
import asyncio
import logging
from typing import Optional, Union
from weather_provider import (
    WeatherProviderError,
    NotFoundError,
    EmptyDataError,
    GeolocationError,
    GeolocationUnavailableError,
)
from weather_data import PlaceCandidate, ResolvedLocation, SearchOutcome
from location_resolver import LocationResolver
from weather_fetcher import WeatherFetcher
from history_store import HistoryStore
from geolocation import GeolocatorBase, UnavailableGeolocator
from listener import SearchListener

IDLE = "idle"
RESOLVING = "resolving"
FETCHING = "fetching"
SUCCESS = "success"
FAILED = "failed"

MSG_NO_QUERY = "Enter a city name."
MSG_NOT_FOUND = "City not found."
MSG_LOOKUP_FAILED = "Failed to fetch data."
MSG_WEATHER_FAILED = "Failed to fetch weather data."
MSG_GEO_FAILED = "Failed to detect location."
MSG_GEO_UNSUPPORTED = "Geolocation is not supported."

GEOLOCATION_TIMEOUT_SECONDS = 10.0


class SearchOrchestrator:
    def __init__(
        self,
        resolver: LocationResolver,
        fetcher: WeatherFetcher,
        history: HistoryStore,
        listener: SearchListener,
        geolocator: Optional[GeolocatorBase] = None,
        geolocation_timeout: float = GEOLOCATION_TIMEOUT_SECONDS,
    ):
        self.resolver = resolver
        self.fetcher = fetcher
        self.history = history
        self.listener = listener
        self.geolocator = geolocator or UnavailableGeolocator()
        self.geolocation_timeout = geolocation_timeout

        self.state = IDLE
        self.last_outcome: Optional[SearchOutcome] = None
        self._seq = 0

    # ── Entry points ────────────────────────────────────────────

    async def search_by_name(self, query: str) -> SearchOutcome:
        """Free-text search: resolve the name, then fetch."""
        seq = self._begin()
        query = query.strip()
        if not query:
            return self._finish(seq, self._failed(MSG_NO_QUERY, "no_query"))

        self._transition(seq, RESOLVING, "Looking up location...")
        try:
            location = await self.resolver.resolve_by_name(query)
        except NotFoundError as e:
            logging.info(f"Search failed: {e}")
            return self._finish(seq, self._failed(MSG_NOT_FOUND, "not_found"))
        except WeatherProviderError as e:
            logging.error(f"Location lookup failed: {e}")
            return self._finish(seq, self._failed(MSG_LOOKUP_FAILED, "transport"))

        return await self._fetch(seq, location)

    async def search_by_place(self, place: Union[PlaceCandidate, ResolvedLocation]) -> SearchOutcome:
        """Chosen suggestion: coordinates are already known, go straight to fetching."""
        seq = self._begin()
        if isinstance(place, PlaceCandidate):
            place = LocationResolver.resolve_candidate(place)
        return await self._fetch(seq, place)

    async def search_by_history(self, label: str) -> SearchOutcome:
        """History chips only store labels, so they re-run a search by name."""
        return await self.search_by_name(label)

    async def search_by_device(self) -> SearchOutcome:
        """Ask the location source, label the position, then fetch."""
        seq = self._begin()
        self._transition(seq, RESOLVING, "Detecting location...")
        try:
            lat, lon = await asyncio.wait_for(
                asyncio.to_thread(self.geolocator.get_position),
                timeout=self.geolocation_timeout,
            )
        except asyncio.TimeoutError:
            logging.warning(f"Geolocation timed out after {self.geolocation_timeout}s")
            return self._finish(seq, self._failed(MSG_GEO_FAILED, "geolocation"))
        except GeolocationUnavailableError as e:
            logging.warning(f"Geolocation unavailable: {e}")
            return self._finish(seq, self._failed(MSG_GEO_UNSUPPORTED, "geolocation"))
        except GeolocationError as e:
            logging.warning(f"Geolocation failed: {e}")
            return self._finish(seq, self._failed(MSG_GEO_FAILED, "geolocation"))

        location = await self.resolver.resolve_by_coordinates(lat, lon)
        return await self._fetch(seq, location)

    def is_current(self, seq: int) -> bool:
        return seq == self._seq

    # ── Cycle internals ─────────────────────────────────────────

    async def _fetch(self, seq: int, location: ResolvedLocation) -> SearchOutcome:
        self._transition(seq, FETCHING, "Fetching weather...")
        try:
            snapshot = await self.fetcher.fetch(location.latitude, location.longitude)
        except EmptyDataError as e:
            logging.error(f"Weather response was empty for {location.label}: {e}")
            return self._finish(seq, self._failed(MSG_WEATHER_FAILED, "empty_data", location))
        except WeatherProviderError as e:
            logging.error(f"Weather fetch failed for {location.label}: {e}")
            return self._finish(seq, self._failed(MSG_WEATHER_FAILED, "transport", location))

        outcome = SearchOutcome(SearchOutcome.SUCCESS, location=location, snapshot=snapshot)
        if self.is_current(seq):
            entries = self.history.push(location.label)
            self.listener.on_history_changed(entries)
        return self._finish(seq, outcome)

    def _begin(self) -> int:
        self._seq += 1
        self.state = IDLE
        logging.debug(f"Search #{self._seq} started")
        return self._seq

    def _transition(self, seq: int, state: str, status: str) -> None:
        if not self.is_current(seq):
            return
        self.state = state
        self.listener.on_status(status)

    def _finish(self, seq: int, outcome: SearchOutcome) -> SearchOutcome:
        if not self.is_current(seq):
            logging.debug(f"Discarding outcome of superseded search #{seq} (latest #{self._seq})")
            return outcome
        self.state = SUCCESS if outcome.ok else FAILED
        self.last_outcome = outcome
        self.listener.on_search_result(outcome)
        self.state = IDLE
        return outcome

    @staticmethod
    def _failed(message: str, reason: str, location: Optional[ResolvedLocation] = None) -> SearchOutcome:
        return SearchOutcome(SearchOutcome.FAILED, location=location, message=message, reason=reason)
