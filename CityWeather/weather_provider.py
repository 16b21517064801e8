"""Provider abstractions - allows swapping different geocoding and weather APIs."""
from abc import ABC, abstractmethod
from typing import List

from weather_data import PlaceCandidate, WeatherSnapshot


class WeatherProviderError(Exception):
    """Base exception for every lookup failure."""
    pass


class TransportError(WeatherProviderError):
    """Network failure, non-2xx status or malformed payload."""
    pass


class NotFoundError(WeatherProviderError):
    """Geocoding lookup returned zero candidates."""
    pass


class EmptyDataError(WeatherProviderError):
    """Well-formed response that is missing the expected payload."""
    pass


class GeolocationError(WeatherProviderError):
    """The device location could not be obtained."""
    pass


class GeolocationDeniedError(GeolocationError):
    pass


class GeolocationTimeoutError(GeolocationError):
    pass


class GeolocationUnavailableError(GeolocationError):
    """No location source is configured on this platform."""
    pass


class GeocoderBase(ABC):
    """Abstract base class for geocoding providers."""

    @abstractmethod
    def search(self, name: str, count: int) -> List[PlaceCandidate]:
        """
        Look up places by free text.

        Returns:
            List of candidates in upstream ranking order (may be empty)

        Raises:
            TransportError: If the request or its parsing fails
        """
        pass

    @abstractmethod
    def reverse(self, lat: float, lon: float) -> List[PlaceCandidate]:
        """
        Look up places near a coordinate pair.

        Raises:
            TransportError: If the request or its parsing fails
        """
        pass


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, lat: float, lon: float) -> WeatherSnapshot:
        """
        Fetch current weather for a coordinate pair.

        Returns:
            WeatherSnapshot: Current conditions

        Raises:
            TransportError: If the provider fails to fetch data
            EmptyDataError: If the response has no current conditions
        """
        pass
