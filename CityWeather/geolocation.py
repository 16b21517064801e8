"""Device location sources for the "use my location" action."""
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from weather_provider import GeolocationUnavailableError


class GeolocatorBase(ABC):
    """Abstract base class for platform location sources."""

    @abstractmethod
    def get_position(self) -> Tuple[float, float]:
        """
        Return the current (latitude, longitude). May block.

        Raises:
            GeolocationDeniedError: If the user refused to share the location
            GeolocationUnavailableError: If no location source exists
        """
        pass


class FixedGeolocator(GeolocatorBase):
    """Reports a configured position, e.g. WEATHER_LAT/WEATHER_LON."""

    def __init__(self, lat: float, lon: float):
        self.lat = lat
        self.lon = lon

    def get_position(self) -> Tuple[float, float]:
        return self.lat, self.lon


class UnavailableGeolocator(GeolocatorBase):
    """Used when the platform has no location source."""

    def get_position(self) -> Tuple[float, float]:
        raise GeolocationUnavailableError("Geolocation is not supported")


def build_geolocator(lat: Optional[float], lon: Optional[float]) -> GeolocatorBase:
    if lat is None or lon is None:
        return UnavailableGeolocator()
    return FixedGeolocator(lat, lon)
