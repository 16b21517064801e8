"""
Configuration - loads from .env, provides defaults.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from open_meteo_geocoder import OpenMeteoGeocoder
from open_meteo_provider import OpenMeteoProvider


@dataclass
class AppConfig:
    geocode_url: str = OpenMeteoGeocoder.BASE_URL
    weather_url: str = OpenMeteoProvider.BASE_URL
    language: str = "en"
    timeout: int = 10
    db_path: str = "cityweather.db"
    lat: Optional[float] = None
    lon: Optional[float] = None
    debounce_ms: int = 250
    log_file: str = "cityweather.log"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid {name}: {exc}") from exc


def load_config() -> AppConfig:
    load_dotenv()
    lat = os.getenv("WEATHER_LAT")
    lon = os.getenv("WEATHER_LON")

    lat_val = lon_val = None
    if lat and lon:
        try:
            lat_val = float(lat)
            lon_val = float(lon)
        except ValueError as exc:
            raise SystemExit(f"Invalid coordinates: {exc}") from exc

    config = AppConfig(
        geocode_url=os.getenv("GEOCODE_URL", OpenMeteoGeocoder.BASE_URL),
        weather_url=os.getenv("WEATHER_URL", OpenMeteoProvider.BASE_URL),
        language=os.getenv("WEATHER_LANG", "en"),
        timeout=_int_env("WEATHER_TIMEOUT", 10),
        db_path=os.getenv("WEATHER_DB", "cityweather.db"),
        lat=lat_val,
        lon=lon_val,
        debounce_ms=_int_env("SUGGEST_DEBOUNCE_MS", 250),
        log_file=os.getenv("WEATHER_LOG_FILE", "cityweather.log"),
    )
    return config
