"""Weather fetcher - async, single-attempt wrapper around a weather provider."""
import asyncio
import logging
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import WeatherSnapshot


class WeatherFetcher:
    """
    Runs a blocking weather provider off the event loop.

    No caching and no retries: every call is exactly one upstream request,
    and failures propagate to the caller.
    """

    def __init__(self, provider: WeatherProviderBase):
        """
        Initialize weather fetcher.

        Args:
            provider: Weather provider to use
        """
        self.provider = provider

    async def fetch(self, lat: float, lon: float) -> WeatherSnapshot:
        """
        Get current weather for a coordinate pair.

        Raises:
            TransportError: On network, non-2xx or parse failure
            EmptyDataError: If the response has no current conditions
        """
        logging.info(f"Fetching weather for lat={lat} lon={lon}")
        try:
            snapshot = await asyncio.to_thread(self.provider.get_current, lat, lon)
        except WeatherProviderError as e:
            logging.warning(f"Weather fetch failed: {e}")
            raise
        logging.info(f"Weather fetch successful: {snapshot.temperature_c}°C, code {snapshot.condition_code}")
        return snapshot
