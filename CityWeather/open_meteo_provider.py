"""Open-Meteo current weather provider implementation."""
import logging
import requests
from weather_provider import WeatherProviderBase, TransportError, EmptyDataError
from weather_data import WeatherSnapshot


def raise_for_response(response: requests.Response, api_name: str) -> None:
    """Parse and raise a TransportError from a non-2xx Open-Meteo response."""
    try:
        error_data = response.json()
        reason = error_data.get("reason", "Unknown error")

        logging.error(f"{api_name} error response: {error_data}")
        raise TransportError(f"{api_name} error {response.status_code}: {reason}")
    except (ValueError, AttributeError):
        # Not JSON, use HTTP status
        logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
        raise TransportError(
            f"HTTP {response.status_code}: {response.text[:200]}"
        )


class OpenMeteoProvider(WeatherProviderBase):
    """
    Weather provider using the Open-Meteo forecast API.

    Free, no API key required: https://open-meteo.com/en/docs
    Only the ``current_weather`` block is requested.
    """

    BASE_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: str = BASE_URL, timeout: int = 10):
        """
        Initialize Open-Meteo provider.

        Args:
            base_url: Forecast endpoint
            timeout: HTTP request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def get_current(self, lat: float, lon: float) -> WeatherSnapshot:
        """
        Fetch current weather from Open-Meteo.

        Returns:
            WeatherSnapshot: Current weather information

        Raises:
            TransportError: If the API request fails
            EmptyDataError: If the response has no ``current_weather`` block
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
        }

        try:
            logging.info(f"Making Open-Meteo weather request: {self.base_url}")
            logging.debug(f"Request parameters: lat={lat}, lon={lon}")

            response = requests.get(self.base_url, params=params, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")

            if not response.ok:
                logging.error(f"API request failed with status {response.status_code}")
                raise_for_response(response, "Open-Meteo weather")

            data = response.json()
            logging.debug(f"API response (truncated): {str(data)[:500]}...")

            current = data.get("current_weather")
            if not current:
                logging.error("Response missing 'current_weather' block")
                raise EmptyDataError("Response missing 'current_weather' block")

            snapshot = WeatherSnapshot(
                temperature_c=float(current["temperature"]),
                wind_speed_kmh=float(current["windspeed"]),
                condition_code=int(current["weathercode"]),
            )

            logging.info(f"Successfully parsed weather data: {snapshot.temperature_c}°C, code {snapshot.condition_code}")
            return snapshot

        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(f"Network error: {str(e)}")
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise TransportError(f"Failed to parse response: {str(e)}")
