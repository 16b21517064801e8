"""Open-Meteo geocoding provider - place search by name and by coordinates."""
import logging
import requests
from typing import List
from weather_provider import GeocoderBase, TransportError
from weather_data import PlaceCandidate
from open_meteo_provider import raise_for_response


class OpenMeteoGeocoder(GeocoderBase):
    """
    Geocoder backed by the Open-Meteo geocoding API (no API key needed).

    An absent or empty ``results`` array is a valid "no match" answer and
    yields an empty list.
    """

    BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(self, base_url: str = BASE_URL, language: str = "en", timeout: int = 10):
        """
        Args:
            base_url: Geocoding search endpoint
            language: Locale for returned place names (e.g. "en", "id")
            timeout: HTTP request timeout in seconds
        """
        self.base_url = base_url
        self.language = language
        self.timeout = timeout

    def search(self, name: str, count: int) -> List[PlaceCandidate]:
        params = {"name": name, "count": count, "language": self.language}
        return self._request(params)

    def reverse(self, lat: float, lon: float) -> List[PlaceCandidate]:
        params = {"latitude": lat, "longitude": lon, "count": 1}
        return self._request(params)

    def _request(self, params: dict) -> List[PlaceCandidate]:
        try:
            logging.info(f"Making Open-Meteo geocoding request: {self.base_url}")
            logging.debug(f"Request parameters: {params}")

            response = requests.get(self.base_url, params=params, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")

            if not response.ok:
                logging.error(f"API request failed with status {response.status_code}")
                raise_for_response(response, "Open-Meteo geocoding")

            data = response.json()
            results = data.get("results") or []
            candidates = [PlaceCandidate.from_result(r) for r in results]

            logging.info(f"Geocoding returned {len(candidates)} candidate(s)")
            return candidates

        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(f"Network error: {str(e)}")
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise TransportError(f"Failed to parse response: {str(e)}")
