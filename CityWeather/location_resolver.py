"""Location resolver - turns names, suggestions and coordinates into locations."""
import asyncio
import logging
from weather_provider import GeocoderBase, NotFoundError
from weather_data import PlaceCandidate, ResolvedLocation, format_coordinates


class LocationResolver:
    """Produces canonical ``ResolvedLocation`` values using a geocoder."""

    def __init__(self, geocoder: GeocoderBase):
        self.geocoder = geocoder

    async def resolve_by_name(self, query: str) -> ResolvedLocation:
        """
        Resolve free text to the single best geocoding match.

        Raises:
            NotFoundError: If the lookup returns zero candidates
            TransportError: On network, non-2xx or parse failure
        """
        query = query.strip()
        logging.info(f"Resolving location by name: {query!r}")
        candidates = await asyncio.to_thread(self.geocoder.search, query, 1)
        if not candidates:
            logging.info(f"No geocoding match for {query!r}")
            raise NotFoundError(f"City not found: {query}")
        return self.resolve_candidate(candidates[0])

    async def resolve_by_coordinates(self, lat: float, lon: float) -> ResolvedLocation:
        """
        Reverse-resolve a label for known coordinates.

        Never raises: any lookup failure degrades to a "<lat>, <lon>" label,
        since weather can still be shown without a place name.
        """
        label = format_coordinates(lat, lon)
        try:
            candidates = await asyncio.to_thread(self.geocoder.reverse, lat, lon)
            if candidates and candidates[0].short_label:
                label = candidates[0].short_label
            else:
                logging.info(f"Reverse geocoding found nothing for {label}")
        except Exception as e:  # pylint: disable=broad-except
            logging.warning(f"Reverse geocoding failed, using coordinates as label: {e}")
        return ResolvedLocation(label=label, latitude=lat, longitude=lon)

    @staticmethod
    def resolve_candidate(candidate: PlaceCandidate) -> ResolvedLocation:
        return ResolvedLocation(
            label=candidate.label,
            latitude=candidate.latitude,
            longitude=candidate.longitude,
        )
