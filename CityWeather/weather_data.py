"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from typing import Optional, Tuple


def format_coordinates(lat: float, lon: float) -> str:
    """Fallback label for a location that has no name."""
    return f"{lat}, {lon}"


@dataclass(frozen=True)
class PlaceCandidate:
    """A single geocoding match."""
    name: str
    latitude: float
    longitude: float
    admin1: Optional[str] = None  # state / province
    country: Optional[str] = None

    @property
    def label(self) -> str:
        """Display label, e.g. "Jakarta, Jakarta, Indonesia"."""
        parts = [self.name, self.admin1, self.country]
        return ", ".join(p for p in parts if p)

    @property
    def short_label(self) -> str:
        """Name and country only, as used for reverse lookups."""
        parts = [self.name, self.country]
        return ", ".join(p for p in parts if p)

    @classmethod
    def from_result(cls, result: dict) -> "PlaceCandidate":
        """Build from one entry of a geocoding ``results`` array."""
        return cls(
            name=result.get("name") or "",
            latitude=float(result["latitude"]),
            longitude=float(result["longitude"]),
            admin1=result.get("admin1") or None,
            country=result.get("country") or None,
        )


@dataclass(frozen=True)
class ResolvedLocation:
    """Canonical result of resolving a query or a coordinate pair."""
    label: str
    latitude: float
    longitude: float

    def __post_init__(self):
        if not self.label or not self.label.strip():
            object.__setattr__(self, "label", format_coordinates(self.latitude, self.longitude))


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions at a single point in time."""
    temperature_c: float
    wind_speed_kmh: float
    condition_code: int


@dataclass(frozen=True)
class SuggestionResult:
    """What the suggestion surface should show for one lookup."""
    status: str  # cleared, loading, ok, empty, failed
    query: str = ""
    candidates: Tuple[PlaceCandidate, ...] = ()
    message: str = ""

    CLEARED = "cleared"
    LOADING = "loading"
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchOutcome:
    """Terminal state of one search cycle."""
    status: str  # success, failed
    location: Optional[ResolvedLocation] = None
    snapshot: Optional[WeatherSnapshot] = None
    message: str = ""
    reason: str = ""  # not_found, transport, empty_data, geolocation, no_query

    SUCCESS = "success"
    FAILED = "failed"

    @property
    def ok(self) -> bool:
        return self.status == self.SUCCESS
