"""Text layout for results, suggestions and history - pure functions for testability."""
from typing import List, Sequence
from weather_data import ResolvedLocation, WeatherSnapshot, SuggestionResult, SearchOutcome
from conditions import category_for_code


def format_temperature(temp_c: float) -> str:
    return f"{temp_c}°C"


def format_result_lines(location: ResolvedLocation, snapshot: WeatherSnapshot) -> List[str]:
    """
    Lines for a successful search.

    Example:
        Jakarta, Indonesia
        Lat: -6.2, Lon: 106.8
        🌤️ 30.1°C
        Wind: 10.4 km/h · Mainly clear
    """
    category = category_for_code(snapshot.condition_code)
    return [
        location.label,
        f"Lat: {location.latitude}, Lon: {location.longitude}",
        f"{category.glyph} {format_temperature(snapshot.temperature_c)}",
        f"Wind: {snapshot.wind_speed_kmh} km/h · {category.label}",
    ]


def format_outcome_lines(outcome: SearchOutcome) -> List[str]:
    if outcome.ok:
        return format_result_lines(outcome.location, outcome.snapshot)
    return [outcome.message]


def format_suggestion_lines(result: SuggestionResult) -> List[str]:
    """Numbered candidate labels, or the inline message for other states."""
    if result.status == SuggestionResult.CLEARED:
        return []
    if result.status != SuggestionResult.OK:
        return [result.message]
    return [f"{i}. {c.label}" for i, c in enumerate(result.candidates, start=1)]


def format_history_lines(history: Sequence[str]) -> List[str]:
    """History chips, newest first."""
    if not history:
        return ["No history yet"]
    return [f"{i}. {label}" for i, label in enumerate(reversed(history), start=1)]
