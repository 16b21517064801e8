"""
WMO weather interpretation codes -> display glyph and label.

Codes reported by Open-Meteo in ``current_weather.weathercode``:
    0           = Clear sky
    1, 2, 3     = Mainly clear, partly cloudy, overcast
    45, 48      = Fog, depositing rime fog
    51, 53, 55  = Drizzle (light, moderate, dense)
    56, 57      = Freezing drizzle
    61, 63, 65  = Rain (slight, moderate, heavy)
    66, 67      = Freezing rain
    71, 73, 75  = Snow (slight, moderate, heavy)
    77          = Snow grains
    80, 81, 82  = Rain showers (slight, moderate, violent)
    85, 86      = Snow showers
    95          = Thunderstorm
    96, 99      = Thunderstorm with hail
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ConditionCategory:
    glyph: str
    label: str
    family: str


UNKNOWN_CONDITION = ConditionCategory("❔", "Unknown", "unknown")

CONDITIONS: Dict[int, ConditionCategory] = {
    0:  ConditionCategory("☀️", "Clear sky", "clear"),
    1:  ConditionCategory("🌤️", "Mainly clear", "clear"),
    2:  ConditionCategory("⛅", "Partly cloudy", "cloudy"),
    3:  ConditionCategory("☁️", "Overcast", "cloudy"),
    45: ConditionCategory("🌫️", "Fog", "fog"),
    48: ConditionCategory("🌫️", "Rime fog", "fog"),
    51: ConditionCategory("🌦️", "Light drizzle", "drizzle"),
    53: ConditionCategory("🌧️", "Moderate drizzle", "drizzle"),
    55: ConditionCategory("🌧️", "Dense drizzle", "drizzle"),
    56: ConditionCategory("🌧️", "Freezing drizzle", "freezing rain"),
    57: ConditionCategory("🌧️", "Dense freezing drizzle", "freezing rain"),
    61: ConditionCategory("🌧️", "Light rain", "rain"),
    63: ConditionCategory("🌧️", "Moderate rain", "rain"),
    65: ConditionCategory("🌧️", "Heavy rain", "rain"),
    66: ConditionCategory("🌧️", "Freezing rain", "freezing rain"),
    67: ConditionCategory("🌧️", "Heavy freezing rain", "freezing rain"),
    71: ConditionCategory("❄️", "Light snow", "snow"),
    73: ConditionCategory("❄️", "Moderate snow", "snow"),
    75: ConditionCategory("❄️", "Heavy snow", "snow"),
    77: ConditionCategory("❄️", "Snow grains", "snow"),
    80: ConditionCategory("🌧️", "Light showers", "showers"),
    81: ConditionCategory("🌧️", "Heavy showers", "showers"),
    82: ConditionCategory("⛈️", "Violent showers", "showers"),
    85: ConditionCategory("❄️", "Light snow showers", "showers"),
    86: ConditionCategory("❄️", "Heavy snow showers", "showers"),
    95: ConditionCategory("⛈️", "Thunderstorm", "thunderstorm"),
    96: ConditionCategory("⛈️", "Thunderstorm with light hail", "thunderstorm"),
    99: ConditionCategory("⛈️", "Thunderstorm with heavy hail", "thunderstorm"),
}


def category_for_code(code: int) -> ConditionCategory:
    """Map a condition code to its category. Never raises."""
    try:
        return CONDITIONS.get(code, UNKNOWN_CONDITION)
    except TypeError:
        # unhashable input
        return UNKNOWN_CONDITION
