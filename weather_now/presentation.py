# ABOUTME: Pure formatting helpers turning raw Open-Meteo values into display strings.
# ABOUTME: Maps WMO weather codes to phrases, ISO timestamps to clock times, and degrees to compass points.

import math
from datetime import datetime

WEATHER_CODE_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with hail",
}

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def describe_weather_code(code: int | None) -> str:
    """Describe a WMO weather code in plain English, or 'Unknown' for unmapped codes."""
    return WEATHER_CODE_DESCRIPTIONS.get(code, "Unknown")


def format_local_time(iso_timestamp: str | None) -> str:
    """Render an ISO timestamp as a 12-hour 'hh:mm AM' clock string.

    Open-Meteo returns sun times already in the location's timezone, so the wall-clock
    fields are used as-is. Unparseable input is returned unchanged.
    """
    if not iso_timestamp:
        return ""
    try:
        moment = datetime.fromisoformat(iso_timestamp)
    except ValueError:
        return iso_timestamp
    return moment.strftime("%I:%M %p")


def compass_direction(degrees: float) -> str:
    """Map a bearing in degrees to one of eight compass points, 0 degrees being N.

    Non-finite bearings map to "--".
    """
    if not math.isfinite(degrees):
        return "--"
    # Halves round up, 22.5 is NE
    return COMPASS_POINTS[math.floor(degrees / 45 + 0.5) % 8]
