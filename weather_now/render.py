# ABOUTME: Plain-text rendering of the lookup result panel and the suggestion list.
# ABOUTME: Formats a LookupStatus exhaustively and a SuggestionState row by row.

import math

from weather_now.models import Failed, Idle, Loading, LookupStatus, Success, SuggestionState, WeatherViewModel
from weather_now.presentation import compass_direction, describe_weather_code, format_local_time

IDLE_PROMPT = "Enter a city name to check the weather conditions"
LOADING_TEXT = "Loading weather data..."


def render_status(status: LookupStatus) -> str:
    """Render whichever single state the lookup is in."""
    if isinstance(status, Idle):
        return IDLE_PROMPT
    if isinstance(status, Loading):
        return LOADING_TEXT
    if isinstance(status, Failed):
        return status.message
    if isinstance(status, Success):
        return render_weather(status.weather)
    raise TypeError(f"Unknown lookup status: {status!r}")


def weather_display(weather: WeatherViewModel) -> dict[str, str]:
    """Formatted display strings for each field of the result panel."""
    display = {
        "location": weather.location_label,
        "temperature": f"{_whole(weather.temperature)}°C",
        "feels_like": f"Feels like {_whole(weather.apparent_temperature)}°C",
        "description": describe_weather_code(weather.weather_code),
        "humidity": f"{_plain(weather.humidity)}%",
        "wind": f"{_whole(weather.wind_speed)} km/h",
        "wind_direction": (
            compass_direction(weather.wind_direction_degrees) if weather.wind_direction_degrees is not None else "--"
        ),
        "pressure": f"{_whole(weather.pressure)} hPa",
        "cloud_cover": f"{_plain(weather.cloud_cover)}%",
        "sunrise": format_local_time(weather.sunrise),
        "sunset": format_local_time(weather.sunset),
    }
    if (weather.precipitation or 0) > 0:
        display["precipitation"] = f"Current precipitation: {_plain(weather.precipitation)} mm"
    return display


def render_weather(weather: WeatherViewModel) -> str:
    d = weather_display(weather)
    lines = [
        d["location"],
        f"{d['temperature']}  {d['feels_like']}",
        d["description"],
        f"Humidity: {d['humidity']}",
        f"Wind: {d['wind']} {d['wind_direction']}",
        f"Pressure: {d['pressure']}",
        f"Cloud Cover: {d['cloud_cover']}",
        f"Sunrise: {d['sunrise']}",
        f"Sunset: {d['sunset']}",
    ]
    if "precipitation" in d:
        lines.append(d["precipitation"])
    return "\n".join(lines)


def render_suggestions(state: SuggestionState) -> str:
    """One candidate per line, the highlighted one marked with '>'."""
    if not state.visible:
        return ""
    return "\n".join(
        f"{'>' if i == state.highlighted_index else ' '} {candidate.label}" for i, candidate in enumerate(state.items)
    )


def _whole(value: float | None) -> str:
    # Half-up rounding, 18.5 shows as 19
    if value is None:
        return "--"
    return str(math.floor(value + 0.5))


def _plain(value: float | None) -> str:
    if value is None:
        return "--"
    return f"{value:g}"
