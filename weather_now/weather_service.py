# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles geocoding search and current-conditions retrieval with today's sun times.

from collections.abc import Iterable
from datetime import date

import httpx

from weather_now import config
from weather_now.models import ConditionsResponse, CurrentConditions, DailySunTimes, PlaceCandidate


async def search_places(
    client: httpx.AsyncClient,
    name: str,
    count: int,
    language: str = config.LANGUAGE,
) -> list[PlaceCandidate]:
    """Search Open-Meteo geocoding for places matching a free-text name.

    Returns candidates in provider relevance order. A response without a 'results'
    key, or with an empty one, means nothing matched and yields an empty list. A body
    that is not a JSON object raises ValueError.
    """
    resp = await client.get(
        config.GEOCODING_URL,
        params={"name": name, "count": count, "language": language, "format": "json"},
    )
    resp.raise_for_status()
    data = _json_object(resp)

    results = data.get("results")
    if not results:
        return []
    return [PlaceCandidate.model_validate(r) for r in results]


async def get_current_conditions(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    current_fields: Iterable[str] = config.CURRENT_FIELDS,
    daily_fields: Iterable[str] = config.DAILY_FIELDS,
    timezone: str = "auto",
) -> ConditionsResponse:
    """Fetch current conditions and daily sun times from the Open-Meteo forecast API."""
    resp = await client.get(
        config.FORECAST_URL,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(current_fields),
            "daily": ",".join(daily_fields),
            "timezone": timezone,
        },
    )
    resp.raise_for_status()
    data = _json_object(resp)

    return ConditionsResponse(
        latitude=data["latitude"],
        longitude=data["longitude"],
        timezone=data.get("timezone", "UTC"),
        current=CurrentConditions.model_validate(data.get("current") or {}),
        daily=parse_daily_data(data.get("daily") or {}),
    )


def parse_daily_data(raw: dict) -> list[DailySunTimes]:
    """Parse Open-Meteo column-oriented daily data into row-oriented DailySunTimes objects."""
    dates = raw.get("time", [])
    if not dates:
        return []

    result = []
    for i, d in enumerate(dates):
        result.append(
            DailySunTimes(
                date=date.fromisoformat(d),
                sunrise=_get_at(raw, "sunrise", i),
                sunset=_get_at(raw, "sunset", i),
            )
        )
    return result


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]


def _json_object(resp: httpx.Response) -> dict:
    """Decode a response body that must be a JSON object, raising ValueError otherwise."""
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object from {resp.request.url}, got {type(data).__name__}")
    return data
