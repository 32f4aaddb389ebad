# ABOUTME: Shared test fixtures for the weather widget test suite.
# ABOUTME: Provides canned Open-Meteo payloads and a mock HTTP client routed by endpoint URL.

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from weather_now import config
from weather_now.deps import WeatherDeps


def json_response(json_data, status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response carrying the given JSON body."""
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(json_data).encode(),
        headers={"content-type": "application/json"},
        request=httpx.Request("GET", "https://test"),
    )


PARIS_RESULT = {
    "id": 2988507,
    "name": "Paris",
    "latitude": 48.85341,
    "longitude": 2.3488,
    "country": "France",
    "admin1": "Île-de-France",
    "population": 2138551,
    "timezone": "Europe/Paris",
}

PARIS_TEXAS_RESULT = {
    "id": 4717560,
    "name": "Paris",
    "latitude": 33.66094,
    "longitude": -95.55551,
    "country": "United States",
    "admin1": "Texas",
    "population": 24782,
}

PARIS_FORECAST = {
    "latitude": 48.86,
    "longitude": 2.3399997,
    "timezone": "Europe/Paris",
    "current": {"time": "2025-06-01T14:00", "temperature_2m": 18.4, "weather_code": 3},
    "daily": {
        "time": ["2025-06-01"],
        "sunrise": ["2025-06-01T05:50"],
        "sunset": ["2025-06-01T21:47"],
    },
}


_DEFAULT = object()


@pytest.fixture
def open_meteo():
    """Factory for a mock httpx.AsyncClient that answers geocoding and forecast URLs.

    Pass an exception instance instead of a payload to make that endpoint raise.
    """

    def _make(geocode=_DEFAULT, forecast=_DEFAULT, geocode_status: int = 200, forecast_status: int = 200):
        geocode = {"results": [PARIS_RESULT, PARIS_TEXAS_RESULT]} if geocode is _DEFAULT else geocode
        forecast = PARIS_FORECAST if forecast is _DEFAULT else forecast
        client = AsyncMock(spec=httpx.AsyncClient)

        async def _get(url, params=None):
            if url == config.GEOCODING_URL:
                payload, status = geocode, geocode_status
            elif url == config.FORECAST_URL:
                payload, status = forecast, forecast_status
            else:
                raise AssertionError(f"unexpected URL {url}")
            if isinstance(payload, Exception):
                raise payload
            if isinstance(payload, dict) and payload.get("results") and params and params.get("count"):
                payload = {"results": payload["results"][: params["count"]]}
            return json_response(payload, status)

        client.get.side_effect = _get
        return client

    return _make


@pytest.fixture
def make_deps(open_meteo):
    """Factory for WeatherDeps around a routed mock client."""

    def _make(**kwargs) -> WeatherDeps:
        return WeatherDeps(http_client=open_meteo(**kwargs))

    return _make
