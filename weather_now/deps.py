# ABOUTME: Dependency container for the weather widget using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient shared by the geocoding and conditions calls.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_now import config


class WeatherDeps(BaseModel):
    """Dependencies injected into the controllers and the lookup orchestrator."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    language: str = config.LANGUAGE


def create_http_client(timeout: float = config.HTTP_TIMEOUT_SECONDS) -> httpx.AsyncClient:
    """Create an httpx client for the Open-Meteo APIs.

    Every failure is terminal for the attempt that hit it, so no retry transport is mounted.
    """
    return httpx.AsyncClient(timeout=timeout)
