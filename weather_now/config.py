# ABOUTME: Startup configuration constants for the weather widget, overridable via .env.
# ABOUTME: Also provides setup_logging() for the process entry points.

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

GEOCODING_URL = os.environ.get("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.environ.get("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

LANGUAGE = os.environ.get("WEATHER_LANGUAGE", "en")
SUGGESTION_COUNT = int(os.environ.get("SUGGESTION_COUNT", "5"))
DEBOUNCE_SECONDS = float(os.environ.get("DEBOUNCE_SECONDS", "0.3"))
HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "10"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

MIN_QUERY_LENGTH = 2

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "cloud_cover",
    "wind_speed_10m",
    "wind_direction_10m",
    "pressure_msl",
)
DAILY_FIELDS = ("sunrise", "sunset")


def setup_logging(level: str | None = None) -> None:
    """Configure root logging to stdout and quiet the HTTP client loggers."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
