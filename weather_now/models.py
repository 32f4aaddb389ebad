# ABOUTME: Pydantic BaseModels for place candidates, suggestion state, and weather lookups.
# ABOUTME: Defines structured types for Open-Meteo data and the LookupStatus tagged union.

from datetime import date
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

NOT_FOUND_MESSAGE = "City not found. Please try another city."
TRANSPORT_FAILURE_MESSAGE = "Failed to fetch weather data. Please try again."


class PlaceCandidate(BaseModel):
    """Geocoded place returned by the Open-Meteo geocoding search."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str
    admin1: str | None = None
    country: str | None = None
    latitude: float
    longitude: float
    population: int | None = None

    @property
    def label(self) -> str:
        """'name, admin1, country' with absent parts left out."""
        return ", ".join(part for part in (self.name, self.admin1, self.country) if part)


class SuggestionState(BaseModel):
    """Autocomplete panel state. highlighted_index is -1 when nothing is highlighted."""

    model_config = ConfigDict(frozen=True)

    items: tuple[PlaceCandidate, ...] = ()
    visible: bool = False
    highlighted_index: int = -1

    @model_validator(mode="after")
    def _check_index(self):
        if not -1 <= self.highlighted_index < len(self.items):
            raise ValueError(f"highlighted_index {self.highlighted_index} out of range for {len(self.items)} items")
        return self

    @property
    def highlighted(self) -> PlaceCandidate | None:
        if self.highlighted_index < 0:
            return None
        return self.items[self.highlighted_index]


class CurrentConditions(BaseModel):
    """The 'current' block of an Open-Meteo forecast response."""

    time: str | None = None
    temperature_2m: float | None = None
    relative_humidity_2m: float | None = None
    apparent_temperature: float | None = None
    precipitation: float | None = None
    weather_code: int | None = None
    cloud_cover: float | None = None
    wind_speed_10m: float | None = None
    wind_direction_10m: float | None = None
    pressure_msl: float | None = None


class DailySunTimes(BaseModel):
    """One day of sunrise/sunset data from the Open-Meteo daily block."""

    date: date
    sunrise: str | None = None
    sunset: str | None = None


class ConditionsResponse(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint."""

    latitude: float
    longitude: float
    timezone: str
    current: CurrentConditions = CurrentConditions()
    daily: list[DailySunTimes] = []


class WeatherViewModel(BaseModel):
    """UI-ready projection of one successful lookup."""

    model_config = ConfigDict(frozen=True)

    location_label: str
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    wind_direction_degrees: float | None = None
    pressure: float | None = None
    cloud_cover: float | None = None
    precipitation: float | None = None
    weather_code: int | None = None
    sunrise: str | None = None
    sunset: str | None = None
    timezone: str


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    TRANSPORT_FAILURE = "transport_failure"


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    weather: WeatherViewModel


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    kind: ErrorKind
    message: str

    @classmethod
    def not_found(cls) -> "Failed":
        return cls(kind=ErrorKind.NOT_FOUND, message=NOT_FOUND_MESSAGE)

    @classmethod
    def transport_failure(cls) -> "Failed":
        return cls(kind=ErrorKind.TRANSPORT_FAILURE, message=TRANSPORT_FAILURE_MESSAGE)


LookupStatus = Annotated[Idle | Loading | Success | Failed, Field(discriminator="status")]
