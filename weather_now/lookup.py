# ABOUTME: Resolve-then-fetch sequencing from a committed query or candidate to a LookupStatus.
# ABOUTME: Geocodes free text, fetches current conditions, and builds the WeatherViewModel.

import logging
from collections.abc import Callable

import httpx

from weather_now import config
from weather_now.deps import WeatherDeps
from weather_now.models import (
    ConditionsResponse,
    Failed,
    Idle,
    Loading,
    LookupStatus,
    PlaceCandidate,
    Success,
    WeatherViewModel,
)
from weather_now.suggestions import SuggestionController
from weather_now.weather_service import get_current_conditions, search_places

logger = logging.getLogger(__name__)

# Transport errors, bad JSON, schema mismatches, and missing keys all surface the same way
FETCH_ERRORS = (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError)


class WeatherLookupOrchestrator:
    """Owns LookupStatus and drives geocoding followed by the conditions fetch.

    Only the most recently started lookup may change the status: each resolve() takes
    a generation number and a slower, older call finishing late is ignored.
    """

    def __init__(
        self,
        deps: WeatherDeps,
        suggestions: SuggestionController | None = None,
        on_change: Callable[[LookupStatus], None] | None = None,
    ):
        self.deps = deps
        self.suggestions = suggestions
        self.on_change = on_change
        self._status: LookupStatus = Idle()
        self._generation = 0

    @property
    def status(self) -> LookupStatus:
        return self._status

    async def resolve(self, query_or_candidate: str | PlaceCandidate) -> LookupStatus:
        """Look up current weather for a typed city name or an already chosen candidate.

        A string is geocoded first (count=1); a PlaceCandidate skips straight to the
        conditions fetch. Blank strings are ignored and return the current status.

        Returns the outcome of this call. If a newer resolve() started in the meantime
        the outcome is returned but not applied.
        """
        if isinstance(query_or_candidate, str) and not query_or_candidate.strip():
            return self._status

        self._generation += 1
        generation = self._generation
        if self.suggestions is not None:
            self.suggestions.dismiss()
        self._set_status(Loading())

        outcome = await self._lookup(query_or_candidate)

        if generation != self._generation:
            logger.debug("Discarding superseded lookup for %r", _describe(query_or_candidate))
            return outcome
        self._set_status(outcome)
        return outcome

    async def _lookup(self, query_or_candidate: str | PlaceCandidate) -> LookupStatus:
        client = self.deps.http_client
        try:
            if isinstance(query_or_candidate, PlaceCandidate):
                place = query_or_candidate
            else:
                candidates = await search_places(client, query_or_candidate.strip(), 1, self.deps.language)
                if not candidates:
                    logger.info("No geocoding match for %r", query_or_candidate)
                    return Failed.not_found()
                place = candidates[0]

            conditions = await get_current_conditions(
                client,
                place.latitude,
                place.longitude,
                current_fields=config.CURRENT_FIELDS,
                daily_fields=config.DAILY_FIELDS,
                timezone="auto",
            )
            return Success(weather=build_view_model(place, conditions))
        except FETCH_ERRORS as e:
            logger.warning("Weather lookup failed for %r: %s", _describe(query_or_candidate), e)
            return Failed.transport_failure()

    def _set_status(self, status: LookupStatus) -> None:
        self._status = status
        if self.on_change is not None:
            self.on_change(status)


def build_view_model(place: PlaceCandidate, conditions: ConditionsResponse) -> WeatherViewModel:
    """Project a place and its raw conditions into the UI-ready WeatherViewModel.

    Only today's entry (index 0) of the daily sun times is used.
    """
    current = conditions.current
    today = conditions.daily[0] if conditions.daily else None
    return WeatherViewModel(
        location_label=place.label,
        temperature=current.temperature_2m,
        apparent_temperature=current.apparent_temperature,
        humidity=current.relative_humidity_2m,
        wind_speed=current.wind_speed_10m,
        wind_direction_degrees=current.wind_direction_10m,
        pressure=current.pressure_msl,
        cloud_cover=current.cloud_cover,
        precipitation=current.precipitation,
        weather_code=current.weather_code,
        sunrise=today.sunrise if today else None,
        sunset=today.sunset if today else None,
        timezone=conditions.timezone,
    )


def _describe(query_or_candidate: str | PlaceCandidate) -> str:
    if isinstance(query_or_candidate, PlaceCandidate):
        return query_or_candidate.label
    return query_or_candidate
