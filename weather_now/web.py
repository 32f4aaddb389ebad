# ABOUTME: ASGI web entry point exposing autocomplete suggestions and weather lookups as JSON.
# ABOUTME: Builds a Starlette app around WeatherDeps; serve with any ASGI server (e.g. `uvicorn weather_now.web:app`).

import contextlib
import logging

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_now import config
from weather_now.deps import WeatherDeps, create_http_client
from weather_now.lookup import WeatherLookupOrchestrator
from weather_now.models import ErrorKind, Failed, PlaceCandidate, Success
from weather_now.render import weather_display
from weather_now.weather_service import search_places

logger = logging.getLogger(__name__)

_FAILURE_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.TRANSPORT_FAILURE: 502,
}


def candidate_from_params(params) -> PlaceCandidate | None:
    """Build a PlaceCandidate from query parameters of a clicked suggestion, if present.

    Raises ValueError when coordinates are present but malformed.
    """
    if "latitude" not in params or "longitude" not in params:
        return None
    return PlaceCandidate(
        name=params.get("name") or f"{params['latitude']}, {params['longitude']}",
        admin1=params.get("admin1") or None,
        country=params.get("country") or None,
        latitude=float(params["latitude"]),
        longitude=float(params["longitude"]),
    )


async def suggestions_endpoint(request: Request) -> JSONResponse:
    """GET /api/suggestions?q=...: autocomplete candidates, or an empty list on failure."""
    deps: WeatherDeps = request.app.state.deps
    query = request.query_params.get("q", "").strip()
    if len(query) < config.MIN_QUERY_LENGTH:
        return JSONResponse({"items": []})

    try:
        candidates = await search_places(deps.http_client, query, config.SUGGESTION_COUNT, deps.language)
    except (httpx.HTTPError, ValueError, KeyError, TypeError):
        candidates = []
    return JSONResponse({"items": [c.model_dump(mode="json") for c in candidates]})


async def weather_endpoint(request: Request) -> JSONResponse:
    """GET /api/weather?q=... or ?latitude=..&longitude=..&name=..: one complete lookup."""
    deps: WeatherDeps = request.app.state.deps
    try:
        target = candidate_from_params(request.query_params)
    except ValueError:
        return JSONResponse({"error": "latitude and longitude must be numbers"}, status_code=400)
    if target is None:
        target = request.query_params.get("q", "").strip()
        if not target:
            return JSONResponse({"error": "Missing city query"}, status_code=400)

    status = await WeatherLookupOrchestrator(deps).resolve(target)
    body = status.model_dump(mode="json")
    if isinstance(status, Success):
        body["display"] = weather_display(status.weather)
        return JSONResponse(body)
    if isinstance(status, Failed):
        return JSONResponse(body, status_code=_FAILURE_STATUS_CODES[status.kind])
    logger.error("Lookup ended in unexpected state %s", status.status)
    return JSONResponse(body, status_code=500)


def create_app(deps: WeatherDeps) -> Starlette:
    """Create the Starlette app; the shared HTTP client is closed on shutdown."""

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/api/suggestions", suggestions_endpoint),
            Route("/api/weather", weather_endpoint),
        ],
        lifespan=lifespan,
    )
    app.state.deps = deps
    return app


config.setup_logging()

app = create_app(WeatherDeps(http_client=create_http_client()))
