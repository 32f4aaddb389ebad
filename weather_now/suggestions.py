# ABOUTME: Debounced autocomplete that turns raw keystrokes into a stable suggestion list.
# ABOUTME: Uses a generation counter so only the most recent query's geocoding results are applied.

import asyncio
from collections.abc import Callable

import httpx

from weather_now import config
from weather_now.deps import WeatherDeps
from weather_now.models import SuggestionState
from weather_now.weather_service import search_places


class SuggestionController:
    """Owns the debounce timer and the suggestion panel state.

    Every call to on_query_changed bumps a generation counter. A fetch carries the
    generation it was started under and its result is only applied if no newer query
    (or dismissal) has happened since. Superseded fetches already on the wire are left
    to finish; only their results are dropped.
    """

    def __init__(
        self,
        deps: WeatherDeps,
        debounce_seconds: float = config.DEBOUNCE_SECONDS,
        count: int = config.SUGGESTION_COUNT,
        on_change: Callable[[SuggestionState], None] | None = None,
    ):
        self.deps = deps
        self.debounce_seconds = debounce_seconds
        self.count = count
        self.on_change = on_change
        self.query = ""
        self._state = SuggestionState()
        self._generation = 0
        self._timer: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> SuggestionState:
        return self._state

    @state.setter
    def state(self, value: SuggestionState) -> None:
        self._state = value
        if self.on_change is not None:
            self.on_change(value)

    def on_query_changed(self, query: str) -> None:
        """Schedule a suggestion fetch for the query once typing goes quiet.

        Must be called from a running event loop. Queries shorter than two characters
        after trimming clear the panel immediately without contacting the geocoder.
        """
        self.query = query
        self._generation += 1
        self._cancel_timer()

        if len(query.strip()) < config.MIN_QUERY_LENGTH:
            self.state = SuggestionState()
            return

        task = asyncio.get_running_loop().create_task(self._fetch_after_quiet(query, self._generation))
        self._timer = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def dismiss(self) -> None:
        """Hide the panel and drop the effect of any pending or in-flight fetch."""
        self._generation += 1
        self._cancel_timer()
        self.state = SuggestionState()

    async def settle(self) -> None:
        """Wait until every scheduled or in-flight fetch has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _fetch_after_quiet(self, query: str, generation: int) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # Past the quiescence window the fetch is no longer cancellable, only discardable
        if self._timer is asyncio.current_task():
            self._timer = None

        try:
            candidates = await search_places(
                self.deps.http_client, query.strip(), self.count, self.deps.language
            )
        except (httpx.HTTPError, ValueError, KeyError, TypeError):
            candidates = []

        if generation != self._generation:
            return
        if candidates:
            self.state = SuggestionState(items=tuple(candidates), visible=True)
        else:
            self.state = SuggestionState()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
