# ABOUTME: Reactive binding layer wiring the text field, suggestion panel, and result panel together.
# ABOUTME: WeatherWidget forwards UI events to the controllers and notifies subscribers on every state change.

from collections.abc import Callable

from weather_now import config
from weather_now.deps import WeatherDeps
from weather_now.lookup import WeatherLookupOrchestrator
from weather_now.models import LookupStatus, PlaceCandidate, SuggestionState
from weather_now.render import render_status, render_suggestions
from weather_now.selection import ESCAPE, Commit, CommitRawQuery, Dismiss, apply_action, on_key
from weather_now.suggestions import SuggestionController

Subscriber = Callable[["WeatherWidget"], None]


class WeatherWidget:
    """One search session: an input field, its suggestion panel, and a result panel.

    The controllers stay independent of any UI toolkit; whatever draws the widget
    subscribes here and re-renders when called back.
    """

    def __init__(self, deps: WeatherDeps, debounce_seconds: float = config.DEBOUNCE_SECONDS):
        self.query = ""
        self._subscribers: list[Subscriber] = []
        self.suggestions = SuggestionController(deps, debounce_seconds=debounce_seconds, on_change=self._notify)
        self.lookup = WeatherLookupOrchestrator(deps, suggestions=self.suggestions, on_change=self._notify)

    @property
    def suggestion_state(self) -> SuggestionState:
        return self.suggestions.state

    @property
    def status(self) -> LookupStatus:
        return self.lookup.status

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a re-render callback; returns a function that unregisters it."""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def on_input(self, text: str) -> None:
        """Text field changed."""
        self.query = text
        self.suggestions.on_query_changed(text)
        self._notify()

    async def on_key(self, key: str) -> LookupStatus | None:
        """Key pressed in the text field. Returns the lookup outcome when the key commits."""
        action = on_key(key, self.suggestions.state)
        if isinstance(action, (Commit, CommitRawQuery, Dismiss)) or key == ESCAPE:
            # Also drops any debounced or in-flight suggestion fetch, even before the panel opens
            self.suggestions.dismiss()
        else:
            self.suggestions.state = apply_action(action, self.suggestions.state)

        if isinstance(action, Commit):
            return await self._commit_candidate(action.candidate)
        if isinstance(action, CommitRawQuery):
            return await self.lookup.resolve(self.query)
        return None

    async def choose(self, index: int) -> LookupStatus:
        """Pointer click on a suggestion row."""
        candidate = self.suggestions.state.items[index]
        return await self._commit_candidate(candidate)

    async def submit(self) -> LookupStatus:
        """Search button pressed."""
        return await self.lookup.resolve(self.query)

    def blur(self) -> None:
        """Focus left the widget; the panel closes but the text stays."""
        self.suggestions.dismiss()

    def render(self) -> str:
        panel = render_suggestions(self.suggestions.state)
        result = render_status(self.lookup.status)
        return f"{self.query}\n{panel}\n\n{result}" if panel else f"{self.query}\n\n{result}"

    async def _commit_candidate(self, candidate: PlaceCandidate) -> LookupStatus:
        self.query = candidate.name
        return await self.lookup.resolve(candidate)

    def _notify(self, *_args) -> None:
        for callback in list(self._subscribers):
            callback(self)
