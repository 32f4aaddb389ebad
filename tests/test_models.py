# ABOUTME: Contract tests for Pydantic models used by the weather widget.
# ABOUTME: Validates place candidates, suggestion state invariants, and the LookupStatus union.

import pytest
from pydantic import TypeAdapter, ValidationError

from weather_now.models import (
    NOT_FOUND_MESSAGE,
    TRANSPORT_FAILURE_MESSAGE,
    ErrorKind,
    Failed,
    Idle,
    Loading,
    LookupStatus,
    PlaceCandidate,
    Success,
    SuggestionState,
    WeatherViewModel,
)


def _candidate(name: str = "Paris", **kwargs) -> PlaceCandidate:
    return PlaceCandidate(id=1, name=name, country="France", latitude=48.85, longitude=2.35, **kwargs)


class TestPlaceCandidate:
    def test_label_includes_admin1_when_present(self):
        """label reads 'name, admin1, country'.

        Implementation: Builds a candidate with an admin1 region.
        Passing implies: Location labels include the region between city and country.
        """
        assert _candidate(admin1="Île-de-France").label == "Paris, Île-de-France, France"

    def test_label_skips_missing_admin1(self):
        """label omits admin1 when the provider did not send one.

        Implementation: Builds a candidate without admin1.
        Passing implies: No dangling separator appears in the label.
        """
        assert _candidate().label == "Paris, France"

    def test_ignores_extra_provider_fields(self):
        """PlaceCandidate validates raw geocoding results carrying extra keys.

        Implementation: Validates a dict with timezone and feature_code keys.
        Passing implies: Provider schema additions do not break parsing.
        """
        c = PlaceCandidate.model_validate(
            {
                "id": 5,
                "name": "Oslo",
                "latitude": 59.9,
                "longitude": 10.7,
                "country": "Norway",
                "timezone": "Europe/Oslo",
                "feature_code": "PPLC",
            }
        )
        assert c.name == "Oslo"
        assert c.population is None

    def test_is_immutable(self):
        """PlaceCandidate cannot be mutated after construction.

        Implementation: Attempts to assign to a field.
        Passing implies: Candidates are safe to share between states.
        """
        with pytest.raises(ValidationError):
            _candidate().name = "Lyon"


class TestSuggestionState:
    def test_defaults_are_empty_and_hidden(self):
        """A fresh SuggestionState has no items, is hidden, and highlights nothing.

        Implementation: Constructs SuggestionState with defaults.
        Passing implies: The panel starts closed.
        """
        state = SuggestionState()
        assert state.items == ()
        assert state.visible is False
        assert state.highlighted_index == -1
        assert state.highlighted is None

    def test_rejects_index_past_end(self):
        """highlighted_index must stay below the number of items.

        Implementation: Constructs a one-item state highlighting index 1.
        Passing implies: The index invariant is enforced at construction.
        """
        with pytest.raises(ValidationError):
            SuggestionState(items=(_candidate(),), visible=True, highlighted_index=1)

    def test_rejects_index_below_minus_one(self):
        """highlighted_index never goes below -1.

        Implementation: Constructs a state with highlighted_index=-2.
        Passing implies: -1 is the only 'no selection' value.
        """
        with pytest.raises(ValidationError):
            SuggestionState(highlighted_index=-2)

    def test_highlighted_returns_candidate(self):
        """highlighted returns the item under the highlight.

        Implementation: Highlights the second of two items.
        Passing implies: Consumers can read the selection without indexing themselves.
        """
        lyon = _candidate("Lyon")
        state = SuggestionState(items=(_candidate(), lyon), visible=True, highlighted_index=1)
        assert state.highlighted == lyon


class TestLookupStatus:
    def test_failed_constructors_use_fixed_messages(self):
        """Failed.not_found and Failed.transport_failure carry the user-facing messages.

        Implementation: Builds both failure variants.
        Passing implies: Error kinds and messages cannot drift apart.
        """
        assert Failed.not_found().kind is ErrorKind.NOT_FOUND
        assert Failed.not_found().message == NOT_FOUND_MESSAGE == "City not found. Please try another city."
        assert Failed.transport_failure().kind is ErrorKind.TRANSPORT_FAILURE
        assert Failed.transport_failure().message == TRANSPORT_FAILURE_MESSAGE

    def test_discriminator_round_trips_from_json(self):
        """The LookupStatus union parses each variant by its status tag.

        Implementation: Validates dumped Idle, Loading, and Failed values through a TypeAdapter.
        Passing implies: Serialized statuses are unambiguous for clients.
        """
        adapter = TypeAdapter(LookupStatus)
        assert isinstance(adapter.validate_python({"status": "idle"}), Idle)
        assert isinstance(adapter.validate_python({"status": "loading"}), Loading)
        failed = adapter.validate_python(Failed.not_found().model_dump(mode="json"))
        assert failed == Failed.not_found()

    def test_success_wraps_view_model(self):
        """Success holds exactly one WeatherViewModel.

        Implementation: Builds a Success from a minimal view model.
        Passing implies: A result is either fully present or absent.
        """
        vm = WeatherViewModel(location_label="Paris, France", temperature=18.4, timezone="Europe/Paris")
        status = Success(weather=vm)
        assert status.status == "success"
        assert status.weather.temperature == 18.4
        assert status.weather.sunrise is None
