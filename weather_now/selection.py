# ABOUTME: Keyboard navigation over the suggestion list as pure functions of (key, state).
# ABOUTME: Maps key presses to Navigate/Commit/CommitRawQuery/Dismiss actions and applies them to SuggestionState.

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from weather_now.models import PlaceCandidate, SuggestionState

ARROW_DOWN = "ArrowDown"
ARROW_UP = "ArrowUp"
ENTER = "Enter"
ESCAPE = "Escape"


class Navigate(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["navigate"] = "navigate"
    index: int


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["commit"] = "commit"
    candidate: PlaceCandidate


class CommitRawQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["commit_raw_query"] = "commit_raw_query"


class Dismiss(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["dismiss"] = "dismiss"


class NoAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["none"] = "none"


Action = Annotated[Navigate | Commit | CommitRawQuery | Dismiss | NoAction, Field(discriminator="action")]


def on_key(key: str, state: SuggestionState) -> Action:
    """Decide what a key press means for the given suggestion state.

    With the panel hidden or empty only Enter does anything, committing the raw query.
    Otherwise arrows move the highlight without wrapping (down stops at the last item,
    up stops at -1), Enter commits the highlighted candidate or the raw query when
    nothing is highlighted, and Escape dismisses the panel. Other keys belong to the
    text field and produce NoAction.
    """
    if not state.visible or not state.items:
        return CommitRawQuery() if key == ENTER else NoAction()

    last = len(state.items) - 1
    if key == ARROW_DOWN:
        return Navigate(index=min(state.highlighted_index + 1, last))
    if key == ARROW_UP:
        return Navigate(index=max(state.highlighted_index - 1, -1))
    if key == ENTER:
        if 0 <= state.highlighted_index <= last:
            return Commit(candidate=state.items[state.highlighted_index])
        return CommitRawQuery()
    if key == ESCAPE:
        return Dismiss()
    return NoAction()


def apply_action(action: Action, state: SuggestionState) -> SuggestionState:
    """Return the suggestion state after an action; commits and dismissals clear the panel."""
    if isinstance(action, Navigate):
        return state.model_copy(update={"highlighted_index": action.index})
    if isinstance(action, (Commit, CommitRawQuery, Dismiss)):
        return SuggestionState()
    return state
