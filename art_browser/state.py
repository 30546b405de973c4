"""Browse state and its transitions.

The UI owns one BrowseState and replaces it with transition(state, event)
on every user action or fetch result. Transitions are pure, so the state
machine can be exercised without a UI or network.

Requests are identified by tokens. RequestStarted issues a new token and
RequestResolved is only applied when it carries the latest one, so a slow
response for a query the user already left cannot overwrite a newer result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from .models import FetchState, Idle, Loading, Ready


@dataclass(frozen=True)
class BrowseState:
    query: str | None = None
    page: int = 1
    total_pages: int = 0
    latest_token: int = 0
    fetch: FetchState = Idle()

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_pages(self) -> bool:
        return self.total_pages > 0

    @property
    def is_loading(self) -> bool:
        return isinstance(self.fetch, Loading)


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class QuerySelected:
    query: str


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PreviousPage:
    pass


@dataclass(frozen=True)
class RequestStarted:
    pass


@dataclass(frozen=True)
class RequestResolved:
    token: int
    result: FetchState


@dataclass(frozen=True)
class RequestAbandoned:
    """The request was cut short without a result (e.g. the script was rerun)."""

    token: int


Event = Union[
    QuerySelected, NextPage, PreviousPage, RequestStarted, RequestResolved, RequestAbandoned
]


def transition(state: BrowseState, event: Event) -> BrowseState:
    """Return the state that follows `event`. Never mutates `state`."""
    if isinstance(event, QuerySelected):
        if event.query == state.query:
            return state
        # New query: back to the first page, old results no longer apply
        return replace(state, query=event.query, page=1, total_pages=0, fetch=Idle())

    if isinstance(event, NextPage):
        if not state.can_go_next:
            return state
        return replace(state, page=state.page + 1)

    if isinstance(event, PreviousPage):
        if not state.can_go_previous:
            return state
        return replace(state, page=state.page - 1)

    if isinstance(event, RequestStarted):
        token = state.latest_token + 1
        return replace(state, latest_token=token, fetch=Loading(token))

    if isinstance(event, RequestResolved):
        if event.token != state.latest_token:
            return state  # stale
        if isinstance(event.result, Ready):
            return replace(state, fetch=event.result, total_pages=event.result.total_pages)
        return replace(state, fetch=event.result)

    if isinstance(event, RequestAbandoned):
        if state.fetch != Loading(event.token):
            return state
        # Back to Idle so the page is requested again
        return replace(state, fetch=Idle())

    raise TypeError(f"Unknown event: {event!r}")


def needs_fetch(state: BrowseState) -> bool:
    """True when a query is selected but the current page has not been requested."""
    if state.query is None or state.is_loading:
        return False
    if isinstance(state.fetch, Ready):
        return state.fetch.page != state.page
    return isinstance(state.fetch, Idle)
