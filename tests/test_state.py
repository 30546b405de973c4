import pytest

from art_browser.models import Artwork, Failed, Idle, Loading, Ready
from art_browser.state import (
    BrowseState,
    NextPage,
    PreviousPage,
    QuerySelected,
    RequestAbandoned,
    RequestResolved,
    RequestStarted,
    needs_fetch,
    transition,
)


def ready(page, total_pages, count=1):
    items = tuple(Artwork(id=str(i), source="MET", title=f"A{i}") for i in range(count))
    return Ready(items=items, page=page, total_pages=total_pages)


def loaded_state(page=1, total_pages=4):
    state = transition(BrowseState(), QuerySelected("Asian Art"))
    state = transition(state, RequestStarted())
    state = transition(state, RequestResolved(state.latest_token, ready(1, total_pages)))
    for _ in range(page - 1):
        state = transition(state, NextPage())
    return state


@pytest.mark.unit
class TestQuerySelection:
    def test_selecting_a_query_resets_to_first_page(self):
        state = loaded_state(page=3)

        state = transition(state, QuerySelected("Egyptian Art"))

        assert state.query == "Egyptian Art"
        assert state.page == 1
        assert state.total_pages == 0
        assert state.fetch == Idle()

    def test_reselecting_same_query_is_a_no_op(self):
        state = loaded_state(page=2)

        assert transition(state, QuerySelected("Asian Art")) is state

    def test_transitions_do_not_mutate(self):
        before = BrowseState()
        after = transition(before, QuerySelected("Asian Art"))

        assert before.query is None
        assert after is not before


@pytest.mark.unit
class TestPagination:
    def test_previous_is_disabled_on_first_page(self):
        state = loaded_state(page=1)

        assert not state.can_go_previous
        assert transition(state, PreviousPage()) is state

    def test_next_is_disabled_on_last_page(self):
        state = loaded_state(page=4, total_pages=4)

        assert state.page == 4
        assert not state.can_go_next
        assert transition(state, NextPage()) is state

    def test_next_and_previous_move_one_page(self):
        state = loaded_state(page=2)

        assert transition(state, NextPage()).page == 3
        assert transition(state, PreviousPage()).page == 1

    def test_empty_collection_disables_both(self):
        state = transition(BrowseState(), QuerySelected("Nothing"))
        state = transition(state, RequestStarted())
        state = transition(state, RequestResolved(state.latest_token, Ready((), 1, 0)))

        assert isinstance(state.fetch, Ready)
        assert not state.can_go_next
        assert not state.can_go_previous
        assert not state.has_pages

    def test_loaded_collection_has_pages(self):
        assert loaded_state(total_pages=4).has_pages


@pytest.mark.unit
class TestRequestTokens:
    def test_request_started_issues_increasing_tokens(self):
        state = transition(BrowseState(), RequestStarted())
        first = state.latest_token
        state = transition(state, RequestStarted())

        assert state.latest_token == first + 1
        assert state.fetch == Loading(state.latest_token)
        assert state.is_loading

    def test_latest_result_is_applied(self):
        state = transition(BrowseState(), QuerySelected("Asian Art"))
        state = transition(state, RequestStarted())

        state = transition(state, RequestResolved(state.latest_token, ready(1, 4, count=12)))

        assert isinstance(state.fetch, Ready)
        assert state.total_pages == 4

    def test_stale_result_is_discarded(self):
        state = transition(BrowseState(), QuerySelected("Asian Art"))
        state = transition(state, RequestStarted())
        stale_token = state.latest_token
        state = transition(state, QuerySelected("Egyptian Art"))
        state = transition(state, RequestStarted())

        after = transition(state, RequestResolved(stale_token, ready(1, 4)))

        assert after is state
        assert after.fetch == Loading(state.latest_token)

    def test_failure_replaces_previous_result(self):
        state = loaded_state(page=2)
        state = transition(state, RequestStarted())

        state = transition(state, RequestResolved(state.latest_token, Failed("boom")))

        assert state.fetch == Failed("boom")
        assert state.page == 2

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            transition(BrowseState(), object())


@pytest.mark.unit
class TestNeedsFetch:
    def test_nothing_selected(self):
        assert not needs_fetch(BrowseState())

    def test_fresh_query(self):
        assert needs_fetch(transition(BrowseState(), QuerySelected("Asian Art")))

    def test_while_loading(self):
        state = transition(BrowseState(), QuerySelected("Asian Art"))
        assert not needs_fetch(transition(state, RequestStarted()))

    def test_after_page_change(self):
        state = loaded_state(page=1)
        assert not needs_fetch(state)
        assert needs_fetch(transition(state, NextPage()))

    def test_after_failure_waits_for_retry(self):
        state = transition(BrowseState(), QuerySelected("Asian Art"))
        state = transition(state, RequestStarted())
        state = transition(state, RequestResolved(state.latest_token, Failed("boom")))

        assert not needs_fetch(state)


@pytest.mark.unit
class TestAbandonedRequests:
    def test_abandoned_request_is_fetched_again(self):
        state = transition(BrowseState(), QuerySelected("Asian Art"))
        state = transition(state, RequestStarted())
        assert not needs_fetch(state)

        state = transition(state, RequestAbandoned(state.latest_token))

        assert state.fetch == Idle()
        assert needs_fetch(state)

    def test_abandoned_page_change_refetches_the_new_page(self):
        state = transition(loaded_state(page=1), NextPage())
        state = transition(state, RequestStarted())

        state = transition(state, RequestAbandoned(state.latest_token))

        assert state.page == 2
        assert needs_fetch(state)

    def test_abandoning_an_older_request_is_ignored(self):
        state = transition(BrowseState(), QuerySelected("Asian Art"))
        state = transition(state, RequestStarted())
        old_token = state.latest_token
        state = transition(state, RequestStarted())

        assert transition(state, RequestAbandoned(old_token)) is state

    def test_abandoning_after_resolution_is_ignored(self):
        state = loaded_state(page=1)

        assert transition(state, RequestAbandoned(state.latest_token)) is state
