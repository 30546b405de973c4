"""Museum Collection Browser - Streamlit application."""

import streamlit as st
from datetime import datetime

from art_browser.adapters import get_adapter, get_adapter_names
from art_browser.fetcher import PagedCollectionFetcher
from art_browser.mappings import ALL_ARTWORKS_QUERY, get_departments, has_departments
from art_browser.models import Artwork, Failed, Ready
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

# Configuration
PAGE_SIZE = 12
GRID_COLUMNS = 4
DEFAULT_SOURCE = "MET"
LOG_HISTORY = 200
SELECT_DEPARTMENT_LABEL = "Select a Department"

st.set_page_config(page_title="Museum Collection Browser", layout="wide")


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        "debug_logs": [],
        "browse": BrowseState(),
        "fetcher": None,
        # Filters
        "source": DEFAULT_SOURCE,
        "source_last": None,
        "department": SELECT_DEPARTMENT_LABEL,
        # Options
        "ssl_bypass": False,
        "ssl_bypass_last": False,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


init_session_state()


# =============================================================================
# Logging
# =============================================================================

def _append_log(level: str, message: str):
    """Append a log entry to session state."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    entry = f"{timestamp} | {level:<5} | {message}"
    st.session_state.debug_logs.append(entry)
    st.session_state.debug_logs = st.session_state.debug_logs[-LOG_HISTORY:]


def log_event(message: str):
    _append_log("INFO", message)


# =============================================================================
# State Management
# =============================================================================

def dispatch(event):
    st.session_state.browse = transition(st.session_state.browse, event)


def build_fetcher() -> PagedCollectionFetcher:
    adapter = get_adapter(
        st.session_state.source,
        ssl_bypass=st.session_state.ssl_bypass,
    )
    fetcher = PagedCollectionFetcher(adapter, page_size=PAGE_SIZE)
    fetcher.set_logger(_append_log)
    return fetcher


def check_source_changes():
    """Rebuild the fetcher and reset browsing when the source or SSL option changes."""
    changes = []
    if st.session_state.source != st.session_state.source_last:
        changes.append("source changed")
        st.session_state.source_last = st.session_state.source
        st.session_state.department = SELECT_DEPARTMENT_LABEL
    if st.session_state.ssl_bypass != st.session_state.ssl_bypass_last:
        changes.append("SSL bypass changed")
        st.session_state.ssl_bypass_last = st.session_state.ssl_bypass

    if changes or st.session_state.fetcher is None:
        log_event(f"Reset: {', '.join(changes) or 'startup'}")
        st.session_state.fetcher = build_fetcher()
        st.session_state.browse = BrowseState()


def current_query() -> str | None:
    """Query for the current sidebar selection, or None if nothing is selected."""
    if not has_departments(st.session_state.source):
        return ALL_ARTWORKS_QUERY
    department = st.session_state.department
    if department == SELECT_DEPARTMENT_LABEL:
        return None
    return department


def fetch_current_page():
    """Issue a request for the current page and apply its result."""
    dispatch(RequestStarted())
    browse = st.session_state.browse
    token = browse.latest_token

    result = None
    try:
        with st.spinner("Loading artworks..."):
            result = st.session_state.fetcher.fetch_page(browse.query, browse.page)
    finally:
        # A rerun can interrupt the fetch; leave the page ready to be requested again
        if result is None:
            dispatch(RequestAbandoned(token))

    dispatch(RequestResolved(token, result))


# =============================================================================
# UI Components
# =============================================================================

def render_sidebar():
    """Render the sidebar with source options and debug console."""
    with st.sidebar:
        st.subheader("Collection")

        adapter_names = get_adapter_names()
        source_options = list(adapter_names.keys())
        st.selectbox(
            "Source",
            source_options,
            key="source",
            format_func=lambda short_name: adapter_names[short_name],
        )

        st.checkbox(
            "Bypass SSL verification",
            key="ssl_bypass",
            help="Use if you encounter SSL errors",
        )

        # Debug console
        with st.expander("Debug Console", expanded=False):
            if st.button("Clear Logs"):
                st.session_state.debug_logs = []
            log_text = "\n".join(st.session_state.debug_logs) if st.session_state.debug_logs else "No logs yet."
            st.code(log_text, language=None)


def render_department_selector():
    departments = get_departments(st.session_state.source)
    if not departments:
        return
    st.selectbox(
        "Department",
        [SELECT_DEPARTMENT_LABEL] + departments,
        key="department",
    )


def render_pagination(browse: BrowseState):
    """Render Previous / Page X of Y / Next controls."""
    col_prev, col_label, col_next = st.columns([1, 2, 1])

    with col_prev:
        if st.button("Previous", disabled=not browse.can_go_previous, use_container_width=True):
            dispatch(PreviousPage())
            st.rerun()

    with col_label:
        st.markdown(
            f"<div style='text-align: center'>Page {browse.page} of {browse.total_pages}</div>",
            unsafe_allow_html=True,
        )

    with col_next:
        if st.button("Next", disabled=not browse.can_go_next, use_container_width=True):
            dispatch(NextPage())
            st.rerun()


def render_artwork_card(artwork: Artwork):
    """Render a single artwork card."""
    with st.container(border=True):
        if artwork.has_image:
            st.image(artwork.image_url, use_container_width=True)
        else:
            st.caption("No image available")
        st.markdown(f"**{artwork.title}**")
        st.caption(artwork.artist_label)
        st.caption(artwork.date_label)


def render_grid(artworks: tuple[Artwork, ...]):
    for row_start in range(0, len(artworks), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, artwork in zip(columns, artworks[row_start:row_start + GRID_COLUMNS]):
            with column:
                render_artwork_card(artwork)


# =============================================================================
# Main Application
# =============================================================================

def main():
    """Main application entry point."""
    check_source_changes()
    render_sidebar()

    adapter_names = get_adapter_names()
    source_name = adapter_names.get(st.session_state.source, st.session_state.source)
    st.markdown(f"### {source_name} Explorer")

    render_department_selector()

    query = current_query()
    if query is None:
        st.caption("Choose a department to start browsing.")
        st.stop()

    dispatch(QuerySelected(query))
    if needs_fetch(st.session_state.browse):
        fetch_current_page()

    browse = st.session_state.browse
    fetch = browse.fetch

    if isinstance(fetch, Failed):
        st.error(f"Error: {fetch.message}")
        if st.button("Try again"):
            log_event("Retry requested")
            fetch_current_page()
            st.rerun()
        st.stop()

    if not isinstance(fetch, Ready):
        st.stop()

    if browse.has_pages:
        render_pagination(browse)

    if not fetch.items:
        st.info("No artworks found.")
        st.stop()

    render_grid(fetch.items)


if __name__ == "__main__":
    main()
