"""FinFixed Dashboard - Main Entry Point.

Look up one stock symbol, or collect two symbols in compare mode and
fetch them side by side. All user actions run as widget callbacks that
drive the DashboardController; the script body only renders state.
"""

import streamlit as st
from loguru import logger

from finfixed.app.logic.cards import (
    EMPTY_STATE_TITLE,
    ViewMode,
    build_cards,
    empty_state_message,
    resolve_view_mode,
    results_layout,
)
from finfixed.app.logic.dashboard import (
    DashboardController,
    DashboardState,
    DashboardValidationError,
)
from finfixed.app.views.cards import render_results_grid
from finfixed.app.views.common import (
    LOADING_MESSAGE,
    render_empty_state,
    render_fetch_failures,
    render_header,
    render_loading_state,
    render_notice,
)
from finfixed.app.views.search import (
    COMPARE_TOGGLE_KEY,
    QUERY_INPUT_KEY,
    render_compare_controls,
    render_search_bar,
)
from finfixed.config.settings import load_config
from finfixed.core.config import settings, setup_logging
from finfixed.etl.extract import FinancialsClient

STATE_KEY = "dashboard_state"

st.set_page_config(
    page_title="FinFixed",
    page_icon="📈",
    layout="wide",
)


@st.cache_resource  # type: ignore[misc]
def init_logging() -> None:
    setup_logging(settings.log_level)


@st.cache_resource  # type: ignore[misc]
def get_client() -> FinancialsClient:
    config = load_config()
    return FinancialsClient(config.api)


def get_controller() -> DashboardController:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState()
    return DashboardController(st.session_state[STATE_KEY], get_client())


# --- Callbacks ---


def on_submit() -> None:
    controller = get_controller()
    try:
        with st.spinner(LOADING_MESSAGE):
            controller.submit_query(st.session_state.get(QUERY_INPUT_KEY, ""))
    except DashboardValidationError as e:
        logger.debug(f"Submit rejected, notice shown: {e}")
    # rejected input stays in the box, accepted input is cleared
    st.session_state[QUERY_INPUT_KEY] = controller.state.query


def on_compare() -> None:
    controller = get_controller()
    try:
        with st.spinner(LOADING_MESSAGE):
            controller.run_comparison()
    except DashboardValidationError as e:
        logger.debug(f"Comparison rejected, notice shown: {e}")


def on_toggle() -> None:
    get_controller().toggle_compare_mode(bool(st.session_state[COMPARE_TOGGLE_KEY]))


def on_remove(symbol: str) -> None:
    get_controller().remove_symbol(symbol)


def on_clear() -> None:
    get_controller().clear_comparison()


# --- Page ---

init_logging()

try:
    controller = get_controller()
except Exception as e:
    st.error(f"Failed to load configuration: {e}")
    logger.error(f"Configuration error: {e}")
    st.stop()

state = controller.state

render_header("📈 FinFixed", "Real-time Financial Analytics Dashboard")
render_search_bar(state.compare_mode, state.loading, on_submit)
render_compare_controls(state.compare_symbols, on_toggle, on_remove, on_compare, on_clear)
render_notice(state.notice)
st.divider()

# Fetches run to completion inside the callbacks under st.spinner, so the page
# itself never renders LOADING. The branch keeps the shared view-mode contract.
view_mode = resolve_view_mode(state)
if view_mode is ViewMode.LOADING:
    render_loading_state()
else:
    render_fetch_failures(state.failures)
    if view_mode is ViewMode.EMPTY:
        render_empty_state(EMPTY_STATE_TITLE, empty_state_message(state.compare_mode))
    else:
        render_results_grid(build_cards(state.results), results_layout(len(state.results)))
