"""Search bar and compare-mode controls."""

from collections.abc import Callable

import streamlit as st

from finfixed.app.logic.dashboard import MAX_COMPARE_SYMBOLS

QUERY_INPUT_KEY = "query_input"
COMPARE_TOGGLE_KEY = "compare_mode_toggle"


def render_search_bar(
    compare_mode: bool,
    loading: bool,
    on_submit: Callable[[], None],
) -> None:
    """Render the symbol input. Enter or the button submits.

    The submitted text is read by ``on_submit`` from
    ``st.session_state[QUERY_INPUT_KEY]``.
    """
    with st.form("search_form", border=False):
        col1, col2 = st.columns([5, 1], vertical_alignment="bottom")
        with col1:
            st.text_input(
                "Stock symbol",
                placeholder="Enter stock symbol (e.g., AAPL, MSFT)",
                key=QUERY_INPUT_KEY,
                label_visibility="collapsed",
            )
        with col2:
            st.form_submit_button(
                "Add" if compare_mode else "Search",
                on_click=on_submit,
                disabled=loading,  # always False on the page; see 00_Dashboard.py
                type="primary",
                use_container_width=True,
            )


def render_compare_controls(
    compare_symbols: list[str],
    on_toggle: Callable[[], None],
    on_remove: Callable[[str], None],
    on_compare: Callable[[], None],
    on_clear: Callable[[], None],
) -> None:
    """Render the compare toggle and, in compare mode, the symbol chips.

    The toggle state is read by ``on_toggle`` from
    ``st.session_state[COMPARE_TOGGLE_KEY]``.
    """
    compare_mode = st.toggle(
        f"Compare Companies (Max {MAX_COMPARE_SYMBOLS})",
        key=COMPARE_TOGGLE_KEY,
        on_change=on_toggle,
    )
    if not compare_mode or not compare_symbols:
        return

    # chips + "Compare Now" + "Clear"
    cols = st.columns(len(compare_symbols) + 2)
    for col, symbol in zip(cols, compare_symbols):
        with col:
            st.button(
                f"✕ {symbol}",
                key=f"remove_{symbol}",
                on_click=on_remove,
                args=(symbol,),
                help=f"Remove {symbol}",
            )

    if len(compare_symbols) == MAX_COMPARE_SYMBOLS:
        with cols[-2]:
            st.button("Compare Now", on_click=on_compare, type="primary")

    with cols[-1]:
        st.button("Clear", on_click=on_clear)
