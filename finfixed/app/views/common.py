"""Common UI components shared across the dashboard.

Pure rendering functions for reusable Streamlit widgets.
"""

import streamlit as st

LOADING_MESSAGE = "Loading financial data..."


def render_header(title: str, caption: str | None = None) -> None:
    """Render the page title with an optional caption below it.

    Args:
        title: Main page title
        caption: Optional description text below title
    """
    st.title(title)
    if caption:
        st.caption(caption)
    st.divider()


def render_empty_state(title: str, message: str, icon: str = "📊") -> None:
    """Render empty state placeholder when no results are available.

    Args:
        title: Short heading
        message: Hint on what to do next
        icon: Emoji icon to show
    """
    st.subheader(f"{icon} {title}")
    st.info(message)


def render_loading_state(message: str = LOADING_MESSAGE) -> None:
    st.info(f"⏳ {message}")


def render_notice(message: str | None) -> None:
    """Render the last validation message, if any."""
    if message:
        st.warning(message)


def render_fetch_failures(symbols: list[str]) -> None:
    """Non-blocking hint about symbols that could not be loaded."""
    if symbols:
        st.caption(f"⚠️ Could not load: {', '.join(symbols)}")
