"""Result card rendering.

One card per fetched symbol with key metrics and two small charts.
"""

import streamlit as st

from finfixed.app.logic.cards import CardData, ResultsLayout
from finfixed.app.views.charts import make_profitability_chart, make_valuation_chart


def render_result_card(card: CardData, index: int) -> None:
    """Render a single result card.

    Args:
        card: Display-ready card content
        index: Position in the results list, used for unique element keys
    """
    with st.container(border=True):
        st.subheader(card.title)

        col1, col2 = st.columns(2)
        with col1:
            st.metric(label="Current Price", value=card.current_price)
            st.caption("Sector")
            st.markdown(f"**{card.sector}**", help=card.sector)
        with col2:
            st.metric(label="Market Cap", value=card.market_cap)
            st.caption("Industry")
            st.markdown(f"**{card.industry}**", help=card.industry)

        st.markdown("##### Valuation Ratios")
        st.plotly_chart(
            make_valuation_chart(card.valuation),
            use_container_width=True,
            key=f"valuation_chart_{index}",
        )

        st.markdown("##### Profitability (%)")
        st.plotly_chart(
            make_profitability_chart(card.profitability),
            use_container_width=True,
            key=f"profitability_chart_{index}",
        )


def render_results_grid(cards: list[CardData], layout: ResultsLayout) -> None:
    """Render cards row by row in ``layout.columns`` columns."""
    n_cols = layout.columns
    for row_start in range(0, len(cards), n_cols):
        cols = st.columns(n_cols)
        for offset, card in enumerate(cards[row_start : row_start + n_cols]):
            with cols[offset]:
                render_result_card(card, row_start + offset)
