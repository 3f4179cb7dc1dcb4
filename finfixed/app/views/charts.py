"""Chart builders for the result cards.

Pure visualization functions using Plotly. Figures are returned, not
rendered, so card views decide where they go.
"""

import plotly.express as px
import plotly.graph_objects as go
import polars as pl

from finfixed.app.views.colors import PROFITABILITY_COLOR, VALUATION_COLOR, Colors

CHART_HEIGHT = 180
CHART_MARGINS = dict(t=10, l=5, r=5, b=0)
CHART_FONT = dict(family="Arial", size=12)


def _style_chart(fig: go.Figure, hover_border: str) -> None:
    fig.update_layout(
        height=CHART_HEIGHT,
        margin=CHART_MARGINS,
        font=CHART_FONT,
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        hoverlabel=dict(bgcolor=Colors.dark_gray, bordercolor=hover_border),
    )
    fig.update_xaxes(title_text="", linecolor=Colors.gray, ticks="")
    fig.update_yaxes(title_text="", linecolor=Colors.gray, ticks="", gridcolor="rgba(0,0,0,0)")


def make_valuation_chart(df: pl.DataFrame) -> go.Figure:
    """Bar chart of the valuation ratios (P/E, P/B, P/S).

    Args:
        df: Chart dataset with columns [name, value]
    """
    fig = px.bar(
        df,
        x="name",
        y="value",
        color_discrete_sequence=[VALUATION_COLOR],
    )
    _style_chart(fig, hover_border=VALUATION_COLOR)
    return fig


def make_profitability_chart(df: pl.DataFrame) -> go.Figure:
    """Line chart of profit margin, ROE and ROA in percent.

    Args:
        df: Chart dataset with columns [name, value], values already x100
    """
    fig = px.line(
        df,
        x="name",
        y="value",
        markers=True,
        color_discrete_sequence=[PROFITABILITY_COLOR],
    )
    fig.update_traces(line=dict(width=3), marker=dict(size=8))
    _style_chart(fig, hover_border=PROFITABILITY_COLOR)
    fig.update_yaxes(ticksuffix="%")
    return fig
