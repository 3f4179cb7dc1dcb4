"""Card logic for the results grid.

Turns fetched records into display-ready card data and chart datasets,
and decides what the results area shows. Defaults for missing metrics are
applied here, at render time, never when a record is fetched.
"""

import math
from dataclasses import dataclass
from enum import Enum

import polars as pl

from finfixed.app.logic.dashboard import DashboardState
from finfixed.core.domain_models import FinancialMetrics, MetricValue, ResultRecord

NOT_AVAILABLE = "N/A"

EMPTY_STATE_TITLE = "No Data Yet"
EMPTY_STATE_COMPARE = "Add 2 companies to compare their financials"
EMPTY_STATE_SEARCH = "Search for a stock symbol to get started"

# (label, metrics field)
VALUATION_FIELDS = [
    ("P/E", "pe_ratio"),
    ("P/B", "price_to_book"),
    ("P/S", "price_to_sales"),
]
PROFITABILITY_FIELDS = [
    ("Profit Margin", "profit_margin"),
    ("ROE", "return_on_equity"),
    ("ROA", "return_on_assets"),
]

CHART_SCHEMA = {"name": pl.Utf8, "value": pl.Float64}


class ViewMode(str, Enum):
    """What the results area renders."""

    LOADING = "loading"
    EMPTY = "empty"
    RESULTS = "results"


class ResultsLayout(str, Enum):
    """Grid layout of the result cards."""

    COMPARISON = "comparison"  # side by side, two columns
    GRID = "grid"  # up to three columns

    @property
    def columns(self) -> int:
        return 2 if self is ResultsLayout.COMPARISON else 3


@dataclass
class CardData:
    """Display-ready content of one result card."""

    title: str
    current_price: str
    market_cap: str
    sector: str
    industry: str

    valuation: pl.DataFrame
    profitability: pl.DataFrame


def is_missing(value: MetricValue) -> bool:
    """None, empty strings, zero and NaN count as missing."""
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def format_value(value: MetricValue) -> str:
    if is_missing(value):
        return NOT_AVAILABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(value: MetricValue) -> str:
    if is_missing(value):
        return NOT_AVAILABLE
    return f"${format_value(value)}"


def chart_value(value: MetricValue) -> float:
    """Numeric value for charting; anything missing or non-numeric becomes 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or is_missing(value):
        return 0.0
    return float(value)


def _chart_data(
    metrics: FinancialMetrics, fields: list[tuple[str, str]], scale: float = 1.0
) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "name": [label for label, _ in fields],
            "value": [chart_value(getattr(metrics, attr)) * scale for _, attr in fields],
        },
        schema=CHART_SCHEMA,
    )


def build_valuation_data(metrics: FinancialMetrics) -> pl.DataFrame:
    """Valuation ratios P/E, P/B and P/S."""
    return _chart_data(metrics, VALUATION_FIELDS)


def build_profitability_data(metrics: FinancialMetrics) -> pl.DataFrame:
    """Profit margin, ROE and ROA as percentages."""
    return _chart_data(metrics, PROFITABILITY_FIELDS, scale=100.0)


def build_card(record: ResultRecord) -> CardData:
    metrics = record.metrics or FinancialMetrics()
    return CardData(
        title=format_value(record.stock),
        current_price=format_price(metrics.current_price),
        market_cap=format_value(metrics.market_cap_formatted),
        sector=format_value(metrics.sector),
        industry=format_value(metrics.industry),
        valuation=build_valuation_data(metrics),
        profitability=build_profitability_data(metrics),
    )


def build_cards(results: list[ResultRecord]) -> list[CardData]:
    return [build_card(record) for record in results]


def resolve_view_mode(state: DashboardState) -> ViewMode:
    """Loading hides the grid; an empty result list shows the empty state."""
    if state.loading:
        return ViewMode.LOADING
    if not state.results:
        return ViewMode.EMPTY
    return ViewMode.RESULTS


def results_layout(result_count: int) -> ResultsLayout:
    """Two results are shown side by side; any other count uses the grid."""
    return ResultsLayout.COMPARISON if result_count == 2 else ResultsLayout.GRID


def empty_state_message(compare_mode: bool) -> str:
    return EMPTY_STATE_COMPARE if compare_mode else EMPTY_STATE_SEARCH
