from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

# --- Types ---

# The API sends numbers for most metrics but occasionally strings (e.g. "N/A").
MetricValue = int | float | str | None


# --- Domain Models ---


class FinancialMetrics(BaseModel):
    """
    Metrics block of a financials response.

    Every field is optional and stored exactly as received. Defaults for
    display ("N/A") and charting (0) are applied by the card logic, never here.
    Unknown fields returned by the API are kept as extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    current_price: MetricValue = None
    market_cap_formatted: MetricValue = None
    sector: MetricValue = None
    industry: MetricValue = None

    # Valuation
    pe_ratio: MetricValue = None
    price_to_book: MetricValue = None
    price_to_sales: MetricValue = None

    # Profitability (fractions, e.g. 0.25 for 25%)
    profit_margin: MetricValue = None
    return_on_equity: MetricValue = None
    return_on_assets: MetricValue = None


class ResultRecord(BaseModel):
    """Decoded response of ``GET /financials/{SYMBOL}`` for one symbol."""

    model_config = ConfigDict(frozen=True, extra="allow")

    stock: MetricValue = None
    metrics: FinancialMetrics | None = None


# --- Fetch Results ---


@dataclass(frozen=True)
class FetchSuccess:
    """Record fetched and decoded for one symbol."""

    symbol: str
    record: ResultRecord


@dataclass(frozen=True)
class FetchFailure:
    """Fetch for one symbol failed; ``error`` is a short description."""

    symbol: str
    error: str


FetchResult = FetchSuccess | FetchFailure
