"""Shared fixtures: an in-memory fetcher and sample API payloads."""

import pytest

from finfixed.app.logic.dashboard import DashboardController, DashboardState
from finfixed.core.domain_models import FetchFailure, FetchResult, FetchSuccess, ResultRecord

AAPL_PAYLOAD = {
    "stock": "AAPL",
    "metrics": {
        "current_price": 150,
        "market_cap_formatted": "2.5T",
        "sector": "Technology",
        "industry": "Consumer Electronics",
        "pe_ratio": 28,
        "price_to_book": 45.1,
        "price_to_sales": 7.5,
        "profit_margin": 0.25,
        "return_on_equity": 1.5,
        "return_on_assets": 0.2,
    },
}
MSFT_PAYLOAD = {
    "stock": "MSFT",
    "metrics": {"current_price": 410.5, "pe_ratio": 35.2, "sector": "Technology"},
}


class FakeFetcher:
    """Returns canned records per symbol and records the call order."""

    def __init__(self, payloads: dict[str, dict], failing: set[str] | None = None) -> None:
        self.payloads = payloads
        self.failing = failing or set()
        self.calls: list[str] = []

    def fetch_symbol(self, symbol: str) -> FetchResult:
        symbol = symbol.upper()
        self.calls.append(symbol)
        if symbol in self.failing or symbol not in self.payloads:
            return FetchFailure(symbol=symbol, error="ConnectError: boom")
        record = ResultRecord.model_validate(self.payloads[symbol])
        return FetchSuccess(symbol=symbol, record=record)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher({"AAPL": AAPL_PAYLOAD, "MSFT": MSFT_PAYLOAD})


@pytest.fixture
def controller(fetcher: FakeFetcher) -> DashboardController:
    return DashboardController(DashboardState(), fetcher)
