"""Tests for the financials API client, using httpx.MockTransport instead of the network."""

import httpx
import pytest

from finfixed.config.settings import ApiSettings
from finfixed.core.domain_models import FetchFailure, FetchSuccess
from finfixed.etl.extract import FinancialsClient
from tests.conftest import AAPL_PAYLOAD

API = ApiSettings(base_url="https://api.example.test/", timeout_seconds=5)


def make_client(handler) -> FinancialsClient:
    return FinancialsClient(API, transport=httpx.MockTransport(handler))


def test_fetch_symbol_requests_uppercase_path() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=AAPL_PAYLOAD)

    with make_client(handler) as client:
        result = client.fetch_symbol("aapl")

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://api.example.test/financials/AAPL"
    assert isinstance(result, FetchSuccess)
    assert result.symbol == "AAPL"
    assert result.record.stock == "AAPL"
    assert result.record.metrics is not None
    assert result.record.metrics.pe_ratio == 28


def test_fetch_symbol_keeps_record_as_received() -> None:
    payload = {"stock": "XYZ", "metrics": {"pe_ratio": "N/A", "beta": 1.2}, "source": "test"}

    with make_client(lambda request: httpx.Response(200, json=payload)) as client:
        result = client.fetch_symbol("xyz")

    assert isinstance(result, FetchSuccess)
    # no defaults are filled in at fetch time
    assert result.record.metrics.pe_ratio == "N/A"
    assert result.record.metrics.current_price is None
    # unknown fields survive
    assert result.record.metrics.model_extra == {"beta": 1.2}
    assert result.record.model_extra == {"source": "test"}


def test_fetch_symbol_accepts_numeric_descriptive_fields() -> None:
    payload = {
        "stock": "AAPL",
        "metrics": {"current_price": 150, "market_cap_formatted": 2500000000000, "sector": 7},
    }

    with make_client(lambda request: httpx.Response(200, json=payload)) as client:
        result = client.fetch_symbol("aapl")

    assert isinstance(result, FetchSuccess)
    assert result.record.metrics.market_cap_formatted == 2500000000000
    assert result.record.metrics.sector == 7


def test_fetch_symbol_network_error_is_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with make_client(handler) as client:
        result = client.fetch_symbol("AAPL")

    assert isinstance(result, FetchFailure)
    assert result.symbol == "AAPL"
    assert "ConnectError" in result.error


def test_fetch_symbol_http_error_status_is_failure() -> None:
    with make_client(lambda request: httpx.Response(404, json={"detail": "Not found"})) as client:
        result = client.fetch_symbol("NOPE")

    assert isinstance(result, FetchFailure)
    assert result.error == "HTTP 404"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>maintenance</html>"),
        httpx.Response(200, json=["AAPL"]),
        httpx.Response(200, json={"stock": "AAPL", "metrics": ["not", "an", "object"]}),
    ],
    ids=["not-json", "json-array", "bad-metrics"],
)
def test_fetch_symbol_decode_errors_are_failures(response: httpx.Response) -> None:
    with make_client(lambda request: response) as client:
        result = client.fetch_symbol("AAPL")

    assert isinstance(result, FetchFailure)
    assert result.symbol == "AAPL"
