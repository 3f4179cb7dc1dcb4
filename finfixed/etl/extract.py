"""Data extraction layer for the FinFixed financials API.

Wraps httpx calls and validates responses before returning to the caller.
Failures are returned as typed results instead of being raised, so one bad
symbol never aborts a comparison run.
"""

from types import TracebackType

import httpx
from loguru import logger
from pydantic import ValidationError

from finfixed.config.settings import ApiSettings
from finfixed.core.domain_models import FetchFailure, FetchResult, FetchSuccess, ResultRecord


class FinancialsClient:
    """Fetches per-symbol financials from the remote API.

    No retry logic: a failed request is reported once and the caller moves on.
    """

    def __init__(
        self,
        api: ApiSettings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            api: API settings (base URL and timeout)
            transport: Optional httpx transport, used by tests to mock the API
        """
        self.api = api
        self._client = httpx.Client(timeout=api.timeout_seconds, transport=transport)

    def fetch_symbol(self, symbol: str) -> FetchResult:
        """
        Fetch financials for a single symbol.

        Args:
            symbol: Ticker symbol in any case (e.g. "aapl")

        Returns:
            FetchSuccess with the decoded record, or FetchFailure describing
            the network, HTTP status or decode error
        """
        symbol = symbol.upper()
        url = self.api.financials_url(symbol)
        logger.info(f"[{symbol}] Fetching financials from {url}")

        try:
            response = self._client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            return self._failure(symbol, f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            return self._failure(symbol, f"{type(e).__name__}: {e}")
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            return self._failure(symbol, f"Invalid JSON: {e}")

        if not isinstance(payload, dict):
            return self._failure(symbol, f"Expected a JSON object, got {type(payload).__name__}")

        try:
            record = ResultRecord.model_validate(payload)
        except ValidationError as e:
            return self._failure(symbol, f"Unexpected response shape: {e.error_count()} error(s)")

        logger.success(f"[{symbol}] Fetched financials for {record.stock or symbol}")
        return FetchSuccess(symbol=symbol, record=record)

    @staticmethod
    def _failure(symbol: str, error: str) -> FetchFailure:
        logger.error(f"[{symbol}] Failed to fetch financials: {error}")
        return FetchFailure(symbol=symbol, error=error)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FinancialsClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
