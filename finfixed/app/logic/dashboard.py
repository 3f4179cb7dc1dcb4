"""View-state logic for the FinFixed dashboard.

Holds the search/compare state of one session and implements every user
action as a state transition. Pure Python - no Streamlit UI calls, so the
same controller drives the Streamlit page and the command line.
"""

from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from finfixed.core.domain_models import FetchFailure, FetchResult, FetchSuccess, ResultRecord

MAX_COMPARE_SYMBOLS = 2

MSG_COMPARE_LIMIT = f"Maximum {MAX_COMPARE_SYMBOLS} companies can be compared at once"
MSG_DUPLICATE_SYMBOL = "This symbol is already added"
MSG_NOT_ENOUGH_SYMBOLS = f"Please add {MAX_COMPARE_SYMBOLS} companies to compare"


class DashboardValidationError(ValueError):
    """User input rejected before any network call. The message is user-facing."""


class SymbolFetcher(Protocol):
    def fetch_symbol(self, symbol: str) -> FetchResult: ...


@dataclass
class DashboardState:
    """Transient per-session dashboard state."""

    query: str = ""
    results: list[ResultRecord] = field(default_factory=list)
    loading: bool = False
    compare_mode: bool = False
    compare_symbols: list[str] = field(default_factory=list)

    # Bumped by every action that invalidates in-flight fetches
    generation: int = 0
    # Symbols that failed in the last committed action
    failures: list[str] = field(default_factory=list)
    # Last validation message shown to the user
    notice: str | None = None


class DashboardController:
    """Applies user actions to a DashboardState.

    Fetching actions collect their records in a local list and write them
    into the state once all fetches settled. If another action bumped the
    generation in the meantime, the stale result is dropped.
    """

    def __init__(self, state: DashboardState, fetcher: SymbolFetcher) -> None:
        self.state = state
        self.fetcher = fetcher

    # --- Actions ---

    def submit_query(self, query: str | None = None) -> None:
        """Search for the query (normal mode) or add it to the compare list.

        Args:
            query: New query text. If omitted, ``state.query`` is used.

        Raises:
            DashboardValidationError: In compare mode, if the list is full or
                already contains the symbol. The query is kept in that case.
        """
        if query is not None:
            self.state.query = query
        self.state.notice = None

        text = self.state.query.strip()
        if not text:
            return
        symbol = text.upper()

        if self.state.compare_mode:
            if len(self.state.compare_symbols) >= MAX_COMPARE_SYMBOLS:
                self._reject(MSG_COMPARE_LIMIT)
            if symbol in self.state.compare_symbols:
                self._reject(MSG_DUPLICATE_SYMBOL)
            self.state.compare_symbols = [*self.state.compare_symbols, symbol]
            logger.info(f"Added {symbol} to comparison: {self.state.compare_symbols}")
        else:
            self._run_action([symbol])

        self.state.query = ""

    def run_comparison(self) -> None:
        """Fetch all compare symbols sequentially, in list order.

        Raises:
            DashboardValidationError: If fewer than two symbols were added
        """
        self.state.notice = None
        if len(self.state.compare_symbols) < MAX_COMPARE_SYMBOLS:
            self._reject(MSG_NOT_ENOUGH_SYMBOLS)
        self._run_action(list(self.state.compare_symbols))

    def remove_symbol(self, symbol: str) -> None:
        """Remove one symbol from the compare list. Results are left untouched."""
        self.state.compare_symbols = [s for s in self.state.compare_symbols if s != symbol]

    def clear_comparison(self) -> None:
        """Empty the compare list and the results."""
        self._invalidate()
        self.state.compare_symbols = []
        self.state.results = []
        self.state.failures = []

    def toggle_compare_mode(self, enabled: bool) -> None:
        """Switch compare mode. Turning it off discards the comparison state."""
        self.state.compare_mode = enabled
        self.state.notice = None
        if not enabled:
            self.clear_comparison()

    # --- Internals ---

    def _reject(self, message: str) -> None:
        self.state.notice = message
        logger.info(f"Rejected input: {message}")
        raise DashboardValidationError(message)

    def _invalidate(self) -> int:
        """Start a new generation; in-flight actions of older ones become stale."""
        self.state.generation += 1
        self.state.loading = False
        return self.state.generation

    def _run_action(self, symbols: list[str]) -> None:
        token = self._invalidate()
        self.state.results = []
        self.state.failures = []
        self.state.loading = True

        records: list[ResultRecord] = []
        failures: list[str] = []
        try:
            for symbol in symbols:
                result = self.fetcher.fetch_symbol(symbol)
                if token != self.state.generation:
                    logger.warning(f"Dropping results for {symbols}: superseded by a newer action")
                    return
                if isinstance(result, FetchSuccess):
                    records.append(result.record)
                elif isinstance(result, FetchFailure):
                    failures.append(result.symbol)
        finally:
            if token == self.state.generation:
                self.state.loading = False

        self.state.results = records
        self.state.failures = failures
        logger.info(f"Loaded {len(records)}/{len(symbols)} result(s) for {symbols}")
