"""FinFixed - Main Entry Point with CLI Commands.

Supports:
- lookup: Fetch and print financials for one symbol
- compare: Fetch and print financials for two symbols side by side
- dashboard: Launch the Streamlit dashboard
"""

import argparse
import subprocess
import sys
from pathlib import Path

import yaml
from loguru import logger

from finfixed.app.logic.cards import CardData, build_cards
from finfixed.app.logic.dashboard import (
    DashboardController,
    DashboardState,
    DashboardValidationError,
)
from finfixed.config.settings import load_config
from finfixed.core.config import settings, setup_logging
from finfixed.etl.extract import FinancialsClient

DASHBOARD_PAGE = Path(__file__).parent / "app" / "00_Dashboard.py"


def _open_client(args: argparse.Namespace) -> FinancialsClient:
    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, api_base=args.api_base)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(1)
    return FinancialsClient(config.api)


def _log_card(card: CardData) -> None:
    logger.info(f"=== {card.title} ===")
    logger.info(f"  Current Price: {card.current_price}")
    logger.info(f"  Market Cap:    {card.market_cap}")
    logger.info(f"  Sector:        {card.sector}")
    logger.info(f"  Industry:      {card.industry}")
    for row in card.valuation.iter_rows(named=True):
        logger.info(f"  {row['name']:<14} {row['value']:.2f}")
    for row in card.profitability.iter_rows(named=True):
        logger.info(f"  {row['name']:<14} {row['value']:.2f}%")


def _report(state: DashboardState) -> None:
    for card in build_cards(state.results):
        _log_card(card)
    if state.failures:
        logger.warning(f"Could not load: {', '.join(state.failures)}")
    if not state.results:
        logger.error("No results")
        sys.exit(1)


def cmd_lookup(args: argparse.Namespace) -> None:
    """Look up a single symbol."""
    logger.info(f"=== Looking up {args.symbol} ===")

    with _open_client(args) as client:
        controller = DashboardController(DashboardState(), client)
        controller.submit_query(args.symbol)

    _report(controller.state)


def cmd_compare(args: argparse.Namespace) -> None:
    """Compare two symbols."""
    logger.info(f"=== Comparing {' vs. '.join(args.symbols)} ===")

    with _open_client(args) as client:
        controller = DashboardController(DashboardState(), client)
        controller.toggle_compare_mode(True)
        try:
            for symbol in args.symbols:
                controller.submit_query(symbol)
            controller.run_comparison()
        except DashboardValidationError as e:
            logger.error(str(e))
            sys.exit(1)

    _report(controller.state)


def cmd_dashboard(args: argparse.Namespace) -> None:
    """Launch the Streamlit dashboard."""
    logger.info(f"Starting dashboard from {DASHBOARD_PAGE}")
    result = subprocess.run([sys.executable, "-m", "streamlit", "run", str(DASHBOARD_PAGE)])
    sys.exit(result.returncode)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FinFixed - Financial Analytics Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    parser.add_argument("--api-base", type=str, help="Override the financials API base URL")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Lookup command
    parser_lookup = subparsers.add_parser("lookup", help="Fetch financials for one symbol")
    parser_lookup.add_argument("symbol", help="Ticker symbol, e.g. AAPL")
    parser_lookup.set_defaults(func=cmd_lookup)

    # Compare command
    parser_compare = subparsers.add_parser("compare", help="Compare two symbols")
    parser_compare.add_argument("symbols", nargs=2, metavar="SYMBOL", help="Two ticker symbols")
    parser_compare.set_defaults(func=cmd_compare)

    # Dashboard command
    parser_dashboard = subparsers.add_parser("dashboard", help="Launch the Streamlit dashboard")
    parser_dashboard.set_defaults(func=cmd_dashboard)

    return parser


def main() -> None:
    """Main entry point with CLI argument parsing."""
    setup_logging(settings.log_level)

    # Parse arguments and execute
    args = build_parser().parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
