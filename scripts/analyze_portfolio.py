#!/usr/bin/env python3
"""
Portfolio Analysis Script

Validates a trades CSV and prints holdings, portfolio metrics and value history.
Input: CSV file with columns: symbol,shares,price,date
Output: console report, optional holdings CSV export
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from portfolio_analyzer.config import get_settings
from portfolio_analyzer.core.constants import ALL_SECTORS, DEFAULT_ITEMS_PER_PAGE
from portfolio_analyzer.core.engine import PortfolioAnalysis, PortfolioAnalyzer
from portfolio_analyzer.core.enums import HoldingSortField, SortDirection
from portfolio_analyzer.core.exceptions.portfolio import PortfolioAnalyzerException
from portfolio_analyzer.core.models import FilterState, ParsedCSVResult
from portfolio_analyzer.core.utils.formatting import (
    format_currency,
    format_number,
    format_percentage,
)
from portfolio_analyzer.core.utils.logging_config import setup_logging
from portfolio_analyzer.infrastructure.data import TradeCSVParser, write_sample_csv
from portfolio_analyzer.infrastructure.data.frames import export_holdings_csv
from portfolio_analyzer.infrastructure.market_data import create_market_data_lookup
from portfolio_analyzer.infrastructure.storage.trade_store import TradeStore


class PortfolioReport:
    """Renders an analysis as plain-text tables."""

    def render(self, analysis: PortfolioAnalysis) -> str:
        sections = [
            self._render_summary(analysis),
            self._render_holdings(analysis),
            self._render_history(analysis),
        ]
        return "\n\n".join(sections)

    def _render_summary(self, analysis: PortfolioAnalysis) -> str:
        metrics = analysis.metrics
        traded_notional = sum(trade.notional_value() for trade in analysis.trades)
        lines = [
            "Portfolio Summary",
            f"  Total value:      {format_currency(metrics.total_value)}",
            f"  Total cost:       {format_currency(metrics.total_cost)}",
            f"  Total gain/loss:  {format_currency(metrics.total_gain_loss)} "
            f"({format_percentage(metrics.total_gain_loss_percent)})",
            f"  Unique symbols:   {metrics.num_unique_symbols}",
            f"  Traded notional:  {format_currency(traded_notional)}",
        ]
        if metrics.top_performer and metrics.worst_performer:
            lines.append(
                f"  Top performer:    {metrics.top_performer.symbol} "
                f"({format_percentage(metrics.top_performer.gain_loss_percent)})"
            )
            lines.append(
                f"  Worst performer:  {metrics.worst_performer.symbol} "
                f"({format_percentage(metrics.worst_performer.gain_loss_percent)})"
            )
        return "\n".join(lines)

    def _render_holdings(self, analysis: PortfolioAnalysis) -> str:
        page = analysis.filtered_holdings
        header = (
            f"{'Symbol':<8}{'Shares':>12}{'Avg Cost':>14}{'Price':>14}"
            f"{'Value':>16}{'Gain/Loss':>16}{'%':>10}  Sector"
        )
        lines = [
            f"Holdings ({page.start_index + 1 if page.items else 0}-{page.end_index} "
            f"of {page.total_items}, page {max(page.total_pages, 1)})",
            header,
        ]
        for holding in page.items:
            lines.append(
                f"{holding.symbol:<8}{format_number(holding.shares_held, 4):>12}"
                f"{format_currency(holding.avg_cost_basis):>14}"
                f"{format_currency(holding.current_price):>14}"
                f"{format_currency(holding.current_value):>16}"
                f"{format_currency(holding.unrealized_gain_loss):>16}"
                f"{format_percentage(holding.unrealized_gain_loss_percent):>10}"
                f"  {holding.sector}"
            )
        return "\n".join(lines)

    def _render_history(self, analysis: PortfolioAnalysis) -> str:
        lines = ["Portfolio History", f"{'Date':<12}{'Value':>16}{'Trades':>8}"]
        for point in analysis.history:
            lines.append(f"{point.date:<12}{format_currency(point.value):>16}{point.trades:>8}")
        return "\n".join(lines)


def log_validation_errors(result: ParsedCSVResult) -> None:
    """Log validation errors grouped by row, one line per row."""
    for row in dict.fromkeys(error.row for error in result.errors):
        details = "; ".join(
            f"{error.field}: {error.message}" for error in result.errors_for_row(row)
        )
        logger.error(f"Row {row}: {details}")


def build_filters(args: argparse.Namespace) -> FilterState:
    return FilterState(
        search_term=args.search,
        selected_sector=args.sector,
        date_from=args.date_from,
        date_to=args.date_to,
        sort_by=HoldingSortField.from_string(args.sort_by),
        sort_direction=SortDirection.DESC if args.desc else SortDirection.ASC,
        current_page=args.page,
        items_per_page=args.page_size,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze a stock portfolio from a trades CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_portfolio.py --sample sample-trades.csv
  python analyze_portfolio.py --file sample-trades.csv
  python analyze_portfolio.py --file trades.csv --sector Technology --sort-by symbol --asc
  python analyze_portfolio.py --file trades.csv --save data/trades.json
  python analyze_portfolio.py --load data/trades.json --export holdings.csv
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=str, help="Trades CSV to analyze")
    source.add_argument("--load", type=str, help="Analyze a trade list saved with --save")
    source.add_argument("--sample", type=str, help="Write the example trades CSV and exit")

    parser.add_argument("--prices", type=str, help="Price table CSV (symbol,price[,sector])")
    parser.add_argument("--save", type=str, help="Save validated trades to a JSON store")
    parser.add_argument("--export", type=str, help="Export holdings to a CSV file")

    parser.add_argument("--search", type=str, default="", help="Filter by symbol or sector text")
    parser.add_argument("--sector", type=str, default=ALL_SECTORS, help="Only show one sector")
    parser.add_argument("--date-from", type=str, help="Ignore trades before this date")
    parser.add_argument("--date-to", type=str, help="Ignore trades after this date")
    parser.add_argument(
        "--sort-by",
        type=str,
        default=HoldingSortField.CURRENT_VALUE.value,
        choices=[field.value for field in HoldingSortField],
        help="Holdings sort field (default: current_value)",
    )
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument("--desc", dest="desc", action="store_true", default=True)
    direction.add_argument("--asc", dest="desc", action="store_false")
    parser.add_argument("--page", type=int, default=1, help="Holdings page (default: 1)")
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_ITEMS_PER_PAGE,
        help=f"Holdings per page (default: {DEFAULT_ITEMS_PER_PAGE})",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(settings.LOG_LEVEL, debug=args.debug)

    try:
        if args.sample:
            write_sample_csv(args.sample)
            return 0

        lookup = create_market_data_lookup(
            args.prices or settings.PRICE_TABLE_PATH,
            default_sector=settings.DEFAULT_SECTOR,
            fallback_price_markup=settings.FALLBACK_PRICE_MARKUP,
        )

        if args.load:
            trades = TradeStore(args.load).load()
            if trades is None:
                logger.error(f"No usable trades stored in {args.load}")
                return 1
        else:
            file_path = Path(args.file)
            if not file_path.exists():
                logger.error(f"File not found: {file_path}")
                return 1

            result = TradeCSVParser().parse_file(file_path)
            if not result.is_valid:
                log_validation_errors(result)
                logger.error(f"{len(result.errors)} errors in {file_path.name}, nothing analyzed")
                return 1
            trades = list(result.trades)

        if args.save:
            TradeStore(args.save).save(trades)

        analyzer = PortfolioAnalyzer(lookup, settings.ANALYSIS_CACHE_SIZE)
        analysis = analyzer.analyze(trades, build_filters(args))
        print(PortfolioReport().render(analysis))

        if args.export:
            export_holdings_csv(analysis.filtered_holdings.items, args.export)

        logger.success(f"Analyzed {len(analysis.trades)} trades")
        return 0

    except PortfolioAnalyzerException as e:
        logger.error(f"Analysis failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
