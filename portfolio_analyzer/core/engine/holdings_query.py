"""
Holdings and trades query helpers.

Search, sector filtering, sorting and pagination for holdings tables, plus
date-range filtering of trades before aggregation.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import ceil
from typing import Generic, TypeVar

from portfolio_analyzer.core.constants import ALL_SECTORS, MAX_ITEMS_PER_PAGE
from portfolio_analyzer.core.enums import HoldingSortField, SortDirection
from portfolio_analyzer.core.exceptions.portfolio import ValidationError
from portfolio_analyzer.core.models import Holding, Trade
from portfolio_analyzer.core.utils.validation import parse_iso_date, validate_page_params

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a sequence plus its position in the whole."""

    items: list[T]
    total_pages: int
    total_items: int
    start_index: int
    end_index: int


def filter_holdings(
    holdings: Iterable[Holding],
    search_term: str = "",
    selected_sector: str = ALL_SECTORS,
    sort_by: HoldingSortField = HoldingSortField.CURRENT_VALUE,
    sort_direction: SortDirection = SortDirection.DESC,
) -> list[Holding]:
    """
    Search, filter and sort holdings.

    Args:
        holdings: Holdings to query; the input is not modified
        search_term: Case-insensitive substring matched against symbol and sector
        selected_sector: Exact sector to keep, or "all"
        sort_by: Holding field to sort on
        sort_direction: Ascending or descending; ties keep input order either way

    Returns:
        New list of matching holdings in the requested order
    """
    filtered = list(holdings)

    if search_term:
        term = search_term.lower()
        filtered = [
            holding
            for holding in filtered
            if term in holding.symbol.lower() or term in holding.sector.lower()
        ]

    if selected_sector and selected_sector != ALL_SECTORS:
        filtered = [holding for holding in filtered if holding.sector == selected_sector]

    return sorted(
        filtered,
        key=lambda holding: _sort_value(holding, sort_by),
        reverse=sort_direction.is_descending,
    )


def _sort_value(holding: Holding, sort_by: HoldingSortField) -> str | float:
    value = getattr(holding, sort_by.value)
    return value.casefold() if sort_by.is_text else value


def paginate(
    items: Sequence[T], page: int, items_per_page: int, max_items_per_page: int = MAX_ITEMS_PER_PAGE
) -> Page[T]:
    """
    Slice one 1-based page out of a sequence.

    Pages past the end are empty, with start and end indexes at the total.

    Raises:
        ValidationError: If page or page size is out of range
    """
    validate_page_params(page, items_per_page, max_items_per_page)

    total_items = len(items)
    total_pages = ceil(total_items / items_per_page)
    start_index = min((page - 1) * items_per_page, total_items)
    end_index = min(start_index + items_per_page, total_items)

    return Page(
        items=list(items[start_index:end_index]),
        total_pages=total_pages,
        total_items=total_items,
        start_index=start_index,
        end_index=end_index,
    )


def get_unique_sectors(holdings: Iterable[Holding]) -> list[str]:
    """Distinct sectors present in the holdings, sorted."""
    return sorted({holding.sector for holding in holdings})


def filter_trades_by_date_range(
    trades: Iterable[Trade], date_from: str | None = None, date_to: str | None = None
) -> list[Trade]:
    """
    Keep trades dated within an inclusive range.

    Args:
        trades: Trades to filter
        date_from: First date kept (YYYY-MM-DD), or None for no lower bound
        date_to: Last date kept (YYYY-MM-DD), or None for no upper bound

    Returns:
        Matching trades in input order

    Raises:
        ValidationError: If a bound is not a YYYY-MM-DD date or the range is inverted
    """
    start = parse_iso_date(date_from, "date_from") if date_from is not None else None
    end = parse_iso_date(date_to, "date_to") if date_to is not None else None
    if start and end and start > end:
        raise ValidationError("date_from must be before or equal to date_to")

    return [
        trade
        for trade in trades
        if (start is None or trade.trade_date >= start) and (end is None or trade.trade_date <= end)
    ]
