"""
Holdings table filter state.
"""

from dataclasses import dataclass

from portfolio_analyzer.core.constants import ALL_SECTORS, DEFAULT_ITEMS_PER_PAGE
from portfolio_analyzer.core.enums import HoldingSortField, SortDirection


@dataclass(frozen=True)
class FilterState:
    """Search, sector, date range, sort and page settings for a holdings view.

    ``date_from``/``date_to`` are inclusive YYYY-MM-DD bounds applied to
    trades before aggregation; ``None`` leaves that side open.
    """

    search_term: str = ""
    selected_sector: str = ALL_SECTORS
    date_from: str | None = None
    date_to: str | None = None
    sort_by: HoldingSortField = HoldingSortField.CURRENT_VALUE
    sort_direction: SortDirection = SortDirection.DESC
    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None
