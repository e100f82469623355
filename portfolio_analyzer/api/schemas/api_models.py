"""
Pydantic schemas for API request/response models.
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from portfolio_analyzer.core.constants import (
    ALL_SECTORS,
    DEFAULT_ITEMS_PER_PAGE,
    MAX_ITEMS_PER_PAGE,
)
from portfolio_analyzer.core.enums import HoldingSortField, SortDirection
from portfolio_analyzer.core.models import FilterState


class ValidateRequest(BaseModel):
    """Request model for validating a trades document."""

    csv: str = Field(..., description="CSV document with a symbol,shares,price,date header")
    as_of: date | None = Field(
        default=None, description="Date treated as today for the future-date check"
    )


class TradeModel(BaseModel):
    """A trade as exchanged with clients.

    Values are re-validated with the same rules as CSV rows.
    """

    symbol: str
    shares: float | str
    price: float | str
    date: str


class FiltersModel(BaseModel):
    """Holdings view filters."""

    search_term: str = ""
    selected_sector: str = ALL_SECTORS
    date_from: str | None = None
    date_to: str | None = None
    sort_by: HoldingSortField = HoldingSortField.CURRENT_VALUE
    sort_direction: SortDirection = SortDirection.DESC
    current_page: int = Field(default=1, ge=1)
    items_per_page: int = Field(default=DEFAULT_ITEMS_PER_PAGE, ge=1, le=MAX_ITEMS_PER_PAGE)

    @field_validator("sort_by", mode="before")
    @classmethod
    def parse_sort_by(cls, v: str | HoldingSortField) -> HoldingSortField:
        """Accept snake_case or camelCase field names."""
        if isinstance(v, str) and not isinstance(v, HoldingSortField):
            return HoldingSortField.from_string(v)
        return v

    def to_filter_state(self) -> FilterState:
        return FilterState(**self.model_dump())


class AnalyzeRequest(BaseModel):
    """Request model for portfolio analysis."""

    trades: list[TradeModel]
    filters: FiltersModel | None = None
    as_of: date | None = None


class CSVErrorModel(BaseModel):
    """One field-level validation error."""

    row: int
    field: str
    message: str


class ParsedCSVResponse(BaseModel):
    """Response model for document validation."""

    trades: list[TradeModel]
    errors: list[CSVErrorModel]
    is_valid: bool


class HoldingModel(BaseModel):
    """Response model for a holding."""

    symbol: str
    shares_held: float
    avg_cost_basis: float
    current_price: float
    current_value: float
    unrealized_gain_loss: float
    unrealized_gain_loss_percent: float
    sector: str


class PerformerModel(BaseModel):
    symbol: str
    gain_loss_percent: float


class MetricsModel(BaseModel):
    """Response model for portfolio metrics."""

    total_value: float
    total_cost: float
    total_gain_loss: float
    total_gain_loss_percent: float
    num_unique_symbols: int
    top_performer: PerformerModel | None
    worst_performer: PerformerModel | None


class HistoryPointModel(BaseModel):
    date: str
    value: float
    trades: int


class HoldingsPageModel(BaseModel):
    """Response model for one page of filtered holdings."""

    items: list[HoldingModel]
    total_pages: int
    total_items: int
    start_index: int
    end_index: int


class AnalysisResponse(BaseModel):
    """Response model for portfolio analysis."""

    holdings: list[HoldingModel]
    metrics: MetricsModel
    history: list[HistoryPointModel]
    sectors: list[str]
    page: HoldingsPageModel


class SectorsResponse(BaseModel):
    """Response model for known sectors."""

    sectors: list[str]
    default_sector: str


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
    details: dict | None = None
