"""
Portfolio API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from portfolio_analyzer.api.dependencies import get_analyzer
from portfolio_analyzer.api.schemas.api_models import (
    AnalysisResponse,
    AnalyzeRequest,
    ParsedCSVResponse,
    SectorsResponse,
    ValidateRequest,
)
from portfolio_analyzer.core.engine import PortfolioAnalyzer
from portfolio_analyzer.infrastructure.data import TradeCSVParser, generate_sample_csv

router = APIRouter()


@router.post("/validate", response_model=ParsedCSVResponse)
async def validate_trades(request: ValidateRequest) -> ParsedCSVResponse:
    """Validate a trades CSV document and return accepted trades and errors."""
    result = TradeCSVParser(as_of=request.as_of).parse_text(request.csv)
    return ParsedCSVResponse.model_validate(result.to_dict())


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_portfolio(
    request: AnalyzeRequest, analyzer: PortfolioAnalyzer = Depends(get_analyzer)
) -> AnalysisResponse:
    """Compute holdings, metrics and history for a list of trades."""
    parsed = TradeCSVParser(as_of=request.as_of).parse_rows(
        trade.model_dump() for trade in request.trades
    )
    if not parsed.is_valid:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "invalid_trades",
                "errors": [error.to_dict() for error in parsed.errors],
            },
        )

    filters = request.filters.to_filter_state() if request.filters else None
    analysis = analyzer.analyze(parsed.trades, filters)
    return AnalysisResponse.model_validate(analysis.to_dict())


@router.get("/sample")
async def get_sample_csv() -> Response:
    """Download the example trades document."""
    return Response(
        content=generate_sample_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="sample-trades.csv"'},
    )


@router.get("/sectors", response_model=SectorsResponse)
async def get_sectors(analyzer: PortfolioAnalyzer = Depends(get_analyzer)) -> SectorsResponse:
    """List the sector labels known to the price table."""
    lookup = analyzer.lookup
    return SectorsResponse(sectors=lookup.known_sectors(), default_sector=lookup.default_sector)
