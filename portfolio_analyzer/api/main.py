"""
FastAPI main application for the portfolio analyzer.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from portfolio_analyzer import __version__
from portfolio_analyzer.api.schemas.api_models import ErrorResponse
from portfolio_analyzer.config import Settings, get_settings
from portfolio_analyzer.core.exceptions.portfolio import (
    ConfigurationError,
    PortfolioAnalyzerException,
    ValidationError,
)
from portfolio_analyzer.core.utils.logging_config import setup_logging

from .routers import portfolio


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Portfolio Analyzer API",
        version=__version__,
        description="API for stock portfolio holdings, metrics and value history",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=False,  # Disable credentials for security
        allow_methods=["GET", "POST"],  # Specific methods only
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    )

    app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])
    app.add_exception_handler(PortfolioAnalyzerException, handle_domain_error)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": "Portfolio Analyzer API", "version": __version__, "status": "running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Map domain exceptions to error responses."""
    if isinstance(exc, ValidationError):
        status_code, error = 400, "validation_error"
    elif isinstance(exc, ConfigurationError):
        status_code, error = 500, "configuration_error"
    else:
        status_code, error = 500, "internal_error"

    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    body = ErrorResponse(error=error, message=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


app = create_app()
