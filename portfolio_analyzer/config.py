"""
Application settings.

Loaded from environment variables prefixed with ``PORTFOLIO_`` (or a
``.env`` file in the working directory).
"""

import json
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from portfolio_analyzer.core.constants import (
    DEFAULT_ANALYSIS_CACHE_SIZE,
    DEFAULT_SECTOR,
    FALLBACK_PRICE_MARKUP,
)
from portfolio_analyzer.core.exceptions.portfolio import ConfigurationError, DataError
from portfolio_analyzer.infrastructure.market_data import (
    StaticMarketDataLookup,
    create_market_data_lookup,
)


class Settings(BaseSettings):
    """Portfolio analyzer settings from environment."""

    # --- Logging
    LOG_LEVEL: str = "INFO"

    # --- Market data
    PRICE_TABLE_PATH: str | None = None  # symbol,price[,sector] CSV overriding reference prices
    FALLBACK_PRICE_MARKUP: float = Field(default=FALLBACK_PRICE_MARKUP, gt=0)
    DEFAULT_SECTOR: str = Field(default=DEFAULT_SECTOR, min_length=1)

    # --- Caching
    ANALYSIS_CACHE_SIZE: int = Field(default=DEFAULT_ANALYSIS_CACHE_SIZE, ge=1)

    # --- API
    ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",  # Development frontend
        "http://localhost:8080",  # Alternative development port
    ]

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, v: str | list[str]) -> list[str]:
        # Accept comma-separated env like: http://localhost:3000,http://localhost:5173
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [x.strip() for x in v.split(",") if x.strip()]
        return v

    def build_market_data_lookup(self) -> StaticMarketDataLookup:
        """
        Create the price and sector lookup these settings describe.

        Raises:
            ConfigurationError: If the price table cannot be used
        """
        try:
            return create_market_data_lookup(
                self.PRICE_TABLE_PATH,
                default_sector=self.DEFAULT_SECTOR,
                fallback_price_markup=self.FALLBACK_PRICE_MARKUP,
            )
        except DataError as e:
            raise ConfigurationError(f"Invalid market data settings: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()
