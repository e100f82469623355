"""
Unit tests for application settings.
"""

from pathlib import Path

import pydantic
import pytest

from portfolio_analyzer.config import Settings, get_settings
from portfolio_analyzer.core.exceptions.portfolio import ConfigurationError


class TestSettings:
    """Test environment-driven settings."""

    def test_should_use_defaults(self) -> None:
        """Test defaults without environment overrides."""
        settings = Settings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.PRICE_TABLE_PATH is None
        assert settings.FALLBACK_PRICE_MARKUP == 1.05
        assert settings.DEFAULT_SECTOR == "Other"
        assert settings.ANALYSIS_CACHE_SIZE == 32

    def test_should_read_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test PORTFOLIO_ variables override defaults."""
        monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "debug")
        monkeypatch.setenv("PORTFOLIO_DEFAULT_SECTOR", "Unclassified")
        monkeypatch.setenv("PORTFOLIO_ANALYSIS_CACHE_SIZE", "4")

        settings = Settings()

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.DEFAULT_SECTOR == "Unclassified"
        assert settings.ANALYSIS_CACHE_SIZE == 4

    @pytest.mark.parametrize(
        "value",
        ["http://a.test, http://b.test", '["http://a.test", "http://b.test"]'],
    )
    def test_should_parse_allowed_origins(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Test comma-separated and JSON origin lists."""
        monkeypatch.setenv("PORTFOLIO_ALLOWED_ORIGINS", value)

        assert Settings().ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("PORTFOLIO_LOG_LEVEL", "VERBOSE"),
            ("PORTFOLIO_FALLBACK_PRICE_MARKUP", "0"),
            ("PORTFOLIO_ANALYSIS_CACHE_SIZE", "0"),
        ],
    )
    def test_should_reject_invalid_values(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        """Test out-of-range settings fail validation."""
        monkeypatch.setenv(name, value)

        with pytest.raises(pydantic.ValidationError):
            Settings()

    def test_should_build_reference_lookup(self) -> None:
        """Test the lookup follows fallback settings."""
        lookup = Settings(DEFAULT_SECTOR="Misc").build_market_data_lookup()

        assert lookup.default_sector == "Misc"
        assert lookup.get_price("AAPL") is not None

    def test_should_wrap_price_table_errors(self, tmp_path: Path) -> None:
        """Test a bad price table is a configuration error."""
        settings = Settings(PRICE_TABLE_PATH=str(tmp_path / "missing.csv"))

        with pytest.raises(ConfigurationError, match="Invalid market data settings"):
            settings.build_market_data_lookup()

    def test_should_cache_settings(self) -> None:
        """Test get_settings returns one instance."""
        assert get_settings() is get_settings()
