"""
Integration tests for the analysis pipeline.

Tests the path from a trades CSV file through validation, aggregation and
export, using the reference price table.
"""

import importlib.util
from datetime import date
from pathlib import Path
from types import ModuleType

import pandas as pd
import pytest
from loguru import logger

from portfolio_analyzer.core.engine import PortfolioAnalyzer
from portfolio_analyzer.infrastructure.data import CSVValidator, TradeCSVParser, write_sample_csv
from portfolio_analyzer.infrastructure.data.frames import export_holdings_csv
from portfolio_analyzer.infrastructure.market_data import StaticMarketDataLookup
from portfolio_analyzer.infrastructure.storage.trade_store import TradeStore

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "analyze_portfolio.py"


def load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("analyze_portfolio", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestPortfolioPipeline:
    """Integration tests for the sample portfolio."""

    @pytest.fixture
    def sample_file(self, tmp_path: Path) -> Path:
        return write_sample_csv(tmp_path / "sample-trades.csv")

    @pytest.fixture
    def analyzer(self) -> PortfolioAnalyzer:
        return PortfolioAnalyzer(StaticMarketDataLookup.reference())

    def test_should_analyze_sample_portfolio(
        self, sample_file: Path, analyzer: PortfolioAnalyzer
    ) -> None:
        """Test holdings, metrics and history of the sample trades."""
        result = TradeCSVParser(as_of=date(2024, 12, 31)).parse_file(sample_file)
        assert result.is_valid

        analysis = analyzer.analyze(result.trades)

        assert [holding.symbol for holding in analysis.holdings] == [
            "MSFT",
            "AAPL",
            "GOOGL",
            "NVDA",
            "TSLA",
        ]
        aapl = analysis.holdings[1]
        assert aapl.shares_held == 12.0
        assert aapl.avg_cost_basis == pytest.approx(2082.45 / 12)
        assert aapl.current_value == pytest.approx(2100.0)

        metrics = analysis.metrics
        assert metrics.total_value == pytest.approx(9820.0)
        assert metrics.total_cost == pytest.approx(9712.15)
        assert metrics.total_gain_loss == pytest.approx(107.85)
        assert metrics.top_performer is not None and metrics.top_performer.symbol == "NVDA"
        assert metrics.worst_performer is not None and metrics.worst_performer.symbol == "GOOGL"

        assert [point.value for point in analysis.history] == [
            pytest.approx(value)
            for value in (1750.0, 2950.0, 8050.0, 9050.0, 8525.0, 9425.0, 10300.0, 9820.0)
        ]
        assert analysis.history[-1].value == metrics.total_value
        assert analysis.sectors == ["Consumer Discretionary", "Technology"]

    def test_should_store_and_export_analysis(
        self, sample_file: Path, analyzer: PortfolioAnalyzer, tmp_path: Path
    ) -> None:
        """Test a stored trade list reproduces the analysis and exports holdings."""
        trades = TradeCSVParser(as_of=date(2024, 12, 31)).parse_file(sample_file).trades
        store = TradeStore(tmp_path / "trades.json")
        store.save(trades)

        loaded = store.load()
        assert loaded is not None
        analysis = analyzer.analyze(loaded)

        assert analysis.metrics == analyzer.analyze(trades).metrics
        assert analyzer.get_cache_info()["hits"] == 1

        export_path = export_holdings_csv(analysis.holdings, tmp_path / "holdings.csv")
        df = pd.read_csv(export_path)
        assert df["symbol"].tolist() == ["MSFT", "AAPL", "GOOGL", "NVDA", "TSLA"]


class TestAnalyzePortfolioScript:
    """Integration tests for the command line tool."""

    def test_should_print_report_for_sample(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a full run over the sample file."""
        script = load_script()
        sample_path = tmp_path / "sample-trades.csv"
        export_path = tmp_path / "holdings.csv"

        assert script.main(["--sample", str(sample_path)]) == 0
        assert script.main(["--file", str(sample_path), "--export", str(export_path)]) == 0

        output = capsys.readouterr().out
        assert "Portfolio Summary" in output
        assert "$9,820.00" in output
        assert "NVDA" in output
        assert export_path.exists()

    def test_should_fail_on_invalid_file(self, tmp_path: Path) -> None:
        """Test validation errors stop the run."""
        script = load_script()
        path = tmp_path / "bad.csv"
        path.write_text("symbol,shares,price,date\nAAPL,0,1,2024-01-01\n")

        assert script.main(["--file", str(path)]) == 1

    def test_should_fail_on_missing_file(self, tmp_path: Path) -> None:
        """Test a missing input file."""
        script = load_script()

        assert script.main(["--file", str(tmp_path / "missing.csv")]) == 1

    def test_should_report_traded_notional(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the summary sums shares times price over every trade."""
        script = load_script()
        path = tmp_path / "trades.csv"
        path.write_text("symbol,shares,price,date\nAAPL,10,150,2024-01-01\nAAPL,-4,200,2024-02-01\n")

        assert script.main(["--file", str(path)]) == 0

        assert "Traded notional:  $2,300.00" in capsys.readouterr().out

    def test_should_log_errors_grouped_by_row(self) -> None:
        """Test each failing row is logged once with all of its field errors."""
        script = load_script()
        result = TradeCSVParser(as_of=date(2024, 12, 31)).parse_text(
            "symbol,shares,price,date\nAAPL,0,-1,2024-01-01\nMSFT,5,300,2024-01-02\nTSLA,1,1,later\n"
        )
        messages: list[str] = []
        handler_id = logger.add(messages.append, format="{message}")
        try:
            script.log_validation_errors(result)
        finally:
            logger.remove(handler_id)

        assert [message.strip() for message in messages] == [
            f"Row 1: shares: {CSVValidator.SHARES_INVALID}; price: {CSVValidator.PRICE_INVALID}",
            f"Row 3: date: {CSVValidator.DATE_INVALID}",
        ]
