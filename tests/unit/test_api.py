"""
Unit tests for the portfolio HTTP API.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from portfolio_analyzer.api.dependencies import get_analyzer
from portfolio_analyzer.api.main import create_app
from portfolio_analyzer.config import Settings
from portfolio_analyzer.core.engine import PortfolioAnalyzer
from portfolio_analyzer.core.interfaces.market_data import IMarketDataLookup
from portfolio_analyzer.infrastructure.data import generate_sample_csv
from portfolio_analyzer.infrastructure.market_data import StaticMarketDataLookup

AS_OF = "2024-12-31"


@pytest.fixture
def client() -> Generator[TestClient]:
    """Client for an app wired to a small fixed lookup."""
    lookup = StaticMarketDataLookup(
        prices={"AAPL": 175.0, "MSFT": 340.0},
        sectors={"AAPL": "Technology", "MSFT": "Technology", "JPM": "Financials"},
    )
    app = create_app(Settings())
    app.dependency_overrides[get_analyzer] = lambda: PortfolioAnalyzer(lookup)

    with TestClient(app) as test_client:
        yield test_client


class TestServiceEndpoints:
    """Test root and health endpoints."""

    def test_should_report_running(self, client: TestClient) -> None:
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_should_report_healthy(self, client: TestClient) -> None:
        """Test health endpoint."""
        assert client.get("/health").json() == {"status": "healthy"}


class TestValidateEndpoint:
    """Test CSV validation over HTTP."""

    def test_should_return_trades_and_errors(self, client: TestClient) -> None:
        """Test partial failure is reported, not raised."""
        csv = "symbol,shares,price,date\nAAPL,10,172.35,2024-06-12\n,5,1,2024-06-12\n"

        response = client.post("/api/portfolio/validate", json={"csv": csv, "as_of": AS_OF})

        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is False
        assert body["trades"] == [
            {"symbol": "AAPL", "shares": 10.0, "price": 172.35, "date": "2024-06-12"}
        ]
        assert body["errors"] == [{"row": 2, "field": "symbol", "message": "Symbol is required"}]

    def test_should_accept_sample_document(self, client: TestClient) -> None:
        """Test the sample validates cleanly."""
        response = client.post(
            "/api/portfolio/validate", json={"csv": generate_sample_csv(), "as_of": AS_OF}
        )

        assert response.json()["is_valid"] is True
        assert len(response.json()["trades"]) == 8


class TestAnalyzeEndpoint:
    """Test portfolio analysis over HTTP."""

    def test_should_analyze_trades(self, client: TestClient) -> None:
        """Test holdings, metrics, history and page."""
        payload = {
            "trades": [
                {"symbol": "AAPL", "shares": 10, "price": 150, "date": "2024-01-01"},
                {"symbol": "AAPL", "shares": "-4", "price": "160", "date": "2024-02-01"},
                {"symbol": "MSFT", "shares": 1, "price": 300, "date": "2024-02-01"},
            ],
            "filters": {"sort_by": "symbol", "sort_direction": "asc"},
            "as_of": AS_OF,
        }

        response = client.post("/api/portfolio/analyze", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert [holding["symbol"] for holding in body["holdings"]] == ["AAPL", "MSFT"]
        assert body["holdings"][0]["shares_held"] == 6.0
        assert body["holdings"][0]["avg_cost_basis"] == pytest.approx(150.0)
        assert body["metrics"]["num_unique_symbols"] == 2
        assert body["metrics"]["top_performer"]["symbol"] == "AAPL"
        assert [point["trades"] for point in body["history"]] == [1, 2]
        assert body["sectors"] == ["Technology"]
        assert [holding["symbol"] for holding in body["page"]["items"]] == ["AAPL", "MSFT"]

    def test_should_accept_camel_case_sort_field(self, client: TestClient) -> None:
        """Test camelCase sort fields."""
        payload = {
            "trades": [{"symbol": "AAPL", "shares": 1, "price": 150, "date": "2024-01-01"}],
            "filters": {"sort_by": "unrealizedGainLossPercent"},
            "as_of": AS_OF,
        }

        assert client.post("/api/portfolio/analyze", json=payload).status_code == 200

    def test_should_reject_invalid_trades(self, client: TestClient) -> None:
        """Test trades failing row validation are rejected with their errors."""
        payload = {
            "trades": [{"symbol": "AAPL", "shares": 0, "price": 150, "date": "2030-01-01"}],
            "as_of": AS_OF,
        }

        response = client.post("/api/portfolio/analyze", json=payload)

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error"] == "invalid_trades"
        assert [error["field"] for error in detail["errors"]] == ["shares", "date"]

    def test_should_map_validation_errors_to_bad_request(self, client: TestClient) -> None:
        """Test domain validation errors become 400 responses."""
        payload = {
            "trades": [{"symbol": "AAPL", "shares": 1, "price": 150, "date": "2024-01-01"}],
            "filters": {"date_from": "2024-05-01", "date_to": "2024-01-01"},
            "as_of": AS_OF,
        }

        response = client.post("/api/portfolio/analyze", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_should_reject_out_of_range_page(self, client: TestClient) -> None:
        """Test request schema bounds."""
        payload = {"trades": [], "filters": {"current_page": 0}}

        assert client.post("/api/portfolio/analyze", json=payload).status_code == 422


class TestReferenceEndpoints:
    """Test sample and sector endpoints."""

    def test_should_download_sample_csv(self, client: TestClient) -> None:
        """Test the sample document download."""
        response = client.get("/api/portfolio/sample")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "sample-trades.csv" in response.headers["content-disposition"]
        assert response.text == generate_sample_csv()

    def test_should_list_known_sectors(self, client: TestClient) -> None:
        """Test sector listing."""
        response = client.get("/api/portfolio/sectors")

        assert response.json() == {
            "sectors": ["Financials", "Other", "Technology"],
            "default_sector": "Other",
        }

    def test_should_list_default_sector_for_lookups_without_a_table(self) -> None:
        """Test any lookup implementation can back the sector listing."""

        class PriceOnlyLookup(IMarketDataLookup):
            default_sector = "Unclassified"

            def get_price(self, symbol: str) -> float | None:
                return 1.0

            def get_sector(self, symbol: str) -> str | None:
                return None

        app = create_app(Settings())
        app.dependency_overrides[get_analyzer] = lambda: PortfolioAnalyzer(PriceOnlyLookup())

        with TestClient(app) as test_client:
            response = test_client.get("/api/portfolio/sectors")

        assert response.json() == {"sectors": ["Unclassified"], "default_sector": "Unclassified"}
