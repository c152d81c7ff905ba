"""
Tests for the portfolio HTTP API.

Every test gets a fresh application (and therefore a fresh seeded store)
with price jitter disabled. Error bodies are checked for the generic
``{"error": ...}`` shape.
"""

import re
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.portfolio.entities import MarketSnapshot, Sentiment
from app.domain.portfolio.ports import MarketDataPort, MarketIndicatorsPort
from app.main import create_app

USD_TWD = 31.245
AAPL_PRICE = 175.32


@pytest.fixture
def app():
    return create_app(Settings(random_seed=11, price_jitter=0.0))


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def container(app):
    return app.state.container


def _ticker_id(client: TestClient, ticker: str) -> int:
    companies = client.get("/api/companies").json()
    return next(c["id"] for c in companies if c["ticker"] == ticker)


def _open_position(client: TestClient, company_id: int, shares: str = "10") -> dict:
    response = client.post(
        "/api/portfolio/positions",
        json={
            "companyId": company_id,
            "shares": shares,
            "averageCost": "150.50",
            "purchaseCurrency": "USD",
        },
    )
    assert response.status_code == 200
    return response.json()


# ══════════════════════════════════════════════════════════════════════
# Companies
# ══════════════════════════════════════════════════════════════════════


class TestCompanyEndpoints:
    """Tests for /api/companies."""

    def test_list_seeded_companies(self, client) -> None:
        body = client.get("/api/companies").json()
        assert [c["ticker"] for c in body] == ["AAPL", "TSLA", "FMG"]
        assert "createdAt" in body[0]
        assert body[0]["financials"]["cashReserves"] == 62000

    def test_create_company(self, client) -> None:
        response = client.post(
            "/api/companies",
            json={"name": "Sony", "ticker": "SONY", "sector": "Electronics", "currency": "JPY"},
        )
        assert response.status_code == 200
        assert response.json()["ticker"] == "SONY"
        assert len(client.get("/api/companies").json()) == 4

    def test_create_company_invalid(self, client) -> None:
        response = client.post("/api/companies", json={"name": "No ticker"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid company data"}

    def test_update_financials(self, client) -> None:
        company_id = _ticker_id(client, "TSLA")
        response = client.put(
            f"/api/companies/{company_id}/financials",
            json={"financials": {"annualRevenue": 100000, "annualProfit": 5000}},
        )
        assert response.status_code == 200
        assert response.json()["financials"]["annualRevenue"] == 100000

    def test_update_financials_unknown_company(self, client) -> None:
        response = client.put(
            "/api/companies/999/financials", json={"financials": {"annualRevenue": 1}}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Company not found"}


# ══════════════════════════════════════════════════════════════════════
# Portfolio
# ══════════════════════════════════════════════════════════════════════


class TestPositionEndpoints:
    """Tests for /api/portfolio/positions."""

    def test_create_serializes_decimals_as_text(self, client) -> None:
        position = _open_position(client, _ticker_id(client, "AAPL"))
        assert position["shares"] == "10"
        assert position["averageCost"] == "150.50"
        assert position["userId"] == 1
        assert position["purchaseCurrency"] == "USD"

    def test_list_positions(self, client) -> None:
        _open_position(client, _ticker_id(client, "AAPL"))
        body = client.get("/api/portfolio/positions").json()
        assert len(body) == 1

    def test_negative_shares_rejected(self, client) -> None:
        response = client.post(
            "/api/portfolio/positions",
            json={
                "companyId": 1,
                "shares": "-1",
                "averageCost": "10",
                "purchaseCurrency": "USD",
            },
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid position data"}

    def test_unknown_company_is_404(self, client) -> None:
        response = client.post(
            "/api/portfolio/positions",
            json={
                "companyId": 999,
                "shares": "1",
                "averageCost": "10",
                "purchaseCurrency": "USD",
            },
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Company not found"}

    def test_update_position(self, client) -> None:
        position = _open_position(client, _ticker_id(client, "AAPL"))
        response = client.put(
            f"/api/portfolio/positions/{position['id']}",
            json={"shares": "12.5", "averageCost": "140"},
        )
        assert response.status_code == 200
        assert response.json()["shares"] == "12.5"

    @pytest.mark.parametrize("field", ["shares", "averageCost"])
    def test_oversized_quantity_rejected(self, client, field) -> None:
        payload = {
            "companyId": 1,
            "shares": "10",
            "averageCost": "150",
            "purchaseCurrency": "USD",
        }
        payload[field] = "1e400"
        response = client.post("/api/portfolio/positions", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid position data"}
        assert client.get("/api/portfolio/positions").json() == []

    def test_oversized_update_keeps_summary_finite(self, client) -> None:
        position = _open_position(client, _ticker_id(client, "AAPL"))
        response = client.put(
            f"/api/portfolio/positions/{position['id']}",
            json={"shares": "1e400", "averageCost": "1"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid position data"}

        summary = client.get("/api/portfolio/summary").json()
        assert summary["totalValueTWD"] == pytest.approx(10 * AAPL_PRICE * USD_TWD)

    def test_update_unknown_position(self, client) -> None:
        response = client.put(
            "/api/portfolio/positions/999", json={"shares": "1", "averageCost": "1"}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Position not found"}

    def test_delete_position(self, client) -> None:
        position = _open_position(client, _ticker_id(client, "AAPL"))
        first = client.delete(f"/api/portfolio/positions/{position['id']}")
        second = client.delete(f"/api/portfolio/positions/{position['id']}")
        assert first.json() == {"success": True}
        assert second.status_code == 404
        assert second.json() == {"error": "Position not found"}

    def test_non_numeric_id_is_invalid_position_data(self, client) -> None:
        response = client.put(
            "/api/portfolio/positions/abc", json={"shares": "1", "averageCost": "1"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid position data"}


class TestPortfolioSummaryEndpoint:
    """Tests for /api/portfolio/summary and /api/portfolio/dividends."""

    def test_empty_portfolio(self, client) -> None:
        body = client.get("/api/portfolio/summary").json()
        assert body == {
            "totalValueTWD": 0.0,
            "totalChangeTWD": 0.0,
            "changePercent": 0.0,
            "fxImpactTWD": 0.0,
            "positions": [],
        }

    def test_summary_values_positions(self, client) -> None:
        _open_position(client, _ticker_id(client, "AAPL"))
        body = client.get("/api/portfolio/summary").json()

        assert body["totalValueTWD"] == pytest.approx(10 * AAPL_PRICE * USD_TWD)
        assert body["totalChangeTWD"] == pytest.approx(10 * (AAPL_PRICE - 150.50) * USD_TWD)
        row = body["positions"][0]
        assert row["company"]["ticker"] == "AAPL"
        assert row["currentValueTWD"] == pytest.approx(body["totalValueTWD"])
        assert "totalReturnTWD" in row
        assert "totalReturnPercent" in row

    def test_summary_is_stable_without_jitter(self, client) -> None:
        _open_position(client, _ticker_id(client, "AAPL"))
        first = client.get("/api/portfolio/summary").json()
        second = client.get("/api/portfolio/summary").json()
        assert first == second

    def test_dividends(self, client) -> None:
        _open_position(client, _ticker_id(client, "AAPL"))
        body = client.get("/api/portfolio/dividends").json()
        value = 10 * AAPL_PRICE * USD_TWD
        assert body["annualDividendTWD"] == pytest.approx(value * 0.0052)
        assert body["nextPaymentTWD"] == pytest.approx(value * 0.0052 / 4)
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", body["nextPaymentDate"])


# ══════════════════════════════════════════════════════════════════════
# Stocks
# ══════════════════════════════════════════════════════════════════════


class TestStockEndpoints:
    """Tests for /api/stocks."""

    def test_price(self, client) -> None:
        body = client.get("/api/stocks/AAPL/price").json()
        assert body["ticker"] == "AAPL"
        assert body["currency"] == "USD"
        assert body["priceInTWD"] == pytest.approx(AAPL_PRICE * USD_TWD)

    def test_unknown_price(self, client) -> None:
        response = client.get("/api/stocks/NOPE/price")
        assert response.status_code == 404
        assert response.json() == {"error": "Stock price not found"}

    def test_trading_analysis(self, client) -> None:
        body = client.get("/api/stocks/AAPL/trading-analysis?action=BUY").json()
        assert body["recommended"] is True
        assert body["optimalWindow"] == "Next 24 hours"
        assert body["fxAdvantage"] == pytest.approx(-0.38)

    @pytest.mark.parametrize("query", ["?action=HOLD", "?action=buy", ""])
    def test_trading_analysis_invalid_action(self, client, query) -> None:
        response = client.get(f"/api/stocks/AAPL/trading-analysis{query}")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid action parameter"}


# ══════════════════════════════════════════════════════════════════════
# AI
# ══════════════════════════════════════════════════════════════════════


class TestAIEndpoints:
    """Tests for /api/ai."""

    def _bullish_market(self) -> MagicMock:
        port = MagicMock(spec=MarketDataPort)
        port.snapshot.side_effect = lambda ticker: MarketSnapshot(
            ticker=ticker, price=100.0, volume=10, sentiment=Sentiment.POSITIVE, volatility=5.0
        )
        return port

    def test_generate_then_list(self, client, container) -> None:
        container.market_data = self._bullish_market()
        aapl = _ticker_id(client, "AAPL")
        client.post(
            "/api/news",
            json={
                "title": "Record iPhone sales",
                "content": "Demand strong",
                "source": "Wire",
                "sentiment": "POSITIVE",
                "companyId": aapl,
            },
        )

        response = client.post("/api/ai/generate-recommendations")
        assert response.json() == {
            "success": True,
            "message": "Recommendations generated successfully",
        }

        recommendations = client.get("/api/ai/recommendations").json()
        buys = [r for r in recommendations if r["companyId"] == aapl]
        assert len(buys) == 1
        assert buys[0]["signal"] == "BUY"
        assert buys[0]["confidence"] == "95"
        assert buys[0]["targetPrice"] == "155.00"
        assert buys[0]["fxAdvantage"] == "0.38"
        assert buys[0]["company"]["ticker"] == "AAPL"

    def test_currency_forecast(self, client) -> None:
        forecasts = client.get("/api/ai/currency-forecast").json()
        assert {f["pair"] for f in forecasts} == {"USD/TWD", "JPY/TWD", "AUD/TWD"}
        for forecast in forecasts:
            assert 70 <= forecast["confidence"] < 95
            assert forecast["trend"] in {"BULLISH", "BEARISH", "STABLE"}
            assert forecast["volatilityRisk"] in {"LOW", "MEDIUM", "HIGH"}
            assert "predicted24h" in forecast

        rates = client.get("/api/currency/rates").json()
        for rate in rates:
            assert re.fullmatch(r"(BULLISH|BEARISH|STABLE) \([+-]\d+\.\d{2}\)", rate["forecast24h"])
            assert re.fullmatch(r"(LOW|MEDIUM|HIGH) \(\d+%\)", rate["volatilityRisk"])


# ══════════════════════════════════════════════════════════════════════
# Currency
# ══════════════════════════════════════════════════════════════════════


class TestCurrencyEndpoints:
    """Tests for /api/currency."""

    def test_rates_serialized_as_text(self, client) -> None:
        rates = client.get("/api/currency/rates").json()
        usd = next(r for r in rates if r["fromCurrency"] == "USD")
        assert usd["toCurrency"] == "TWD"
        assert usd["rate"] == "31.245"
        assert usd["changePercent"] == "0.38"

    def test_update_rates(self, client) -> None:
        response = client.post("/api/currency/update-rates")
        assert response.json() == {
            "success": True,
            "message": "Currency rates updated successfully",
        }
        usd = next(
            r for r in client.get("/api/currency/rates").json() if r["fromCurrency"] == "USD"
        )
        assert abs(float(usd["rate"]) - USD_TWD) <= USD_TWD * 0.0005 + 1e-9


# ══════════════════════════════════════════════════════════════════════
# Executives, alerts, news, notifications
# ══════════════════════════════════════════════════════════════════════


class TestCEOProfileEndpoints:
    """Tests for /api/ceo-profiles."""

    def test_list_enriched(self, client) -> None:
        profiles = client.get("/api/ceo-profiles").json()
        assert len(profiles) == 3
        assert all(p["company"] is not None for p in profiles)
        assert "photoUrl" in profiles[0]

    def test_create(self, client) -> None:
        response = client.post(
            "/api/ceo-profiles",
            json={"companyId": 1, "name": "Jane Doe", "title": "CFO", "tenure": 4},
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Jane Doe"

    def test_create_invalid(self, client) -> None:
        response = client.post("/api/ceo-profiles", json={"companyId": 1})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid CEO profile data"}


class TestMarketAlertEndpoints:
    """Tests for /api/market."""

    def _alert(self, severity: str = "HIGH") -> dict:
        return {
            "type": "SECTOR",
            "severity": severity,
            "title": "Chip shortage",
            "description": "Supply constrained",
        }

    def test_high_alert_notifies(self, client, container) -> None:
        received = []
        container.notifier.add_callback(lambda s, b, ctx: received.append(s))
        response = client.post("/api/market/alerts", json=self._alert())
        assert response.status_code == 200
        assert response.json()["isActive"] is True
        assert received == ["Chip shortage"]

    def test_invalid_severity(self, client) -> None:
        response = client.post("/api/market/alerts", json=self._alert("EXTREME"))
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid alert data"}

    def test_deactivate(self, client) -> None:
        alert = client.post("/api/market/alerts", json=self._alert("LOW")).json()
        response = client.post(f"/api/market/alerts/{alert['id']}/deactivate")
        assert response.json()["success"] is True
        assert client.get("/api/market/alerts").json() == []

    def test_deactivate_unknown(self, client) -> None:
        response = client.post("/api/market/alerts/999/deactivate")
        assert response.status_code == 404
        assert response.json() == {"error": "Alert not found"}

    def test_monitor(self, client, container) -> None:
        port = MagicMock(spec=MarketIndicatorsPort)
        port.read.return_value.yield_curve_inverted = True
        port.read.return_value.vix = 33.0
        port.read.return_value.bond_yield = 4.6
        port.read.return_value.overall_sentiment = "BEARISH"
        container.indicators = port

        response = client.post("/api/market/monitor")
        assert response.json() == {"success": True, "message": "Market monitoring completed"}
        severities = sorted(a["severity"] for a in client.get("/api/market/alerts").json())
        assert severities == ["HIGH", "MEDIUM"]


class TestNewsEndpoints:
    """Tests for /api/news."""

    def test_create_and_list(self, client) -> None:
        for day in (1, 2):
            response = client.post(
                "/api/news",
                json={
                    "title": f"Day {day}",
                    "content": "Body",
                    "source": "Wire",
                    "sentiment": "NEUTRAL",
                    "publishedAt": f"2024-03-0{day}T09:00:00Z",
                },
            )
            assert response.status_code == 200

        body = client.get("/api/news?limit=1").json()
        assert [a["title"] for a in body] == ["Day 2"]
        assert body[0]["company"] is None

    def test_invalid_sentiment(self, client) -> None:
        response = client.post(
            "/api/news",
            json={"title": "t", "content": "c", "source": "s", "sentiment": "GREAT"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid news data"}


class TestNotificationEndpoint:
    """Tests for /api/notifications/test."""

    def test_without_channels_reports_failure(self, client) -> None:
        response = client.post("/api/notifications/test")
        assert response.json() == {"success": False, "message": "Test notification sent"}

    def test_with_callback(self, client, container) -> None:
        received = []
        container.notifier.add_callback(lambda s, b, ctx: received.append((s, b)))
        response = client.post(
            "/api/notifications/test", json={"type": "Ping", "message": "Hello"}
        )
        assert response.json()["success"] is True
        assert received == [("Ping", "Hello")]


# ══════════════════════════════════════════════════════════════════════
# Data refresh
# ══════════════════════════════════════════════════════════════════════


class TestDataRefreshEndpoint:
    """Tests for /api/data/refresh."""

    def test_refresh_success(self, client) -> None:
        body = client.post("/api/data/refresh").json()
        assert body["success"] is True
        assert body["message"] == "All data refreshed successfully"
        assert "timestamp" in body

        rates = client.get("/api/currency/rates").json()
        assert all(re.fullmatch(r"\w+ \([+-]\d+\.\d{2}\)", r["forecast24h"]) for r in rates)

    def test_refresh_failure_is_generic_500(self, client, container) -> None:
        broken = MagicMock(spec=MarketIndicatorsPort)
        broken.read.side_effect = RuntimeError("feed down")
        container.indicators = broken

        response = client.post("/api/data/refresh")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to refresh data"}
        assert "feed down" not in response.text
