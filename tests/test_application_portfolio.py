"""
Tests for the portfolio application layer.

Use cases run against a seeded in-memory store. Market data, indicators
and the notifier are mocked at their ports; randomness is scripted.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from app.application.portfolio.analyze_trading_window import (
    AnalyzeTradingWindowUseCase,
)
from app.application.portfolio.dtos import (
    CreateAlertCommand,
    CreateNewsCommand,
    CreatePositionCommand,
    TradingAnalysisQuery,
    UpdateFinancialsCommand,
    UpdatePositionCommand,
)
from app.application.portfolio.forecast_currency_rates import (
    ForecastCurrencyRatesUseCase,
)
from app.application.portfolio.generate_recommendations import (
    GenerateRecommendationsUseCase,
    ListRecommendationsUseCase,
)
from app.application.portfolio.get_portfolio_summary import GetPortfolioSummaryUseCase
from app.application.portfolio.get_stock_price import GetStockPriceUseCase
from app.application.portfolio.manage_alerts import (
    CreateAlertUseCase,
    DeactivateAlertUseCase,
    ListActiveAlertsUseCase,
)
from app.application.portfolio.manage_ceo_profiles import ListCEOProfilesUseCase
from app.application.portfolio.manage_companies import UpdateCompanyFinancialsUseCase
from app.application.portfolio.manage_news import (
    CreateNewsUseCase,
    ListRecentNewsUseCase,
)
from app.application.portfolio.manage_positions import (
    CreatePositionUseCase,
    DeletePositionUseCase,
    UpdatePositionUseCase,
)
from app.application.portfolio.monitor_market import MonitorMarketConditionsUseCase
from app.application.portfolio.project_dividends import ProjectDividendsUseCase
from app.application.portfolio.refresh_data import RefreshDataUseCase
from app.application.portfolio.send_test_notification import (
    SendTestNotificationUseCase,
)
from app.application.portfolio.update_currency_rates import UpdateCurrencyRatesUseCase
from app.domain.portfolio.currency_forecaster import (
    CurrencyForecastPredictor,
    format_forecast,
    format_volatility_risk,
)
from app.domain.portfolio.entities import (
    CompanyFinancials,
    MarketIndicators,
    MarketSnapshot,
    RiskLevel,
    Sentiment,
    Signal,
)
from app.domain.portfolio.errors import (
    AlertNotFoundError,
    CompanyNotFoundError,
    DataRefreshError,
    InvalidTradeActionError,
    PositionNotFoundError,
    StockPriceNotFoundError,
)
from app.domain.portfolio.ports import (
    MarketDataPort,
    MarketIndicatorsPort,
    NotificationSender,
)
from app.domain.portfolio.recommendation_scorer import RecommendationScorer
from app.infrastructure.portfolio.seed_data import BASE_QUOTES, seed_store
from app.infrastructure.portfolio.simulated_price_feed import SimulatedPriceFeed
from app.infrastructure.portfolio.store import InMemoryStore

USD_TWD = 31.245
AAPL_PRICE = 175.32


# ══════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════


@pytest.fixture
def store() -> InMemoryStore:
    """A store holding the demo companies, executives and rates."""
    fresh = InMemoryStore()
    seed_store(fresh)
    return fresh


@pytest.fixture
def notifier() -> MagicMock:
    sender = MagicMock(spec=NotificationSender)
    sender.send.return_value = True
    return sender


@pytest.fixture
def steady_feed(store) -> SimulatedPriceFeed:
    """Price feed without jitter, so quotes equal the base quotes."""
    return SimulatedPriceFeed(BASE_QUOTES, store.currency_rates, jitter=0.0)


def _company_id(store: InMemoryStore, ticker: str) -> int:
    return store.companies.get_by_ticker(ticker).id


def _market(sentiment: Sentiment, volatility: float = 10.0) -> MagicMock:
    port = MagicMock(spec=MarketDataPort)
    port.snapshot.side_effect = lambda ticker: MarketSnapshot(
        ticker=ticker,
        price=200.0,
        volume=1000,
        sentiment=sentiment,
        volatility=volatility,
    )
    return port


def _indicators_port(inverted: bool, vix: float) -> MagicMock:
    port = MagicMock(spec=MarketIndicatorsPort)
    port.read.return_value = MarketIndicators(
        bond_yield=4.6,
        yield_curve_inverted=inverted,
        vix=vix,
        overall_sentiment="BEARISH",
    )
    return port


def _add_news(store: InMemoryStore, company_id: int, sentiment: Sentiment) -> None:
    store.news.create(
        title="News",
        content="Body",
        source="Wire",
        sentiment=sentiment,
        published_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        company_id=company_id,
    )


# ══════════════════════════════════════════════════════════════════════
# Portfolio valuation
# ══════════════════════════════════════════════════════════════════════


class TestGetPortfolioSummaryUseCase:
    """Tests for valuing the stored positions of a user."""

    def _use_case(self, store, feed) -> GetPortfolioSummaryUseCase:
        return GetPortfolioSummaryUseCase(
            position_repo=store.positions,
            company_repo=store.companies,
            rate_repo=store.currency_rates,
            price_feed=feed,
        )

    def test_values_position_in_base_currency(self, store, steady_feed) -> None:
        store.positions.create(
            user_id=1,
            company_id=_company_id(store, "AAPL"),
            shares=Decimal("10"),
            average_cost=Decimal("150"),
            purchase_currency="USD",
        )
        summary = self._use_case(store, steady_feed).execute(1)

        assert summary.total_value == pytest.approx(10 * AAPL_PRICE * USD_TWD)
        assert summary.total_change == pytest.approx(10 * (AAPL_PRICE - 150) * USD_TWD)
        assert len(summary.positions) == 1

    def test_other_users_positions_are_ignored(self, store, steady_feed) -> None:
        store.positions.create(
            user_id=2,
            company_id=_company_id(store, "AAPL"),
            shares=Decimal("5"),
            average_cost=Decimal("100"),
            purchase_currency="USD",
        )
        summary = self._use_case(store, steady_feed).execute(1)
        assert summary.total_value == 0.0
        assert summary.positions == ()

    def test_unknown_company_is_skipped(self, store, steady_feed) -> None:
        store.positions.create(
            user_id=1,
            company_id=999,
            shares=Decimal("5"),
            average_cost=Decimal("100"),
            purchase_currency="USD",
        )
        summary = self._use_case(store, steady_feed).execute(1)
        assert summary.positions == ()

    def test_repeated_calls_are_identical(self, store, steady_feed) -> None:
        """Without price movement two summaries are equal."""
        store.positions.create(
            user_id=1,
            company_id=_company_id(store, "FMG"),
            shares=Decimal("100"),
            average_cost=Decimal("20"),
            purchase_currency="AUD",
        )
        use_case = self._use_case(store, steady_feed)
        assert use_case.execute(1) == use_case.execute(1)


class TestProjectDividendsUseCase:
    """Tests for dividend projections over the live summary."""

    def test_projection_uses_ticker_yield(self, store, steady_feed) -> None:
        store.positions.create(
            user_id=1,
            company_id=_company_id(store, "FMG"),
            shares=Decimal("100"),
            average_cost=Decimal("20"),
            purchase_currency="AUD",
        )
        summary_use_case = GetPortfolioSummaryUseCase(
            store.positions, store.companies, store.currency_rates, steady_feed
        )
        use_case = ProjectDividendsUseCase(
            summary_use_case, {"FMG": 8.5}, today=lambda: date(2024, 1, 15)
        )
        projection = use_case.execute(1)

        value = 100 * 24.67 * 20.467
        assert projection.annual_dividend == pytest.approx(value * 0.085)
        assert projection.yield_percent == pytest.approx(8.5)
        assert projection.next_payment_date == date(2024, 2, 14)


class TestGetStockPriceUseCase:
    """Tests for live quotes."""

    def test_known_ticker(self, steady_feed) -> None:
        quote = GetStockPriceUseCase(steady_feed).execute("AAPL")
        assert quote.price == pytest.approx(AAPL_PRICE)
        assert quote.price_in_base == pytest.approx(AAPL_PRICE * USD_TWD)

    def test_unknown_ticker_raises(self, steady_feed) -> None:
        with pytest.raises(StockPriceNotFoundError):
            GetStockPriceUseCase(steady_feed).execute("NOPE")


class TestAnalyzeTradingWindowUseCase:
    """Tests for trade timing advice backed by stored rates."""

    def test_invalid_action_raises(self, store) -> None:
        use_case = AnalyzeTradingWindowUseCase(store.companies, store.currency_rates)
        with pytest.raises(InvalidTradeActionError):
            use_case.execute(TradingAnalysisQuery(ticker="AAPL", action="HOLD"))

    def test_unknown_company(self, store) -> None:
        use_case = AnalyzeTradingWindowUseCase(store.companies, store.currency_rates)
        window = use_case.execute(TradingAnalysisQuery(ticker="NOPE", action="BUY"))
        assert window.recommended is False
        assert window.reason == "Company not found"
        assert window.optimal_window == "N/A"

    def test_missing_rate_recommends_immediately(self, store) -> None:
        store.companies.create(
            name="Nestle", ticker="NESN", sector="Food", currency="CHF"
        )
        use_case = AnalyzeTradingWindowUseCase(store.companies, store.currency_rates)
        window = use_case.execute(TradingAnalysisQuery(ticker="NESN", action="SELL"))
        assert window.recommended is True
        assert window.reason == "No currency data available"
        assert window.optimal_window == "Immediate"

    def test_uses_stored_change_percent(self, store) -> None:
        """AUD moved +0.39%: calm enough for a SELL."""
        use_case = AnalyzeTradingWindowUseCase(store.companies, store.currency_rates)
        window = use_case.execute(TradingAnalysisQuery(ticker="FMG", action="SELL"))
        assert window.recommended is True
        assert window.optimal_window == "Next 24 hours"
        assert window.fx_advantage == pytest.approx(0.39)


# ══════════════════════════════════════════════════════════════════════
# Recommendations
# ══════════════════════════════════════════════════════════════════════


class TestGenerateRecommendationsUseCase:
    """Tests for the scoring pass over the catalog."""

    def _use_case(self, store, market, notifier, rng, **kwargs):
        return GenerateRecommendationsUseCase(
            company_repo=store.companies,
            news_repo=store.news,
            rate_repo=store.currency_rates,
            recommendation_repo=store.recommendations,
            market_data=market,
            notifier=notifier,
            scorer=RecommendationScorer(rng),
            **kwargs,
        )

    def test_confident_signal_is_stored_and_notified(
        self, store, notifier, scripted_random
    ) -> None:
        """AAPL with good news is a 95% BUY; the others HOLD at 70."""
        _add_news(store, _company_id(store, "AAPL"), Sentiment.POSITIVE)
        use_case = self._use_case(
            store, _market(Sentiment.POSITIVE), notifier, scripted_random(0.5)
        )
        result = use_case.execute()

        assert result.stored_count == 1
        stored = store.recommendations.list_all()
        assert len(stored) == 1
        assert stored[0].signal is Signal.BUY
        assert stored[0].confidence == 95
        assert stored[0].company_id == _company_id(store, "AAPL")
        notifier.send.assert_called_once()
        subject = notifier.send.call_args.args[0]
        assert "AAPL" in subject

    def test_hold_at_threshold_is_not_stored(
        self, store, notifier, scripted_random
    ) -> None:
        """A confidence of exactly 70 is not above the store threshold."""
        use_case = self._use_case(
            store, _market(Sentiment.NEUTRAL), notifier, scripted_random(0.5)
        )
        result = use_case.execute()
        assert [s.result.confidence for s in result.scored] == [70, 70, 70]
        assert result.stored_count == 0
        notifier.send.assert_not_called()

    def test_stored_but_not_notified_below_notify_threshold(
        self, store, notifier, scripted_random
    ) -> None:
        _add_news(store, _company_id(store, "TSLA"), Sentiment.POSITIVE)
        use_case = self._use_case(
            store,
            _market(Sentiment.POSITIVE),
            notifier,
            scripted_random(0.5),
            notify_threshold=99,
        )
        result = use_case.execute()
        assert result.stored_count == 1
        assert not any(s.notified for s in result.scored)
        notifier.send.assert_not_called()

    def test_failed_notification_does_not_abort(
        self, store, notifier, scripted_random
    ) -> None:
        notifier.send.return_value = False
        for ticker in ("AAPL", "TSLA"):
            _add_news(store, _company_id(store, ticker), Sentiment.POSITIVE)
        use_case = self._use_case(
            store, _market(Sentiment.POSITIVE), notifier, scripted_random(0.5)
        )
        result = use_case.execute()
        assert result.stored_count == 2
        assert notifier.send.call_count == 2
        assert all(not s.notified for s in result.scored)

    def test_fx_impact_read_from_rate(self, store, notifier, scripted_random) -> None:
        """JPY fell 1.42%: the FX factor counts against a JPY listing."""
        jpy = store.companies.create(
            name="Toyota", ticker="7203", sector="Automotive", currency="JPY"
        )
        use_case = self._use_case(
            store, _market(Sentiment.NEUTRAL), notifier, scripted_random(0.5)
        )
        result = use_case.execute()
        scored = next(s for s in result.scored if s.company.id == jpy.id)
        assert scored.result.score == -15
        assert scored.result.fx_advantage == pytest.approx(-1.42)


class TestListRecommendationsUseCase:
    """Tests for listing stored recommendations."""

    def test_enriched_with_company(self, store) -> None:
        aapl = _company_id(store, "AAPL")
        store.recommendations.create(
            company_id=aapl, signal=Signal.BUY, confidence=90, reasoning="Up."
        )
        store.recommendations.create(
            company_id=999, signal=Signal.SELL, confidence=80, reasoning="Down."
        )
        views = ListRecommendationsUseCase(
            store.recommendations, store.companies
        ).execute()
        assert views[0].company.ticker == "AAPL"
        assert views[1].company is None


# ══════════════════════════════════════════════════════════════════════
# Currency rates
# ══════════════════════════════════════════════════════════════════════


class TestForecastCurrencyRatesUseCase:
    """Tests for writing forecasts back onto rate records."""

    def test_forecast_strings_stored_on_rates(self, store, scripted_random) -> None:
        use_case = ForecastCurrencyRatesUseCase(
            store.currency_rates, CurrencyForecastPredictor(scripted_random(0.5))
        )
        result = use_case.execute()

        assert len(result.forecasts) == 3
        for forecast in result.forecasts:
            from_currency, to_currency = forecast.pair.split("/")
            record = store.currency_rates.get(from_currency, to_currency)
            assert record.forecast_24h == format_forecast(forecast)
            assert record.volatility_risk == format_volatility_risk(forecast)

    def test_usd_forecast_text(self, store, scripted_random) -> None:
        """USD rose 0.12: bullish, twice the change ahead, medium risk."""
        before = store.currency_rates.get("USD", "TWD")
        ForecastCurrencyRatesUseCase(
            store.currency_rates, CurrencyForecastPredictor(scripted_random(0.5))
        ).execute()
        after = store.currency_rates.get("USD", "TWD")

        assert after.forecast_24h == "BULLISH (+0.24)"
        assert after.volatility_risk == "MEDIUM (82%)"
        assert after.id == before.id
        assert after.rate == before.rate
        assert after.change_percent == before.change_percent


class TestUpdateCurrencyRatesUseCase:
    """Tests for the simulated rate tick."""

    def test_moves_rate_within_band(self, store, scripted_random) -> None:
        before = store.currency_rates.get("USD", "TWD")
        UpdateCurrencyRatesUseCase(store.currency_rates, scripted_random(0.75)).execute()
        after = store.currency_rates.get("USD", "TWD")

        assert float(after.rate) == pytest.approx(USD_TWD * 1.00025)
        assert float(after.change_percent) == pytest.approx(0.025)
        assert float(after.change) == pytest.approx(USD_TWD * 0.00025)
        assert after.id == before.id
        assert after.forecast_24h == before.forecast_24h

    def test_rates_stored_as_decimal(self, store, scripted_random) -> None:
        updated = UpdateCurrencyRatesUseCase(
            store.currency_rates, scripted_random(0.2)
        ).execute()
        assert len(updated) == 3
        assert all(isinstance(r.rate, Decimal) for r in updated)


# ══════════════════════════════════════════════════════════════════════
# Market monitoring & alerts
# ══════════════════════════════════════════════════════════════════════


class TestMonitorMarketConditionsUseCase:
    """Tests for persisting market alerts and crash notifications."""

    def test_crash_and_volatility_alerts(self, store, notifier) -> None:
        use_case = MonitorMarketConditionsUseCase(
            _indicators_port(True, 32.0), store.alerts, notifier
        )
        result = use_case.execute()

        assert len(result.alerts) == 2
        assert len(store.alerts.list_active()) == 2
        notifier.send.assert_called_once()
        assert notifier.send.call_args.args[0] == "MARKET CRASH WARNING"

    def test_volatility_only_does_not_notify(self, store, notifier) -> None:
        use_case = MonitorMarketConditionsUseCase(
            _indicators_port(False, 31.0), store.alerts, notifier
        )
        result = use_case.execute()
        assert [a.severity for a in result.alerts] == [RiskLevel.MEDIUM]
        notifier.send.assert_not_called()

    def test_calm_market(self, store, notifier) -> None:
        use_case = MonitorMarketConditionsUseCase(
            _indicators_port(False, 18.0), store.alerts, notifier
        )
        assert use_case.execute().alerts == []
        assert store.alerts.list_active() == []


class TestAlertUseCases:
    """Tests for hand-raised alerts."""

    def _command(self, severity: RiskLevel) -> CreateAlertCommand:
        return CreateAlertCommand(
            type="SECTOR",
            severity=severity,
            title="Chip shortage",
            description="Supply constrained",
        )

    def test_high_severity_is_notified(self, store, notifier) -> None:
        alert = CreateAlertUseCase(store.alerts, notifier).execute(
            self._command(RiskLevel.HIGH)
        )
        notifier.send.assert_called_once_with("Chip shortage", "Supply constrained")
        assert alert.is_active is True

    def test_low_severity_is_not_notified(self, store, notifier) -> None:
        CreateAlertUseCase(store.alerts, notifier).execute(self._command(RiskLevel.LOW))
        notifier.send.assert_not_called()

    def test_deactivate_removes_from_active_list(self, store, notifier) -> None:
        alert = CreateAlertUseCase(store.alerts, notifier).execute(
            self._command(RiskLevel.MEDIUM)
        )
        DeactivateAlertUseCase(store.alerts).execute(alert.id)
        assert ListActiveAlertsUseCase(store.alerts).execute() == []

    def test_deactivate_unknown_alert_raises(self, store) -> None:
        with pytest.raises(AlertNotFoundError):
            DeactivateAlertUseCase(store.alerts).execute(12345)


# ══════════════════════════════════════════════════════════════════════
# Data refresh
# ══════════════════════════════════════════════════════════════════════


class TestRefreshDataUseCase:
    """Tests for the sequential refresh batch."""

    def test_steps_run_in_order(self) -> None:
        parent = MagicMock()
        use_case = RefreshDataUseCase(
            update_rates=parent.update,
            generate_recommendations=parent.generate,
            monitor_market=parent.monitor,
            forecast_rates=parent.forecast,
        )
        result = use_case.execute()

        assert [c[0] for c in parent.mock_calls] == [
            "update.execute",
            "generate.execute",
            "monitor.execute",
            "forecast.execute",
        ]
        assert result.steps == [
            "update_currency_rates",
            "generate_recommendations",
            "monitor_market_conditions",
            "forecast_currency_rates",
        ]
        assert result.timestamp.tzinfo is not None

    def test_failure_aborts_remaining_steps(
        self, store, notifier, scripted_random
    ) -> None:
        """A failing monitor stops the batch; earlier writes stay."""
        broken = MagicMock(spec=MarketIndicatorsPort)
        broken.read.side_effect = RuntimeError("feed down")
        rng = scripted_random(0.75)
        use_case = RefreshDataUseCase(
            update_rates=UpdateCurrencyRatesUseCase(store.currency_rates, rng),
            generate_recommendations=GenerateRecommendationsUseCase(
                store.companies,
                store.news,
                store.currency_rates,
                store.recommendations,
                _market(Sentiment.NEUTRAL),
                notifier,
                RecommendationScorer(rng),
            ),
            monitor_market=MonitorMarketConditionsUseCase(broken, store.alerts, notifier),
            forecast_rates=ForecastCurrencyRatesUseCase(
                store.currency_rates, CurrencyForecastPredictor(rng)
            ),
        )

        with pytest.raises(DataRefreshError) as excinfo:
            use_case.execute()

        assert excinfo.value.step == "monitor_market_conditions"
        assert excinfo.value.reason == "RuntimeError"
        usd = store.currency_rates.get("USD", "TWD")
        assert float(usd.rate) != pytest.approx(USD_TWD)
        # Forecast never ran, so the seeded forecast text is untouched.
        assert usd.forecast_24h == "Bullish (+0.8%)"


# ══════════════════════════════════════════════════════════════════════
# Catalog management
# ══════════════════════════════════════════════════════════════════════


class TestPositionUseCases:
    """Tests for opening, updating and closing positions."""

    def _create(self, store, company_id: int):
        return CreatePositionUseCase(store.positions, store.companies).execute(
            CreatePositionCommand(
                user_id=1,
                company_id=company_id,
                shares=Decimal("10"),
                average_cost=Decimal("150.50"),
                purchase_currency="USD",
            )
        )

    def test_create_for_known_company(self, store) -> None:
        position = self._create(store, _company_id(store, "AAPL"))
        assert store.positions.get(position.id) == position
        assert position.average_cost == Decimal("150.50")

    def test_create_for_unknown_company_raises(self, store) -> None:
        with pytest.raises(CompanyNotFoundError):
            self._create(store, 999)

    def test_update_changes_shares_and_cost(self, store) -> None:
        position = self._create(store, _company_id(store, "AAPL"))
        updated = UpdatePositionUseCase(store.positions).execute(
            UpdatePositionCommand(
                position_id=position.id,
                shares=Decimal("12"),
                average_cost=Decimal("140"),
            )
        )
        assert updated.shares == Decimal("12")
        assert updated.created_at == position.created_at

    def test_update_unknown_raises(self, store) -> None:
        with pytest.raises(PositionNotFoundError):
            UpdatePositionUseCase(store.positions).execute(
                UpdatePositionCommand(
                    position_id=999, shares=Decimal("1"), average_cost=Decimal("1")
                )
            )

    def test_delete_then_delete_again(self, store) -> None:
        position = self._create(store, _company_id(store, "AAPL"))
        use_case = DeletePositionUseCase(store.positions)
        use_case.execute(position.id)
        assert store.positions.get(position.id) is None
        with pytest.raises(PositionNotFoundError):
            use_case.execute(position.id)


class TestCompanyFinancials:
    """Tests for replacing a company's financials."""

    def test_update_unknown_company_raises(self, store) -> None:
        with pytest.raises(CompanyNotFoundError):
            UpdateCompanyFinancialsUseCase(store.companies).execute(
                UpdateFinancialsCommand(
                    company_id=999, financials=CompanyFinancials(annual_revenue=1.0)
                )
            )

    def test_update_replaces_financials(self, store) -> None:
        company = UpdateCompanyFinancialsUseCase(store.companies).execute(
            UpdateFinancialsCommand(
                company_id=_company_id(store, "TSLA"),
                financials=CompanyFinancials(annual_revenue=100000.0),
            )
        )
        assert company.financials.annual_revenue == 100000.0
        assert company.financials.cash_reserves is None


class TestNewsUseCases:
    """Tests for recording and listing news."""

    def test_naive_timestamp_is_taken_as_utc(self, store) -> None:
        article = CreateNewsUseCase(store.news).execute(
            CreateNewsCommand(
                title="Earnings beat",
                content="Strong quarter",
                source="Wire",
                sentiment=Sentiment.POSITIVE,
                published_at=datetime(2024, 3, 1, 9, 30),
            )
        )
        assert article.published_at.tzinfo is timezone.utc

    def test_recent_news_newest_first_with_company(self, store) -> None:
        aapl = _company_id(store, "AAPL")
        for day in (1, 3, 2):
            store.news.create(
                title=f"Day {day}",
                content="Body",
                source="Wire",
                sentiment=Sentiment.NEUTRAL,
                published_at=datetime(2024, 3, day, tzinfo=timezone.utc),
                company_id=aapl if day == 3 else None,
            )
        views = ListRecentNewsUseCase(store.news, store.companies).execute(limit=2)
        assert [v.article.title for v in views] == ["Day 3", "Day 2"]
        assert views[0].company.ticker == "AAPL"
        assert views[1].company is None


class TestCEOProfiles:
    """Tests for listing executives."""

    def test_profiles_enriched_with_company(self, store) -> None:
        views = ListCEOProfilesUseCase(store.ceo_profiles, store.companies).execute()
        assert {v.company.ticker for v in views} == {"AAPL", "TSLA", "FMG"}
        assert any(v.profile.name == "Tim Cook" for v in views)


class TestSendTestNotificationUseCase:
    """Tests for the test notification."""

    def test_defaults(self, notifier) -> None:
        assert SendTestNotificationUseCase(notifier).execute() is True
        notifier.send.assert_called_once_with("Test Alert", "This is a test notification")

    def test_custom_subject(self, notifier) -> None:
        SendTestNotificationUseCase(notifier).execute("Ping", "Hello")
        notifier.send.assert_called_once_with("Ping", "Hello")
