"""
Dependency injection for the portfolio bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the portfolio context.

All state lives in a ``PortfolioContainer`` built once per application
instance and kept on ``app.state.container``.
"""

import logging
import random
from dataclasses import dataclass

from fastapi import Request

from app.application.portfolio.analyze_trading_window import (
    AnalyzeTradingWindowUseCase,
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
from app.application.portfolio.manage_ceo_profiles import (
    CreateCEOProfileUseCase,
    ListCEOProfilesUseCase,
)
from app.application.portfolio.manage_companies import (
    CreateCompanyUseCase,
    ListCompaniesUseCase,
    UpdateCompanyFinancialsUseCase,
)
from app.application.portfolio.manage_news import (
    CreateNewsUseCase,
    ListRecentNewsUseCase,
)
from app.application.portfolio.manage_positions import (
    CreatePositionUseCase,
    DeletePositionUseCase,
    ListPositionsUseCase,
    UpdatePositionUseCase,
)
from app.application.portfolio.monitor_market import MonitorMarketConditionsUseCase
from app.application.portfolio.project_dividends import ProjectDividendsUseCase
from app.application.portfolio.refresh_data import RefreshDataUseCase
from app.application.portfolio.send_test_notification import (
    SendTestNotificationUseCase,
)
from app.application.portfolio.update_currency_rates import (
    ListCurrencyRatesUseCase,
    UpdateCurrencyRatesUseCase,
)
from app.core.config import Settings
from app.domain.portfolio.currency_forecaster import CurrencyForecastPredictor
from app.domain.portfolio.ports import RandomSource
from app.domain.portfolio.recommendation_scorer import RecommendationScorer
from app.infrastructure.portfolio.seed_data import (
    BASE_QUOTES,
    DIVIDEND_YIELDS,
    seed_store,
)
from app.infrastructure.portfolio.simulated_market_data import SimulatedMarketData
from app.infrastructure.portfolio.simulated_market_indicators import (
    SimulatedMarketIndicators,
)
from app.infrastructure.portfolio.simulated_price_feed import SimulatedPriceFeed
from app.infrastructure.portfolio.store import InMemoryStore
from app.infrastructure.portfolio.webhook_notification_sender import (
    WebhookNotificationSender,
)

logger = logging.getLogger(__name__)


@dataclass
class PortfolioContainer:
    """Everything the portfolio routes need, scoped to one application."""

    settings: Settings
    store: InMemoryStore
    rng: RandomSource
    price_feed: SimulatedPriceFeed
    market_data: SimulatedMarketData
    indicators: SimulatedMarketIndicators
    notifier: WebhookNotificationSender
    scorer: RecommendationScorer
    predictor: CurrencyForecastPredictor


def build_container(settings: Settings) -> PortfolioContainer:
    """Create a fresh store and the adapters around it.

    Args:
        settings: Application settings.

    Returns:
        A container whose simulators share one random source, seeded from
        ``settings.random_seed`` when it is set.
    """
    rng = random.Random(settings.random_seed)
    store = InMemoryStore()
    if settings.seed_demo_data:
        seed_store(store, base_currency=settings.base_currency)

    container = PortfolioContainer(
        settings=settings,
        store=store,
        rng=rng,
        price_feed=SimulatedPriceFeed(
            BASE_QUOTES,
            store.currency_rates,
            base_currency=settings.base_currency,
            rng=rng,
            jitter=settings.price_jitter,
        ),
        market_data=SimulatedMarketData(rng),
        indicators=SimulatedMarketIndicators(rng),
        notifier=WebhookNotificationSender(
            webhook_urls=settings.notification_webhook_urls,
            timeout=settings.notification_timeout_seconds,
        ),
        scorer=RecommendationScorer(rng),
        predictor=CurrencyForecastPredictor(rng),
    )
    logger.info(
        "Portfolio container ready: %d companies, %d rates, base %s",
        len(store.companies.list_all()),
        len(store.currency_rates.list_all()),
        settings.base_currency,
    )
    return container


def get_container(request: Request) -> PortfolioContainer:
    """Return the container of the application serving this request."""
    return request.app.state.container


# ── Companies ────────────────────────────────────────────────────────


def get_list_companies_use_case(request: Request) -> ListCompaniesUseCase:
    return ListCompaniesUseCase(get_container(request).store.companies)


def get_create_company_use_case(request: Request) -> CreateCompanyUseCase:
    return CreateCompanyUseCase(get_container(request).store.companies)


def get_update_financials_use_case(
    request: Request,
) -> UpdateCompanyFinancialsUseCase:
    return UpdateCompanyFinancialsUseCase(get_container(request).store.companies)


# ── Portfolio ────────────────────────────────────────────────────────


def get_portfolio_summary_use_case(request: Request) -> GetPortfolioSummaryUseCase:
    """Build GetPortfolioSummaryUseCase with its infrastructure dependencies."""
    container = get_container(request)
    return GetPortfolioSummaryUseCase(
        position_repo=container.store.positions,
        company_repo=container.store.companies,
        rate_repo=container.store.currency_rates,
        price_feed=container.price_feed,
        base_currency=container.settings.base_currency,
    )


def get_project_dividends_use_case(request: Request) -> ProjectDividendsUseCase:
    return ProjectDividendsUseCase(
        summary_use_case=get_portfolio_summary_use_case(request),
        dividend_yields=DIVIDEND_YIELDS,
    )


def get_list_positions_use_case(request: Request) -> ListPositionsUseCase:
    return ListPositionsUseCase(get_container(request).store.positions)


def get_create_position_use_case(request: Request) -> CreatePositionUseCase:
    store = get_container(request).store
    return CreatePositionUseCase(store.positions, store.companies)


def get_update_position_use_case(request: Request) -> UpdatePositionUseCase:
    return UpdatePositionUseCase(get_container(request).store.positions)


def get_delete_position_use_case(request: Request) -> DeletePositionUseCase:
    return DeletePositionUseCase(get_container(request).store.positions)


# ── Stocks ───────────────────────────────────────────────────────────


def get_stock_price_use_case(request: Request) -> GetStockPriceUseCase:
    return GetStockPriceUseCase(get_container(request).price_feed)


def get_trading_window_use_case(request: Request) -> AnalyzeTradingWindowUseCase:
    container = get_container(request)
    return AnalyzeTradingWindowUseCase(
        company_repo=container.store.companies,
        rate_repo=container.store.currency_rates,
        base_currency=container.settings.base_currency,
    )


# ── AI ───────────────────────────────────────────────────────────────


def get_list_recommendations_use_case(request: Request) -> ListRecommendationsUseCase:
    store = get_container(request).store
    return ListRecommendationsUseCase(store.recommendations, store.companies)


def build_generate_recommendations_use_case(
    container: PortfolioContainer,
) -> GenerateRecommendationsUseCase:
    """Build GenerateRecommendationsUseCase with its infrastructure dependencies."""
    store = container.store
    return GenerateRecommendationsUseCase(
        company_repo=store.companies,
        news_repo=store.news,
        rate_repo=store.currency_rates,
        recommendation_repo=store.recommendations,
        market_data=container.market_data,
        notifier=container.notifier,
        scorer=container.scorer,
        base_currency=container.settings.base_currency,
        store_threshold=container.settings.recommendation_store_threshold,
        notify_threshold=container.settings.recommendation_notify_threshold,
    )


def build_forecast_rates_use_case(
    container: PortfolioContainer,
) -> ForecastCurrencyRatesUseCase:
    return ForecastCurrencyRatesUseCase(
        container.store.currency_rates, container.predictor
    )


# ── Currency ─────────────────────────────────────────────────────────


def get_list_rates_use_case(request: Request) -> ListCurrencyRatesUseCase:
    return ListCurrencyRatesUseCase(get_container(request).store.currency_rates)


def build_update_rates_use_case(
    container: PortfolioContainer,
) -> UpdateCurrencyRatesUseCase:
    return UpdateCurrencyRatesUseCase(container.store.currency_rates, container.rng)


# ── Executives ───────────────────────────────────────────────────────


def get_list_ceo_profiles_use_case(request: Request) -> ListCEOProfilesUseCase:
    store = get_container(request).store
    return ListCEOProfilesUseCase(store.ceo_profiles, store.companies)


def get_create_ceo_profile_use_case(request: Request) -> CreateCEOProfileUseCase:
    return CreateCEOProfileUseCase(get_container(request).store.ceo_profiles)


# ── Market alerts ────────────────────────────────────────────────────


def get_list_alerts_use_case(request: Request) -> ListActiveAlertsUseCase:
    return ListActiveAlertsUseCase(get_container(request).store.alerts)


def get_create_alert_use_case(request: Request) -> CreateAlertUseCase:
    container = get_container(request)
    return CreateAlertUseCase(container.store.alerts, container.notifier)


def get_deactivate_alert_use_case(request: Request) -> DeactivateAlertUseCase:
    return DeactivateAlertUseCase(get_container(request).store.alerts)


def build_monitor_market_use_case(
    container: PortfolioContainer,
) -> MonitorMarketConditionsUseCase:
    return MonitorMarketConditionsUseCase(
        indicators_port=container.indicators,
        alert_repo=container.store.alerts,
        notifier=container.notifier,
    )


# ── News ─────────────────────────────────────────────────────────────


def get_list_news_use_case(request: Request) -> ListRecentNewsUseCase:
    store = get_container(request).store
    return ListRecentNewsUseCase(store.news, store.companies)


def get_create_news_use_case(request: Request) -> CreateNewsUseCase:
    return CreateNewsUseCase(get_container(request).store.news)


# ── Notifications & refresh ──────────────────────────────────────────


def get_send_test_notification_use_case(
    request: Request,
) -> SendTestNotificationUseCase:
    return SendTestNotificationUseCase(get_container(request).notifier)


def build_refresh_data_use_case(container: PortfolioContainer) -> RefreshDataUseCase:
    """Build RefreshDataUseCase from the four batch use cases it sequences."""
    return RefreshDataUseCase(
        update_rates=build_update_rates_use_case(container),
        generate_recommendations=build_generate_recommendations_use_case(container),
        monitor_market=build_monitor_market_use_case(container),
        forecast_rates=build_forecast_rates_use_case(container),
    )


def get_refresh_data_use_case(request: Request) -> RefreshDataUseCase:
    return build_refresh_data_use_case(get_container(request))


# ── Request-scoped wrappers around the batch builders ────────────────


def get_generate_recommendations_use_case(
    request: Request,
) -> GenerateRecommendationsUseCase:
    return build_generate_recommendations_use_case(get_container(request))


def get_forecast_rates_use_case(request: Request) -> ForecastCurrencyRatesUseCase:
    return build_forecast_rates_use_case(get_container(request))


def get_update_rates_use_case(request: Request) -> UpdateCurrencyRatesUseCase:
    return build_update_rates_use_case(get_container(request))


def get_monitor_market_use_case(request: Request) -> MonitorMarketConditionsUseCase:
    return build_monitor_market_use_case(get_container(request))
