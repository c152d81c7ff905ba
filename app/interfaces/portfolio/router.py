"""
FastAPI router for the portfolio bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.application.portfolio.analyze_trading_window import (
    AnalyzeTradingWindowUseCase,
)
from app.application.portfolio.dtos import (
    CEOProfileView,
    CreateAlertCommand,
    CreateCEOProfileCommand,
    CreateCompanyCommand,
    CreateNewsCommand,
    CreatePositionCommand,
    NewsView,
    RecommendationView,
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
from app.domain.portfolio.entities import (
    CEOProfile,
    Company,
    CompanyFinancials,
    CurrencyRate,
    MarketAlert,
    NewsArticle,
    PortfolioPosition,
    PositionDetail,
    Recommendation,
)
from app.interfaces.portfolio.dependencies import (
    get_container,
    get_create_alert_use_case,
    get_create_ceo_profile_use_case,
    get_create_company_use_case,
    get_create_news_use_case,
    get_create_position_use_case,
    get_deactivate_alert_use_case,
    get_delete_position_use_case,
    get_forecast_rates_use_case,
    get_generate_recommendations_use_case,
    get_list_alerts_use_case,
    get_list_ceo_profiles_use_case,
    get_list_companies_use_case,
    get_list_news_use_case,
    get_list_positions_use_case,
    get_list_rates_use_case,
    get_list_recommendations_use_case,
    get_monitor_market_use_case,
    get_portfolio_summary_use_case,
    get_project_dividends_use_case,
    get_refresh_data_use_case,
    get_send_test_notification_use_case,
    get_stock_price_use_case,
    get_trading_window_use_case,
    get_update_financials_use_case,
    get_update_position_use_case,
    get_update_rates_use_case,
)
from app.interfaces.portfolio.schemas import (
    ActionResponse,
    CEOProfileResponse,
    CompanyFinancialsSchema,
    CompanyResponse,
    CreateAlertRequest,
    CreateCEOProfileRequest,
    CreateCompanyRequest,
    CreateNewsRequest,
    CreatePositionRequest,
    CurrencyForecastResponse,
    CurrencyRateResponse,
    DeleteResponse,
    DividendProjectionResponse,
    ErrorResponse,
    MarketAlertResponse,
    NewsArticleResponse,
    NotificationTestRequest,
    PortfolioSummaryResponse,
    PositionDetailResponse,
    PositionResponse,
    RecommendationResponse,
    RefreshResponse,
    StockPriceResponse,
    TradingWindowResponse,
    UpdateFinancialsRequest,
    UpdatePositionRequest,
)
from app.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(tags=["portfolio"])


# ── Entity → schema mapping ──────────────────────────────────────────


def _money_text(value: Optional[float]) -> Optional[str]:
    return None if value is None else f"{value:.2f}"


def _financials_schema(
    financials: Optional[CompanyFinancials],
) -> Optional[CompanyFinancialsSchema]:
    if financials is None:
        return None
    return CompanyFinancialsSchema(
        cash_reserves=financials.cash_reserves,
        annual_revenue=financials.annual_revenue,
        annual_profit=financials.annual_profit,
        product_annual_revenue=financials.product_annual_revenue,
        annual_gross_profit=financials.annual_gross_profit,
    )


def _company_response(company: Optional[Company]) -> Optional[CompanyResponse]:
    if company is None:
        return None
    return CompanyResponse(
        id=company.id,
        name=company.name,
        ticker=company.ticker,
        sector=company.sector,
        currency=company.currency,
        financials=_financials_schema(company.financials),
        created_at=company.created_at,
    )


def _position_response(position: PortfolioPosition) -> PositionResponse:
    return PositionResponse(
        id=position.id,
        user_id=position.user_id,
        company_id=position.company_id,
        shares=position.shares,
        average_cost=position.average_cost,
        purchase_currency=position.purchase_currency,
        created_at=position.created_at,
    )


def _position_detail_response(detail: PositionDetail) -> PositionDetailResponse:
    return PositionDetailResponse(
        position_id=detail.position_id,
        company=_company_response(detail.company),
        shares=detail.shares,
        average_cost=detail.average_cost,
        current_price=detail.current_price,
        current_value=detail.current_value,
        total_return=detail.total_return,
        total_return_percent=detail.total_return_percent,
        fx_impact=detail.fx_impact,
    )


def _recommendation_response(
    recommendation: Recommendation, company: Optional[Company] = None
) -> RecommendationResponse:
    return RecommendationResponse(
        id=recommendation.id,
        company_id=recommendation.company_id,
        signal=recommendation.signal.value,
        confidence=str(recommendation.confidence),
        target_price=_money_text(recommendation.target_price),
        reasoning=recommendation.reasoning,
        fx_advantage=_money_text(recommendation.fx_advantage),
        optimal_timing=recommendation.optimal_timing,
        created_at=recommendation.created_at,
        company=_company_response(company),
    )


def _rate_response(rate: CurrencyRate) -> CurrencyRateResponse:
    return CurrencyRateResponse(
        id=rate.id,
        from_currency=rate.from_currency,
        to_currency=rate.to_currency,
        rate=rate.rate,
        change=rate.change,
        change_percent=rate.change_percent,
        forecast_24h=rate.forecast_24h,
        volatility_risk=rate.volatility_risk,
        updated_at=rate.updated_at,
    )


def _ceo_profile_response(
    profile: CEOProfile, company: Optional[Company] = None
) -> CEOProfileResponse:
    return CEOProfileResponse(
        id=profile.id,
        company_id=profile.company_id,
        name=profile.name,
        title=profile.title,
        tenure=profile.tenure,
        religion=profile.religion,
        strategy=profile.strategy,
        leadership=profile.leadership,
        photo_url=profile.photo_url,
        created_at=profile.created_at,
        company=_company_response(company),
    )


def _alert_response(alert: MarketAlert) -> MarketAlertResponse:
    return MarketAlertResponse(
        id=alert.id,
        type=alert.type,
        severity=alert.severity.value,
        title=alert.title,
        description=alert.description,
        is_active=alert.is_active,
        created_at=alert.created_at,
    )


def _news_response(
    article: NewsArticle, company: Optional[Company] = None
) -> NewsArticleResponse:
    return NewsArticleResponse(
        id=article.id,
        title=article.title,
        content=article.content,
        source=article.source,
        sentiment=article.sentiment.value,
        company_id=article.company_id,
        published_at=article.published_at,
        created_at=article.created_at,
        company=_company_response(company),
    )


def _financials_entity(
    schema: Optional[CompanyFinancialsSchema],
) -> Optional[CompanyFinancials]:
    if schema is None:
        return None
    return CompanyFinancials(**schema.model_dump())


# ── Companies ────────────────────────────────────────────────────────


@router.get(
    "/companies",
    response_model=list[CompanyResponse],
    summary="List companies",
    description="Return every company on the watchlist.",
)
def list_companies(
    use_case: ListCompaniesUseCase = Depends(get_list_companies_use_case),
) -> list[CompanyResponse]:
    return [_company_response(c) for c in use_case.execute()]


@router.post(
    "/companies",
    response_model=CompanyResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Add a company",
)
def create_company(
    body: CreateCompanyRequest,
    use_case: CreateCompanyUseCase = Depends(get_create_company_use_case),
) -> CompanyResponse:
    """Add a company to the watchlist."""
    command = CreateCompanyCommand(
        name=body.name,
        ticker=body.ticker,
        sector=body.sector,
        currency=body.currency,
        financials=_financials_entity(body.financials),
    )
    return _company_response(use_case.execute(command))


@router.put(
    "/companies/{company_id}/financials",
    response_model=CompanyResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Replace a company's financials",
)
def update_company_financials(
    company_id: int,
    body: UpdateFinancialsRequest,
    use_case: UpdateCompanyFinancialsUseCase = Depends(get_update_financials_use_case),
) -> CompanyResponse:
    command = UpdateFinancialsCommand(
        company_id=company_id,
        financials=_financials_entity(body.financials),
    )
    return _company_response(use_case.execute(command))


# ── Portfolio ────────────────────────────────────────────────────────


@router.get(
    "/portfolio/summary",
    response_model=PortfolioSummaryResponse,
    summary="Portfolio valuation",
    description=(
        "Value every position of the demo user at live prices and report "
        "totals, return and currency impact in the base currency."
    ),
)
def get_portfolio_summary(
    request: Request,
    use_case: GetPortfolioSummaryUseCase = Depends(get_portfolio_summary_use_case),
) -> PortfolioSummaryResponse:
    """Return the valued portfolio of the default user."""
    user_id = get_container(request).settings.default_user_id
    summary = use_case.execute(user_id)
    return PortfolioSummaryResponse(
        total_value=summary.total_value,
        total_change=summary.total_change,
        change_percent=summary.change_percent,
        fx_impact=summary.fx_impact,
        positions=[_position_detail_response(p) for p in summary.positions],
    )


@router.get(
    "/portfolio/positions",
    response_model=list[PositionResponse],
    summary="List positions",
)
def list_positions(
    request: Request,
    use_case: ListPositionsUseCase = Depends(get_list_positions_use_case),
) -> list[PositionResponse]:
    user_id = get_container(request).settings.default_user_id
    return [_position_response(p) for p in use_case.execute(user_id)]


@router.post(
    "/portfolio/positions",
    response_model=PositionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Open a position",
)
def create_position(
    request: Request,
    body: CreatePositionRequest,
    use_case: CreatePositionUseCase = Depends(get_create_position_use_case),
) -> PositionResponse:
    """Open a position for the default user."""
    command = CreatePositionCommand(
        user_id=get_container(request).settings.default_user_id,
        company_id=body.company_id,
        shares=body.shares,
        average_cost=body.average_cost,
        purchase_currency=body.purchase_currency,
    )
    return _position_response(use_case.execute(command))


@router.put(
    "/portfolio/positions/{position_id}",
    response_model=PositionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a position",
)
def update_position(
    position_id: int,
    body: UpdatePositionRequest,
    use_case: UpdatePositionUseCase = Depends(get_update_position_use_case),
) -> PositionResponse:
    command = UpdatePositionCommand(
        position_id=position_id,
        shares=body.shares,
        average_cost=body.average_cost,
    )
    return _position_response(use_case.execute(command))


@router.delete(
    "/portfolio/positions/{position_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Close a position",
)
def delete_position(
    position_id: int,
    use_case: DeletePositionUseCase = Depends(get_delete_position_use_case),
) -> DeleteResponse:
    use_case.execute(position_id)
    return DeleteResponse(success=True)


@router.get(
    "/portfolio/dividends",
    response_model=DividendProjectionResponse,
    summary="Dividend projection",
    description="Project annual and next quarterly dividend income.",
)
def get_dividend_projection(
    request: Request,
    use_case: ProjectDividendsUseCase = Depends(get_project_dividends_use_case),
) -> DividendProjectionResponse:
    projection = use_case.execute(get_container(request).settings.default_user_id)
    return DividendProjectionResponse(
        annual_dividend=projection.annual_dividend,
        yield_percent=projection.yield_percent,
        next_payment=projection.next_payment,
        next_payment_date=projection.next_payment_date,
    )


# ── Stocks ───────────────────────────────────────────────────────────


@router.get(
    "/stocks/{ticker}/price",
    response_model=StockPriceResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Live stock price",
)
def get_stock_price(
    ticker: str,
    use_case: GetStockPriceUseCase = Depends(get_stock_price_use_case),
) -> StockPriceResponse:
    """Return a jittered quote with its base-currency conversion."""
    quote = use_case.execute(ticker)
    return StockPriceResponse(
        ticker=quote.ticker,
        price=quote.price,
        change=quote.change,
        change_percent=quote.change_percent,
        currency=quote.currency,
        price_in_base=quote.price_in_base,
    )


@router.get(
    "/stocks/{ticker}/trading-analysis",
    response_model=TradingWindowResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Trading window analysis",
    description="Advise whether now is a good time to BUY or SELL given FX moves.",
)
def get_trading_analysis(
    ticker: str,
    action: str = Query(default=""),
    use_case: AnalyzeTradingWindowUseCase = Depends(get_trading_window_use_case),
) -> TradingWindowResponse:
    window = use_case.execute(TradingAnalysisQuery(ticker=ticker, action=action))
    return TradingWindowResponse(
        recommended=window.recommended,
        reason=window.reason,
        optimal_window=window.optimal_window,
        fx_advantage=window.fx_advantage,
    )


# ── AI ───────────────────────────────────────────────────────────────


@router.get(
    "/ai/recommendations",
    response_model=list[RecommendationResponse],
    summary="Stored recommendations",
)
def list_recommendations(
    use_case: ListRecommendationsUseCase = Depends(get_list_recommendations_use_case),
) -> list[RecommendationResponse]:
    views: list[RecommendationView] = use_case.execute()
    return [_recommendation_response(v.recommendation, v.company) for v in views]


@router.post(
    "/ai/generate-recommendations",
    response_model=ActionResponse,
    responses={429: {"model": ErrorResponse}},
    summary="Score every company",
    description=(
        "Run the recommendation scorer over the watchlist, store confident "
        "results and notify on very confident ones."
    ),
)
@limiter.limit(HEAVY_RATE_LIMIT)
def generate_recommendations(
    request: Request,
    use_case: GenerateRecommendationsUseCase = Depends(
        get_generate_recommendations_use_case
    ),
) -> ActionResponse:
    use_case.execute()
    return ActionResponse(
        success=True, message="Recommendations generated successfully"
    )


@router.get(
    "/ai/currency-forecast",
    response_model=list[CurrencyForecastResponse],
    summary="24h currency forecasts",
)
def get_currency_forecast(
    use_case: ForecastCurrencyRatesUseCase = Depends(get_forecast_rates_use_case),
) -> list[CurrencyForecastResponse]:
    """Forecast every stored rate and record the result on it."""
    result = use_case.execute()
    return [
        CurrencyForecastResponse(
            pair=f.pair,
            current_rate=f.current_rate,
            predicted_24h=f.predicted_24h,
            confidence=f.confidence,
            trend=f.trend.value,
            volatility_risk=f.volatility_risk.value,
        )
        for f in result.forecasts
    ]


# ── Currency ─────────────────────────────────────────────────────────


@router.get(
    "/currency/rates",
    response_model=list[CurrencyRateResponse],
    summary="Currency rates",
)
def list_currency_rates(
    use_case: ListCurrencyRatesUseCase = Depends(get_list_rates_use_case),
) -> list[CurrencyRateResponse]:
    return [_rate_response(r) for r in use_case.execute()]


@router.post(
    "/currency/update-rates",
    response_model=ActionResponse,
    summary="Move every rate",
)
def update_currency_rates(
    use_case: UpdateCurrencyRatesUseCase = Depends(get_update_rates_use_case),
) -> ActionResponse:
    use_case.execute()
    return ActionResponse(success=True, message="Currency rates updated successfully")


# ── Executives ───────────────────────────────────────────────────────


@router.get(
    "/ceo-profiles",
    response_model=list[CEOProfileResponse],
    summary="CEO profiles",
)
def list_ceo_profiles(
    use_case: ListCEOProfilesUseCase = Depends(get_list_ceo_profiles_use_case),
) -> list[CEOProfileResponse]:
    views: list[CEOProfileView] = use_case.execute()
    return [_ceo_profile_response(v.profile, v.company) for v in views]


@router.post(
    "/ceo-profiles",
    response_model=CEOProfileResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Add a CEO profile",
)
def create_ceo_profile(
    body: CreateCEOProfileRequest,
    use_case: CreateCEOProfileUseCase = Depends(get_create_ceo_profile_use_case),
) -> CEOProfileResponse:
    command = CreateCEOProfileCommand(
        company_id=body.company_id,
        name=body.name,
        title=body.title,
        tenure=body.tenure,
        religion=body.religion,
        strategy=body.strategy,
        leadership=body.leadership,
        photo_url=body.photo_url,
    )
    return _ceo_profile_response(use_case.execute(command))


# ── Market alerts ────────────────────────────────────────────────────


@router.get(
    "/market/alerts",
    response_model=list[MarketAlertResponse],
    summary="Active market alerts",
)
def list_market_alerts(
    use_case: ListActiveAlertsUseCase = Depends(get_list_alerts_use_case),
) -> list[MarketAlertResponse]:
    return [_alert_response(a) for a in use_case.execute()]


@router.post(
    "/market/alerts",
    response_model=MarketAlertResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Raise a market alert",
    description="HIGH severity alerts are also sent as notifications.",
)
def create_market_alert(
    body: CreateAlertRequest,
    use_case: CreateAlertUseCase = Depends(get_create_alert_use_case),
) -> MarketAlertResponse:
    command = CreateAlertCommand(
        type=body.type,
        severity=body.severity,
        title=body.title,
        description=body.description,
        is_active=body.is_active,
    )
    return _alert_response(use_case.execute(command))


@router.post(
    "/market/alerts/{alert_id}/deactivate",
    response_model=ActionResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Dismiss a market alert",
)
def deactivate_market_alert(
    alert_id: int,
    use_case: DeactivateAlertUseCase = Depends(get_deactivate_alert_use_case),
) -> ActionResponse:
    use_case.execute(alert_id)
    return ActionResponse(success=True, message="Alert deactivated")


@router.post(
    "/market/monitor",
    response_model=ActionResponse,
    summary="Check market conditions",
    description="Read yield curve and volatility indicators and raise alerts.",
)
def monitor_market(
    use_case: MonitorMarketConditionsUseCase = Depends(get_monitor_market_use_case),
) -> ActionResponse:
    use_case.execute()
    return ActionResponse(success=True, message="Market monitoring completed")


# ── News ─────────────────────────────────────────────────────────────


@router.get(
    "/news",
    response_model=list[NewsArticleResponse],
    summary="Recent news",
)
def list_news(
    limit: int = Query(default=10, ge=1, le=100),
    use_case: ListRecentNewsUseCase = Depends(get_list_news_use_case),
) -> list[NewsArticleResponse]:
    views: list[NewsView] = use_case.execute(limit)
    return [_news_response(v.article, v.company) for v in views]


@router.post(
    "/news",
    response_model=NewsArticleResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Add a news article",
)
def create_news(
    body: CreateNewsRequest,
    use_case: CreateNewsUseCase = Depends(get_create_news_use_case),
) -> NewsArticleResponse:
    command = CreateNewsCommand(
        title=body.title,
        content=body.content,
        source=body.source,
        sentiment=body.sentiment,
        published_at=body.published_at or datetime.now(timezone.utc),
        company_id=body.company_id,
    )
    return _news_response(use_case.execute(command))


# ── Notifications & refresh ──────────────────────────────────────────


@router.post(
    "/notifications/test",
    response_model=ActionResponse,
    summary="Send a test notification",
)
def send_test_notification(
    body: Optional[NotificationTestRequest] = None,
    use_case: SendTestNotificationUseCase = Depends(
        get_send_test_notification_use_case
    ),
) -> ActionResponse:
    """Send a notification; ``success`` reports whether any channel took it."""
    subject = body.type if body else None
    message = body.message if body else None
    delivered = use_case.execute(subject=subject, message=message)
    return ActionResponse(success=delivered, message="Test notification sent")


@router.post(
    "/data/refresh",
    response_model=RefreshResponse,
    responses={429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Refresh all simulated data",
    description=(
        "Update rates, regenerate recommendations, check market conditions "
        "and forecast rates, in that order. Stops at the first failure."
    ),
)
@limiter.limit(HEAVY_RATE_LIMIT)
def refresh_data(
    request: Request,
    use_case: RefreshDataUseCase = Depends(get_refresh_data_use_case),
) -> RefreshResponse:
    result = use_case.execute()
    return RefreshResponse(
        success=True,
        message="All data refreshed successfully",
        timestamp=result.timestamp,
    )
