"""
Pydantic schemas for portfolio API request/response validation.

These schemas enforce input validation and define the API contract.
Wire names are camelCase; decimal quantities stored as text by the
dashboard (shares, costs, rates, confidence) are serialized as strings.
No business logic belongs here.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.portfolio.entities import RiskLevel, Sentiment

CURRENCY_PATTERN = r"^[A-Z]{3}$"
TICKER_PATTERN = r"^[A-Z0-9.\-]{1,10}$"
# Keeps float conversions in the valuation finite.
MAX_POSITION_QUANTITY = Decimal("1e12")


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Companies ────────────────────────────────────────────────────────


class CompanyFinancialsSchema(ApiModel):
    """Headline financials, in millions of the company's currency."""

    cash_reserves: Optional[float] = None
    annual_revenue: Optional[float] = None
    annual_profit: Optional[float] = None
    product_annual_revenue: Optional[float] = None
    annual_gross_profit: Optional[float] = None


class CreateCompanyRequest(ApiModel):
    """Request schema for adding a company.

    Attributes:
        name: Company display name.
        ticker: Listing ticker (uppercase).
        sector: Industry sector.
        currency: ISO 4217 code of the listing currency.
        financials: Optional headline financials.
    """

    name: str = Field(..., min_length=1, max_length=200)
    ticker: str = Field(..., pattern=TICKER_PATTERN)
    sector: str = Field(..., min_length=1, max_length=100)
    currency: str = Field(..., pattern=CURRENCY_PATTERN)
    financials: Optional[CompanyFinancialsSchema] = None


class UpdateFinancialsRequest(ApiModel):
    """Request schema for replacing a company's financials."""

    financials: CompanyFinancialsSchema


class CompanyResponse(ApiModel):
    id: int
    name: str
    ticker: str
    sector: str
    currency: str
    financials: Optional[CompanyFinancialsSchema] = None
    created_at: datetime


# ── Portfolio ────────────────────────────────────────────────────────


class CreatePositionRequest(ApiModel):
    """Request schema for opening a position.

    Attributes:
        company_id: Company the shares belong to.
        shares: Number of shares (non-negative, may be fractional).
        average_cost: Average cost per share in the purchase currency.
        purchase_currency: ISO 4217 code the shares were bought in.
    """

    company_id: int = Field(..., gt=0)
    shares: Decimal = Field(..., ge=0, le=MAX_POSITION_QUANTITY)
    average_cost: Decimal = Field(..., ge=0, le=MAX_POSITION_QUANTITY)
    purchase_currency: str = Field(..., pattern=CURRENCY_PATTERN)


class UpdatePositionRequest(ApiModel):
    shares: Decimal = Field(..., ge=0, le=MAX_POSITION_QUANTITY)
    average_cost: Decimal = Field(..., ge=0, le=MAX_POSITION_QUANTITY)


class PositionResponse(ApiModel):
    id: int
    user_id: int
    company_id: int
    shares: Decimal
    average_cost: Decimal
    purchase_currency: str
    created_at: datetime


class PositionDetailResponse(ApiModel):
    """A valued position. Monetary fields are in the base currency."""

    position_id: int
    company: CompanyResponse
    shares: float
    average_cost: float
    current_price: float
    current_value: float = Field(..., alias="currentValueTWD")
    total_return: float = Field(..., alias="totalReturnTWD")
    total_return_percent: float
    fx_impact: float


class PortfolioSummaryResponse(ApiModel):
    """Response schema for the portfolio summary endpoint."""

    total_value: float = Field(..., alias="totalValueTWD")
    total_change: float = Field(..., alias="totalChangeTWD")
    change_percent: float
    fx_impact: float = Field(..., alias="fxImpactTWD")
    positions: list[PositionDetailResponse]


class DividendProjectionResponse(ApiModel):
    annual_dividend: float = Field(..., alias="annualDividendTWD")
    yield_percent: float
    next_payment: float = Field(..., alias="nextPaymentTWD")
    next_payment_date: date


class DeleteResponse(ApiModel):
    success: bool


# ── Stocks ───────────────────────────────────────────────────────────


class StockPriceResponse(ApiModel):
    ticker: str
    price: float
    change: float
    change_percent: float
    currency: str
    price_in_base: float = Field(..., alias="priceInTWD")


class TradingWindowResponse(ApiModel):
    recommended: bool
    reason: str
    optimal_window: str
    fx_advantage: float


# ── AI ───────────────────────────────────────────────────────────────


class RecommendationResponse(ApiModel):
    """A stored recommendation with its company."""

    id: int
    company_id: int
    signal: str
    confidence: str
    target_price: Optional[str] = None
    reasoning: str
    fx_advantage: Optional[str] = None
    optimal_timing: Optional[str] = None
    created_at: datetime
    company: Optional[CompanyResponse] = None


class CurrencyForecastResponse(ApiModel):
    pair: str
    current_rate: float
    predicted_24h: float = Field(..., alias="predicted24h")
    confidence: int
    trend: str
    volatility_risk: str


# ── Currency ─────────────────────────────────────────────────────────


class CurrencyRateResponse(ApiModel):
    id: int
    from_currency: str
    to_currency: str
    rate: Decimal
    change: Decimal
    change_percent: Decimal
    forecast_24h: Optional[str] = Field(default=None, alias="forecast24h")
    volatility_risk: Optional[str] = None
    updated_at: datetime


# ── Executives ───────────────────────────────────────────────────────


class CreateCEOProfileRequest(ApiModel):
    company_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=100)
    tenure: int = Field(default=0, ge=0)
    religion: str = ""
    strategy: str = ""
    leadership: str = ""
    photo_url: Optional[str] = None


class CEOProfileResponse(ApiModel):
    id: int
    company_id: int
    name: str
    title: str
    tenure: int
    religion: str
    strategy: str
    leadership: str
    photo_url: Optional[str] = None
    created_at: datetime
    company: Optional[CompanyResponse] = None


# ── Market alerts ────────────────────────────────────────────────────


class CreateAlertRequest(ApiModel):
    type: str = Field(..., min_length=1, max_length=50)
    severity: RiskLevel
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    is_active: bool = True


class MarketAlertResponse(ApiModel):
    id: int
    type: str
    severity: str
    title: str
    description: str
    is_active: bool
    created_at: datetime


# ── News ─────────────────────────────────────────────────────────────


class CreateNewsRequest(ApiModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    sentiment: Sentiment
    company_id: Optional[int] = Field(default=None, gt=0)
    published_at: Optional[datetime] = None


class NewsArticleResponse(ApiModel):
    id: int
    title: str
    content: str
    source: str
    sentiment: str
    company_id: Optional[int] = None
    published_at: datetime
    created_at: datetime
    company: Optional[CompanyResponse] = None


# ── Notifications & batch operations ─────────────────────────────────


class NotificationTestRequest(ApiModel):
    type: Optional[str] = None
    message: Optional[str] = None


class ActionResponse(ApiModel):
    """Outcome of a command endpoint."""

    success: bool
    message: str


class RefreshResponse(ApiModel):
    success: bool
    message: str
    timestamp: datetime


class HealthResponse(ApiModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
    base_currency: str
    companies: int
    currency_rates: int


class ErrorResponse(ApiModel):
    """Standard error response schema. Never contains internal details."""

    error: str
