"""
Domain entities for the portfolio bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Sentiment(Enum):
    """Sentiment classification for a news article or market snapshot."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class Signal(Enum):
    """Trading signal produced by the recommendation scorer."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class Trend(Enum):
    """Direction of a currency pair over the next 24 hours."""

    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    STABLE = "STABLE"


class RiskLevel(Enum):
    """Three-level bucket shared by alert severity and FX volatility risk."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TradeAction(Enum):
    """Side of a prospective trade."""

    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class CompanyFinancials:
    """Headline financials, in millions of the company's currency."""

    cash_reserves: Optional[float] = None
    annual_revenue: Optional[float] = None
    annual_profit: Optional[float] = None
    product_annual_revenue: Optional[float] = None
    annual_gross_profit: Optional[float] = None


@dataclass(frozen=True)
class Company:
    """A listed company on the watchlist."""

    id: int
    name: str
    ticker: str
    sector: str
    currency: str
    created_at: datetime
    financials: Optional[CompanyFinancials] = None


@dataclass(frozen=True)
class PortfolioPosition:
    """Shares of one company held by a user."""

    id: int
    user_id: int
    company_id: int
    shares: Decimal
    average_cost: Decimal
    purchase_currency: str
    created_at: datetime


@dataclass(frozen=True)
class CEOProfile:
    """Executive profile attached to a company."""

    id: int
    company_id: int
    name: str
    title: str
    tenure: int
    religion: str
    strategy: str
    leadership: str
    created_at: datetime
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class NewsArticle:
    """A news item, optionally linked to a company."""

    id: int
    title: str
    content: str
    source: str
    sentiment: Sentiment
    published_at: datetime
    created_at: datetime
    company_id: Optional[int] = None


@dataclass(frozen=True)
class CurrencyRate:
    """Latest known rate for a currency pair.

    Only the most recent value is kept per pair; each update replaces
    the previous record under the same id.
    """

    id: int
    from_currency: str
    to_currency: str
    rate: Decimal
    change: Decimal
    change_percent: Decimal
    updated_at: datetime
    forecast_24h: Optional[str] = None
    volatility_risk: Optional[str] = None

    @property
    def pair(self) -> str:
        return f"{self.from_currency}/{self.to_currency}"


@dataclass(frozen=True)
class MarketAlert:
    """A market condition alert raised by monitoring or by a user."""

    id: int
    type: str
    severity: RiskLevel
    title: str
    description: str
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class Recommendation:
    """A stored AI recommendation for a company."""

    id: int
    company_id: int
    signal: Signal
    confidence: int
    reasoning: str
    created_at: datetime
    target_price: Optional[float] = None
    fx_advantage: Optional[float] = None
    optimal_timing: Optional[str] = None


@dataclass(frozen=True)
class MarketSnapshot:
    """Simulated market state for a ticker.

    Attributes:
        price: Last price, strictly positive.
        volume: Traded volume, non-negative.
        sentiment: Market sentiment classification.
        volatility: Volatility index in [0, 50].
    """

    ticker: str
    price: float
    volume: int
    sentiment: Sentiment
    volatility: float


@dataclass(frozen=True)
class StockPrice:
    """A live quote for a ticker, with its value in the base currency."""

    ticker: str
    price: float
    change: float
    change_percent: float
    currency: str
    price_in_base: float


@dataclass(frozen=True)
class RecommendationResult:
    """Output of the recommendation scorer before persistence."""

    signal: Signal
    confidence: int
    score: int
    target_price: float
    reasoning: str
    fx_advantage: float
    optimal_timing: str


@dataclass(frozen=True)
class CurrencyForecast:
    """A 24-hour projection for a currency pair."""

    pair: str
    current_rate: float
    predicted_24h: float
    confidence: int
    trend: Trend
    volatility_risk: RiskLevel


@dataclass(frozen=True)
class PositionDetail:
    """Valuation of a single position in the base currency."""

    position_id: int
    company: Company
    shares: float
    average_cost: float
    current_price: float
    current_value: float
    total_return: float
    total_return_percent: float
    fx_impact: float


@dataclass(frozen=True)
class PortfolioSummary:
    """Aggregated valuation of every resolvable position."""

    total_value: float
    total_change: float
    change_percent: float
    fx_impact: float
    positions: tuple[PositionDetail, ...]


@dataclass(frozen=True)
class TradingWindow:
    """Advice on when to execute a trade given current FX movement."""

    recommended: bool
    reason: str
    optimal_window: str
    fx_advantage: float


@dataclass(frozen=True)
class DividendProjection:
    """Projected dividend income for a portfolio."""

    annual_dividend: float
    yield_percent: float
    next_payment: float
    next_payment_date: date


@dataclass(frozen=True)
class MarketIndicators:
    """Macro indicators read by the market monitor."""

    bond_yield: float
    yield_curve_inverted: bool
    vix: float
    overall_sentiment: str


@dataclass(frozen=True)
class AlertDraft:
    """An alert the monitor wants raised, before it gets an id."""

    type: str
    severity: RiskLevel
    title: str
    description: str
