"""
Data Transfer Objects for the portfolio application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.domain.portfolio.entities import (
    CEOProfile,
    Company,
    CompanyFinancials,
    CurrencyForecast,
    MarketAlert,
    MarketIndicators,
    NewsArticle,
    Recommendation,
    RecommendationResult,
    RiskLevel,
    Sentiment,
)


@dataclass(frozen=True)
class CreateCompanyCommand:
    """Input DTO for adding a company to the watchlist."""

    name: str
    ticker: str
    sector: str
    currency: str
    financials: Optional[CompanyFinancials] = None


@dataclass(frozen=True)
class UpdateFinancialsCommand:
    """Input DTO for replacing a company's financials."""

    company_id: int
    financials: CompanyFinancials


@dataclass(frozen=True)
class CreatePositionCommand:
    """Input DTO for opening a portfolio position.

    Attributes:
        user_id: Owner of the position.
        company_id: Company the shares belong to.
        shares: Number of shares held (non-negative).
        average_cost: Average cost per share in ``purchase_currency``.
        purchase_currency: Currency the shares were bought in.
    """

    user_id: int
    company_id: int
    shares: Decimal
    average_cost: Decimal
    purchase_currency: str


@dataclass(frozen=True)
class UpdatePositionCommand:
    """Input DTO for changing shares and average cost of a position."""

    position_id: int
    shares: Decimal
    average_cost: Decimal


@dataclass(frozen=True)
class TradingAnalysisQuery:
    """Input DTO for the optimal trading time analysis.

    Attributes:
        ticker: Ticker of the company to trade.
        action: ``BUY`` or ``SELL``; anything else is rejected.
    """

    ticker: str
    action: str


@dataclass(frozen=True)
class CreateAlertCommand:
    """Input DTO for raising a market alert by hand."""

    type: str
    severity: RiskLevel
    title: str
    description: str
    is_active: bool = True


@dataclass(frozen=True)
class CreateNewsCommand:
    """Input DTO for publishing a news article."""

    title: str
    content: str
    source: str
    sentiment: Sentiment
    published_at: datetime
    company_id: Optional[int] = None


@dataclass(frozen=True)
class CreateCEOProfileCommand:
    """Input DTO for adding an executive profile."""

    company_id: int
    name: str
    title: str
    tenure: int
    religion: str
    strategy: str
    leadership: str
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class RecommendationView:
    """A stored recommendation together with its company, if still known."""

    recommendation: Recommendation
    company: Optional[Company]


@dataclass(frozen=True)
class NewsView:
    """A news article together with its company, if linked."""

    article: NewsArticle
    company: Optional[Company]


@dataclass(frozen=True)
class CEOProfileView:
    """An executive profile together with its company."""

    profile: CEOProfile
    company: Optional[Company]


@dataclass(frozen=True)
class ScoredCompany:
    """Scoring outcome for one company in a recommendation run.

    Attributes:
        company: The scored company.
        result: The scorer's output.
        stored: Whether the result passed the persistence threshold.
        notified: Whether a high-confidence notification was sent.
    """

    company: Company
    result: RecommendationResult
    stored: bool
    notified: bool


@dataclass(frozen=True)
class GenerateRecommendationsResult:
    """Output DTO of a recommendation run."""

    scored: list[ScoredCompany] = field(default_factory=list)

    @property
    def stored_count(self) -> int:
        return sum(1 for s in self.scored if s.stored)


@dataclass(frozen=True)
class MonitorMarketResult:
    """Output DTO of a market monitoring pass."""

    indicators: MarketIndicators
    alerts: list[MarketAlert] = field(default_factory=list)


@dataclass(frozen=True)
class ForecastCurrencyRatesResult:
    """Output DTO of a forecasting pass, one forecast per rate record."""

    forecasts: list[CurrencyForecast] = field(default_factory=list)


@dataclass(frozen=True)
class RefreshDataResult:
    """Output DTO of a full data refresh."""

    timestamp: datetime
    steps: list[str] = field(default_factory=list)
