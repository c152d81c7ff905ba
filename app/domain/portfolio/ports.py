"""
Port interfaces (ABCs) for the portfolio bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Protocol

from app.domain.portfolio.entities import (
    CEOProfile,
    Company,
    CompanyFinancials,
    CurrencyRate,
    MarketAlert,
    MarketIndicators,
    MarketSnapshot,
    NewsArticle,
    PortfolioPosition,
    Recommendation,
    RiskLevel,
    Sentiment,
    Signal,
    StockPrice,
)


class RandomSource(Protocol):
    """The slice of ``random.Random`` the simulators rely on."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...


class CompanyRepository(ABC):
    """Port for the company catalog."""

    @abstractmethod
    def list_all(self) -> list[Company]:
        """Return every company in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def get(self, company_id: int) -> Optional[Company]:
        """Return a company by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_ticker(self, ticker: str) -> Optional[Company]:
        """Return the company listed under a ticker, or None."""
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        name: str,
        ticker: str,
        sector: str,
        currency: str,
        financials: Optional[CompanyFinancials] = None,
    ) -> Company:
        """Persist a new company and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def update_financials(
        self, company_id: int, financials: CompanyFinancials
    ) -> Optional[Company]:
        """Replace a company's financials. Returns None if not found."""
        raise NotImplementedError


class PositionRepository(ABC):
    """Port for portfolio positions."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[PortfolioPosition]:
        """Return every position owned by a user."""
        raise NotImplementedError

    @abstractmethod
    def get(self, position_id: int) -> Optional[PortfolioPosition]:
        """Return a position by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find(self, user_id: int, company_id: int) -> Optional[PortfolioPosition]:
        """Return a user's position in a company, or None."""
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        user_id: int,
        company_id: int,
        shares: Decimal,
        average_cost: Decimal,
        purchase_currency: str,
    ) -> PortfolioPosition:
        """Persist a new position and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, position_id: int, shares: Decimal, average_cost: Decimal
    ) -> Optional[PortfolioPosition]:
        """Replace shares and average cost. Returns None if not found."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, position_id: int) -> bool:
        """Remove a position. Returns False if it did not exist."""
        raise NotImplementedError


class CEOProfileRepository(ABC):
    """Port for executive profiles."""

    @abstractmethod
    def list_all(self) -> list[CEOProfile]:
        raise NotImplementedError

    @abstractmethod
    def get_by_company(self, company_id: int) -> Optional[CEOProfile]:
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        company_id: int,
        name: str,
        title: str,
        tenure: int,
        religion: str,
        strategy: str,
        leadership: str,
        photo_url: Optional[str] = None,
    ) -> CEOProfile:
        raise NotImplementedError


class RecommendationRepository(ABC):
    """Port for stored AI recommendations."""

    @abstractmethod
    def list_all(self) -> list[Recommendation]:
        raise NotImplementedError

    @abstractmethod
    def list_for_company(self, company_id: int) -> list[Recommendation]:
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        company_id: int,
        signal: Signal,
        confidence: int,
        reasoning: str,
        target_price: Optional[float] = None,
        fx_advantage: Optional[float] = None,
        optimal_timing: Optional[str] = None,
    ) -> Recommendation:
        raise NotImplementedError


class CurrencyRateRepository(ABC):
    """Port for the latest rate of each currency pair."""

    @abstractmethod
    def list_all(self) -> list[CurrencyRate]:
        """Return the latest record of every pair."""
        raise NotImplementedError

    @abstractmethod
    def get(self, from_currency: str, to_currency: str) -> Optional[CurrencyRate]:
        """Return the latest record for a pair, or None."""
        raise NotImplementedError

    @abstractmethod
    def upsert(
        self,
        from_currency: str,
        to_currency: str,
        rate: Decimal,
        change: Decimal,
        change_percent: Decimal,
        forecast_24h: Optional[str] = None,
        volatility_risk: Optional[str] = None,
    ) -> CurrencyRate:
        """Insert or replace the record for a pair.

        An existing pair keeps its id; only the latest value is retained.
        """
        raise NotImplementedError


class MarketAlertRepository(ABC):
    """Port for market alerts."""

    @abstractmethod
    def list_active(self) -> list[MarketAlert]:
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        type: str,
        severity: RiskLevel,
        title: str,
        description: str,
        is_active: bool = True,
    ) -> MarketAlert:
        raise NotImplementedError

    @abstractmethod
    def deactivate(self, alert_id: int) -> bool:
        """Mark an alert inactive. Returns False if it did not exist."""
        raise NotImplementedError


class NewsRepository(ABC):
    """Port for news articles."""

    @abstractmethod
    def list_recent(self, limit: int = 10) -> list[NewsArticle]:
        """Return up to ``limit`` articles, newest ``published_at`` first."""
        raise NotImplementedError

    @abstractmethod
    def list_for_company(self, company_id: int) -> list[NewsArticle]:
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        title: str,
        content: str,
        source: str,
        sentiment: Sentiment,
        published_at: datetime,
        company_id: Optional[int] = None,
    ) -> NewsArticle:
        raise NotImplementedError


class PriceFeedPort(ABC):
    """Port for live stock quotes."""

    @abstractmethod
    def current_price(self, ticker: str) -> Optional[StockPrice]:
        """Return the current quote, or None for an unknown ticker."""
        raise NotImplementedError


class MarketDataPort(ABC):
    """Port for per-ticker market snapshots used by the scorer."""

    @abstractmethod
    def snapshot(self, ticker: str) -> MarketSnapshot:
        raise NotImplementedError


class MarketIndicatorsPort(ABC):
    """Port for macro indicators read by the market monitor."""

    @abstractmethod
    def read(self) -> MarketIndicators:
        raise NotImplementedError


class NotificationSender(ABC):
    """Port for outbound notifications (alerts, high-confidence signals)."""

    @abstractmethod
    def send(
        self, subject: str, body: str, context: Optional[dict[str, Any]] = None
    ) -> bool:
        """Deliver a notification.

        Returns:
            True if at least one channel accepted it. Implementations must
            not raise on delivery failure.
        """
        raise NotImplementedError
