"""
The in-memory store: one set of repositories sharing an id allocator.

A store lives as long as the application instance that created it.
Nothing here is a module-level singleton; tests build fresh stores.
"""

from dataclasses import dataclass, field

from app.infrastructure.portfolio.ceo_profile_repository import (
    InMemoryCEOProfileRepository,
)
from app.infrastructure.portfolio.company_repository import InMemoryCompanyRepository
from app.infrastructure.portfolio.currency_rate_repository import (
    InMemoryCurrencyRateRepository,
)
from app.infrastructure.portfolio.market_alert_repository import (
    InMemoryMarketAlertRepository,
)
from app.infrastructure.portfolio.memory_store import IdAllocator
from app.infrastructure.portfolio.news_repository import InMemoryNewsRepository
from app.infrastructure.portfolio.position_repository import (
    InMemoryPositionRepository,
)
from app.infrastructure.portfolio.recommendation_repository import (
    InMemoryRecommendationRepository,
)


@dataclass
class InMemoryStore:
    """Every repository of the portfolio context, backed by process memory."""

    ids: IdAllocator = field(default_factory=IdAllocator)

    def __post_init__(self) -> None:
        self.companies = InMemoryCompanyRepository(self.ids)
        self.positions = InMemoryPositionRepository(self.ids)
        self.ceo_profiles = InMemoryCEOProfileRepository(self.ids)
        self.recommendations = InMemoryRecommendationRepository(self.ids)
        self.currency_rates = InMemoryCurrencyRateRepository(self.ids)
        self.alerts = InMemoryMarketAlertRepository(self.ids)
        self.news = InMemoryNewsRepository(self.ids)
