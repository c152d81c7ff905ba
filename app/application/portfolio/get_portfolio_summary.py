"""
Use case: Value a user's portfolio in the base currency.

Input: user id
Output: PortfolioSummary
Side effects: None. The summary is recomputed on every call.
Failure cases: None; unresolvable positions are left out of the summary.
"""

import logging

from app.domain.portfolio.entities import PortfolioSummary, StockPrice
from app.domain.portfolio.ports import (
    CompanyRepository,
    CurrencyRateRepository,
    PositionRepository,
    PriceFeedPort,
)
from app.domain.portfolio.portfolio_valuator import rate_table, summarize

logger = logging.getLogger(__name__)


class GetPortfolioSummaryUseCase:
    """Gathers positions, quotes and rates, then runs the valuator."""

    def __init__(
        self,
        position_repo: PositionRepository,
        company_repo: CompanyRepository,
        rate_repo: CurrencyRateRepository,
        price_feed: PriceFeedPort,
        base_currency: str = "TWD",
    ) -> None:
        self._position_repo = position_repo
        self._company_repo = company_repo
        self._rate_repo = rate_repo
        self._price_feed = price_feed
        self._base_currency = base_currency

    def execute(self, user_id: int) -> PortfolioSummary:
        positions = self._position_repo.list_for_user(user_id)
        companies = self._company_repo.list_all()

        held = {p.company_id for p in positions}
        prices: dict[str, StockPrice] = {}
        for company in companies:
            if company.id not in held:
                continue
            quote = self._price_feed.current_price(company.ticker)
            if quote is not None:
                prices[company.ticker] = quote

        summary = summarize(
            positions,
            companies,
            prices,
            rate_table(self._rate_repo.list_all(), self._base_currency),
        )
        logger.info(
            "Portfolio summary for user=%d: %d/%d positions valued",
            user_id,
            len(summary.positions),
            len(positions),
        )
        return summary
