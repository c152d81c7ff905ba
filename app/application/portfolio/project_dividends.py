"""
Use case: Project dividend income for a user's portfolio.

Input: user id
Output: DividendProjection
Side effects: None.
"""

from datetime import date
from typing import Callable, Mapping

from app.application.portfolio.get_portfolio_summary import GetPortfolioSummaryUseCase
from app.domain.portfolio.entities import DividendProjection
from app.domain.portfolio.portfolio_valuator import project_dividends


class ProjectDividendsUseCase:
    """Applies per-ticker dividend yields to the current valuation."""

    def __init__(
        self,
        summary_use_case: GetPortfolioSummaryUseCase,
        dividend_yields: Mapping[str, float],
        today: Callable[[], date] = date.today,
    ) -> None:
        self._summary_use_case = summary_use_case
        self._dividend_yields = dividend_yields
        self._today = today

    def execute(self, user_id: int) -> DividendProjection:
        summary = self._summary_use_case.execute(user_id)
        return project_dividends(summary, self._dividend_yields, self._today())
