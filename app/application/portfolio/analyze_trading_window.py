"""
Use case: Advise on the optimal time to trade a ticker.

Input: TradingAnalysisQuery (ticker, action)
Output: TradingWindow
Side effects: None.
Failure cases: InvalidTradeActionError. Unknown companies and missing
    rates are answered with a sentinel window rather than an error.
"""

import logging

from app.application.portfolio.dtos import TradingAnalysisQuery
from app.domain.portfolio.entities import TradeAction, TradingWindow
from app.domain.portfolio.errors import InvalidTradeActionError
from app.domain.portfolio.ports import CompanyRepository, CurrencyRateRepository
from app.domain.portfolio.portfolio_valuator import analyze_trading_window

logger = logging.getLogger(__name__)


class AnalyzeTradingWindowUseCase:
    """Looks up the company's currency move and applies the timing rules."""

    def __init__(
        self,
        company_repo: CompanyRepository,
        rate_repo: CurrencyRateRepository,
        base_currency: str = "TWD",
    ) -> None:
        self._company_repo = company_repo
        self._rate_repo = rate_repo
        self._base_currency = base_currency

    def execute(self, query: TradingAnalysisQuery) -> TradingWindow:
        """Run the analysis.

        Raises:
            InvalidTradeActionError: If the action is not BUY or SELL.
        """
        try:
            action = TradeAction(query.action)
        except ValueError:
            raise InvalidTradeActionError(query.action) from None

        company = self._company_repo.get_by_ticker(query.ticker)
        if company is None:
            return TradingWindow(
                recommended=False,
                reason="Company not found",
                optimal_window="N/A",
                fx_advantage=0.0,
            )

        rate = self._rate_repo.get(company.currency, self._base_currency)
        if rate is None:
            return TradingWindow(
                recommended=True,
                reason="No currency data available",
                optimal_window="Immediate",
                fx_advantage=0.0,
            )

        window = analyze_trading_window(action, float(rate.change_percent))
        logger.info(
            "Trading window for %s %s: recommended=%s window=%s",
            action.value,
            query.ticker,
            window.recommended,
            window.optimal_window,
        )
        return window
