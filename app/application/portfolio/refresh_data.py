"""
Use case: Refresh all simulated data in one batch.

Input: none
Output: RefreshDataResult
Side effects: Runs, in order: update currency rates, generate
    recommendations, monitor market conditions, forecast currency rates.
Failure cases: DataRefreshError on the first failing step. Later steps
    are not run and earlier steps are not rolled back.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from app.application.portfolio.dtos import RefreshDataResult
from app.application.portfolio.forecast_currency_rates import (
    ForecastCurrencyRatesUseCase,
)
from app.application.portfolio.generate_recommendations import (
    GenerateRecommendationsUseCase,
)
from app.application.portfolio.monitor_market import MonitorMarketConditionsUseCase
from app.application.portfolio.update_currency_rates import UpdateCurrencyRatesUseCase
from app.domain.portfolio.errors import DataRefreshError

logger = logging.getLogger(__name__)


class RefreshDataUseCase:
    """Sequential batch over the four refresh steps. No retries."""

    def __init__(
        self,
        update_rates: UpdateCurrencyRatesUseCase,
        generate_recommendations: GenerateRecommendationsUseCase,
        monitor_market: MonitorMarketConditionsUseCase,
        forecast_rates: ForecastCurrencyRatesUseCase,
    ) -> None:
        self._steps: list[tuple[str, Callable[[], object]]] = [
            ("update_currency_rates", update_rates.execute),
            ("generate_recommendations", generate_recommendations.execute),
            ("monitor_market_conditions", monitor_market.execute),
            ("forecast_currency_rates", forecast_rates.execute),
        ]

    def execute(self) -> RefreshDataResult:
        """Run every step in order.

        Raises:
            DataRefreshError: Wrapping the first step that raised.
        """
        completed = []
        for name, step in self._steps:
            try:
                step()
            except Exception as exc:
                logger.exception("Data refresh aborted at step %s", name)
                raise DataRefreshError(name, type(exc).__name__) from exc
            completed.append(name)

        logger.info("Data refresh completed: %s", ", ".join(completed))
        return RefreshDataResult(timestamp=datetime.now(timezone.utc), steps=completed)
