"""
Use case: Forecast every currency rate 24 hours ahead.

Input: none
Output: ForecastCurrencyRatesResult
Side effects: Overwrites ``forecast_24h`` and ``volatility_risk`` on each
    rate record; rate, change and change percent are kept.
Failure cases: None beyond repository errors.
"""

import logging

from app.application.portfolio.dtos import ForecastCurrencyRatesResult
from app.domain.portfolio.currency_forecaster import (
    CurrencyForecastPredictor,
    format_forecast,
    format_volatility_risk,
)
from app.domain.portfolio.ports import CurrencyRateRepository

logger = logging.getLogger(__name__)


class ForecastCurrencyRatesUseCase:
    """Runs the predictor over each stored pair and writes the result back."""

    def __init__(
        self,
        rate_repo: CurrencyRateRepository,
        predictor: CurrencyForecastPredictor,
    ) -> None:
        self._rate_repo = rate_repo
        self._predictor = predictor

    def execute(self) -> ForecastCurrencyRatesResult:
        forecasts = []
        for rate in self._rate_repo.list_all():
            forecast = self._predictor.predict(rate)
            forecasts.append(forecast)

            self._rate_repo.upsert(
                from_currency=rate.from_currency,
                to_currency=rate.to_currency,
                rate=rate.rate,
                change=rate.change,
                change_percent=rate.change_percent,
                forecast_24h=format_forecast(forecast),
                volatility_risk=format_volatility_risk(forecast),
            )
            logger.info(
                "Forecast %s: trend=%s risk=%s confidence=%d",
                forecast.pair,
                forecast.trend.value,
                forecast.volatility_risk.value,
                forecast.confidence,
            )

        return ForecastCurrencyRatesResult(forecasts=forecasts)
