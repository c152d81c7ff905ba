"""
Use case: Refresh currency rates.

Input: none
Output: list[CurrencyRate] (the updated records)
Side effects: Each rate moves by a uniform ±0.05% variation; change and
    change percent are recomputed against the previous rate. Forecast
    fields are carried over unchanged.
Failure cases: None beyond repository errors.
"""

import logging
import random
from decimal import Decimal
from typing import Optional

from app.domain.portfolio.entities import CurrencyRate
from app.domain.portfolio.ports import CurrencyRateRepository, RandomSource

logger = logging.getLogger(__name__)

RATE_VARIATION = 0.0005


class UpdateCurrencyRatesUseCase:
    """Simulates a rate tick for every stored pair."""

    def __init__(
        self,
        rate_repo: CurrencyRateRepository,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._rate_repo = rate_repo
        self._rng = rng or random.Random()

    def execute(self) -> list[CurrencyRate]:
        updated = []
        for rate in self._rate_repo.list_all():
            old = float(rate.rate)
            new = old * (1 + self._rng.uniform(-RATE_VARIATION, RATE_VARIATION))
            change = new - old

            updated.append(
                self._rate_repo.upsert(
                    from_currency=rate.from_currency,
                    to_currency=rate.to_currency,
                    rate=Decimal(str(new)),
                    change=Decimal(str(change)),
                    change_percent=Decimal(str(change / old * 100)),
                    forecast_24h=rate.forecast_24h,
                    volatility_risk=rate.volatility_risk,
                )
            )

        logger.info("Updated %d currency rates", len(updated))
        return updated


class ListCurrencyRatesUseCase:
    """Returns the latest record of every pair."""

    def __init__(self, rate_repo: CurrencyRateRepository) -> None:
        self._rate_repo = rate_repo

    def execute(self) -> list[CurrencyRate]:
        return self._rate_repo.list_all()
