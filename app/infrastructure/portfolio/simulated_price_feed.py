"""
Adapter: Simulated live price feed.

Implements PriceFeedPort without network IO. Every read applies a uniform
±1% multiplicative jitter to the ticker's base quote and recomputes the
change against that base, plus the value in the base currency at the
latest stored rate.
"""

import logging
import random
from typing import Mapping, Optional

from app.domain.portfolio.entities import StockPrice
from app.domain.portfolio.ports import (
    CurrencyRateRepository,
    PriceFeedPort,
    RandomSource,
)

logger = logging.getLogger(__name__)

JITTER = 0.01


class SimulatedPriceFeed(PriceFeedPort):
    """Jittered quotes around fixed base prices.

    Args:
        base_quotes: ``ticker -> (price, change, change_percent, currency)``.
        rate_repo: Source of the quote currency's rate to the base currency.
        base_currency: Currency the ``price_in_base`` field is expressed in.
        rng: Random source for the jitter.
        jitter: Maximum relative perturbation; 0 disables it.
    """

    def __init__(
        self,
        base_quotes: Mapping[str, tuple[float, float, float, str]],
        rate_repo: CurrencyRateRepository,
        base_currency: str = "TWD",
        rng: Optional[RandomSource] = None,
        jitter: float = JITTER,
    ) -> None:
        self._base_quotes = dict(base_quotes)
        self._rate_repo = rate_repo
        self._base_currency = base_currency
        self._rng = rng or random.Random()
        self._jitter = jitter

    def current_price(self, ticker: str) -> Optional[StockPrice]:
        base = self._base_quotes.get(ticker)
        if base is None:
            logger.debug("No base quote for ticker=%s", ticker)
            return None

        base_price, _, _, currency = base
        variation = self._rng.uniform(-self._jitter, self._jitter) if self._jitter else 0.0
        price = base_price * (1 + variation)
        change = price - base_price

        return StockPrice(
            ticker=ticker,
            price=price,
            change=change,
            change_percent=change / base_price * 100,
            currency=currency,
            price_in_base=price * self._rate_for(currency),
        )

    def _rate_for(self, currency: str) -> float:
        if currency == self._base_currency:
            return 1.0
        record = self._rate_repo.get(currency, self._base_currency)
        return float(record.rate) if record else 1.0
