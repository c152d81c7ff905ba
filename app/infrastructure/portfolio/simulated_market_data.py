"""
Adapter: Simulated market snapshots.

Implements MarketDataPort. A snapshot is generated on first request for a
ticker and cached for the lifetime of the adapter unless the cache is
cleared.
"""

import logging
import random
import threading
from typing import Optional

from app.domain.portfolio.entities import MarketSnapshot, Sentiment
from app.domain.portfolio.ports import MarketDataPort, RandomSource

logger = logging.getLogger(__name__)

MIN_PRICE = 100.0
PRICE_SPAN = 200.0
MAX_VOLUME = 1_000_000
MAX_VOLATILITY = 50.0


class SimulatedMarketData(MarketDataPort):
    """Random but stable-per-ticker market snapshots."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng = rng or random.Random()
        self._cache: dict[str, MarketSnapshot] = {}
        self._lock = threading.Lock()

    def snapshot(self, ticker: str) -> MarketSnapshot:
        with self._lock:
            cached = self._cache.get(ticker)
            if cached is None:
                cached = self._generate(ticker)
                self._cache[ticker] = cached
                logger.debug("Generated market snapshot for %s", ticker)
            return cached

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _generate(self, ticker: str) -> MarketSnapshot:
        rng = self._rng
        return MarketSnapshot(
            ticker=ticker,
            price=MIN_PRICE + rng.random() * PRICE_SPAN,
            volume=int(rng.random() * MAX_VOLUME),
            sentiment=self._draw_sentiment(),
            volatility=rng.random() * MAX_VOLATILITY,
        )

    def _draw_sentiment(self) -> Sentiment:
        # Two independent draws: 40% positive, then 70/30 neutral/negative.
        if self._rng.random() > 0.6:
            return Sentiment.POSITIVE
        if self._rng.random() > 0.3:
            return Sentiment.NEUTRAL
        return Sentiment.NEGATIVE
