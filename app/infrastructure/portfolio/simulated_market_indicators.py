"""
Adapter: Simulated macro indicators.

Implements MarketIndicatorsPort with random draws around recent levels:
10-year yield in [4.5, 5.0], 2-year yield in [4.8, 5.1], VIX in [15, 35].
"""

import random
from typing import Optional

from app.domain.portfolio.entities import MarketIndicators
from app.domain.portfolio.ports import MarketIndicatorsPort, RandomSource

OVERALL_SENTIMENTS = ("BULLISH", "BEARISH", "NEUTRAL")


class SimulatedMarketIndicators(MarketIndicatorsPort):
    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng = rng or random.Random()

    def read(self) -> MarketIndicators:
        rng = self._rng
        ten_year = 4.5 + rng.random() * 0.5
        two_year = 4.8 + rng.random() * 0.3
        vix = 15 + rng.random() * 20
        sentiment = OVERALL_SENTIMENTS[
            min(int(rng.random() * len(OVERALL_SENTIMENTS)), len(OVERALL_SENTIMENTS) - 1)
        ]
        return MarketIndicators(
            bond_yield=ten_year,
            yield_curve_inverted=two_year > ten_year,
            vix=vix,
            overall_sentiment=sentiment,
        )
