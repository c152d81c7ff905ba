"""
Domain service: Currency rate forecasting.

Projects a 24-hour movement for a currency pair from its latest rate and
recent change. This is a stand-in for a predictive model: only the output
shape and ranges are guaranteed, not determinism.
"""

import random
from typing import Optional

from app.domain.portfolio.entities import (
    CurrencyForecast,
    CurrencyRate,
    RiskLevel,
    Trend,
)
from app.domain.portfolio.ports import RandomSource

TREND_THRESHOLD = 0.01
MAX_VOLATILITY = 0.02
HIGH_RISK_VOLATILITY = 0.015
MEDIUM_RISK_VOLATILITY = 0.008
CONFIDENCE_MIN = 70
CONFIDENCE_SPAN = 25


class CurrencyForecastPredictor:
    """Predicts trend, 24h rate, confidence and volatility risk.

    Volatility is re-drawn on every call from [0, 0.02].
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng = rng or random.Random()

    def predict(self, rate: CurrencyRate) -> CurrencyForecast:
        """Forecast the pair's rate 24 hours ahead.

        Args:
            rate: Latest rate record of the pair.

        Returns:
            A forecast whose confidence lies in [70, 95).
        """
        current = float(rate.rate)
        change = float(rate.change)

        volatility = self._rng.uniform(0.0, MAX_VOLATILITY)
        noise = self._rng.uniform(-volatility / 2, volatility / 2)
        confidence = CONFIDENCE_MIN + int(self._rng.random() * CONFIDENCE_SPAN)

        return CurrencyForecast(
            pair=rate.pair,
            current_rate=current,
            predicted_24h=current + change * 2 + noise,
            confidence=min(confidence, CONFIDENCE_MIN + CONFIDENCE_SPAN - 1),
            trend=classify_trend(change),
            volatility_risk=classify_volatility(volatility),
        )


def classify_trend(change: float) -> Trend:
    if change > TREND_THRESHOLD:
        return Trend.BULLISH
    if change < -TREND_THRESHOLD:
        return Trend.BEARISH
    return Trend.STABLE


def classify_volatility(volatility: float) -> RiskLevel:
    if volatility > HIGH_RISK_VOLATILITY:
        return RiskLevel.HIGH
    if volatility > MEDIUM_RISK_VOLATILITY:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def format_forecast(forecast: CurrencyForecast) -> str:
    """Render the forecast as stored on the rate record, e.g. ``BULLISH (+0.04)``."""
    delta = forecast.predicted_24h - forecast.current_rate
    return f"{forecast.trend.value} ({delta:+.2f})"


def format_volatility_risk(forecast: CurrencyForecast) -> str:
    """Render the risk bucket as stored on the rate record, e.g. ``LOW (82%)``."""
    return f"{forecast.volatility_risk.value} ({forecast.confidence}%)"
