"""
Domain service: Recommendation scoring.

Turns a market snapshot, a news sentiment score and an FX impact into a
BUY/SELL/HOLD signal with a confidence score and target price.
No framework imports. No IO. Persistence and notifications are the
caller's concern.

Composite score (additive, fixed weights):
    market sentiment   ±30
    news sentiment     ±25  (beyond ±0.3)
    FX impact          ±15  (beyond ±1%)
    high volatility    -10  (above 40)
"""

import random
from typing import Iterable, Optional

from app.domain.portfolio.entities import (
    MarketSnapshot,
    NewsArticle,
    RecommendationResult,
    Sentiment,
    Signal,
)
from app.domain.portfolio.ports import RandomSource

SENTIMENT_WEIGHT = 30
NEWS_WEIGHT = 25
FX_WEIGHT = 15
VOLATILITY_PENALTY = 10

NEWS_THRESHOLD = 0.3
FX_THRESHOLD = 1.0
VOLATILITY_THRESHOLD = 40.0
SIGNAL_THRESHOLD = 40

MAX_CONFIDENCE = 95
BASE_CONFIDENCE = 50
HOLD_CONFIDENCE_MIN = 60
HOLD_CONFIDENCE_SPAN = 20

TIMING_IMMEDIATE = "Immediate"
TIMING_SOON = "Next 24-48 hours"
TIMING_WAIT_FX = "Wait for better FX rates"
FLAT_FX_THRESHOLD = 0.5

_ARTICLE_WEIGHTS = {
    Sentiment.POSITIVE: 1,
    Sentiment.NEGATIVE: -1,
    Sentiment.NEUTRAL: 0,
}


def news_sentiment_score(articles: Iterable[NewsArticle]) -> float:
    """Average article sentiment in [-1, 1]; 0 when there are no articles."""
    weights = [_ARTICLE_WEIGHTS[a.sentiment] for a in articles]
    if not weights:
        return 0.0
    return sum(weights) / len(weights)


class RecommendationScorer:
    """Domain service producing trading signals.

    Deterministic except for the HOLD confidence, which is drawn from
    the injected random source.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng = rng or random.Random()

    def score(
        self,
        market: MarketSnapshot,
        news_sentiment: float,
        fx_impact: float,
    ) -> RecommendationResult:
        """Score a ticker and resolve it into a signal.

        Args:
            market: Current market snapshot for the ticker.
            news_sentiment: Average news sentiment in [-1, 1].
            fx_impact: Percent change of the quote currency against the
                base currency.

        Returns:
            The signal, confidence, target price and reasoning.
        """
        total = 0
        reasons: list[str] = []

        if market.sentiment is Sentiment.POSITIVE:
            total += SENTIMENT_WEIGHT
            reasons.append("Positive market sentiment.")
        elif market.sentiment is Sentiment.NEGATIVE:
            total -= SENTIMENT_WEIGHT
            reasons.append("Negative market sentiment.")

        if news_sentiment > NEWS_THRESHOLD:
            total += NEWS_WEIGHT
            reasons.append("Positive news sentiment.")
        elif news_sentiment < -NEWS_THRESHOLD:
            total -= NEWS_WEIGHT
            reasons.append("Negative news sentiment.")

        if fx_impact > FX_THRESHOLD:
            total += FX_WEIGHT
            reasons.append("Favorable currency rates.")
        elif fx_impact < -FX_THRESHOLD:
            total -= FX_WEIGHT
            reasons.append("Unfavorable currency rates.")

        if market.volatility > VOLATILITY_THRESHOLD:
            total -= VOLATILITY_PENALTY
            reasons.append("High volatility increases risk.")

        signal, confidence = self._resolve_signal(total)
        reasons.append(_SIGNAL_SUMMARY[signal])

        return RecommendationResult(
            signal=signal,
            confidence=confidence,
            score=total,
            target_price=market.price * (1 + total / 100),
            reasoning=" ".join(reasons),
            fx_advantage=round(fx_impact, 2),
            optimal_timing=optimal_timing(fx_impact, signal),
        )

    def _resolve_signal(self, total: int) -> tuple[Signal, int]:
        if total > SIGNAL_THRESHOLD:
            return Signal.BUY, min(MAX_CONFIDENCE, BASE_CONFIDENCE + total)
        if total < -SIGNAL_THRESHOLD:
            return Signal.SELL, min(MAX_CONFIDENCE, BASE_CONFIDENCE + abs(total))
        # Truncated so the value stays inside [60, 80).
        noise = self._rng.random() * HOLD_CONFIDENCE_SPAN
        return Signal.HOLD, int(HOLD_CONFIDENCE_MIN + noise)


_SIGNAL_SUMMARY = {
    Signal.BUY: "Strong buy signal detected.",
    Signal.SELL: "Strong sell signal detected.",
    Signal.HOLD: "Mixed signals suggest holding current position.",
}


def optimal_timing(fx_impact: float, signal: Signal) -> str:
    """Pick an execution window from the FX impact.

    A flat currency defers the trade by a day or two; a SELL into a
    weakening currency waits for better rates. The SELL rule is evaluated
    after the flat-currency rule.
    """
    timing = TIMING_IMMEDIATE
    if abs(fx_impact) < FLAT_FX_THRESHOLD:
        timing = TIMING_SOON
    if fx_impact < -FX_THRESHOLD and signal is Signal.SELL:
        timing = TIMING_WAIT_FX
    return timing
