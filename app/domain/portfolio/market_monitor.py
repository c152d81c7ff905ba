"""
Domain service: Market condition monitoring.

Decides which alerts to raise from macro indicators.
No IO: the caller persists the drafts and sends notifications.
"""

from app.domain.portfolio.entities import AlertDraft, MarketIndicators, RiskLevel

CRASH_VIX_THRESHOLD = 25.0
VOLATILITY_VIX_THRESHOLD = 30.0

CRASH_WARNING = "CRASH_WARNING"
SENTIMENT = "SENTIMENT"


def is_crash_risk(indicators: MarketIndicators) -> bool:
    """Inverted yield curve together with an elevated VIX."""
    return indicators.yield_curve_inverted and indicators.vix > CRASH_VIX_THRESHOLD


def evaluate_market_conditions(indicators: MarketIndicators) -> list[AlertDraft]:
    """Return the alerts warranted by the current indicators.

    Both checks are independent; a very high VIX on an inverted curve
    yields two alerts.
    """
    drafts: list[AlertDraft] = []

    if is_crash_risk(indicators):
        drafts.append(
            AlertDraft(
                type=CRASH_WARNING,
                severity=RiskLevel.HIGH,
                title="Market Crash Risk Elevated",
                description=(
                    f"Inverted yield curve and elevated VIX ({indicators.vix:.2f}) "
                    "indicate potential market correction within 6-18 months."
                ),
            )
        )

    if indicators.vix > VOLATILITY_VIX_THRESHOLD:
        drafts.append(
            AlertDraft(
                type=SENTIMENT,
                severity=RiskLevel.MEDIUM,
                title="High Market Volatility",
                description=(
                    f"VIX elevated at {indicators.vix:.2f}. "
                    "Increased market uncertainty detected."
                ),
            )
        )

    return drafts
