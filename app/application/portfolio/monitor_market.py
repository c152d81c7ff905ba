"""
Use case: Monitor market conditions and raise alerts.

Input: none
Output: MonitorMarketResult
Side effects: Persists one alert per triggered rule; sends a crash
    warning notification when the crash rule fires.
Failure cases: None beyond repository errors.
"""

import logging

from app.application.portfolio.dtos import MonitorMarketResult
from app.domain.portfolio.market_monitor import (
    CRASH_WARNING,
    evaluate_market_conditions,
)
from app.domain.portfolio.ports import (
    MarketAlertRepository,
    MarketIndicatorsPort,
    NotificationSender,
)

logger = logging.getLogger(__name__)


class MonitorMarketConditionsUseCase:
    def __init__(
        self,
        indicators_port: MarketIndicatorsPort,
        alert_repo: MarketAlertRepository,
        notifier: NotificationSender,
    ) -> None:
        self._indicators_port = indicators_port
        self._alert_repo = alert_repo
        self._notifier = notifier

    def execute(self) -> MonitorMarketResult:
        indicators = self._indicators_port.read()
        logger.info(
            "Market indicators: yield=%.2f inverted=%s vix=%.2f sentiment=%s",
            indicators.bond_yield,
            indicators.yield_curve_inverted,
            indicators.vix,
            indicators.overall_sentiment,
        )

        alerts = []
        for draft in evaluate_market_conditions(indicators):
            alert = self._alert_repo.create(
                type=draft.type,
                severity=draft.severity,
                title=draft.title,
                description=draft.description,
                is_active=True,
            )
            alerts.append(alert)
            logger.warning("Market alert raised: %s", alert.title)

            if draft.type == CRASH_WARNING:
                self._notifier.send(
                    "MARKET CRASH WARNING",
                    "High risk market conditions detected. Consider defensive positioning.",
                    {
                        "bond_yield": round(indicators.bond_yield, 2),
                        "vix": round(indicators.vix, 2),
                        "sentiment": indicators.overall_sentiment,
                    },
                )

        return MonitorMarketResult(indicators=indicators, alerts=alerts)
