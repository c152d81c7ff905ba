"""
Use cases: Market alerts.

List active alerts, raise one by hand and deactivate one. A hand-raised
HIGH severity alert is also sent as a notification.
Failure cases: AlertNotFoundError on deactivate.
"""

import logging

from app.application.portfolio.dtos import CreateAlertCommand
from app.domain.portfolio.entities import MarketAlert, RiskLevel
from app.domain.portfolio.errors import AlertNotFoundError
from app.domain.portfolio.ports import MarketAlertRepository, NotificationSender

logger = logging.getLogger(__name__)


class ListActiveAlertsUseCase:
    def __init__(self, alert_repo: MarketAlertRepository) -> None:
        self._alert_repo = alert_repo

    def execute(self) -> list[MarketAlert]:
        return self._alert_repo.list_active()


class CreateAlertUseCase:
    def __init__(
        self,
        alert_repo: MarketAlertRepository,
        notifier: NotificationSender,
    ) -> None:
        self._alert_repo = alert_repo
        self._notifier = notifier

    def execute(self, command: CreateAlertCommand) -> MarketAlert:
        alert = self._alert_repo.create(
            type=command.type,
            severity=command.severity,
            title=command.title,
            description=command.description,
            is_active=command.is_active,
        )
        logger.info("Created %s alert id=%d", alert.severity.value, alert.id)

        if alert.severity is RiskLevel.HIGH:
            self._notifier.send(alert.title, alert.description)

        return alert


class DeactivateAlertUseCase:
    def __init__(self, alert_repo: MarketAlertRepository) -> None:
        self._alert_repo = alert_repo

    def execute(self, alert_id: int) -> None:
        if not self._alert_repo.deactivate(alert_id):
            raise AlertNotFoundError(alert_id)
        logger.info("Deactivated alert id=%d", alert_id)
