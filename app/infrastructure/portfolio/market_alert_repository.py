"""
Adapter: Market alerts.

Implements MarketAlertRepository port over an in-memory table.
Alerts stay active until explicitly deactivated.
"""

from dataclasses import replace

from app.domain.portfolio.entities import MarketAlert, RiskLevel
from app.domain.portfolio.ports import MarketAlertRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryMarketAlertRepository(MarketAlertRepository):
    """Alerts keyed by id."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[int, MarketAlert] = InMemoryTable()

    def list_active(self) -> list[MarketAlert]:
        return [a for a in self._table if a.is_active]

    def create(
        self,
        type: str,
        severity: RiskLevel,
        title: str,
        description: str,
        is_active: bool = True,
    ) -> MarketAlert:
        alert = MarketAlert(
            id=self._ids.next_id(),
            type=type,
            severity=severity,
            title=title,
            description=description,
            is_active=is_active,
            created_at=utcnow(),
        )
        return self._table.put(alert.id, alert)

    def deactivate(self, alert_id: int) -> bool:
        updated = self._table.replace(alert_id, lambda a: replace(a, is_active=False))
        return updated is not None
