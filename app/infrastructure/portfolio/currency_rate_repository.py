"""
Adapter: Currency rates.

Implements CurrencyRateRepository port over an in-memory table keyed by
currency pair. No history is kept: an upsert replaces the pair's record
and keeps its id.
"""

from decimal import Decimal
from typing import Optional

from app.domain.portfolio.entities import CurrencyRate
from app.domain.portfolio.ports import CurrencyRateRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryCurrencyRateRepository(CurrencyRateRepository):
    """Latest rate per (from, to) pair."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[tuple[str, str], CurrencyRate] = InMemoryTable()

    def list_all(self) -> list[CurrencyRate]:
        return self._table.values()

    def get(self, from_currency: str, to_currency: str) -> Optional[CurrencyRate]:
        return self._table.get((from_currency, to_currency))

    def upsert(
        self,
        from_currency: str,
        to_currency: str,
        rate: Decimal,
        change: Decimal,
        change_percent: Decimal,
        forecast_24h: Optional[str] = None,
        volatility_risk: Optional[str] = None,
    ) -> CurrencyRate:
        def build(existing: Optional[CurrencyRate]) -> CurrencyRate:
            return CurrencyRate(
                id=existing.id if existing else self._ids.next_id(),
                from_currency=from_currency,
                to_currency=to_currency,
                rate=rate,
                change=change,
                change_percent=change_percent,
                forecast_24h=forecast_24h,
                volatility_risk=volatility_risk,
                updated_at=utcnow(),
            )

        return self._table.upsert((from_currency, to_currency), build)
