"""
Adapter: Portfolio positions.

Implements PositionRepository port over an in-memory table.
Positions never expire; they change only through explicit updates.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Optional

from app.domain.portfolio.entities import PortfolioPosition
from app.domain.portfolio.ports import PositionRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryPositionRepository(PositionRepository):
    """Positions keyed by id."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[int, PortfolioPosition] = InMemoryTable()

    def list_for_user(self, user_id: int) -> list[PortfolioPosition]:
        return [p for p in self._table if p.user_id == user_id]

    def get(self, position_id: int) -> Optional[PortfolioPosition]:
        return self._table.get(position_id)

    def find(self, user_id: int, company_id: int) -> Optional[PortfolioPosition]:
        return next(
            (
                p
                for p in self._table
                if p.user_id == user_id and p.company_id == company_id
            ),
            None,
        )

    def create(
        self,
        user_id: int,
        company_id: int,
        shares: Decimal,
        average_cost: Decimal,
        purchase_currency: str,
    ) -> PortfolioPosition:
        position = PortfolioPosition(
            id=self._ids.next_id(),
            user_id=user_id,
            company_id=company_id,
            shares=shares,
            average_cost=average_cost,
            purchase_currency=purchase_currency,
            created_at=utcnow(),
        )
        return self._table.put(position.id, position)

    def update(
        self, position_id: int, shares: Decimal, average_cost: Decimal
    ) -> Optional[PortfolioPosition]:
        return self._table.replace(
            position_id,
            lambda p: replace(p, shares=shares, average_cost=average_cost),
        )

    def delete(self, position_id: int) -> bool:
        return self._table.remove(position_id)
