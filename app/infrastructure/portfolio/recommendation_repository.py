"""
Adapter: Stored AI recommendations.

Implements RecommendationRepository port over an in-memory table.
"""

from typing import Optional

from app.domain.portfolio.entities import Recommendation, Signal
from app.domain.portfolio.ports import RecommendationRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryRecommendationRepository(RecommendationRepository):
    """Recommendations keyed by id, in creation order."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[int, Recommendation] = InMemoryTable()

    def list_all(self) -> list[Recommendation]:
        return self._table.values()

    def list_for_company(self, company_id: int) -> list[Recommendation]:
        return [r for r in self._table if r.company_id == company_id]

    def create(
        self,
        company_id: int,
        signal: Signal,
        confidence: int,
        reasoning: str,
        target_price: Optional[float] = None,
        fx_advantage: Optional[float] = None,
        optimal_timing: Optional[str] = None,
    ) -> Recommendation:
        recommendation = Recommendation(
            id=self._ids.next_id(),
            company_id=company_id,
            signal=signal,
            confidence=confidence,
            reasoning=reasoning,
            target_price=target_price,
            fx_advantage=fx_advantage,
            optimal_timing=optimal_timing,
            created_at=utcnow(),
        )
        return self._table.put(recommendation.id, recommendation)
