"""
Adapter: Executive profiles.

Implements CEOProfileRepository port over an in-memory table.
"""

from typing import Optional

from app.domain.portfolio.entities import CEOProfile
from app.domain.portfolio.ports import CEOProfileRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryCEOProfileRepository(CEOProfileRepository):
    """CEO profiles keyed by id."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[int, CEOProfile] = InMemoryTable()

    def list_all(self) -> list[CEOProfile]:
        return self._table.values()

    def get_by_company(self, company_id: int) -> Optional[CEOProfile]:
        return next((p for p in self._table if p.company_id == company_id), None)

    def create(
        self,
        company_id: int,
        name: str,
        title: str,
        tenure: int,
        religion: str,
        strategy: str,
        leadership: str,
        photo_url: Optional[str] = None,
    ) -> CEOProfile:
        profile = CEOProfile(
            id=self._ids.next_id(),
            company_id=company_id,
            name=name,
            title=title,
            tenure=tenure,
            religion=religion,
            strategy=strategy,
            leadership=leadership,
            photo_url=photo_url,
            created_at=utcnow(),
        )
        return self._table.put(profile.id, profile)
