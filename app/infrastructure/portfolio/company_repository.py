"""
Adapter: Company catalog.

Implements CompanyRepository port over an in-memory table.
"""

from dataclasses import replace
from typing import Optional

from app.domain.portfolio.entities import Company, CompanyFinancials
from app.domain.portfolio.ports import CompanyRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryCompanyRepository(CompanyRepository):
    """Companies keyed by id."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[int, Company] = InMemoryTable()

    def list_all(self) -> list[Company]:
        return self._table.values()

    def get(self, company_id: int) -> Optional[Company]:
        return self._table.get(company_id)

    def get_by_ticker(self, ticker: str) -> Optional[Company]:
        return next((c for c in self._table if c.ticker == ticker), None)

    def create(
        self,
        name: str,
        ticker: str,
        sector: str,
        currency: str,
        financials: Optional[CompanyFinancials] = None,
    ) -> Company:
        company = Company(
            id=self._ids.next_id(),
            name=name,
            ticker=ticker,
            sector=sector,
            currency=currency,
            financials=financials,
            created_at=utcnow(),
        )
        return self._table.put(company.id, company)

    def update_financials(
        self, company_id: int, financials: CompanyFinancials
    ) -> Optional[Company]:
        return self._table.replace(
            company_id, lambda c: replace(c, financials=financials)
        )
