"""
Adapter: News articles.

Implements NewsRepository port over an in-memory table.
"""

from datetime import datetime
from typing import Optional

from app.domain.portfolio.entities import NewsArticle, Sentiment
from app.domain.portfolio.ports import NewsRepository
from app.infrastructure.portfolio.memory_store import IdAllocator, InMemoryTable, utcnow


class InMemoryNewsRepository(NewsRepository):
    """Articles keyed by id."""

    def __init__(self, ids: IdAllocator) -> None:
        self._ids = ids
        self._table: InMemoryTable[int, NewsArticle] = InMemoryTable()

    def list_recent(self, limit: int = 10) -> list[NewsArticle]:
        articles = sorted(self._table, key=lambda a: a.published_at, reverse=True)
        return articles[:limit]

    def list_for_company(self, company_id: int) -> list[NewsArticle]:
        return [a for a in self._table if a.company_id == company_id]

    def create(
        self,
        title: str,
        content: str,
        source: str,
        sentiment: Sentiment,
        published_at: datetime,
        company_id: Optional[int] = None,
    ) -> NewsArticle:
        article = NewsArticle(
            id=self._ids.next_id(),
            title=title,
            content=content,
            source=source,
            sentiment=sentiment,
            published_at=published_at,
            company_id=company_id,
            created_at=utcnow(),
        )
        return self._table.put(article.id, article)
