"""
Use cases: News feed.

List the most recent articles with their company and publish new ones.
"""

from datetime import timezone

from app.application.portfolio.dtos import CreateNewsCommand, NewsView
from app.domain.portfolio.entities import NewsArticle
from app.domain.portfolio.ports import CompanyRepository, NewsRepository

DEFAULT_NEWS_LIMIT = 10


class ListRecentNewsUseCase:
    def __init__(
        self,
        news_repo: NewsRepository,
        company_repo: CompanyRepository,
    ) -> None:
        self._news_repo = news_repo
        self._company_repo = company_repo

    def execute(self, limit: int = DEFAULT_NEWS_LIMIT) -> list[NewsView]:
        companies = {c.id: c for c in self._company_repo.list_all()}
        return [
            NewsView(
                article=a,
                company=companies.get(a.company_id) if a.company_id is not None else None,
            )
            for a in self._news_repo.list_recent(limit)
        ]


class CreateNewsUseCase:
    def __init__(self, news_repo: NewsRepository) -> None:
        self._news_repo = news_repo

    def execute(self, command: CreateNewsCommand) -> NewsArticle:
        published_at = command.published_at
        # Naive timestamps are taken as UTC so articles stay comparable.
        if published_at.tzinfo is None:
            published_at = published_at.replace(tzinfo=timezone.utc)

        return self._news_repo.create(
            title=command.title,
            content=command.content,
            source=command.source,
            sentiment=command.sentiment,
            published_at=published_at,
            company_id=command.company_id,
        )
