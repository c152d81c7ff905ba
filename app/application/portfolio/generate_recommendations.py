"""
Use case: Generate AI trading recommendations for every company.

Input: none (scores the whole catalog)
Output: GenerateRecommendationsResult
Side effects: Stores recommendations with confidence above the store
    threshold; sends a notification for those above the notify threshold.
Failure cases: Errors from the data sources propagate; a failed
    notification does not.
"""

import logging

from app.application.portfolio.dtos import (
    GenerateRecommendationsResult,
    RecommendationView,
    ScoredCompany,
)
from app.domain.portfolio.entities import Company, RecommendationResult
from app.domain.portfolio.ports import (
    CompanyRepository,
    CurrencyRateRepository,
    MarketDataPort,
    NewsRepository,
    NotificationSender,
    RecommendationRepository,
)
from app.domain.portfolio.recommendation_scorer import (
    RecommendationScorer,
    news_sentiment_score,
)

logger = logging.getLogger(__name__)

STORE_THRESHOLD = 70
NOTIFY_THRESHOLD = 85


class GenerateRecommendationsUseCase:
    """Scores each company and keeps the confident signals.

    For every company the market snapshot, the average news sentiment
    and the FX impact of its currency are fed to the scorer.
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        news_repo: NewsRepository,
        rate_repo: CurrencyRateRepository,
        recommendation_repo: RecommendationRepository,
        market_data: MarketDataPort,
        notifier: NotificationSender,
        scorer: RecommendationScorer,
        base_currency: str = "TWD",
        store_threshold: int = STORE_THRESHOLD,
        notify_threshold: int = NOTIFY_THRESHOLD,
    ) -> None:
        self._company_repo = company_repo
        self._news_repo = news_repo
        self._rate_repo = rate_repo
        self._recommendation_repo = recommendation_repo
        self._market_data = market_data
        self._notifier = notifier
        self._scorer = scorer
        self._base_currency = base_currency
        self._store_threshold = store_threshold
        self._notify_threshold = notify_threshold

    def execute(self) -> GenerateRecommendationsResult:
        """Run a scoring pass over the catalog.

        Returns:
            One entry per company with the result and what was done with it.
        """
        scored: list[ScoredCompany] = []

        for company in self._company_repo.list_all():
            market = self._market_data.snapshot(company.ticker)
            news_sentiment = news_sentiment_score(
                self._news_repo.list_for_company(company.id)
            )
            fx_impact = self._fx_impact(company.currency)

            result = self._scorer.score(market, news_sentiment, fx_impact)
            logger.info(
                "Scored %s: signal=%s score=%d confidence=%d",
                company.ticker,
                result.signal.value,
                result.score,
                result.confidence,
            )

            stored = notified = False
            if result.confidence > self._store_threshold:
                self._store(company, result)
                stored = True
                if result.confidence > self._notify_threshold:
                    notified = self._notify(company, result)

            scored.append(
                ScoredCompany(
                    company=company, result=result, stored=stored, notified=notified
                )
            )

        return GenerateRecommendationsResult(scored=scored)

    def _fx_impact(self, currency: str) -> float:
        """Recent percent move of ``currency`` against the base; 0 if unknown."""
        record = self._rate_repo.get(currency, self._base_currency)
        if record is None:
            return 0.0
        return float(record.change_percent)

    def _store(self, company: Company, result: RecommendationResult) -> None:
        self._recommendation_repo.create(
            company_id=company.id,
            signal=result.signal,
            confidence=result.confidence,
            reasoning=result.reasoning,
            target_price=result.target_price,
            fx_advantage=result.fx_advantage,
            optimal_timing=result.optimal_timing,
        )

    def _notify(self, company: Company, result: RecommendationResult) -> bool:
        subject = f"{result.signal.value} signal: {company.name} ({company.ticker})"
        body = (
            f"{result.reasoning} Confidence {result.confidence}%, "
            f"target price {result.target_price:.2f} {company.currency}. "
            f"Timing: {result.optimal_timing}."
        )
        sent = self._notifier.send(
            subject,
            body,
            {
                "ticker": company.ticker,
                "signal": result.signal.value,
                "confidence": result.confidence,
                "fx_advantage": result.fx_advantage,
            },
        )
        if not sent:
            logger.warning("High-confidence notification for %s not delivered", company.ticker)
        return sent


class ListRecommendationsUseCase:
    """Returns stored recommendations enriched with their company."""

    def __init__(
        self,
        recommendation_repo: RecommendationRepository,
        company_repo: CompanyRepository,
    ) -> None:
        self._recommendation_repo = recommendation_repo
        self._company_repo = company_repo

    def execute(self) -> list[RecommendationView]:
        companies = {c.id: c for c in self._company_repo.list_all()}
        return [
            RecommendationView(recommendation=r, company=companies.get(r.company_id))
            for r in self._recommendation_repo.list_all()
        ]
