"""
Health check router.

Liveness and readiness in one probe: answers ``ok`` once the portfolio
container is built and reports how much seeded data it holds.
"""

from fastapi import APIRouter, Request

from app.interfaces.portfolio.dependencies import get_container
from app.interfaces.portfolio.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report status, version and the size of the in-memory store.",
)
def health_check(request: Request) -> HealthResponse:
    container = get_container(request)
    return HealthResponse(
        status="ok",
        version=container.settings.version,
        base_currency=container.settings.base_currency,
        companies=len(container.store.companies.list_all()),
        currency_rates=len(container.store.currency_rates.list_all()),
    )
