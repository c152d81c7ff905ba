"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema: ``{"error": "..."}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.portfolio.errors import (
    AlertNotFoundError,
    CompanyNotFoundError,
    DataRefreshError,
    InvalidTradeActionError,
    PortfolioDomainError,
    PositionNotFoundError,
    StockPriceNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

# Longest prefix first so nested resources win.
_VALIDATION_MESSAGES = (
    ("/api/portfolio/positions", "Invalid position data"),
    ("/api/companies", "Invalid company data"),
    ("/api/ceo-profiles", "Invalid CEO profile data"),
    ("/api/market/alerts", "Invalid alert data"),
    ("/api/news", "Invalid news data"),
)


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def _validation_message(path: str) -> str:
    for prefix, message in _VALIDATION_MESSAGES:
        if path.startswith(prefix):
            return message
    return "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed payloads with a generic per-resource message."""
        logger.warning(
            "Validation failed on %s: %d error(s)",
            request.url.path,
            len(exc.errors()),
        )
        return _error_response(HTTP_400, _validation_message(request.url.path))

    @app.exception_handler(CompanyNotFoundError)
    async def handle_company_not_found(
        _request: Request, exc: CompanyNotFoundError
    ) -> JSONResponse:
        logger.warning("Company not found: %s", exc.company_ref)
        return _error_response(HTTP_404, "Company not found")

    @app.exception_handler(PositionNotFoundError)
    async def handle_position_not_found(
        _request: Request, exc: PositionNotFoundError
    ) -> JSONResponse:
        logger.warning("Position not found: %d", exc.position_id)
        return _error_response(HTTP_404, "Position not found")

    @app.exception_handler(StockPriceNotFoundError)
    async def handle_price_not_found(
        _request: Request, exc: StockPriceNotFoundError
    ) -> JSONResponse:
        logger.warning("Stock price not found: %s", exc.ticker)
        return _error_response(HTTP_404, "Stock price not found")

    @app.exception_handler(AlertNotFoundError)
    async def handle_alert_not_found(
        _request: Request, exc: AlertNotFoundError
    ) -> JSONResponse:
        logger.warning("Alert not found: %d", exc.alert_id)
        return _error_response(HTTP_404, "Alert not found")

    @app.exception_handler(InvalidTradeActionError)
    async def handle_invalid_action(
        _request: Request, exc: InvalidTradeActionError
    ) -> JSONResponse:
        logger.warning("Invalid trade action: %s", exc.action)
        return _error_response(HTTP_400, "Invalid action parameter")

    @app.exception_handler(DataRefreshError)
    async def handle_refresh_failed(
        _request: Request, exc: DataRefreshError
    ) -> JSONResponse:
        logger.error("Data refresh failed at %s: %s", exc.step, exc.reason)
        return _error_response(HTTP_500, "Failed to refresh data")

    @app.exception_handler(PortfolioDomainError)
    async def handle_portfolio_domain(
        _request: Request, exc: PortfolioDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled portfolio domain errors."""
        logger.error("Unhandled portfolio domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
