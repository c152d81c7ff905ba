"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the portfolio context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration and request logging
- The portfolio container holding the in-memory store

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings
from app.interfaces.health import router as health_router
from app.interfaces.portfolio.dependencies import build_container
from app.interfaces.portfolio.router import router as portfolio_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log start and stop of the service."""
    container = app.state.container
    logger.info(
        "%s %s started (base currency %s)",
        container.settings.project_name,
        container.settings.version,
        container.settings.base_currency,
    )
    yield
    logger.info("%s stopped", container.settings.project_name)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to build the application from. Defaults to
            the environment-loaded module settings.

    Returns:
        A fully configured FastAPI application instance with its own
        in-memory store.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    # --- State ---
    app.state.container = build_container(app_settings)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security & Logging Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(portfolio_router, prefix=API_PREFIX)

    return app


app = create_app()
