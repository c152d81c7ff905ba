"""
Logging configuration for the application.

Sets up structured logging with a consistent format and a middleware that
logs one line per API request.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
API_PREFIX = "/api"

request_logger = logging.getLogger("app.requests")


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Request lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs ``METHOD path status in Nms`` for every API request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        path = request.url.path
        if path.startswith(API_PREFIX):
            elapsed_ms = (time.monotonic() - start) * 1000
            request_logger.info(
                "%s %s %d in %.0fms",
                request.method,
                path,
                response.status_code,
                elapsed_ms,
            )
        return response
