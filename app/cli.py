"""
CLI entry point for FXFolio.

Usage:
    # Serve the API
    python -m app.cli serve --port 8000

    # Run one data refresh against a freshly seeded store
    python -m app.cli refresh --seed 42

    # Print 24h forecasts for the seeded rates
    python -m app.cli forecast
"""

import argparse
import logging
import sys

from app.core.config import Settings
from app.domain.portfolio.errors import DataRefreshError
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def _settings_from(args: argparse.Namespace) -> Settings:
    overrides = {}
    if getattr(args, "seed", None) is not None:
        overrides["random_seed"] = args.seed
    return Settings(**overrides)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API with uvicorn."""
    import uvicorn

    logger.info("Starting FXFolio at http://%s:%d", args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)


def cmd_refresh(args: argparse.Namespace) -> None:
    """Run the four refresh steps once and report what they produced."""
    from app.interfaces.portfolio.dependencies import (
        build_container,
        build_refresh_data_use_case,
    )

    container = build_container(_settings_from(args))
    store = container.store
    use_case = build_refresh_data_use_case(container)

    try:
        result = use_case.execute()
    except DataRefreshError as exc:
        logger.error("Refresh failed: %s", exc.message)
        sys.exit(1)

    logger.info("Refresh completed at %s", result.timestamp.isoformat())
    for rec in store.recommendations.list_all():
        logger.info(
            "  recommendation company=%d %s (%d%%)",
            rec.company_id,
            rec.signal.value,
            rec.confidence,
        )
    for alert in store.alerts.list_active():
        logger.info("  alert [%s] %s", alert.severity.value, alert.title)


def cmd_forecast(args: argparse.Namespace) -> None:
    """Forecast every seeded rate and log one line per pair."""
    from app.interfaces.portfolio.dependencies import (
        build_container,
        build_forecast_rates_use_case,
    )

    container = build_container(_settings_from(args))
    result = build_forecast_rates_use_case(container).execute()
    for forecast in result.forecasts:
        logger.info(
            "%s %.4f -> %.4f %s (risk %s, %d%%)",
            forecast.pair,
            forecast.current_rate,
            forecast.predicted_24h,
            forecast.trend.value,
            forecast.volatility_risk.value,
            forecast.confidence,
        )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="FXFolio CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    refresh_parser = subparsers.add_parser(
        "refresh", help="Run one data refresh on a seeded store"
    )
    refresh_parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed the random source for a reproducible run",
    )
    refresh_parser.set_defaults(func=cmd_refresh)

    forecast_parser = subparsers.add_parser(
        "forecast", help="Print 24h forecasts for the seeded rates"
    )
    forecast_parser.add_argument("--seed", type=int, default=None)
    forecast_parser.set_defaults(func=cmd_forecast)

    args = parser.parse_args(argv)
    configure_logging("INFO")
    args.func(args)


if __name__ == "__main__":
    main()
