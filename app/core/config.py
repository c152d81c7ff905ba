"""
Application configuration.

Loads settings from environment variables and .env file.
Settings are grouped by concern: server, logging, market simulation and notifications.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for batch endpoints (refresh, scoring).
        rate_limit_enabled: Turn request rate limiting on or off.
        base_currency: Currency portfolio totals are reported in.
        default_user_id: Owner of the demo portfolio (no authentication).
        recommendation_store_threshold: Confidence above which a
            recommendation is stored.
        recommendation_notify_threshold: Confidence above which a stored
            recommendation is also sent as a notification.
        notification_webhook_urls: Webhooks notifications are POSTed to.
        notification_timeout_seconds: HTTP timeout for each webhook call.
        price_jitter: Maximum relative move of a simulated quote per read.
        random_seed: Seed for the simulators; unset means non-reproducible.
        seed_demo_data: Load the demo companies and rates at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "FXFolio"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    rate_limit_enabled: bool = True

    base_currency: str = "TWD"
    default_user_id: int = 1

    recommendation_store_threshold: int = 70
    recommendation_notify_threshold: int = 85

    notification_webhook_urls: list[str] = []
    notification_timeout_seconds: float = 10.0

    price_jitter: float = 0.01
    random_seed: Optional[int] = None
    seed_demo_data: bool = True


settings = Settings()
