"""
Adapter: Outbound notifications.

Implements NotificationSender. Dispatches a notification through:
    1. HTTP webhook POST to configurable URLs
    2. In-process callback hooks (for logging, tests, etc.)

Delivery failures are logged and counted, never raised: a failed
notification must not abort the operation that triggered it.

Usage:
    sender = WebhookNotificationSender(webhook_urls=["https://hooks.example.com/x"])
    sender.send("MARKET CRASH WARNING", "High risk market conditions detected.")
"""

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from urllib.parse import urlparse

import httpx

from app.domain.portfolio.ports import NotificationSender

logger = logging.getLogger(__name__)

NotificationCallback = Callable[[str, str, dict[str, Any]], None]


@dataclass
class DeliveryResult:
    """Outcome of one channel for one notification."""

    channel: str
    success: bool
    error: str | None = None
    latency_ms: float = 0.0


def _jsonable(value: Any) -> Any:
    """Coerce context values into something JSON can carry."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return str(value)


class WebhookNotificationSender(NotificationSender):
    """Multi-channel notification dispatcher.

    Args:
        webhook_urls: Initial list of webhook URLs to POST notifications to.
        timeout: HTTP timeout in seconds for webhook calls.
    """

    def __init__(
        self,
        webhook_urls: Optional[list[str]] = None,
        timeout: float = 10.0,
    ) -> None:
        self._webhook_urls: list[str] = []
        self._callbacks: list[NotificationCallback] = []
        self._timeout = timeout
        self._stats = {
            "total_notifications": 0,
            "webhook_calls": 0,
            "callback_invocations": 0,
            "errors": 0,
        }
        # Requests are served from a thread pool; counters share one lock.
        self._stats_lock = threading.Lock()
        for url in webhook_urls or []:
            self.add_webhook(url)

    @property
    def stats(self) -> dict:
        with self._stats_lock:
            return dict(self._stats)

    def _bump(self, counter: str) -> None:
        with self._stats_lock:
            self._stats[counter] += 1

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_webhook(self, url: str) -> None:
        """Register a webhook URL.

        Raises:
            ValueError: If the URL is not http/https.
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            msg = f"Invalid webhook URL scheme: {parsed.scheme}"
            raise ValueError(msg)
        if url not in self._webhook_urls:
            self._webhook_urls.append(url)
            logger.info("Webhook registered: %s", url)

    def add_callback(self, callback: NotificationCallback) -> None:
        """Register a callback invoked with (subject, body, context)."""
        self._callbacks.append(callback)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def send(
        self, subject: str, body: str, context: Optional[dict[str, Any]] = None
    ) -> bool:
        """Dispatch a notification to every channel.

        Returns:
            True if at least one channel delivered it.
        """
        context = context or {}
        self._bump("total_notifications")

        if not self._webhook_urls and not self._callbacks:
            logger.info("No notification channel configured; dropped: %s", subject)
            return False

        results = [self._post_webhook(url, subject, body, context) for url in self._webhook_urls]
        results.extend(self._invoke_callback(cb, subject, body, context) for cb in self._callbacks)

        delivered = any(r.success for r in results)
        logger.info(
            "Notification '%s' delivered to %d/%d channels",
            subject,
            sum(r.success for r in results),
            len(results),
        )
        return delivered

    def _post_webhook(
        self, url: str, subject: str, body: str, context: dict[str, Any]
    ) -> DeliveryResult:
        start = time.monotonic()
        payload = {
            "event": "notification",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "subject": subject,
            "body": body,
            "context": _jsonable(context),
        }

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(
                    url,
                    json=payload,
                    headers={"X-FXFolio-Event": "notification"},
                )
                resp.raise_for_status()
        except Exception as exc:
            self._bump("errors")
            logger.error("Webhook POST to %s failed: %s", url, exc)
            return DeliveryResult(
                channel=f"webhook:{url}",
                success=False,
                error=str(exc),
                latency_ms=round((time.monotonic() - start) * 1000, 2),
            )

        self._bump("webhook_calls")
        return DeliveryResult(
            channel=f"webhook:{url}",
            success=True,
            latency_ms=round((time.monotonic() - start) * 1000, 2),
        )

    def _invoke_callback(
        self,
        callback: NotificationCallback,
        subject: str,
        body: str,
        context: dict[str, Any],
    ) -> DeliveryResult:
        name = getattr(callback, "__name__", repr(callback))
        try:
            callback(subject, body, context)
        except Exception as exc:
            self._bump("errors")
            logger.error("Callback %s failed: %s", name, exc)
            return DeliveryResult(channel=f"callback:{name}", success=False, error=str(exc))

        self._bump("callback_invocations")
        return DeliveryResult(channel=f"callback:{name}", success=True)
