"""
Use case: Send a test notification through the configured channels.

Input: optional subject and message
Output: bool (delivered or not)
Side effects: One outbound notification.
"""

from typing import Optional

from app.domain.portfolio.ports import NotificationSender

DEFAULT_SUBJECT = "Test Alert"
DEFAULT_MESSAGE = "This is a test notification"


class SendTestNotificationUseCase:
    def __init__(self, notifier: NotificationSender) -> None:
        self._notifier = notifier

    def execute(self, subject: Optional[str] = None, message: Optional[str] = None) -> bool:
        return self._notifier.send(subject or DEFAULT_SUBJECT, message or DEFAULT_MESSAGE)
