"""
Notification sinks deliver quota warnings to the host's notification system.

Rendering and delivery belong to the host. The in-memory sink keeps the open
and resolved notifications so hosts without a notification backend (and the
test suite) can inspect them.
"""

import logging
import uuid
from abc import ABC, abstractmethod

from ..models.notification import QuotaNotification
from ..utils.errors import InvalidNotificationError

logger = logging.getLogger(__name__)


class NotificationSink(ABC):
    """Abstract notification backend."""

    @abstractmethod
    async def notify(self, notification: QuotaNotification) -> str:
        """
        Create a notification and return its identifier.

        Raises:
            InvalidNotificationError: If the notification is malformed
        """

    @abstractmethod
    async def resolve_all(self, app_id: str, user_id: str) -> None:
        """
        Mark every open quota notification of *user_id* as processed.

        Raises:
            InvalidNotificationError: If the arguments are malformed
        """


class InMemoryNotificationSink(NotificationSink):
    """Keeps notifications in process memory, one open entry per object key."""

    def __init__(self):
        self._open: dict[tuple[str, str, str], tuple[str, QuotaNotification]] = {}
        self.resolved: list[QuotaNotification] = []

    @staticmethod
    def _validate(app_id: str, user_id: str) -> None:
        if not app_id:
            raise InvalidNotificationError("Notification app_id must not be empty")
        if not user_id:
            raise InvalidNotificationError("Notification user_id must not be empty")

    async def notify(self, notification: QuotaNotification) -> str:
        self._validate(notification.app_id, notification.user_id)
        if not notification.object_type or not notification.object_id:
            raise InvalidNotificationError("Notification object must be set")
        if not notification.subject_params:
            raise InvalidNotificationError("Notification subject must be set")

        notification_id = uuid.uuid4().hex
        previous = self._open.get(notification.key)
        if previous is not None:
            self.resolved.append(previous[1])
        self._open[notification.key] = (notification_id, notification)
        logger.debug(f"Created notification {notification_id} for {notification.user_id}")
        return notification_id

    async def resolve_all(self, app_id: str, user_id: str) -> None:
        self._validate(app_id, user_id)
        for key in [k for k, (_, n) in self._open.items() if n.app_id == app_id and n.user_id == user_id]:
            _, notification = self._open.pop(key)
            self.resolved.append(notification)

    def open_for(self, user_id: str) -> list[QuotaNotification]:
        return [n for _, n in self._open.values() if n.user_id == user_id]


__all__ = ["InMemoryNotificationSink", "NotificationSink"]
