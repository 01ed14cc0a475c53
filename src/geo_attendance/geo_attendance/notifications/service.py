from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import Clock, SystemClock
from ..common.validators import require_int, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Notification
from .repository import NotificationRepository


class NotificationService:
    def __init__(self, notifications: NotificationRepository, *, clock: Clock | None = None):
        self._notifications = notifications
        self._clock = clock or SystemClock()

    def list_all(self) -> Sequence[Notification]:
        return self._notifications.list_all()

    def add(self, *, title: str, message: str) -> Notification:
        title = require_non_empty(title, "title")
        message = require_non_empty(message, "message")
        created_at = self._clock.now()
        notification_id = self._notifications.create(title=title, message=message, created_at=created_at)
        return Notification(notification_id=notification_id, title=title, message=message, created_at=created_at)

    def delete(self, notification_id) -> Notification:
        deleted = self._notifications.delete(require_int(notification_id, "notificationId"))
        if not deleted:
            raise NotFoundError("Notification not found")
        return deleted
