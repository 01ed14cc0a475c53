from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def list_all(self) -> Sequence[Notification]:
        raise NotImplementedError

    def create(self, *, title: str, message: str, created_at: datetime) -> int:
        raise NotImplementedError

    def delete(self, notification_id: int) -> Optional[Notification]:
        """Delete and return the removed row, or None if it did not exist."""

        raise NotImplementedError
