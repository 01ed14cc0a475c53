from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import isoformat


@dataclass(frozen=True)
class Notification:
    """Broadcast message shown to every user (not addressed to one user)."""

    notification_id: int
    title: str
    message: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "notificationId": self.notification_id,
            "title": self.title,
            "message": self.message,
            "createdAt": isoformat(self.created_at),
        }
