from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Notification
from .repository import NotificationRepository


def _to_notification(r: dict) -> Notification:
    return Notification(
        notification_id=int(r["notification_id"]),
        title=r["title"],
        message=r["message"],
        created_at=r["created_at"],
    )


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT notification_id, title, message, created_at
                FROM notifications
                ORDER BY created_at DESC
                """
            )
            return [_to_notification(r) for r in fetchall(cur)]

    def create(self, *, title: str, message: str, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO notifications(title, message, created_at) VALUES(%s,%s,%s)",
                (title, message, created_at),
            )
            return int(cur.lastrowid)

    def delete(self, notification_id: int) -> Optional[Notification]:
        # MySQL has no DELETE ... RETURNING; read and delete in one transaction.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT notification_id, title, message, created_at
                FROM notifications
                WHERE notification_id=%s
                FOR UPDATE
                """,
                (int(notification_id),),
            )
            row = fetchone(cur)
            if not row:
                return None
            cur.execute("DELETE FROM notifications WHERE notification_id=%s", (int(notification_id),))
            return _to_notification(row)
