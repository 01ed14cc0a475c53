from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import TwoFactorCode
from .repository import TwoFactorCodeRepository


class MySQLTwoFactorCodeRepository(TwoFactorCodeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def delete_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_2fa_codes WHERE user_id=%s", (int(user_id),))
            return int(cur.rowcount)

    def insert(self, *, user_id: int, code: str, expires_at: datetime) -> None:
        # user_id is the primary key: concurrent issuance ends with the last writer's code.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_2fa_codes(user_id, code, expires_at)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE code=VALUES(code), expires_at=VALUES(expires_at)
                """,
                (int(user_id), code, expires_at),
            )

    def find_active(self, *, user_id: int, code: str, now: datetime) -> Optional[TwoFactorCode]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, code, expires_at
                FROM user_2fa_codes
                WHERE user_id=%s AND code=%s AND expires_at > %s
                """,
                (int(user_id), code, now),
            )
            row = fetchone(cur)
            if not row:
                return None
            return TwoFactorCode(user_id=int(row["user_id"]), code=row["code"], expires_at=row["expires_at"])

    def delete(self, *, user_id: int, code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_2fa_codes WHERE user_id=%s AND code=%s", (int(user_id), code))
            return cur.rowcount > 0
