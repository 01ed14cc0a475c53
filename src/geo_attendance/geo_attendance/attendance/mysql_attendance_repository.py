from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple

from ..core.enums import AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT attendance_id, user_id, location_id, type, `timestamp`, user_latitude, user_longitude, status, notes
    FROM attendance
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        location_id=int(r["location_id"]),
        type=AttendanceType(r["type"]),
        timestamp=r["timestamp"],
        latitude=r.get("user_latitude"),
        longitude=r.get("user_longitude"),
        status=r.get("status"),
        note=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        user_id: int,
        location_id: int,
        type: AttendanceType,
        latitude: float,
        longitude: float,
        timestamp: datetime,
        note: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Tuple[int, datetime]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(user_id, location_id, type, `timestamp`, user_latitude, user_longitude, status, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), int(location_id), type.value, timestamp, latitude, longitude, status, note),
            )
            return int(cur.lastrowid), timestamp

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY `timestamp` DESC")
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE user_id=%s ORDER BY `timestamp` DESC", (int(user_id),))
            return [_to_record(r) for r in fetchall(cur)]
