from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Location
from .repository import LocationRepository


class MySQLLocationRepository(LocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, location_id: int) -> Optional[Location]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT location_id, location_name, latitude, longitude, radius, created_at
                FROM locations
                WHERE location_id=%s
                """,
                (int(location_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Location(
                location_id=int(r["location_id"]),
                name=r["location_name"],
                latitude=float(r["latitude"]),
                longitude=float(r["longitude"]),
                radius_m=float(r["radius"] or 0),
                created_at=r.get("created_at"),
            )

    def upsert(self, *, location_id: int, name: str, latitude: float, longitude: float, radius_m: float) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO locations(location_id, location_name, latitude, longitude, radius)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    location_name=VALUES(location_name), latitude=VALUES(latitude),
                    longitude=VALUES(longitude), radius=VALUES(radius)
                """,
                (int(location_id), name, float(latitude), float(longitude), float(radius_m)),
            )
