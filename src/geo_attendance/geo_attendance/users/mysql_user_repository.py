from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, name, username_email, password_hash, role, nim_nip"
_UPDATABLE = ("name", "username_email", "password_hash", "role", "nim_nip")


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["username_email"],
        password_hash=row["password_hash"],
        role=row.get("role"),
        nim_nip=row.get("nim_nip"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE username_email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Optional[str],
        nim_nip: Optional[str],
        user_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            if user_id is None:
                cur.execute(
                    """
                    INSERT INTO users(name, username_email, password_hash, role, nim_nip)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (name, email, password_hash, role, nim_nip),
                )
                return int(cur.lastrowid)

            cur.execute(
                """
                INSERT INTO users(user_id, name, username_email, password_hash, role, nim_nip)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), name, email, password_hash, role, nim_nip),
            )
            return int(user_id)

    def update_user(self, user_id: int, fields: dict) -> bool:
        columns = [c for c in _UPDATABLE if c in fields]
        if not columns:
            return False
        assignments = ", ".join(f"{c}=%s" for c in columns)
        params = [fields[c] for c in columns] + [int(user_id)]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE users SET {assignments} WHERE user_id=%s", tuple(params))
            return cur.rowcount > 0

    def update_password(self, user_id: int, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET password_hash=%s WHERE user_id=%s", (password_hash, int(user_id)))
            return cur.rowcount > 0

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (int(user_id),))
            return cur.rowcount > 0

    def list_by_reference_prefix(self, prefix: str) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE nim_nip LIKE %s ORDER BY name ASC",
                (f"{prefix}%",),
            )
            return [_to_user(r) for r in fetchall(cur)]
