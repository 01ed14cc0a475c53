from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def db_cursor(db: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Yield `(conn, cursor)` for a single transaction.

    Commits when the block exits cleanly. Any exception rolls back and is
    re-raised unchanged, so repositories never see a half-written row.
    """
    conn = db.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
    except Exception:
        conn.rollback()
        raise
    else:
        conn.commit()
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Row]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Row]:
    return list(cur.fetchall() or ())
