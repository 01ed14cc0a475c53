from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

# (name, email, password, role, nim_nip)
DEMO_USERS = (
    ("Alice Johnson", "alice@example.com", "alice123", "student", "NIM12345"),
    ("Bob Smith", "bob@example.com", "bob12345", "student", "NIM12346"),
    ("Carol Lee", "carol@example.com", "carol123", "teacher", "NIP98765"),
    ("David Kim", "david@example.com", "david123", "student", "NIM12347"),
    ("Eva Martinez", "eva@example.com", "eva12345", "teacher", "NIP98766"),
)

_DB_SELECTION = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b[^;]*;")
# Quoted strings, line comments, or a statement terminator.
_SQL_TOKEN = re.compile(r"'(?:\\.|''|[^'\\])*'|\"(?:\\.|[^\"\\])*\"|--[^\n]*|#[^\n]*|;")


def _connect(target: DBConfig, *, with_database: bool = True):
    params = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "connection_timeout": target.connect_timeout,
    }
    if with_database:
        params["database"] = target.database
    return mysql.connector.connect(**params)


def split_sql(script: str) -> Iterator[str]:
    """Yield the statements of a SQL script with comments removed.

    `CREATE DATABASE` / `USE` lines are dropped so a script runs against
    whichever database the settings name.
    """
    script = _DB_SELECTION.sub("", script)
    current: list[str] = []
    pos = 0
    for match in _SQL_TOKEN.finditer(script):
        current.append(script[pos:match.start()])
        token = match.group()
        if token == ";":
            statement = "".join(current).strip()
            if statement:
                yield statement
            current = []
        elif not token.startswith(("--", "#")):
            current.append(token)
        pos = match.end()
    current.append(script[pos:])
    statement = "".join(current).strip()
    if statement:
        yield statement


def _run_script(target: DBConfig, path: Path) -> int:
    conn = _connect(target)
    try:
        cur = conn.cursor()
        executed = 0
        for statement in split_sql(path.read_text(encoding="utf-8")):
            cur.execute(statement)
            executed += 1
        conn.commit()
    except mysql.connector.Error:
        conn.rollback()
        raise
    finally:
        conn.close()
    logger.info("Applied %s (%d statements) to %s", path.name, executed, target.describe())
    return executed


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_script(DBConfig.from_dict(db_config), Path(schema_path))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_script(DBConfig.from_dict(db_config), Path(seed_path))


def ensure_demo_users(db_config: dict) -> int:
    """Upsert the demo accounts, storing salted password hashes. Safe to re-run."""
    target = DBConfig.from_dict(db_config)
    rows = [
        (name, email, generate_password_hash(password), role, nim_nip)
        for name, email, password, role, nim_nip in DEMO_USERS
    ]
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.executemany(
            """
            INSERT INTO users (name, username_email, password_hash, role, nim_nip)
            VALUES (%s, %s, %s, %s, %s)
            ON DUPLICATE KEY UPDATE
                name = VALUES(name),
                password_hash = VALUES(password_hash),
                role = VALUES(role),
                nim_nip = VALUES(nim_nip)
            """,
            rows,
        )
        conn.commit()
    finally:
        conn.close()
    return len(rows)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()
