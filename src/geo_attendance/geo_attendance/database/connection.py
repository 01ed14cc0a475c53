from __future__ import annotations

from dataclasses import dataclass

import mysql.connector

DEFAULT_CONNECT_TIMEOUT_SECONDS = 10


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host") or "localhost"),
            port=int(db_config.get("port") or 3306),
            user=str(db_config.get("user") or "root"),
            password=str(db_config.get("password") or ""),
            database=str(db_config.get("database") or "geo_attendance"),
            connect_timeout=int(db_config.get("connect_timeout") or DEFAULT_CONNECT_TIMEOUT_SECONDS),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Opens a fresh MySQL connection for every repository call.

    Built once by the container; repositories hold a reference instead of
    reaching for a module-level handle.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self):
        cfg = self._config
        return mysql.connector.connect(
            host=cfg.host,
            port=cfg.port,
            user=cfg.user,
            password=cfg.password,
            database=cfg.database,
            connection_timeout=cfg.connect_timeout,
        )
