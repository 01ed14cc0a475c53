from __future__ import annotations

from datetime import datetime
from typing import Protocol


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Clock backed by the server's local time (matches DATETIME columns)."""

    def now(self) -> datetime:
        return now_local().replace(microsecond=0)


def isoformat(value: datetime | None) -> str | None:
    return value.isoformat(sep=" ") if value else None
