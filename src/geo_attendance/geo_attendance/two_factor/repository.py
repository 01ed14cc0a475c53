from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import TwoFactorCode


class TwoFactorCodeRepository(Protocol):
    """Persisted mapping user -> {code, expiry}.

    Each call is expected to be atomic on its own; the store keeps at most one
    row per user so a later `insert` replaces an earlier one.
    """

    def delete_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def insert(self, *, user_id: int, code: str, expires_at: datetime) -> None:
        raise NotImplementedError

    def find_active(self, *, user_id: int, code: str, now: datetime) -> Optional[TwoFactorCode]:
        raise NotImplementedError

    def delete(self, *, user_id: int, code: str) -> bool:
        raise NotImplementedError
