from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TwoFactorCode:
    """One-time login code; valid only while `now < expires_at`."""

    user_id: int
    code: str
    expires_at: datetime

    def is_active(self, now: datetime) -> bool:
        return now < self.expires_at
