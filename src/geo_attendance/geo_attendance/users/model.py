from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can log in and record attendance.

    Note: plain data object, no DB access code here. `email` is the unique
    login identifier; `role` is a free-form tag (student, teacher, ...).
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Optional[str] = None
    nim_nip: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "name": self.name,
            "usernameEmail": self.email,
            "role": self.role,
            "nimNip": self.nim_nip,
        }
