from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_user(self, user_id: int, fields: dict) -> bool:
        """Partial update; keys are column names (name, username_email, password_hash, role, nim_nip)."""

        raise NotImplementedError

    def update_password(self, user_id: int, password_hash: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def list_by_reference_prefix(self, prefix: str) -> Sequence[User]:
        raise NotImplementedError
