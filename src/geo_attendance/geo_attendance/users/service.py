from __future__ import annotations

import logging
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_text, require_int, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH, STUDENT_REFERENCE_PREFIX
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..two_factor.service import TwoFactorService
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class AuthService:
    """Use case: first login step (credentials) and password reset.

    A successful `login` only means the user is partially authenticated:
    a 2FA code has been mailed and must be verified via TwoFactorService.
    """

    def __init__(self, users: UserRepository, two_factor: TwoFactorService):
        self._users = users
        self._two_factor = two_factor

    def login(self, email: str, password: str) -> User:
        if not email or not password:
            raise ValidationError("Email and password are required")
        email = require_non_empty(email, "email")
        password = str(password)

        user = self._users.get_by_email(email)
        if not user:
            raise NotFoundError("User not found")

        if not _password_matches(user.password_hash, password):
            raise AuthenticationError("Invalid password")

        self._two_factor.issue_for(user)
        return user

    def reset_password(self, *, user_id, email: str, new_password: str) -> User:
        if not user_id or not email or not new_password:
            raise ValidationError("userId, email and newPassword are required")
        user_id = require_int(user_id, "userId")
        email = require_non_empty(email, "email")
        new_password = require_min_length(new_password, "newPassword", MIN_PASSWORD_LENGTH)

        user = self._users.get_by_id(user_id)
        if not user or user.email != email:
            raise NotFoundError("User not found")

        self._users.update_password(user_id, generate_password_hash(new_password))
        logger.info("Password reset for user_id=%s", user_id)
        return user


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_students(self) -> Sequence[User]:
        return self._users.list_by_reference_prefix(STUDENT_REFERENCE_PREFIX)

    def create_user(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Optional[str] = None,
        nim_nip: Optional[str] = None,
        user_id=None,
    ) -> int:
        name = require_non_empty(name, "name")
        email = require_non_empty(email, "usernameEmail")
        password = require_min_length(password, "password", MIN_PASSWORD_LENGTH)
        if user_id not in (None, ""):
            user_id = require_int(user_id, "userId")
            if self._users.get_by_id(user_id):
                raise ValidationError("userId already exists")
        else:
            user_id = None

        if self._users.get_by_email(email):
            raise ValidationError("usernameEmail already exists")

        return self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=optional_text(role),
            nim_nip=optional_text(nim_nip),
            user_id=user_id,
        )

    def edit_user(
        self,
        user_id,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[str] = None,
        nim_nip: Optional[str] = None,
    ) -> None:
        user_id = require_int(user_id, "userId")
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        fields: dict = {}
        if optional_text(name):
            fields["name"] = optional_text(name)
        if optional_text(email):
            email = optional_text(email)
            other = self._users.get_by_email(email)
            if other and other.user_id != user_id:
                raise ValidationError("usernameEmail already exists")
            fields["username_email"] = email
        if password:
            fields["password_hash"] = generate_password_hash(require_min_length(password, "password", MIN_PASSWORD_LENGTH))
        if optional_text(role):
            fields["role"] = optional_text(role)
        if optional_text(nim_nip):
            fields["nim_nip"] = optional_text(nim_nip)

        if not fields:
            raise ValidationError("No fields to update")

        self._users.update_user(user_id, fields)

    def delete_user(self, user_id) -> None:
        user_id = require_int(user_id, "userId")
        if not self._users.delete_by_id(user_id):
            raise NotFoundError("User not found")
