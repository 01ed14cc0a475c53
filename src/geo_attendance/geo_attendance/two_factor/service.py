from __future__ import annotations

import logging
from datetime import timedelta
from typing import Callable

from ..common.datetime_utils import Clock, SystemClock
from ..common.validators import require_int, require_non_empty
from ..core.constants import DEFAULT_TWO_FACTOR_TTL_MINUTES
from ..core.exceptions import InvalidOrExpiredCodeError, NotFoundError
from ..mail.sender import EmailSender
from ..users.model import User
from ..users.repository import UserRepository
from .code_generator import generate_numeric_code
from .model import TwoFactorCode
from .repository import TwoFactorCodeRepository

logger = logging.getLogger(__name__)


class TwoFactorService:
    """Use case: issue, resend and verify email 2FA codes.

    Issuing always deletes the user's previous code before storing the new
    one, so only the most recently issued code can verify.
    """

    def __init__(
        self,
        codes: TwoFactorCodeRepository,
        users: UserRepository,
        mailer: EmailSender,
        *,
        clock: Clock | None = None,
        code_generator: Callable[[], str] = generate_numeric_code,
        ttl_minutes: int = DEFAULT_TWO_FACTOR_TTL_MINUTES,
    ):
        self._codes = codes
        self._users = users
        self._mailer = mailer
        self._clock = clock or SystemClock()
        self._generate = code_generator
        self._ttl = timedelta(minutes=int(ttl_minutes))

    def issue_for(self, user: User, *, resend: bool = False) -> TwoFactorCode:
        code = self._generate()
        expires_at = self._clock.now() + self._ttl

        self._codes.delete_for_user(user.user_id)
        self._codes.insert(user_id=user.user_id, code=code, expires_at=expires_at)
        logger.info("Issued 2FA code for user_id=%s (expires %s)", user.user_id, expires_at)

        if resend:
            subject, body = "Your new 2FA code", f"Your new 2FA code is: {code}"
        else:
            subject, body = "Your 2FA code", f"Your 2FA code is: {code}"
        self._mailer.send(user.email, subject, body)

        return TwoFactorCode(user_id=user.user_id, code=code, expires_at=expires_at)

    def resend(self, user_id) -> User:
        user_id = require_int(user_id, "userId")
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        self.issue_for(user, resend=True)
        return user

    def verify(self, user_id, code) -> User:
        user_id = require_int(user_id, "userId")
        code = require_non_empty(code, "code")

        record = self._codes.find_active(user_id=user_id, code=code, now=self._clock.now())
        if not record:
            raise InvalidOrExpiredCodeError("Invalid or expired code")

        # Single use: a concurrent verify of the same code loses here.
        if not self._codes.delete(user_id=user_id, code=code):
            raise InvalidOrExpiredCodeError("Invalid or expired code")

        user = self._users.get_by_id(user_id)
        if not user:
            raise InvalidOrExpiredCodeError("Invalid or expired code")

        logger.info("2FA verified for user_id=%s", user_id)
        return user
