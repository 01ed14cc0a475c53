from __future__ import annotations

import secrets
import string

from ..core.constants import TWO_FACTOR_CODE_LENGTH


def generate_numeric_code(length: int = TWO_FACTOR_CODE_LENGTH) -> str:
    """Uniform random digits; leading zeros are kept."""
    return "".join(secrets.choice(string.digits) for _ in range(length))
