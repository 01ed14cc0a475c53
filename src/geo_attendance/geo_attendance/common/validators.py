from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(str(value)) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return str(value)


def require_int(value: Any, field_name: str) -> int:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def require_float(value: Any, field_name: str) -> float:
    """Accept finite numbers or numeric strings; zero is a valid coordinate."""
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(result):
        raise ValidationError(f"{field_name} must be a finite number")
    return result


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
