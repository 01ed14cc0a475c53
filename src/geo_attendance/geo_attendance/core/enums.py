from __future__ import annotations

from enum import Enum


class AttendanceType(str, Enum):
    """Kind of attendance event stored in the `type` column."""

    CHECK_IN = "check-in"
    CHECKOUT = "checkout"
