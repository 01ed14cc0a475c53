from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence, Tuple

from ..core.enums import AttendanceType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(
        self,
        *,
        user_id: int,
        location_id: int,
        type: AttendanceType,
        latitude: float,
        longitude: float,
        timestamp: datetime,
        note: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Tuple[int, datetime]:
        """Insert one record and return (attendance_id, timestamp)."""

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
