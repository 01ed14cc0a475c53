from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in or checkout event. Immutable once written."""

    attendance_id: int
    user_id: int
    location_id: int
    type: AttendanceType
    timestamp: datetime
    latitude: Optional[float]
    longitude: Optional[float]
    status: Optional[str] = None
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "attendanceId": self.attendance_id,
            "userId": self.user_id,
            "locationId": self.location_id,
            "type": self.type.value,
            "timestamp": isoformat(self.timestamp),
            "userLatitude": self.latitude,
            "userLongitude": self.longitude,
            "status": self.status,
            "notes": self.note,
        }


@dataclass(frozen=True)
class AttendanceReceipt:
    """What a successful check-in/checkout returns to the caller."""

    attendance_id: int
    timestamp: datetime
    type: AttendanceType
    distance_m: float

    def to_dict(self) -> dict:
        return {
            "attendanceId": self.attendance_id,
            "timestamp": isoformat(self.timestamp),
        }
