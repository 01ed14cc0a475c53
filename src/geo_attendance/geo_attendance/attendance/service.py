from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock
from ..common.geo import haversine_distance, is_within_radius
from ..common.validators import optional_text, require_float, require_int
from ..core.enums import AttendanceType
from ..core.exceptions import NotFoundError, OutsideAllowedAreaError
from ..locations.service import OfficeService
from ..users.repository import UserRepository
from .model import AttendanceReceipt, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DistanceFn = Callable[[float, float, float, float], float]


class AttendanceService:
    """Use case: geofenced check-in / checkout.

    Both operations run the same proximity check against the primary office
    and always write a new independent record; there is no pairing of
    check-ins with checkouts and no per-day duplicate prevention.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        offices: OfficeService,
        users: Optional[UserRepository] = None,
        *,
        clock: Clock | None = None,
        distance: DistanceFn = haversine_distance,
    ):
        self._attendance = attendance
        self._offices = offices
        self._users = users
        self._clock = clock or SystemClock()
        self._distance = distance

    def check_in(self, user_id, latitude, longitude, note: Optional[str] = None) -> AttendanceReceipt:
        return self._record(AttendanceType.CHECK_IN, user_id, latitude, longitude, note)

    def check_out(self, user_id, latitude, longitude, note: Optional[str] = None) -> AttendanceReceipt:
        return self._record(AttendanceType.CHECKOUT, user_id, latitude, longitude, note)

    def _record(self, type_: AttendanceType, user_id, latitude, longitude, note) -> AttendanceReceipt:
        user_id = require_int(user_id, "userId")
        lat = require_float(latitude, "userLatitude")
        lon = require_float(longitude, "userLongitude")

        office = self._offices.get_office()

        distance_m = self._distance(lat, lon, office.latitude, office.longitude)
        if not is_within_radius(distance_m, office.radius_m):
            logger.info(
                "Rejected %s for user_id=%s: %.1f m from office (radius %.1f m)",
                type_.value, user_id, distance_m, office.radius_m,
            )
            raise OutsideAllowedAreaError(distance_m, office.radius_m)

        if self._users is not None and not self._users.get_by_id(user_id):
            raise NotFoundError("User not found")

        attendance_id, timestamp = self._attendance.create(
            user_id=user_id,
            location_id=office.location_id,
            type=type_,
            latitude=lat,
            longitude=lon,
            timestamp=self._clock.now(),
            note=optional_text(note),
        )
        return AttendanceReceipt(attendance_id=attendance_id, timestamp=timestamp, type=type_, distance_m=distance_m)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def list_for_user(self, user_id) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_user(require_int(user_id, "userId"))
