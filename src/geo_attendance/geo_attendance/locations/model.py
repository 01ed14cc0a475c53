from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat


@dataclass(frozen=True)
class Location:
    """Office location: center of the geofence and its allowed radius in meters."""

    location_id: int
    name: str
    latitude: float
    longitude: float
    radius_m: float
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "locationId": self.location_id,
            "locationName": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius_m,
            "createdAt": isoformat(self.created_at),
        }
