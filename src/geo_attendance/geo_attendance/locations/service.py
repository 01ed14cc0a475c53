from __future__ import annotations

from ..common.validators import require_float, require_non_empty
from ..core.constants import DEFAULT_PRIMARY_OFFICE_ID
from ..core.exceptions import OfficeNotConfiguredError, ValidationError
from .model import Location
from .repository import LocationRepository


class OfficeService:
    """The single primary office used for geofencing, identified by configuration."""

    def __init__(self, locations: LocationRepository, *, office_id: int = DEFAULT_PRIMARY_OFFICE_ID):
        self._locations = locations
        self._office_id = int(office_id)

    @property
    def office_id(self) -> int:
        return self._office_id

    def get_office(self) -> Location:
        office = self._locations.get_by_id(self._office_id)
        if not office:
            raise OfficeNotConfiguredError("Office location not configured")
        return office

    def set_office(self, *, name: str, latitude, longitude, radius) -> Location:
        name = require_non_empty(name, "locationName")
        lat = require_float(latitude, "latitude")
        lon = require_float(longitude, "longitude")
        radius_m = require_float(radius, "radius")
        if not -90 <= lat <= 90 or not -180 <= lon <= 180:
            raise ValidationError("latitude/longitude out of range")
        if radius_m <= 0:
            raise ValidationError("radius must be positive")

        self._locations.upsert(location_id=self._office_id, name=name, latitude=lat, longitude=lon, radius_m=radius_m)
        return self.get_office()
