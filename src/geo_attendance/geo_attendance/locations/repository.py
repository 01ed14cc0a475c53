from __future__ import annotations

from typing import Optional, Protocol

from .model import Location


class LocationRepository(Protocol):
    def get_by_id(self, location_id: int) -> Optional[Location]:
        raise NotImplementedError

    def upsert(self, *, location_id: int, name: str, latitude: float, longitude: float, radius_m: float) -> None:
        raise NotImplementedError
