"""Great-circle distance on a spherical Earth."""

from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_M


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in meters between two (latitude, longitude) points in decimal degrees.

    Coordinates are not range-checked.
    """
    lat1_rad = math.radians(float(lat1))
    lon1_rad = math.radians(float(lon1))
    lat2_rad = math.radians(float(lat2))
    lon2_rad = math.radians(float(lon2))

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    # Rounding can push `a` a hair above 1 for antipodal points.
    c = 2 * math.asin(math.sqrt(min(1.0, a)))

    return EARTH_RADIUS_M * c


def is_within_radius(distance_m: float, radius_m: float) -> bool:
    """Geofence rule: a point exactly on the boundary is inside. NaN is never inside."""
    return distance_m <= radius_m
