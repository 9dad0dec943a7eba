"""Great-circle distance helpers used for geotargeted notifications."""

from __future__ import annotations

import math
from typing import Final

EARTH_RADIUS_KM: Final[float] = 6371.0
DEFAULT_RADIUS_KM: Final[float] = 5.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Return the Haversine distance in kilometers between two points in degrees."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def is_within_radius(
    origin_lat: float,
    origin_lng: float,
    lat: float,
    lng: float,
    radius_km: float,
) -> bool:
    """Return ``True`` when the point lies at most ``radius_km`` from the origin."""

    return haversine_km(origin_lat, origin_lng, lat, lng) <= radius_km


__all__ = ["DEFAULT_RADIUS_KM", "EARTH_RADIUS_KM", "haversine_km", "is_within_radius"]
