"""Common validation helpers for push subscription use cases."""


def ensure_location_pair(
    latitude: float | None, longitude: float | None
) -> tuple[float | None, float | None]:
    """Return the coordinates or raise ``ValueError`` when only one is set."""

    if (latitude is None) != (longitude is None):
        raise ValueError("latitude and longitude must be provided together")
    if latitude is None:
        return None, None
    if not -90 <= latitude <= 90:
        raise ValueError("latitude must be between -90 and 90")
    if not -180 <= longitude <= 180:
        raise ValueError("longitude must be between -180 and 180")
    return float(latitude), float(longitude)


def ensure_positive_radius(radius_km: float | None) -> float | None:
    """Return ``radius_km`` or raise ``ValueError`` when it is not positive."""

    if radius_km is None:
        return None
    if radius_km <= 0:
        raise ValueError("radiusKm must be greater than zero")
    return float(radius_km)
