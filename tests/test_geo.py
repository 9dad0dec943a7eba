"""Unit tests for the Haversine helpers."""

import math

import pytest

from app.domain.geo import EARTH_RADIUS_KM, haversine_km, is_within_radius

POINTS = [
    (0.0, 0.0),
    (40.4168, -3.7038),
    (-33.8688, 151.2093),
    (51.5074, -0.1278),
    (89.9, 179.9),
]


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_distance_is_symmetric(a, b):
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a), abs=1e-9)


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert haversine_km(*point, *point) == 0


def test_one_degree_of_longitude_on_equator():
    expected = EARTH_RADIUS_KM * math.radians(1)
    assert haversine_km(0, 0, 0, 1) == pytest.approx(expected)
    assert expected == pytest.approx(111.195, abs=1e-3)


def test_known_city_distance():
    # Madrid to London is roughly 1264 km.
    assert haversine_km(40.4168, -3.7038, 51.5074, -0.1278) == pytest.approx(1264, abs=5)


def test_within_radius_is_inclusive():
    distance = haversine_km(0, 0, 0, 0.045)
    assert is_within_radius(0, 0, 0, 0.045, distance)
    assert not is_within_radius(0, 0, 0, 0.045, distance - 1e-9)
