"""
Test Geofence Predicates & Geometry
===================================

Usage:
    pytest test_geofence.py
"""

import math

import numpy as np
import pytest

from meridian_filter import RadialGeofencePredicate, RectangularGeofencePredicate
from meridian_filter.geometry import (
    EARTH_RADIUS_M,
    GeoBox,
    GeoPoint,
    haversine_m,
    parse_geo_point,
)


def point_north_of_origin(distance_m: float) -> dict:
    """GeoJSON point `distance_m` metres north of (0, 0)."""
    return {"type": "Point", "coordinates": [0.0, math.degrees(distance_m / EARTH_RADIUS_M)]}


def test_parse_point_shapes():
    assert parse_geo_point({"type": "Point", "coordinates": [4.89, 52.37]}) == GeoPoint(52.37, 4.89)
    assert parse_geo_point({"lat": 52.37, "lng": 4.89}) == GeoPoint(52.37, 4.89)
    assert parse_geo_point({"latitude": 52.37, "longitude": 4.89}) == GeoPoint(52.37, 4.89)
    assert parse_geo_point(GeoPoint(1, 2)) == GeoPoint(1, 2)


@pytest.mark.parametrize("value", [
    None,
    "52.37,4.89",
    [4.89, 52.37],
    {"type": "Point", "coordinates": [4.89]},
    {"lat": 91, "lng": 0},
    {"lat": "52", "lng": "4"},
    {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
])
def test_parse_point_rejects_other_values(value):
    assert parse_geo_point(value) is None


def test_haversine_known_distance():
    """One degree of latitude is ~111.2 km on the mean sphere."""
    distance = haversine_m(GeoPoint(0, 0), GeoPoint(1, 0))

    assert distance == pytest.approx(math.radians(1) * EARTH_RADIUS_M)
    assert 111_000 < distance < 111_400


def test_radial_inside_outside_boundary():
    predicate = RadialGeofencePredicate(radius=100, lat=0.0, lng=0.0)

    assert predicate.matches(point_north_of_origin(50))
    assert not predicate.matches(point_north_of_origin(150))
    assert predicate.matches(point_north_of_origin(100))


def test_radial_negated():
    predicate = RadialGeofencePredicate(radius=100, lat=0.0, lng=0.0, negated=True)

    assert not predicate.matches(point_north_of_origin(50))
    assert predicate.matches(point_north_of_origin(150))
    assert not predicate.matches("not a point")


def test_radial_validation():
    with pytest.raises(ValueError):
        RadialGeofencePredicate(radius=0, lat=0, lng=0)
    with pytest.raises(ValueError):
        RadialGeofencePredicate(radius=10, lat=95, lng=0)
    with pytest.raises(ValueError):
        RadialGeofencePredicate(radius=10, lat=0, lng=-181)


def test_rectangular_bounds_are_inclusive():
    predicate = RectangularGeofencePredicate(lat_min=50.0, lng_min=3.0, lat_max=53.5, lng_max=7.2)

    assert predicate.matches({"lat": 52.37, "lng": 4.89})
    assert predicate.matches({"lat": 50.0, "lng": 3.0})
    assert predicate.matches({"lat": 53.5, "lng": 7.2})
    assert not predicate.matches({"lat": 48.85, "lng": 2.35})
    assert not predicate.matches({"status": "ok"})


def test_rectangular_from_corners_normalises():
    a = GeoPoint(53.5, 3.0)
    b = GeoPoint(50.0, 7.2)

    predicate = RectangularGeofencePredicate.from_corners(a, b)

    assert predicate == RectangularGeofencePredicate(50.0, 3.0, 53.5, 7.2)
    assert GeoBox.from_corners(b, a).contains_point(GeoPoint(52.0, 5.0))


def test_rectangular_rejects_inverted_box():
    with pytest.raises(ValueError):
        RectangularGeofencePredicate(lat_min=10, lng_min=0, lat_max=5, lng_max=1)


def test_radial_mask_matches_scalar_evaluation():
    predicate = RadialGeofencePredicate(radius=100, lat=0.0, lng=0.0)
    values = [
        point_north_of_origin(50),
        None,
        point_north_of_origin(150),
        {"lat": 0.0, "lng": 0.0},
        "nowhere",
    ]

    mask = predicate.mask(values)

    assert mask.dtype == bool
    assert mask.tolist() == [predicate.matches(v) for v in values]
    assert mask.tolist() == [True, False, False, True, False]


def test_rectangular_mask_negated():
    predicate = RectangularGeofencePredicate(0.0, 0.0, 1.0, 1.0, negated=True)

    mask = predicate.mask([{"lat": 0.5, "lng": 0.5}, {"lat": 2.0, "lng": 2.0}, 42])

    np.testing.assert_array_equal(mask, np.array([False, True, False]))


def test_mask_of_nothing():
    assert RadialGeofencePredicate(radius=1, lat=0, lng=0).mask([]).shape == (0,)


@pytest.mark.parametrize("value", [
    {"lat": 10**400, "lng": 0},
    {"latitude": 0, "longitude": -10**400},
    {"type": "Point", "coordinates": [0, 10**400]},
])
def test_oversized_integer_coordinates_never_match(value):
    radial = RadialGeofencePredicate(radius=100, lat=0.0, lng=0.0)
    box = RectangularGeofencePredicate(-1.0, -1.0, 1.0, 1.0, negated=True)

    assert parse_geo_point(value) is None
    assert not radial.matches(value)
    assert not box.matches(value)
    assert radial.mask([value, {"lat": 0, "lng": 0}]).tolist() == [False, True]
    assert box.mask([value, {"lat": 5, "lng": 5}]).tolist() == [False, True]


def test_oversized_integer_parameters_rejected():
    with pytest.raises(ValueError):
        RadialGeofencePredicate(radius=10**400, lat=0, lng=0)
    with pytest.raises(ValueError):
        RectangularGeofencePredicate(0, 0, 10**400, 1)
