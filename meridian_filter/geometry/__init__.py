"""
Geometry Layer
==============

Bounded Context: Pure geodesic shapes and spatial queries.

Responsibilities:
- Point parsing from attribute values
- Point-in-circle and point-in-box tests
- NO state, NO predicates, NO serialization
"""

from meridian_filter.geometry.shapes import (
    EARTH_RADIUS_M,
    GeoPoint,
    GeoCircle,
    GeoBox,
    haversine_m,
    parse_geo_point,
)

__all__ = [
    "EARTH_RADIUS_M",
    "GeoPoint",
    "GeoCircle",
    "GeoBox",
    "haversine_m",
    "parse_geo_point",
]
