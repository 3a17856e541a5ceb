"""
Geodesic Shapes Module
======================

Pure geographic representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Haversine great-circle distance on a spherical earth
- Vectorised numpy queries for batches of points
- Thread-safe by design (immutability)
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import numpy as np


EARTH_RADIUS_M = 6371008.8
"""Mean earth radius in metres (IUGG)."""

# Boundary tolerance for distance comparisons, in metres
_DISTANCE_TOLERANCE_M = 1e-6


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


@dataclass(frozen=True)
class GeoPoint:
    """
    Immutable WGS84 point.

    Attributes:
        lat: Latitude in degrees [-90, 90]
        lng: Longitude in degrees [-180, 180]
    """

    lat: float
    lng: float

    def __post_init__(self):
        """Validate coordinates."""
        if not _is_number(self.lat) or not _is_number(self.lng):
            raise ValueError(f"Coordinates must be finite numbers, got ({self.lat!r}, {self.lng!r})")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude must be in [-90, 90], got {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude must be in [-180, 180], got {self.lng}")


def parse_geo_point(value: Any) -> Optional[GeoPoint]:
    """
    Interpret an attribute value as a point.

    Accepted shapes:
        - GeoPoint
        - GeoJSON Point: {"type": "Point", "coordinates": [lng, lat]}
        - {"lat": ..., "lng": ...} or {"latitude": ..., "longitude": ...}

    Returns:
        GeoPoint, or None when the value is not a valid point
    """
    if isinstance(value, GeoPoint):
        return value
    if not isinstance(value, dict):
        return None

    if value.get("type") == "Point":
        coordinates = value.get("coordinates")
        if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
            return None
        lng, lat = coordinates[0], coordinates[1]
    elif "lat" in value and "lng" in value:
        lat, lng = value["lat"], value["lng"]
    elif "latitude" in value and "longitude" in value:
        lat, lng = value["latitude"], value["longitude"]
    else:
        return None

    try:
        return GeoPoint(lat=lat, lng=lng)
    except (ValueError, OverflowError):
        return None


def haversine_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in metres."""
    lat1, lng1, lat2, lng2 = np.radians([a.lat, a.lng, b.lat, b.lng])
    h = (
        np.sin((lat2 - lat1) / 2) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lng2 - lng1) / 2) ** 2
    )
    return float(2 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0))))


def _points_array(points: Iterable[GeoPoint]) -> np.ndarray:
    """Nx2 array of (lat, lng) degrees."""
    coords = [(p.lat, p.lng) for p in points]
    return np.array(coords, dtype=float).reshape(-1, 2)


@dataclass(frozen=True)
class GeoCircle:
    """
    Immutable circle on the earth surface.

    Attributes:
        center: Circle center
        radius_m: Radius in metres (> 0)
    """

    center: GeoPoint
    radius_m: float

    def __post_init__(self):
        """Validate radius."""
        if not _is_number(self.radius_m) or self.radius_m <= 0:
            raise ValueError(f"radius_m must be > 0, got {self.radius_m!r}")

    def contains_point(self, point: GeoPoint) -> bool:
        """
        Check if point lies within the circle (boundary inclusive).

        Args:
            point: Point to test

        Returns:
            True if the great-circle distance to the center is <= radius
        """
        return haversine_m(self.center, point) <= self.radius_m + _DISTANCE_TOLERANCE_M

    def contains_points(self, points: Iterable[GeoPoint]) -> np.ndarray:
        """
        Vectorised contains_point.

        Returns:
            Boolean mask of shape (N,) where True = inside circle
        """
        coords = _points_array(points)
        if len(coords) == 0:
            return np.array([], dtype=bool)

        lat = np.radians(coords[:, 0])
        lng = np.radians(coords[:, 1])
        lat0 = math.radians(self.center.lat)
        lng0 = math.radians(self.center.lng)

        h = (
            np.sin((lat - lat0) / 2) ** 2
            + np.cos(lat0) * np.cos(lat) * np.sin((lng - lng0) / 2) ** 2
        )
        distances = 2 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0)))
        return distances <= self.radius_m + _DISTANCE_TOLERANCE_M


@dataclass(frozen=True)
class GeoBox:
    """
    Immutable axis-aligned latitude/longitude box (bounds inclusive).

    Attributes:
        lat_min, lng_min: South-west corner
        lat_max, lng_max: North-east corner
    """

    lat_min: float
    lng_min: float
    lat_max: float
    lng_max: float

    def __post_init__(self):
        """Validate corners."""
        GeoPoint(self.lat_min, self.lng_min)
        GeoPoint(self.lat_max, self.lng_max)
        if self.lat_min > self.lat_max:
            raise ValueError(f"lat_min {self.lat_min} must be <= lat_max {self.lat_max}")
        if self.lng_min > self.lng_max:
            raise ValueError(f"lng_min {self.lng_min} must be <= lng_max {self.lng_max}")

    @classmethod
    def from_corners(cls, a: GeoPoint, b: GeoPoint) -> 'GeoBox':
        """Box spanned by any two opposite corners."""
        return cls(
            lat_min=min(a.lat, b.lat),
            lng_min=min(a.lng, b.lng),
            lat_max=max(a.lat, b.lat),
            lng_max=max(a.lng, b.lng),
        )

    def contains_point(self, point: GeoPoint) -> bool:
        return (
            self.lat_min <= point.lat <= self.lat_max
            and self.lng_min <= point.lng <= self.lng_max
        )

    def contains_points(self, points: Iterable[GeoPoint]) -> np.ndarray:
        """
        Vectorised contains_point.

        Returns:
            Boolean mask of shape (N,) where True = inside box
        """
        coords = _points_array(points)
        if len(coords) == 0:
            return np.array([], dtype=bool)

        lat, lng = coords[:, 0], coords[:, 1]
        return (
            (lat >= self.lat_min) & (lat <= self.lat_max)
            & (lng >= self.lng_min) & (lng <= self.lng_max)
        )
