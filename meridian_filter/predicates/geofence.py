"""
Geofence Predicates
===================

Point-in-area tests on location attribute values.

Design:
- Geometry is delegated to meridian_filter.geometry (pure, numpy-backed)
- Shapes are built once at construction and cached on the instance
- `negated` inverts the result for a parsable point only; a value that is
  not a point never matches
- `mask()` evaluates a batch of values in one vectorised pass
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Sequence

import numpy as np

from meridian_filter.geometry import GeoBox, GeoCircle, GeoPoint, parse_geo_point
from .base import ValuePredicate, require_bool


class GeofencePredicate(ValuePredicate):
    """Shared evaluation for geofence predicates (subclasses set `_shape`)."""

    negated: bool

    def matches(self, value: Optional[Any]) -> bool:
        point = parse_geo_point(value)
        if point is None:
            return False
        return self._shape.contains_point(point) != self.negated

    def mask(self, values: Sequence[Any]) -> np.ndarray:
        """
        Evaluate many attribute values at once.

        Args:
            values: Attribute values (points or anything else)

        Returns:
            Boolean mask of shape (N,); non-point values are False
        """
        points = [parse_geo_point(value) for value in values]
        valid = np.array([point is not None for point in points], dtype=bool)
        result = np.zeros(len(points), dtype=bool)

        if valid.any():
            inside = self._shape.contains_points([p for p in points if p is not None])
            result[valid] = inside != self.negated

        return result


@dataclass(frozen=True)
class RadialGeofencePredicate(GeofencePredicate):
    """
    Point within `radius` metres of (lat, lng), boundary inclusive.

    Example:
        >>> p = RadialGeofencePredicate(radius=100, lat=0.0, lng=0.0)
        >>> p.matches({"type": "Point", "coordinates": [0.0, 0.0]})
        True
    """
    predicate_type: ClassVar[str] = "radial"

    radius: float
    lat: float
    lng: float
    negated: bool = False

    def __post_init__(self):
        """Validate and build the circle."""
        require_bool("negated", self.negated)
        circle = GeoCircle(center=GeoPoint(self.lat, self.lng), radius_m=self.radius)
        object.__setattr__(self, '_shape', circle)

    @property
    def center(self) -> GeoPoint:
        return self._shape.center

    def _wire_fields(self) -> Dict[str, Any]:
        return {
            'radius': self.radius,
            'lat': self.lat,
            'lng': self.lng,
            'negated': self.negated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RadialGeofencePredicate':
        return cls(
            radius=data['radius'],
            lat=data['lat'],
            lng=data['lng'],
            negated=data.get('negated', False),
        )


@dataclass(frozen=True)
class RectangularGeofencePredicate(GeofencePredicate):
    """
    Point inside the latitude/longitude box, bounds inclusive.

    Use from_corners() when the corner order is not known.
    """
    predicate_type: ClassVar[str] = "rectangular"

    lat_min: float
    lng_min: float
    lat_max: float
    lng_max: float
    negated: bool = False

    def __post_init__(self):
        """Validate and build the box."""
        require_bool("negated", self.negated)
        box = GeoBox(
            lat_min=self.lat_min,
            lng_min=self.lng_min,
            lat_max=self.lat_max,
            lng_max=self.lng_max,
        )
        object.__setattr__(self, '_shape', box)

    @classmethod
    def from_corners(
        cls,
        a: GeoPoint,
        b: GeoPoint,
        negated: bool = False
    ) -> 'RectangularGeofencePredicate':
        """Box spanned by two opposite corners in any order."""
        box = GeoBox.from_corners(a, b)
        return cls(box.lat_min, box.lng_min, box.lat_max, box.lng_max, negated=negated)

    def _wire_fields(self) -> Dict[str, Any]:
        return {
            'latMin': self.lat_min,
            'lngMin': self.lng_min,
            'latMax': self.lat_max,
            'lngMax': self.lng_max,
            'negated': self.negated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RectangularGeofencePredicate':
        return cls(
            lat_min=data['latMin'],
            lng_min=data['lngMin'],
            lat_max=data['latMax'],
            lng_max=data['lngMax'],
            negated=data.get('negated', False),
        )
