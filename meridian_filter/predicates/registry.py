"""
Predicate wire-format dispatch.

PREDICATE_REGISTRY is the single table from "predicateType" to decoder.
Adding a predicate variant means adding one entry to _VARIANTS.
"""

from typing import Any, Dict, Mapping

from meridian_filter.registry import TypeRegistry
from .base import ValuePredicate
from .geofence import RadialGeofencePredicate, RectangularGeofencePredicate
from .scalar import BooleanPredicate, DateTimePredicate, NumberPredicate
from .string import StringArrayPredicate, StringPredicate
from .value import ObjectValueKeyPredicate, ValueEmptyPredicate, ValueNotEmptyPredicate


_VARIANTS = (
    (StringPredicate, "String match (exact, begin, end, contains)"),
    (BooleanPredicate, "Boolean equality"),
    (StringArrayPredicate, "String membership in an array value (any/all)"),
    (DateTimePredicate, "Date-time comparison"),
    (NumberPredicate, "Numeric comparison"),
    (RadialGeofencePredicate, "Point within radius of a center"),
    (RectangularGeofencePredicate, "Point within a lat/lng box"),
    (ObjectValueKeyPredicate, "Key presence on an object value"),
    (ValueEmptyPredicate, "Value absent or empty"),
    (ValueNotEmptyPredicate, "Value present and not empty"),
)


def _build_registry() -> TypeRegistry[ValuePredicate]:
    registry: TypeRegistry[ValuePredicate] = TypeRegistry("predicateType")
    for variant, description in _VARIANTS:
        registry.register(variant.predicate_type, variant.from_dict, description)
    return registry


PREDICATE_REGISTRY = _build_registry()


def decode_predicate(data: Mapping[str, Any]) -> ValuePredicate:
    """
    Decode a predicate from its wire form.

    Raises:
        UnknownTypeError: If "predicateType" is not registered
        DeserializationError: If the payload is malformed
    """
    return PREDICATE_REGISTRY.decode(data)


def encode_predicate(predicate: ValuePredicate) -> Dict[str, Any]:
    """Encode a predicate to its wire form."""
    return predicate.to_dict()
