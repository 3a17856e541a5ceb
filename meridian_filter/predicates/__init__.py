"""
Value Predicates
================

Bounded Context: Pure comparison rules over attribute values.

Public API
----------
Base:
    ValuePredicate, OperatorType

Variants (predicateType):
    StringPredicate (string), StringMatch
    BooleanPredicate (boolean)
    StringArrayPredicate (string-array), ArrayMatch
    DateTimePredicate (datetime)
    NumberPredicate (number)
    RadialGeofencePredicate (radial)
    RectangularGeofencePredicate (rectangular)
    ObjectValueKeyPredicate (object-value-key)
    ValueEmptyPredicate (value-empty)
    ValueNotEmptyPredicate (value-not-empty)

Dispatch:
    PREDICATE_REGISTRY, decode_predicate, encode_predicate
"""

from .base import OperatorType, ValuePredicate, as_number, is_empty, to_epoch_millis
from .string import ArrayMatch, StringArrayPredicate, StringMatch, StringPredicate
from .scalar import BooleanPredicate, DateTimePredicate, NumberPredicate
from .geofence import GeofencePredicate, RadialGeofencePredicate, RectangularGeofencePredicate
from .value import ObjectValueKeyPredicate, ValueEmptyPredicate, ValueNotEmptyPredicate
from .registry import PREDICATE_REGISTRY, decode_predicate, encode_predicate

__all__ = [
    # Base
    'ValuePredicate',
    'OperatorType',
    'as_number',
    'is_empty',
    'to_epoch_millis',
    # Variants
    'StringPredicate',
    'StringMatch',
    'BooleanPredicate',
    'StringArrayPredicate',
    'ArrayMatch',
    'DateTimePredicate',
    'NumberPredicate',
    'GeofencePredicate',
    'RadialGeofencePredicate',
    'RectangularGeofencePredicate',
    'ObjectValueKeyPredicate',
    'ValueEmptyPredicate',
    'ValueNotEmptyPredicate',
    # Dispatch
    'PREDICATE_REGISTRY',
    'decode_predicate',
    'encode_predicate',
]
