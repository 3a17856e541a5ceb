"""
Meridian Event Filtering
========================

Bounded Context: Event/Predicate Filtering for Attribute Events

This package decides which AttributeEvents reach a subscriber: typed value
predicates, event filters built on them, and a pipeline combining filters.

Architecture:
- predicates/: Value comparison rules (string, number, date-time, geofence, ...)
- geometry/: Pure geodesic shapes backing the geofence predicates
- registry.py: Discriminator → decoder tables (fail on unknown types)
- filters.py: EventFilter, EntityIdFilter, AttributePredicateFilter
- pipeline.py: FilterPipeline (ALL / ANY)
- config.py: YAML subscription configuration
- logging/: Structured JSON logging

Design Philosophy:
- Pure evaluation: no I/O, no shared mutable state, never raises on bad input
- Fail fast on construction and deserialization
- One registry per polymorphic family

Example:
    >>> from meridian_model import AttributeEvent
    >>> from meridian_filter import (
    ...     FilterPipeline, EntityIdFilter, AttributePredicateFilter,
    ...     NumberPredicate, OperatorType, decode_filter,
    ... )
    >>>
    >>> hot = decode_filter({
    ...     "filterType": "attribute-predicate",
    ...     "attributeName": "temperature",
    ...     "predicate": {"predicateType": "number", "value": 30, "operator": "GREATER_THAN"},
    ... })
    >>> pipeline = FilterPipeline([EntityIdFilter(("kitchen-sensor",)), hot])
    >>> pipeline.apply(AttributeEvent.of("kitchen-sensor", "temperature", 31.5))
    True
"""

# Version
__version__ = "1.0.0"

from .registry import DeserializationError, TypeRegistry, UnknownTypeError
from .predicates import (
    ValuePredicate,
    OperatorType,
    StringPredicate,
    StringMatch,
    BooleanPredicate,
    StringArrayPredicate,
    ArrayMatch,
    DateTimePredicate,
    NumberPredicate,
    RadialGeofencePredicate,
    RectangularGeofencePredicate,
    ObjectValueKeyPredicate,
    ValueEmptyPredicate,
    ValueNotEmptyPredicate,
    PREDICATE_REGISTRY,
    decode_predicate,
    encode_predicate,
)
from .filters import (
    EventFilter,
    EntityIdFilter,
    AttributePredicateFilter,
    FILTER_REGISTRY,
    decode_filter,
    encode_filter,
)
from .pipeline import FilterPipeline, MatchMode
from .config import FilteringConfig, SubscriptionConfig
from .logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    '__version__',
    # Registry
    'TypeRegistry',
    'DeserializationError',
    'UnknownTypeError',
    # Predicates
    'ValuePredicate',
    'OperatorType',
    'StringPredicate',
    'StringMatch',
    'BooleanPredicate',
    'StringArrayPredicate',
    'ArrayMatch',
    'DateTimePredicate',
    'NumberPredicate',
    'RadialGeofencePredicate',
    'RectangularGeofencePredicate',
    'ObjectValueKeyPredicate',
    'ValueEmptyPredicate',
    'ValueNotEmptyPredicate',
    'PREDICATE_REGISTRY',
    'decode_predicate',
    'encode_predicate',
    # Filters
    'EventFilter',
    'EntityIdFilter',
    'AttributePredicateFilter',
    'FILTER_REGISTRY',
    'decode_filter',
    'encode_filter',
    # Pipeline
    'FilterPipeline',
    'MatchMode',
    # Config
    'FilteringConfig',
    'SubscriptionConfig',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
