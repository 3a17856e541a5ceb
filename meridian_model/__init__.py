"""
Meridian Attribute Model
========================

Bounded Context: Attribute Addressing, State & Events

This package provides the value model of attribute state changes for the
Meridian asset platform: which attribute changed, to what value, when, and
(out-of-band) who triggered it.

Architecture:
- schemas/: Immutable data structures with type safety

Design Philosophy:
- Immutability: frozen dataclasses, passed by value, never mutated
- Type Safety: construction fails fast on missing or ill-typed parts
- Provenance out-of-band: Source rides in an EventEnvelope, not in the event

Public API
----------
    AttributeRef, AttributeState
    AttributeEvent, Source
    EventEnvelope, HEADER_SOURCE

Example:
    >>> from meridian_model import AttributeEvent, AttributeRef
    >>>
    >>> ref = AttributeRef("kitchen-sensor", "temperature")
    >>> event = AttributeEvent.from_ref(ref, 21.5)
    >>> event.to_dict()["attributeState"]["value"]
    21.5
"""

# Version
__version__ = "1.0.0"

from .schemas import (
    AttributeRef,
    AttributeState,
    AttributeEvent,
    Source,
    EventEnvelope,
    HEADER_SOURCE,
)

__all__ = [
    '__version__',
    'AttributeRef',
    'AttributeState',
    'AttributeEvent',
    'Source',
    'EventEnvelope',
    'HEADER_SOURCE',
]
