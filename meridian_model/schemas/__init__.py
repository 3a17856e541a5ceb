"""
Meridian Model Schemas
======================

Bounded Context: Data Structures

This module defines immutable, typed data structures for attribute state
change events.

Design:
- Frozen dataclasses (immutability)
- Type hints for all fields
- to_dict() for JSON serialization
- from_dict() for deserialization

Public API
----------
Addressing & State:
    AttributeRef: (entity id, attribute name) pair
    AttributeState: AttributeRef + optional value

Events:
    Source: Enum (CLIENT, INTERNAL, SENSOR)
    AttributeEvent: Timestamped AttributeState

Metadata:
    EventEnvelope: Event + out-of-band headers
    HEADER_SOURCE: Header name carrying the Source

Example:
    >>> from meridian_model.schemas import AttributeEvent, EventEnvelope, Source
    >>> event = AttributeEvent.of("pump-1", "running", True)
    >>> envelope = EventEnvelope.wrap(event, Source.SENSOR)
"""

from .attribute import AttributeRef, AttributeState
from .event import AttributeEvent, Source, now_millis
from .envelope import EventEnvelope, HEADER_SOURCE

__all__ = [
    # Addressing & state
    'AttributeRef',
    'AttributeState',
    # Events
    'AttributeEvent',
    'Source',
    'now_millis',
    # Metadata
    'EventEnvelope',
    'HEADER_SOURCE',
]
