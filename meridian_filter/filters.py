"""
Event Filters
=============

Bounded Context: Event Routing Decisions

An EventFilter decides whether one AttributeEvent should be delivered.

Design:
- EventFilter (abstract): constant `filter_type` wire discriminator + pure apply()
- EntityIdFilter: event entity id is one of the configured ids
- AttributePredicateFilter: attribute scope test + ValuePredicate on the value
- FILTER_REGISTRY: single table from "filterType" to decoder

Architecture:
    EventFilter (abstract)
        ↓
    EntityIdFilter, AttributePredicateFilter (concrete)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from meridian_model import AttributeEvent

from .predicates import ValuePredicate, decode_predicate
from .registry import TypeRegistry


class EventFilter(ABC):
    """
    Abstract event filter.

    apply() is a total, side-effect-free function over well-formed events.
    """

    filter_type: ClassVar[str]

    @abstractmethod
    def apply(self, event: AttributeEvent) -> bool:
        """True when the event should be delivered."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict (including "filterType")."""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventFilter':
        """Deserialize from dict."""


@dataclass(frozen=True)
class EntityIdFilter(EventFilter):
    """
    Match events whose entity id is one of `entity_ids`.

    Attributes:
        entity_ids: Ordered ids; duplicates are harmless, empty matches nothing

    Example:
        >>> f = EntityIdFilter(("pump-1", "pump-2"))
        >>> f.apply(AttributeEvent.of("pump-1", "running", True))
        True
    """
    filter_type: ClassVar[str] = "attribute-entity-id"

    entity_ids: Tuple[str, ...] = ()

    def __post_init__(self):
        """Freeze ids and build the membership set."""
        if isinstance(self.entity_ids, str):
            raise TypeError("entity_ids must be a sequence of str, got str")
        entity_ids = tuple(self.entity_ids)
        for entity_id in entity_ids:
            if not isinstance(entity_id, str):
                raise TypeError(f"entity_ids must be str, got {type(entity_id).__name__}")
        object.__setattr__(self, 'entity_ids', entity_ids)
        object.__setattr__(self, '_id_set', frozenset(entity_ids))

    def apply(self, event: AttributeEvent) -> bool:
        return event.entity_id in self._id_set

    def __str__(self) -> str:
        return f"EntityIdFilter{{entityId={list(self.entity_ids)}}}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'filterType': self.filter_type,
            'entityId': list(self.entity_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EntityIdFilter':
        return cls(entity_ids=data.get('entityId', ()))


@dataclass(frozen=True)
class AttributePredicateFilter(EventFilter):
    """
    Match events on one attribute whose value satisfies a predicate.

    Attributes:
        attribute_name: Attribute the filter is scoped to
        predicate: Predicate evaluated against the event value
        entity_id: Optional entity scope (None = any entity)

    Example:
        >>> f = AttributePredicateFilter(
        ...     "temperature",
        ...     NumberPredicate(30, operator=OperatorType.GREATER_THAN),
        ... )
        >>> f.apply(AttributeEvent.of("kitchen-sensor", "temperature", 31.0))
        True
    """
    filter_type: ClassVar[str] = "attribute-predicate"

    attribute_name: str
    predicate: ValuePredicate
    entity_id: Optional[str] = None

    def __post_init__(self):
        """Validate scope and predicate."""
        if not isinstance(self.attribute_name, str) or not self.attribute_name:
            raise ValueError(f"attribute_name must be a non-empty str, got {self.attribute_name!r}")
        if not isinstance(self.predicate, ValuePredicate):
            raise TypeError(
                f"predicate must be ValuePredicate, got {type(self.predicate).__name__}"
            )
        if self.entity_id is not None and not isinstance(self.entity_id, str):
            raise TypeError(f"entity_id must be str, got {type(self.entity_id).__name__}")

    def apply(self, event: AttributeEvent) -> bool:
        if event.attribute_name != self.attribute_name:
            return False
        if self.entity_id is not None and event.entity_id != self.entity_id:
            return False
        return self.predicate.matches(event.value)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'filterType': self.filter_type,
            'attributeName': self.attribute_name,
            'predicate': self.predicate.to_dict(),
        }
        if self.entity_id is not None:
            result['entityId'] = self.entity_id
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AttributePredicateFilter':
        return cls(
            attribute_name=data['attributeName'],
            predicate=decode_predicate(data['predicate']),
            entity_id=data.get('entityId'),
        )


def _build_registry() -> TypeRegistry[EventFilter]:
    registry: TypeRegistry[EventFilter] = TypeRegistry("filterType")
    registry.register(
        EntityIdFilter.filter_type,
        EntityIdFilter.from_dict,
        "Event entity id is one of the configured ids",
    )
    registry.register(
        AttributePredicateFilter.filter_type,
        AttributePredicateFilter.from_dict,
        "Value predicate scoped to one attribute",
    )
    return registry


FILTER_REGISTRY = _build_registry()


def decode_filter(data: Mapping[str, Any]) -> EventFilter:
    """
    Decode an event filter from its wire form.

    Raises:
        UnknownTypeError: If "filterType" is not registered
        DeserializationError: If the payload (or nested predicate) is malformed
    """
    return FILTER_REGISTRY.decode(data)


def encode_filter(event_filter: EventFilter) -> Dict[str, Any]:
    """Encode an event filter to its wire form."""
    return event_filter.to_dict()
