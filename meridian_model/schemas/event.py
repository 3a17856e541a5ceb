"""
Attribute Event Schema
======================

Bounded Context: Attribute Change Events

This module defines the timestamped attribute state change that flows
through the filter pipeline.

Design:
- AttributeEvent: AttributeState + epoch-millis timestamp
- Source: provenance of the event (CLIENT, INTERNAL, SENSOR)
- Source is NOT part of the event body; it travels out-of-band in an
  EventEnvelope (see envelope.py)

Message Flow:
    Producer (sensor, protocol, rule, client) → AttributeEvent → FilterPipeline → Delivery
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .attribute import AttributeRef, AttributeState


def now_millis() -> int:
    """Current time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class Source(str, Enum):
    """Origin of an attribute event."""
    CLIENT = "CLIENT"          # Write request by a user
    INTERNAL = "INTERNAL"      # Rule consequence or protocol-internal update
    SENSOR = "SENSOR"          # Value change observed on a sensor


@dataclass(frozen=True)
class AttributeEvent:
    """
    A timestamped AttributeState.

    Attributes:
        attribute_state: The new state of the attribute (required)
        timestamp: Epoch milliseconds, defaults to construction time

    Invariants:
        - attribute_state is an AttributeState (never None)
        - timestamp is a non-negative integer

    Example:
        >>> event = AttributeEvent.of("kitchen-sensor", "temperature", 21.5)
        >>> event.entity_id
        'kitchen-sensor'
        >>> event.value
        21.5
    """
    attribute_state: AttributeState
    timestamp: int = field(default_factory=now_millis)

    def __post_init__(self):
        """Validate invariants."""
        if self.attribute_state is None:
            raise ValueError("AttributeEvent attribute_state cannot be None")
        if not isinstance(self.attribute_state, AttributeState):
            raise TypeError(
                f"attribute_state must be AttributeState, "
                f"got {type(self.attribute_state).__name__}"
            )
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise ValueError(
                f"timestamp must be integer epoch millis, got {self.timestamp!r}"
            )
        if self.timestamp < 0:
            raise ValueError(f"timestamp must be >= 0, got {self.timestamp}")

    @classmethod
    def of(
        cls,
        entity_id: str,
        attribute_name: str,
        value: Optional[Any] = None,
        timestamp: Optional[int] = None
    ) -> 'AttributeEvent':
        """Create event from entity id, attribute name and value."""
        return cls.from_ref(AttributeRef(entity_id, attribute_name), value, timestamp)

    @classmethod
    def from_ref(
        cls,
        attribute_ref: AttributeRef,
        value: Optional[Any] = None,
        timestamp: Optional[int] = None
    ) -> 'AttributeEvent':
        """Create event from an AttributeRef and value."""
        state = AttributeState(attribute_ref, value)
        if timestamp is None:
            return cls(state)
        return cls(state, timestamp)

    @property
    def attribute_ref(self) -> AttributeRef:
        return self.attribute_state.attribute_ref

    @property
    def entity_id(self) -> str:
        return self.attribute_ref.entity_id

    @property
    def attribute_name(self) -> str:
        return self.attribute_ref.attribute_name

    @property
    def value(self) -> Optional[Any]:
        """Event value, None when the attribute has no value."""
        return self.attribute_state.current_value

    def __str__(self) -> str:
        return (
            f"AttributeEvent{{timestamp={self.timestamp}, "
            f"attributeState={self.attribute_state}}}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict.

        Returns:
            Dictionary ready for json.dumps()
        """
        return {
            'attributeState': self.attribute_state.to_dict(),
            'timestamp': self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AttributeEvent':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: attributeState, timestamp

        Returns:
            AttributeEvent instance

        Raises:
            ValueError: If required fields missing or invalid
        """
        try:
            return cls(
                attribute_state=AttributeState.from_dict(data['attributeState']),
                timestamp=data['timestamp'],
            )
        except KeyError as e:
            raise ValueError(f"Missing required AttributeEvent field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid AttributeEvent data: {e}")
