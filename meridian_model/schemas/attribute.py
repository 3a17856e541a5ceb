"""
Attribute Addressing & State
============================

Bounded Context: Shared Data Structures

This module defines the value types that identify *what* changed on an
entity and *to what value*.

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Structural equality: two refs with the same ids are the same ref
- Serialization: to_dict() / from_dict() with camelCase wire keys

Types:
- AttributeRef: (entity id, attribute name) pair
- AttributeState: AttributeRef + optional value
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AttributeRef:
    """
    Immutable reference to one attribute on one entity.

    Attributes:
        entity_id: Stable id of the entity (asset, device, ...)
        attribute_name: Name of the attribute on that entity

    Invariants:
        - entity_id and attribute_name are strings (never None)

    Example:
        >>> ref = AttributeRef("kitchen-sensor", "temperature")
        >>> str(ref)
        'kitchen-sensor/temperature'
    """
    entity_id: str
    attribute_name: str

    def __post_init__(self):
        """Validate invariants."""
        for name in ("entity_id", "attribute_name"):
            value = getattr(self, name)
            if value is None:
                raise ValueError(f"AttributeRef {name} cannot be None")
            if not isinstance(value, str):
                raise TypeError(
                    f"AttributeRef {name} must be str, got {type(value).__name__}"
                )

    def __str__(self) -> str:
        return f"{self.entity_id}/{self.attribute_name}"

    def to_dict(self) -> Dict[str, str]:
        """Serialize to JSON-compatible dict."""
        return {
            'entityId': self.entity_id,
            'attributeName': self.attribute_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AttributeRef':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: entityId, attributeName

        Returns:
            AttributeRef instance

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                entity_id=data['entityId'],
                attribute_name=data['attributeName'],
            )
        except KeyError as e:
            raise ValueError(f"Missing required AttributeRef field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid AttributeRef data: {e}")


@dataclass(frozen=True)
class AttributeState:
    """
    Immutable state of one attribute: its reference plus its current value.

    The value is any JSON-shaped Python value (None, bool, int, float, str,
    list, dict). None means the attribute has no value.

    Attributes:
        attribute_ref: Which attribute this state belongs to
        value: New value of the attribute (None = null state)

    Example:
        >>> state = AttributeState(AttributeRef("pump-1", "running"), True)
        >>> state.has_value
        True
    """
    attribute_ref: AttributeRef
    value: Optional[Any] = None

    def __post_init__(self):
        """Validate invariants."""
        if self.attribute_ref is None:
            raise ValueError("AttributeState attribute_ref cannot be None")
        if not isinstance(self.attribute_ref, AttributeRef):
            raise TypeError(
                f"attribute_ref must be AttributeRef, "
                f"got {type(self.attribute_ref).__name__}"
            )

    @property
    def current_value(self) -> Optional[Any]:
        """Current value, or None when the attribute has no value."""
        return self.value

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return f"{self.attribute_ref}={self.value!r}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'attributeRef': self.attribute_ref.to_dict(),
            'value': self.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AttributeState':
        """Deserialize from dict.

        A missing 'value' key decodes to the null state.

        Raises:
            ValueError: If attributeRef is missing or invalid
        """
        try:
            return cls(
                attribute_ref=AttributeRef.from_dict(data['attributeRef']),
                value=data.get('value'),
            )
        except KeyError as e:
            raise ValueError(f"Missing required AttributeState field: {e}")
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Invalid AttributeState data: {e}")
