"""
Value Shape Predicates
======================

- ObjectValueKeyPredicate: key present in (or absent from) an object value
- ValueEmptyPredicate / ValueNotEmptyPredicate: presence tests, no parameters
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .base import ValuePredicate, is_empty, require_bool


@dataclass(frozen=True)
class ObjectValueKeyPredicate(ValuePredicate):
    """
    Match an object attribute value by key presence.

    Attributes:
        key: Key to look for
        negated: Match when the key is absent instead (default: False)

    Non-object input never matches, even when negated.

    Example:
        >>> ObjectValueKeyPredicate("status").matches({"status": None})
        True
    """
    predicate_type: ClassVar[str] = "object-value-key"

    key: str
    negated: bool = False

    def __post_init__(self):
        """Validate parameters."""
        if not isinstance(self.key, str) or not self.key:
            raise ValueError(f"ObjectValueKeyPredicate key must be a non-empty str, got {self.key!r}")
        require_bool("negated", self.negated)

    def matches(self, value: Optional[Any]) -> bool:
        if not isinstance(value, dict):
            return False
        return (self.key in value) != self.negated

    def _wire_fields(self) -> Dict[str, Any]:
        return {'key': self.key, 'negated': self.negated}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ObjectValueKeyPredicate':
        return cls(key=data['key'], negated=data.get('negated', False))


@dataclass(frozen=True)
class ValueEmptyPredicate(ValuePredicate):
    """Value is None, "", [] or {}."""
    predicate_type: ClassVar[str] = "value-empty"

    def matches(self, value: Optional[Any]) -> bool:
        return is_empty(value)

    def _wire_fields(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValueEmptyPredicate':
        return cls()


@dataclass(frozen=True)
class ValueNotEmptyPredicate(ValuePredicate):
    """Value is present and not "", [] or {}."""
    predicate_type: ClassVar[str] = "value-not-empty"

    def matches(self, value: Optional[Any]) -> bool:
        return not is_empty(value)

    def _wire_fields(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValueNotEmptyPredicate':
        return cls()
