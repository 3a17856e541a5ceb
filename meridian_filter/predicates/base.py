"""
Value Predicate Base
====================

Bounded Context: Value Comparison Rules

Every predicate is an immutable value object that:
- names itself with a constant `predicate_type` (the wire discriminator)
- serializes to a dict carrying "predicateType"
- evaluates an attribute value with `matches(value) -> bool`

Evaluation contract:
    matches() never raises. A missing value or a value of the wrong shape
    is "no match" (False). Negation flags invert the result for
    well-formed input only.

Construction contract:
    Parameters are validated in __post_init__ and raise ValueError/TypeError.
"""

import math
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, Optional


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ValuePredicate(ABC):
    """
    Abstract base for all value predicates.

    Subclasses are frozen dataclasses that set `predicate_type` and
    implement `matches`, `_wire_fields` and `from_dict`.
    """

    predicate_type: ClassVar[str]

    @abstractmethod
    def matches(self, value: Optional[Any]) -> bool:
        """Evaluate the predicate against an attribute value."""

    @abstractmethod
    def _wire_fields(self) -> Dict[str, Any]:
        """Predicate parameters in wire form (without discriminator)."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'predicateType': self.predicate_type, **self._wire_fields()}

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValuePredicate':
        """Deserialize from dict (discriminator already resolved)."""


class OperatorType(str, Enum):
    """Comparison operator for number and date-time predicates."""
    EQUALS = "EQUALS"
    GREATER_THAN = "GREATER_THAN"
    GREATER_EQUALS = "GREATER_EQUALS"
    LESS_THAN = "LESS_THAN"
    LESS_EQUALS = "LESS_EQUALS"
    BETWEEN = "BETWEEN"            # Inclusive on both bounds

    def compare(self, actual: float, value: float, range_value: Optional[float] = None) -> bool:
        """
        Compare `actual` against the configured operand(s).

        Args:
            actual: Input value
            value: Operand (lower bound for BETWEEN)
            range_value: Upper bound for BETWEEN

        Returns:
            Comparison result
        """
        if self is OperatorType.EQUALS:
            return actual == value
        if self is OperatorType.GREATER_THAN:
            return actual > value
        if self is OperatorType.GREATER_EQUALS:
            return actual >= value
        if self is OperatorType.LESS_THAN:
            return actual < value
        if self is OperatorType.LESS_EQUALS:
            return actual <= value
        if range_value is None:
            return False
        low, high = min(value, range_value), max(value, range_value)
        return low <= actual <= high


def is_empty(value: Optional[Any]) -> bool:
    """True for None, empty string, empty list/tuple and empty dict."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def as_number(value: Any) -> Optional[float]:
    """
    Numeric view of an attribute value.

    Returns:
        The value as int/float, or None for bool, NaN, infinities and
        non-numbers
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def to_epoch_millis(value: Any) -> Optional[int]:
    """
    Epoch-millis view of a temporal value.

    Accepted: epoch millis (int/float), datetime, ISO-8601 string
    (a trailing "Z" is UTC). Naive datetimes are treated as UTC.

    Returns:
        Integer epoch millis, or None when the value cannot be parsed
    """
    number = as_number(value)
    if number is not None:
        return int(number)

    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH) // timedelta(milliseconds=1)

    return None


def require_bool(name: str, value: Any) -> None:
    """Validate a boolean flag parameter."""
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be bool, got {type(value).__name__}")
