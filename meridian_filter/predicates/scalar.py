"""
Scalar Predicates
=================

- BooleanPredicate: equality with a boolean literal
- NumberPredicate: numeric comparison (OperatorType)
- DateTimePredicate: temporal comparison on epoch millis (OperatorType)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Union

from .base import OperatorType, ValuePredicate, as_number, require_bool, to_epoch_millis


@dataclass(frozen=True)
class BooleanPredicate(ValuePredicate):
    """
    Match a boolean attribute value.

    Non-boolean input (including 0/1) is no match.
    """
    predicate_type: ClassVar[str] = "boolean"

    value: bool

    def __post_init__(self):
        require_bool("value", self.value)

    def matches(self, value: Optional[Any]) -> bool:
        return isinstance(value, bool) and value == self.value

    def _wire_fields(self) -> Dict[str, Any]:
        return {'value': self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BooleanPredicate':
        return cls(value=data['value'])


@dataclass(frozen=True)
class NumberPredicate(ValuePredicate):
    """
    Compare a numeric attribute value.

    Attributes:
        value: Operand (lower bound for BETWEEN)
        range_value: Upper bound, required for BETWEEN
        operator: Comparison operator (default: EQUALS)
        negate: Invert the result for numeric input (default: False)

    Booleans, NaN and non-numbers never match.

    Example:
        >>> p = NumberPredicate(10, range_value=20, operator=OperatorType.BETWEEN)
        >>> p.matches(20)
        True
    """
    predicate_type: ClassVar[str] = "number"

    value: float
    range_value: Optional[float] = None
    operator: OperatorType = OperatorType.EQUALS
    negate: bool = False

    def __post_init__(self):
        """Validate parameters."""
        if as_number(self.value) is None:
            raise ValueError(f"NumberPredicate value must be a finite number, got {self.value!r}")
        if self.range_value is not None and as_number(self.range_value) is None:
            raise ValueError(
                f"NumberPredicate range_value must be a finite number, got {self.range_value!r}"
            )
        object.__setattr__(self, 'operator', OperatorType(self.operator))
        if self.operator is OperatorType.BETWEEN and self.range_value is None:
            raise ValueError("NumberPredicate BETWEEN requires range_value")
        require_bool("negate", self.negate)

    def matches(self, value: Optional[Any]) -> bool:
        number = as_number(value)
        if number is None:
            return False
        return self.operator.compare(number, self.value, self.range_value) != self.negate

    def _wire_fields(self) -> Dict[str, Any]:
        fields = {
            'value': self.value,
            'operator': self.operator.value,
            'negate': self.negate,
        }
        if self.range_value is not None:
            fields['rangeValue'] = self.range_value
        return fields

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NumberPredicate':
        return cls(
            value=data['value'],
            range_value=data.get('rangeValue'),
            operator=OperatorType(data.get('operator', OperatorType.EQUALS.value)),
            negate=data.get('negate', False),
        )


@dataclass(frozen=True)
class DateTimePredicate(ValuePredicate):
    """
    Compare a temporal attribute value.

    Literals are ISO-8601 strings (a datetime is converted on construction).
    Input may be epoch millis, an ISO-8601 string or a datetime; naive
    times are UTC. Unparsable input never matches.

    Attributes:
        value: ISO-8601 operand (lower bound for BETWEEN)
        range_value: ISO-8601 upper bound, required for BETWEEN
        operator: Comparison operator (default: EQUALS)
        negate: Invert the result for parsable input (default: False)

    Example:
        >>> p = DateTimePredicate("2026-01-01T00:00:00Z", operator=OperatorType.GREATER_THAN)
        >>> p.matches("2026-06-01T12:00:00Z")
        True
    """
    predicate_type: ClassVar[str] = "datetime"

    value: Union[str, datetime]
    range_value: Optional[Union[str, datetime]] = None
    operator: OperatorType = OperatorType.EQUALS
    negate: bool = False

    def __post_init__(self):
        """Validate literals and cache their epoch millis."""
        for name in ('value', 'range_value'):
            literal = getattr(self, name)
            if isinstance(literal, datetime):
                object.__setattr__(self, name, literal.isoformat())

        if not isinstance(self.value, str) or to_epoch_millis(self.value) is None:
            raise ValueError(f"DateTimePredicate value is not an ISO-8601 date-time: {self.value!r}")
        if self.range_value is not None and (
            not isinstance(self.range_value, str) or to_epoch_millis(self.range_value) is None
        ):
            raise ValueError(
                f"DateTimePredicate range_value is not an ISO-8601 date-time: {self.range_value!r}"
            )

        object.__setattr__(self, 'operator', OperatorType(self.operator))
        if self.operator is OperatorType.BETWEEN and self.range_value is None:
            raise ValueError("DateTimePredicate BETWEEN requires range_value")
        require_bool("negate", self.negate)

        object.__setattr__(self, '_value_millis', to_epoch_millis(self.value))
        object.__setattr__(
            self,
            '_range_millis',
            to_epoch_millis(self.range_value) if self.range_value is not None else None,
        )

    def matches(self, value: Optional[Any]) -> bool:
        millis = to_epoch_millis(value)
        if millis is None:
            return False
        result = self.operator.compare(millis, self._value_millis, self._range_millis)
        return result != self.negate

    def _wire_fields(self) -> Dict[str, Any]:
        fields = {
            'value': self.value,
            'operator': self.operator.value,
            'negate': self.negate,
        }
        if self.range_value is not None:
            fields['rangeValue'] = self.range_value
        return fields

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DateTimePredicate':
        return cls(
            value=data['value'],
            range_value=data.get('rangeValue'),
            operator=OperatorType(data.get('operator', OperatorType.EQUALS.value)),
            negate=data.get('negate', False),
        )
