"""
String Predicates
=================

- StringPredicate: one string tested in EXACT / BEGIN / END / CONTAINS mode
- StringArrayPredicate: configured strings tested against an input array,
  by membership (ANY or ALL of them) or position by position (ORDERED)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple

from .base import ValuePredicate, require_bool


class StringMatch(str, Enum):
    """Match mode of a StringPredicate."""
    EXACT = "EXACT"
    BEGIN = "BEGIN"
    END = "END"
    CONTAINS = "CONTAINS"


class ArrayMatch(str, Enum):
    """Match mode of a StringArrayPredicate."""
    ANY = "ANY"        # At least one configured string present
    ALL = "ALL"        # Every configured string present
    ORDERED = "ORDERED"  # Same length, equal element at every position


def _normalize(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.casefold()


@dataclass(frozen=True)
class StringPredicate(ValuePredicate):
    """
    Match a string attribute value.

    Attributes:
        value: String to compare with
        match: Match mode (default: EXACT)
        case_sensitive: Case-sensitive comparison (default: True)
        negate: Invert the result for string input (default: False)

    Non-string input never matches, even when negated.

    Example:
        >>> p = StringPredicate("Foo", match=StringMatch.CONTAINS, case_sensitive=False)
        >>> p.matches("this is foo bar")
        True
    """
    predicate_type: ClassVar[str] = "string"

    value: str
    match: StringMatch = StringMatch.EXACT
    case_sensitive: bool = True
    negate: bool = False

    def __post_init__(self):
        """Validate parameters."""
        if not isinstance(self.value, str):
            raise TypeError(f"StringPredicate value must be str, got {type(self.value).__name__}")
        object.__setattr__(self, 'match', StringMatch(self.match))
        require_bool("case_sensitive", self.case_sensitive)
        require_bool("negate", self.negate)

    def matches(self, value: Optional[Any]) -> bool:
        if not isinstance(value, str):
            return False

        actual = _normalize(value, self.case_sensitive)
        expected = _normalize(self.value, self.case_sensitive)

        if self.match is StringMatch.EXACT:
            result = actual == expected
        elif self.match is StringMatch.BEGIN:
            result = actual.startswith(expected)
        elif self.match is StringMatch.END:
            result = actual.endswith(expected)
        else:
            result = expected in actual

        return result != self.negate

    def _wire_fields(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'match': self.match.value,
            'caseSensitive': self.case_sensitive,
            'negate': self.negate,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StringPredicate':
        return cls(
            value=data['value'],
            match=StringMatch(data.get('match', StringMatch.EXACT.value)),
            case_sensitive=data.get('caseSensitive', True),
            negate=data.get('negate', False),
        )


@dataclass(frozen=True)
class StringArrayPredicate(ValuePredicate):
    """
    Match an array-of-strings attribute value.

    Attributes:
        values: Configured strings (order preserved on the wire)
        match: ANY or ALL of the configured strings must be present, or
            ORDERED: the input equals the configured list element by element
        case_sensitive: Case-sensitive comparison (default: True)

    Invariants:
        - An empty configured list matches nothing
        - Non-array input never matches
        - ANY/ALL ignore non-string elements; ORDERED fails on them

    Example:
        >>> p = StringArrayPredicate(("admin", "ops"), match=ArrayMatch.ANY)
        >>> p.matches(["ops", "viewer"])
        True
    """
    predicate_type: ClassVar[str] = "string-array"

    values: Tuple[str, ...] = ()
    match: ArrayMatch = ArrayMatch.ALL
    case_sensitive: bool = True

    def __post_init__(self):
        """Validate parameters and freeze the value list."""
        if isinstance(self.values, str):
            raise TypeError("StringArrayPredicate values must be a sequence of str, got str")
        values = tuple(self.values)
        for item in values:
            if not isinstance(item, str):
                raise TypeError(
                    f"StringArrayPredicate values must be str, got {type(item).__name__}"
                )
        object.__setattr__(self, 'values', values)
        object.__setattr__(self, 'match', ArrayMatch(self.match))
        require_bool("case_sensitive", self.case_sensitive)

    def matches(self, value: Optional[Any]) -> bool:
        if not isinstance(value, (list, tuple)) or not self.values:
            return False

        if self.match is ArrayMatch.ORDERED:
            return len(value) == len(self.values) and all(
                isinstance(actual, str)
                and _normalize(actual, self.case_sensitive) == _normalize(expected, self.case_sensitive)
                for actual, expected in zip(value, self.values)
            )

        present = {
            _normalize(item, self.case_sensitive)
            for item in value
            if isinstance(item, str)
        }
        wanted = [_normalize(item, self.case_sensitive) for item in self.values]

        if self.match is ArrayMatch.ANY:
            return any(item in present for item in wanted)
        return all(item in present for item in wanted)

    def _wire_fields(self) -> Dict[str, Any]:
        return {
            'values': list(self.values),
            'match': self.match.value,
            'caseSensitive': self.case_sensitive,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StringArrayPredicate':
        return cls(
            values=data.get('values', ()),
            match=ArrayMatch(data.get('match', ArrayMatch.ALL.value)),
            case_sensitive=data.get('caseSensitive', True),
        )
