"""
Test Value Predicates
=====================

Evaluation semantics of every predicate variant and their wire dispatch.

Usage:
    pytest test_predicates.py
"""

import json
from datetime import datetime, timezone

import pytest

from meridian_filter import (
    ArrayMatch,
    BooleanPredicate,
    DateTimePredicate,
    DeserializationError,
    NumberPredicate,
    ObjectValueKeyPredicate,
    OperatorType,
    PREDICATE_REGISTRY,
    RadialGeofencePredicate,
    RectangularGeofencePredicate,
    StringArrayPredicate,
    StringMatch,
    StringPredicate,
    UnknownTypeError,
    ValueEmptyPredicate,
    ValueNotEmptyPredicate,
    decode_predicate,
    encode_predicate,
)
from meridian_filter.predicates import to_epoch_millis


# ========== String ==========

def test_string_contains_case_insensitive():
    predicate = StringPredicate("Foo", match=StringMatch.CONTAINS, case_sensitive=False)

    assert predicate.matches("this is foo bar")
    assert not predicate.matches("this is bar")


def test_string_defaults_to_exact_case_sensitive():
    predicate = StringPredicate("Foo")

    assert predicate.matches("Foo")
    assert not predicate.matches("foo")
    assert not predicate.matches("Foo bar")


def test_string_begin_end_and_negate():
    assert StringPredicate("ab", match=StringMatch.BEGIN).matches("abc")
    assert StringPredicate("bc", match=StringMatch.END).matches("abc")
    assert not StringPredicate("ab", match="END").matches("abc")
    assert StringPredicate("x", match=StringMatch.CONTAINS, negate=True).matches("abc")


def test_string_wrong_shape_is_no_match():
    """Missing or non-string input never matches, even negated."""
    predicate = StringPredicate("1", negate=True)

    assert not predicate.matches(None)
    assert not predicate.matches(1)
    assert not predicate.matches(["1"])


# ========== Boolean ==========

def test_boolean_equality():
    assert BooleanPredicate(True).matches(True)
    assert not BooleanPredicate(True).matches(False)
    assert BooleanPredicate(False).matches(False)


def test_boolean_type_mismatch_is_no_match():
    assert not BooleanPredicate(True).matches(1)
    assert not BooleanPredicate(False).matches(0)
    assert not BooleanPredicate(True).matches("true")
    assert not BooleanPredicate(True).matches(None)


# ========== String array ==========

def test_string_array_all_and_any():
    all_of = StringArrayPredicate(("admin", "ops"))
    any_of = StringArrayPredicate(["admin", "ops"], match=ArrayMatch.ANY)

    assert all_of.matches(["ops", "viewer", "admin"])
    assert not all_of.matches(["ops", "viewer"])
    assert any_of.matches(["ops", "viewer"])
    assert not any_of.matches(["viewer"])


def test_string_array_case_and_shapes():
    predicate = StringArrayPredicate(("Admin",), case_sensitive=False)

    assert predicate.matches(["ADMIN", 3, None])
    assert not predicate.matches("admin")
    assert not predicate.matches(None)
    assert not StringArrayPredicate(()).matches(["anything"])


def test_string_array_ordered_compares_position_by_position():
    predicate = StringArrayPredicate(("red", "green", "blue"), match=ArrayMatch.ORDERED)

    assert predicate.matches(["red", "green", "blue"])
    assert predicate.matches(("red", "green", "blue"))
    assert not predicate.matches(["blue", "green", "red"])
    assert not predicate.matches(["red", "green"])
    assert not predicate.matches(["red", "green", "blue", "blue"])
    assert not predicate.matches(["red", 7, "blue"])
    assert not predicate.matches(["RED", "green", "blue"])

    folded = StringArrayPredicate(["Red", "Green"], match="ORDERED", case_sensitive=False)
    assert folded.matches(["RED", "green"])
    assert not StringArrayPredicate((), match=ArrayMatch.ORDERED).matches([])


# ========== Number ==========

def test_number_between_is_inclusive():
    predicate = NumberPredicate(10, range_value=20, operator=OperatorType.BETWEEN)

    assert predicate.matches(15)
    assert predicate.matches(10)
    assert predicate.matches(20)
    assert not predicate.matches(25)
    assert not predicate.matches(9.999)


def test_number_operators():
    assert NumberPredicate(5).matches(5.0)
    assert NumberPredicate(5, operator=OperatorType.LESS_THAN).matches(4)
    assert not NumberPredicate(5, operator=OperatorType.LESS_THAN).matches(5)
    assert NumberPredicate(5, operator=OperatorType.LESS_EQUALS).matches(5)
    assert NumberPredicate(5, operator=OperatorType.GREATER_THAN).matches(6)
    assert NumberPredicate(5, operator=OperatorType.GREATER_EQUALS).matches(5)
    assert NumberPredicate(5, operator=OperatorType.EQUALS, negate=True).matches(6)


def test_number_non_numeric_is_no_match():
    predicate = NumberPredicate(1, negate=True)

    assert not predicate.matches("1")
    assert not predicate.matches(True)
    assert not predicate.matches(None)
    assert not predicate.matches(float("nan"))


def test_number_between_requires_range():
    with pytest.raises(ValueError):
        NumberPredicate(10, operator=OperatorType.BETWEEN)
    with pytest.raises(ValueError):
        NumberPredicate("ten")


# ========== Date-time ==========

def test_epoch_millis_parsing():
    assert to_epoch_millis("2026-01-01T00:00:00Z") == 1767225600000
    assert to_epoch_millis("2026-01-01T01:00:00+01:00") == 1767225600000
    assert to_epoch_millis("2026-01-01T00:00:00") == 1767225600000
    assert to_epoch_millis(datetime(2026, 1, 1, tzinfo=timezone.utc)) == 1767225600000
    assert to_epoch_millis(1767225600000) == 1767225600000
    assert to_epoch_millis("not a date") is None
    assert to_epoch_millis(True) is None


def test_datetime_comparison():
    after_new_year = DateTimePredicate("2026-01-01T00:00:00Z", operator=OperatorType.GREATER_THAN)

    assert after_new_year.matches("2026-06-01T12:00:00Z")
    assert after_new_year.matches(1767225600001)
    assert not after_new_year.matches(1767225600000)
    assert not after_new_year.matches("2025-12-31T23:59:59Z")


def test_datetime_between_and_unparsable():
    q1 = DateTimePredicate(
        "2026-01-01T00:00:00Z",
        range_value="2026-03-31T23:59:59Z",
        operator=OperatorType.BETWEEN,
    )

    assert q1.matches("2026-02-14T10:00:00Z")
    assert q1.matches("2026-01-01T00:00:00Z")
    assert not q1.matches("2026-04-01T00:00:00Z")
    assert not q1.matches("yesterday")
    assert not q1.matches(None)


def test_datetime_invalid_literal():
    with pytest.raises(ValueError):
        DateTimePredicate("soon")
    with pytest.raises(ValueError):
        DateTimePredicate("2026-01-01T00:00:00Z", operator=OperatorType.BETWEEN)


def test_datetime_accepts_datetime_literal():
    predicate = DateTimePredicate(datetime(2026, 1, 1, tzinfo=timezone.utc))

    assert predicate.value == "2026-01-01T00:00:00+00:00"
    assert predicate.matches("2026-01-01T00:00:00Z")


# ========== Object key & emptiness ==========

def test_object_value_key_presence():
    predicate = ObjectValueKeyPredicate("status")

    assert predicate.matches({"status": "ok"})
    assert predicate.matches({"status": None})
    assert not predicate.matches({"state": "ok"})
    assert not predicate.matches("status")


def test_object_value_key_negated():
    predicate = ObjectValueKeyPredicate("status", negated=True)

    assert predicate.matches({"state": "ok"})
    assert not predicate.matches({"status": "ok"})
    assert not predicate.matches(None)


@pytest.mark.parametrize("value", [None, "", [], {}])
def test_empty_values(value):
    assert ValueEmptyPredicate().matches(value)
    assert not ValueNotEmptyPredicate().matches(value)


@pytest.mark.parametrize("value", [0, False, "x", [None], {"a": 1}])
def test_non_empty_values(value):
    assert ValueNotEmptyPredicate().matches(value)
    assert not ValueEmptyPredicate().matches(value)


# ========== Wire dispatch ==========

ALL_VARIANTS = [
    StringPredicate("Foo", match=StringMatch.CONTAINS, case_sensitive=False, negate=True),
    BooleanPredicate(True),
    StringArrayPredicate(("a", "b"), match=ArrayMatch.ORDERED, case_sensitive=False),
    DateTimePredicate("2026-01-01T00:00:00Z", range_value="2026-02-01T00:00:00Z",
                      operator=OperatorType.BETWEEN),
    NumberPredicate(10, range_value=20, operator=OperatorType.BETWEEN),
    RadialGeofencePredicate(radius=100, lat=52.37, lng=4.89, negated=True),
    RectangularGeofencePredicate(lat_min=50.0, lng_min=3.0, lat_max=53.5, lng_max=7.2),
    ObjectValueKeyPredicate("status"),
    ValueEmptyPredicate(),
    ValueNotEmptyPredicate(),
]


def test_registry_is_exhaustive():
    assert PREDICATE_REGISTRY.available_types == {
        "string", "boolean", "string-array", "datetime", "number",
        "radial", "rectangular", "object-value-key", "value-empty", "value-not-empty",
    }
    assert {type(p).predicate_type for p in ALL_VARIANTS} == PREDICATE_REGISTRY.available_types


@pytest.mark.parametrize("predicate", ALL_VARIANTS, ids=lambda p: p.predicate_type)
def test_encode_decode_preserves_predicate(predicate):
    wire = json.loads(json.dumps(encode_predicate(predicate)))

    assert wire["predicateType"] == predicate.predicate_type
    assert decode_predicate(wire) == predicate


def test_number_wire_shape():
    assert NumberPredicate(10, range_value=20, operator="BETWEEN").to_dict() == {
        'predicateType': 'number',
        'value': 10,
        'rangeValue': 20,
        'operator': 'BETWEEN',
        'negate': False,
    }


def test_decode_applies_defaults():
    predicate = decode_predicate({"predicateType": "string", "value": "on"})

    assert predicate == StringPredicate("on", match=StringMatch.EXACT, case_sensitive=True)


def test_unknown_predicate_type_is_reported():
    with pytest.raises(UnknownTypeError) as excinfo:
        decode_predicate({"predicateType": "regex", "value": ".*"})

    assert "regex" in str(excinfo.value)


def test_missing_or_malformed_predicate_payloads():
    with pytest.raises(DeserializationError):
        decode_predicate({"value": "x"})
    with pytest.raises(DeserializationError):
        decode_predicate(["string", "x"])
    with pytest.raises(DeserializationError):
        decode_predicate({"predicateType": "number"})
    with pytest.raises(DeserializationError):
        decode_predicate({"predicateType": "number", "value": 1, "operator": "ROUGHLY"})
    with pytest.raises(DeserializationError):
        decode_predicate({"predicateType": "radial", "radius": -5, "lat": 0, "lng": 0})
    with pytest.raises(DeserializationError):
        decode_predicate({"predicateType": "radial", "radius": 10, "lat": 10**400, "lng": 0})
    with pytest.raises(DeserializationError):
        decode_predicate({"predicateType": "rectangular", "latMin": 0, "lngMin": 0,
                          "latMax": 1, "lngMax": 10**400})


def test_predicates_are_immutable():
    predicate = NumberPredicate(1)

    with pytest.raises(AttributeError):
        predicate.value = 2
