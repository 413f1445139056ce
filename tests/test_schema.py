"""Tests for type-hint driven schemas."""

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, NewType, Optional

import pytest

from urlform_core import Char, Ignored, Kind, decode, schema_for
from urlform_core.errors import ScalarParseError, StructuralError
from urlform_core.scalar import Part
from urlform_core.schema import (
    EnumSchema,
    MapSchema,
    NamedTupleSchema,
    NewTypeSchema,
    OptionSchema,
    SeqSchema,
    StructSchema,
    TupleSchema,
    UnitStructSchema,
)


UserId = NewType("UserId", int)


class Level(enum.Enum):
    LOW = "l"
    HIGH = "h"


@dataclass
class Query:
    q: str
    page: int = 1
    lang: Optional[str] = None


@dataclass
class Empty:
    pass


class Range(NamedTuple):
    start: int
    stop: int


# ---------------------------------------------------------------------------
# schema_for
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("tp, kind", [
    (bool, Kind.BOOL),
    (int, Kind.INT),
    (float, Kind.FLOAT),
    (str, Kind.STR),
    (bytes, Kind.BYTES),
    (Char, Kind.CHAR),
    (None, Kind.UNIT),
    (Any, Kind.ANY),
    (Ignored, Kind.IGNORED),
])
def test_scalar_requests(tp, kind):
    assert schema_for(tp).request.kind is kind

def test_optional():
    schema = schema_for(Optional[int])
    assert isinstance(schema, OptionSchema)
    assert schema.inner is int
    assert isinstance(schema_for(int | None), OptionSchema)

def test_sequences():
    assert isinstance(schema_for(list[int]), SeqSchema)
    assert schema_for(set[str]).factory is set
    assert schema_for(tuple[int, ...]).factory is tuple
    assert schema_for(Sequence[int]).factory is list

def test_fixed_tuple():
    schema = schema_for(tuple[str, int])
    assert isinstance(schema, TupleSchema)
    assert schema.request.length == 2

def test_map():
    assert isinstance(schema_for(dict[str, int]), MapSchema)
    assert isinstance(schema_for(Mapping[str, int]), MapSchema)

def test_struct():
    schema = schema_for(Query)
    assert isinstance(schema, StructSchema)
    assert schema.request.kind is Kind.STRUCT
    assert schema.request.fields == ("q", "page", "lang")

def test_unit_struct():
    assert isinstance(schema_for(Empty), UnitStructSchema)

def test_enum():
    schema = schema_for(Level)
    assert isinstance(schema, EnumSchema)
    assert schema.request.variants == ("LOW", "HIGH")

def test_named_tuple():
    schema = schema_for(Range)
    assert isinstance(schema, NamedTupleSchema)
    assert schema.request.kind is Kind.TUPLE_STRUCT

def test_newtype():
    schema = schema_for(UserId)
    assert isinstance(schema, NewTypeSchema)
    assert schema.request.name == "UserId"

def test_cached():
    assert schema_for(list[int]) is schema_for(list[int])

def test_unsupported_hint():
    with pytest.raises(TypeError, match="unsupported type hint"):
        schema_for(complex)


# ---------------------------------------------------------------------------
# Loading through Part
# ---------------------------------------------------------------------------

def test_load_char():
    assert schema_for(Char).load(Part("z")) == "z"

def test_load_bytes():
    assert schema_for(bytes).load(Part("abc")) == b"abc"

def test_load_float_accepts_integer_text():
    assert schema_for(float).load(Part("3")) == 3.0

def test_load_struct_from_string_is_structural():
    with pytest.raises(StructuralError, match="invalid type"):
        schema_for(Query).load(Part("x"))

def test_load_tuple_from_string_is_structural():
    with pytest.raises(StructuralError, match="invalid type"):
        schema_for(tuple[int, int]).load(Part("1"))

def test_load_unit_from_string_is_structural():
    with pytest.raises(StructuralError):
        schema_for(None).load(Part(""))


# ---------------------------------------------------------------------------
# Decoding composite hints
# ---------------------------------------------------------------------------

def test_struct_defaults_and_optional():
    assert decode("q=term", Query) == Query(q="term", page=1, lang=None)
    assert decode("lang=en&page=3&q=term", Query) == Query("term", 3, "en")

def test_struct_field_parse_error():
    with pytest.raises(ScalarParseError):
        decode("q=term&page=two", Query)

def test_unit_struct_from_empty_input():
    assert decode("", Empty) == Empty()

def test_unit_struct_rejects_pairs():
    with pytest.raises(StructuralError):
        decode("a=1", Empty)

def test_pairs_as_named_tuples_rejected_by_arity():
    with pytest.raises(StructuralError, match="invalid length"):
        decode("a=1", list[tuple[str, int, int]])

def test_enum_keys():
    assert decode("LOW=1&HIGH=2", dict[Level, int]) == {Level.LOW: 1, Level.HIGH: 2}

def test_set_values():
    assert decode("t=a&t=b&t=a", dict[str, set[str]]) == {"t": {"a", "b"}}

def test_ignored_values():
    assert decode("a=1&a=2", dict[str, Ignored]) == {"a": None}
