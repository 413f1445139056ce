"""Type-directed consumer built from standard type hints.

``schema_for(tp)`` turns a type hint into a :class:`Schema`, a visitor that
knows which :class:`Request` to issue and how to assemble the value from
what the deserializer hands back. Schemas hold no per-call state and are
cached per hint.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections import abc
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from .access import MapAccess, SeqAccess
from .errors import StructuralError
from .model import Kind, Request
from .visitor import Deserializer, Visitor


class Char(str):
    """Marker hint for a single-character string."""


class Ignored:
    """Marker hint for a value that is read and thrown away."""


class Schema(Visitor):
    request: Request = Request(Kind.ANY)

    def load(self, deserializer: Deserializer) -> Any:
        return deserializer.deserialize(self.request, self)


def load(deserializer: Deserializer, tp: Any) -> Any:
    """Deserialize one value of type *tp* from *deserializer*."""
    return schema_for(tp).load(deserializer)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

class BoolSchema(Schema):
    request = Request(Kind.BOOL)
    expecting = "a boolean"

    def visit_bool(self, value):
        return value


class IntSchema(Schema):
    request = Request(Kind.INT)
    expecting = "an integer"

    def visit_int(self, value):
        return value


class FloatSchema(Schema):
    request = Request(Kind.FLOAT)
    expecting = "a floating point number"

    def visit_float(self, value):
        return value

    def visit_int(self, value):
        return float(value)


class StrSchema(Schema):
    request = Request(Kind.STR)
    expecting = "a string"

    def visit_str(self, value):
        return value


class IdentifierSchema(StrSchema):
    request = Request(Kind.IDENTIFIER)
    expecting = "a field identifier"


class CharSchema(StrSchema):
    request = Request(Kind.CHAR)
    expecting = "a character"


class BytesSchema(Schema):
    request = Request(Kind.BYTES)
    expecting = "a byte array"

    def visit_bytes(self, value):
        return value

    def visit_str(self, value):
        return value.encode("utf-8")


class UnitSchema(Schema):
    request = Request(Kind.UNIT)
    expecting = "unit"

    def visit_unit(self):
        return None


class IgnoredSchema(Schema):
    request = Request(Kind.IGNORED)
    expecting = "anything"

    def visit_unit(self):
        return None


class AnySchema(Schema):
    """Takes whatever shape the deserializer decides on."""

    request = Request(Kind.ANY)
    expecting = "any value"

    def visit_bool(self, value):
        return value

    def visit_int(self, value):
        return value

    def visit_float(self, value):
        return value

    def visit_str(self, value):
        return value

    def visit_bytes(self, value):
        return value

    def visit_enum(self, variant):
        return variant

    def visit_unit(self):
        return None

    def visit_none(self):
        return None

    def visit_some(self, deserializer):
        return self.load(deserializer)

    def visit_newtype(self, deserializer):
        return self.load(deserializer)

    def visit_seq(self, seq):
        return [self.load(item) for item in seq]

    def visit_map(self, entries):
        return {self.load(key): self.load(value) for key, value in entries}


# ---------------------------------------------------------------------------
# Wrappers
# ---------------------------------------------------------------------------

class OptionSchema(Schema):
    request = Request(Kind.OPTION)

    def __init__(self, inner: Any) -> None:
        self.inner = inner
        self.expecting = f"an optional {_type_name(inner)}"

    def visit_none(self):
        return None

    def visit_some(self, deserializer):
        return load(deserializer, self.inner)


class NewTypeSchema(Schema):
    def __init__(self, newtype: Any) -> None:
        self.newtype = newtype
        self.request = Request(Kind.NEWTYPE_STRUCT, name=newtype.__name__)
        self.expecting = f"newtype struct {newtype.__name__}"

    def visit_newtype(self, deserializer):
        return self.newtype(load(deserializer, self.newtype.__supertype__))


class EnumSchema(Schema):
    """Unit variants only, matched by member name."""

    def __init__(self, cls: type[Enum]) -> None:
        self.cls = cls
        self.request = Request(
            Kind.ENUM, name=cls.__name__, variants=tuple(cls.__members__)
        )
        self.expecting = f"enum {cls.__name__}"

    def visit_enum(self, variant):
        return self.cls[variant]


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

class SeqSchema(Schema):
    request = Request(Kind.SEQ)

    def __init__(self, element: Any, factory: type = list) -> None:
        self.element = element
        self.factory = factory
        self.expecting = f"a sequence of {_type_name(element)}"

    def visit_seq(self, seq: SeqAccess):
        return self.factory(load(item, self.element) for item in seq)


class TupleSchema(Schema):
    def __init__(self, elements: tuple[Any, ...]) -> None:
        self.elements = elements
        self.request = Request(Kind.TUPLE, length=len(elements))
        self.expecting = f"a tuple of size {len(elements)}"

    def _items(self, seq: SeqAccess) -> list[Any]:
        if len(seq) != len(self.elements):
            raise StructuralError.invalid_length(len(seq), self.expecting)
        return [load(item, tp) for item, tp in zip(seq, self.elements)]

    def visit_seq(self, seq):
        return tuple(self._items(seq))


class NamedTupleSchema(TupleSchema):
    def __init__(self, cls: type) -> None:
        hints = typing.get_type_hints(cls)
        super().__init__(tuple(hints.get(name, Any) for name in cls._fields))
        self.cls = cls
        self.request = Request(
            Kind.TUPLE_STRUCT,
            name=cls.__name__,
            fields=tuple(cls._fields),
            length=len(cls._fields),
        )
        self.expecting = f"tuple struct {cls.__name__}"

    def visit_seq(self, seq):
        return self.cls(*self._items(seq))


# ---------------------------------------------------------------------------
# Maps and structs
# ---------------------------------------------------------------------------

class MapSchema(Schema):
    request = Request(Kind.MAP)

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.expecting = "a map"

    def visit_map(self, entries: MapAccess):
        return {load(k, self.key): load(v, self.value) for k, v in entries}


class StructSchema(Schema):
    """A dataclass read field by field from a map.

    Unknown keys are skipped. Absent fields fall back to their dataclass
    default, or to ``None`` when the field is optional.
    """

    def __init__(self, cls: type) -> None:
        self.cls = cls
        self.fields = {
            f.name: f for f in dataclasses.fields(cls) if f.init
        }
        self.hints = typing.get_type_hints(cls)
        self.request = Request(
            Kind.STRUCT, name=cls.__name__, fields=tuple(self.fields)
        )
        self.expecting = f"struct {cls.__name__}"

    def visit_map(self, entries: MapAccess):
        values: dict[str, Any] = {}
        for key, value in entries:
            name = IdentifierSchema().load(key)
            if name not in self.fields:
                IgnoredSchema().load(value)
                continue
            if name in values:
                raise StructuralError.duplicate_field(name)
            values[name] = load(value, self.hints[name])

        for name, f in self.fields.items():
            if name in values or _has_default(f):
                continue
            if _optional_inner(self.hints[name]) is not None:
                values[name] = None
                continue
            raise StructuralError.missing_field(name)
        return self.cls(**values)


class UnitStructSchema(Schema):
    def __init__(self, cls: type) -> None:
        self.cls = cls
        self.request = Request(Kind.UNIT_STRUCT, name=cls.__name__)
        self.expecting = f"unit struct {cls.__name__}"

    def visit_unit(self):
        return self.cls()

    def visit_map(self, entries):
        if len(entries):
            raise StructuralError.invalid_length(len(entries), "0 entries")
        return self.cls()


# ---------------------------------------------------------------------------
# Hint resolution
# ---------------------------------------------------------------------------

_SCALARS: dict[Any, Schema] = {
    bool: BoolSchema(),
    int: IntSchema(),
    float: FloatSchema(),
    str: StrSchema(),
    bytes: BytesSchema(),
    Char: CharSchema(),
    type(None): UnitSchema(),
    Ignored: IgnoredSchema(),
    Any: AnySchema(),
}

_SEQUENCES = {
    list: list,
    set: set,
    frozenset: frozenset,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Set: frozenset,
    abc.MutableSet: set,
}


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _has_default(f: dataclasses.Field) -> bool:
    return (
        f.default is not dataclasses.MISSING
        or f.default_factory is not dataclasses.MISSING
    )


def _optional_inner(tp: Any) -> Any:
    """Return ``T`` for ``Optional[T]``, else ``None``."""
    if typing.get_origin(tp) not in (Union, types.UnionType):
        return None
    args = typing.get_args(tp)
    rest = [a for a in args if a is not type(None)]
    if len(rest) != 1 or len(rest) == len(args):
        return None
    return rest[0]


@lru_cache(maxsize=None)
def schema_for(tp: Any) -> Schema:
    """Return the schema that reads values of type hint *tp*."""
    if tp is None:
        tp = type(None)

    schema = _SCALARS.get(tp)
    if schema is not None:
        return schema

    inner = _optional_inner(tp)
    if inner is not None:
        return OptionSchema(inner)

    if isinstance(tp, typing.NewType):
        return NewTypeSchema(tp)

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin in _SEQUENCES:
        return SeqSchema(args[0] if args else Any, _SEQUENCES[origin])
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SeqSchema(args[0], tuple)
        return TupleSchema(args)
    if origin in (dict, abc.Mapping, abc.MutableMapping):
        key, value = args if args else (str, Any)
        return MapSchema(key, value)

    if isinstance(tp, type):
        if issubclass(tp, Enum):
            return EnumSchema(tp)
        if dataclasses.is_dataclass(tp):
            if dataclasses.fields(tp):
                return StructSchema(tp)
            return UnitStructSchema(tp)
        if issubclass(tp, tuple) and hasattr(tp, "_fields"):
            return NamedTupleSchema(tp)
        if tp in _SEQUENCES:
            return SeqSchema(Any, _SEQUENCES[tp])
        if tp is tuple:
            return SeqSchema(Any, tuple)
        if tp is dict:
            return MapSchema(str, Any)

    raise TypeError(f"unsupported type hint: {tp!r}")
