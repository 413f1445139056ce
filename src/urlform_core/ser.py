"""Serialize typed values into form-encoded output."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from .config import Config, DEFAULT_CONFIG
from .errors import StructuralError, UnsupportedValue
from .scalar import format_scalar, is_scalar
from .wire import PairEncoder


# Pairs follow element order, so unordered sets are rejected.
_SEQUENCE_TYPES = (list, tuple)


def _is_unit(value: Any) -> bool:
    if isinstance(value, tuple) and not value and not hasattr(value, "_fields"):
        return True
    return (
        dataclasses.is_dataclass(value)
        and not isinstance(value, type)
        and not dataclasses.fields(value)
    )


def _is_struct(value: Any) -> bool:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(value, "_fields")


def _struct_items(value: Any) -> list[tuple[str, Any]]:
    if isinstance(value, tuple):
        return list(zip(value._fields, value))
    return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]


# ---------------------------------------------------------------------------
# ValueSink — one key, zero or more pairs
# ---------------------------------------------------------------------------

class ValueSink:
    """Emit the pairs for one key.

    ``None`` and unit values emit nothing, a scalar emits one pair and a
    flat sequence emits one pair per element. A sink created for a sequence
    element is ``nested`` and rejects a further sequence.
    """

    __slots__ = ("encoder", "key", "config", "nested")

    def __init__(
        self,
        encoder: PairEncoder,
        key: str,
        config: Config = DEFAULT_CONFIG,
        nested: bool = False,
    ) -> None:
        self.encoder = encoder
        self.key = key
        self.config = config
        self.nested = nested

    def serialize(self, value: Any) -> None:
        if value is None or _is_unit(value):
            return
        if is_scalar(value):
            self.encoder.append_pair(self.key, format_scalar(value))
            return
        if _is_struct(value) or isinstance(value, Mapping):
            raise UnsupportedValue(
                f"{type(value).__name__} cannot be the value of `{self.key}`"
            )
        if isinstance(value, _SEQUENCE_TYPES):
            self.serialize_seq(value)
            return
        raise UnsupportedValue(type(value).__name__)

    def serialize_seq(self, items) -> None:
        if self.nested:
            raise UnsupportedValue(f"nested sequence under `{self.key}`")
        for index, item in enumerate(items):
            element_key = self.config.element_key(self.key, index)
            ValueSink(self.encoder, element_key, self.config, nested=True).serialize(item)


# ---------------------------------------------------------------------------
# Top level
# ---------------------------------------------------------------------------

def _format_key(key: Any) -> str:
    if is_scalar(key) and not isinstance(key, bytes):
        return format_scalar(key)
    raise UnsupportedValue(f"key of type {type(key).__name__}")


def _top_level_items(value: Any):
    if isinstance(value, Mapping):
        return list(value.items())
    if _is_struct(value):
        return _struct_items(value)
    if isinstance(value, _SEQUENCE_TYPES):
        items = []
        for pair in value:
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise StructuralError(
                    f"expected a (key, value) pair, got {pair!r}"
                )
            items.append((pair[0], pair[1]))
        return items
    raise UnsupportedValue("top-level serializer supports only maps and structs")


def encode(value: Any, config: Config | None = None) -> str:
    """Encode a map, struct or list of pairs as a form-encoded string."""
    config = config or DEFAULT_CONFIG
    encoder = PairEncoder()
    if value is None or _is_unit(value):
        return encoder.finish()

    for key, item in _top_level_items(value):
        ValueSink(encoder, _format_key(key), config).serialize(item)
    return encoder.finish()


def to_string(value: Any, config: Config | None = None) -> str:
    return encode(value, config)


def to_bytes(value: Any, config: Config | None = None) -> bytes:
    return encode(value, config).encode("ascii")
