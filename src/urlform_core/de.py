"""Deserialize form-encoded input into typed values."""

from __future__ import annotations

import logging
from typing import IO, Any

from .access import MapAccess, SeqAccess
from .config import Config, DEFAULT_CONFIG
from .errors import StructuralError
from .grouper import group
from .model import Kind, Request
from .scalar import Part
from .schema import schema_for
from .val_or_vec import ValOrVec
from .visitor import Visitor
from .wire import parse_pairs


logger = logging.getLogger(__name__)


class PairDeserializer:
    """One grouped key and its values, read as a two-element tuple."""

    __slots__ = ("key", "value")

    def __init__(self, key: str, value: ValOrVec) -> None:
        self.key = key
        self.value = value

    def deserialize(self, request: Request, visitor: Visitor) -> Any:
        if request.kind is Kind.IGNORED:
            return visitor.visit_unit()
        if request.kind is Kind.TUPLE and request.length != 2:
            raise StructuralError.invalid_length(2, request.describe())
        return visitor.visit_seq(SeqAccess([Part(self.key), self.value]))


class PairsDeserializer:
    """Top-level driver over the grouped pairs of one input."""

    __slots__ = ("groups",)

    def __init__(self, groups: dict[str, list[str]]) -> None:
        self.groups = groups

    @classmethod
    def from_pairs(cls, pairs) -> PairsDeserializer:
        return cls(group(pairs))

    def _entries(self) -> MapAccess:
        return MapAccess(
            (Part(key), ValOrVec.of(values)) for key, values in self.groups.items()
        )

    def _pairs(self) -> SeqAccess:
        return SeqAccess(
            PairDeserializer(key, ValOrVec.of(values))
            for key, values in self.groups.items()
        )

    def deserialize(self, request: Request, visitor: Visitor) -> Any:
        kind = request.kind
        if kind in (Kind.SEQ, Kind.TUPLE, Kind.TUPLE_STRUCT):
            return visitor.visit_seq(self._pairs())
        if kind in (Kind.UNIT, Kind.UNIT_STRUCT):
            if self.groups:
                raise StructuralError.invalid_length(len(self.groups), "0 pairs")
            return visitor.visit_unit()
        if kind is Kind.OPTION:
            return visitor.visit_some(self)
        if kind is Kind.NEWTYPE_STRUCT:
            return visitor.visit_newtype(self)
        if kind is Kind.IGNORED:
            return visitor.visit_unit()
        return visitor.visit_map(self._entries())


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def decode(data: bytes | str, tp: Any, config: Config | None = None) -> Any:
    """Decode a form-encoded buffer into a value of type hint *tp*."""
    config = config or DEFAULT_CONFIG
    deserializer = PairsDeserializer.from_pairs(parse_pairs(data, config))
    logger.debug("decoding %d keys as %r", len(deserializer.groups), tp)
    return schema_for(tp).load(deserializer)


def from_bytes(data: bytes, tp: Any, config: Config | None = None) -> Any:
    return decode(data, tp, config)


def from_str(text: str, tp: Any, config: Config | None = None) -> Any:
    return decode(text, tp, config)


def from_reader(reader: IO, tp: Any, config: Config | None = None) -> Any:
    """Read *reader* to the end, then decode its content."""
    return decode(reader.read(), tp, config)
