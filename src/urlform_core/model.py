"""Data model for urlform-core: pairs, request kinds and shape tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


Pair = tuple[str, str]


# ---------------------------------------------------------------------------
# Kind — what the consumer asks a deserializer for
# ---------------------------------------------------------------------------

class Kind(Enum):
    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    CHAR = auto()
    STR = auto()
    BYTES = auto()
    UNIT = auto()
    OPTION = auto()
    IDENTIFIER = auto()
    MAP = auto()
    ENUM = auto()
    TUPLE = auto()
    STRUCT = auto()
    UNIT_STRUCT = auto()
    TUPLE_STRUCT = auto()
    NEWTYPE_STRUCT = auto()
    SEQ = auto()
    ANY = auto()
    IGNORED = auto()


@dataclass(frozen=True, slots=True)
class Request:
    """A single type-directed request plus the metadata that travels with it."""

    kind: Kind
    name: str | None = None
    variants: tuple[str, ...] = ()
    fields: tuple[str, ...] = ()
    length: int | None = None

    def describe(self) -> str:
        if self.kind is Kind.TUPLE:
            return f"a tuple of size {self.length}"
        if self.name:
            return f"{self.kind.name.lower()} {self.name}"
        return self.kind.name.lower()


# ---------------------------------------------------------------------------
# Shape tags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Single:
    value: str


@dataclass(frozen=True, slots=True)
class Multiple:
    values: tuple[str, ...]


Shape = Union[Single, Multiple]


def shape_of(values: list[str]) -> Shape:
    """Classify a non-empty key group."""
    if len(values) == 1:
        return Single(values[0])
    return Multiple(tuple(values))
