"""Scalar codec: one decoded string to or from one scalar value."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from .access import SeqAccess
from .errors import ScalarParseError, UnsupportedValue
from .model import Kind, Request
from .visitor import Visitor


_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

_BOOLS = {"true": True, "false": False}


# ---------------------------------------------------------------------------
# Literal parsing
# ---------------------------------------------------------------------------

def parse_bool(text: str) -> bool:
    try:
        return _BOOLS[text]
    except KeyError:
        raise ScalarParseError(text, "a boolean") from None


def parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ScalarParseError(text, "an integer")
    return int(text)


def parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ScalarParseError(text, "a floating point number")
    return float(text)


def parse_char(text: str) -> str:
    if len(text) != 1:
        raise ScalarParseError(text, "a character", f"got {len(text)} characters")
    return text


# ---------------------------------------------------------------------------
# Part — deserializer over one decoded string
# ---------------------------------------------------------------------------

class Part:
    """A single decoded string answering any scalar-shaped request.

    A part that is already an element of a sequence (``nested``) refuses
    to be read as a sequence itself.
    """

    __slots__ = ("text", "nested")

    def __init__(self, text: str, nested: bool = False) -> None:
        self.text = text
        self.nested = nested

    def __repr__(self) -> str:
        return f"Part({self.text!r})"

    def deserialize(self, request: Request, visitor: Visitor) -> Any:
        kind = request.kind
        text = self.text

        if kind is Kind.BOOL:
            return visitor.visit_bool(parse_bool(text))
        if kind is Kind.INT:
            return visitor.visit_int(parse_int(text))
        if kind is Kind.FLOAT:
            return visitor.visit_float(parse_float(text))
        if kind is Kind.CHAR:
            return visitor.visit_str(parse_char(text))
        if kind is Kind.BYTES:
            return visitor.visit_bytes(text.encode("utf-8"))
        if kind is Kind.OPTION:
            return visitor.visit_some(self)
        if kind is Kind.NEWTYPE_STRUCT:
            return visitor.visit_newtype(self)
        if kind is Kind.ENUM:
            if text not in request.variants:
                expected = ", ".join(f"`{v}`" for v in request.variants)
                raise ScalarParseError(
                    text, f"one of {expected}", f"unknown variant of {request.name}"
                )
            return visitor.visit_enum(text)
        if kind is Kind.SEQ:
            if self.nested:
                raise UnsupportedValue("nested sequence")
            return visitor.visit_seq(SeqAccess([Part(text, nested=True)]))
        if kind is Kind.IGNORED:
            return visitor.visit_unit()
        # STR, IDENTIFIER, ANY and the compound kinds all see a plain string.
        return visitor.visit_str(text)


# ---------------------------------------------------------------------------
# Formatting — the serialize half
# ---------------------------------------------------------------------------

def is_scalar(value: object) -> bool:
    return isinstance(value, (str, bytes, bool, int, float, Enum))


def format_scalar(value: object) -> str:
    """Render one scalar value as the string placed on the wire."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ScalarParseError(repr(value), "UTF-8 bytes", str(exc)) from exc
    if isinstance(value, (int, float)):
        return str(value)
    raise UnsupportedValue(type(value).__name__)
