"""Visitor and deserializer interfaces shared by every layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from .errors import StructuralError
from .model import Request

if TYPE_CHECKING:
    from .access import MapAccess, SeqAccess


class Deserializer(Protocol):
    """Anything that can answer a type-directed request."""

    def deserialize(self, request: Request, visitor: Visitor) -> Any: ...


class Visitor:
    """Receives whatever a deserializer produced for a request.

    Every method rejects its input by default; subclasses override the ones
    that make sense for the value they build.
    """

    expecting = "a value"

    def _reject(self, found: str):
        return StructuralError.invalid_type(found, self.expecting)

    def visit_bool(self, value: bool) -> Any:
        raise self._reject(f"boolean `{str(value).lower()}`")

    def visit_int(self, value: int) -> Any:
        raise self._reject(f"integer `{value}`")

    def visit_float(self, value: float) -> Any:
        raise self._reject(f"floating point `{value}`")

    def visit_str(self, value: str) -> Any:
        raise self._reject(f"string {value!r}")

    def visit_bytes(self, value: bytes) -> Any:
        raise self._reject("byte array")

    def visit_unit(self) -> Any:
        raise self._reject("unit value")

    def visit_none(self) -> Any:
        raise self._reject("Option value")

    def visit_some(self, deserializer: Deserializer) -> Any:
        raise self._reject("Option value")

    def visit_newtype(self, deserializer: Deserializer) -> Any:
        raise self._reject("newtype struct")

    def visit_enum(self, variant: str) -> Any:
        raise self._reject("enum")

    def visit_seq(self, seq: SeqAccess) -> Any:
        raise self._reject("sequence")

    def visit_map(self, entries: MapAccess) -> Any:
        raise self._reject("map")
