"""Shape dispatch for one grouped key.

A key seen once is a ``Single`` and answers every request through the
scalar codec. A key seen more than once is a ``Multiple`` and answers only
sequence-like requests; anything else fails with :class:`UnsupportedValue`,
since the consumer cannot know beforehand whether a key repeated.
"""

from __future__ import annotations

from typing import Any

from .access import SeqAccess
from .errors import UnsupportedValue
from .model import Kind, Request, Shape, Single, shape_of
from .scalar import Part
from .visitor import Visitor


class ValOrVec:
    __slots__ = ("shape",)

    def __init__(self, shape: Shape) -> None:
        self.shape = shape

    @classmethod
    def of(cls, values: list[str]) -> ValOrVec:
        return cls(shape_of(values))

    def __repr__(self) -> str:
        return f"ValOrVec({self.shape!r})"

    def deserialize(self, request: Request, visitor: Visitor) -> Any:
        kind = request.kind
        shape = self.shape

        if kind is Kind.IGNORED:
            return visitor.visit_unit()

        if isinstance(shape, Single):
            return Part(shape.value).deserialize(request, visitor)

        if kind is Kind.SEQ or kind is Kind.ANY:
            return visitor.visit_seq(
                SeqAccess(Part(value, nested=True) for value in shape.values)
            )
        raise UnsupportedValue(
            f"{len(shape.values)} values cannot be read as {request.describe()}"
        )
