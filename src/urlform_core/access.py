"""Sequence and map access handed to visitors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .visitor import Deserializer


class SeqAccess:
    """Ordered elements of a sequence, each one a deserializer."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Deserializer]) -> None:
        self._items = list(items)

    def __iter__(self) -> Iterator[Deserializer]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class MapAccess:
    """Ordered ``(key, value)`` deserializer pairs of a map."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[tuple[Deserializer, Deserializer]]) -> None:
        self._entries = list(entries)

    def __iter__(self) -> Iterator[tuple[Deserializer, Deserializer]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
