"""Codec configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class BracketStyle(Enum):
    """How the elements of a sequence value are keyed on output."""

    TRAILING = auto()  # key=a&key[]=b&key[]=c
    ALL = auto()       # key[]=a&key[]=b&key[]=c


@dataclass(frozen=True, slots=True)
class Config:
    bracket_style: BracketStyle = BracketStyle.TRAILING
    encoding: str = "utf-8"  # charset of percent-escaped bytes
    errors: str = "replace"

    def element_key(self, key: str, index: int) -> str:
        """Return the key used for the element at *index* of a sequence."""
        if index == 0 and self.bracket_style is BracketStyle.TRAILING:
            return key
        return key + "[]"


DEFAULT_CONFIG = Config()
