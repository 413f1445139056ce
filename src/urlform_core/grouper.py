"""Pair grouping: collect the values of repeated keys."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .model import Pair, Shape, shape_of


logger = logging.getLogger(__name__)

BRACKET_SUFFIX = "[]"


def normalize_key(key: str) -> str:
    """Strip a single trailing ``[]`` so ``a[]`` groups with ``a``."""
    if key.endswith(BRACKET_SUFFIX) and not key.endswith(BRACKET_SUFFIX * 2):
        return key[: -len(BRACKET_SUFFIX)]
    return key


def group(pairs: Iterable[Pair]) -> dict[str, list[str]]:
    """Group values by key in a single left-to-right pass.

    Keys keep the order of their first occurrence and values keep their
    occurrence order, however they interleave with other keys.
    """
    groups: dict[str, list[str]] = {}
    for key, value in pairs:
        key = normalize_key(key)
        values = groups.get(key)
        if values is None:
            groups[key] = [value]
        else:
            values.append(value)
    logger.debug("grouped pairs into %d keys", len(groups))
    return groups


def group_shapes(pairs: Iterable[Pair]) -> dict[str, Shape]:
    """Group *pairs* and tag each key as ``Single`` or ``Multiple``."""
    return {key: shape_of(values) for key, values in group(pairs).items()}
