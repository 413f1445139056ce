"""application/x-www-form-urlencoded tokenising and emission.

Percent coding itself is left to :mod:`urllib.parse`; this module only
splits and joins pairs.
"""

from __future__ import annotations

import logging
from urllib.parse import quote_plus, unquote_to_bytes

from .config import Config, DEFAULT_CONFIG
from .model import Pair


logger = logging.getLogger(__name__)

# ASCII alphanumerics plus these are left as is; quote_plus also keeps
# "_.-~", and "~" is escaped afterwards.
_SAFE = "*"


def _decode_token(raw: bytes, config: Config) -> str:
    if b"%" not in raw and b"+" not in raw:
        return raw.decode(config.encoding, config.errors)
    return unquote_to_bytes(raw.replace(b"+", b" ")).decode(
        config.encoding, config.errors
    )


def parse_pairs(data: bytes | str, config: Config = DEFAULT_CONFIG) -> list[Pair]:
    """Split a form-encoded buffer into decoded ``(key, value)`` pairs.

    Empty segments are skipped, so ``""``, ``"&"`` and ``"&&"`` all give
    ``[]``. A segment without ``=`` has an empty value.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    pairs: list[Pair] = []
    for segment in data.split(b"&"):
        if not segment:
            continue
        key, _, value = segment.partition(b"=")
        pairs.append((_decode_token(key, config), _decode_token(value, config)))

    logger.debug("parsed %d pairs from %d bytes", len(pairs), len(data))
    return pairs


def encode_token(text: str) -> str:
    return quote_plus(text, safe=_SAFE).replace("~", "%7E")


class PairEncoder:
    """Output target collecting encoded pairs in insertion order."""

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_pair(self, key: str, value: str) -> None:
        self._parts.append(f"{encode_token(key)}={encode_token(value)}")

    def finish(self) -> str:
        logger.debug("emitted %d pairs", len(self._parts))
        return "&".join(self._parts)
