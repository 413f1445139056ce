"""urlform-core — typed values to and from form-encoded key/value pairs."""

from .config import BracketStyle, Config, DEFAULT_CONFIG
from .de import decode, from_bytes, from_reader, from_str
from .errors import FormCoreError, ScalarParseError, StructuralError, UnsupportedValue
from .grouper import group, group_shapes
from .model import Kind, Multiple, Request, Single
from .schema import Char, Ignored, schema_for
from .ser import encode, to_bytes, to_string
from .val_or_vec import ValOrVec

__all__ = [
    "decode",
    "encode",
    "from_bytes",
    "from_reader",
    "from_str",
    "to_bytes",
    "to_string",
    "group",
    "group_shapes",
    "ValOrVec",
    "Single",
    "Multiple",
    "Kind",
    "Request",
    "Char",
    "Ignored",
    "schema_for",
    "Config",
    "BracketStyle",
    "DEFAULT_CONFIG",
    "FormCoreError",
    "UnsupportedValue",
    "ScalarParseError",
    "StructuralError",
]
