"""Error taxonomy for urlform-core."""

from __future__ import annotations


class FormCoreError(Exception):
    """Base class for every error raised by urlform-core."""


class UnsupportedValue(FormCoreError):
    """A value shape that the flat pair format cannot represent.

    Raised when a repeated key is read as anything but a sequence, or when a
    sequence is nested inside another sequence on either side.
    """

    def __init__(self, detail: str | None = None) -> None:
        message = "unsupported value"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class ScalarParseError(FormCoreError, ValueError):
    """A decoded string could not be converted to the requested scalar."""

    def __init__(self, text: str, expected: str, reason: str | None = None) -> None:
        message = f"invalid value {text!r}, expected {expected}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.text = text
        self.expected = expected


class StructuralError(FormCoreError):
    """The consumer's structural expectation was not met."""

    @classmethod
    def invalid_type(cls, found: str, expected: str) -> StructuralError:
        return cls(f"invalid type: {found}, expected {expected}")

    @classmethod
    def invalid_length(cls, length: int, expected: str) -> StructuralError:
        return cls(f"invalid length {length}, expected {expected}")

    @classmethod
    def missing_field(cls, name: str) -> StructuralError:
        return cls(f"missing field `{name}`")

    @classmethod
    def duplicate_field(cls, name: str) -> StructuralError:
        return cls(f"duplicate field `{name}`")
