"""
Decode error classes.

Every failure carries the dotted path of the offending field, starting at the
record or envelope being decoded (``FeedItemEvent.content.roundUp.amount``).
"""

from typing import Any


class DecodeError(ValueError):
    """Base class for all decode failures."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if path else reason)

    def to_dict(self) -> dict:
        return {
            "error": str(self),
            "kind": type(self).__name__,
            "path": self.path,
        }


class MalformedInputError(DecodeError):
    """The body is not a structured-text document at all."""

    def __init__(self, reason: str):
        super().__init__("", reason)


class MissingFieldError(DecodeError):
    """A required field is absent."""

    def __init__(self, path: str, record: str):
        self.record = record
        super().__init__(path, f"missing required field of {record}")


class TypeMismatchError(DecodeError):
    """A field is present but has the wrong shape."""

    def __init__(self, path: str, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(path, f"expected {expected}, got {actual}")


class OutOfRangeError(DecodeError):
    """A scalar has the right shape but an unacceptable value."""

    def __init__(self, path: str, value: Any, reason: str):
        self.value = value
        super().__init__(path, f"{reason} (got {value!r})")


def describe(value: Any) -> str:
    """Name the wire shape of a parsed value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
