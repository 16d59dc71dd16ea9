"""
Scalar field decoders.

Each decoder takes the parsed wire value and its dotted path and either
returns a Python value or raises a ``DecodeError`` naming that path.
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Callable
from uuid import UUID

from starling_webhooks.errors import OutOfRangeError, TypeMismatchError, describe
from starling_webhooks.models.money import LocalTime

from .fields import Record

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
NANOS_PER_SECOND = 1_000_000_000

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_UID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def text(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(path, "text", describe(value))
    return value


def boolean(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatchError(path, "boolean", describe(value))
    return value


def _integer(value: Any, path: str, low: int, high: int) -> int:
    # bool is an int subclass, but true/false are not integers on the wire
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(path, "integer", describe(value))
    if not low <= value <= high:
        raise OutOfRangeError(path, value, f"integer outside [{low}, {high}]")
    return value


def int32(value: Any, path: str) -> int:
    return _integer(value, path, INT32_MIN, INT32_MAX)


def int64(value: Any, path: str) -> int:
    return _integer(value, path, INT64_MIN, INT64_MAX)


def ratio(value: Any, path: str) -> float:
    """A floating point rate. Only used for exchange rates, never for money."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatchError(path, "number", describe(value))
    try:
        result = float(value)
    except OverflowError:
        raise OutOfRangeError(path, value, "number too large for a float") from None
    # json.loads reads literals such as 1e400 as inf
    if not math.isfinite(result):
        raise OutOfRangeError(path, value, "number is not finite")
    return result


def uid(value: Any, path: str) -> UUID:
    raw = text(value, path)
    # UUID() also takes braces, urn: prefixes and misplaced hyphens
    if not _UID_PATTERN.fullmatch(raw):
        raise OutOfRangeError(path, raw, "not a UUID")
    return UUID(raw)


def timestamp(value: Any, path: str) -> datetime:
    """An instant with an explicit offset, normalised to UTC."""
    raw = text(value, path)
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise OutOfRangeError(path, raw, "not an ISO-8601 timestamp") from None
    if parsed.tzinfo is None:
        raise OutOfRangeError(path, raw, "timestamp has no UTC offset")
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        raise OutOfRangeError(path, raw, "timestamp outside the representable range") from None


def calendar_date(value: Any, path: str) -> date:
    raw = text(value, path)
    if not _DATE_PATTERN.fullmatch(raw):
        raise OutOfRangeError(path, raw, "not a YYYY-MM-DD date")
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise OutOfRangeError(path, raw, "not a calendar date") from None


def _bounded(high: int) -> Callable[[Any, str], int]:
    def decode(value: Any, path: str) -> int:
        return _integer(value, path, 0, high)

    return decode


def local_time(value: Any, path: str) -> LocalTime:
    record = Record(value, path, "LocalTime")
    return LocalTime(
        hour=record.required("hour", _bounded(23)),
        minute=record.required("minute", _bounded(59)),
        second=record.required("second", _bounded(59)),
        nano=record.required("nano", _bounded(NANOS_PER_SECOND - 1)),
    )
