from typing import Any, Callable, TypeVar

from starling_webhooks.errors import MissingFieldError, TypeMismatchError, describe

T = TypeVar("T")

# Every field decoder takes the raw parsed value and the dotted path of the field.
FieldDecoder = Callable[[Any, str], T]


class Record:
    """One wire object being decoded into a named record.

    Fields are looked up by exact camelCase name; any field the record does
    not ask for is ignored.
    """

    def __init__(self, value: Any, path: str, name: str):
        if not isinstance(value, dict):
            raise TypeMismatchError(path, "object", describe(value))
        self._data = value
        self.path = path
        self.name = name

    def field_path(self, key: str) -> str:
        return f"{self.path}.{key}" if self.path else key

    def required(self, key: str, decode: FieldDecoder[T]) -> T:
        """Decode a field that must be present. An explicit null is a type error."""
        if key not in self._data:
            raise MissingFieldError(self.field_path(key), self.name)
        return decode(self._data[key], self.field_path(key))

    def optional(self, key: str, decode: FieldDecoder[T], *aliases: str) -> T | None:
        """Decode a field that may be absent or null.

        ``aliases`` are alternative spellings tried in order after ``key``.
        """
        for name in (key, *aliases):
            value = self._data.get(name)
            if value is not None:
                return decode(value, self.field_path(name))
        return None
