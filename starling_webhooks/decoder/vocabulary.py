from enum import Enum
from typing import Any, Callable, TypeVar

from starling_webhooks.errors import OutOfRangeError
from starling_webhooks.models.vocabulary import Unrecognized

from .primitives import text

E = TypeVar("E", bound=Enum)


def vocabulary(enum_cls: type[E]) -> Callable[[Any, str], E | Unrecognized]:
    """Build the field decoder for one controlled vocabulary.

    Tokens are matched exactly against the enum values. A token that is not
    listed decodes to ``Unrecognized(token)`` instead of failing, so new
    upstream values never break decoding. Non-text and empty tokens still fail.
    """

    def decode(value: Any, path: str) -> E | Unrecognized:
        token = text(value, path)
        if not token:
            raise OutOfRangeError(path, token, f"empty {enum_cls.__name__} token")
        try:
            return enum_cls(token)
        except ValueError:
            return Unrecognized(token)

    decode.__name__ = f"decode_{enum_cls.__name__}"
    return decode
