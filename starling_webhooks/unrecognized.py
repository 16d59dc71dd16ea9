import dataclasses
from typing import Any

from starling_webhooks.models import Unrecognized


def find_unrecognized(value: Any, path: str = "") -> list[tuple[str, Unrecognized]]:
    """List every vocabulary token in a decoded value that was not recognised.

    Paths use attribute names, e.g. ``content.amount.currency``.
    """
    if isinstance(value, Unrecognized):
        return [(path, value)]
    if not dataclasses.is_dataclass(value) or isinstance(value, type):
        return []
    found = []
    for f in dataclasses.fields(value):
        child = f"{path}.{f.name}" if path else f.name
        found.extend(find_unrecognized(getattr(value, f.name), child))
    return found
