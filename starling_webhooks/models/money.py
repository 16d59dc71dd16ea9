from dataclasses import dataclass
from datetime import time

from .vocabulary import Currency, Unrecognized


@dataclass(frozen=True)
class Money:
    """An amount in the minor units (pence, cents) of its currency."""

    currency: Currency | Unrecognized
    minor_units: int


@dataclass(frozen=True)
class LocalTime:
    """Merchant wall-clock time of a card sale. No date, no timezone."""

    hour: int
    minute: int
    second: int
    nano: int

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second, self.nano // 1000)
