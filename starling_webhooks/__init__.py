"""Typed, forward-compatible decoding of Starling Bank webhook payloads."""

from .decoder import (
    DECODERS,
    decode_feed_item_event,
    decode_payment_order_event,
    decode_payment_order_outcome_event,
)
from .errors import (
    DecodeError,
    MalformedInputError,
    MissingFieldError,
    OutOfRangeError,
    TypeMismatchError,
)
from .models import (
    FeedItemEvent,
    PaymentOrderEvent,
    PaymentOrderOutcomeEvent,
    Unrecognized,
)
from .unrecognized import find_unrecognized

__all__ = [
    "DECODERS",
    "decode_feed_item_event", "decode_payment_order_event", "decode_payment_order_outcome_event",
    "DecodeError", "MalformedInputError", "MissingFieldError", "OutOfRangeError",
    "TypeMismatchError",
    "FeedItemEvent", "PaymentOrderEvent", "PaymentOrderOutcomeEvent", "Unrecognized",
    "find_unrecognized",
]
