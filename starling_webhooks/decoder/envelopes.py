"""
Public entry points: raw webhook body in, typed envelope out.

Each ``decode_*_event`` either returns a fully decoded envelope or raises a
``DecodeError``. Decoding is pure and keeps no state between calls, so the
functions can be called from any number of threads at once.
"""

import json
import logging
from typing import Any, Callable, TypeVar

from starling_webhooks.errors import DecodeError, MalformedInputError
from starling_webhooks.models import (
    FeedItemEvent,
    PaymentOrderEvent,
    PaymentOrderOutcomeEvent,
    WebhookEnvelope,
)

from .fields import Record
from .primitives import timestamp, uid
from .records import decode_feed_item, decode_payment_order, decode_payment_order_outcome

logger = logging.getLogger(__name__)

Body = bytes | bytearray | str
EnvelopeT = TypeVar("EnvelopeT", bound=WebhookEnvelope)


def _reject_constant(name: str) -> Any:
    raise MalformedInputError(f"non-standard JSON literal {name}")


def parse(body: Body) -> Any:
    """Parse a webhook body into plain Python objects."""
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"body is not UTF-8: {e}") from None
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except DecodeError:
        raise
    except ValueError as e:
        # JSONDecodeError, or an integer literal longer than the interpreter allows
        raise MalformedInputError(f"invalid JSON: {e}") from None
    except RecursionError:
        raise MalformedInputError("invalid JSON: nesting too deep") from None


def _decode_envelope(
    body: Body,
    envelope_cls: type[EnvelopeT],
    decode_content: Callable[[Any, str], Any],
) -> EnvelopeT:
    name = envelope_cls.__name__
    try:
        record = Record(parse(body), name, name)
        return envelope_cls(
            webhook_event_uid=record.required("webhookEventUid", uid),
            event_timestamp=record.required("eventTimestamp", timestamp),
            account_holder_uid=record.required("accountHolderUid", uid),
            content=record.required("content", decode_content),
        )
    except DecodeError as e:
        logger.debug("Rejected %s: %s", name, e)
        raise


def decode_feed_item_event(body: Body) -> FeedItemEvent:
    return _decode_envelope(body, FeedItemEvent, decode_feed_item)


def decode_payment_order_event(body: Body) -> PaymentOrderEvent:
    return _decode_envelope(body, PaymentOrderEvent, decode_payment_order)


def decode_payment_order_outcome_event(body: Body) -> PaymentOrderOutcomeEvent:
    return _decode_envelope(body, PaymentOrderOutcomeEvent, decode_payment_order_outcome)


# Webhook kind (as routed by the host) -> entry point.
DECODERS: dict[str, Callable[[Body], WebhookEnvelope]] = {
    "feed-item": decode_feed_item_event,
    "payment-order": decode_payment_order_event,
    "payment-order-outcome": decode_payment_order_outcome_event,
}
