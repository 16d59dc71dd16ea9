from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from .feed_item import FeedItem
from .payment_order import PaymentOrder, PaymentOrderOutcome


@dataclass(frozen=True)
class WebhookEnvelope:
    """Event metadata shared by every webhook delivery."""

    webhook_event_uid: UUID
    event_timestamp: datetime
    account_holder_uid: UUID


@dataclass(frozen=True)
class FeedItemEvent(WebhookEnvelope):
    content: FeedItem


@dataclass(frozen=True)
class PaymentOrderEvent(WebhookEnvelope):
    content: PaymentOrder


@dataclass(frozen=True)
class PaymentOrderOutcomeEvent(WebhookEnvelope):
    content: PaymentOrderOutcome
