from .vocabulary import (
    VOCABULARIES,
    CounterPartyType,
    Country,
    Currency,
    Direction,
    FeedItemFailureReason,
    Frequency,
    Source,
    SourceSubType,
    SpendingCategory,
    Status,
    Unrecognized,
)
from .money import LocalTime, Money
from .feed_item import CardSchemeDetail, CounterParty, FeedItem, RoundUp
from .payment_order import PaymentOrder, PaymentOrderOutcome, StandingOrderRecurrence
from .envelope import (
    FeedItemEvent,
    PaymentOrderEvent,
    PaymentOrderOutcomeEvent,
    WebhookEnvelope,
)

__all__ = [
    "VOCABULARIES", "Unrecognized",
    "Currency", "Country", "Direction", "Source", "SourceSubType", "Status",
    "CounterPartyType", "SpendingCategory", "FeedItemFailureReason", "Frequency",
    "Money", "LocalTime",
    "FeedItem", "CounterParty", "RoundUp", "CardSchemeDetail",
    "PaymentOrder", "PaymentOrderOutcome", "StandingOrderRecurrence",
    "WebhookEnvelope", "FeedItemEvent", "PaymentOrderEvent", "PaymentOrderOutcomeEvent",
]
