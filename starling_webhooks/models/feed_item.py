from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from .money import LocalTime, Money
from .vocabulary import (
    CounterPartyType,
    Country,
    Direction,
    FeedItemFailureReason,
    Source,
    SourceSubType,
    SpendingCategory,
    Status,
    Unrecognized,
)


@dataclass(frozen=True)
class RoundUp:
    goal_category_uid: UUID
    amount: Money


@dataclass(frozen=True)
class CardSchemeDetail:
    """Card scheme data attached to card transactions."""

    merchant_identifier: str
    mcc: int
    pos_timestamp: LocalTime
    authorisation_code: str
    card_last_4: str


@dataclass(frozen=True)
class CounterParty:
    type: CounterPartyType | Unrecognized
    uid: UUID | None = None
    name: str | None = None
    sub_entity_uid: UUID | None = None
    sub_entity_name: str | None = None
    sub_entity_identifier: str | None = None
    sub_entity_sub_identifier: str | None = None


@dataclass(frozen=True)
class FeedItem:
    """An item from the account holder's transaction feed."""

    feed_item_uid: UUID
    category_uid: UUID
    account_uid: UUID
    amount: Money
    source_amount: Money
    direction: Direction | Unrecognized
    updated_at: datetime
    transaction_time: datetime
    settlement_time: datetime
    source: Source | Unrecognized
    source_sub_type: SourceSubType | Unrecognized | None
    status: Status | Unrecognized
    transacting_application_user_uid: UUID | None
    counter_party: CounterParty
    exchange_rate: float | None
    total_fee_amount: Money | None
    reference: str
    country: Country | Unrecognized
    spending_category: SpendingCategory | Unrecognized
    user_note: str | None
    round_up: RoundUp | None
    has_attachment: bool
    receipt_present: bool
    failure_reason: FeedItemFailureReason | Unrecognized | None
    card_scheme_detail: CardSchemeDetail | None
