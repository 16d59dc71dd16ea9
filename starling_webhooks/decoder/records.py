"""
Composite record decoders.

Each ``decode_*`` function takes a parsed wire object and the path of that
object, and returns the matching immutable model. The default path is the
record name, so errors from a standalone call read ``FeedItem.amount.currency``.
"""

from typing import Any

from starling_webhooks.models import (
    CardSchemeDetail,
    CounterParty,
    CounterPartyType,
    Country,
    Currency,
    Direction,
    FeedItem,
    FeedItemFailureReason,
    Frequency,
    Money,
    PaymentOrder,
    PaymentOrderOutcome,
    RoundUp,
    Source,
    SourceSubType,
    SpendingCategory,
    StandingOrderRecurrence,
    Status,
)

from .fields import Record
from .primitives import (
    boolean,
    calendar_date,
    int32,
    int64,
    local_time,
    ratio,
    text,
    timestamp,
    uid,
)
from .vocabulary import vocabulary

currency = vocabulary(Currency)
country = vocabulary(Country)
direction = vocabulary(Direction)
source = vocabulary(Source)
source_sub_type = vocabulary(SourceSubType)
status = vocabulary(Status)
counter_party_type = vocabulary(CounterPartyType)
spending_category = vocabulary(SpendingCategory)
failure_reason = vocabulary(FeedItemFailureReason)
frequency = vocabulary(Frequency)


def decode_money(value: Any, path: str = "Money") -> Money:
    record = Record(value, path, "Money")
    return Money(
        currency=record.required("currency", currency),
        minor_units=record.required("minorUnits", int64),
    )


def decode_round_up(value: Any, path: str = "RoundUp") -> RoundUp:
    record = Record(value, path, "RoundUp")
    return RoundUp(
        goal_category_uid=record.required("goalCategoryUid", uid),
        amount=record.required("amount", decode_money),
    )


def decode_card_scheme_detail(value: Any, path: str = "CardSchemeDetail") -> CardSchemeDetail:
    record = Record(value, path, "CardSchemeDetail")
    return CardSchemeDetail(
        merchant_identifier=record.required("merchantIdentifier", text),
        mcc=record.required("mcc", int32),
        pos_timestamp=record.required("posTimestamp", local_time),
        authorisation_code=record.required("authorisationCode", text),
        card_last_4=record.required("cardLast4", text),
    )


def _counter_party(record: Record) -> CounterParty:
    # Counter party fields sit flat on the feed item on the wire.
    return CounterParty(
        type=record.required("counterPartyType", counter_party_type),
        uid=record.optional("counterPartyUid", uid),
        name=record.optional("counterPartyName", text),
        sub_entity_uid=record.optional("counterPartySubEntityUid", uid),
        sub_entity_name=record.optional("counterPartySubEntityName", text),
        sub_entity_identifier=record.optional("counterPartySubEntityIdentifier", text),
        sub_entity_sub_identifier=record.optional("counterPartySubEntitySubIdentifier", text),
    )


def decode_feed_item(value: Any, path: str = "FeedItem") -> FeedItem:
    record = Record(value, path, "FeedItem")
    return FeedItem(
        feed_item_uid=record.required("feedItemUid", uid),
        category_uid=record.required("categoryUid", uid),
        account_uid=record.required("accountUid", uid),
        amount=record.required("amount", decode_money),
        source_amount=record.required("sourceAmount", decode_money),
        direction=record.required("direction", direction),
        updated_at=record.required("updatedAt", timestamp),
        transaction_time=record.required("transactionTime", timestamp),
        settlement_time=record.required("settlementTime", timestamp),
        source=record.required("source", source),
        source_sub_type=record.optional("sourceSubType", source_sub_type),
        status=record.required("status", status),
        transacting_application_user_uid=record.optional("transactingApplicationUserUid", uid),
        counter_party=_counter_party(record),
        exchange_rate=record.optional("exchangeRate", ratio),
        total_fee_amount=record.optional("totalFeeAmount", decode_money),
        reference=record.required("reference", text),
        country=record.required("country", country),
        spending_category=record.required("spendingCategory", spending_category),
        user_note=record.optional("userNote", text),
        round_up=record.optional("roundUp", decode_round_up),
        has_attachment=record.required("hasAttachment", boolean),
        receipt_present=record.required("receiptPresent", boolean),
        failure_reason=record.optional("feedItemFailureReason", failure_reason),
        card_scheme_detail=record.optional("masterCardFeedDetails", decode_card_scheme_detail),
    )


def decode_standing_order_recurrence(
    value: Any, path: str = "StandingOrderRecurrence"
) -> StandingOrderRecurrence:
    record = Record(value, path, "StandingOrderRecurrence")
    return StandingOrderRecurrence(
        start_date=record.required("startDate", calendar_date),
        frequency=record.optional("frequency", frequency),
        interval=record.optional("interval", int32),
        count=record.optional("count", int32),
        until_date=record.required("untilDate", calendar_date),
    )


def decode_payment_order(value: Any, path: str = "PaymentOrder") -> PaymentOrder:
    record = Record(value, path, "PaymentOrder")
    return PaymentOrder(
        payment_order_uid=record.required("paymentOrderUid", uid),
        category_uid=record.required("categoryUid", uid),
        amount=record.required("amount", decode_money),
        reference=record.required("reference", text),
        payee_uid=record.required("payeeUid", uid),
        payee_account_uid=record.required("payeeAccountUid", uid),
        payment_order_recurrence=record.optional(
            "paymentOrderRecurrence",
            decode_standing_order_recurrence,
            "paymentOrderRecurrance",
        ),
        processed_immediately=record.required("processedImmediately", boolean),
        next_date=record.required("nextDate", calendar_date),
        cancelled_at=record.required("cancelledAt", timestamp),
        updated_at=record.required("updatedAt", timestamp),
        spending_category=record.optional("spendingCategory", spending_category),
        standing_order_recurrence=record.optional(
            "standingOrderRecurrence",
            decode_standing_order_recurrence,
            "standingOrderRecurrance",
        ),
    )


def decode_payment_order_outcome(
    value: Any, path: str = "PaymentOrderOutcome"
) -> PaymentOrderOutcome:
    record = Record(value, path, "PaymentOrderOutcome")
    return PaymentOrderOutcome(
        payment_order=record.required("paymentOrder", decode_payment_order),
        success=record.required("success", boolean),
        reason=record.required("reason", text),
        payment_uid=record.required("paymentUid", uid),
    )
