import uuid
from datetime import datetime, timezone


def _uid() -> str:
    return str(uuid.uuid4())


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def money(currency: str = "GBP", minor_units: int = 1050) -> dict:
    return {"currency": currency, "minorUnits": minor_units}


class PayloadFactory:
    """Builds wire-format (camelCase) webhook payloads with sensible defaults.

    Every method takes keyword overrides applied on top of the defaults. An
    override of ``None`` removes the field, which is how tests build payloads
    with optional or required fields missing.
    """

    @staticmethod
    def _apply(base: dict, overrides: dict) -> dict:
        for key, value in overrides.items():
            if value is None:
                base.pop(key, None)
            else:
                base[key] = value
        return base

    @staticmethod
    def feed_item(**overrides) -> dict:
        """A settled card payment with every optional field populated."""
        now = _now()
        base = {
            "feedItemUid": _uid(),
            "categoryUid": _uid(),
            "accountUid": _uid(),
            "amount": money(),
            "sourceAmount": money(),
            "direction": "OUT",
            "updatedAt": now,
            "transactionTime": now,
            "settlementTime": now,
            "source": "MASTER_CARD",
            "sourceSubType": "CONTACTLESS",
            "status": "SETTLED",
            "transactingApplicationUserUid": _uid(),
            "counterPartyType": "MERCHANT",
            "counterPartyUid": _uid(),
            "counterPartyName": "Pret A Manger",
            "counterPartySubEntityUid": _uid(),
            "counterPartySubEntityName": "Pret Kings Cross",
            "counterPartySubEntityIdentifier": "608371",
            "counterPartySubEntitySubIdentifier": "12345678",
            "exchangeRate": 1.0,
            "totalFeeAmount": money(minor_units=0),
            "reference": "PRET A MANGER",
            "country": "GB",
            "spendingCategory": "EATING_OUT",
            "userNote": "Lunch",
            "roundUp": {"goalCategoryUid": _uid(), "amount": money(minor_units=50)},
            "hasAttachment": False,
            "receiptPresent": False,
            "feedItemFailureReason": "INSUFFICIENT_FUNDS",
            "masterCardFeedDetails": {
                "merchantIdentifier": "MID0001",
                "mcc": 5812,
                "posTimestamp": {"hour": 12, "minute": 30, "second": 15, "nano": 0},
                "authorisationCode": "AUTH01",
                "cardLast4": "4242",
            },
        }
        return PayloadFactory._apply(base, overrides)

    @staticmethod
    def standing_order_recurrence(**overrides) -> dict:
        base = {
            "startDate": "2024-01-01",
            "frequency": "MONTHLY",
            "interval": 1,
            "count": 12,
            "untilDate": "2024-12-01",
        }
        return PayloadFactory._apply(base, overrides)

    @staticmethod
    def payment_order(**overrides) -> dict:
        now = _now()
        base = {
            "paymentOrderUid": _uid(),
            "categoryUid": _uid(),
            "amount": money(minor_units=25000),
            "reference": "RENT",
            "payeeUid": _uid(),
            "payeeAccountUid": _uid(),
            "processedImmediately": False,
            "nextDate": "2024-02-01",
            "cancelledAt": now,
            "updatedAt": now,
            "spendingCategory": "BILLS_AND_SERVICES",
            "standingOrderRecurrence": PayloadFactory.standing_order_recurrence(),
        }
        return PayloadFactory._apply(base, overrides)

    @staticmethod
    def payment_order_outcome(**overrides) -> dict:
        base = {
            "paymentOrder": PayloadFactory.payment_order(),
            "success": True,
            "reason": "PAYMENT_SUCCEEDED",
            "paymentUid": _uid(),
        }
        return PayloadFactory._apply(base, overrides)


class WebhookFactory:
    """Wraps payloads in webhook envelopes, one method per webhook kind."""

    @staticmethod
    def envelope(content: dict, **overrides) -> dict:
        base = {
            "webhookEventUid": _uid(),
            "eventTimestamp": _now(),
            "accountHolderUid": _uid(),
            "content": content,
        }
        return PayloadFactory._apply(base, overrides)

    @staticmethod
    def feed_item_event(content: dict | None = None, **overrides) -> dict:
        return WebhookFactory.envelope(
            content if content is not None else PayloadFactory.feed_item(), **overrides
        )

    @staticmethod
    def payment_order_event(content: dict | None = None, **overrides) -> dict:
        return WebhookFactory.envelope(
            content if content is not None else PayloadFactory.payment_order(), **overrides
        )

    @staticmethod
    def payment_order_outcome_event(content: dict | None = None, **overrides) -> dict:
        return WebhookFactory.envelope(
            content if content is not None else PayloadFactory.payment_order_outcome(), **overrides
        )

    @staticmethod
    def create_event(kind: str = "feed-item", **overrides) -> dict:
        builders = {
            "feed-item": WebhookFactory.feed_item_event,
            "payment-order": WebhookFactory.payment_order_event,
            "payment-order-outcome": WebhookFactory.payment_order_outcome_event,
        }
        return builders[kind](**overrides)
