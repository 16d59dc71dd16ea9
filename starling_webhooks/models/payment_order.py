from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from .money import Money
from .vocabulary import Frequency, SpendingCategory, Unrecognized


@dataclass(frozen=True)
class StandingOrderRecurrence:
    start_date: date
    until_date: date
    frequency: Frequency | Unrecognized | None = None
    interval: int | None = None
    count: int | None = None


@dataclass(frozen=True)
class PaymentOrder:
    """A payment instruction to be carried out at a specific point in time."""

    payment_order_uid: UUID
    category_uid: UUID
    amount: Money
    reference: str
    payee_uid: UUID
    payee_account_uid: UUID
    processed_immediately: bool
    next_date: date
    cancelled_at: datetime
    updated_at: datetime
    payment_order_recurrence: StandingOrderRecurrence | None = None  # legacy
    spending_category: SpendingCategory | Unrecognized | None = None
    standing_order_recurrence: StandingOrderRecurrence | None = None


@dataclass(frozen=True)
class PaymentOrderOutcome:
    payment_order: PaymentOrder
    success: bool
    reason: str
    payment_uid: UUID
