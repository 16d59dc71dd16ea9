from .envelopes import (
    DECODERS,
    decode_feed_item_event,
    decode_payment_order_event,
    decode_payment_order_outcome_event,
    parse,
)
from .records import (
    decode_card_scheme_detail,
    decode_feed_item,
    decode_money,
    decode_payment_order,
    decode_payment_order_outcome,
    decode_round_up,
    decode_standing_order_recurrence,
)
from .vocabulary import vocabulary

__all__ = [
    "DECODERS", "parse",
    "decode_feed_item_event", "decode_payment_order_event", "decode_payment_order_outcome_event",
    "decode_feed_item", "decode_payment_order", "decode_payment_order_outcome",
    "decode_money", "decode_round_up", "decode_card_scheme_detail",
    "decode_standing_order_recurrence",
    "vocabulary",
]
