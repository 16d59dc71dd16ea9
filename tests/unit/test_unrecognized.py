import json

import pytest

from starling_webhooks import Unrecognized, decode_feed_item_event, decode_payment_order_event
from starling_webhooks.unrecognized import find_unrecognized
from starling_webhooks.utils.factories import PayloadFactory, WebhookFactory, money


class TestFindUnrecognized:
    """Tests for listing unrecognized tokens in a decoded envelope."""

    @pytest.mark.unit
    def test_nothing_to_report(self):
        event = decode_feed_item_event(json.dumps(WebhookFactory.feed_item_event()))
        assert find_unrecognized(event) == []

    @pytest.mark.unit
    def test_reports_paths_of_unknown_tokens(self):
        content = PayloadFactory.feed_item(
            status="ON_HOLD",
            roundUp={"goalCategoryUid": "6b7b0f8e-1d11-4a43-8a5d-6f0f7e3f0a10", "amount": money("ZZZ", 5)},
        )
        event = decode_feed_item_event(json.dumps(WebhookFactory.feed_item_event(content)))

        assert find_unrecognized(event) == [
            ("content.status", Unrecognized("ON_HOLD")),
            ("content.round_up.amount.currency", Unrecognized("ZZZ")),
        ]

    @pytest.mark.unit
    def test_counter_party_type(self):
        content = PayloadFactory.feed_item(counterPartyType="MARKETPLACE")
        event = decode_feed_item_event(json.dumps(WebhookFactory.feed_item_event(content)))
        assert find_unrecognized(event) == [
            ("content.counter_party.type", Unrecognized("MARKETPLACE")),
        ]

    @pytest.mark.unit
    def test_nested_recurrence(self):
        content = PayloadFactory.payment_order(
            standingOrderRecurrence=PayloadFactory.standing_order_recurrence(frequency="QUARTERLY")
        )
        event = decode_payment_order_event(json.dumps(WebhookFactory.payment_order_event(content)))
        assert find_unrecognized(event) == [
            ("content.standing_order_recurrence.frequency", Unrecognized("QUARTERLY")),
        ]

    @pytest.mark.unit
    def test_plain_values(self):
        assert find_unrecognized(Unrecognized("X"), "currency") == [("currency", Unrecognized("X"))]
        assert find_unrecognized(None) == []
        assert find_unrecognized("text") == []
