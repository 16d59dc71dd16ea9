"""Integration tests for decoding deliveries through the HTTP receiver."""

import json

import pytest
import requests

from starling_webhooks.models import FeedItemEvent, PaymentOrderEvent, PaymentOrderOutcomeEvent
from starling_webhooks.utils.factories import PayloadFactory, WebhookFactory


pytestmark = pytest.mark.integration


def _post(receiver, kind: str, payload) -> requests.Response:
    return requests.post(
        receiver.url(kind),
        data=json.dumps(payload),
        headers={"Content-Type": "application/json"},
        timeout=5,
    )


class TestReceiverDecodes:
    """Each route decodes its own webhook kind."""

    @pytest.mark.parametrize(
        "kind,envelope_cls",
        [
            ("feed-item", FeedItemEvent),
            ("payment-order", PaymentOrderEvent),
            ("payment-order-outcome", PaymentOrderOutcomeEvent),
        ],
    )
    def test_route_decodes_kind(self, receiver, kind, envelope_cls):
        payload = WebhookFactory.create_event(kind)
        resp = _post(receiver, kind, payload)

        assert resp.status_code == 200
        assert resp.json()["webhookEventUid"] == payload["webhookEventUid"]
        received = receiver.get_received(kind)
        assert len(received) == 1
        assert isinstance(received[0], envelope_cls)

    def test_metrics_count_decoded(self, receiver, metrics):
        for _ in range(3):
            _post(receiver, "feed-item", WebhookFactory.feed_item_event())

        assert metrics.decoded_count_in_window("feed-item") == 3
        assert metrics.rejection_rate() == 0.0
        assert receiver.get_received_count() == 3

    def test_unrecognized_tokens_are_accepted_and_counted(self, receiver, metrics):
        content = PayloadFactory.feed_item(country="XZ", source="OPEN_BANKING")
        resp = _post(receiver, "feed-item", WebhookFactory.feed_item_event(content))

        assert resp.status_code == 200
        counts = metrics.unrecognized_in_window()
        assert counts["content.country"] == 1
        assert counts["content.source"] == 1

    def test_unknown_route_returns_404(self, receiver):
        resp = _post(receiver, "account-closed", WebhookFactory.feed_item_event())
        assert resp.status_code == 404
        assert receiver.get_received_count() == 0


class TestReceiverRejects:
    """Structurally invalid deliveries get a 400 with the decode error."""

    def test_missing_field_reports_path(self, receiver, metrics):
        payload = WebhookFactory.feed_item_event(PayloadFactory.feed_item(feedItemUid=None))
        resp = _post(receiver, "feed-item", payload)

        assert resp.status_code == 400
        body = resp.json()
        assert body["kind"] == "MissingFieldError"
        assert body["path"] == "FeedItemEvent.content.feedItemUid"
        assert metrics.rejected_count_in_window("feed-item") == 1
        assert receiver.get_received_count() == 0

    def test_payload_sent_to_wrong_route(self, receiver):
        resp = _post(receiver, "payment-order", WebhookFactory.feed_item_event())
        assert resp.status_code == 400
        assert resp.json()["path"].startswith("PaymentOrderEvent.content.")
