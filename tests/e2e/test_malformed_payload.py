"""E2E tests for invalid/missing fields and malformed payloads."""

import json

import pytest
import requests

from starling_webhooks.utils.factories import PayloadFactory, WebhookFactory


pytestmark = pytest.mark.e2e


class TestMalformedPayload:
    """Test invalid/missing fields in webhook payloads."""

    def test_missing_event_uid_returns_400(self, receiver):
        """Missing webhookEventUid returns 400 response."""
        payload = WebhookFactory.payment_order_event(webhookEventUid=None)

        resp = requests.post(receiver.url("payment-order"), data=json.dumps(payload), timeout=5)

        assert resp.status_code == 400
        assert "webhookEventUid" in resp.json()["error"]

    def test_fractional_minor_units_returns_400(self, receiver):
        """Non-integer minorUnits returns 400 response."""
        content = PayloadFactory.feed_item(amount={"currency": "GBP", "minorUnits": 10.5})
        payload = WebhookFactory.feed_item_event(content)

        resp = requests.post(receiver.url("feed-item"), data=json.dumps(payload), timeout=5)

        assert resp.status_code == 400
        body = resp.json()
        assert body["kind"] == "TypeMismatchError"
        assert body["path"] == "FeedItemEvent.content.amount.minorUnits"

    def test_pos_hour_24_returns_400(self, receiver):
        """Point-of-sale hour 24 returns 400 response."""
        content = PayloadFactory.feed_item()
        content["masterCardFeedDetails"]["posTimestamp"]["hour"] = 24
        payload = WebhookFactory.feed_item_event(content)

        resp = requests.post(receiver.url("feed-item"), data=json.dumps(payload), timeout=5)

        assert resp.status_code == 400
        assert resp.json()["kind"] == "OutOfRangeError"

    def test_naive_timestamp_returns_400(self, receiver):
        """Timestamp without an offset returns 400 response."""
        payload = WebhookFactory.payment_order_outcome_event(eventTimestamp="2026-01-15T12:00:00")

        resp = requests.post(
            receiver.url("payment-order-outcome"), data=json.dumps(payload), timeout=5
        )

        assert resp.status_code == 400
        assert resp.json()["path"] == "PaymentOrderOutcomeEvent.eventTimestamp"

    def test_unrepresentable_timestamp_returns_400(self, receiver):
        """Timestamp that leaves the datetime range in UTC returns 400 response."""
        payload = WebhookFactory.feed_item_event(eventTimestamp="0001-01-01T00:00:00+01:00")

        resp = requests.post(receiver.url("feed-item"), data=json.dumps(payload), timeout=5)

        assert resp.status_code == 400
        assert resp.json()["kind"] == "OutOfRangeError"
        assert resp.json()["path"] == "FeedItemEvent.eventTimestamp"

    def test_empty_json_body_returns_400(self, receiver):
        """Empty JSON body ({}) returns 400 response."""
        resp = requests.post(receiver.url("feed-item"), data="{}", timeout=5)

        assert resp.status_code == 400
        assert resp.json()["kind"] == "MissingFieldError"

    def test_completely_malformed_json_returns_400(self, receiver):
        """Completely malformed JSON (not JSON at all) returns 400 response."""
        resp = requests.post(receiver.url("feed-item"), data="this is not json {{{", timeout=5)

        assert resp.status_code == 400
        assert resp.json()["kind"] == "MalformedInputError"
        assert "invalid JSON" in resp.json()["error"]

    def test_rejections_leave_nothing_recorded(self, receiver, metrics):
        """Rejected deliveries are counted but never stored."""
        for body in ["{}", "nope", json.dumps({"content": {}})]:
            requests.post(receiver.url("feed-item"), data=body, timeout=5)

        assert receiver.get_received_count() == 0
        assert metrics.rejected_count_in_window() == 3
        assert metrics.rejection_rate() == 1.0
