import pytest

from starling_webhooks.observability.metrics import DecodeMetrics
from starling_webhooks.receiver.server import WebhookReceiver
from starling_webhooks.utils.factories import PayloadFactory, WebhookFactory


@pytest.fixture
def metrics():
    return DecodeMetrics(window_seconds=300)


@pytest.fixture
def receiver(metrics):
    server = WebhookReceiver(metrics=metrics)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def payload_factory():
    return PayloadFactory


@pytest.fixture
def webhook_factory():
    return WebhookFactory
