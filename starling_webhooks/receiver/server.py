import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from starling_webhooks.decoder import DECODERS
from starling_webhooks.errors import DecodeError
from starling_webhooks.models import WebhookEnvelope
from starling_webhooks.observability.metrics import DecodeMetrics
from starling_webhooks.unrecognized import find_unrecognized

logger = logging.getLogger(__name__)


class _WebhookHandler(BaseHTTPRequestHandler):
    """Decodes webhook deliveries routed by path: /feed-item, /payment-order, ..."""

    def _respond(self, code: int, body: dict) -> None:
        self.send_response(code)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(body).encode())

    def do_POST(self):
        content_length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(content_length)

        state = self.server.state  # type: ignore[attr-defined]
        kind = self.path.strip("/")
        decode = DECODERS.get(kind)
        if decode is None:
            self._respond(404, {"error": f"unknown webhook kind: {kind}"})
            return

        try:
            envelope = decode(body)
        except DecodeError as e:
            logger.warning("Rejected %s delivery: %s", kind, e)
            state["metrics"].record_rejected(kind)
            self._respond(400, e.to_dict())
            return

        state["metrics"].record_decoded(kind)
        for path, value in find_unrecognized(envelope):
            logger.warning(
                "Unrecognized token %r at %s in event %s",
                value.token,
                path,
                envelope.webhook_event_uid,
            )
            state["metrics"].record_unrecognized(path)

        with state["lock"]:
            state["received"].append((kind, envelope))

        self._respond(200, {"status": "ok", "webhookEventUid": str(envelope.webhook_event_uid)})

    def log_message(self, format, *args):
        """Route request lines through logging instead of stderr."""
        logger.debug(format, *args)


class WebhookReceiver:
    """HTTP receiver that decodes Starling webhook deliveries and keeps the results."""

    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = 0,
        metrics: DecodeMetrics | None = None,
    ):
        self._host = host
        self._port = port
        self.metrics = metrics or DecodeMetrics()
        self._state = {
            "metrics": self.metrics,
            "received": [],
            "lock": threading.Lock(),
        }
        self._server: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        self._server = ThreadingHTTPServer((self._host, self._port), _WebhookHandler)
        self._server.state = self._state  # type: ignore[attr-defined]
        # Get the actual port (useful when port=0)
        self._port = self._server.server_address[1]
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        logger.info("Webhook receiver listening on %s", self.base_url)

    def stop(self) -> None:
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            self._server = None
        if self._thread:
            self._thread.join(timeout=5)
            self._thread = None

    @property
    def base_url(self) -> str:
        return f"http://{self._host}:{self._port}"

    def url(self, kind: str) -> str:
        return f"{self.base_url}/{kind}"

    @property
    def port(self) -> int:
        return self._port

    def get_received(self, kind: str | None = None) -> list[WebhookEnvelope]:
        with self._state["lock"]:
            return [e for k, e in self._state["received"] if kind is None or k == kind]

    def get_received_count(self) -> int:
        with self._state["lock"]:
            return len(self._state["received"])

    def clear(self) -> None:
        with self._state["lock"]:
            self._state["received"].clear()
