import threading
import time
from collections import Counter, deque


class DecodeMetrics:
    """Rolling-window counts of decoded and rejected webhook deliveries."""

    def __init__(self, window_seconds: float = 300):
        self._window_seconds = window_seconds
        # (monotonic timestamp, webhook kind or field path), oldest first
        self._decoded: deque[tuple[float, str | None]] = deque()
        self._rejected: deque[tuple[float, str | None]] = deque()
        self._unrecognized: deque[tuple[float, str]] = deque()
        self._lock = threading.Lock()

    def _prune(self, data: deque, now: float) -> None:
        cutoff = now - self._window_seconds
        while data and data[0][0] < cutoff:
            data.popleft()

    def _append(self, data: deque, key: str | None) -> None:
        now = time.monotonic()
        self._prune(data, now)
        data.append((now, key))

    def record_decoded(self, kind: str | None = None) -> None:
        with self._lock:
            self._append(self._decoded, kind)

    def record_rejected(self, kind: str | None = None) -> None:
        with self._lock:
            self._append(self._rejected, kind)

    def record_unrecognized(self, path: str) -> None:
        with self._lock:
            self._append(self._unrecognized, path)

    def _count(self, data: deque, kind: str | None) -> int:
        self._prune(data, time.monotonic())
        return sum(1 for _, k in data if kind is None or k == kind)

    def decoded_count_in_window(self, kind: str | None = None) -> int:
        with self._lock:
            return self._count(self._decoded, kind)

    def rejected_count_in_window(self, kind: str | None = None) -> int:
        with self._lock:
            return self._count(self._rejected, kind)

    def total_in_window(self, kind: str | None = None) -> int:
        with self._lock:
            return self._count(self._decoded, kind) + self._count(self._rejected, kind)

    def rejection_rate(self, kind: str | None = None) -> float:
        """Rejected share of deliveries in the current window (0.0 to 1.0)."""
        with self._lock:
            decoded = self._count(self._decoded, kind)
            rejected = self._count(self._rejected, kind)
        total = decoded + rejected
        if total == 0:
            return 0.0
        return rejected / total

    def unrecognized_in_window(self) -> Counter:
        """Unrecognized token counts keyed by field path."""
        with self._lock:
            self._prune(self._unrecognized, time.monotonic())
            return Counter(path for _, path in self._unrecognized)

    def reset(self) -> None:
        with self._lock:
            self._decoded.clear()
            self._rejected.clear()
            self._unrecognized.clear()
