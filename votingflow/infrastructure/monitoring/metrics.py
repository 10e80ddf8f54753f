"""Prometheus counters for an election host.

Counters:
- ballot_notifications_total{event_type}: notifications delivered to the sink
- ballot_operations_rejected_total{operation, error_type}: rejected calls
- http_requests_total{method, endpoint, status}: API requests served

Labels never carry voter identities, so cardinality stays bounded by the
number of operations and error kinds.
"""

import threading

from prometheus_client import CollectorRegistry, Counter, generate_latest

METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class MetricsCollector:
    """Owns the election counters and the registry they live in.

    Each collector gets its own registry unless one is passed in, so
    tests can assert on an isolated registry.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

        self.ballot_notifications_total = Counter(
            "ballot_notifications_total",
            "Ballot notifications delivered to the observer sink",
            ["event_type"],
            registry=self._registry,
        )
        self.ballot_operations_rejected_total = Counter(
            "ballot_operations_rejected_total",
            "Election operations rejected with a ballot error",
            ["operation", "error_type"],
            registry=self._registry,
        )
        self.http_requests_total = Counter(
            "http_requests_total",
            "HTTP requests served by the election API",
            ["method", "endpoint", "status"],
            registry=self._registry,
        )

    def increment_notifications(self, event_type: str) -> None:
        self.ballot_notifications_total.labels(event_type=event_type).inc()

    def increment_rejections(self, operation: str, error_type: str) -> None:
        self.ballot_operations_rejected_total.labels(
            operation=operation, error_type=error_type
        ).inc()

    def increment_requests(self, method: str, endpoint: str, status: str) -> None:
        self.http_requests_total.labels(
            method=method, endpoint=endpoint, status=status
        ).inc()

    def get_registry(self) -> CollectorRegistry:
        return self._registry


_lock = threading.Lock()
_collector: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Return the process-wide collector, creating it on first use."""
    global _collector
    if _collector is None:
        with _lock:
            if _collector is None:
                _collector = MetricsCollector()
    return _collector


def reset_metrics_collector() -> None:
    """Drop the process-wide collector so the next call starts from zero."""
    global _collector
    with _lock:
        _collector = None


def generate_metrics() -> bytes:
    """Render the process-wide collector in Prometheus text format."""
    return generate_latest(get_metrics_collector().get_registry())
