"""Structured-log ballot event emitter.

Concrete implementation of BallotEventEmitterPort that:
1. Logs every notification as a structured log entry
2. Counts notifications per event type in Prometheus

Downstream observers consume the log stream; the election never waits
for them.
"""

from __future__ import annotations

import structlog

from votingflow.application.ports.ballot_event_emitter import BallotEventEmitterPort
from votingflow.domain.events.ballot import BallotEventPayload
from votingflow.infrastructure.monitoring.metrics import (
    MetricsCollector,
    get_metrics_collector,
)

logger = structlog.get_logger(__name__)


class StructlogBallotEventEmitter(BallotEventEmitterPort):
    """Emits ballot notifications to the structured log stream.

    Usage:
        emitter = StructlogBallotEventEmitter()
        service = ElectionService(capability, emitter)
    """

    def __init__(self, metrics: MetricsCollector | None = None) -> None:
        """Initialize the event emitter.

        Args:
            metrics: Collector to count notifications in. Defaults to the
                process-wide collector.
        """
        self._log = logger.bind(component="ballot_event_emitter")
        self._metrics = metrics or get_metrics_collector()

    async def emit(self, payload: BallotEventPayload) -> bool:
        """Log the notification and count it.

        Returns:
            Always True; a log write is the delivery.
        """
        self._log.info("ballot_notification", **payload.to_dict())
        self._metrics.increment_notifications(payload.event_type)
        return True
