"""Stub implementation of BallotEventEmitterPort for testing.

This stub captures emitted notifications for test assertions without
requiring a real observer sink.

Usage in tests:
    stub = BallotEventEmitterStub()
    service = ElectionService(..., event_emitter=stub)

    await service.whitelist("admin", "0xA")

    assert len(stub.emitted_events) == 1
    assert stub.emitted_events[0].identity == "0xA"
"""

from __future__ import annotations

from votingflow.application.ports.ballot_event_emitter import BallotEventEmitterPort
from votingflow.domain.events.ballot import BallotEventPayload


class BallotEventEmitterStub(BallotEventEmitterPort):
    """Stub implementation for testing ballot notification emission.

    This stub captures all emitted payloads in a list for test assertions.
    It can be configured to simulate failures for error path testing.

    Attributes:
        emitted_events: All payloads accepted by the stub, in order.
        should_fail: If True, emit() returns False without recording.
        fail_exception: If set, emit() raises this exception.

    Example:
        stub = BallotEventEmitterStub()
        stub.fail_exception = RuntimeError("sink down")
        await service.whitelist("admin", "0xA")  # still succeeds
        assert stub.emitted_events == []
    """

    def __init__(self) -> None:
        """Initialize the stub with empty state."""
        self.emitted_events: list[BallotEventPayload] = []
        self.should_fail: bool = False
        self.fail_exception: Exception | None = None

    async def emit(self, payload: BallotEventPayload) -> bool:
        """Capture a notification for test assertions.

        Returns:
            True if captured, False if should_fail is set.

        Raises:
            Exception: fail_exception, if configured.
        """
        if self.fail_exception is not None:
            raise self.fail_exception
        if self.should_fail:
            return False
        self.emitted_events.append(payload)
        return True

    def events_of_type(self, event_type: str) -> list[BallotEventPayload]:
        """Get captured payloads with the given event type."""
        return [e for e in self.emitted_events if e.event_type == event_type]

    def reset(self) -> None:
        """Clear all captured events and failure configuration."""
        self.emitted_events.clear()
        self.should_fail = False
        self.fail_exception = None
