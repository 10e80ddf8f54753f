"""Ballot Event Emitter Port.

This module defines the protocol for forwarding election notifications
to an observer sink.

Delivery Semantics:
- One-way: the election never reads anything back from the sink
- Fire-and-forget: no acknowledgment, no retry
- Ordered per operation: payloads arrive in the order they were applied

Developer Golden Rules:
1. EMIT AFTER APPLY - Only successful operations produce notifications
2. FAIL GRACEFULLY - Emission errors are logged, never undo an operation
"""

from __future__ import annotations

from typing import Protocol

from votingflow.domain.events.ballot import BallotEventPayload


class BallotEventEmitterPort(Protocol):
    """Protocol for ballot notification emission.

    Example:
        emitter = StructlogBallotEventEmitter()
        await emitter.emit(VoterRegisteredPayload(identity="0xabc"))
    """

    async def emit(self, payload: BallotEventPayload) -> bool:
        """Forward a notification to the observer sink.

        Args:
            payload: One of the four ballot notification payloads.

        Returns:
            True if the sink accepted the notification, False otherwise.
            False does NOT indicate that the operation failed.
        """
        ...
