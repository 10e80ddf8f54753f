"""Ballot notification payloads.

This module defines the four notifications an election emits to its
observer sink. Notifications are one-way and fire-and-forget: the
election never waits for an acknowledgment and never retries.

Event Types:
- ballot.voter_registered: An identity was whitelisted
- ballot.phase_changed: The workflow moved to its next phase
- ballot.proposal_registered: A proposal was appended
- ballot.vote_cast: A registered voter cast their vote

Ordering: notifications are emitted in the order their state changes
were applied within one operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from votingflow.domain.models.workflow_phase import WorkflowPhase

VOTER_REGISTERED_EVENT_TYPE: str = "ballot.voter_registered"
PHASE_CHANGED_EVENT_TYPE: str = "ballot.phase_changed"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "ballot.proposal_registered"
VOTE_CAST_EVENT_TYPE: str = "ballot.vote_cast"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class VoterRegisteredPayload:
    """Payload emitted when the administrator whitelists a voter.

    Attributes:
        identity: The newly registered voter.
        occurred_at: When the registration was applied (UTC).
    """

    identity: str
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type: str = field(default=VOTER_REGISTERED_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": self.event_type,
            "identity": self.identity,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class PhaseChangedPayload:
    """Payload emitted on every successful phase transition.

    Attributes:
        previous_phase: Phase before the transition.
        new_phase: Phase after the transition.
        occurred_at: When the transition was applied (UTC).
    """

    previous_phase: WorkflowPhase
    new_phase: WorkflowPhase
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type: str = field(default=PHASE_CHANGED_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": self.event_type,
            "previous_phase": self.previous_phase.value,
            "new_phase": self.new_phase.value,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class ProposalRegisteredPayload:
    """Payload emitted when a proposal is appended.

    Attributes:
        proposal_id: Index of the new proposal in the proposal sequence.
        occurred_at: When the proposal was stored (UTC).
    """

    proposal_id: int
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type: str = field(default=PROPOSAL_REGISTERED_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": self.event_type,
            "proposal_id": self.proposal_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class VoteCastPayload:
    """Payload emitted when a vote is recorded.

    Attributes:
        identity: The voter.
        proposal_id: Index of the proposal voted for.
        occurred_at: When the vote was recorded (UTC).
    """

    identity: str
    proposal_id: int
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type: str = field(default=VOTE_CAST_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": self.event_type,
            "identity": self.identity,
            "proposal_id": self.proposal_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


BallotEventPayload = Union[
    VoterRegisteredPayload,
    PhaseChangedPayload,
    ProposalRegisteredPayload,
    VoteCastPayload,
]
