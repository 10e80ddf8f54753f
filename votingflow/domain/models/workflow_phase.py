"""Workflow phase model for the election state machine.

This module defines the six ordered phases of a single election and the
transition matrix that governs them.

State Machine:
    REGISTERING_VOTERS -> PROPOSALS_REGISTRATION_STARTED
    PROPOSALS_REGISTRATION_STARTED -> PROPOSALS_REGISTRATION_ENDED
    PROPOSALS_REGISTRATION_ENDED -> VOTING_SESSION_STARTED
    VOTING_SESSION_STARTED -> VOTING_SESSION_ENDED
    VOTING_SESSION_ENDED -> VOTES_TALLIED

Transitions only move to the immediate successor. No phase is skipped
and no phase is revisited. VOTES_TALLIED is terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class WorkflowPhase(Enum):
    """Phase of the election workflow.

    Phases:
        REGISTERING_VOTERS: Administrator whitelists voters
        PROPOSALS_REGISTRATION_STARTED: Registered voters submit proposals
        PROPOSALS_REGISTRATION_ENDED: Proposal list is frozen
        VOTING_SESSION_STARTED: Registered voters cast their vote
        VOTING_SESSION_ENDED: Ballot box is closed
        VOTES_TALLIED: Winner computed (terminal)
    """

    REGISTERING_VOTERS = "RegisteringVoters"
    PROPOSALS_REGISTRATION_STARTED = "ProposalsRegistrationStarted"
    PROPOSALS_REGISTRATION_ENDED = "ProposalsRegistrationEnded"
    VOTING_SESSION_STARTED = "VotingSessionStarted"
    VOTING_SESSION_ENDED = "VotingSessionEnded"
    VOTES_TALLIED = "VotesTallied"

    @property
    def position(self) -> int:
        """Zero-based position of this phase in the workflow order."""
        return PHASE_ORDER.index(self)

    def is_terminal(self) -> bool:
        """Check if no further transition is possible from this phase.

        Returns:
            True only for VOTES_TALLIED.
        """
        return self is WorkflowPhase.VOTES_TALLIED

    def is_at_least(self, other: WorkflowPhase) -> bool:
        """Check if this phase is the same as or later than ``other``.

        Args:
            other: Phase to compare against.

        Returns:
            True if this phase does not precede ``other``.
        """
        return self.position >= other.position

    def next_phase(self) -> WorkflowPhase | None:
        """Get the immediate successor of this phase.

        Returns:
            The successor phase, or None for the terminal phase.
        """
        return PHASE_SUCCESSORS.get(self)


# Fixed workflow order
PHASE_ORDER: tuple[WorkflowPhase, ...] = (
    WorkflowPhase.REGISTERING_VOTERS,
    WorkflowPhase.PROPOSALS_REGISTRATION_STARTED,
    WorkflowPhase.PROPOSALS_REGISTRATION_ENDED,
    WorkflowPhase.VOTING_SESSION_STARTED,
    WorkflowPhase.VOTING_SESSION_ENDED,
    WorkflowPhase.VOTES_TALLIED,
)

# Each phase maps to its only legal successor
PHASE_SUCCESSORS: dict[WorkflowPhase, WorkflowPhase] = {
    current: successor for current, successor in zip(PHASE_ORDER, PHASE_ORDER[1:])
}


def is_valid_transition(from_phase: WorkflowPhase, to_phase: WorkflowPhase) -> bool:
    """Check if a phase transition is legal.

    Args:
        from_phase: Current phase.
        to_phase: Proposed next phase.

    Returns:
        True if ``to_phase`` is the immediate successor of ``from_phase``.
    """
    return PHASE_SUCCESSORS.get(from_phase) is to_phase


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PhaseTransition:
    """Record of a completed phase transition.

    Attributes:
        previous_phase: Phase before the transition.
        new_phase: Phase after the transition.
        transitioned_at: When the transition was applied (UTC).
    """

    previous_phase: WorkflowPhase
    new_phase: WorkflowPhase
    transitioned_at: datetime = field(default_factory=_utc_now)
