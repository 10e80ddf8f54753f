"""Workflow controller for the election phase state machine.

The controller owns the current phase and is the only component allowed
to change it. Every transition asserts the exact predecessor phase
before mutating, so a rejected call leaves the phase untouched.

Administrator authorization is NOT checked here. The application
service checks the administrator capability before calling any
transition, keeping this class free of identity concerns.
"""

from __future__ import annotations

from votingflow.domain.errors.workflow import InvalidPhaseTransitionError
from votingflow.domain.events.ballot import PhaseChangedPayload
from votingflow.domain.models.workflow_phase import (
    PhaseTransition,
    WorkflowPhase,
    is_valid_transition,
)


class WorkflowController:
    """Forward-only phase state machine for a single election.

    Attributes:
        current_phase: The phase the election is in.
        history: Ordered records of every transition applied so far.
    """

    def __init__(self) -> None:
        """Start a new election in the REGISTERING_VOTERS phase."""
        self._current_phase = WorkflowPhase.REGISTERING_VOTERS
        self._history: list[PhaseTransition] = []

    @property
    def current_phase(self) -> WorkflowPhase:
        return self._current_phase

    @property
    def history(self) -> tuple[PhaseTransition, ...]:
        return tuple(self._history)

    def require_phase(self, phase: WorkflowPhase, operation: str) -> None:
        """Assert the election is exactly in ``phase``.

        Args:
            phase: The phase the operation needs.
            operation: Operation name reported on failure.

        Raises:
            InvalidPhaseTransitionError: If the current phase differs.
        """
        if self._current_phase is not phase:
            raise InvalidPhaseTransitionError(
                current_phase=self._current_phase,
                required_phase=phase,
                operation=operation,
            )

    def require_phase_at_least(self, phase: WorkflowPhase, operation: str) -> None:
        """Assert the election has reached ``phase`` or moved past it.

        Args:
            phase: Earliest phase the operation accepts.
            operation: Operation name reported on failure.

        Raises:
            InvalidPhaseTransitionError: If the current phase precedes ``phase``.
        """
        if not self._current_phase.is_at_least(phase):
            raise InvalidPhaseTransitionError(
                current_phase=self._current_phase,
                required_phase=phase,
                operation=operation,
                at_least=True,
            )

    def start_proposals_registration(self) -> PhaseChangedPayload:
        """REGISTERING_VOTERS -> PROPOSALS_REGISTRATION_STARTED."""
        return self.advance(
            WorkflowPhase.REGISTERING_VOTERS, "start_proposals_registration"
        )

    def end_proposals_registration(self) -> PhaseChangedPayload:
        """PROPOSALS_REGISTRATION_STARTED -> PROPOSALS_REGISTRATION_ENDED."""
        return self.advance(
            WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, "end_proposals_registration"
        )

    def start_voting_session(self) -> PhaseChangedPayload:
        """PROPOSALS_REGISTRATION_ENDED -> VOTING_SESSION_STARTED."""
        return self.advance(
            WorkflowPhase.PROPOSALS_REGISTRATION_ENDED, "start_voting_session"
        )

    def end_voting_session(self) -> PhaseChangedPayload:
        """VOTING_SESSION_STARTED -> VOTING_SESSION_ENDED."""
        return self.advance(WorkflowPhase.VOTING_SESSION_STARTED, "end_voting_session")

    def advance(
        self, expected_phase: WorkflowPhase, operation: str
    ) -> PhaseChangedPayload:
        """Move to the successor of ``expected_phase``.

        Used by the four named transitions above and by the ballot
        store's tally, which performs the final transition itself.

        Args:
            expected_phase: The exact predecessor phase the caller requires.
            operation: Operation name reported on failure.

        Returns:
            PhaseChangedPayload describing the applied transition.

        Raises:
            InvalidPhaseTransitionError: If the current phase is not
                ``expected_phase`` or it has no successor.
        """
        self.require_phase(expected_phase, operation)

        new_phase = expected_phase.next_phase()
        if new_phase is None or not is_valid_transition(expected_phase, new_phase):
            raise InvalidPhaseTransitionError(
                current_phase=self._current_phase,
                required_phase=expected_phase,
                operation=operation,
            )

        transition = PhaseTransition(previous_phase=expected_phase, new_phase=new_phase)
        self._history.append(transition)
        self._current_phase = new_phase

        return PhaseChangedPayload(
            previous_phase=transition.previous_phase,
            new_phase=transition.new_phase,
            occurred_at=transition.transitioned_at,
        )
