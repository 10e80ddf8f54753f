"""Workflow errors for the election phase state machine.

This module defines errors raised by the phase gate and by the
administrator capability check.

Every failure aborts the triggering operation with zero state
mutation. The caller decides whether to retry once the phase advances
or to abandon.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from votingflow.domain.exceptions import BallotError

if TYPE_CHECKING:
    from votingflow.domain.models.workflow_phase import WorkflowPhase


class UnauthorizedError(BallotError):
    """Raised when the caller lacks the capability an operation requires.

    Administrator-only operations raise this for any other identity.
    Voter-only operations raise this when the caller is not a
    registered voter.

    Attributes:
        identity: Identity of the rejected caller.
        operation: Name of the operation that was refused.
        required_role: The role the operation requires.
    """

    def __init__(
        self,
        identity: str,
        operation: str,
        required_role: str = "administrator",
    ) -> None:
        """Initialize unauthorized error.

        Args:
            identity: Identity of the rejected caller.
            operation: Name of the refused operation.
            required_role: "administrator" or "registered voter".
        """
        self.identity = identity
        self.operation = operation
        self.required_role = required_role
        super().__init__(
            f"Unauthorized: {operation} requires {required_role}, "
            f"caller {identity!r} is not one"
        )


class InvalidPhaseTransitionError(BallotError):
    """Raised when an operation is attempted in the wrong workflow phase.

    Covers both explicit phase transitions with the wrong predecessor
    phase and any ballot operation gated on a phase that is not current.

    Attributes:
        current_phase: The phase the election is in.
        required_phase: The phase the operation requires.
        operation: Name of the operation that was refused.
        at_least: True if the gate accepts ``required_phase`` or any later phase.
    """

    def __init__(
        self,
        current_phase: WorkflowPhase,
        required_phase: WorkflowPhase,
        operation: str,
        at_least: bool = False,
    ) -> None:
        """Initialize invalid phase transition error.

        Args:
            current_phase: Phase the election is in.
            required_phase: Phase the operation needs.
            operation: Name of the refused operation.
            at_least: Whether later phases would also be accepted.
        """
        self.current_phase = current_phase
        self.required_phase = required_phase
        self.operation = operation
        self.at_least = at_least

        qualifier = "at least " if at_least else ""
        super().__init__(
            f"Invalid phase for {operation}: requires {qualifier}"
            f"{required_phase.value}, current phase is {current_phase.value}"
        )
