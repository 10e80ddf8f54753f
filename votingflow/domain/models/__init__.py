"""Domain models for votingflow.

- WorkflowPhase / WorkflowController: the forward-only phase state machine
- Voter / Proposal: ledger records
- BallotStore: voter whitelist, proposal ledger, votes and tally
"""

from votingflow.domain.models.ballot_store import BallotStatus, BallotStore
from votingflow.domain.models.proposal import Proposal
from votingflow.domain.models.voter import Voter
from votingflow.domain.models.workflow_controller import WorkflowController
from votingflow.domain.models.workflow_phase import (
    PHASE_ORDER,
    PhaseTransition,
    WorkflowPhase,
    is_valid_transition,
)

__all__: list[str] = [
    "BallotStatus",
    "BallotStore",
    "PHASE_ORDER",
    "PhaseTransition",
    "Proposal",
    "Voter",
    "WorkflowController",
    "WorkflowPhase",
    "is_valid_transition",
]
