"""Domain errors for votingflow.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BallotError.
"""

from votingflow.domain.errors.ballot import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    DuplicateProposalError,
    InvalidProposalIdError,
    NoProposalsError,
    NotRegisteredError,
    NoWinningProposalError,
    ProposalNotFoundError,
)
from votingflow.domain.errors.workflow import (
    InvalidPhaseTransitionError,
    UnauthorizedError,
)
from votingflow.domain.exceptions import BallotError

__all__: list[str] = [
    "AlreadyRegisteredError",
    "AlreadyVotedError",
    "BallotError",
    "DuplicateProposalError",
    "InvalidPhaseTransitionError",
    "InvalidProposalIdError",
    "NoProposalsError",
    "NotRegisteredError",
    "NoWinningProposalError",
    "ProposalNotFoundError",
    "UnauthorizedError",
]
