"""Ballot store domain errors.

This module provides exception classes for failures of voter
registration, proposal submission, voting, tallying and the ballot
queries.

All errors are synchronous, caller-surfaced and never retried
internally. A raised error guarantees that no voter, proposal or
result state was changed.
"""

from __future__ import annotations

from votingflow.domain.exceptions import BallotError


class AlreadyRegisteredError(BallotError):
    """Raised when whitelisting an identity that is already registered.

    Attributes:
        identity: The identity that was already on the whitelist.
    """

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"Voter {identity!r} is already registered")


class NotRegisteredError(BallotError):
    """Raised when a queried identity is not a registered voter.

    Attributes:
        identity: The identity that is not on the whitelist.
    """

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"Voter {identity!r} is not registered")


class DuplicateProposalError(BallotError):
    """Raised when a proposal with the exact same description exists.

    Matching is case-sensitive and exact.

    Attributes:
        description: The duplicated description.
        existing_index: Index of the proposal already holding it.
    """

    def __init__(self, description: str, existing_index: int) -> None:
        self.description = description
        self.existing_index = existing_index
        super().__init__(
            f"Proposal {description!r} already exists at index {existing_index}"
        )


class AlreadyVotedError(BallotError):
    """Raised when a voter attempts a second vote.

    Attributes:
        identity: The voter who already voted.
        voted_proposal_index: Index of the proposal the earlier vote went to.
    """

    def __init__(self, identity: str, voted_proposal_index: int | None) -> None:
        self.identity = identity
        self.voted_proposal_index = voted_proposal_index
        super().__init__(f"Voter {identity!r} has already voted")


class ProposalNotFoundError(BallotError):
    """Raised when no proposal has the given description.

    Attributes:
        description: The description that did not match.
    """

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"No proposal with description {description!r}")


class InvalidProposalIdError(BallotError):
    """Raised when a proposal index is out of range.

    Attributes:
        proposal_id: The rejected index.
        proposal_count: Number of proposals at the time of the call.
    """

    def __init__(self, proposal_id: int, proposal_count: int) -> None:
        self.proposal_id = proposal_id
        self.proposal_count = proposal_count
        super().__init__(
            f"Invalid proposal id {proposal_id}: "
            f"{proposal_count} proposal(s) registered"
        )


class NoProposalsError(BallotError):
    """Raised when an operation needs at least one proposal and none exist.

    Attributes:
        operation: Name of the refused operation.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires at least one proposal")


class NoWinningProposalError(BallotError):
    """Raised when the stored winning index does not resolve to a proposal.

    Unreachable after a correct tally; kept so a corrupted result is
    reported instead of returning a default record.

    Attributes:
        winning_proposal_id: The stored index.
        proposal_count: Number of proposals.
    """

    def __init__(self, winning_proposal_id: int, proposal_count: int) -> None:
        self.winning_proposal_id = winning_proposal_id
        self.proposal_count = proposal_count
        super().__init__(
            f"Winning proposal id {winning_proposal_id} is out of range "
            f"({proposal_count} proposal(s))"
        )
