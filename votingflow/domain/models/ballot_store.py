"""Ballot store: voter whitelist, proposal ledger and vote records.

The ballot store owns every voter record, the append-only proposal
sequence and the election result for the lifetime of one election.
Every mutating operation is gated by the workflow controller's current
phase.

Atomicity:
    Each operation checks every precondition first and only then
    applies its changes. A raised error therefore guarantees that no
    voter, proposal, result or phase state was changed.

Description lookup:
    Proposals are matched by exact, case-sensitive description using a
    linear scan. The first match wins. The empty string is a legal
    description and is matched like any other.

Administrator authorization is checked by the application service
before register_voter and tally_votes are reached.
"""

from __future__ import annotations

from dataclasses import dataclass

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
from votingflow.domain.errors.workflow import UnauthorizedError
from votingflow.domain.events.ballot import (
    PhaseChangedPayload,
    ProposalRegisteredPayload,
    VoteCastPayload,
    VoterRegisteredPayload,
)
from votingflow.domain.models.proposal import Proposal
from votingflow.domain.models.voter import Voter
from votingflow.domain.models.workflow_controller import WorkflowController
from votingflow.domain.models.workflow_phase import WorkflowPhase

REGISTERED_VOTER_ROLE = "registered voter"


@dataclass(frozen=True)
class BallotStatus:
    """Point-in-time summary of an election.

    Attributes:
        phase: Current workflow phase.
        registered_voter_count: Number of whitelisted identities.
        proposal_count: Number of proposals submitted.
        votes_cast: Number of voters who have voted.
    """

    phase: WorkflowPhase
    registered_voter_count: int
    proposal_count: int
    votes_cast: int


class BallotStore:
    """Voter, proposal and vote ledger guarded by the workflow phase.

    Attributes:
        workflow: The controller whose phase gates every operation.
    """

    def __init__(self, workflow: WorkflowController) -> None:
        """Create an empty ballot store.

        Args:
            workflow: Controller owning the election phase.
        """
        self._workflow = workflow
        self._voters: dict[str, Voter] = {}
        self._proposals: list[Proposal] = []
        # Meaningless until VOTES_TALLIED; never read before then
        self._winning_proposal_id: int = 0

    @property
    def workflow(self) -> WorkflowController:
        return self._workflow

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def register_voter(self, identity: str) -> VoterRegisteredPayload:
        """Whitelist an identity as a voter.

        Args:
            identity: Identity to register.

        Returns:
            VoterRegisteredPayload for the observer sink.

        Raises:
            InvalidPhaseTransitionError: If not in REGISTERING_VOTERS.
            AlreadyRegisteredError: If the identity is already registered.
        """
        self._workflow.require_phase(WorkflowPhase.REGISTERING_VOTERS, "whitelist")

        voter = self._voter(identity)
        if voter.is_registered:
            raise AlreadyRegisteredError(identity)

        self._voters[identity] = voter.registered()
        return VoterRegisteredPayload(identity=identity)

    def submit_proposal(
        self, caller: str, description: str
    ) -> ProposalRegisteredPayload:
        """Append a new proposal.

        Registered voters may submit any number of proposals.

        Args:
            caller: Identity of the submitting voter.
            description: Proposal text.

        Returns:
            ProposalRegisteredPayload carrying the new proposal's index.

        Raises:
            InvalidPhaseTransitionError: If not in PROPOSALS_REGISTRATION_STARTED.
            UnauthorizedError: If the caller is not a registered voter.
            DuplicateProposalError: If the exact description already exists.
        """
        operation = "submit_proposal"
        self._workflow.require_phase(
            WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, operation
        )
        self._require_registered_caller(caller, operation)

        existing_index = self._find_proposal_index(description)
        if existing_index is not None:
            raise DuplicateProposalError(description, existing_index)

        self._proposals.append(Proposal(description=description))
        return ProposalRegisteredPayload(proposal_id=len(self._proposals) - 1)

    def vote(self, caller: str, description: str) -> VoteCastPayload:
        """Cast the caller's single vote for the proposal with ``description``.

        Args:
            caller: Identity of the voter.
            description: Exact description of the chosen proposal.

        Returns:
            VoteCastPayload carrying the voter and the proposal index.

        Raises:
            InvalidPhaseTransitionError: If not in VOTING_SESSION_STARTED.
            UnauthorizedError: If the caller is not a registered voter.
            AlreadyVotedError: If the caller already voted.
            ProposalNotFoundError: If no proposal has that description.
        """
        operation = "vote"
        self._workflow.require_phase(WorkflowPhase.VOTING_SESSION_STARTED, operation)
        voter = self._require_registered_caller(caller, operation)

        if voter.has_voted:
            raise AlreadyVotedError(caller, voter.voted_proposal_index)

        proposal_index = self._find_proposal_index(description)
        if proposal_index is None:
            raise ProposalNotFoundError(description)

        self._voters[caller] = voter.with_vote(proposal_index)
        self._proposals[proposal_index] = self._proposals[proposal_index].with_vote()
        return VoteCastPayload(identity=caller, proposal_id=proposal_index)

    def tally_votes(self) -> PhaseChangedPayload:
        """Compute the plurality winner and close the election.

        Scans the proposals once. The winner only changes when a later
        proposal has strictly more votes, so ties go to the earliest
        proposal.

        Returns:
            PhaseChangedPayload for VOTING_SESSION_ENDED -> VOTES_TALLIED.

        Raises:
            InvalidPhaseTransitionError: If not in VOTING_SESSION_ENDED.
            NoProposalsError: If no proposal was ever submitted.
        """
        operation = "tally_votes"
        self._workflow.require_phase(WorkflowPhase.VOTING_SESSION_ENDED, operation)
        if not self._proposals:
            raise NoProposalsError(operation)

        winning_index = 0
        max_votes = self._proposals[0].vote_count
        for index, proposal in enumerate(self._proposals):
            if proposal.vote_count > max_votes:
                max_votes = proposal.vote_count
                winning_index = index

        payload = self._workflow.advance(WorkflowPhase.VOTING_SESSION_ENDED, operation)
        self._winning_proposal_id = winning_index
        return payload

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_proposal_descriptions(self) -> list[str]:
        """Get every proposal description in insertion order.

        Raises:
            InvalidPhaseTransitionError: Before PROPOSALS_REGISTRATION_STARTED.
            NoProposalsError: If no proposal exists.
        """
        operation = "list_proposal_descriptions"
        self._workflow.require_phase_at_least(
            WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, operation
        )
        if not self._proposals:
            raise NoProposalsError(operation)
        return [proposal.description for proposal in self._proposals]

    def get_winner(self) -> Proposal:
        """Get the winning proposal record.

        Raises:
            InvalidPhaseTransitionError: Before VOTES_TALLIED.
            NoWinningProposalError: If the stored index is out of range.
        """
        winning_id = self.get_winning_proposal_id()
        if not 0 <= winning_id < len(self._proposals):
            raise NoWinningProposalError(winning_id, len(self._proposals))
        return self._proposals[winning_id]

    def get_winning_proposal_id(self) -> int:
        """Get the index of the winning proposal.

        Raises:
            InvalidPhaseTransitionError: Before VOTES_TALLIED.
        """
        self._workflow.require_phase(WorkflowPhase.VOTES_TALLIED, "get_winner")
        return self._winning_proposal_id

    def get_proposal_id_by_description(self, description: str) -> int:
        """Resolve an exact description to its proposal index.

        Raises:
            ProposalNotFoundError: If no proposal has that description.
        """
        index = self._find_proposal_index(description)
        if index is None:
            raise ProposalNotFoundError(description)
        return index

    def get_proposal(self, caller: str, proposal_id: int) -> tuple[str, int]:
        """Get a proposal's description and vote count by index.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
            InvalidProposalIdError: If the index is out of range.
        """
        self._require_registered_caller(caller, "get_proposal")
        if not 0 <= proposal_id < len(self._proposals):
            raise InvalidProposalIdError(proposal_id, len(self._proposals))
        proposal = self._proposals[proposal_id]
        return proposal.description, proposal.vote_count

    def get_voter_votes(self, caller: str, identity: str) -> frozenset[str]:
        """Get the descriptions ``identity`` voted for.

        The set holds at most one description since each voter votes once.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
            NotRegisteredError: If ``identity`` is not a registered voter.
        """
        self._require_registered_caller(caller, "get_voter_votes")

        target = self._voter(identity)
        if not target.is_registered:
            raise NotRegisteredError(identity)

        if not target.has_voted or target.voted_proposal_index is None:
            return frozenset()
        return frozenset({self._proposals[target.voted_proposal_index].description})

    def get_voter(self, caller: str, identity: str) -> Voter:
        """Get the voter record of any identity.

        Unknown identities read as an unregistered voter.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
        """
        self._require_registered_caller(caller, "get_voter")
        return self._voter(identity)

    def is_registered(self, identity: str) -> bool:
        return self._voter(identity).is_registered

    def status(self) -> BallotStatus:
        """Summarize the election for dashboards."""
        voters = self._voters.values()
        return BallotStatus(
            phase=self._workflow.current_phase,
            registered_voter_count=sum(1 for v in voters if v.is_registered),
            proposal_count=len(self._proposals),
            votes_cast=sum(1 for v in voters if v.has_voted),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _voter(self, identity: str) -> Voter:
        return self._voters.get(identity) or Voter(identity=identity)

    def _require_registered_caller(self, caller: str, operation: str) -> Voter:
        voter = self._voter(caller)
        if not voter.is_registered:
            raise UnauthorizedError(
                identity=caller,
                operation=operation,
                required_role=REGISTERED_VOTER_ROLE,
            )
        return voter

    def _find_proposal_index(self, description: str) -> int | None:
        # Linear scan, first match wins
        for index, proposal in enumerate(self._proposals):
            if proposal.description == description:
                return index
        return None
