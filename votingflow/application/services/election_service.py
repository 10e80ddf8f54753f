"""Election service - single entry point for one election.

This service is what a host calls. It receives the caller identity on
every call, checks the administrator capability through its port,
drives the workflow controller and ballot store, and forwards the
resulting notifications to the observer sink.

Operation Guarantees:
- Serialized: mutating operations run one at a time under a lock, so
  the awaited administrator check cannot interleave with another
  mutation
- Atomic: a rejected operation changes nothing and emits nothing
- Fire-and-forget notifications: a failing sink is logged and never
  rolls back or fails the operation that produced the notification

Developer Golden Rules:
1. AUTHORIZE FIRST - Administrator check before any phase or ledger check
2. EMIT AFTER APPLY - Notifications only for applied state changes
3. FAIL LOUD - Every rejection is logged and re-raised to the caller
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TypeVar

import structlog

from votingflow.application.ports.administrator_capability import (
    AdministratorCapabilityPort,
)
from votingflow.application.ports.ballot_event_emitter import BallotEventEmitterPort
from votingflow.application.services.base import LoggingMixin
from votingflow.domain.errors.workflow import UnauthorizedError
from votingflow.domain.events.ballot import (
    BallotEventPayload,
    PhaseChangedPayload,
    ProposalRegisteredPayload,
    VoteCastPayload,
    VoterRegisteredPayload,
)
from votingflow.domain.exceptions import BallotError
from votingflow.domain.models.ballot_store import BallotStatus, BallotStore
from votingflow.domain.models.proposal import Proposal
from votingflow.domain.models.voter import Voter
from votingflow.domain.models.workflow_controller import WorkflowController
from votingflow.domain.models.workflow_phase import WorkflowPhase

T = TypeVar("T")


class ElectionService(LoggingMixin):
    """Orchestrates a single election on behalf of calling identities.

    Example:
        service = ElectionService(
            administrator_capability=AdministratorCapabilityStub("admin"),
            event_emitter=BallotEventEmitterStub(),
        )
        await service.whitelist("admin", "0xA")
        await service.start_proposals_registration("admin")
        await service.submit_proposal("0xA", "Alpha")
    """

    def __init__(
        self,
        administrator_capability: AdministratorCapabilityPort,
        event_emitter: BallotEventEmitterPort,
        ballot_store: BallotStore | None = None,
    ) -> None:
        """Initialize the service for a fresh election.

        Args:
            administrator_capability: Port answering "is administrator".
            event_emitter: Observer sink for notifications.
            ballot_store: Existing store to drive. A new election is
                created when omitted.
        """
        self._administrator_capability = administrator_capability
        self._event_emitter = event_emitter
        self._ballot = ballot_store or BallotStore(WorkflowController())
        self._workflow = self._ballot.workflow
        self._lock = asyncio.Lock()
        self._init_logger()

    # ------------------------------------------------------------------
    # Workflow transitions (administrator only)
    # ------------------------------------------------------------------

    async def start_proposals_registration(self, caller: str) -> PhaseChangedPayload:
        return await self._transition(
            caller,
            "start_proposals_registration",
            self._workflow.start_proposals_registration,
        )

    async def end_proposals_registration(self, caller: str) -> PhaseChangedPayload:
        return await self._transition(
            caller,
            "end_proposals_registration",
            self._workflow.end_proposals_registration,
        )

    async def start_voting_session(self, caller: str) -> PhaseChangedPayload:
        return await self._transition(
            caller, "start_voting_session", self._workflow.start_voting_session
        )

    async def end_voting_session(self, caller: str) -> PhaseChangedPayload:
        return await self._transition(
            caller, "end_voting_session", self._workflow.end_voting_session
        )

    # ------------------------------------------------------------------
    # Ballot mutations
    # ------------------------------------------------------------------

    async def whitelist(self, caller: str, identity: str) -> VoterRegisteredPayload:
        """Register ``identity`` as a voter (administrator only).

        Raises:
            UnauthorizedError: If the caller is not the administrator.
            InvalidPhaseTransitionError: If not in REGISTERING_VOTERS.
            AlreadyRegisteredError: If the identity is already registered.
        """
        log = self._log_operation("whitelist", caller=caller, voter=identity)
        async with self._lock:
            await self._require_administrator(caller, "whitelist", log)
            payload = self._apply(log, lambda: self._ballot.register_voter(identity))
            log.info("voter_registered")
            await self._emit(payload, log)
        return payload

    async def submit_proposal(
        self, caller: str, description: str
    ) -> ProposalRegisteredPayload:
        """Submit a proposal as a registered voter.

        Raises:
            InvalidPhaseTransitionError: If not in PROPOSALS_REGISTRATION_STARTED.
            UnauthorizedError: If the caller is not a registered voter.
            DuplicateProposalError: If the description already exists.
        """
        log = self._log_operation("submit_proposal", caller=caller)
        async with self._lock:
            payload = self._apply(
                log, lambda: self._ballot.submit_proposal(caller, description)
            )
            log.info("proposal_registered", proposal_id=payload.proposal_id)
            await self._emit(payload, log)
        return payload

    async def vote(self, caller: str, description: str) -> VoteCastPayload:
        """Cast the caller's single vote by proposal description.

        Raises:
            InvalidPhaseTransitionError: If not in VOTING_SESSION_STARTED.
            UnauthorizedError: If the caller is not a registered voter.
            AlreadyVotedError: If the caller already voted.
            ProposalNotFoundError: If no proposal has that description.
        """
        log = self._log_operation("vote", caller=caller)
        async with self._lock:
            payload = self._apply(log, lambda: self._ballot.vote(caller, description))
            log.info("vote_recorded", proposal_id=payload.proposal_id)
            await self._emit(payload, log)
        return payload

    async def tally_votes(self, caller: str) -> PhaseChangedPayload:
        """Compute the winner and move to VOTES_TALLIED (administrator only).

        Raises:
            UnauthorizedError: If the caller is not the administrator.
            InvalidPhaseTransitionError: If not in VOTING_SESSION_ENDED.
            NoProposalsError: If no proposal exists.
        """
        log = self._log_operation("tally_votes", caller=caller)
        async with self._lock:
            await self._require_administrator(caller, "tally_votes", log)
            payload = self._apply(log, self._ballot.tally_votes)
            log.info(
                "votes_tallied",
                winning_proposal_id=self._ballot.get_winning_proposal_id(),
            )
            await self._emit(payload, log)
        return payload

    # ------------------------------------------------------------------
    # Queries (side-effect free)
    # ------------------------------------------------------------------

    async def get_current_phase(self) -> WorkflowPhase:
        return self._workflow.current_phase

    async def get_status(self) -> BallotStatus:
        return self._ballot.status()

    async def list_proposal_descriptions(self) -> list[str]:
        log = self._log_operation("list_proposal_descriptions")
        return self._apply(log, self._ballot.list_proposal_descriptions)

    async def get_winner(self) -> Proposal:
        log = self._log_operation("get_winner")
        return self._apply(log, self._ballot.get_winner)

    async def get_winning_proposal_id(self) -> int:
        log = self._log_operation("get_winning_proposal_id")
        return self._apply(log, self._ballot.get_winning_proposal_id)

    async def get_proposal_id_by_description(self, description: str) -> int:
        log = self._log_operation("get_proposal_id_by_description")
        return self._apply(
            log, lambda: self._ballot.get_proposal_id_by_description(description)
        )

    async def get_proposal(self, caller: str, proposal_id: int) -> tuple[str, int]:
        log = self._log_operation(
            "get_proposal", caller=caller, proposal_id=proposal_id
        )
        return self._apply(log, lambda: self._ballot.get_proposal(caller, proposal_id))

    async def get_voter_votes(self, caller: str, identity: str) -> frozenset[str]:
        log = self._log_operation("get_voter_votes", caller=caller, voter=identity)
        return self._apply(
            log, lambda: self._ballot.get_voter_votes(caller, identity)
        )

    async def get_voter(self, caller: str, identity: str) -> Voter:
        log = self._log_operation("get_voter", caller=caller, voter=identity)
        return self._apply(log, lambda: self._ballot.get_voter(caller, identity))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _transition(
        self,
        caller: str,
        operation: str,
        apply: Callable[[], PhaseChangedPayload],
    ) -> PhaseChangedPayload:
        log = self._log_operation(operation, caller=caller)
        async with self._lock:
            await self._require_administrator(caller, operation, log)
            payload = self._apply(log, apply)
            log.info(
                "phase_changed",
                previous_phase=payload.previous_phase.value,
                new_phase=payload.new_phase.value,
            )
            await self._emit(payload, log)
        return payload

    async def _require_administrator(
        self, caller: str, operation: str, log: structlog.BoundLogger
    ) -> None:
        if not await self._administrator_capability.is_administrator(caller):
            log.warning("operation_rejected", error_type=UnauthorizedError.__name__)
            raise UnauthorizedError(identity=caller, operation=operation)

    def _apply(self, log: structlog.BoundLogger, action: Callable[[], T]) -> T:
        try:
            return action()
        except BallotError as e:
            log.warning(
                "operation_rejected",
                error_type=type(e).__name__,
                reason=str(e),
            )
            raise

    async def _emit(
        self, payload: BallotEventPayload, log: structlog.BoundLogger
    ) -> None:
        # Notifications never fail the operation that produced them
        try:
            accepted = await self._event_emitter.emit(payload)
        except Exception as e:
            log.error(
                "event_emission_failed",
                event_type=payload.event_type,
                error=str(e),
                error_type=type(e).__name__,
            )
            return
        if not accepted:
            log.warning("event_emission_rejected", event_type=payload.event_type)
