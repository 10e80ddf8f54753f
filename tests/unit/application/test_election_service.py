"""Unit tests for ElectionService.

Tests cover:
- Administrator-only operations and capability checks
- Notification emission and ordering
- No notifications on rejected operations
- Sink failures never failing the operation
- Query delegation
"""

from __future__ import annotations

import pytest

from votingflow.application.services.election_service import ElectionService
from votingflow.domain.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    InvalidPhaseTransitionError,
    NoProposalsError,
    UnauthorizedError,
)
from votingflow.domain.events.ballot import (
    PHASE_CHANGED_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    PhaseChangedPayload,
    VoteCastPayload,
)
from votingflow.domain.models.workflow_phase import WorkflowPhase
from votingflow.infrastructure.stubs.administrator_capability_stub import (
    AdministratorCapabilityStub,
)
from votingflow.infrastructure.stubs.ballot_event_emitter_stub import (
    BallotEventEmitterStub,
)

ADMIN = "admin"


async def _open_voting(
    service: ElectionService, voters: list[str], descriptions: list[str]
) -> None:
    for identity in voters:
        await service.whitelist(ADMIN, identity)
    await service.start_proposals_registration(ADMIN)
    for description in descriptions:
        await service.submit_proposal(voters[0], description)
    await service.end_proposals_registration(ADMIN)
    await service.start_voting_session(ADMIN)


class TestAdministratorOperations:
    """Administrator-only operations reject everyone else."""

    @pytest.mark.asyncio
    async def test_whitelist_by_admin(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        payload = await election_service.whitelist(ADMIN, "0xA")

        assert payload.identity == "0xA"
        assert event_emitter.events_of_type(VOTER_REGISTERED_EVENT_TYPE) == [payload]

    @pytest.mark.asyncio
    async def test_whitelist_by_non_admin_is_unauthorized(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            await election_service.whitelist("0xA", "0xB")

        assert exc_info.value.operation == "whitelist"
        assert event_emitter.emitted_events == []
        status = await election_service.get_status()
        assert status.registered_voter_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        [
            "start_proposals_registration",
            "end_proposals_registration",
            "start_voting_session",
            "end_voting_session",
            "tally_votes",
        ],
    )
    async def test_transitions_require_admin(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
        operation: str,
    ) -> None:
        with pytest.raises(UnauthorizedError):
            await getattr(election_service, operation)("0xIntruder")

        assert await election_service.get_current_phase() is (
            WorkflowPhase.REGISTERING_VOTERS
        )
        assert event_emitter.emitted_events == []

    @pytest.mark.asyncio
    async def test_authorization_is_checked_before_phase(
        self,
        election_service: ElectionService,
    ) -> None:
        # Wrong phase and wrong caller: authorization wins
        with pytest.raises(UnauthorizedError):
            await election_service.end_voting_session("0xIntruder")

    @pytest.mark.asyncio
    async def test_capability_is_consulted_per_call(
        self,
        election_service: ElectionService,
        administrator_capability: AdministratorCapabilityStub,
    ) -> None:
        await election_service.whitelist(ADMIN, "0xA")
        administrator_capability.administrator_id = "0xNewAdmin"

        with pytest.raises(UnauthorizedError):
            await election_service.whitelist(ADMIN, "0xB")
        await election_service.whitelist("0xNewAdmin", "0xB")

        assert administrator_capability.checked_identities == [
            ADMIN,
            ADMIN,
            "0xNewAdmin",
        ]

    @pytest.mark.asyncio
    async def test_admin_is_not_implicitly_a_voter(
        self, election_service: ElectionService
    ) -> None:
        await election_service.start_proposals_registration(ADMIN)

        with pytest.raises(UnauthorizedError):
            await election_service.submit_proposal(ADMIN, "Alpha")


class TestTransitions:
    @pytest.mark.asyncio
    async def test_transition_emits_phase_changed(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        payload = await election_service.start_proposals_registration(ADMIN)

        assert payload == PhaseChangedPayload(
            previous_phase=WorkflowPhase.REGISTERING_VOTERS,
            new_phase=WorkflowPhase.PROPOSALS_REGISTRATION_STARTED,
        )
        assert event_emitter.emitted_events == [payload]

    @pytest.mark.asyncio
    async def test_wrong_predecessor_emits_nothing(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        with pytest.raises(InvalidPhaseTransitionError):
            await election_service.start_voting_session(ADMIN)

        assert event_emitter.emitted_events == []


class TestNotificationOrder:
    @pytest.mark.asyncio
    async def test_full_election_emits_in_application_order(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        await _open_voting(election_service, ["0xA"], ["Alpha"])
        await election_service.vote("0xA", "Alpha")
        await election_service.end_voting_session(ADMIN)
        await election_service.tally_votes(ADMIN)

        assert [e.event_type for e in event_emitter.emitted_events] == [
            VOTER_REGISTERED_EVENT_TYPE,
            PHASE_CHANGED_EVENT_TYPE,
            PROPOSAL_REGISTERED_EVENT_TYPE,
            PHASE_CHANGED_EVENT_TYPE,
            PHASE_CHANGED_EVENT_TYPE,
            VOTE_CAST_EVENT_TYPE,
            PHASE_CHANGED_EVENT_TYPE,
            PHASE_CHANGED_EVENT_TYPE,
        ]
        last = event_emitter.emitted_events[-1]
        assert isinstance(last, PhaseChangedPayload)
        assert last.new_phase is WorkflowPhase.VOTES_TALLIED

    @pytest.mark.asyncio
    async def test_vote_cast_payload(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        await _open_voting(election_service, ["0xA", "0xB"], ["Alpha", "Beta"])
        event_emitter.reset()

        await election_service.vote("0xB", "Beta")

        assert event_emitter.emitted_events == [
            VoteCastPayload(identity="0xB", proposal_id=1)
        ]


class TestRejectionsEmitNothing:
    @pytest.mark.asyncio
    async def test_duplicate_registration(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        await election_service.whitelist(ADMIN, "0xA")
        event_emitter.reset()

        with pytest.raises(AlreadyRegisteredError):
            await election_service.whitelist(ADMIN, "0xA")

        assert event_emitter.emitted_events == []

    @pytest.mark.asyncio
    async def test_second_vote(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        await _open_voting(election_service, ["0xA"], ["Alpha", "Beta"])
        await election_service.vote("0xA", "Alpha")
        event_emitter.reset()

        with pytest.raises(AlreadyVotedError):
            await election_service.vote("0xA", "Beta")

        assert event_emitter.emitted_events == []

    @pytest.mark.asyncio
    async def test_tally_without_proposals(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        await _open_voting(election_service, ["0xA"], [])
        await election_service.end_voting_session(ADMIN)
        event_emitter.reset()

        with pytest.raises(NoProposalsError):
            await election_service.tally_votes(ADMIN)

        assert event_emitter.emitted_events == []
        assert await election_service.get_current_phase() is (
            WorkflowPhase.VOTING_SESSION_ENDED
        )


class TestSinkFailures:
    """A failing observer sink never fails or rolls back the operation."""

    @pytest.mark.asyncio
    async def test_raising_sink_does_not_fail_operation(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        event_emitter.fail_exception = RuntimeError("sink down")

        payload = await election_service.whitelist(ADMIN, "0xA")

        assert payload.identity == "0xA"
        status = await election_service.get_status()
        assert status.registered_voter_count == 1

    @pytest.mark.asyncio
    async def test_rejecting_sink_does_not_fail_operation(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        event_emitter.should_fail = True

        await election_service.start_proposals_registration(ADMIN)

        assert await election_service.get_current_phase() is (
            WorkflowPhase.PROPOSALS_REGISTRATION_STARTED
        )
        assert event_emitter.emitted_events == []


class TestQueries:
    @pytest.mark.asyncio
    async def test_winner_after_tally(
        self, election_service: ElectionService
    ) -> None:
        await _open_voting(election_service, ["0xA", "0xB"], ["Alpha", "Beta"])
        await election_service.vote("0xA", "Beta")
        await election_service.end_voting_session(ADMIN)
        await election_service.tally_votes(ADMIN)

        assert await election_service.get_winning_proposal_id() == 1
        winner = await election_service.get_winner()
        assert winner.description == "Beta"
        assert winner.vote_count == 1

    @pytest.mark.asyncio
    async def test_winner_before_tally_fails(
        self, election_service: ElectionService
    ) -> None:
        with pytest.raises(InvalidPhaseTransitionError):
            await election_service.get_winner()

    @pytest.mark.asyncio
    async def test_voter_reads(self, election_service: ElectionService) -> None:
        await _open_voting(election_service, ["0xA", "0xB"], ["Alpha"])
        await election_service.vote("0xB", "Alpha")

        assert await election_service.get_voter_votes("0xA", "0xB") == frozenset(
            {"Alpha"}
        )
        voter = await election_service.get_voter("0xA", "0xB")
        assert voter.voted_proposal_index == 0
        assert await election_service.get_proposal("0xB", 0) == ("Alpha", 1)
        assert await election_service.get_proposal_id_by_description("Alpha") == 0
        assert await election_service.list_proposal_descriptions() == ["Alpha"]

    @pytest.mark.asyncio
    async def test_queries_do_not_emit(
        self,
        election_service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        await _open_voting(election_service, ["0xA"], ["Alpha"])
        event_emitter.reset()

        await election_service.get_status()
        await election_service.get_voter("0xA", "0xA")
        await election_service.list_proposal_descriptions()

        assert event_emitter.emitted_events == []

    @pytest.mark.asyncio
    async def test_default_service_starts_fresh_election(self) -> None:
        service = ElectionService(
            administrator_capability=AdministratorCapabilityStub(ADMIN),
            event_emitter=BallotEventEmitterStub(),
        )

        status = await service.get_status()

        assert status.phase is WorkflowPhase.REGISTERING_VOTERS
        assert status.proposal_count == 0
