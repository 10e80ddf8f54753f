"""End-to-end election scenarios.

Runs one complete election through the service layer and through the
HTTP API: voters A, B and C are whitelisted, Alpha and Beta are
proposed, A and B vote Alpha, C votes Beta, and Alpha wins with two
votes.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from votingflow.api.dependencies.election import get_election_service
from votingflow.api.main import app
from votingflow.application.services.election_service import ElectionService
from votingflow.bootstrap.election import build_election_service
from votingflow.config.election_config import TEST_ELECTION_CONFIG
from votingflow.domain.events.ballot import (
    PHASE_CHANGED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
)
from votingflow.domain.models.workflow_phase import WorkflowPhase
from votingflow.infrastructure.stubs.ballot_event_emitter_stub import (
    BallotEventEmitterStub,
)

pytestmark = pytest.mark.integration

ADMIN = TEST_ELECTION_CONFIG.administrator_id
BALLOTS = {"0xA": "Alpha", "0xB": "Alpha", "0xC": "Beta"}


@pytest.fixture
def event_emitter() -> BallotEventEmitterStub:
    return BallotEventEmitterStub()


@pytest.fixture
def service(event_emitter: BallotEventEmitterStub) -> ElectionService:
    """Service wired the way the host wires it, with a capturing sink."""
    return build_election_service(TEST_ELECTION_CONFIG, event_emitter=event_emitter)


@pytest.fixture
def client(service: ElectionService) -> Iterator[TestClient]:
    app.dependency_overrides[get_election_service] = lambda: service
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


class TestServiceElection:
    @pytest.mark.asyncio
    async def test_alpha_wins_with_two_votes(
        self,
        service: ElectionService,
        event_emitter: BallotEventEmitterStub,
    ) -> None:
        for identity in BALLOTS:
            await service.whitelist(ADMIN, identity)
        await service.start_proposals_registration(ADMIN)
        await service.submit_proposal("0xA", "Alpha")
        await service.submit_proposal("0xB", "Beta")
        await service.end_proposals_registration(ADMIN)
        await service.start_voting_session(ADMIN)
        for identity, description in BALLOTS.items():
            await service.vote(identity, description)
        await service.end_voting_session(ADMIN)
        await service.tally_votes(ADMIN)

        winner = await service.get_winner()
        assert winner.description == "Alpha"
        assert winner.vote_count == 2
        assert await service.get_winning_proposal_id() == 0
        assert await service.get_current_phase() is WorkflowPhase.VOTES_TALLIED

        assert len(event_emitter.events_of_type(VOTE_CAST_EVENT_TYPE)) == 3
        assert len(event_emitter.events_of_type(PHASE_CHANGED_EVENT_TYPE)) == 5
        assert len(event_emitter.emitted_events) == 3 + 2 + 3 + 5


class TestHttpElection:
    def test_alpha_wins_over_http(self, client: TestClient) -> None:
        admin = {"X-Voter-Id": ADMIN}
        base = "/v1/election"

        for identity in BALLOTS:
            response = client.post(
                f"{base}/voters", json={"identity": identity}, headers=admin
            )
            assert response.status_code == 201
        client.post(f"{base}/phase/start-proposals-registration", headers=admin)
        for proposer, description in (("0xA", "Alpha"), ("0xB", "Beta")):
            response = client.post(
                f"{base}/proposals",
                json={"description": description},
                headers={"X-Voter-Id": proposer},
            )
            assert response.status_code == 201
        client.post(f"{base}/phase/end-proposals-registration", headers=admin)
        client.post(f"{base}/phase/start-voting-session", headers=admin)
        for identity, description in BALLOTS.items():
            response = client.post(
                f"{base}/votes",
                json={"description": description},
                headers={"X-Voter-Id": identity},
            )
            assert response.status_code == 201
        client.post(f"{base}/phase/end-voting-session", headers=admin)
        assert client.post(f"{base}/tally", headers=admin).status_code == 200

        winner = client.get(f"{base}/winner").json()
        status = client.get(base).json()

        assert winner == {"proposal_id": 0, "description": "Alpha", "vote_count": 2}
        assert status == {
            "phase": "VotesTallied",
            "registered_voter_count": 3,
            "proposal_count": 2,
            "votes_cast": 3,
        }
