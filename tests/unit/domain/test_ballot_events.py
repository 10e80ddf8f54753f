"""Unit tests for ballot notification payloads."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from votingflow.domain.events import (
    PHASE_CHANGED_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    PhaseChangedPayload,
    ProposalRegisteredPayload,
    VoteCastPayload,
    VoterRegisteredPayload,
)
from votingflow.domain.models.workflow_phase import WorkflowPhase

FIXED_TIME = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestEventTypes:
    def test_event_types_are_fixed(self) -> None:
        assert VoterRegisteredPayload("0xA").event_type == VOTER_REGISTERED_EVENT_TYPE
        assert ProposalRegisteredPayload(0).event_type == PROPOSAL_REGISTERED_EVENT_TYPE
        assert VoteCastPayload("0xA", 0).event_type == VOTE_CAST_EVENT_TYPE
        assert (
            PhaseChangedPayload(
                WorkflowPhase.REGISTERING_VOTERS,
                WorkflowPhase.PROPOSALS_REGISTRATION_STARTED,
            ).event_type
            == PHASE_CHANGED_EVENT_TYPE
        )


class TestPayloads:
    def test_payloads_are_frozen(self) -> None:
        payload = VoteCastPayload("0xA", 1)

        with pytest.raises(AttributeError):
            payload.proposal_id = 2  # type: ignore[misc]

    def test_equality_ignores_timestamp(self) -> None:
        assert VoterRegisteredPayload("0xA") == VoterRegisteredPayload(
            "0xA", occurred_at=FIXED_TIME
        )

    def test_default_timestamp_is_utc(self) -> None:
        assert ProposalRegisteredPayload(0).occurred_at.tzinfo is not None


class TestToDict:
    def test_phase_changed_serializes_phase_values(self) -> None:
        payload = PhaseChangedPayload(
            previous_phase=WorkflowPhase.VOTING_SESSION_ENDED,
            new_phase=WorkflowPhase.VOTES_TALLIED,
            occurred_at=FIXED_TIME,
        )

        assert payload.to_dict() == {
            "event_type": PHASE_CHANGED_EVENT_TYPE,
            "previous_phase": "VotingSessionEnded",
            "new_phase": "VotesTallied",
            "occurred_at": FIXED_TIME.isoformat(),
        }

    def test_vote_cast_serializes_identity_and_id(self) -> None:
        data = VoteCastPayload("0xA", 2, occurred_at=FIXED_TIME).to_dict()

        assert data["identity"] == "0xA"
        assert data["proposal_id"] == 2
        assert data["event_type"] == VOTE_CAST_EVENT_TYPE
