"""Domain events for votingflow.

Notification payloads emitted to the observer sink after a
successful operation.
"""

from votingflow.domain.events.ballot import (
    PHASE_CHANGED_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    BallotEventPayload,
    PhaseChangedPayload,
    ProposalRegisteredPayload,
    VoteCastPayload,
    VoterRegisteredPayload,
)

__all__: list[str] = [
    "BallotEventPayload",
    "PHASE_CHANGED_EVENT_TYPE",
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "PhaseChangedPayload",
    "ProposalRegisteredPayload",
    "VOTE_CAST_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "VoteCastPayload",
    "VoterRegisteredPayload",
]
