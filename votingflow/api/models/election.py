"""Election API request/response models.

Pydantic models for the election endpoints.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema validation
2. FAIL LOUD - Rejected operations return RFC 7807 problem bodies
3. TYPE SAFETY - All fields typed
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from votingflow.domain.models.workflow_phase import WorkflowPhase

# Custom datetime serializer for ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class WhitelistRequest(BaseModel):
    """Request to register a voter."""

    identity: str = Field(
        ...,
        min_length=1,
        description="Identity to add to the voter whitelist",
    )


class ProposalRequest(BaseModel):
    """Request to submit a proposal.

    The description may be empty; it is matched exactly.
    """

    description: str = Field(..., description="Exact proposal text")


class VoteRequest(BaseModel):
    """Request to cast a vote by proposal description."""

    description: str = Field(
        ...,
        description="Exact description of the chosen proposal",
    )


class PhaseChangedResponse(BaseModel):
    """Response after a successful phase transition."""

    previous_phase: WorkflowPhase
    new_phase: WorkflowPhase
    occurred_at: DateTimeWithZ


class VoterRegisteredResponse(BaseModel):
    """Response after a voter is whitelisted."""

    identity: str
    occurred_at: DateTimeWithZ


class ProposalRegisteredResponse(BaseModel):
    """Response after a proposal is stored."""

    proposal_id: int = Field(..., ge=0)
    occurred_at: DateTimeWithZ


class VoteCastResponse(BaseModel):
    """Response after a vote is recorded."""

    identity: str
    proposal_id: int = Field(..., ge=0)
    occurred_at: DateTimeWithZ


class ProposalResponse(BaseModel):
    """A proposal and its current vote count."""

    proposal_id: int = Field(..., ge=0)
    description: str
    vote_count: int = Field(..., ge=0)


class ProposalListResponse(BaseModel):
    """All proposal descriptions in submission order."""

    descriptions: list[str]


class ProposalLookupResponse(BaseModel):
    """Index of the proposal matching a description."""

    proposal_id: int = Field(..., ge=0)
    description: str


class VoterResponse(BaseModel):
    """A voter record."""

    identity: str
    is_registered: bool
    has_voted: bool
    voted_proposal_index: int | None = None


class VoterVotesResponse(BaseModel):
    """Descriptions a voter voted for (zero or one)."""

    identity: str
    descriptions: list[str]


class ElectionStatusResponse(BaseModel):
    """Snapshot of the election."""

    phase: WorkflowPhase
    registered_voter_count: int = Field(..., ge=0)
    proposal_count: int = Field(..., ge=0)
    votes_cast: int = Field(..., ge=0)


class ElectionErrorResponse(BaseModel):
    """RFC 7807 problem body for rejected election operations."""

    type: str = Field(..., description="URI identifying the error kind")
    title: str
    status: int
    detail: str
    instance: str
