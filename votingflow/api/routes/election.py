"""Election API routes.

FastAPI router exposing every election operation. The caller identity
comes from the X-Voter-Id header on every call that needs one.

Developer Golden Rules:
1. IDENTITY FROM HOST - Never trust an identity in the request body for the caller
2. FAIL LOUD - Rejected operations return RFC 7807 problem bodies
3. NO LOGIC HERE - Routes translate, the election service decides
"""

from enum import Enum

from fastapi import APIRouter, Depends, Query, Request

from votingflow.api.auth.caller_identity import get_caller_identity
from votingflow.api.dependencies.election import get_election_service
from votingflow.api.errors import to_http_exception
from votingflow.api.models.election import (
    ElectionErrorResponse,
    ElectionStatusResponse,
    PhaseChangedResponse,
    ProposalListResponse,
    ProposalLookupResponse,
    ProposalRegisteredResponse,
    ProposalRequest,
    ProposalResponse,
    VoteCastResponse,
    VoteRequest,
    VoterRegisteredResponse,
    VoterResponse,
    VoterVotesResponse,
    WhitelistRequest,
)
from votingflow.application.services.election_service import ElectionService
from votingflow.domain.events.ballot import PhaseChangedPayload
from votingflow.domain.exceptions import BallotError

router = APIRouter(prefix="/v1/election", tags=["election"])

_ERROR_RESPONSES = {
    403: {"model": ElectionErrorResponse, "description": "Caller lacks the capability"},
    404: {"model": ElectionErrorResponse, "description": "Voter or proposal not found"},
    409: {"model": ElectionErrorResponse, "description": "Wrong phase or conflicting state"},
    422: {"model": ElectionErrorResponse, "description": "No proposals or no winner"},
}


class PhaseAction(str, Enum):
    """Administrator phase transitions reachable over HTTP."""

    START_PROPOSALS_REGISTRATION = "start-proposals-registration"
    END_PROPOSALS_REGISTRATION = "end-proposals-registration"
    START_VOTING_SESSION = "start-voting-session"
    END_VOTING_SESSION = "end-voting-session"


def _phase_response(payload: PhaseChangedPayload) -> PhaseChangedResponse:
    return PhaseChangedResponse(
        previous_phase=payload.previous_phase,
        new_phase=payload.new_phase,
        occurred_at=payload.occurred_at,
    )


@router.get("", response_model=ElectionStatusResponse, summary="Election status")
async def get_status(
    service: ElectionService = Depends(get_election_service),
) -> ElectionStatusResponse:
    """Get the current phase and ledger counts."""
    status = await service.get_status()
    return ElectionStatusResponse(
        phase=status.phase,
        registered_voter_count=status.registered_voter_count,
        proposal_count=status.proposal_count,
        votes_cast=status.votes_cast,
    )


@router.post(
    "/phase/{action}",
    response_model=PhaseChangedResponse,
    responses=_ERROR_RESPONSES,
    summary="Advance the workflow phase",
)
async def change_phase(
    action: PhaseAction,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> PhaseChangedResponse:
    """Apply one administrator phase transition.

    Raises:
        HTTPException 403: Caller is not the administrator
        HTTPException 409: Wrong predecessor phase
    """
    transitions = {
        PhaseAction.START_PROPOSALS_REGISTRATION: service.start_proposals_registration,
        PhaseAction.END_PROPOSALS_REGISTRATION: service.end_proposals_registration,
        PhaseAction.START_VOTING_SESSION: service.start_voting_session,
        PhaseAction.END_VOTING_SESSION: service.end_voting_session,
    }
    try:
        payload = await transitions[action](caller)
    except BallotError as e:
        raise to_http_exception(e, request, action.value) from None
    return _phase_response(payload)


@router.post(
    "/voters",
    response_model=VoterRegisteredResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Whitelist a voter",
)
async def whitelist_voter(
    request_data: WhitelistRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> VoterRegisteredResponse:
    """Register a voter (administrator only, REGISTERING_VOTERS phase)."""
    try:
        payload = await service.whitelist(caller, request_data.identity)
    except BallotError as e:
        raise to_http_exception(e, request, "whitelist") from None
    return VoterRegisteredResponse(
        identity=payload.identity, occurred_at=payload.occurred_at
    )


@router.get(
    "/voters/{identity}",
    response_model=VoterResponse,
    responses=_ERROR_RESPONSES,
    summary="Get a voter record",
)
async def get_voter(
    identity: str,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> VoterResponse:
    """Get any identity's voter record (registered voters only)."""
    try:
        voter = await service.get_voter(caller, identity)
    except BallotError as e:
        raise to_http_exception(e, request, "get_voter") from None
    return VoterResponse(
        identity=voter.identity,
        is_registered=voter.is_registered,
        has_voted=voter.has_voted,
        voted_proposal_index=voter.voted_proposal_index,
    )


@router.get(
    "/voters/{identity}/votes",
    response_model=VoterVotesResponse,
    responses=_ERROR_RESPONSES,
    summary="Get what a voter voted for",
)
async def get_voter_votes(
    identity: str,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> VoterVotesResponse:
    """Get the descriptions a registered voter voted for."""
    try:
        descriptions = await service.get_voter_votes(caller, identity)
    except BallotError as e:
        raise to_http_exception(e, request, "get_voter_votes") from None
    return VoterVotesResponse(identity=identity, descriptions=sorted(descriptions))


@router.post(
    "/proposals",
    response_model=ProposalRegisteredResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Submit a proposal",
)
async def submit_proposal(
    request_data: ProposalRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> ProposalRegisteredResponse:
    """Submit a proposal (registered voters, PROPOSALS_REGISTRATION_STARTED)."""
    try:
        payload = await service.submit_proposal(caller, request_data.description)
    except BallotError as e:
        raise to_http_exception(e, request, "submit_proposal") from None
    return ProposalRegisteredResponse(
        proposal_id=payload.proposal_id, occurred_at=payload.occurred_at
    )


@router.get(
    "/proposals",
    response_model=ProposalListResponse,
    responses=_ERROR_RESPONSES,
    summary="List proposal descriptions",
)
async def list_proposals(
    request: Request,
    service: ElectionService = Depends(get_election_service),
) -> ProposalListResponse:
    """List descriptions in submission order."""
    try:
        descriptions = await service.list_proposal_descriptions()
    except BallotError as e:
        raise to_http_exception(e, request, "list_proposal_descriptions") from None
    return ProposalListResponse(descriptions=descriptions)


@router.get(
    "/proposals/lookup",
    response_model=ProposalLookupResponse,
    responses=_ERROR_RESPONSES,
    summary="Find a proposal by exact description",
)
async def lookup_proposal(
    request: Request,
    description: str = Query(..., description="Exact proposal description"),
    service: ElectionService = Depends(get_election_service),
) -> ProposalLookupResponse:
    """Resolve an exact description to its proposal id."""
    try:
        proposal_id = await service.get_proposal_id_by_description(description)
    except BallotError as e:
        raise to_http_exception(e, request, "get_proposal_id_by_description") from None
    return ProposalLookupResponse(proposal_id=proposal_id, description=description)


@router.get(
    "/proposals/{proposal_id}",
    response_model=ProposalResponse,
    responses=_ERROR_RESPONSES,
    summary="Get a proposal by id",
)
async def get_proposal(
    proposal_id: int,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> ProposalResponse:
    """Get a proposal's description and vote count (registered voters only)."""
    try:
        description, vote_count = await service.get_proposal(caller, proposal_id)
    except BallotError as e:
        raise to_http_exception(e, request, "get_proposal") from None
    return ProposalResponse(
        proposal_id=proposal_id, description=description, vote_count=vote_count
    )


@router.post(
    "/votes",
    response_model=VoteCastResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Cast a vote",
)
async def cast_vote(
    request_data: VoteRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> VoteCastResponse:
    """Cast the caller's single vote by exact proposal description."""
    try:
        payload = await service.vote(caller, request_data.description)
    except BallotError as e:
        raise to_http_exception(e, request, "vote") from None
    return VoteCastResponse(
        identity=payload.identity,
        proposal_id=payload.proposal_id,
        occurred_at=payload.occurred_at,
    )


@router.post(
    "/tally",
    response_model=PhaseChangedResponse,
    responses=_ERROR_RESPONSES,
    summary="Tally votes",
)
async def tally_votes(
    request: Request,
    caller: str = Depends(get_caller_identity),
    service: ElectionService = Depends(get_election_service),
) -> PhaseChangedResponse:
    """Compute the winner and close the election (administrator only)."""
    try:
        payload = await service.tally_votes(caller)
    except BallotError as e:
        raise to_http_exception(e, request, "tally_votes") from None
    return _phase_response(payload)


@router.get(
    "/winner",
    response_model=ProposalResponse,
    responses=_ERROR_RESPONSES,
    summary="Get the winning proposal",
)
async def get_winner(
    request: Request,
    service: ElectionService = Depends(get_election_service),
) -> ProposalResponse:
    """Get the winning proposal once votes are tallied."""
    try:
        proposal_id = await service.get_winning_proposal_id()
        winner = await service.get_winner()
    except BallotError as e:
        raise to_http_exception(e, request, "get_winner") from None
    return ProposalResponse(
        proposal_id=proposal_id,
        description=winner.description,
        vote_count=winner.vote_count,
    )


