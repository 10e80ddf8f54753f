"""Mapping from election domain errors to RFC 7807 HTTP errors.

Every election error kind maps to its own problem type and status:

- 403: UnauthorizedError
- 404: NotRegisteredError, ProposalNotFoundError, InvalidProposalIdError
- 409: InvalidPhaseTransitionError, AlreadyRegisteredError,
       DuplicateProposalError, AlreadyVotedError
- 422: NoProposalsError, NoWinningProposalError
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from votingflow.domain.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    DuplicateProposalError,
    InvalidPhaseTransitionError,
    InvalidProposalIdError,
    NoProposalsError,
    NotRegisteredError,
    NoWinningProposalError,
    ProposalNotFoundError,
    UnauthorizedError,
)
from votingflow.domain.exceptions import BallotError
from votingflow.infrastructure.monitoring.metrics import get_metrics_collector

# error class -> (status, problem slug, title)
ERROR_MAP: dict[type[BallotError], tuple[int, str, str]] = {
    UnauthorizedError: (403, "unauthorized", "Unauthorized"),
    NotRegisteredError: (404, "not-registered", "Voter Not Registered"),
    ProposalNotFoundError: (404, "proposal-not-found", "Proposal Not Found"),
    InvalidProposalIdError: (404, "invalid-proposal-id", "Invalid Proposal Id"),
    InvalidPhaseTransitionError: (409, "invalid-phase", "Invalid Phase"),
    AlreadyRegisteredError: (409, "already-registered", "Voter Already Registered"),
    DuplicateProposalError: (409, "duplicate-proposal", "Duplicate Proposal"),
    AlreadyVotedError: (409, "already-voted", "Already Voted"),
    NoProposalsError: (422, "no-proposals", "No Proposals"),
    NoWinningProposalError: (422, "no-winning-proposal", "No Winning Proposal"),
}

DEFAULT_ERROR = (400, "ballot-error", "Election Operation Rejected")


def to_http_exception(
    error: BallotError, request: Request, operation: str
) -> HTTPException:
    """Build the HTTPException for a rejected election operation.

    Args:
        error: The domain error raised by the election service.
        request: Request being served, for the problem instance.
        operation: Operation name, used as the metrics label.

    Returns:
        HTTPException carrying an RFC 7807 problem body.
    """
    status_code, slug, title = ERROR_MAP.get(type(error), DEFAULT_ERROR)
    get_metrics_collector().increment_rejections(
        operation=operation, error_type=type(error).__name__
    )
    return HTTPException(
        status_code=status_code,
        detail={
            "type": f"urn:votingflow:election:{slug}",
            "title": title,
            "status": status_code,
            "detail": str(error),
            "instance": str(request.url),
        },
    )
