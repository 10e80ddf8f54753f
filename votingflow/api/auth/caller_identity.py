"""Caller identity extraction.

The host supplies the caller identity for every call. Over HTTP it
arrives in the X-Voter-Id header; the election never issues or revokes
identities itself.
"""

from typing import Annotated

import structlog
from fastapi import Header, HTTPException, status

logger = structlog.get_logger(__name__)

IDENTITY_HEADER = "X-Voter-Id"


def get_caller_identity(
    x_voter_id: Annotated[
        str | None,
        Header(description="Identity of the caller. Required for every election call."),
    ] = None,
) -> str:
    """Extract the caller identity from the X-Voter-Id header.

    Args:
        x_voter_id: Identity from the X-Voter-Id header.

    Returns:
        The stripped caller identity.

    Raises:
        HTTPException 401: If the header is missing or blank.
    """
    if x_voter_id is None or not x_voter_id.strip():
        logger.bind(component="caller_identity").warning(
            "auth_failed", reason="missing_identity"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"{IDENTITY_HEADER} header is required",
        )
    return x_voter_id.strip()
