"""Application services for votingflow."""

from votingflow.application.services.election_service import ElectionService

__all__: list[str] = ["ElectionService"]
