"""Election API dependencies.

Dependency injection for the election service. Routes depend on this
function so tests can swap the service with app.dependency_overrides.
"""

from votingflow.application.services.election_service import ElectionService
from votingflow.bootstrap.election import get_election_service as _get_service


def get_election_service() -> ElectionService:
    """Get the election service for this host."""
    return _get_service()
