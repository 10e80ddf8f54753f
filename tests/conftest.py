"""
Pytest configuration and shared fixtures for votingflow tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from votingflow.application.services.election_service import ElectionService
from votingflow.domain.models.ballot_store import BallotStore
from votingflow.domain.models.workflow_controller import WorkflowController
from votingflow.infrastructure.stubs.administrator_capability_stub import (
    AdministratorCapabilityStub,
)
from votingflow.infrastructure.stubs.ballot_event_emitter_stub import (
    BallotEventEmitterStub,
)

ADMIN = "admin"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from votingflow import __version__

    return __version__


@pytest.fixture
def workflow() -> WorkflowController:
    """Provide a workflow controller in REGISTERING_VOTERS."""
    return WorkflowController()


@pytest.fixture
def ballot_store(workflow: WorkflowController) -> BallotStore:
    """Provide an empty ballot store bound to the workflow fixture."""
    return BallotStore(workflow)


@pytest.fixture
def administrator_capability() -> AdministratorCapabilityStub:
    """Provide a capability stub granting ADMIN."""
    return AdministratorCapabilityStub(administrator_id=ADMIN)


@pytest.fixture
def event_emitter() -> BallotEventEmitterStub:
    """Provide an event emitter stub capturing notifications."""
    return BallotEventEmitterStub()


@pytest.fixture
def election_service(
    administrator_capability: AdministratorCapabilityStub,
    event_emitter: BallotEventEmitterStub,
    ballot_store: BallotStore,
) -> ElectionService:
    """Provide an election service over the shared stubs and store."""
    return ElectionService(
        administrator_capability=administrator_capability,
        event_emitter=event_emitter,
        ballot_store=ballot_store,
    )
