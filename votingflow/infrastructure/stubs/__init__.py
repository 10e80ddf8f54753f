"""Infrastructure stubs for development and testing.

Available stubs:
- AdministratorCapabilityStub: Grants the administrator capability to one identity
- BallotEventEmitterStub: Captures notifications, supports failure injection

WARNING: These stubs are NOT for production use.
Production implementations are in votingflow/infrastructure/adapters/.
"""

from votingflow.infrastructure.stubs.administrator_capability_stub import (
    AdministratorCapabilityStub,
)
from votingflow.infrastructure.stubs.ballot_event_emitter_stub import (
    BallotEventEmitterStub,
)

__all__: list[str] = ["AdministratorCapabilityStub", "BallotEventEmitterStub"]
