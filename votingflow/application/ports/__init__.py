"""Application ports for votingflow.

Ports are the seams the election service talks through:
- AdministratorCapabilityPort: external "is administrator" predicate
- BallotEventEmitterPort: one-way observer sink for notifications
"""

from votingflow.application.ports.administrator_capability import (
    AdministratorCapabilityPort,
)
from votingflow.application.ports.ballot_event_emitter import BallotEventEmitterPort

__all__: list[str] = ["AdministratorCapabilityPort", "BallotEventEmitterPort"]
