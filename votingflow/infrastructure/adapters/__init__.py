"""Infrastructure adapters for votingflow.

Adapters implement the ports defined in the application layer,
providing concrete implementations for a running host.
"""

from votingflow.infrastructure.adapters.configured_administrator import (
    ConfiguredAdministratorCapability,
)
from votingflow.infrastructure.adapters.structlog_event_emitter import (
    StructlogBallotEventEmitter,
)

__all__: list[str] = [
    "ConfiguredAdministratorCapability",
    "StructlogBallotEventEmitter",
]
