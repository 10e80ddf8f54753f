"""Bootstrap wiring for the election service.

One host runs one election. The service is created lazily on first use
and kept for the lifetime of the process; there is no reset.
"""

from __future__ import annotations

from structlog import get_logger

from votingflow.application.ports.administrator_capability import (
    AdministratorCapabilityPort,
)
from votingflow.application.ports.ballot_event_emitter import BallotEventEmitterPort
from votingflow.application.services.election_service import ElectionService
from votingflow.config.election_config import ElectionConfig
from votingflow.infrastructure.adapters.configured_administrator import (
    ConfiguredAdministratorCapability,
)
from votingflow.infrastructure.adapters.structlog_event_emitter import (
    StructlogBallotEventEmitter,
)

logger = get_logger()

_election_config: ElectionConfig | None = None
_election_service: ElectionService | None = None


def get_election_config() -> ElectionConfig:
    """Get election configuration, loaded once from the environment."""
    global _election_config
    if _election_config is None:
        _election_config = ElectionConfig.from_environment()
    return _election_config


def build_election_service(
    config: ElectionConfig,
    administrator_capability: AdministratorCapabilityPort | None = None,
    event_emitter: BallotEventEmitterPort | None = None,
) -> ElectionService:
    """Create an election service for a fresh election.

    Args:
        config: Host configuration.
        administrator_capability: Overrides the configured capability.
        event_emitter: Overrides the structured-log emitter.

    Returns:
        ElectionService in the REGISTERING_VOTERS phase.
    """
    service = ElectionService(
        administrator_capability=administrator_capability
        or ConfiguredAdministratorCapability(config),
        event_emitter=event_emitter or StructlogBallotEventEmitter(),
    )
    logger.info(
        "election_service_initialized",
        administrator_id=config.administrator_id,
        environment=config.environment,
    )
    return service


def get_election_service() -> ElectionService:
    """Get the process-wide election service instance."""
    global _election_service
    if _election_service is None:
        _election_service = build_election_service(get_election_config())
    return _election_service


def set_election_service(service: ElectionService | None) -> None:
    """Replace the process-wide election service (for testing)."""
    global _election_service
    _election_service = service
