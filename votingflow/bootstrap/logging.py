"""Logging wiring for the election host."""

from __future__ import annotations

from votingflow.config.election_config import ElectionConfig
from votingflow.infrastructure.observability import configure_structlog


def configure_logging(config: ElectionConfig) -> None:
    """Configure structlog for the host's configured environment."""
    configure_structlog(environment=config.environment)
