"""Administrator capability backed by election configuration.

The administrator identity is fixed when the host starts, taken from
ElectionConfig. Transferring the role means restarting the host with a
different configuration.
"""

from __future__ import annotations

from votingflow.application.ports.administrator_capability import (
    AdministratorCapabilityPort,
)
from votingflow.config.election_config import ElectionConfig


class ConfiguredAdministratorCapability(AdministratorCapabilityPort):
    """Grants the administrator capability to the configured identity."""

    def __init__(self, config: ElectionConfig) -> None:
        self._administrator_id = config.administrator_id

    async def is_administrator(self, identity: str) -> bool:
        return identity == self._administrator_id
