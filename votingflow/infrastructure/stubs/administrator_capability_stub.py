"""Stub implementation of AdministratorCapabilityPort.

Grants the administrator capability to a single configured identity.
The identity can be reassigned between calls to simulate an ownership
change made through the external collaborator.

Usage in tests:
    capability = AdministratorCapabilityStub(administrator_id="admin")
    service = ElectionService(administrator_capability=capability, ...)

    assert await capability.is_administrator("admin")
    assert capability.checked_identities == ["admin"]
"""

from __future__ import annotations

from votingflow.application.ports.administrator_capability import (
    AdministratorCapabilityPort,
)


class AdministratorCapabilityStub(AdministratorCapabilityPort):
    """Stub granting the administrator capability to one identity.

    Attributes:
        administrator_id: The identity currently holding the capability.
        checked_identities: Every identity checked, in call order.
    """

    def __init__(self, administrator_id: str) -> None:
        """Initialize the stub.

        Args:
            administrator_id: The identity holding the capability.
        """
        self.administrator_id = administrator_id
        self.checked_identities: list[str] = []

    async def is_administrator(self, identity: str) -> bool:
        self.checked_identities.append(identity)
        return identity == self.administrator_id

    def reset(self) -> None:
        """Clear recorded checks."""
        self.checked_identities.clear()
