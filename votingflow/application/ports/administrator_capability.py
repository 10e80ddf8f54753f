"""Administrator Capability port - interface for the "is administrator" check.

Ownership of the administrator role lives outside the election. The
election only ever asks a single question of it: is this identity the
administrator? Transferring the role is the collaborator's own concern
and is not part of this interface.
"""

from abc import ABC, abstractmethod


class AdministratorCapabilityPort(ABC):
    """Abstract interface for the administrator capability check.

    Checked by every administrator-only operation before any election
    state is read or changed.
    """

    @abstractmethod
    async def is_administrator(self, identity: str) -> bool:
        """Check if ``identity`` holds the administrator capability.

        Args:
            identity: Caller identity supplied by the host.

        Returns:
            True if the identity is the administrator, False otherwise.
        """
        ...
