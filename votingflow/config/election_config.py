"""Election host configuration.

This module defines configuration for running an election host, with
environment variable overrides for deployment.

Environment Variables:
- ELECTION_ADMINISTRATOR_ID: Identity holding the administrator capability
  (default: "admin")
- ELECTION_ENVIRONMENT: "production" for JSON logs, "development" for
  console logs (default: "production")
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Blank values fall back to the default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class ElectionConfig:
    """Configuration for an election host.

    Attributes:
        administrator_id: Identity granted the administrator capability.
        environment: Logging environment, "production" or "development".
    """

    administrator_id: str = "admin"
    environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.administrator_id:
            raise ValueError("administrator_id must not be empty")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> "ElectionConfig":
        """Create config from environment variables with defaults.

        Returns:
            ElectionConfig with values from environment or defaults.

        Raises:
            ValueError: If ELECTION_ENVIRONMENT names an unknown environment.
        """
        return cls(
            administrator_id=_get_str_env("ELECTION_ADMINISTRATOR_ID", "admin"),
            environment=_get_str_env("ELECTION_ENVIRONMENT", "production").lower(),
        )


# Default production config
DEFAULT_ELECTION_CONFIG = ElectionConfig()

# Testing config with readable console logs
TEST_ELECTION_CONFIG = ElectionConfig(
    administrator_id="test-admin",
    environment="development",
)
