"""Configuration module for votingflow.

Available Configurations:
- ElectionConfig: Administrator identity and logging environment
"""

from votingflow.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    TEST_ELECTION_CONFIG,
    ElectionConfig,
)

__all__ = [
    "ElectionConfig",
    "DEFAULT_ELECTION_CONFIG",
    "TEST_ELECTION_CONFIG",
]
