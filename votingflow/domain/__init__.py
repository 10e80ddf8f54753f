"""
Domain layer - Pure election logic for votingflow.

This layer contains:
- Domain models (workflow phase machine, voters, proposals, ballot store)
- Domain events (notification payloads)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from votingflow.domain.exceptions import BallotError

__all__: list[str] = ["BallotError"]
