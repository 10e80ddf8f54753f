"""Voter domain model.

A voter record exists implicitly for every identity: an identity that
was never whitelisted reads as an unregistered voter who has not voted.
Records are only ever changed by registration and by voting, and are
never deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, eq=True)
class Voter:
    """Per-identity voter state.

    Since Voter is frozen, state changes return a new instance that the
    ballot store swaps in once every precondition has been checked.

    Attributes:
        identity: Address-like identity key supplied by the host.
        is_registered: Whether the administrator whitelisted this identity.
        has_voted: Whether the voter already cast their single vote.
        voted_proposal_index: Index of the proposal voted for, if any.
    """

    identity: str
    is_registered: bool = False
    has_voted: bool = False
    voted_proposal_index: int | None = None

    def registered(self) -> Voter:
        """Return a copy of this voter marked as registered."""
        return replace(self, is_registered=True)

    def with_vote(self, proposal_index: int) -> Voter:
        """Return a copy of this voter with their vote recorded.

        Args:
            proposal_index: Index of the proposal voted for.

        Returns:
            New Voter with has_voted set and the index stored.
        """
        return replace(self, has_voted=True, voted_proposal_index=proposal_index)
