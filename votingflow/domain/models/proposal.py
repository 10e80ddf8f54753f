"""Proposal domain model."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, eq=True)
class Proposal:
    """A proposal competing for votes.

    A proposal is identified by its position in the append-only proposal
    sequence, not by any field of its own.

    Attributes:
        description: Exact text of the proposal. Unique across the election.
        vote_count: Number of votes received. Starts at 0, only increments.
    """

    description: str
    vote_count: int = 0

    def __post_init__(self) -> None:
        """Validate proposal fields."""
        if self.vote_count < 0:
            raise ValueError(f"vote_count must be non-negative, got {self.vote_count}")

    def with_vote(self) -> Proposal:
        """Return a copy of this proposal with one more vote."""
        return replace(self, vote_count=self.vote_count + 1)
