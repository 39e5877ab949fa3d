"""Board snapshot: the entity store.

BoardState owns the canonical participant and proposal collections. It is
immutable: the mutation service produces a new snapshot for every change, so
readers holding an older snapshot never observe a partial mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from ideaboard.domain.models.participant import Participant
from ideaboard.domain.models.proposal import Proposal


@dataclass(frozen=True, eq=True)
class BoardState:
    """Immutable snapshot of all board entities.

    Attributes:
        participants: Registered participants in registration order.
        proposals: Proposals in storage order (newest submissions first).
    """

    participants: tuple[Participant, ...] = field(default_factory=tuple)
    proposals: tuple[Proposal, ...] = field(default_factory=tuple)

    def find_participant(self, participant_id: str) -> Optional[Participant]:
        return next(
            (p for p in self.participants if p.participant_id == participant_id),
            None,
        )

    def find_proposal(self, proposal_id: str) -> Optional[Proposal]:
        return next(
            (p for p in self.proposals if p.proposal_id == proposal_id),
            None,
        )

    def with_participant(self, participant: Participant) -> BoardState:
        """Return a snapshot with the participant appended."""
        return replace(self, participants=self.participants + (participant,))

    def with_proposal_prepended(self, proposal: Proposal) -> BoardState:
        """Return a snapshot with the proposal inserted at the front."""
        return replace(self, proposals=(proposal,) + self.proposals)

    def with_proposal_replaced(self, proposal: Proposal) -> BoardState:
        """Return a snapshot with the proposal of the same id replaced.

        Position in the collection is preserved.
        """
        return replace(
            self,
            proposals=tuple(
                proposal if p.proposal_id == proposal.proposal_id else p
                for p in self.proposals
            ),
        )

    def without_proposal(self, proposal_id: str) -> BoardState:
        """Return a snapshot with the proposal removed."""
        return replace(
            self,
            proposals=tuple(
                p for p in self.proposals if p.proposal_id != proposal_id
            ),
        )
