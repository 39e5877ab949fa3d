"""Mutation result DTO.

Every intent issued through the session facade returns a MutationResult
instead of raising: either success with the (possibly unchanged) snapshot,
or failure with an ErrorKind and message. The snapshot on failure is the
unchanged snapshot the operation started from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ideaboard.domain.exceptions import ErrorKind, IdeaBoardError
from ideaboard.domain.models import BoardState


@dataclass(frozen=True)
class MutationResult:
    """Discriminated outcome of a mutation.

    Attributes:
        state: Snapshot after the operation (unchanged on no-op or failure).
        changed: Whether a new snapshot was produced.
        entity_id: Id of the created or affected entity, when meaningful.
        error_kind: Failure discriminator, None on success.
        message: Human-readable failure message, None on success.
    """

    state: BoardState
    changed: bool = False
    entity_id: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(
        cls,
        state: BoardState,
        *,
        changed: bool,
        entity_id: Optional[str] = None,
    ) -> MutationResult:
        """Build a success result."""
        return cls(state=state, changed=changed, entity_id=entity_id)

    @classmethod
    def failure(
        cls,
        state: BoardState,
        error: IdeaBoardError,
        entity_id: Optional[str] = None,
    ) -> MutationResult:
        """Build a failure result from a domain error.

        Args:
            state: The unchanged snapshot.
            error: The domain error that refused the operation.
            entity_id: Id the operation referred to, if any.
        """
        return cls(
            state=state,
            changed=False,
            entity_id=entity_id,
            error_kind=error.error_kind,
            message=error.message,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the outcome (without the snapshot) for presentation."""
        return {
            "ok": self.ok,
            "changed": self.changed,
            "entity_id": self.entity_id,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "message": self.message,
        }
