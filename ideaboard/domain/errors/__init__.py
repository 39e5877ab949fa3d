"""Domain errors for IdeaBoard.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from IdeaBoardError and carry an ErrorKind.
"""

from ideaboard.domain.errors.not_found import (
    NotFoundError,
    ParticipantNotFoundError,
    ProposalNotFoundError,
)
from ideaboard.domain.errors.permission import (
    CapabilityDeniedError,
    NoActiveParticipantError,
    PermissionDeniedError,
    TopTierRequiredError,
)
from ideaboard.domain.errors.validation import (
    BlankFieldError,
    InvalidStatusTransitionError,
    UnknownValueError,
    ValidationError,
)
from ideaboard.domain.exceptions import ErrorKind, IdeaBoardError

__all__: list[str] = [
    "BlankFieldError",
    "CapabilityDeniedError",
    "ErrorKind",
    "IdeaBoardError",
    "InvalidStatusTransitionError",
    "NoActiveParticipantError",
    "NotFoundError",
    "ParticipantNotFoundError",
    "PermissionDeniedError",
    "ProposalNotFoundError",
    "TopTierRequiredError",
    "UnknownValueError",
    "ValidationError",
]
