"""Authorization policy domain service.

This module maps roles to capability sets. The mapping is an explicit
table keyed by Role; callers only ever ask "can role R exercise capability
X?" or "is role R top tier?" and never branch on a role value themselves.

Default table:
- employee: submit, vote, comment
- manager: submit, vote, comment, moderate, convert
- admin: submit, vote, comment, moderate, convert (+ top tier for delete)

Adding a role means adding a Role member and a row here; mutation call
sites stay untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from structlog import get_logger

from ideaboard.domain.errors import CapabilityDeniedError, TopTierRequiredError
from ideaboard.domain.models.participant import Participant, Role

logger = get_logger(__name__)


class Capability(str, Enum):
    """A single permitted action."""

    SUBMIT = "submit"
    VOTE = "vote"
    COMMENT = "comment"
    MODERATE = "moderate"  # change status
    CONVERT = "convert"  # convert to project


_CONTRIBUTOR: frozenset[Capability] = frozenset(
    {Capability.SUBMIT, Capability.VOTE, Capability.COMMENT}
)
_REVIEWER: frozenset[Capability] = frozenset(Capability)

DEFAULT_ROLE_CAPABILITIES: Mapping[Role, frozenset[Capability]] = {
    Role.EMPLOYEE: _CONTRIBUTOR,
    Role.MANAGER: _REVIEWER,
    Role.ADMIN: _REVIEWER,
}

DEFAULT_TOP_TIER_ROLES: frozenset[Role] = frozenset({Role.ADMIN})


@dataclass(frozen=True)
class AuthorizationPolicy:
    """Table-driven role to capability lookup.

    Attributes:
        role_capabilities: Capability set per role. A role missing from the
            table has no capabilities.
        top_tier_roles: Roles allowed to perform top-tier actions (delete).

    Example:
        >>> policy = AuthorizationPolicy()
        >>> policy.can(Role.EMPLOYEE, Capability.MODERATE)
        False
        >>> policy.is_top_tier(Role.ADMIN)
        True
    """

    role_capabilities: Mapping[Role, frozenset[Capability]] = field(
        default_factory=lambda: dict(DEFAULT_ROLE_CAPABILITIES)
    )
    top_tier_roles: frozenset[Role] = DEFAULT_TOP_TIER_ROLES

    def capabilities_for(self, role: Role) -> frozenset[Capability]:
        """Return the capability set granted to a role."""
        return self.role_capabilities.get(role, frozenset())

    def can(self, role: Role, capability: Capability) -> bool:
        """Check whether a role may exercise a capability."""
        return capability in self.capabilities_for(role)

    def is_top_tier(self, role: Role) -> bool:
        """Check whether a role belongs to the top privilege tier."""
        return role in self.top_tier_roles

    def require(self, participant: Participant, capability: Capability) -> None:
        """Ensure the participant's role grants a capability.

        Raises:
            CapabilityDeniedError: If the capability is not granted.
        """
        if not self.can(participant.role, capability):
            logger.warning(
                "capability_denied",
                participant_id=participant.participant_id,
                role=participant.role.value,
                capability=capability.value,
            )
            raise CapabilityDeniedError(
                participant.participant_id,
                participant.role.value,
                capability.value,
            )

    def require_top_tier(self, participant: Participant, action: str) -> None:
        """Ensure the participant's role is top tier.

        Raises:
            TopTierRequiredError: If the role is not top tier.
        """
        if not self.is_top_tier(participant.role):
            logger.warning(
                "top_tier_required",
                participant_id=participant.participant_id,
                role=participant.role.value,
                action=action,
            )
            raise TopTierRequiredError(
                participant.participant_id, participant.role.value, action
            )


DEFAULT_AUTHORIZATION_POLICY = AuthorizationPolicy()
