"""Stateless domain services: authorization policy and workflow table."""

from ideaboard.domain.services.authorization_policy import (
    DEFAULT_AUTHORIZATION_POLICY,
    DEFAULT_ROLE_CAPABILITIES,
    DEFAULT_TOP_TIER_ROLES,
    AuthorizationPolicy,
    Capability,
)
from ideaboard.domain.services.status_workflow import (
    VALID_TRANSITIONS,
    can_transition,
    is_terminal,
    validate_transition,
)

__all__: list[str] = [
    "DEFAULT_AUTHORIZATION_POLICY",
    "DEFAULT_ROLE_CAPABILITIES",
    "DEFAULT_TOP_TIER_ROLES",
    "VALID_TRANSITIONS",
    "AuthorizationPolicy",
    "Capability",
    "can_transition",
    "is_terminal",
    "validate_transition",
]
