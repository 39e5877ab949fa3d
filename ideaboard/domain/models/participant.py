"""Participant domain model.

This module defines the registered actors of the board:
- Role: Named permission tier mapped to capabilities by the policy
- Participant: Immutable record created at registration

Invariants:
- Participants are never deleted or edited after registration
- Role labels are self-assigned; they drive the permission model only
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ideaboard.domain.errors import UnknownValueError


class Role(str, Enum):
    """Permission tier of a participant.

    New roles are added here and given a row in the authorization table;
    mutation call sites never branch on the role value.
    """

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: str | Role) -> Role:
        """Parse a raw role label.

        Args:
            value: Role value such as "manager" (case-insensitive).

        Returns:
            The matching Role.

        Raises:
            UnknownValueError: If the label is not a known role.
        """
        if isinstance(value, Role):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownValueError("role", value) from None


@dataclass(frozen=True, eq=True)
class Participant:
    """A registered actor with a role and optional department.

    Attributes:
        participant_id: Opaque unique identifier.
        name: Display name (non-blank).
        role: Permission tier.
        department: Optional department label.
    """

    participant_id: str
    name: str
    role: Role
    department: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        """Validate participant fields after initialization.

        Raises:
            ValueError: If id or name is blank.
        """
        if not self.participant_id:
            raise ValueError("participant_id must not be empty")
        if not self.name.strip():
            raise ValueError("name must not be blank")
