"""Identifier generator port.

Entity ids are opaque strings with a readable prefix ("user", "idea",
"c", "prj"). Tests inject a deterministic generator.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Protocol for generating fresh unique entity ids."""

    @abstractmethod
    def new_id(self, prefix: str) -> str:
        """Generate a new id.

        Args:
            prefix: Entity prefix, e.g. "idea".

        Returns:
            A string id unique within the store, starting with prefix + "_".
        """
        ...
