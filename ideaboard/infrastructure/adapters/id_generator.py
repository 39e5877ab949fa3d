"""Random entity id generator."""

from __future__ import annotations

from uuid import uuid4

from ideaboard.application.ports.id_generator import IdGeneratorProtocol


class UuidIdGenerator(IdGeneratorProtocol):
    """Generates ids of the form ``<prefix>_<12 hex chars>``."""

    def __init__(self, length: int = 12) -> None:
        if not 8 <= length <= 32:
            raise ValueError(f"length must be between 8 and 32, got {length}")
        self._length = length

    def new_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid4().hex[: self._length]}"
