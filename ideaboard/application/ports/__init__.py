"""Application ports (interfaces) for IdeaBoard.

Ports define the contracts the application layer depends on;
infrastructure adapters implement them.
"""

from ideaboard.application.ports.clock import ClockProtocol
from ideaboard.application.ports.id_generator import IdGeneratorProtocol
from ideaboard.application.ports.key_value_store import KeyValueStoreProtocol

__all__: list[str] = [
    "ClockProtocol",
    "IdGeneratorProtocol",
    "KeyValueStoreProtocol",
]
