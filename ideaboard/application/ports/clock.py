"""Clock port - interface for timestamp provisioning.

All services that need timestamps inject a ClockProtocol implementation
instead of calling datetime.now() directly, so that tests can control
creation times (sort order depends on them).

For production:
    Use SystemClock from ideaboard/infrastructure/adapters/

For testing:
    Use FakeClock from tests/helpers/fake_clock.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class ClockProtocol(ABC):
    """Abstract interface for the board clock."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time.

        Returns:
            Current timezone-aware datetime in UTC.
        """
        ...
