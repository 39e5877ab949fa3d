"""System clock adapter."""

from datetime import datetime, timezone

from ideaboard.application.ports.clock import ClockProtocol


class SystemClock(ClockProtocol):
    """Clock reading the host's wall time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
