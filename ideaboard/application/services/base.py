"""Service logging mixin.

Services that run user intents bind their class name once and derive an
operation-scoped logger per intent, carrying the current correlation id.

Usage:
    class MyService(LoggingMixin):
        def __init__(self) -> None:
            self._init_logger()

        def do_something(self, proposal_id: str) -> None:
            log = self._log_operation("do_something", proposal_id=proposal_id)
            log.info("operation_started")
"""

import structlog

from ideaboard.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing a service-bound structlog logger.

    Attributes:
        _log: Logger bound with ``service`` and ``component``.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "board") -> None:
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Return a logger bound with the operation name and correlation id."""
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
