"""Structured logging shared by application services.

A service mixes in ``LoggingMixin``, calls ``_init_logger()`` once its
ports are stored, and asks ``_log_operation()`` for a logger scoped to
each call:

    log = self._log_operation("vote", caller=caller)
    log.info("vote_recorded", proposal_id=1)

Every entry then names the service class, its component, the operation
and the request correlation id.
"""

import structlog

from votingflow.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Gives a service a bound structlog logger.

    Attributes:
        _log: Logger bound with ``service`` and ``component``.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "ballot") -> None:
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Bind ``operation``, the correlation id and ``context`` for one call."""
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
