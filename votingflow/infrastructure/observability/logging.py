"""structlog setup for the election host.

Two renderings share one processor chain:

- production: one JSON object per line, for log shippers
- development: colored key/value console output

Every entry carries ``level``, an ISO ``timestamp`` and, while serving
a request, ``correlation_id``. The minimum level comes from
``LOG_LEVEL`` (default ``INFO``); unknown names fall back to ``INFO``.
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from votingflow.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _renderer(environment: str) -> Processor:
    if environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_structlog(environment: str = "production") -> None:
    """Install the structlog configuration for this process.

    Call once at startup, before the first logger is bound.

    Args:
        environment: "production" for JSON lines, anything else for
            console output.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _renderer(environment),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_env()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
