"""HTTP middleware for the votingflow API."""

from votingflow.api.middleware.logging_middleware import (
    CORRELATION_HEADER,
    LoggingMiddleware,
)

__all__: list[str] = ["CORRELATION_HEADER", "LoggingMiddleware"]
