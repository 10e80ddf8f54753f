"""Request logging middleware.

For every HTTP request this middleware binds a correlation id (taken
from ``X-Correlation-ID`` or freshly generated), logs when the request
starts and how it ended, counts it in ``http_requests_total`` by route
template and echoes the correlation id back on the response.
"""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from votingflow.infrastructure.monitoring.metrics import get_metrics_collector
from votingflow.infrastructure.observability.correlation import (
    generate_correlation_id,
    set_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"
UNMATCHED_ENDPOINT = "unmatched"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _endpoint_label(request: Request) -> str:
    # Route template, never the raw path: paths can carry voter identities
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ENDPOINT


class LoggingMiddleware(BaseHTTPMiddleware):
    """Correlation id binding, request logs and request counting."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        set_correlation_id(correlation_id)
        path = request.url.path

        log = structlog.get_logger().bind(
            correlation_id=correlation_id, method=request.method, path=path
        )
        log.info("request_started")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                duration_ms=_elapsed_ms(started),
                error_type=type(exc).__name__,
            )
            raise

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        get_metrics_collector().increment_requests(
            method=request.method,
            endpoint=_endpoint_label(request),
            status=str(response.status_code),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
