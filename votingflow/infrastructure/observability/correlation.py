"""Request correlation ids.

A correlation id ties together every log line produced while serving
one election call. It lives in a contextvar so each asyncio task sees
its own value.

The HTTP middleware sets it from ``X-Correlation-ID`` (or a fresh
UUID4); services read it through ``get_correlation_id``; the structlog
pipeline stamps it on every entry via ``correlation_id_processor``.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# "" means no id bound for this context
_current_correlation_id: ContextVar[str] = ContextVar(
    "votingflow_correlation_id", default=""
)


def generate_correlation_id() -> str:
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the id bound to the current context, or "" if none."""
    return _current_correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _current_correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor stamping the bound correlation id, if any."""
    correlation_id = _current_correlation_id.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
