"""Prometheus scrape endpoint for the election counters."""

from fastapi import APIRouter, Response

from votingflow.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    generate_metrics,
)

router = APIRouter(prefix="/v1", tags=["metrics"])


@router.get(
    "/metrics",
    response_class=Response,
    summary="Election counters in Prometheus text format",
    responses={200: {"content": {METRICS_CONTENT_TYPE: {}}}},
)
async def get_metrics() -> Response:
    return Response(content=generate_metrics(), media_type=METRICS_CONTENT_TYPE)
