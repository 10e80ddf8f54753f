"""Liveness endpoint."""

from fastapi import APIRouter

from votingflow.api.models.health import HealthResponse

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    # The election is in-process state; if the app answers, it is alive
    return HealthResponse(status="healthy")
