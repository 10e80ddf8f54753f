"""API routers for votingflow."""

from votingflow.api.routes.election import router as election_router
from votingflow.api.routes.health import router as health_router
from votingflow.api.routes.metrics import router as metrics_router

__all__: list[str] = ["election_router", "health_router", "metrics_router"]
