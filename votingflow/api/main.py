"""FastAPI application for the votingflow election host.

Run with:
    uvicorn votingflow.api.main:app
"""

from fastapi import FastAPI

from votingflow import __version__
from votingflow.api.middleware.logging_middleware import LoggingMiddleware
from votingflow.api.routes import election_router, health_router, metrics_router
from votingflow.bootstrap.election import get_election_config
from votingflow.bootstrap.logging import configure_logging

configure_logging(get_election_config())

app = FastAPI(
    title="votingflow Election API",
    description="Permissioned single-election voting workflow",
    version=__version__,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(metrics_router)
app.include_router(election_router)
