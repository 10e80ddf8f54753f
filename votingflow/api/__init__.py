"""HTTP API layer for votingflow (FastAPI)."""
