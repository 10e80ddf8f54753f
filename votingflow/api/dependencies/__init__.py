"""FastAPI dependencies for the votingflow API."""
